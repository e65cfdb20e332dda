"""
Load-once cache tests.
"""
import threading
import time

import numpy as np
import pytest

from boardgame_search.errors import DatasetNotFoundError
from boardgame_search.repositories import load_allowlist, load_games
from boardgame_search.services import cache_service
from boardgame_search.services.cache_service import GameDataCache
from boardgame_search.services.embedding_service import EMBEDDING_DIMENSION, embed_text


@pytest.fixture
def counted_loads(monkeypatch):
    calls = {"games": 0, "allowlist": 0}

    def slow_load_games(path):
        calls["games"] += 1
        time.sleep(0.05)
        return load_games(path)

    def slow_load_allowlist(path):
        calls["allowlist"] += 1
        time.sleep(0.05)
        return load_allowlist(path)

    monkeypatch.setattr(cache_service, "load_games", slow_load_games)
    monkeypatch.setattr(cache_service, "load_allowlist", slow_load_allowlist)
    return calls


def test_nothing_is_loaded_until_first_use(cache):
    assert not cache.dataset_loaded
    assert not cache.allowlist_loaded


def test_dataset_is_loaded_once(cache, counted_loads):
    first = cache.games()
    second = cache.games()
    cache.index()
    cache.vectors()

    assert first is second
    assert counted_loads["games"] == 1
    assert cache.dataset_loaded
    assert not cache.allowlist_loaded


def test_vectors_match_searchable_text(cache):
    games = cache.games()
    vectors = cache.vectors()
    assert vectors.shape == (len(games), EMBEDDING_DIMENSION)
    for game, vector in zip(games, vectors):
        assert np.array_equal(vector, embed_text(game.searchable_text))


def test_concurrent_first_use_loads_once(cache, counted_loads):
    barrier = threading.Barrier(8)
    indexes = []
    allowlists = []

    def worker():
        barrier.wait()
        indexes.append(cache.index())
        allowlists.append(cache.allowlist())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert counted_loads == {"games": 1, "allowlist": 1}
    assert len(indexes) == 8
    assert all(index is indexes[0] for index in indexes)
    assert all(entries is allowlists[0] for entries in allowlists)


def test_failed_load_is_not_cached(tmp_path, allowlist_file):
    missing = tmp_path / "missing.csv"
    cache = GameDataCache(dataset_candidates=[missing], allowlist_path=allowlist_file)

    with pytest.raises(DatasetNotFoundError):
        cache.games()
    assert not cache.dataset_loaded

    missing.write_text("header\n101;Catan;1995;3;4;90;10;50000;7,2;15;2,2;60000;trading;strategy\n")
    assert [game.name for game in cache.games()] == ["Catan"]


def test_fallback_candidate_is_used(tmp_path, dataset_file, allowlist_file):
    cache = GameDataCache(
        dataset_candidates=[tmp_path / "nowhere" / "bgg.csv", dataset_file],
        allowlist_path=allowlist_file,
    )
    assert len(cache.games()) == 6


def test_cached_tables_are_read_only(cache):
    games = cache.games()
    entries = cache.allowlist()

    assert isinstance(games, tuple)
    assert isinstance(entries, tuple)
    with pytest.raises(AttributeError):
        games.append(games[0])
    assert len(cache.games()) == 6
