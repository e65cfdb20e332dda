from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np

from boardgame_search.dtos.game_dtos import AllowListEntry, GameRecord
from boardgame_search.repositories import load_allowlist, load_games, resolve_dataset_path
from boardgame_search.services.embedding_service import EmbeddingService
from boardgame_search.services.recommendation.retrieval import SimilarityIndex

logger = logging.getLogger(__name__)


class GameDataCache:
    """
    Load-once holder for the game dataset, its embeddings and the allow-list.

    Each table is read from disk on first use only, guarded by its own lock
    so concurrent first callers share a single load. Once populated the
    tables are never reloaded; reads after that take no lock.
    """

    def __init__(
        self,
        dataset_candidates: Sequence[Path],
        allowlist_path: Path,
        embedding_service: Optional[EmbeddingService] = None,
    ) -> None:
        self._dataset_candidates = [Path(p) for p in dataset_candidates]
        self._allowlist_path = Path(allowlist_path)
        self.embedding_service = embedding_service or EmbeddingService()

        self._dataset_lock = threading.Lock()
        self._allowlist_lock = threading.Lock()
        self._games: Optional[Tuple[GameRecord, ...]] = None
        self._vectors: Optional[np.ndarray] = None
        self._index: Optional[SimilarityIndex] = None
        self._allowlist: Optional[Tuple[AllowListEntry, ...]] = None

    @property
    def dataset_loaded(self) -> bool:
        return self._index is not None

    @property
    def allowlist_loaded(self) -> bool:
        return self._allowlist is not None

    def _ensure_dataset(self) -> SimilarityIndex:
        index = self._index
        if index is not None:
            return index
        with self._dataset_lock:
            if self._index is None:
                path = resolve_dataset_path(self._dataset_candidates)
                games = tuple(load_games(path))
                vectors = self.embedding_service.get_embeddings(
                    (game.searchable_text for game in games), show_progress=True
                )
                self._games = games
                self._vectors = vectors
                self._index = SimilarityIndex(games, vectors, self.embedding_service)
                logger.info("Cached %d games with %d-dimensional embeddings", len(games), vectors.shape[1])
            else:
                logger.debug("Using cached games data and embeddings")
            return self._index

    def games(self) -> Tuple[GameRecord, ...]:
        self._ensure_dataset()
        return self._games

    def vectors(self) -> np.ndarray:
        self._ensure_dataset()
        return self._vectors

    def index(self) -> SimilarityIndex:
        return self._ensure_dataset()

    def allowlist(self) -> Tuple[AllowListEntry, ...]:
        entries = self._allowlist
        if entries is not None:
            return entries
        with self._allowlist_lock:
            if self._allowlist is None:
                self._allowlist = tuple(load_allowlist(self._allowlist_path))
            return self._allowlist
