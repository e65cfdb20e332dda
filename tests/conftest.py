"""
Shared fixtures: small dataset and allow-list files written to tmp_path.
"""
from pathlib import Path

import pytest

from boardgame_search import create_app
from boardgame_search.services.cache_service import GameDataCache

DATASET_HEADER = (
    "ID;Name;Year Published;Min Players;Max Players;Play Time;Min Age;Users Rated;"
    "Rating Average;BGG Rank;Complexity Average;Owned Users;Mechanics;Domains"
)

SAMPLE_ROWS = [
    "101;Catan;1995;3;4;90;10;50000;7,2;15;2,2;60000;trading,negotiation;strategy,economic",
    "102;Pandemic;2008;2;4;45;8;100000;7,6;100;2,4;150000;Cooperative Game, Hand Management;Family Games, Strategy Games",
    "103;Codenames;2015;2;8;15;14;60000;7,6;90;1,3;80000;Team-Based Game, Deduction;Party Games",
    "104;Agricola;2007;1;5;150;12;70000;7,9;30;3,6;90000;Worker Placement, Resource Management;Strategy Games",
    "105;Dominion;2008;2;4;30;13;80000;7,6;95;2,4;100000;Deck Building, Card Drafting;Strategy Games",
    "106;Patience;1900;1;1;10;6;500;5,1;9000;1,0;900;Card Game;Abstract Games",
]

ALLOWLIST_ROWS = [
    "کاتان,Catan",
    "پندمیک,Pandemic",
    "کدنیمز,Codenames",
    "تیکت تو راید,Ticket to Ride",
    "تیکت تو راید اروپا,Ticket to Ride: Europe",
    ",Azul Summer Pavilion",
    "دومینیون,",
]


def _write_lines(path: Path, header: str, rows) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_dataset(tmp_path):
    """Factory writing a semicolon dataset file and returning its path."""
    def _make(rows=SAMPLE_ROWS, name="bgg_dataset.csv"):
        return _write_lines(tmp_path / "data" / name, DATASET_HEADER, rows)
    return _make


@pytest.fixture
def make_allowlist(tmp_path):
    """Factory writing a two-column allow-list file and returning its path."""
    def _make(rows=ALLOWLIST_ROWS, name="boardgame-template.csv"):
        return _write_lines(tmp_path / "data" / name, "persianName,englishName", rows)
    return _make


@pytest.fixture
def dataset_file(make_dataset):
    return make_dataset()


@pytest.fixture
def allowlist_file(make_allowlist):
    return make_allowlist()


@pytest.fixture
def cache(dataset_file, allowlist_file):
    return GameDataCache(dataset_candidates=[dataset_file], allowlist_path=allowlist_file)


@pytest.fixture
def app(dataset_file, allowlist_file):
    app = create_app(
        test_config={
            "TESTING": True,
            "DATA_DIR": str(dataset_file.parent),
            "DATASET_FILENAME": dataset_file.name,
            "ALLOWLIST_PATH": str(allowlist_file),
        }
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
