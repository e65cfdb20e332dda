from __future__ import annotations

import logging
import math
import os
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional, Sequence

from boardgame_search.dtos.game_dtos import GameRecord
from boardgame_search.errors import DatasetNotFoundError
from boardgame_search.repositories._files import iter_data_lines

logger = logging.getLogger(__name__)

DATASET_DELIMITER = ";"
REQUIRED_COLUMNS = 14
EASY_COMPLEXITY_MAX = 2.0
MEDIUM_COMPLEXITY_MAX = 3.5

PACKAGE_DIR = Path(__file__).resolve().parent.parent


def dataset_candidate_paths(
    data_dir: str,
    filename: str,
    cwd: Optional[Path] = None,
) -> List[Path]:
    """
    Candidate dataset locations in priority order: the configured data
    directory, a parent-relative fallback for runtimes that start two levels
    down, and a fallback next to the package sources.
    """
    cwd = cwd or Path(os.getcwd())
    primary = Path(data_dir)
    if not primary.is_absolute():
        primary = cwd / primary
    return [
        primary / filename,
        cwd / ".." / ".." / "data" / filename,
        PACKAGE_DIR / "data" / filename,
    ]


def resolve_dataset_path(candidates: Sequence[Path]) -> Path:
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    tried = ", ".join(str(c) for c in candidates)
    raise DatasetNotFoundError(f"Board game dataset not found. Tried: {tried}")


def _to_int(value: str) -> int:
    # Decimal values are truncated toward zero.
    return int(_to_float(value))


def _to_float(value: str) -> float:
    try:
        number = float(value.strip().replace(",", "."))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _one_decimal(value: float) -> str:
    # Ties round up, e.g. 6.25 -> "6.3".
    try:
        return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return f"{value:.1f}"


def complexity_label(complexity: float) -> str:
    if complexity <= EASY_COMPLEXITY_MAX:
        return "easy"
    if complexity <= MEDIUM_COMPLEXITY_MAX:
        return "medium"
    return "hard"


def player_count_phrase(min_players: int, max_players: int) -> str:
    if min_players == max_players:
        return f"{min_players} player"
    return f"{min_players}-{max_players} players"


def build_searchable_text(
    name: str,
    mechanics: str,
    domains: str,
    year_published: int,
    min_players: int,
    max_players: int,
    play_time: int,
    complexity_average: float,
    rating_average: float,
    min_age: int,
) -> str:
    parts: List[str] = [
        name.strip(),
        mechanics.lower(),
        domains.lower(),
        f"{year_published}",
        player_count_phrase(min_players, max_players),
        f"{play_time} minutes",
        f"complexity {complexity_label(complexity_average)}",
        f"rating {_one_decimal(rating_average)}",
        f"age {min_age}+",
    ]
    return " ".join(parts)


def parse_game_row(columns: Sequence[str]) -> GameRecord:
    """
    Build a GameRecord from the 14 dataset columns. Unparseable numbers
    become zero instead of rejecting the row.
    """
    year_published = _to_int(columns[2])
    min_players = _to_int(columns[3])
    max_players = _to_int(columns[4])
    play_time = _to_int(columns[5])
    min_age = _to_int(columns[6])
    rating_average = _to_float(columns[8])
    complexity_average = _to_float(columns[10])
    name = columns[1].strip()
    mechanics = columns[12].strip()
    domains = columns[13].strip()

    return GameRecord(
        id=columns[0].strip(),
        name=name,
        year_published=year_published,
        min_players=min_players,
        max_players=max_players,
        play_time=play_time,
        min_age=min_age,
        users_rated=_to_int(columns[7]),
        rating_average=rating_average,
        bgg_rank=_to_int(columns[9]),
        complexity_average=complexity_average,
        owned_users=_to_int(columns[11]),
        mechanics=mechanics,
        domains=domains,
        searchable_text=build_searchable_text(
            name=name,
            mechanics=mechanics,
            domains=domains,
            year_published=year_published,
            min_players=min_players,
            max_players=max_players,
            play_time=play_time,
            complexity_average=complexity_average,
            rating_average=rating_average,
            min_age=min_age,
        ),
    )


def load_games(path: Path) -> List[GameRecord]:
    """
    Parse the semicolon-delimited dataset into records, in file order.
    Rows with fewer than 14 columns are logged and skipped.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetNotFoundError(f"Board game dataset not found: {path}")

    logger.info("Loading board games dataset from %s", path)
    games: List[GameRecord] = []
    skipped = 0
    for line_number, line in iter_data_lines(path):
        columns = line.split(DATASET_DELIMITER)
        if len(columns) < REQUIRED_COLUMNS:
            skipped += 1
            logger.warning(
                "Skipping line %d: expected %d columns, got %d (%s)",
                line_number,
                REQUIRED_COLUMNS,
                len(columns),
                line[:100],
            )
            continue
        games.append(parse_game_row(columns))

    logger.info("Loaded %d board games (%d rows skipped)", len(games), skipped)
    return games
