from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from boardgame_search.dtos.game_dtos import AllowListEntry
from boardgame_search.errors import AllowListNotFoundError
from boardgame_search.repositories._files import iter_data_lines

logger = logging.getLogger(__name__)

ALLOWLIST_DELIMITER = ","


def load_allowlist(path: Path) -> List[AllowListEntry]:
    """
    Parse the two-column (persianName, englishName) allow-list file.
    Rows where both names are empty are dropped.
    """
    path = Path(path)
    if not path.is_file():
        raise AllowListNotFoundError(f"Allow-list file not found: {path}")

    logger.info("Loading allow-list from %s", path)
    entries: List[AllowListEntry] = []
    for _, line in iter_data_lines(path):
        fields = line.split(ALLOWLIST_DELIMITER)
        persian_name = fields[0].strip()
        english_name = fields[1].strip() if len(fields) > 1 else ""
        if not persian_name and not english_name:
            continue
        entries.append(AllowListEntry(persian_name=persian_name, english_name=english_name))

    logger.info("Loaded %d allow-list entries", len(entries))
    return entries
