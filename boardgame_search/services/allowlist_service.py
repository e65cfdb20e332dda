from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from boardgame_search.dtos.game_dtos import AllowListEntry
from boardgame_search.dtos.search_dtos import NameValidationResult
from boardgame_search.services.cache_service import GameDataCache

logger = logging.getLogger(__name__)


def _names(entry: AllowListEntry) -> Iterable[str]:
    # Empty names would match every input as substrings.
    for name in (entry.english_name, entry.persian_name):
        lowered = name.lower()
        if lowered:
            yield lowered


class AllowListService:
    """
    Checks candidate game names against the canonical allow-list.
    """

    def __init__(self, cache: GameDataCache) -> None:
        self.cache = cache

    def validate(self, name: str) -> Optional[AllowListEntry]:
        """
        Find the allow-list entry for `name`.

        An exact (case-insensitive) match on either name wins. Otherwise the
        first entry whose name contains the input, or is contained in it, is
        returned. When several entries overlap this way the first in file
        order wins, even if a later one is the intended game; a blank name
        is contained in every name and so returns the first entry.
        """
        normalized = name.lower().strip()
        entries = self.cache.allowlist()
        for entry in entries:
            if any(candidate == normalized for candidate in _names(entry)):
                return entry

        for entry in entries:
            if any(normalized in candidate or candidate in normalized for candidate in _names(entry)):
                logger.debug("Partial allow-list match for %r: %s", name, entry)
                return entry

        return None

    def check_name(self, name: str) -> Dict[str, Any]:
        entry = self.validate(name)
        if entry is None:
            return NameValidationResult(exists=False).model_dump(exclude_none=True)
        return NameValidationResult(
            exists=True,
            persianName=entry.persian_name or None,
            englishName=entry.english_name or None,
        ).model_dump(exclude_none=True)
