"""
Repository layer for the on-disk data files (game dataset and allow-list).
"""

from .allowlist_repository import load_allowlist
from .game_repository import (
    dataset_candidate_paths,
    load_games,
    resolve_dataset_path,
)

__all__ = [
    "dataset_candidate_paths",
    "load_allowlist",
    "load_games",
    "resolve_dataset_path",
]
