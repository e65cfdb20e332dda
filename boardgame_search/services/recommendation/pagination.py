from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, per_page: int) -> Tuple[List[T], int, int]:
    """
    Slice one page out of `items`. Page and page size are clamped to at
    least 1; a page past the end is empty.
    """
    page = max(page, 1)
    per_page = max(per_page, 1)
    offset = (page - 1) * per_page
    return list(items[offset : offset + per_page]), page, per_page
