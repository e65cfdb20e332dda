from __future__ import annotations

from pathlib import Path
from typing import Iterator, Tuple


def iter_data_lines(path: Path) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) for every non-blank line after the header.
    Line numbers are 1-based and refer to the physical file.
    """
    header_seen = False
    with open(path, encoding="utf-8-sig") as handle:
        for line_number, raw_line in enumerate(handle, start=1):
            line = raw_line.strip()
            if not line:
                continue
            if not header_seen:
                header_seen = True
                continue
            yield line_number, line
