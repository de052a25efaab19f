"""Line/offset bookkeeping shared by the locator and the mutators.

Lines are split on ``\\n`` only; each line accounts for one terminator
character when walking offsets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablero.errors import CellIndexError

if TYPE_CHECKING:
    from tablero.nodes import TableInfo


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def locate_line(lines: list[str], offset: int) -> tuple[int, int]:
    """Find the line containing ``offset``.

    Returns:
        ``(line_index, line_start_offset)``. Offsets past the end of the
        text resolve to the last line, negative offsets to the first.
    """
    pos = 0
    for index, line in enumerate(lines):
        length = len(line) + 1
        if pos + length > offset:
            return index, pos
        pos += length
    last = len(lines) - 1
    return last, pos - (len(lines[last]) + 1)


def block_line_span(text: str, table: TableInfo, block_index: int) -> tuple[int, int]:
    """Absolute ``[start, end)`` of the ``block_index``-th line of a table block.

    Walks from the block's first line, so the lookup is a direct line index
    rather than an estimate from byte lengths.
    """
    if not 0 <= block_index < table.line_count:
        raise CellIndexError("line", block_index, table.line_count)
    start = table.start
    for _ in range(block_index):
        start = text.index("\n", start) + 1
    end = text.find("\n", start)
    if end == -1:
        end = len(text)
    return start, end
