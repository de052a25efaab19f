"""Row/cell parsing for pipe tables.

Splits a single line into cells with absolute offsets. The parser is purely
line-local: it does not know which line is the header or the separator.
"""

from __future__ import annotations

from tablero.nodes import TableCell


def parse_table_row(line: str, row_start: int) -> tuple[TableCell, ...]:
    """Parse a table line into cells.

    Every pipe closes the open cell and opens the next one. A line that does
    not start with a pipe opens its first cell at column 0, and non-blank
    text after the last pipe becomes a final cell running to end of line.

    Args:
        line: The line text, without terminator
        row_start: Absolute offset of the line's first character

    Returns:
        Cells in order. Spans are untrimmed, ``content`` is trimmed.

    Example:
        >>> [c.content for c in parse_table_row("| a | b |", 0)]
        ['a', 'b']
        >>> parse_table_row("| a | b |", 0)[1]
        TableCell(content='b', start=5, end=8)
    """
    cells: list[TableCell] = []
    in_cell = False
    cell_start = 0

    stripped = line.lstrip()
    if stripped and not stripped.startswith("|"):
        in_cell = True

    for i, char in enumerate(line):
        if char != "|":
            continue
        if in_cell:
            cells.append(
                TableCell(
                    content=line[cell_start:i].strip(),
                    start=row_start + cell_start,
                    end=row_start + i,
                )
            )
        in_cell = True
        cell_start = i + 1

    # Last cell when the line lacks a trailing pipe
    if in_cell and line[cell_start:].strip():
        cells.append(
            TableCell(
                content=line[cell_start:].strip(),
                start=row_start + cell_start,
                end=row_start + len(line),
            )
        )

    return tuple(cells)
