"""Table locator.

Expands outward from the cursor's line to the maximal run of table-shaped
lines and assembles the rows and the alignment row index.

The block is delimited only by the row classifier, so a table with no blank
lines around it is still found, and two tables separated by any
non-table line are never merged.
"""

from __future__ import annotations

from tablero.nodes import TableCell, TableInfo, TableRow
from tablero.parsing.classify import (
    Alignment,
    is_alignment_row,
    is_table_row,
    segment_alignment,
)
from tablero.parsing.lines import block_line_span, locate_line, split_lines
from tablero.parsing.row import parse_table_row


def find_table_at_cursor(text: str, cursor_pos: int) -> TableInfo | None:
    """Locate the table block around ``cursor_pos``.

    Returns None when the cursor's line is not table-shaped.

    The first alignment-shaped line of the block becomes the alignment row
    and is left out of ``rows``; any later alignment-shaped line is kept as
    an ordinary row so a table has at most one alignment row.

    Example:
        >>> table = find_table_at_cursor("| a |\\n|---|\\n| 1 |", 0)
        >>> len(table.rows), table.alignment_row_index
        (2, 1)
    """
    lines = split_lines(text)
    line_index, line_start = locate_line(lines, cursor_pos)
    if not is_table_row(lines[line_index]):
        return None

    first_line = line_index
    while first_line > 0 and is_table_row(lines[first_line - 1]):
        first_line -= 1

    last_line = line_index
    while last_line + 1 < len(lines) and is_table_row(lines[last_line + 1]):
        last_line += 1

    table_start = line_start
    for line in lines[first_line:line_index]:
        table_start -= len(line) + 1

    rows: list[TableRow] = []
    alignment_row_index: int | None = None
    pos = table_start

    for block_index, line in enumerate(lines[first_line : last_line + 1]):
        row_start = pos
        row_end = pos + len(line)
        pos = row_end + 1

        if alignment_row_index is None and is_alignment_row(line):
            alignment_row_index = block_index
            continue

        rows.append(TableRow(cells=parse_table_row(line, row_start), start=row_start, end=row_end))

    return TableInfo(
        rows=tuple(rows),
        alignment_row_index=alignment_row_index,
        start=table_start,
        end=pos - 1,
    )


def get_column_alignments(text: str, table: TableInfo) -> tuple[Alignment | None, ...]:
    """Per-column alignment declared by the table's alignment line.

    Returns an empty tuple when the table has no alignment row.
    """
    return tuple(segment_alignment(segment.content) for segment in alignment_segments(text, table))


def alignment_segments(text: str, table: TableInfo) -> tuple[TableCell, ...]:
    """Non-blank segments of the alignment line, one per declared column."""
    if table.alignment_row_index is None:
        return ()
    start, end = block_line_span(text, table, table.alignment_row_index)
    return tuple(cell for cell in parse_table_row(text[start:end], start) if cell.content)
