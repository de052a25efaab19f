"""Column mutators: insert a column, cycle a column's alignment marker."""

from __future__ import annotations

from tablero.config import get_edit_config
from tablero.editing.buffer import Insertion, apply_insertions, check_index, replace_span
from tablero.nodes import EditResult, TableCell, TableInfo
from tablero.parsing.classify import segment_alignment
from tablero.parsing.locator import alignment_segments
from tablero.utils.logger import get_logger

logger = get_logger(__name__)


def _insert_after(text: str, cell: TableCell, filler: str) -> tuple[Insertion, int]:
    """Insertion adding a cell holding ``filler`` right after ``cell``.

    Returns the insertion and the distance from its start to the new
    cell's first character.
    """
    if text[cell.end : cell.end + 1] == "|":
        return Insertion(cell.end + 1, filler + "|"), 0
    # Boundary cell without a closing pipe
    return Insertion(cell.end, "|" + filler + "|"), 1


def add_column_after(text: str, table: TableInfo, col_index: int) -> EditResult:
    """Insert a blank column after ``col_index`` in every row.

    The alignment line, when present, gets a dash segment at the same
    position. It is found by its line index in the block. Rows shorter
    than ``col_index + 1`` get the new cell after their last cell.

    The cursor lands inside the new cell of the first row.
    """
    check_index("column", col_index, table.column_count)
    width = get_edit_config().new_column_width

    insertions: list[Insertion] = []
    leads: list[int] = []

    for row_index, row in enumerate(table.rows):
        if not row.cells:
            continue
        if col_index >= len(row.cells):
            logger.debug("Row %d has %d cells, appending new column at its end", row_index, len(row.cells))
        cell = row.cells[min(col_index, len(row.cells) - 1)]
        insertion, lead = _insert_after(text, cell, " " * (width + 2))
        insertions.append(insertion)
        leads.append(lead)

    segments = alignment_segments(text, table)
    if segments:
        segment = segments[min(col_index, len(segments) - 1)]
        insertion, _ = _insert_after(text, segment, " " + "-" * width + " ")
        insertions.append(insertion)

    new_text, placed = apply_insertions(text, insertions)
    return EditResult(text=new_text, cursor_pos=placed[0] + leads[0] + 1)


def _next_marker(marker: str) -> str:
    """Cycle left -> center -> right -> left, keeping the dash run."""
    dashes = marker.strip(":")
    alignment = segment_alignment(marker)
    if alignment is None or alignment == "left":
        return f":{dashes}:"
    if alignment == "center":
        return f"{dashes}:"
    return dashes


def toggle_column_alignment(text: str, table: TableInfo, col_index: int) -> EditResult:
    """Cycle the alignment marker of one column.

    Only the trimmed marker of that column's segment is rewritten; padding
    and every other segment stay byte-for-byte. Returns the text unchanged
    when the table has no alignment row or the line has no such segment.
    """
    segments = alignment_segments(text, table)
    if not 0 <= col_index < len(segments):
        return EditResult(text=text)

    segment = segments[col_index]
    raw = text[segment.start : segment.end]
    marker_start = segment.start + len(raw) - len(raw.lstrip())
    marker_end = marker_start + len(segment.content)

    return EditResult(text=replace_span(text, marker_start, marker_end, _next_marker(segment.content)))
