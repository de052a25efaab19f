"""Row mutators: insert a blank row above/below, delete a row."""

from __future__ import annotations

from tablero.config import get_edit_config
from tablero.editing.buffer import Insertion, apply_insertions, check_index, replace_span
from tablero.nodes import EditResult, TableInfo


def _blank_row(cell_count: int) -> str:
    """Line for a new row with ``cell_count`` cells.

    Only the first cell is padded unless ``pad_all_new_cells`` is set; the
    remaining cells come out zero-width (``|          |||``).
    """
    config = get_edit_config()
    placeholder = " " * config.placeholder_width
    cell_count = max(cell_count, 1)
    if config.pad_all_new_cells:
        return "|" + (placeholder + "|") * cell_count
    return "|" + placeholder + "|" * cell_count


def _cursor_in_placeholder(row_start: int) -> int:
    # One character into the first cell's padding
    return row_start + 1 + min(1, get_edit_config().placeholder_width)


def add_row_below(text: str, table: TableInfo, row_index: int) -> EditResult:
    """Insert a blank row after ``table.rows[row_index]``."""
    check_index("row", row_index, len(table.rows))
    row = table.rows[row_index]
    new_row = _blank_row(len(row.cells))

    new_text, _ = apply_insertions(text, [Insertion(row.end, "\n" + new_row)])
    return EditResult(text=new_text, cursor_pos=_cursor_in_placeholder(row.end + 1))


def add_row_above(text: str, table: TableInfo, row_index: int) -> EditResult:
    """Insert a blank row before ``table.rows[row_index]``."""
    check_index("row", row_index, len(table.rows))
    row = table.rows[row_index]
    new_row = _blank_row(len(row.cells))

    new_text, _ = apply_insertions(text, [Insertion(row.start, new_row + "\n")])
    return EditResult(text=new_text, cursor_pos=_cursor_in_placeholder(row.start))


def delete_row(text: str, table: TableInfo, row_index: int) -> EditResult:
    """Remove ``table.rows[row_index]`` and one adjacent newline.

    The newline after the row goes, except when the row closes the block;
    then the newline before it goes so the block does not leave a blank
    line behind. No minimum row count is enforced here.
    """
    check_index("row", row_index, len(table.rows))
    row = table.rows[row_index]

    if row.end == table.end and row.start > 0:
        start, end = row.start - 1, row.end
    else:
        start, end = row.start, min(row.end + 1, len(text))

    return EditResult(text=replace_span(text, start, end, ""), cursor_pos=start)
