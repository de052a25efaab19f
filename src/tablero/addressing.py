"""Cell addressing: cursor offset <-> (row, col), and Tab-style navigation.

Navigation stops at the grid edges. Moving past the last cell of the last
row returns None rather than growing the table.
"""

from __future__ import annotations

from tablero.nodes import CellAddress, CellPosition, TableInfo


def find_cell_at_cursor(table: TableInfo, cursor_pos: int) -> CellAddress | None:
    """Map a cursor offset to the cell holding it.

    Row and cell spans are inclusive at both ends, so a cursor resting on a
    closing pipe belongs to the cell before it. A cursor in a row but
    outside every cell span snaps to the first cell starting after it, or
    to the row's last cell when it is past all of them.

    Returns None when no row contains the cursor (outside the table or on
    the alignment line) or when the containing row has no cells.
    """
    for row_index, row in enumerate(table.rows):
        if not row.start <= cursor_pos <= row.end:
            continue
        if not row.cells:
            return None

        for col_index, cell in enumerate(row.cells):
            if cell.start <= cursor_pos <= cell.end:
                return CellAddress(row=row_index, col=col_index)

        for col_index, cell in enumerate(row.cells):
            if cursor_pos < cell.start:
                return CellAddress(row=row_index, col=col_index)
        return CellAddress(row=row_index, col=len(row.cells) - 1)
    return None


def get_next_cell(table: TableInfo, row: int, col: int) -> CellPosition | None:
    """Cell after (row, col): next column, else first cell of the next row."""
    cells = table.rows[row].cells
    if col + 1 < len(cells):
        return CellPosition(row=row, col=col + 1, pos=cells[col + 1].start)

    for next_row in range(row + 1, len(table.rows)):
        next_cells = table.rows[next_row].cells
        if next_cells:
            return CellPosition(row=next_row, col=0, pos=next_cells[0].start)
    return None


def get_previous_cell(table: TableInfo, row: int, col: int) -> CellPosition | None:
    """Cell before (row, col): previous column, else last cell of the previous row."""
    cells = table.rows[row].cells
    if 0 < col <= len(cells):
        return CellPosition(row=row, col=col - 1, pos=cells[col - 1].start)

    for prev_row in range(row - 1, -1, -1):
        prev_cells = table.rows[prev_row].cells
        if prev_cells:
            last = len(prev_cells) - 1
            return CellPosition(row=prev_row, col=last, pos=prev_cells[last].start)
    return None
