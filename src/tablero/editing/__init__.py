"""Structural mutators.

Each mutator is a pure function ``(text, table, index) -> EditResult`` that
rebuilds the whole document text from a freshly located TableInfo.
"""

from tablero.editing.columns import add_column_after, toggle_column_alignment
from tablero.editing.rows import add_row_above, add_row_below, delete_row

__all__ = [
    "add_column_after",
    "add_row_above",
    "add_row_below",
    "delete_row",
    "toggle_column_alignment",
]
