"""Table parsing: line classifiers, the row/cell parser and the locator."""

from tablero.parsing.classify import (
    is_alignment_row,
    is_in_table,
    is_table_row,
    segment_alignment,
)
from tablero.parsing.locator import find_table_at_cursor, get_column_alignments
from tablero.parsing.row import parse_table_row

__all__ = [
    "find_table_at_cursor",
    "get_column_alignments",
    "is_alignment_row",
    "is_in_table",
    "is_table_row",
    "parse_table_row",
    "segment_alignment",
]
