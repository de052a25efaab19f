"""
tablero: structural editing of Markdown pipe tables

Treats the run of pipe-delimited lines around a cursor as an addressable
grid and edits it directly in the raw text: insert rows and columns, cycle
column alignment, delete rows and move between cells. Every call takes a
document snapshot plus a cursor offset and returns a new snapshot plus a
new cursor offset. Zero runtime dependencies.

Quick Start:
    >>> from tablero import find_table_at_cursor, find_cell_at_cursor, add_row_below
    >>> text = "| A | B |\\n|---|---|\\n| 1 | 2 |"
    >>> table = find_table_at_cursor(text, 2)
    >>> cell = find_cell_at_cursor(table, 2)
    >>> result = add_row_below(text, table, cell.row)
    >>> result.text.splitlines()[1]
    '|          ||'

    >>> # Or go through the command layer, as a keymap would
    >>> from tablero import TableCommand, run_table_command
    >>> run_table_command(text, 2, TableCommand.TOGGLE_ALIGNMENT).text.splitlines()[1]
    '|:---:|---|'
"""

from tablero.addressing import find_cell_at_cursor, get_next_cell, get_previous_cell
from tablero.commands import (
    COMMAND_PALETTE,
    CommandResult,
    CommandSpec,
    TableCommand,
    command_for_chord,
    run_table_command,
)
from tablero.config import (
    EditConfig,
    edit_config_context,
    get_edit_config,
    reset_edit_config,
    set_edit_config,
)
from tablero.editing import (
    add_column_after,
    add_row_above,
    add_row_below,
    delete_row,
    toggle_column_alignment,
)
from tablero.errors import CellIndexError, TableroError, UnknownCommandError
from tablero.nodes import (
    CellAddress,
    CellPosition,
    EditResult,
    TableCell,
    TableInfo,
    TableRow,
)
from tablero.parsing import (
    find_table_at_cursor,
    get_column_alignments,
    is_alignment_row,
    is_in_table,
    is_table_row,
    parse_table_row,
    segment_alignment,
)

__version__ = "0.1.0"

__all__ = [
    "COMMAND_PALETTE",
    "CellAddress",
    "CellIndexError",
    "CellPosition",
    "CommandResult",
    "CommandSpec",
    "EditConfig",
    "EditResult",
    "TableCell",
    "TableCommand",
    "TableInfo",
    "TableRow",
    "TableroError",
    "UnknownCommandError",
    "__version__",
    "add_column_after",
    "add_row_above",
    "add_row_below",
    "command_for_chord",
    "delete_row",
    "edit_config_context",
    "find_cell_at_cursor",
    "find_table_at_cursor",
    "get_column_alignments",
    "get_edit_config",
    "get_next_cell",
    "get_previous_cell",
    "is_alignment_row",
    "is_in_table",
    "is_table_row",
    "parse_table_row",
    "reset_edit_config",
    "run_table_command",
    "segment_alignment",
    "set_edit_config",
    "toggle_column_alignment",
]
