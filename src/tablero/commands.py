"""Command layer between a host editor and the table engine.

A keybinding dispatcher or command palette hands over the full document
and the cursor offset; ``run_table_command`` locates the table, resolves
the cell and runs one operation. The host applies the returned text and
cursor as a single edit and shows ``message`` however it likes.

Example:
    >>> result = run_table_command("| a | b |\\n|---|---|\\n| 1 | 2 |", 2, TableCommand.NEXT_CELL)
    >>> result.cursor_pos
    5

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from tablero.addressing import find_cell_at_cursor, get_next_cell, get_previous_cell
from tablero.config import get_edit_config
from tablero.editing import (
    add_column_after,
    add_row_above,
    add_row_below,
    delete_row,
    toggle_column_alignment,
)
from tablero.errors import UnknownCommandError
from tablero.nodes import CellAddress, EditResult, TableInfo
from tablero.parsing.locator import find_table_at_cursor
from tablero.utils.logger import get_logger

logger = get_logger(__name__)


class TableCommand(Enum):
    """Operations the host can bind to keys or list in a palette."""

    NEXT_CELL = "next-cell"
    PREVIOUS_CELL = "previous-cell"
    ADD_ROW_BELOW = "add-row-below"
    ADD_ROW_ABOVE = "add-row-above"
    ADD_COLUMN = "add-column"
    TOGGLE_ALIGNMENT = "toggle-alignment"
    DELETE_ROW = "delete-row"

    @classmethod
    def from_name(cls, name: str) -> TableCommand:
        try:
            return cls(name)
        except ValueError:
            raise UnknownCommandError(name) from None


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Palette entry: command, human title and default key chord."""

    command: TableCommand
    title: str
    chord: str


COMMAND_PALETTE: tuple[CommandSpec, ...] = (
    CommandSpec(TableCommand.NEXT_CELL, "Table: Next Cell", "Tab"),
    CommandSpec(TableCommand.PREVIOUS_CELL, "Table: Previous Cell", "Shift-Tab"),
    CommandSpec(TableCommand.ADD_ROW_BELOW, "Table: Add Row Below", "Ctrl-Shift-Enter"),
    CommandSpec(TableCommand.ADD_ROW_ABOVE, "Table: Add Row Above", "Ctrl-Shift-Alt-Enter"),
    CommandSpec(TableCommand.ADD_COLUMN, "Table: Add Column", "Ctrl-Shift-\\"),
    CommandSpec(TableCommand.TOGGLE_ALIGNMENT, "Table: Toggle Column Alignment", "Ctrl-Shift-A"),
    CommandSpec(TableCommand.DELETE_ROW, "Table: Delete Row", "Ctrl-Shift-Backspace"),
)

_BY_CHORD: dict[str, TableCommand] = {spec.chord: spec.command for spec in COMMAND_PALETTE}


def command_for_chord(chord: str) -> TableCommand | None:
    return _BY_CHORD.get(chord)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a handled command.

    Attributes:
        text: Document text to install (unchanged when not applied)
        cursor_pos: Cursor offset in ``text``
        message: Short confirmation or refusal for the host to display
        applied: False when the command was handled but refused

    """

    text: str
    cursor_pos: int
    message: str | None = None
    applied: bool = True


_Mutator = Callable[[str, TableInfo, int], EditResult]

# command -> (mutator, uses column index, success message)
_MUTATIONS: dict[TableCommand, tuple[_Mutator, bool, str]] = {
    TableCommand.ADD_ROW_BELOW: (add_row_below, False, "Row added below"),
    TableCommand.ADD_ROW_ABOVE: (add_row_above, False, "Row added above"),
    TableCommand.ADD_COLUMN: (add_column_after, True, "Column added"),
    TableCommand.TOGGLE_ALIGNMENT: (toggle_column_alignment, True, "Column alignment toggled"),
    TableCommand.DELETE_ROW: (delete_row, False, "Row deleted"),
}


def run_table_command(text: str, cursor_pos: int, command: TableCommand) -> CommandResult | None:
    """Run one table command at the cursor.

    Returns None when the command does not apply (cursor outside a table
    cell, or navigation at the edge of the grid) so the host can fall back
    to its default key handling.
    """
    table = find_table_at_cursor(text, cursor_pos)
    if table is None:
        return None
    cell = find_cell_at_cursor(table, cursor_pos)
    if cell is None:
        return None

    logger.debug("Running %s at row %d, col %d", command.value, cell.row, cell.col)

    if command is TableCommand.NEXT_CELL or command is TableCommand.PREVIOUS_CELL:
        return _navigate(text, table, cell, command)

    if command is TableCommand.DELETE_ROW:
        min_rows = get_edit_config().min_rows_for_delete
        if len(table.rows) <= min_rows:
            logger.debug("Refusing to delete row: table has %d rows", len(table.rows))
            return CommandResult(
                text=text,
                cursor_pos=cursor_pos,
                message=f"Cannot delete row - table must have at least {min_rows} rows",
                applied=False,
            )

    if command is TableCommand.TOGGLE_ALIGNMENT and table.alignment_row_index is None:
        return CommandResult(
            text=text,
            cursor_pos=cursor_pos,
            message="Table has no alignment row",
            applied=False,
        )

    mutator, by_column, message = _MUTATIONS[command]
    result = mutator(text, table, cell.col if by_column else cell.row)
    new_cursor = cursor_pos if result.cursor_pos is None else result.cursor_pos
    return CommandResult(text=result.text, cursor_pos=new_cursor, message=message)


def _navigate(text: str, table: TableInfo, cell: CellAddress, command: TableCommand) -> CommandResult | None:
    if command is TableCommand.NEXT_CELL:
        target = get_next_cell(table, cell.row, cell.col)
    else:
        target = get_previous_cell(table, cell.row, cell.col)
    if target is None:
        return None
    return CommandResult(text=text, cursor_pos=target.pos)
