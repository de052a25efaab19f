"""Typed table snapshot nodes for tablero.

All nodes are frozen dataclasses with slots. Offsets are absolute positions
in the document string that was handed to the locator; they go stale as
soon as that text is edited, so a TableInfo is rebuilt for every command
and never kept across a mutation.

Node Hierarchy:
TableInfo
└── TableRow (alignment line excluded, tracked by index)
    └── TableCell

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TableCell:
    """One cell of a table row.

    ``start``/``end`` delimit the untrimmed span between two pipes (or the
    line start/end for boundary cells); ``content`` is the trimmed text.

    Markdown: | cell content |

    """

    content: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class TableRow:
    """A table line, bounded by its line start and end (terminator excluded)."""

    cells: tuple[TableCell, ...]
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class TableInfo:
    """A located table block.

    Markdown:
        | A | B |
        |---|---|
        | 1 | 2 |

    ``alignment_row_index`` is the position of the separator line within
    the block's lines, not within ``rows``: for the table above it is 1
    while ``rows`` holds two entries.

    """

    rows: tuple[TableRow, ...]
    alignment_row_index: int | None
    start: int
    end: int

    @property
    def column_count(self) -> int:
        """Widest row's cell count (rows may be ragged)."""
        return max((len(row.cells) for row in self.rows), default=0)

    @property
    def line_count(self) -> int:
        """Number of lines in the block, alignment line included."""
        return len(self.rows) + (0 if self.alignment_row_index is None else 1)

    def is_valid_address(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row].cells)


@dataclass(frozen=True, slots=True)
class CellAddress:
    """Logical (row, col) grid coordinate, independent of text offsets."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class CellPosition:
    """Navigation target: a cell address plus the offset to move the cursor to."""

    row: int
    col: int
    pos: int


@dataclass(frozen=True, slots=True)
class EditResult:
    """Output of a structural mutator.

    ``cursor_pos`` is None when the mutation does not move the cursor
    (alignment toggling).

    """

    text: str
    cursor_pos: int | None = None
