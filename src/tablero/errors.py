"""Exception classes for tablero.

"Not applicable here" outcomes (cursor outside a table, no alignment row,
grid boundary) are signalled with None or an unchanged text, never with an
exception. The classes below cover programming errors only.
"""

from __future__ import annotations


class TableroError(Exception):
    """Base exception for all tablero errors.
    
    Subclass this for specific error categories.
    """

    pass


class CellIndexError(TableroError, IndexError):
    """Row or column index outside the located table.
    
    Raised by the structural mutators when a caller passes an index that
    did not come from the locator or the cell addressing functions.
    """

    def __init__(self, kind: str, index: int, size: int) -> None:
        """Initialize index error.
        
        Args:
            kind: "row" or "column"
            index: The offending index
            size: Number of valid indices
        """
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} index {index} out of range for table with {size} {kind}s")


class UnknownCommandError(TableroError, ValueError):
    """Command name not recognised by the command layer."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown table command: {name!r}")
