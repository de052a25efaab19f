"""ContextVar-based edit configuration for tablero.

The structural mutators keep the ``(text, table, index)`` signature, so the
knobs that shape the text they synthesise (placeholder widths, row
padding, the delete guard) are read from a context-local EditConfig.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tablero.config import EditConfig, edit_config_context

    with edit_config_context(EditConfig(pad_all_new_cells=True)):
        result = add_row_below(text, table, 0)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class EditConfig:
    """Immutable edit configuration.

    Attributes:
        placeholder_width: Blank characters in the first cell of a new row
        pad_all_new_cells: Pad every cell of a new row to placeholder_width.
            When False, cells after the first are zero-width ("||"), which
            is what existing documents produced by earlier versions contain.
        new_column_width: Interior width of a cell added by add_column_after
            (the cell is padded by one extra space on each side)
        min_rows_for_delete: The delete-row command refuses to run when the
            table has this many rows or fewer

    """

    placeholder_width: int = 10
    pad_all_new_cells: bool = False
    new_column_width: int = 8
    min_rows_for_delete: int = 2

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EditConfig":
        """Create EditConfig from dictionary.

        Useful when settings come from the host editor's preferences store.
        Unknown keys are silently ignored.

        Example:
            >>> config = EditConfig.from_dict({
            ...     "pad_all_new_cells": True,
            ...     "theme": "ignored",
            ... })
            >>> config.pad_all_new_cells
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: EditConfig = EditConfig()

_edit_config: ContextVar[EditConfig] = ContextVar(
    "edit_config",
    default=_DEFAULT_CONFIG,
)


def get_edit_config() -> EditConfig:
    """Get current edit configuration (thread-local)."""
    return _edit_config.get()


def set_edit_config(config: EditConfig) -> None:
    """Set edit configuration for current context.

    Args:
        config: EditConfig instance to use for this context.

    """
    _edit_config.set(config)


def reset_edit_config() -> None:
    """Reset to the default configuration."""
    _edit_config.set(_DEFAULT_CONFIG)


@contextmanager
def edit_config_context(config: EditConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with edit_config_context(EditConfig(placeholder_width=4)):
        ...     get_edit_config().placeholder_width
        4

    """
    previous = _edit_config.get()
    _edit_config.set(config)
    try:
        yield
    finally:
        _edit_config.set(previous)


__all__ = [
    "EditConfig",
    "get_edit_config",
    "set_edit_config",
    "reset_edit_config",
    "edit_config_context",
]
