"""Text-buffer primitives for the structural mutators.

Multi-row edits (a new column touches every line of the block) are
expressed as insertions against the *original* offsets and applied in one
pass: in increasing offset order, each target shifted by the total length
inserted before it.

Thread Safety:
    Pure functions over immutable strings.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tablero.errors import CellIndexError


@dataclass(frozen=True, slots=True)
class Insertion:
    """Text to insert at an offset of the original snapshot."""

    offset: int
    text: str


def apply_insertions(text: str, insertions: Sequence[Insertion]) -> tuple[str, list[int]]:
    """Apply insertions computed against the same snapshot.

    Insertions at equal offsets keep their given order.

    Returns:
        ``(new_text, placed)`` where ``placed[i]`` is the offset in
        ``new_text`` at which ``insertions[i].text`` begins.
    """
    order = sorted(range(len(insertions)), key=lambda i: insertions[i].offset)
    placed = [0] * len(insertions)
    pieces: list[str] = []
    last = 0
    delta = 0

    for index in order:
        insertion = insertions[index]
        pieces.append(text[last : insertion.offset])
        pieces.append(insertion.text)
        placed[index] = insertion.offset + delta
        delta += len(insertion.text)
        last = insertion.offset

    pieces.append(text[last:])
    return "".join(pieces), placed


def replace_span(text: str, start: int, end: int, replacement: str) -> str:
    return text[:start] + replacement + text[end:]


def check_index(kind: str, index: int, size: int) -> None:
    """Raise CellIndexError unless ``0 <= index < size``."""
    if not 0 <= index < size:
        raise CellIndexError(kind, index, size)
