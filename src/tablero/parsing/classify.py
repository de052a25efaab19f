"""Line classifiers for pipe tables.

Both classifiers are syntactic: a ``|`` inside a code fence or an escaped
``\\|`` still counts, so such lines are seen as table-shaped.
"""

from __future__ import annotations

import re
from typing import Literal

from tablero.parsing.lines import locate_line, split_lines

Alignment = Literal["left", "center", "right"]

_ALIGNMENT_SEGMENT = re.compile(r"^:?-+:?$")


def is_table_row(line: str) -> bool:
    """Check whether a line is table-shaped.

    True when the stripped line contains a pipe and splitting on pipes
    yields at least two parts.
    """
    trimmed = line.strip()
    return "|" in trimmed and len(trimmed.split("|")) >= 2


def is_alignment_row(line: str) -> bool:
    """Check whether a line is a header separator such as ``|:---|---:|``."""
    trimmed = line.strip()
    if "|" not in trimmed:
        return False

    parts = [part.strip() for part in trimmed.split("|") if part.strip()]
    if not parts:
        return False

    return all(_ALIGNMENT_SEGMENT.match(part) for part in parts)


def segment_alignment(marker: str) -> Alignment | None:
    """Alignment declared by one separator segment.

    Returns 'left', 'center' or 'right', or None when the segment has no
    colons (renderer default).
    """
    marker = marker.strip()
    has_left_colon = marker.startswith(":")
    has_right_colon = marker.endswith(":") and len(marker) > 1

    if has_left_colon and has_right_colon:
        return "center"
    if has_left_colon:
        return "left"
    if has_right_colon:
        return "right"
    return None


def is_in_table(text: str, cursor_pos: int) -> bool:
    """Check whether the line holding ``cursor_pos`` is table-shaped."""
    lines = split_lines(text)
    line_index, _ = locate_line(lines, cursor_pos)
    return is_table_row(lines[line_index])
