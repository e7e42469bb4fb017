"""ANSI-aware measurement and padding for fixed-width pane cells.

Escape sequences pass through untouched and take no columns; wide characters
take two and tabs expand to the next tab stop.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when drawn at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def _cells(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(chunk, columns)`` pairs; escape sequences come out as zero-width chunks.

    Tabs are yielded already expanded into spaces.
    """
    col = 0
    pos = 0
    while pos < len(text):
        if text[pos] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, pos)
            if match:
                yield match.group(0), 0
                pos = match.end()
                continue
        ch = text[pos]
        width = char_display_width(ch, col)
        yield (" " * width if ch == "\t" else ch), width
        col += width
        pos += 1


def display_width(text: str) -> int:
    """Visible column count of ``text``."""
    return sum(width for _chunk, width in _cells(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Keep at most ``max_cols`` visible columns of ``text``.

    Escapes before the cut are kept; a wide character or tab that would
    straddle the edge is dropped whole.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    used = 0
    for chunk, width in _cells(text):
        if used + width > max_cols:
            break
        out.append(chunk)
        used += width
        if used == max_cols:
            break
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip or right-pad ``text`` to exactly ``width`` columns, then reset style."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped)) + RESET


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "fit_ansi_line",
]
