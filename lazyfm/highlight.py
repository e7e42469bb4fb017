"""Source loading, sanitization, and syntax highlighting for file previews.

Neutralizes terminal control bytes to avoid unsafe preview side effects.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
FALLBACK_STYLE = "monokai"


def read_text_head(path: Path, max_bytes: int) -> str | None:
    """Read up to ``max_bytes`` of ``path`` as text; ``None`` for binary data.

    Raises ``OSError`` when the file cannot be read.
    """
    with path.open("rb") as handle:
        data = handle.read(max_bytes)
    if b"\0" in data:
        return None
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def _escape_control(match: re.Match[str]) -> str:
    return f"\\x{ord(match.group(0)):02x}"


def sanitize_terminal_text(source: str) -> str:
    """Show C0/C1 control characters as ``\\xNN`` so previews cannot drive the terminal.

    Tabs and line breaks are left alone.
    """
    return _CONTROL_RE.sub(_escape_control, source)


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> TerminalFormatter:
    try:
        return TerminalFormatter(style=style)
    except ClassNotFound:
        return TerminalFormatter(style=FALLBACK_STYLE)


def colorize_source(source: str, path: Path, style: str = FALLBACK_STYLE) -> str:
    """Return ``source`` with ANSI colors chosen by the lexer for ``path``."""
    source = sanitize_terminal_text(source)
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return pygments_highlight(source, lexer, _formatter_for_style(style))
