"""Preview-pane content for the entry under the cursor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .directory_model import SortPolicy, scan_directory, sorted_children
from .errors import FilesystemError
from .highlight import colorize_source, read_text_head, sanitize_terminal_text

PREVIEW_MAX_BYTES = 64 * 1024


@dataclass(frozen=True)
class Preview:
    """Either child paths of a directory or text lines, plus a fallback notice."""

    entries: tuple[Path, ...] = ()
    dirs: frozenset[Path] = frozenset()
    lines: tuple[str, ...] = ()
    notice: str = ""


def preview_directory(path: Path, sort_policy: SortPolicy) -> Preview:
    try:
        children = scan_directory(path)
    except FilesystemError as exc:
        if isinstance(exc.__cause__, PermissionError):
            return Preview(notice="Permission denied!")
        return Preview(notice="Unknown error")
    if not children:
        return Preview(notice="Empty...")
    entries, dirs = sorted_children(children, sort_policy)
    return Preview(entries=entries, dirs=dirs)


def preview_file(path: Path, max_lines: int, style: str, no_color: bool = False) -> Preview:
    try:
        text = read_text_head(path, PREVIEW_MAX_BYTES)
    except OSError:
        return Preview(notice="Failed to read file")
    if text is None:
        return Preview(notice="Binary file")
    head = sanitize_terminal_text("".join(text.splitlines(keepends=True)[: max(1, max_lines)]))
    rendered = head if no_color else colorize_source(head, path, style)
    return Preview(lines=tuple(rendered.splitlines()))


def build_preview(
    path: Path | None,
    *,
    is_dir: bool,
    sort_policy: SortPolicy,
    max_lines: int,
    style: str,
    no_color: bool = False,
) -> Preview:
    """Preview for ``path``: a sorted listing, highlighted text, or a notice."""
    if path is None:
        return Preview()
    if is_dir:
        return preview_directory(path, sort_policy)
    if path.is_file():
        return preview_file(path, max_lines, style, no_color=no_color)
    return Preview(notice="Neither a file nor a directory...")


__all__ = ["Preview", "build_preview", "preview_directory", "preview_file", "PREVIEW_MAX_BYTES"]
