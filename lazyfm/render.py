"""Rendering for the three-pane browser view.

Builds a full ANSI frame from browser state without mutating it: a title
row, parent/focus/preview panes, and a status or prompt row.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ansi import RESET, fit_ansi_line
from .browser import Browser
from .modes import EditingRename
from .preview import Preview

PARENT_PANE_PERCENT = 15
FOCUS_PANE_PERCENT = 35
MARK_PREFIX = "  "

DIR_SGR = "\033[95m"
SYMLINK_SGR = "\033[36m"
FILE_SGR = "\033[37m"
MARKED_SGR = "\033[33m"
TITLE_SGR = "\033[36m"
EMPTY_SGR = "\033[31;40m"
REVERSE_SGR = "\033[7m"


@dataclass(frozen=True)
class PaneLayout:
    parent_width: int
    focus_width: int
    preview_width: int
    body_rows: int


def compute_layout(width: int, height: int) -> PaneLayout:
    """Split the screen 15/35/50 between parent, focus and preview panes."""
    width = max(1, width)
    parent_width = width * PARENT_PANE_PERCENT // 100
    focus_width = width * FOCUS_PANE_PERCENT // 100
    preview_width = max(0, width - parent_width - focus_width)
    return PaneLayout(parent_width, focus_width, preview_width, max(0, height - 2))


def window_start(index: int | None, count: int, rows: int) -> int:
    """First visible row so ``index`` stays on screen, roughly centered."""
    if index is None or rows <= 0 or count <= rows:
        return 0
    return max(0, min(index - rows // 2, count - rows))


def format_entry(
    path: Path,
    *,
    is_dir: bool,
    marked: bool,
    highlighted: bool,
    in_focus: bool,
    width: int,
    no_color: bool = False,
) -> str:
    """One pane row: name colored by kind, marked prefix, reverse video when highlighted."""
    name = path.name or str(path)
    if marked:
        name = MARK_PREFIX + name
    if no_color:
        style = ""
    elif marked and in_focus:
        style = MARKED_SGR
    elif is_dir:
        style = DIR_SGR
    elif path.is_symlink():
        style = SYMLINK_SGR
    else:
        style = FILE_SGR
    if highlighted:
        style += REVERSE_SGR
    return fit_ansi_line(style + name, width)


def _blank(width: int) -> str:
    return " " * max(0, width)


def parent_pane_rows(browser: Browser, layout: PaneLayout, no_color: bool) -> list[str]:
    width = layout.parent_width
    parent = browser.navigation.parent
    if parent is None or width <= 0:
        return [_blank(width)] * layout.body_rows
    contents = parent.contents
    focus_path = browser.navigation.current_path
    start = window_start(parent.index_of(focus_path), len(contents), layout.body_rows)
    rows: list[str] = []
    for path in contents[start : start + layout.body_rows]:
        rows.append(
            format_entry(
                path,
                is_dir=parent.is_dir(path),
                marked=browser.selection.is_marked(path),
                highlighted=path == focus_path,
                in_focus=False,
                width=width,
                no_color=no_color,
            )
        )
    rows.extend([_blank(width)] * (layout.body_rows - len(rows)))
    return rows


def focus_pane_rows(browser: Browser, layout: PaneLayout, no_color: bool) -> list[str]:
    width = layout.focus_width
    inner = max(0, width - 2)
    focus = browser.navigation.focus
    cursor = browser.navigation.cursor
    rows: list[str] = []
    if not focus.contents and layout.body_rows > 0:
        style = "" if no_color else EMPTY_SGR
        rows.append(" " + fit_ansi_line(style + "Nothing to see here", inner) + " ")
    else:
        contents = focus.contents
        start = window_start(cursor.index if cursor else None, len(contents), layout.body_rows)
        for path in contents[start : start + layout.body_rows]:
            line = format_entry(
                path,
                is_dir=focus.is_dir(path),
                marked=browser.selection.is_marked(path),
                highlighted=cursor is not None and path == cursor.path,
                in_focus=True,
                width=inner,
                no_color=no_color,
            )
            rows.append(" " + line + " ")
    rows = [row if width >= 2 else fit_ansi_line(row, width) for row in rows]
    rows.extend([_blank(width)] * (layout.body_rows - len(rows)))
    return rows


def preview_pane_rows(browser: Browser, preview: Preview, layout: PaneLayout, no_color: bool) -> list[str]:
    width = layout.preview_width
    rows: list[str] = []
    if preview.entries:
        for path in preview.entries[: layout.body_rows]:
            rows.append(
                format_entry(
                    path,
                    is_dir=path in preview.dirs,
                    marked=browser.selection.is_marked(path),
                    highlighted=False,
                    in_focus=False,
                    width=width,
                    no_color=no_color,
                )
            )
    elif preview.lines:
        rows = [fit_ansi_line(line, width) for line in preview.lines[: layout.body_rows]]
    elif preview.notice:
        rows = [fit_ansi_line(preview.notice, width)]
    rows = rows[: layout.body_rows]
    rows.extend([_blank(width)] * (layout.body_rows - len(rows)))
    return rows


def status_row(browser: Browser, width: int, no_color: bool) -> str:
    """Bottom row: the rename prompt with its text cursor, or the status message."""
    mode = browser.mode
    if isinstance(mode, EditingRename):
        before, after = mode.buffer.split_at_cursor()
        under = after[:1] or " "
        text = browser.message + before + REVERSE_SGR + under + RESET + after[1:]
        return fit_ansi_line(text, width)
    return fit_ansi_line(browser.message, width)


def title_row(browser: Browser, width: int, no_color: bool) -> str:
    style = "" if no_color else TITLE_SGR
    return fit_ansi_line(f"{style}— {browser.navigation.current_path} ", width)


def render_rows(browser: Browser, preview: Preview, no_color: bool = False) -> list[str]:
    """Compose every screen row for the current browser state."""
    layout = compute_layout(browser.width, browser.height)
    parent_rows = parent_pane_rows(browser, layout, no_color)
    focus_rows = focus_pane_rows(browser, layout, no_color)
    preview_rows = preview_pane_rows(browser, preview, layout, no_color)

    rows = [title_row(browser, browser.width, no_color)]
    for parent_row, focus_row, preview_row in zip(parent_rows, focus_rows, preview_rows):
        rows.append(parent_row + focus_row + preview_row)
    if browser.height >= 2:
        rows.append(status_row(browser, browser.width, no_color))
    return rows[: max(1, browser.height)]


def render_frame(browser: Browser, preview: Preview, no_color: bool = False) -> str:
    """Full-screen frame: cursor home, then every row separated by CR/LF."""
    return "\033[H" + "\r\n".join(render_rows(browser, preview, no_color=no_color))


__all__ = [
    "PaneLayout",
    "compute_layout",
    "window_start",
    "format_entry",
    "render_rows",
    "render_frame",
]
