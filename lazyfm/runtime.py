"""Interactive event loop for the terminal UI.

One key or tick is fully applied before the next is read. A tick refreshes
the listings and redraws only when the visible state changed; it runs when
``read_key`` times out or once ``tick_ms`` has passed under steady input.
"""

from __future__ import annotations

import logging
import shutil
import sys
import time
from pathlib import Path

from .browser import Browser
from .commands import Resize
from .config import BrowserSettings
from .editor import launch_editor
from .input import read_key
from .keymap import command_for_key
from .preview import Preview, build_preview
from .render import compute_layout, render_frame
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def current_preview(browser: Browser, settings: BrowserSettings, no_color: bool) -> Preview:
    navigation = browser.navigation
    cursor = navigation.cursor
    layout = compute_layout(browser.width, browser.height)
    return build_preview(
        cursor.path if cursor else None,
        is_dir=navigation.cursor_is_dir(),
        sort_policy=settings.sort_policy,
        max_lines=layout.body_rows,
        style=settings.style,
        no_color=no_color,
    )


def view_signature(browser: Browser) -> tuple[object, ...]:
    """Cheap snapshot of what a tick refresh can change on screen."""
    navigation = browser.navigation
    parent = navigation.parent
    return (
        navigation.current_path,
        navigation.focus.contents,
        parent.contents if parent is not None else None,
        navigation.cursor,
    )


def run_main_loop(
    browser: Browser,
    terminal: TerminalController,
    stdin_fd: int,
    settings: BrowserSettings,
    no_color: bool = False,
) -> None:
    """Run until the browser stops; the caller owns terminal mode switching."""
    dirty = True
    tick_seconds = settings.tick_ms / 1000.0
    last_tick = time.monotonic()
    while browser.running:
        term = shutil.get_terminal_size((80, 24))
        if (term.columns, term.lines) != (browser.width, browser.height):
            browser.handle(Resize(term.columns, term.lines))
            dirty = True

        if dirty:
            preview = current_preview(browser, settings, no_color)
            terminal.write(render_frame(browser, preview, no_color=no_color))
            dirty = False

        try:
            key = read_key(stdin_fd, timeout_ms=settings.tick_ms)
        except KeyboardInterrupt:
            continue

        if key:
            command = command_for_key(key, browser.mode)
            if command is not None:
                logger.debug("key %r -> %r", key, command)
                browser.handle(command)
                dirty = True

        # Held keys never time out, so ticks are also due by elapsed time.
        now = time.monotonic()
        if browser.running and (key == "" or now - last_tick >= tick_seconds):
            last_tick = now
            before = view_signature(browser)
            browser.tick()
            if view_signature(browser) != before:
                dirty = True


def run_browser(path: Path, settings: BrowserSettings, no_color: bool = False) -> Path:
    """Run an interactive session starting at ``path``; return the last focus directory."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    def open_file(target: Path) -> str | None:
        return launch_editor(
            target,
            terminal.disable_tui_mode,
            terminal.enable_tui_mode,
            configured=settings.editor,
        )

    term = shutil.get_terminal_size((80, 24))
    browser = Browser.open(
        path,
        settings,
        open_file=open_file,
        width=term.columns,
        height=term.lines,
    )
    with terminal.raw_mode():
        run_main_loop(browser, terminal, stdin_fd, settings, no_color=no_color)
    return browser.navigation.current_path


__all__ = ["run_browser", "run_main_loop", "current_preview", "view_signature"]
