"""Terminal control for the browser session.

Switches between the shell's screen and a raw alternate screen, and writes
whole frames. The editor launcher borrows ``disable_tui_mode`` and
``enable_tui_mode`` to hand the terminal over temporarily.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_ALT_SCREEN = b"\x1b[?1049h"
LEAVE_ALT_SCREEN = b"\x1b[?1049l"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CLEAR_SCREEN = b"\x1b[2J"


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Remember the cooked tty settings so they can be restored on exit."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def _write_all(self, data: bytes) -> None:
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._write_all(ENTER_ALT_SCREEN + HIDE_CURSOR + CLEAR_SCREEN)

    def disable_tui_mode(self) -> None:
        self._write_all(SHOW_CURSOR + LEAVE_ALT_SCREEN)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, frame: str) -> None:
        """Write one rendered frame; undecodable characters are replaced."""
        self._write_all(frame.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Hold the alternate screen for the duration of the block."""
        self.enable_tui_mode()
        try:
            yield self
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController"]
