"""External viewer/editor launch for files under the cursor.

Runs the configured command, ``$VISUAL`` or ``$EDITOR`` (falling back to the
platform opener) while temporarily leaving raw/alternate-screen TUI mode.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable


def platform_opener() -> list[str] | None:
    """Return the desktop "open this file" command for the current platform."""
    if sys.platform == "darwin":
        return ["open", "-W"]
    if sys.platform.startswith("win"):
        return ["cmd", "/c", "start", "/wait", ""]
    if shutil.which("xdg-open"):
        return ["xdg-open"]
    return None


def resolve_open_command(configured: str | None = None) -> list[str] | None:
    """Pick the command used to open files, or ``None`` when nothing is usable."""
    for candidate in (configured, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if candidate and candidate.strip():
            cmd = shlex.split(candidate)
            if cmd:
                return cmd
    return platform_opener()


def launch_editor(
    target: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
    configured: str | None = None,
) -> str | None:
    cmd = resolve_open_command(configured)
    if cmd is None:
        return "Cannot open: set $EDITOR or configure an editor."

    disable_tui_mode()
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except Exception as exc:
        return f"Failed to launch editor: {exc}"
    finally:
        enable_tui_mode()
    return None
