"""Mode-aware mapping from key tokens to browser commands."""

from __future__ import annotations

from dataclasses import dataclass

from .commands import (
    Backspace,
    Cancel,
    Command,
    Commit,
    ConfirmYes,
    InsertChar,
    MoveBack,
    MoveDown,
    MoveInto,
    MoveUp,
    Quit,
    RequestDelete,
    RequestRename,
    ToggleMark,
)
from .modes import AwaitingDeleteConfirmation, EditingRename, Mode


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single command."""

    combos: tuple[str, ...]
    command: Command


class KeyMap:
    """Small key-to-command table with a fallback for unbound keys."""

    def __init__(self, *bindings: KeyBinding) -> None:
        self._commands: dict[str, Command] = {}
        for binding in bindings:
            self.register_binding(binding)

    def register_binding(self, binding: KeyBinding) -> KeyMap:
        """Register one binding, overwriting existing commands for same combos."""
        for combo in binding.combos:
            self._commands[combo] = binding.command
        return self

    def lookup(self, key: str) -> Command | None:
        return self._commands.get(key)


NORMAL_KEYS = KeyMap(
    KeyBinding(("q", "ESC", "CTRL_C"), Quit()),
    KeyBinding(("l", "RIGHT", "ENTER"), MoveInto()),
    KeyBinding(("h", "LEFT"), MoveBack()),
    KeyBinding(("k", "UP"), MoveUp()),
    KeyBinding(("j", "DOWN"), MoveDown()),
    KeyBinding((" ",), ToggleMark()),
    KeyBinding(("d", "DELETE"), RequestDelete()),
    KeyBinding(("r",), RequestRename()),
)

RENAME_KEYS = KeyMap(
    KeyBinding(("ESC", "CTRL_C"), Cancel()),
    KeyBinding(("ENTER",), Commit()),
    KeyBinding(("BACKSPACE",), Backspace()),
    KeyBinding(("LEFT",), MoveBack()),
    KeyBinding(("RIGHT",), MoveInto()),
)


def _is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def command_for_key(key: str, mode: Mode) -> Command | None:
    """Translate one key token into a command for the active ``mode``.

    While a delete is pending only ``y``/``Y`` confirm; any other key cancels.
    While renaming, printable keys insert text.
    """
    if not key:
        return None
    if isinstance(mode, AwaitingDeleteConfirmation):
        return ConfirmYes() if key in {"y", "Y"} else Cancel()
    if isinstance(mode, EditingRename):
        command = RENAME_KEYS.lookup(key)
        if command is not None:
            return command
        return InsertChar(key) if _is_text_key(key) else None
    return NORMAL_KEYS.lookup(key)


__all__ = ["KeyBinding", "KeyMap", "NORMAL_KEYS", "RENAME_KEYS", "command_for_key"]
