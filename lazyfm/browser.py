"""Modal browser state machine.

``Browser.handle`` interprets one abstract command according to the active
mode. Each mode owns one transition function and each transition function
owns a table from command type to action, so every legal transition is listed
in exactly one place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

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
    Resize,
    ToggleMark,
)
from .config import BrowserSettings
from .errors import DeletionError, FilesystemError, RenameError
from .fs_ops import delete_entry, rename_entry
from .modes import NORMAL, AwaitingDeleteConfirmation, EditingRename, Mode, Normal
from .navigation import NavigationState
from .selection import SelectionSet

logger = logging.getLogger(__name__)

OpenFile = Callable[[Path], Optional[str]]


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


class Browser:
    """Navigation, marks and pending action for one interactive session."""

    def __init__(
        self,
        navigation: NavigationState,
        *,
        selection: SelectionSet | None = None,
        open_file: OpenFile | None = None,
        delete: Callable[[Path], None] = delete_entry,
        rename: Callable[[Path, str], Path] = rename_entry,
        width: int = 80,
        height: int = 24,
    ) -> None:
        self.navigation = navigation
        self.selection = selection if selection is not None else SelectionSet()
        self.open_file = open_file
        self._delete = delete
        self._rename = rename
        self.mode: Mode = NORMAL
        self.message = ""
        self.errors: tuple[Exception, ...] = ()
        self.running = True
        self.width = width
        self.height = height

    @classmethod
    def open(cls, path: Path, settings: BrowserSettings, **kwargs) -> Browser:
        """Create a browser focused on ``path`` using ``settings``."""
        navigation = NavigationState.open(
            path,
            sort_policy=settings.sort_policy,
            refresh_seconds=settings.refresh_seconds,
            wrap=settings.wrap,
        )
        return cls(navigation, **kwargs)

    @property
    def current_marks(self) -> frozenset[Path]:
        return self.selection.marks(self.navigation.current_path)

    def handle(self, command: Command) -> None:
        """Apply one command to the current mode."""
        if isinstance(command, Resize):
            self.width = max(1, command.width)
            self.height = max(1, command.height)
            return
        transition = self._TRANSITIONS[type(self.mode)]
        transition(self, self.mode, command)

    def tick(self) -> bool:
        """Periodic refresh of the parent and focus listings."""
        return self.navigation.refresh()

    # Normal mode.

    def _quit(self, command: Command) -> None:
        self.running = False

    def _clear_message(self) -> None:
        self.message = ""
        self.errors = ()

    def _move_up(self, command: Command) -> None:
        self._clear_message()
        self.navigation.move_up()

    def _move_down(self, command: Command) -> None:
        self._clear_message()
        self.navigation.move_down()

    def _move_back(self, command: Command) -> None:
        self._clear_message()
        try:
            self.navigation.move_back()
        except FilesystemError as exc:
            logger.info("move back aborted: %s", exc)
            self.message = str(exc)
            self.errors = (exc,)

    def _move_into(self, command: Command) -> None:
        self._clear_message()
        cursor = self.navigation.cursor
        if cursor is None:
            return
        if not self.navigation.cursor_is_dir():
            if self.open_file is not None and cursor.path.is_file():
                error = self.open_file(cursor.path)
                if error:
                    self.message = error
            return
        try:
            self.navigation.move_into()
        except FilesystemError as exc:
            logger.info("move into aborted: %s", exc)
            self.message = str(exc)
            self.errors = (exc,)

    def _toggle_mark(self, command: Command) -> None:
        self._clear_message()
        cursor = self.navigation.cursor
        if cursor is None:
            return
        self.selection.toggle(self.navigation.current_path, cursor.path)
        self.navigation.move_down()

    def _request_delete(self, command: Command) -> None:
        self._clear_message()
        directory = self.navigation.current_path
        marks = self.selection.marks(directory)
        if marks:
            targets = tuple(sorted(marks, key=lambda path: (path.name.casefold(), path.name)))
            noun = _plural(len(targets), "entry", "entries")
            self.message = f"Delete {len(targets)} marked {noun}? [y/N]"
        else:
            cursor = self.navigation.cursor
            if cursor is None:
                self.message = "Nothing to delete"
                return
            targets = (cursor.path,)
            self.message = f"Delete {cursor.path.name}? [y/N]"
        self.mode = AwaitingDeleteConfirmation(directory, targets, from_marks=bool(marks))

    def _request_rename(self, command: Command) -> None:
        self._clear_message()
        cursor = self.navigation.cursor
        if cursor is None:
            self.message = "Nothing to rename"
            return
        self.mode = EditingRename(cursor.path)
        self.message = f"Rename {cursor.path.name} to: "

    _NORMAL_ACTIONS = {
        Quit: _quit,
        MoveUp: _move_up,
        MoveDown: _move_down,
        MoveInto: _move_into,
        MoveBack: _move_back,
        ToggleMark: _toggle_mark,
        RequestDelete: _request_delete,
        RequestRename: _request_rename,
    }

    def _handle_normal(self, mode: Normal, command: Command) -> None:
        action = self._NORMAL_ACTIONS.get(type(command))
        if action is not None:
            action(self, command)

    # Delete confirmation.

    def _perform_delete(self, pending: AwaitingDeleteConfirmation) -> None:
        failures: list[DeletionError] = []
        for target in pending.targets:
            try:
                self._delete(target)
            except DeletionError as exc:
                logger.warning("%s", exc)
                failures.append(exc)
                continue
            if pending.from_marks:
                self.selection.discard(pending.directory, target)

        self.errors = tuple(failures)
        if not failures:
            self.message = ""
        elif len(failures) == 1:
            self.message = str(failures[0])
        else:
            details = ", ".join(f"{exc.path.name} ({exc.reason})" for exc in failures)
            self.message = f"{len(failures)} entries could not be deleted: {details}"

    def _handle_delete_confirmation(self, pending: AwaitingDeleteConfirmation, command: Command) -> None:
        self.mode = NORMAL
        if isinstance(command, ConfirmYes):
            self._perform_delete(pending)
            return
        self._clear_message()

    # Rename editing.

    def _rename_insert(self, editing: EditingRename, command: Command) -> None:
        if isinstance(command, InsertChar):
            editing.buffer.insert_char(command.char)

    def _rename_backspace(self, editing: EditingRename, command: Command) -> None:
        editing.buffer.delete_char()

    def _rename_cursor_left(self, editing: EditingRename, command: Command) -> None:
        editing.buffer.move_left()

    def _rename_cursor_right(self, editing: EditingRename, command: Command) -> None:
        editing.buffer.move_right()

    def _rename_cancel(self, editing: EditingRename, command: Command) -> None:
        self.mode = NORMAL
        self._clear_message()

    def _rename_commit(self, editing: EditingRename, command: Command) -> None:
        self.mode = NORMAL
        self._clear_message()
        name = editing.buffer.text
        try:
            destination = self._rename(editing.target, name)
        except RenameError as exc:
            logger.warning("%s", exc)
            self.message = str(exc)
            self.errors = (exc,)
            return

        directory = editing.target.parent
        if editing.target in self.selection.marks(directory):
            self.selection.discard(directory, editing.target)
            self.selection.add(directory, destination)

    _RENAME_ACTIONS = {
        InsertChar: _rename_insert,
        Backspace: _rename_backspace,
        MoveBack: _rename_cursor_left,
        MoveInto: _rename_cursor_right,
        Cancel: _rename_cancel,
        Commit: _rename_commit,
    }

    def _handle_rename(self, editing: EditingRename, command: Command) -> None:
        action = self._RENAME_ACTIONS.get(type(command))
        if action is not None:
            action(self, editing, command)

    _TRANSITIONS = {
        Normal: _handle_normal,
        AwaitingDeleteConfirmation: _handle_delete_confirmation,
        EditingRename: _handle_rename,
    }


__all__ = ["Browser", "OpenFile"]
