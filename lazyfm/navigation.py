"""Navigation primitives: focus/parent listings, cursor, and directory history.

This module intentionally has no UI concerns.
Every navigation step computes the new listings first and only then swaps
state, so a filesystem error never leaves focus, parent and cursor out of sync.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .directory_model import DEFAULT_SORT_POLICY, DirectoryListing, SortPolicy, absolute_path
from .errors import FilesystemError

logger = logging.getLogger(__name__)

MAX_HISTORY = 256


@dataclass(frozen=True)
class HistoryEntry:
    """A directory plus the cursor index to restore when returning to it."""

    path: Path
    index: int


@dataclass(frozen=True)
class Cursor:
    index: int
    path: Path


class NavigationState:
    """Focus/parent listings, a cursor over the focus, and back/forward stacks.

    The parent listing is held by value (its own path), never as a reference
    back into the focus listing.
    """

    def __init__(
        self,
        focus: DirectoryListing,
        parent: DirectoryListing | None,
        *,
        wrap: bool = True,
        open_listing: Callable[[Path], DirectoryListing] = DirectoryListing.create,
        max_history: int = MAX_HISTORY,
    ) -> None:
        self.focus = focus
        self.parent = parent
        self.wrap = wrap
        self.max_history = max(1, max_history)
        self.back: list[HistoryEntry] = []
        self.forward: list[HistoryEntry] = []
        self._open_listing = open_listing
        self._index = 0

    @classmethod
    def open(
        cls,
        path: Path,
        *,
        sort_policy: SortPolicy = DEFAULT_SORT_POLICY,
        refresh_seconds: float = 0.0,
        wrap: bool = True,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> NavigationState:
        """Start navigation at ``path``.

        An unreadable start directory (or parent) degrades to an empty
        listing so the session starts with an absent cursor instead of failing.
        """

        def open_listing(target: Path) -> DirectoryListing:
            return DirectoryListing.create(
                target,
                sort_policy=sort_policy,
                refresh_seconds=refresh_seconds,
                monotonic=monotonic,
            )

        def open_or_empty(target: Path) -> DirectoryListing:
            try:
                return open_listing(target)
            except FilesystemError as exc:
                logger.warning("cannot list %s: %s", exc.path, exc.reason)
                return DirectoryListing.empty(
                    target,
                    sort_policy=sort_policy,
                    refresh_seconds=refresh_seconds,
                    monotonic=monotonic,
                )

        focus = open_or_empty(absolute_path(path))
        parent_dir = focus.parent
        parent = open_or_empty(parent_dir) if parent_dir is not None else None
        return cls(focus, parent, wrap=wrap, open_listing=open_listing)

    @property
    def current_path(self) -> Path:
        return self.focus.path

    @property
    def cursor(self) -> Cursor | None:
        """Cursor over the focus listing, clamped to its current bounds."""
        contents = self.focus.contents
        if not contents:
            return None
        self._index = max(0, min(self._index, len(contents) - 1))
        return Cursor(self._index, contents[self._index])

    def cursor_is_dir(self) -> bool:
        cursor = self.cursor
        return cursor is not None and self.focus.is_dir(cursor.path)

    def _push(self, stack: list[HistoryEntry], entry: HistoryEntry) -> None:
        stack.append(entry)
        overflow = len(stack) - self.max_history
        if overflow > 0:
            del stack[:overflow]

    def move_up(self) -> bool:
        cursor = self.cursor
        if cursor is None:
            return False
        if cursor.index > 0:
            self._index = cursor.index - 1
            return True
        last = len(self.focus) - 1
        if self.wrap and last > 0:
            self._index = last
            return True
        return False

    def move_down(self) -> bool:
        cursor = self.cursor
        if cursor is None:
            return False
        last = len(self.focus) - 1
        if cursor.index < last:
            self._index = cursor.index + 1
            return True
        if self.wrap and last > 0:
            self._index = 0
            return True
        return False

    def move_into(self) -> bool:
        """Descend into the directory under the cursor.

        Files are left to the caller. Raises ``FilesystemError`` with all
        state untouched when the directory cannot be listed.
        """
        cursor = self.cursor
        if cursor is None or not self.focus.is_dir(cursor.path):
            return False

        listing = self._open_listing(cursor.path)

        restore_index = 0
        if self.forward and self.forward[-1].path == cursor.path:
            restore_index = self.forward.pop().index
        else:
            self.forward.clear()
        self._push(self.back, HistoryEntry(self.focus.path, cursor.index))
        self.parent = self.focus
        self.focus = listing
        self._index = max(0, restore_index)
        return True

    def move_back(self) -> bool:
        """Return to the most recent ancestor on the back stack.

        No-op when the back stack is empty. Raises ``FilesystemError`` with
        all state untouched when the ancestor cannot be listed; an unlistable
        parent of the ancestor becomes an empty listing, as in ``open``.
        """
        if not self.back:
            return False
        target = self.back[-1]

        focus = self._open_listing(target.path)
        parent_dir = focus.parent
        parent = None
        if parent_dir is not None:
            try:
                parent = self._open_listing(parent_dir)
            except FilesystemError as exc:
                logger.warning("cannot list %s: %s", exc.path, exc.reason)
                parent = focus.empty_at(parent_dir)

        cursor = self.cursor
        self.back.pop()
        self._push(self.forward, HistoryEntry(self.focus.path, cursor.index if cursor else 0))
        self.focus = focus
        self.parent = parent
        self._index = max(0, target.index)
        return True

    def refresh(self, force: bool = False) -> bool:
        """Refresh parent and focus listings; return whether either changed.

        After a focus re-read the cursor follows its previous path by value,
        falling back to the clamped previous index when that path vanished.
        """
        previous = self.cursor
        changed = False
        if self.parent is not None and self.parent.refresh(force):
            changed = True
        if self.focus.refresh(force):
            changed = True
            if previous is not None:
                index = self.focus.index_of(previous.path)
                self._index = previous.index if index is None else index
        return changed


__all__ = ["Cursor", "HistoryEntry", "NavigationState", "MAX_HISTORY"]
