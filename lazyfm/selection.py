"""Per-directory mark sets.

Marks are keyed by the directory they were made in, so they survive
navigating away and become relevant again when that directory is revisited.
"""

from __future__ import annotations

from pathlib import Path


class SelectionSet:
    def __init__(self) -> None:
        self._marks: dict[Path, set[Path]] = {}

    def toggle(self, directory: Path, path: Path) -> bool:
        """Flip ``path`` in ``directory``'s marks; return whether it is now marked."""
        marks = self._marks.setdefault(directory, set())
        if path in marks:
            marks.discard(path)
            return False
        marks.add(path)
        return True

    def add(self, directory: Path, path: Path) -> None:
        self._marks.setdefault(directory, set()).add(path)

    def discard(self, directory: Path, path: Path) -> None:
        marks = self._marks.get(directory)
        if marks is not None:
            marks.discard(path)

    def marks(self, directory: Path) -> frozenset[Path]:
        """Snapshot of the marks recorded for ``directory`` (empty if none)."""
        return frozenset(self._marks.get(directory, ()))

    def clear(self, directory: Path) -> None:
        self._marks.pop(directory, None)

    def is_marked(self, path: Path) -> bool:
        return any(path in marks for marks in self._marks.values())


__all__ = ["SelectionSet"]
