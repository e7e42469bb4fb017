"""One directory's sorted contents with a staleness-gated refresh."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from pathlib import Path

from ..errors import FilesystemError, describe_os_error
from .sorting import DEFAULT_SORT_POLICY, SortPolicy

logger = logging.getLogger(__name__)


def absolute_path(path: Path) -> Path:
    """Return ``path`` as a normalized absolute path without resolving links."""
    return Path(os.path.abspath(path))


def parent_path(path: Path) -> Path | None:
    """Return the filesystem parent of ``path``, or ``None`` at the root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


def scan_directory(directory: Path) -> list[tuple[Path, bool]]:
    """List immediate children of ``directory`` as ``(path, is_dir)`` pairs.

    Symlinks pointing at directories count as directories. Raises
    ``FilesystemError`` when the directory cannot be read.
    """
    children: list[tuple[Path, bool]] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append((Path(child.path), is_dir))
    except OSError as exc:
        raise FilesystemError(directory, describe_os_error(exc)) from exc
    return children


def sorted_children(
    children: list[tuple[Path, bool]],
    sort_policy: SortPolicy,
) -> tuple[tuple[Path, ...], frozenset[Path]]:
    """Sort scanned children and split out the set of directory paths."""
    ordered = sorted(children, key=lambda item: sort_policy.sort_key(item[0], item[1]))
    contents = tuple(path for path, _is_dir in ordered)
    dirs = frozenset(path for path, is_dir in ordered if is_dir)
    return contents, dirs


class DirectoryListing:
    """Contents of one directory, kept sorted under one ``SortPolicy``.

    ``refresh_seconds <= 0`` re-reads on every ``refresh`` call; a positive
    value skips re-reads until that much time has passed since the last one.
    """

    def __init__(
        self,
        path: Path,
        contents: tuple[Path, ...],
        dirs: frozenset[Path],
        *,
        sort_policy: SortPolicy = DEFAULT_SORT_POLICY,
        refresh_seconds: float = 0.0,
        monotonic: Callable[[], float] = time.monotonic,
        refreshed_at: float = 0.0,
    ) -> None:
        self.path = path
        self.sort_policy = sort_policy
        self.refresh_seconds = refresh_seconds
        self._monotonic = monotonic
        self._contents = contents
        self._dirs = dirs
        self.refreshed_at = refreshed_at

    @classmethod
    def create(
        cls,
        path: Path,
        *,
        sort_policy: SortPolicy = DEFAULT_SORT_POLICY,
        refresh_seconds: float = 0.0,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> DirectoryListing:
        """List ``path`` synchronously; raises ``FilesystemError`` on failure."""
        path = absolute_path(path)
        contents, dirs = sorted_children(scan_directory(path), sort_policy)
        return cls(
            path,
            contents,
            dirs,
            sort_policy=sort_policy,
            refresh_seconds=refresh_seconds,
            monotonic=monotonic,
            refreshed_at=monotonic(),
        )

    @classmethod
    def empty(
        cls,
        path: Path,
        *,
        sort_policy: SortPolicy = DEFAULT_SORT_POLICY,
        refresh_seconds: float = 0.0,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> DirectoryListing:
        """Build a listing with no contents, eligible for refresh right away."""
        return cls(
            absolute_path(path),
            (),
            frozenset(),
            sort_policy=sort_policy,
            refresh_seconds=refresh_seconds,
            monotonic=monotonic,
            refreshed_at=float("-inf"),
        )

    def empty_at(self, path: Path) -> DirectoryListing:
        """Empty listing for ``path`` sharing this listing's policy and clock."""
        return DirectoryListing.empty(
            path,
            sort_policy=self.sort_policy,
            refresh_seconds=self.refresh_seconds,
            monotonic=self._monotonic,
        )

    @property
    def parent(self) -> Path | None:
        return parent_path(self.path)

    @property
    def contents(self) -> tuple[Path, ...]:
        return self._contents

    def __len__(self) -> int:
        return len(self._contents)

    def is_dir(self, path: Path) -> bool:
        """Return whether ``path`` was a directory when last listed."""
        return path in self._dirs

    def index_of(self, path: Path) -> int | None:
        try:
            return self._contents.index(path)
        except ValueError:
            return None

    def is_stale(self) -> bool:
        if self.refresh_seconds <= 0:
            return True
        return (self._monotonic() - self.refreshed_at) >= self.refresh_seconds

    def refresh(self, force: bool = False) -> bool:
        """Re-list contents when stale; return whether contents were re-read.

        Filesystem errors keep the previous contents and are only logged.
        """
        if not force and not self.is_stale():
            return False
        try:
            children = scan_directory(self.path)
        except FilesystemError as exc:
            logger.debug("refresh of %s failed: %s", self.path, exc.reason)
            return False
        self._contents, self._dirs = sorted_children(children, self.sort_policy)
        self.refreshed_at = self._monotonic()
        return True

    def __repr__(self) -> str:
        return f"DirectoryListing({str(self.path)!r}, entries={len(self._contents)})"


__all__ = [
    "DirectoryListing",
    "absolute_path",
    "parent_path",
    "scan_directory",
    "sorted_children",
]
