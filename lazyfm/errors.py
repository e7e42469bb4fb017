"""Error taxonomy for filesystem-backed browser operations.

None of these are fatal: callers degrade to "state unchanged, keep running".
"""

from __future__ import annotations

from pathlib import Path


class BrowserError(Exception):
    """Base class for recoverable browser failures."""


class FilesystemError(BrowserError):
    """A directory could not be listed (missing, not a directory, no access)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DeletionError(BrowserError):
    """One entry could not be deleted."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot delete {path.name}: {reason}")
        self.path = path
        self.reason = reason


class RenameError(BrowserError):
    """A rename was rejected or failed on disk."""

    def __init__(self, source: Path, destination: str, reason: str) -> None:
        super().__init__(f"cannot rename {source.name} to {destination!r}: {reason}")
        self.source = source
        self.destination = destination
        self.reason = reason


def describe_os_error(exc: OSError) -> str:
    """Return the short human reason carried by an ``OSError``."""
    return exc.strerror or exc.__class__.__name__


__all__ = [
    "BrowserError",
    "FilesystemError",
    "DeletionError",
    "RenameError",
    "describe_os_error",
]
