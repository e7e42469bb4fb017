"""Filesystem effects performed by the browser: deletion and rename.

Both run synchronously and translate ``OSError`` into the browser's own
error types. The browser receives them as injectable callables.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from .errors import DeletionError, RenameError, describe_os_error


def delete_entry(path: Path) -> None:
    """Delete a file, symlink, or directory tree at ``path``."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise DeletionError(path, describe_os_error(exc)) from exc


def validate_entry_name(source: Path, name: str) -> None:
    """Reject names that are empty, special, or contain path separators."""
    if not name:
        raise RenameError(source, name, "name is empty")
    if name in {".", ".."}:
        raise RenameError(source, name, "reserved name")
    separators = {os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators) or "\0" in name:
        raise RenameError(source, name, "name must not contain path separators")


def rename_entry(source: Path, name: str) -> Path:
    """Rename ``source`` to ``name`` within its directory; return the new path.

    Refuses to overwrite an existing entry.
    """
    validate_entry_name(source, name)
    destination = source.parent / name
    if destination == source:
        return destination
    if os.path.lexists(destination):
        raise RenameError(source, name, "destination already exists")
    try:
        os.rename(source, destination)
    except OSError as exc:
        raise RenameError(source, name, describe_os_error(exc)) from exc
    return destination


__all__ = ["delete_entry", "rename_entry", "validate_entry_name"]
