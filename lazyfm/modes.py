"""Pending-action modes of the browser.

Exactly one mode is active; it decides how the next command is interpreted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .text_input import TextInputBuffer


@dataclass(frozen=True)
class Normal:
    pass


@dataclass(frozen=True)
class AwaitingDeleteConfirmation:
    """Delete targets captured when confirmation was requested."""

    directory: Path
    targets: tuple[Path, ...]
    from_marks: bool


@dataclass
class EditingRename:
    """Rename in progress; ``target`` is fixed when editing starts."""

    target: Path
    buffer: TextInputBuffer = field(default_factory=TextInputBuffer)


Mode = Union[Normal, AwaitingDeleteConfirmation, EditingRename]

NORMAL = Normal()


__all__ = ["Normal", "AwaitingDeleteConfirmation", "EditingRename", "Mode", "NORMAL"]
