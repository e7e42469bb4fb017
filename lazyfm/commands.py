"""Abstract input commands consumed by the browser state machine.

Input decoding maps raw key tokens onto these; the browser never sees keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class MoveInto:
    pass


@dataclass(frozen=True)
class MoveBack:
    pass


@dataclass(frozen=True)
class ToggleMark:
    pass


@dataclass(frozen=True)
class RequestDelete:
    pass


@dataclass(frozen=True)
class ConfirmYes:
    pass


@dataclass(frozen=True)
class RequestRename:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class InsertChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Command = Union[
    Quit,
    MoveUp,
    MoveDown,
    MoveInto,
    MoveBack,
    ToggleMark,
    RequestDelete,
    ConfirmYes,
    RequestRename,
    Cancel,
    Commit,
    InsertChar,
    Backspace,
    Resize,
]


__all__ = [
    "Quit",
    "MoveUp",
    "MoveDown",
    "MoveInto",
    "MoveBack",
    "ToggleMark",
    "RequestDelete",
    "ConfirmYes",
    "RequestRename",
    "Cancel",
    "Commit",
    "InsertChar",
    "Backspace",
    "Resize",
    "Command",
]
