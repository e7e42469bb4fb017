"""Ordering policies for directory listings.

A policy is a pure function of two paths; listings apply it through
``sort_key`` so the filesystem is stat'ed once per entry during a scan.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class SortPolicy(Enum):
    DIRS_FIRST = "dirs-first"
    FILES_FIRST = "files-first"
    ALPHABETICAL = "alphabetical"

    @classmethod
    def from_name(cls, name: str) -> SortPolicy:
        """Parse a config/CLI policy name such as ``"dirs-first"``."""
        normalized = name.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        choices = ", ".join(policy.value for policy in cls)
        raise ValueError(f"unknown sort policy {name!r} (expected one of: {choices})")

    def sort_key(self, path: Path, is_dir: bool) -> tuple[int, str, str]:
        """Return a total-order key: group rank, case-folded name, raw name."""
        name = path.name
        if self is SortPolicy.DIRS_FIRST:
            group = 0 if is_dir else 1
        elif self is SortPolicy.FILES_FIRST:
            group = 1 if is_dir else 0
        else:
            group = 0
        return (group, name.casefold(), name)

    def compare(self, a: Path, b: Path) -> int:
        """Compare two paths under this policy, returning -1, 0 or 1."""
        key_a = self.sort_key(a, a.is_dir())
        key_b = self.sort_key(b, b.is_dir())
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0


DEFAULT_SORT_POLICY = SortPolicy.DIRS_FIRST


__all__ = ["SortPolicy", "DEFAULT_SORT_POLICY"]
