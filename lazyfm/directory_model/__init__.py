"""Domain model for one directory's contents.

This package contains non-UI listing primitives:
- pluggable sort policies
- directory scanning and staleness-gated refresh
"""

from __future__ import annotations

from .listing import DirectoryListing, absolute_path, parent_path, scan_directory, sorted_children
from .sorting import DEFAULT_SORT_POLICY, SortPolicy

__all__ = [
    "DirectoryListing",
    "absolute_path",
    "parent_path",
    "scan_directory",
    "sorted_children",
    "DEFAULT_SORT_POLICY",
    "SortPolicy",
]
