"""Tests for per-directory mark sets."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazyfm.selection import SelectionSet

DIR_A = Path("/data/a")
DIR_B = Path("/data/b")


class SelectionSetTests(unittest.TestCase):
    def test_toggle_once_marks_exactly_the_path(self) -> None:
        selection = SelectionSet()

        self.assertTrue(selection.toggle(DIR_A, DIR_A / "x"))

        self.assertEqual(selection.marks(DIR_A), frozenset({DIR_A / "x"}))

    def test_toggle_twice_restores_empty_set(self) -> None:
        selection = SelectionSet()

        selection.toggle(DIR_A, DIR_A / "x")
        self.assertFalse(selection.toggle(DIR_A, DIR_A / "x"))

        self.assertEqual(selection.marks(DIR_A), frozenset())

    def test_marks_do_not_leak_between_directories(self) -> None:
        selection = SelectionSet()
        selection.toggle(DIR_A, DIR_A / "x")
        selection.toggle(DIR_B, DIR_B / "y")

        self.assertEqual(selection.marks(DIR_A), frozenset({DIR_A / "x"}))
        self.assertEqual(selection.marks(DIR_B), frozenset({DIR_B / "y"}))
        self.assertEqual(selection.marks(Path("/elsewhere")), frozenset())

    def test_marks_snapshot_is_detached(self) -> None:
        selection = SelectionSet()
        selection.toggle(DIR_A, DIR_A / "x")
        snapshot = selection.marks(DIR_A)

        selection.toggle(DIR_A, DIR_A / "y")

        self.assertEqual(snapshot, frozenset({DIR_A / "x"}))

    def test_is_marked_checks_every_directory(self) -> None:
        selection = SelectionSet()
        selection.add(DIR_B, DIR_B / "y")

        self.assertTrue(selection.is_marked(DIR_B / "y"))
        self.assertFalse(selection.is_marked(DIR_A / "y"))

        selection.discard(DIR_B, DIR_B / "y")
        selection.discard(DIR_A, DIR_A / "never")
        self.assertFalse(selection.is_marked(DIR_B / "y"))

    def test_clear_forgets_one_directory(self) -> None:
        selection = SelectionSet()
        selection.add(DIR_A, DIR_A / "x")
        selection.add(DIR_B, DIR_B / "y")

        selection.clear(DIR_A)

        self.assertEqual(selection.marks(DIR_A), frozenset())
        self.assertEqual(selection.marks(DIR_B), frozenset({DIR_B / "y"}))


if __name__ == "__main__":
    unittest.main()
