"""Preview content for directories, text files and unreadable entries."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm.directory_model import SortPolicy
from lazyfm.errors import FilesystemError
from lazyfm.preview import Preview, build_preview


def _preview(path: Path, *, is_dir: bool, no_color: bool = True, max_lines: int = 10) -> Preview:
    return build_preview(
        path,
        is_dir=is_dir,
        sort_policy=SortPolicy.DIRS_FIRST,
        max_lines=max_lines,
        style="monokai",
        no_color=no_color,
    )


class DirectoryPreviewTests(unittest.TestCase):
    def test_lists_children_with_sort_policy(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "b.txt").write_text("b", encoding="utf-8")
            (root / "Zdir").mkdir()

            preview = _preview(root, is_dir=True)

            self.assertEqual(preview.entries, (root / "Zdir", root / "b.txt"))
            self.assertEqual(preview.dirs, frozenset({root / "Zdir"}))

    def test_empty_directory_notice(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(_preview(Path(tmp), is_dir=True).notice, "Empty...")

    def test_permission_denied_notice(self) -> None:
        error = FilesystemError(Path("/locked"), "Permission denied")
        error.__cause__ = PermissionError(13, "Permission denied")
        with mock.patch("lazyfm.preview.scan_directory", side_effect=error):
            preview = _preview(Path("/locked"), is_dir=True)

        self.assertEqual(preview.notice, "Permission denied!")

    def test_other_listing_failures_are_unknown(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            preview = _preview(Path(tmp) / "vanished", is_dir=True)

        self.assertEqual(preview.notice, "Unknown error")


class FilePreviewTests(unittest.TestCase):
    def test_text_head_is_limited_to_max_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.txt"
            target.write_text("".join(f"line {i}\n" for i in range(20)), encoding="utf-8")

            preview = _preview(target, is_dir=False, max_lines=3)

        self.assertEqual(preview.lines, ("line 0", "line 1", "line 2"))

    def test_control_bytes_are_escaped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "evil.txt"
            target.write_text("\x1b[2Jboom\n", encoding="utf-8")

            preview = _preview(target, is_dir=False)

        self.assertEqual(preview.lines, ("\\x1b[2Jboom",))

    def test_colored_preview_uses_pygments(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "main.py"
            target.write_text("def main():\n    return 1\n", encoding="utf-8")

            preview = _preview(target, is_dir=False, no_color=False)

        self.assertTrue(any("\x1b[" in line for line in preview.lines))
        self.assertEqual(len(preview.lines), 2)

    def test_binary_file_notice(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "blob.bin"
            target.write_bytes(b"\x00\x01\x02")

            self.assertEqual(_preview(target, is_dir=False).notice, "Binary file")

    def test_unreadable_file_notice(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "locked.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch("lazyfm.preview.read_text_head", side_effect=PermissionError(13, "denied")):
                preview = _preview(target, is_dir=False)

        self.assertEqual(preview.notice, "Failed to read file")

    def test_missing_entry_and_no_cursor(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            preview = _preview(Path(tmp) / "ghost", is_dir=False)

        self.assertEqual(preview.notice, "Neither a file nor a directory...")
        self.assertEqual(
            build_preview(None, is_dir=False, sort_policy=SortPolicy.DIRS_FIRST, max_lines=5, style="monokai"),
            Preview(),
        )


if __name__ == "__main__":
    unittest.main()
