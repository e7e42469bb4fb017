"""Width measurement and fitting of styled pane cells."""

from __future__ import annotations

import unittest

from lazyfm.ansi import RESET, clip_ansi_line, display_width, fit_ansi_line


class AnsiCellTests(unittest.TestCase):
    def test_escapes_take_no_columns(self) -> None:
        self.assertEqual(display_width("\033[95mabc\033[0m"), 3)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("é"), 1)

    def test_tab_expands_to_next_stop(self) -> None:
        self.assertEqual(display_width("ab\tc"), 9)
        self.assertEqual(clip_ansi_line("ab\tc", 8), "ab      ")

    def test_clip_keeps_leading_style_and_drops_straddling_wide_char(self) -> None:
        self.assertEqual(clip_ansi_line("\033[7mab日", 3), "\033[7mab")
        self.assertEqual(clip_ansi_line("abc", 0), "")

    def test_fit_pads_and_resets(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 4), "ab  " + RESET)
        self.assertEqual(fit_ansi_line("abcdef", 3), "abc" + RESET)


if __name__ == "__main__":
    unittest.main()
