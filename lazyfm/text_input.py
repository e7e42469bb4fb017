"""Single-line editable text with a character-index cursor."""

from __future__ import annotations


class TextInputBuffer:
    """Editable text whose cursor counts characters, not encoded bytes."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.char_index = len(text)

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.text)))

    def move_cursor(self, right: bool) -> None:
        self.char_index = self._clamp(self.char_index + (1 if right else -1))

    def move_left(self) -> None:
        self.move_cursor(False)

    def move_right(self) -> None:
        self.move_cursor(True)

    def insert_char(self, ch: str) -> None:
        """Insert ``ch`` before the cursor and advance past it."""
        index = self._clamp(self.char_index)
        self.text = self.text[:index] + ch + self.text[index:]
        self.char_index = index + len(ch)

    def delete_char(self) -> None:
        """Delete the character before the cursor (backspace)."""
        index = self._clamp(self.char_index)
        if index == 0:
            return
        self.text = self.text[: index - 1] + self.text[index:]
        self.char_index = index - 1

    def reset(self) -> None:
        self.text = ""
        self.char_index = 0

    def split_at_cursor(self) -> tuple[str, str]:
        """Return ``(before, after)`` around the cursor for prompt rendering."""
        index = self._clamp(self.char_index)
        return self.text[:index], self.text[index:]

    def __repr__(self) -> str:
        return f"TextInputBuffer({self.text!r}, char_index={self.char_index})"


__all__ = ["TextInputBuffer"]
