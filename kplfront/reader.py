"""Character reader that tracks line and column positions."""

from __future__ import annotations

import os


class Reader:
    """Reads source text one character at a time.

    ``current_char`` is ``None`` once the input is exhausted. The first
    character is read on construction, so lines start at 1 and the column
    of the current character is 1-based.
    """

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self.line_no = 1
        self.col_no = 0
        self.current_char: str | None = None
        self.read_char()

    def read_char(self) -> str | None:
        """Advance to the next character and return it (``None`` at end)."""
        self.current_char = next(self._chars, None)
        self.col_no += 1
        if self.current_char == "\n":
            self.line_no += 1
            self.col_no = 0
        return self.current_char


def open_source(path: str | os.PathLike[str]) -> Reader:
    """Read the file at ``path`` and return a reader positioned on its first char.

    Raises ``OSError`` if the file cannot be read.
    """
    with open(path, encoding="latin-1") as stream:
        return Reader(stream.read())