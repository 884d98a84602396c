"""In-memory document host."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class TextBuffer:
    """Mutable text with a caret, addressed by character offsets."""

    def __init__(self, text: str = "", point: int | None = None) -> None:
        self._text = text
        self._point = 0
        self.point = len(text) if point is None else point

    @classmethod
    def from_file(cls, path: Path | str, point: int | None = None) -> TextBuffer:
        with Path(path).open(encoding="utf-8", newline="") as handle:
            return cls(handle.read(), point)

    def write(self, path: Path | str) -> None:
        """Write the text to ``path`` keeping its line endings as they are."""
        with Path(path).open("w", encoding="utf-8", newline="") as handle:
            handle.write(self._text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def point(self) -> int:
        return self._point

    @point.setter
    def point(self, value: int) -> None:
        if not 0 <= value <= len(self._text):
            raise ValueError(f"Caret {value} is outside the buffer (0-{len(self._text)}).")
        self._point = value

    def insert(self, text: str) -> None:
        """Insert ``text`` at the caret and move the caret after it."""
        point = self._point
        self._text = f"{self._text[:point]}{text}{self._text[point:]}"
        self._point = point + len(text)

    def insert_comma_joined(self, keys: Sequence[str]) -> None:
        self.insert(", ".join(keys))

    def offset_for(self, line: int, column: int) -> int:
        """Translate a 1-based line and column into a character offset."""
        if line < 1 or column < 1:
            raise ValueError("Lines and columns are numbered from 1.")
        lines = self._text.splitlines(keepends=True)
        if line > max(len(lines), 1):
            raise ValueError(f"Line {line} is past the end of the buffer.")
        offset = sum(len(content) for content in lines[: line - 1])
        current = lines[line - 1] if lines else ""
        width = len(current.rstrip("\r\n"))
        if column - 1 > width:
            raise ValueError(f"Column {column} is past the end of line {line}.")
        return offset + column - 1

    def __repr__(self) -> str:
        return f"TextBuffer(point={self._point}, length={len(self._text)})"


__all__ = ["TextBuffer"]
