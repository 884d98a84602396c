"""Value objects describing regions of a document."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range over the document characters.

    Spans are plain values: any edit of the underlying text invalidates them.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end}).")

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, position: int) -> bool:
        """Return whether ``position`` addresses a character inside the span."""
        return self.start <= position < self.end

    def slice(self, text: str) -> str:
        """Return the portion of ``text`` covered by the span."""
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class MacroBounds:
    """Macro reported by the macro engine, not yet checked against the table."""

    name: str
    span: Span


@dataclass(frozen=True, slots=True)
class MacroMatch:
    """Citation macro enclosing a position."""

    command: str
    span: Span


@dataclass(frozen=True, slots=True)
class KeyToken:
    """Single citation key and the exact span of its trimmed text."""

    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class KeyList:
    """Keys of a citation macro in textual order, duplicates included."""

    keys: tuple[str, ...]
    span: Span


__all__ = ["KeyList", "KeyToken", "MacroBounds", "MacroMatch", "Span"]
