"""Plain-text LaTeX macro engine.

The engine recognises control words (``\\name`` optionally followed by ``*``)
and the argument groups written immediately after them: ``{...}`` groups with
nested braces and ``[...]`` groups ending at the first ``]`` outside braces.
Escaped characters (``\\{``, ``\\%``) are skipped and ``%`` starts a comment
that runs to the end of the line. A group left open extends to the end of the
text, which is how a citation being typed looks.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import string

from texcite.core.commands import ArgSlot
from texcite.core.protocols import ArgumentReader
from texcite.core.spans import MacroBounds, Span

from .buffer import TextBuffer


logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)


@dataclass(frozen=True, slots=True)
class ParsedMacro:
    """Macro invocation with the inner spans of its argument groups."""

    name: str
    span: Span
    groups: tuple[Span, ...] = ()
    closed: bool = True

    def bounds(self) -> MacroBounds:
        return MacroBounds(name=self.name, span=self.span)


def _skip_comment(text: str, index: int) -> int:
    newline = text.find("\n", index)
    return len(text) if newline < 0 else newline + 1


def _match_group(text: str, opening: int) -> int | None:
    """Return the index of the closing delimiter, ``-1`` for a malformed group.

    ``None`` means the group is still open at the end of the text.
    """
    closer = "}" if text[opening] == "{" else "]"
    depth = 0
    index = opening + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == "%":
            index = _skip_comment(text, index)
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                return index if closer == "}" else -1
            depth -= 1
        elif char == "]" and closer == "]" and depth == 0:
            return index
        index += 1
    return None


def _read_arguments(text: str, index: int) -> tuple[tuple[Span, ...], int, bool]:
    groups: list[Span] = []
    while index < len(text) and text[index] in "{[":
        closing = _match_group(text, index)
        if closing is None:
            groups.append(Span(index + 1, len(text)))
            return tuple(groups), len(text), False
        if closing < 0:
            break
        groups.append(Span(index + 1, closing))
        index = closing + 1
    return tuple(groups), index, True


def scan_macros(text: str) -> list[ParsedMacro]:
    """Return every macro invocation of ``text`` in order of appearance."""
    macros: list[ParsedMacro] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "%":
            index = _skip_comment(text, index)
            continue
        if char != "\\":
            index += 1
            continue

        name_end = index + 1
        while name_end < length and text[name_end] in _LETTERS:
            name_end += 1
        if name_end == index + 1:
            # Control symbol such as \\ or \{.
            index += 2
            continue
        if name_end < length and text[name_end] == "*":
            name_end += 1

        groups, end, closed = _read_arguments(text, name_end)
        macros.append(
            ParsedMacro(
                name=text[index + 1 : name_end],
                span=Span(index, end),
                groups=groups,
                closed=closed,
            )
        )
        # Arguments may hold nested macros.
        index = name_end
    return macros


class LatexMacroEngine:
    """Macro engine over a :class:`TextBuffer`, re-scanning the text per call."""

    def __init__(self, buffer: TextBuffer, reader: ArgumentReader | None = None) -> None:
        self.buffer = buffer
        self.reader = reader

    def macros(self) -> list[ParsedMacro]:
        return scan_macros(self.buffer.text)

    def iter_bounds(self) -> list[MacroBounds]:
        return [macro.bounds() for macro in self.macros()]

    def find_enclosing_macro(self, position: int) -> MacroBounds | None:
        """Return the smallest macro whose span contains ``position``."""
        best: ParsedMacro | None = None
        for macro in self.macros():
            if not macro.span.contains(position):
                continue
            if best is None or len(macro.span) <= len(best.span):
                best = macro
        return best.bounds() if best is not None else None

    def current_macro_name(self, position: int) -> str | None:
        """Return the innermost macro with an argument group open at ``position``."""
        current: ParsedMacro | None = None
        for macro in self.macros():
            if any(group.start <= position <= group.end for group in macro.groups):
                if current is None or macro.span.start >= current.span.start:
                    current = macro
        return current.name if current is not None else None

    def synthesize_macro(self, command: str, arguments: Sequence[ArgSlot] | None) -> None:
        """Insert ``\\command`` with its arguments and park the caret in the key slot.

        A run of adjacent optional arguments is written in full as soon as one
        of them receives a value, so that positional meaning is preserved.
        """
        slots = list(arguments) if arguments is not None else [ArgSlot(label="Keys", key=True)]
        if not any(slot.key for slot in slots):
            slots.append(ArgSlot(label="Keys", key=True))

        values: list[str | None] = [
            None if slot.key else self._read_argument(slot) for slot in slots
        ]

        before = [f"\\{command}"]
        after: list[str] = []
        target = before
        index = 0
        while index < len(slots):
            slot = slots[index]
            if slot.key:
                target.append("{")
                target = after
                target.append("}")
                index += 1
                continue
            if not slot.optional:
                target.append(slot.render(values[index] or ""))
                index += 1
                continue
            run_end = index
            while run_end < len(slots) and slots[run_end].optional:
                run_end += 1
            if any(values[position] for position in range(index, run_end)):
                target.extend(
                    slots[position].render(values[position] or "")
                    for position in range(index, run_end)
                )
            index = run_end

        self.buffer.insert("".join(before))
        caret = self.buffer.point
        self.buffer.insert("".join(after))
        self.buffer.point = caret
        logger.debug("Synthesized \\%s at offset %d", command, caret)

    def _read_argument(self, slot: ArgSlot) -> str | None:
        read = getattr(self.reader, "read_argument", None)
        if read is None:
            return None
        value = read(slot)
        return value or None


__all__ = ["LatexMacroEngine", "ParsedMacro", "scan_macros"]
