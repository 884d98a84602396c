"""Resolve citation keys around a caret position.

Both resolvers work on a snapshot of the document text and on the macro span
reported by :class:`~texcite.core.locator.BoundaryLocator`. Scanning uses
explicit character classes: keys are delimited by ``{``, ``}`` and ``,``,
and trimmed of spaces, tabs and line breaks.
"""

from __future__ import annotations

from collections.abc import Iterator

from .locator import BoundaryLocator
from .spans import KeyList, KeyToken, Span


KEY_DELIMITERS = frozenset("{},")
KEY_WHITESPACE = " \t\n\r"


def _opens_key_list(prefix: str) -> bool:
    """Return whether ``prefix`` ends with ``{`` or ``{`` plus brace-free text and ``,``."""
    if prefix.endswith("{"):
        return True
    if not prefix.endswith(","):
        return False
    for char in reversed(prefix):
        if char in "{}":
            return char == "{"
    return False


def _closes_key_list(suffix: str) -> bool:
    """Return whether ``suffix`` starts with ``}`` or ``,`` plus brace-free text and ``}``."""
    if suffix.startswith("}"):
        return True
    if not suffix.startswith(","):
        return False
    for char in suffix:
        if char in "{}":
            return char == "}"
    return False


def key_at_point(text: str, locator: BoundaryLocator, position: int) -> KeyToken | None:
    """Return the citation key under ``position``.

    ``position`` addresses the character at that index. ``None`` is returned
    outside citation macros, on a delimiter, on an empty key, and on text
    that is not part of a brace-delimited key list (notes in brackets, the
    command name).
    """
    match = locator.locate(position)
    if match is None:
        return None
    start, end = match.span.start, match.span.end
    if not start <= position < end or text[position] in KEY_DELIMITERS:
        return None

    begin = position
    while begin > start and text[begin - 1] not in KEY_DELIMITERS:
        begin -= 1
    stop = position
    while stop < end and text[stop] not in KEY_DELIMITERS:
        stop += 1

    if not (_opens_key_list(text[start:begin]) and _closes_key_list(text[stop:end])):
        return None

    run = text[begin:stop]
    key = run.strip(KEY_WHITESPACE)
    if not key:
        return None
    offset = begin + len(run) - len(run.lstrip(KEY_WHITESPACE))
    return KeyToken(text=key, span=Span(offset, offset + len(key)))


def iter_brace_groups(text: str, start: int = 0, end: int | None = None) -> Iterator[Span]:
    """Yield the inner spans of every ``{...}`` group free of nested braces."""
    stop = len(text) if end is None else end
    opening = -1
    for index in range(start, stop):
        char = text[index]
        if char == "{":
            opening = index
        elif char == "}" and opening >= 0:
            yield Span(opening + 1, index)
            opening = -1


def split_keys(payload: str) -> list[str]:
    """Split a comma-separated key list, dropping empty entries."""
    candidates = (part.strip(KEY_WHITESPACE) for part in payload.split(","))
    return [key for key in candidates if key]


def citation_at_point(text: str, locator: BoundaryLocator, position: int) -> KeyList | None:
    """Return every key of the citation macro enclosing ``position``.

    All brace groups of the macro are scanned, so a mandatory note argument
    containing commas contributes spurious keys.
    """
    match = locator.locate(position)
    if match is None:
        return None
    keys: list[str] = []
    for group in iter_brace_groups(text, match.span.start, match.span.end):
        keys.extend(split_keys(group.slice(text)))
    return KeyList(keys=tuple(keys), span=match.span)


__all__ = [
    "KEY_DELIMITERS",
    "KEY_WHITESPACE",
    "citation_at_point",
    "iter_brace_groups",
    "key_at_point",
    "split_keys",
]
