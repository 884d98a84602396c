"""Whole-document scans built on the macros reported by the host."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

from .commands import CommandTable
from .keys import iter_brace_groups, split_keys
from .spans import MacroBounds


BIBLIOGRAPHY_COMMANDS = frozenset(
    {"bibliography", "addbibresource", "addglobalbib", "addsectionbib"}
)


def cited_keys(
    text: str,
    macros: Iterable[MacroBounds],
    table: CommandTable,
    *,
    unique: bool = False,
) -> list[str]:
    """Return the keys of every citation macro in textual order.

    With ``unique`` only the first occurrence of each key is kept.
    """
    keys: list[str] = []
    seen: set[str] = set()
    for macro in macros:
        if macro.name not in table:
            continue
        for group in iter_brace_groups(text, macro.span.start, macro.span.end):
            for key in split_keys(group.slice(text)):
                if unique and key in seen:
                    continue
                seen.add(key)
                keys.append(key)
    return keys


def bibliography_files(text: str, macros: Iterable[MacroBounds]) -> list[str]:
    r"""Return the bibliography files declared in the document.

    ``\bibliography{refs,more}`` names BibTeX databases without extension;
    biblatex resources (``\addbibresource{refs.bib}``) are kept verbatim.
    """
    files: list[str] = []
    for macro in macros:
        if macro.name not in BIBLIOGRAPHY_COMMANDS:
            continue
        for group in iter_brace_groups(text, macro.span.start, macro.span.end):
            for name in split_keys(group.slice(text)):
                if macro.name == "bibliography" and not PurePosixPath(name).suffix:
                    name = f"{name}.bib"
                if name not in files:
                    files.append(name)
    return files


__all__ = ["BIBLIOGRAPHY_COMMANDS", "bibliography_files", "cited_keys"]
