"""Host adapters for plain LaTeX text."""

from __future__ import annotations

from .buffer import TextBuffer
from .latex import LatexMacroEngine, ParsedMacro, scan_macros
from .selector import ConsoleSelector, StaticArguments, StaticSelector


__all__ = [
    "ConsoleSelector",
    "LatexMacroEngine",
    "ParsedMacro",
    "StaticArguments",
    "StaticSelector",
    "TextBuffer",
    "scan_macros",
]
