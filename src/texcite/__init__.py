"""Locate, extract and insert citation keys in LaTeX sources."""

from __future__ import annotations

from texcite.adapters import (
    ConsoleSelector,
    LatexMacroEngine,
    StaticArguments,
    StaticSelector,
    TextBuffer,
)
from texcite.api import CitationSession
from texcite.core import (
    ArgSlot,
    BoundaryLocator,
    CitationConfig,
    CitationError,
    CitationInserter,
    CommandSpec,
    CommandTable,
    ConfigurationError,
    InsertionAborted,
    KeyList,
    KeyToken,
    MacroMatch,
    MissingCollaboratorError,
    Span,
    citation_at_point,
    key_at_point,
    load_config,
)
from texcite.version import get_version


__version__ = get_version()

__all__ = [
    "ArgSlot",
    "BoundaryLocator",
    "CitationConfig",
    "CitationError",
    "CitationInserter",
    "CitationSession",
    "CommandSpec",
    "CommandTable",
    "ConfigurationError",
    "ConsoleSelector",
    "InsertionAborted",
    "KeyList",
    "KeyToken",
    "LatexMacroEngine",
    "MacroMatch",
    "MissingCollaboratorError",
    "Span",
    "StaticArguments",
    "StaticSelector",
    "TextBuffer",
    "__version__",
    "citation_at_point",
    "key_at_point",
    "load_config",
]
