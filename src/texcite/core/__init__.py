"""Citation detection and editing primitives."""

from __future__ import annotations

from .commands import DEFAULT_COMMANDS, ArgSlot, CommandSpec, CommandTable
from .config import CitationConfig, load_config
from .document import bibliography_files, cited_keys
from .exceptions import (
    CitationError,
    ConfigurationError,
    InsertionAborted,
    MissingCollaboratorError,
)
from .inserter import CitationInserter
from .keys import citation_at_point, key_at_point
from .locator import BoundaryLocator
from .protocols import (
    Aborted,
    ArgumentReader,
    CommandChoice,
    Document,
    KeyInserter,
    MacroEngine,
    Selected,
    Selector,
)
from .spans import KeyList, KeyToken, MacroBounds, MacroMatch, Span


__all__ = [
    "DEFAULT_COMMANDS",
    "Aborted",
    "ArgSlot",
    "ArgumentReader",
    "BoundaryLocator",
    "CitationConfig",
    "CitationError",
    "CitationInserter",
    "CommandChoice",
    "CommandSpec",
    "CommandTable",
    "ConfigurationError",
    "Document",
    "InsertionAborted",
    "KeyInserter",
    "KeyList",
    "KeyToken",
    "MacroBounds",
    "MacroEngine",
    "MacroMatch",
    "MissingCollaboratorError",
    "Selected",
    "Selector",
    "Span",
    "bibliography_files",
    "citation_at_point",
    "cited_keys",
    "key_at_point",
    "load_config",
]
