"""Locate the citation macro enclosing a caret position."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .commands import CommandTable
from .exceptions import MissingCollaboratorError
from .protocols import MacroEngine
from .spans import MacroMatch


def require_capability(collaborator: object | None, capability: str) -> Callable[..., Any]:
    """Return the bound ``capability`` of ``collaborator`` or fail loudly."""
    method = getattr(collaborator, capability, None)
    if not callable(method):
        raise MissingCollaboratorError(capability)
    return method


class BoundaryLocator:
    """Resolve the citation macro around a position through the macro engine."""

    def __init__(self, engine: MacroEngine | None, table: CommandTable) -> None:
        self._engine = engine
        self.table = table

    def locate(self, position: int) -> MacroMatch | None:
        """Return the enclosing citation macro, or ``None`` for any other context."""
        find_enclosing = require_capability(self._engine, "find_enclosing_macro")
        bounds = find_enclosing(position)
        if bounds is None or self.table.lookup(bounds.name) is None:
            return None
        return MacroMatch(command=bounds.name, span=bounds.span)


__all__ = ["BoundaryLocator", "require_capability"]
