"""Custom exception hierarchy for citation editing."""

from __future__ import annotations


class CitationError(RuntimeError):
    """Base exception for citation editing failures."""


class MissingCollaboratorError(CitationError):
    """Raised when the host does not provide a required editing capability."""

    def __init__(self, capability: str) -> None:
        super().__init__(f"Host environment does not provide '{capability}'.")
        self.capability = capability


class InsertionAborted(CitationError):
    """Raised when the user cancels the citation command prompt."""


class ConfigurationError(CitationError):
    """Raised when the citation configuration cannot be loaded or validated."""


__all__ = [
    "CitationError",
    "ConfigurationError",
    "InsertionAborted",
    "MissingCollaboratorError",
]
