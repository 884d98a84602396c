"""Insert citation keys at the caret."""

from __future__ import annotations

from collections.abc import Sequence

from .commands import CommandTable
from .config import CitationConfig
from .exceptions import InsertionAborted
from .locator import require_capability
from .protocols import Aborted, Document, KeyInserter, MacroEngine, Selected, Selector


class CitationInserter:
    """Splice keys into an open citation, or write a new citation macro.

    The collaborators are checked lazily so that a host lacking a capability
    fails on first use with :class:`~texcite.core.exceptions.MissingCollaboratorError`,
    before the document is modified.
    """

    def __init__(
        self,
        document: Document,
        *,
        config: CitationConfig,
        engine: MacroEngine | None,
        key_inserter: KeyInserter | None,
        selector: Selector | None = None,
        table: CommandTable | None = None,
    ) -> None:
        self.document = document
        self.config = config
        self.table = table if table is not None else config.table()
        self._engine = engine
        self._key_inserter = key_inserter
        self._selector = selector
        self.history: list[str] = []

    def insert_citation(
        self,
        keys: Sequence[str],
        invert_prompt: bool = False,
        command: str | None = None,
    ) -> None:
        """Insert ``keys`` comma-separated and leave the caret after the macro."""
        if not keys:
            return

        current_macro_name = require_capability(self._engine, "current_macro_name")
        insert_keys = require_capability(self._key_inserter, "insert_comma_joined")

        current = current_macro_name(self.document.point)
        if current is not None and current in self.table:
            self._skip_forward(",}")
            if self._char_before() not in {"{", "}"}:
                self.document.insert(", ")
        else:
            synthesize_macro = require_capability(self._engine, "synthesize_macro")
            name = self._resolve_command(invert_prompt, command)
            spec = self.table.lookup(name)
            arguments = None
            if spec is not None and self.config.prompt_for_extra_arguments:
                arguments = spec.arguments
            synthesize_macro(name, arguments)

        insert_keys(list(keys))
        self._skip_forward("}")
        if self.document.point < len(self.document.text):
            self.document.point += 1
        else:
            self.document.insert("}")

    def _resolve_command(self, invert_prompt: bool, command: str | None) -> str:
        default = self.config.default_command
        if command:
            return command.strip().lstrip("\\") or default
        if invert_prompt == self.config.prompt_for_cite_style:
            return default

        choose_command = require_capability(self._selector, "choose_command")
        choice = choose_command(self.table.names(), self.history, default)
        match choice:
            case Selected(command=selected):
                return selected.strip().lstrip("\\") or default
            case Aborted():
                raise InsertionAborted("Citation command selection cancelled.")
        raise TypeError(f"Unexpected selector result: {choice!r}")

    def _char_before(self) -> str:
        point = self.document.point
        return self.document.text[point - 1] if point > 0 else ""

    def _skip_forward(self, stops: str) -> None:
        text = self.document.text
        point = self.document.point
        while point < len(text) and text[point] not in stops:
            point += 1
        self.document.point = point


__all__ = ["CitationInserter"]
