"""Host collaborators consumed by the citation core."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .commands import ArgSlot
from .spans import MacroBounds


@runtime_checkable
class Document(Protocol):
    """Mutable document text with a caret, owned by the host."""

    point: int

    @property
    def text(self) -> str: ...

    def insert(self, text: str) -> None:
        """Insert ``text`` at the caret and move the caret after it."""
        ...


@runtime_checkable
class MacroEngine(Protocol):
    """Markup-aware primitives supplied by the host."""

    def find_enclosing_macro(self, position: int) -> MacroBounds | None:
        """Return the smallest macro whose span contains ``position``."""
        ...

    def current_macro_name(self, position: int) -> str | None:
        """Return the macro whose argument being typed contains ``position``."""
        ...

    def synthesize_macro(self, command: str, arguments: Sequence[ArgSlot] | None) -> None:
        """Insert a skeleton for ``command`` and leave the caret in its key argument."""
        ...


@runtime_checkable
class KeyInserter(Protocol):
    def insert_comma_joined(self, keys: Sequence[str]) -> None: ...


@runtime_checkable
class ArgumentReader(Protocol):
    def read_argument(self, slot: ArgSlot) -> str | None: ...


@dataclass(frozen=True, slots=True)
class Selected:
    command: str


@dataclass(frozen=True, slots=True)
class Aborted:
    pass


CommandChoice = Selected | Aborted


@runtime_checkable
class Selector(Protocol):
    """Interactive single-choice prompt for a citation command."""

    def choose_command(
        self,
        candidates: Sequence[str],
        history: list[str],
        default: str,
    ) -> CommandChoice: ...


__all__ = [
    "Aborted",
    "ArgumentReader",
    "CommandChoice",
    "Document",
    "KeyInserter",
    "MacroEngine",
    "Selected",
    "Selector",
]
