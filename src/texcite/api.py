"""High-level session wiring the citation core to the plain-text host."""

from __future__ import annotations

from collections.abc import Sequence

from texcite.adapters.buffer import TextBuffer
from texcite.adapters.latex import LatexMacroEngine
from texcite.core.config import CitationConfig
from texcite.core.document import bibliography_files, cited_keys
from texcite.core.inserter import CitationInserter
from texcite.core.keys import citation_at_point, key_at_point
from texcite.core.locator import BoundaryLocator
from texcite.core.protocols import ArgumentReader, Selector
from texcite.core.spans import KeyList, KeyToken, MacroMatch


class CitationSession:
    """Citation queries and edits over a single :class:`TextBuffer`.

    Queries default to the buffer caret when no position is given.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        config: CitationConfig | None = None,
        *,
        selector: Selector | None = None,
        reader: ArgumentReader | None = None,
    ) -> None:
        self.buffer = buffer
        self.config = config or CitationConfig()
        self.table = self.config.table()
        self.engine = LatexMacroEngine(buffer, reader=reader)
        self.locator = BoundaryLocator(self.engine, self.table)
        self.inserter = CitationInserter(
            buffer,
            config=self.config,
            engine=self.engine,
            key_inserter=buffer,
            selector=selector,
            table=self.table,
        )

    def _position(self, position: int | None) -> int:
        return self.buffer.point if position is None else position

    def locate(self, position: int | None = None) -> MacroMatch | None:
        return self.locator.locate(self._position(position))

    def key_at_point(self, position: int | None = None) -> KeyToken | None:
        return key_at_point(self.buffer.text, self.locator, self._position(position))

    def citation_at_point(self, position: int | None = None) -> KeyList | None:
        return citation_at_point(self.buffer.text, self.locator, self._position(position))

    def insert_citation(
        self,
        keys: Sequence[str],
        invert_prompt: bool = False,
        command: str | None = None,
    ) -> None:
        self.inserter.insert_citation(keys, invert_prompt=invert_prompt, command=command)

    def cited_keys(self, *, unique: bool = False) -> list[str]:
        return cited_keys(
            self.buffer.text, self.engine.iter_bounds(), self.table, unique=unique
        )

    def bibliography_files(self) -> list[str]:
        return bibliography_files(self.buffer.text, self.engine.iter_bounds())


__all__ = ["CitationSession"]
