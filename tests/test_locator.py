from __future__ import annotations

import pytest

from texcite.adapters.buffer import TextBuffer
from texcite.adapters.latex import LatexMacroEngine
from texcite.core.commands import DEFAULT_COMMANDS, CommandTable
from texcite.core.exceptions import MissingCollaboratorError
from texcite.core.locator import BoundaryLocator
from texcite.core.spans import MacroBounds, MacroMatch, Span


SAMPLE = r"See \citep[p.~4]{knuth, lamport} and \emph{x}."


def _locator(text: str) -> BoundaryLocator:
    return BoundaryLocator(LatexMacroEngine(TextBuffer(text)), CommandTable(DEFAULT_COMMANDS))


def test_locate_anywhere_inside_citation() -> None:
    locator = _locator(SAMPLE)
    expected = MacroMatch(command="citep", span=Span(4, 32))

    for position in range(4, 32):
        assert locator.locate(position) == expected


def test_locate_outside_any_citation() -> None:
    locator = _locator(SAMPLE)

    for position in [*range(0, 4), *range(32, len(SAMPLE))]:
        assert locator.locate(position) is None


def test_locate_ignores_nested_brace_groups() -> None:
    locator = _locator(r"\cite{a}{{b}}")

    assert locator.locate(10) == MacroMatch(command="cite", span=Span(0, 13))


def test_locate_inside_nested_macro_is_not_a_citation() -> None:
    locator = _locator(r"\cite[\emph{x}]{a}")

    assert locator.locate(12) is None
    assert locator.locate(16) == MacroMatch(command="cite", span=Span(0, 18))


def test_locate_works_with_any_engine() -> None:
    class FixedEngine:
        def find_enclosing_macro(self, position: int) -> MacroBounds | None:
            return MacroBounds(name="textcite", span=Span(0, position + 1))

    locator = BoundaryLocator(FixedEngine(), CommandTable(DEFAULT_COMMANDS))

    assert locator.locate(3) == MacroMatch(command="textcite", span=Span(0, 4))


@pytest.mark.parametrize("engine", [None, object()])
def test_locate_without_engine_fails(engine: object | None) -> None:
    locator = BoundaryLocator(engine, CommandTable(DEFAULT_COMMANDS))

    with pytest.raises(MissingCollaboratorError) as excinfo:
        locator.locate(0)

    assert excinfo.value.capability == "find_enclosing_macro"
    assert "find_enclosing_macro" in str(excinfo.value)
