from __future__ import annotations

from texcite.adapters.buffer import TextBuffer
from texcite.adapters.latex import LatexMacroEngine
from texcite.core.commands import DEFAULT_COMMANDS, CommandTable
from texcite.core.keys import citation_at_point, iter_brace_groups, key_at_point, split_keys
from texcite.core.locator import BoundaryLocator
from texcite.core.spans import KeyList, KeyToken, Span


def _locator(text: str) -> BoundaryLocator:
    return BoundaryLocator(LatexMacroEngine(TextBuffer(text)), CommandTable(DEFAULT_COMMANDS))


def _key(text: str, position: int) -> KeyToken | None:
    return key_at_point(text, _locator(text), position)


def _citation(text: str, position: int) -> KeyList | None:
    return citation_at_point(text, _locator(text), position)


def test_key_at_point_on_middle_key() -> None:
    assert _key(r"\cite{a,b,c}", 8) == KeyToken(text="b", span=Span(8, 9))


def test_key_at_point_on_comma_is_none() -> None:
    assert _key(r"\cite{a,b,c}", 7) is None
    assert _key(r"\cite{a,b,c}", 11) is None


def test_key_at_point_trims_whitespace() -> None:
    text = r"\cite{a, b , c}"

    assert _key(text, 8) == KeyToken(text="b", span=Span(9, 10))
    assert _key(text, 10) == KeyToken(text="b", span=Span(9, 10))
    assert _key(text, 13) == KeyToken(text="c", span=Span(13, 14))


def test_key_at_point_on_first_and_last_keys() -> None:
    text = r"\textcite{knuth1984,lamport1994}"

    assert _key(text, 12) == KeyToken(text="knuth1984", span=Span(10, 19))
    assert _key(text, 30) == KeyToken(text="lamport1994", span=Span(20, 31))


def test_key_at_point_on_command_name_is_none() -> None:
    assert _key(r"\cite{a}", 2) is None


def test_key_at_point_inside_note_is_none() -> None:
    text = r"\parencite[see, p.~4]{knuth}"

    assert _key(text, 12) is None
    assert _key(text, 16) is None
    assert _key(text, 24) == KeyToken(text="knuth", span=Span(22, 27))


def test_key_at_point_on_blank_key_is_none() -> None:
    assert _key(r"\cite{a, ,b}", 8) is None


def test_key_at_point_outside_citation_is_none() -> None:
    assert _key(r"\emph{a,b}", 6) is None
    assert _key(r"plain text", 3) is None


def test_citation_at_point_trims_and_preserves_order() -> None:
    text = r"\cite{a, b , c}"

    assert _citation(text, 8) == KeyList(keys=("a", "b", "c"), span=Span(0, 15))


def test_citation_at_point_from_command_name() -> None:
    text = r"See \parencite[p.~4]{knuth,lamport}."

    citation = _citation(text, 6)

    assert citation is not None
    assert citation.keys == ("knuth", "lamport")
    assert citation.span == Span(4, 35)


def test_citation_at_point_keeps_duplicates_and_drops_empty_keys() -> None:
    assert _citation(r"\cite{a,,a,}", 6) == KeyList(keys=("a", "a"), span=Span(0, 12))


def test_citation_at_point_scans_every_brace_group() -> None:
    citation = _citation(r"\cite{a}{b, c}", 2)

    assert citation is not None
    assert citation.keys == ("a", "b", "c")


def test_citation_at_point_is_stable() -> None:
    text = r"Text \autocite{x, y} more"
    locator = _locator(text)

    first = citation_at_point(text, locator, 10)
    second = citation_at_point(text, locator, 10)

    assert first == second == KeyList(keys=("x", "y"), span=Span(5, 20))


def test_citation_at_point_outside_citation_is_none() -> None:
    assert _citation(r"\emph{a,b}", 6) is None


def test_iter_brace_groups_skips_outer_groups() -> None:
    text = "{a{b}c}{d}"

    assert [group.slice(text) for group in iter_brace_groups(text)] == ["b", "d"]


def test_split_keys() -> None:
    assert split_keys(" a,\tb ,\n c,, ") == ["a", "b", "c"]
