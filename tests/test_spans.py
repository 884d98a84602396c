from __future__ import annotations

import pytest

from texcite.adapters.buffer import TextBuffer
from texcite.core.spans import Span


def test_span_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        Span(3, 1)
    with pytest.raises(ValueError):
        Span(-1, 2)


def test_span_helpers() -> None:
    span = Span(2, 5)

    assert len(span) == 3
    assert span.contains(2)
    assert span.contains(4)
    assert not span.contains(5)
    assert span.slice("abcdefg") == "cde"


def test_buffer_insert_moves_caret() -> None:
    buffer = TextBuffer("ac", point=1)

    buffer.insert("b")

    assert buffer.text == "abc"
    assert buffer.point == 2


def test_buffer_defaults_caret_to_end() -> None:
    assert TextBuffer("abc").point == 3


def test_buffer_rejects_out_of_range_caret() -> None:
    buffer = TextBuffer("abc")

    with pytest.raises(ValueError):
        buffer.point = 4
    with pytest.raises(ValueError):
        TextBuffer("abc", point=-1)


def test_buffer_inserts_comma_joined_keys() -> None:
    buffer = TextBuffer("", point=0)

    buffer.insert_comma_joined(["a", "b", "c"])

    assert buffer.text == "a, b, c"
    assert buffer.point == 7


def test_buffer_offset_for_line_and_column() -> None:
    buffer = TextBuffer("first\nsecond\r\nthird")

    assert buffer.offset_for(1, 1) == 0
    assert buffer.offset_for(2, 3) == 8
    assert buffer.offset_for(3, 6) == 19
    with pytest.raises(ValueError):
        buffer.offset_for(4, 1)
    with pytest.raises(ValueError):
        buffer.offset_for(2, 9)
