from __future__ import annotations

import pytest

from literals_engine.buffer import (
    BufferValidationError,
    Selection,
    SourceBuffer,
    ensure_selection,
    split_lines,
    utf16_length,
    utf16_to_index,
)
from literals_engine.transforms import Subrange, subrange_transform


def test_split_lines_keeps_newlines_without_injecting_one() -> None:
    assert split_lines("a\nb") == ["a\n", "b"]
    assert split_lines("a\nb\n") == ["a\n", "b\n"]
    assert split_lines("\n") == ["\n"]
    assert split_lines("a") == ["a"]
    assert split_lines("") == []


def test_utf16_length_counts_surrogate_pairs_twice() -> None:
    assert utf16_length("abc") == 3
    assert utf16_length("a😀b") == 4
    assert utf16_length("é") == 1


def test_utf16_to_index_maps_offsets_to_code_points() -> None:
    text = "a😀b"

    assert utf16_to_index(text, 0) == 0
    assert utf16_to_index(text, 1) == 1
    assert utf16_to_index(text, 3) == 2
    assert utf16_to_index(text, 4) == 3


@pytest.mark.parametrize("offset", [-1, 2, 5])
def test_utf16_to_index_rejects_offsets_off_a_boundary(offset: int) -> None:
    with pytest.raises(ValueError):
        utf16_to_index("a😀b", offset)


def test_subrange_transform_only_rewrites_its_window() -> None:
    transform = subrange_transform(str.upper)

    assert transform("let 😀 = abc", Subrange(location=9, length=3)) == "let 😀 = ABC"


def test_replace_lines_returns_delta_and_bumps_version() -> None:
    buffer = SourceBuffer.from_text("one\ntwo\nthree\n", name="demo")

    delta = buffer.replace_lines(1, 1, ["2\n", "2b\n"], label="test")

    assert buffer.lines == ("one\n", "2\n", "2b\n", "three\n")
    assert buffer.version == 1
    assert delta.removed == ("two\n",)
    assert delta.inserted == ("2\n", "2b\n")
    assert delta.line_change == 1
    assert delta.label == "test"


def test_ensure_selection_rejects_out_of_range_and_inverted() -> None:
    buffer = SourceBuffer.from_text("ab\ncd")

    assert ensure_selection(buffer, Selection.between(0, 1, 1, 2))

    with pytest.raises(BufferValidationError):
        ensure_selection(buffer, Selection.between(0, 0, 2, 0))
    with pytest.raises(BufferValidationError):
        ensure_selection(buffer, Selection.between(1, 0, 1, 3))
    with pytest.raises(BufferValidationError) as excinfo:
        ensure_selection(buffer, Selection.between(1, 1, 0, 1))
    assert excinfo.value.selection == Selection.between(1, 1, 0, 1)
