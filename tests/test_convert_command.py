from __future__ import annotations

import re
from typing import List, Optional

import pytest

from literals_engine.buffer import (
    PLAYGROUND_UTI,
    Position,
    BufferValidationError,
    Selection,
    SourceBuffer,
)
from literals_engine.commands import (
    DEFAULT_CONTENT_TYPES,
    ConvertLiteralsCommand,
    Invocation,
    UnsupportedContentTypeError,
    configured_content_types,
)
from literals_engine.transforms import Subrange, subrange_transform

SOURCE = "let a = 10\nlet b = 20\n"


class HexConverter:
    """Stand-in literal converter: rewrites decimal integers as hex."""

    def __init__(self) -> None:
        self.calls = 0

    def convert(self, text: str, subrange: Subrange) -> str:
        self.calls += 1
        window = subrange.to_slice(text)
        converted = re.sub(r"\b\d+\b", lambda m: hex(int(m.group())), text[window])
        return text[: window.start] + converted + text[window.stop :]


def make_invocation(
    text: str = SOURCE,
    *,
    content_uti: str = "public.swift-source",
    selections: Optional[List[Selection]] = None,
) -> Invocation:
    buffer = SourceBuffer.from_text(
        text, content_uti=content_uti, selections=selections or []
    )
    return Invocation(buffer=buffer)


def collect(command: ConvertLiteralsCommand, invocation: Invocation) -> list:
    results: list = []
    command.perform(invocation, results.append)
    return results


def test_perform_converts_whole_buffer_without_selection() -> None:
    invocation = make_invocation()
    converter = HexConverter()

    results = collect(ConvertLiteralsCommand(converter), invocation)

    assert results == [None]
    assert invocation.buffer.text == "let a = 0xa\nlet b = 0x14\n"
    assert converter.calls == 1


def test_perform_converts_only_selected_literal() -> None:
    invocation = make_invocation(selections=[Selection.between(1, 8, 1, 10)])

    results = collect(ConvertLiteralsCommand(HexConverter()), invocation)

    assert results == [None]
    assert invocation.buffer.lines == ("let a = 10\n", "let b = 0x14\n")


def test_playground_documents_are_accepted() -> None:
    invocation = make_invocation(content_uti=PLAYGROUND_UTI)

    results = collect(ConvertLiteralsCommand(HexConverter()), invocation)

    assert results == [None]
    assert invocation.buffer.version == 1


def test_unsupported_content_type_reports_error_and_leaves_buffer() -> None:
    invocation = make_invocation(content_uti="public.json")
    converter = HexConverter()

    results = collect(ConvertLiteralsCommand(converter), invocation)

    assert len(results) == 1
    assert isinstance(results[0], UnsupportedContentTypeError)
    assert results[0].content_uti == "public.json"
    assert invocation.buffer.text == SOURCE
    assert invocation.buffer.version == 0
    assert converter.calls == 0


def test_run_raises_on_unsupported_content_type() -> None:
    command = ConvertLiteralsCommand(HexConverter())
    buffer = SourceBuffer.from_text(SOURCE, content_uti="public.plain-text")

    with pytest.raises(UnsupportedContentTypeError):
        command.run(buffer)


def test_invalid_selection_is_reported_before_any_splice() -> None:
    selections = [Selection.between(0, 8, 0, 10), Selection.between(9, 0, 9, 1)]
    invocation = make_invocation(selections=selections)

    results = collect(ConvertLiteralsCommand(HexConverter()), invocation)

    assert len(results) == 1
    assert isinstance(results[0], BufferValidationError)
    assert invocation.buffer.text == SOURCE


def test_run_returns_one_delta_per_selection() -> None:
    buffer = SourceBuffer.from_text(
        SOURCE,
        selections=[Selection.between(0, 8, 0, 10), Selection.between(1, 8, 1, 10)],
    )
    command = ConvertLiteralsCommand(subrange_transform(lambda text: text + ".0"))

    deltas = command.run(buffer)

    assert [delta.start for delta in deltas] == [1, 0]
    assert buffer.text == "let a = 10.0\nlet b = 20.0\n"


def test_content_types_can_be_overridden() -> None:
    command = ConvertLiteralsCommand(
        HexConverter(), supported_content_types=["public.json"]
    )
    invocation = make_invocation("[1]", content_uti="public.json")

    assert collect(command, invocation) == [None]


def test_content_types_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "LITERALS_ENGINE_CONTENT_TYPES", "public.json, public.swift-source"
    )

    assert configured_content_types() == {"public.json", "public.swift-source"}

    monkeypatch.delenv("LITERALS_ENGINE_CONTENT_TYPES")

    assert configured_content_types() == DEFAULT_CONTENT_TYPES


def test_column_inside_surrogate_pair_is_rejected_before_any_splice() -> None:
    text = 'let s = "😀"\nlet n = 1\n'
    selections = [Selection.between(0, 10, 0, 11), Selection.between(1, 8, 1, 9)]
    invocation = make_invocation(text, selections=selections)
    command = ConvertLiteralsCommand(subrange_transform(lambda t: t + ".0"))

    results = collect(command, invocation)

    assert len(results) == 1
    assert isinstance(results[0], BufferValidationError)
    assert results[0].position == Position(0, 10)
    assert invocation.buffer.text == text
    assert invocation.buffer.version == 0
