"""Apply a text transform to selections of a line-oriented buffer."""

from __future__ import annotations

from typing import List, Sequence

from literals_engine.buffer import (
    BufferDelta,
    LineStore,
    Selection,
    ensure_selection,
    split_lines,
    utf16_length,
)
from literals_engine.runtime import telemetry
from literals_engine.transforms import Subrange, TransformLike, resolve_transform


def _document_order(selection: Selection) -> tuple[int, int]:
    return (selection.start.line, selection.start.column)


class SelectionEditor:
    """Splices transformed text back into the buffer, one selection at a time.

    Selections are applied from the bottom of the document up. A splice may
    change the number of lines, which only shifts lines below it, so indices of
    selections still waiting to be processed stay valid.
    """

    def __init__(self, transform: TransformLike, *, label: str = "apply_transform") -> None:
        self.transform = resolve_transform(transform)
        self.label = label

    def apply(
        self, store: LineStore, selections: Sequence[Selection]
    ) -> List[BufferDelta]:
        for selection in selections:
            ensure_selection(store, selection)

        deltas: List[BufferDelta] = []
        ordered = sorted(selections, key=_document_order, reverse=True)
        with telemetry.span(
            f"selection::{self.label}", metadata={"selections": len(ordered)}
        ):
            for selection in ordered:
                deltas.append(self._apply_one(store, selection))
        return deltas

    def _apply_one(self, store: LineStore, selection: Selection) -> BufferDelta:
        start, end = selection.start, selection.end
        lines = store.lines_at(start.line, end.line + 1)
        code = "".join(lines)

        tail_length = utf16_length(lines[-1]) - end.column
        subrange = Subrange(
            location=start.column,
            length=utf16_length(code) - tail_length - start.column,
        )
        changed = split_lines(self.transform(code, subrange))

        telemetry.record_event(
            "selection.applied",
            level="debug",
            data={
                "start": (start.line, start.column),
                "end": (end.line, end.column),
                "subrange": (subrange.location, subrange.length),
                "lines_before": len(lines),
                "lines_after": len(changed),
            },
        )
        return store.replace_lines(
            start.line, selection.line_count, changed, label=self.label
        )


def apply_transform(
    store: LineStore, selections: Sequence[Selection], transform: TransformLike
) -> List[BufferDelta]:
    return SelectionEditor(transform).apply(store, selections)


__all__ = ["SelectionEditor", "apply_transform"]
