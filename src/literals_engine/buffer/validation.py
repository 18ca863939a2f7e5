"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import Position, Selection
from .sync import BufferValidationError, LineStore
from .text import utf16_length, utf16_to_index


def ensure_position(
    store: LineStore, position: Position, *, selection: Selection | None = None
) -> Position:
    line, column = position.line, position.column
    if line < 0 or line >= store.line_count:
        raise BufferValidationError(
            "Line out of range", selection=selection, position=position
        )
    (text,) = store.lines_at(line, line + 1)
    if column < 0 or column > utf16_length(text):
        raise BufferValidationError(
            "Column out of range", selection=selection, position=position
        )
    try:
        utf16_to_index(text, column)
    except ValueError as exc:
        raise BufferValidationError(
            str(exc), selection=selection, position=position
        ) from exc
    return position


def ensure_selection(store: LineStore, selection: Selection) -> Selection:
    ensure_position(store, selection.start, selection=selection)
    ensure_position(store, selection.end, selection=selection)
    if selection.start > selection.end:
        raise BufferValidationError(
            "Selection start is after its end", selection=selection
        )
    return selection
