"""Resolve which ranges of a buffer a command should act on."""

from __future__ import annotations

from typing import List, Optional, Sequence

from literals_engine.buffer import LineStore, Position, Selection, utf16_length


def whole_buffer_selection(store: LineStore) -> Optional[Selection]:
    """Selection from ``(0, 0)`` to the end of the last line, newline included."""

    if store.line_count == 0:
        return None
    last = store.line_count - 1
    (last_line,) = store.lines_at(last, last + 1)
    return Selection(Position(0, 0), Position(last, utf16_length(last_line)))


def effective_selections(
    selections: Sequence[Selection], store: LineStore
) -> List[Selection]:
    """Return the selections to process.

    No selection at all, or a lone caret, means "the whole buffer"; anything
    else is passed through in the host's order.
    """

    if not selections or (len(selections) == 1 and selections[0].is_empty):
        whole = whole_buffer_selection(store)
        return [whole] if whole is not None else []
    return list(selections)


__all__ = ["effective_selections", "whole_buffer_selection"]
