"""Boundary types for driving a host-owned line buffer."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from .state import Position, Selection


class LineStore(Protocol):
    """The read and splice operations a host line buffer must offer."""

    @property
    def line_count(self) -> int:
        ...

    def lines_at(self, start: int, stop: int) -> list[str]:
        """Return lines ``[start, stop)`` verbatim, newlines included."""
        ...

    def replace_lines(
        self, start: int, length: int, new_lines: Sequence[str], *, label: str = ...
    ) -> Any:
        """Replace ``length`` lines from ``start`` with ``new_lines`` in one splice."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a selection does not fit the buffer it targets."""

    def __init__(
        self,
        message: str,
        *,
        selection: Selection | None = None,
        position: Position | None = None,
    ) -> None:
        super().__init__(message)
        self.selection = selection
        self.position = position
