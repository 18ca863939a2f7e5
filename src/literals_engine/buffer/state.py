"""Position and selection value types shared by the buffer and editor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """Zero-based line plus a column counted in UTF-16 code units."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Selection:
    """Contiguous text range with ``start`` never after ``end``."""

    start: Position
    end: Position

    @classmethod
    def between(
        cls, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> "Selection":
        return cls(Position(start_line, start_column), Position(end_line, end_column))

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def line_count(self) -> int:
        return self.end.line - self.start.line + 1


__all__ = ["Position", "Selection"]
