"""Line storage for source buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .text import split_lines


@dataclass(slots=True)
class LineDocument:
    """Mutable list-of-lines storage, each line keeping its trailing newline.

    Only the final line may lack a newline. ``version`` is bumped by every
    splice so hosts can tell whether a command touched the text.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(_lines=split_lines(text))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def update_lines(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace ``[start:end]`` with ``new_lines`` in place."""

        self._lines[start:end] = list(new_lines)
        self.version += 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def get_lines(self, start: int, stop: int) -> List[str]:
        return self._lines[start:stop]
