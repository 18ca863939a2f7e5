"""Contracts for the text transforms that selection edits delegate to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Union

from literals_engine.buffer.text import utf16_to_index


@dataclass(frozen=True, slots=True)
class Subrange:
    """Interval of ``length`` UTF-16 units starting at ``location``."""

    location: int
    length: int

    @property
    def end(self) -> int:
        return self.location + self.length

    def to_slice(self, text: str) -> slice:
        """Translate the UTF-16 interval into a code-point slice of ``text``."""

        if self.length < 0:
            raise ValueError(f"Subrange length {self.length} is negative")
        return slice(utf16_to_index(text, self.location), utf16_to_index(text, self.end))


# Returns the complete replacement for ``text``, not just the subrange.
Transform = Callable[[str, Subrange], str]


class TextConverter(Protocol):
    """Object form of ``Transform``, as literal converters are usually written."""

    def convert(self, text: str, subrange: Subrange) -> str:
        ...


TransformLike = Union[Transform, TextConverter]


def resolve_transform(transform: TransformLike) -> Transform:
    convert = getattr(transform, "convert", None)
    if callable(convert):
        return convert
    if callable(transform):
        return transform
    raise TypeError(f"{transform!r} is neither a transform nor a TextConverter")


def subrange_transform(rewrite: Callable[[str], str]) -> Transform:
    """Wrap a plain ``str -> str`` rewrite so it only touches the subrange.

    Text before and after the subrange is carried over verbatim.
    """

    def _apply(text: str, subrange: Subrange) -> str:
        window = subrange.to_slice(text)
        return text[: window.start] + rewrite(text[window]) + text[window.stop :]

    return _apply


def identity_transform(text: str, subrange: Subrange) -> str:
    del subrange
    return text


__all__ = [
    "Subrange",
    "Transform",
    "TransformLike",
    "TextConverter",
    "identity_transform",
    "resolve_transform",
    "subrange_transform",
]
