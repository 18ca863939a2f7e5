"""UTF-16 measurement and line splitting helpers.

Hosts report columns in UTF-16 code units while Python strings index by code
point, so every column that crosses that boundary goes through these helpers.
"""

from __future__ import annotations

from typing import List


def utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def utf16_to_index(text: str, offset: int) -> int:
    """Convert a UTF-16 offset into a code-point index of ``text``.

    Raises ``ValueError`` when the offset is negative, past the end, or lands
    between the two halves of a surrogate pair.
    """

    if offset < 0:
        raise ValueError(f"UTF-16 offset {offset} is negative")
    units = 0
    for index, char in enumerate(text):
        if units == offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
        if units > offset:
            raise ValueError(f"UTF-16 offset {offset} splits a surrogate pair")
    if units == offset:
        return len(text)
    raise ValueError(f"UTF-16 offset {offset} is past the end of the text")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into newline-terminated lines.

    The empty piece after a trailing ``"\\n"`` is dropped, and a final line
    without a newline keeps none.
    """

    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


__all__ = ["split_lines", "utf16_length", "utf16_to_index"]
