"""Line buffer abstractions, positions, and UTF-16 text helpers."""

from .buffer import (
    PLAYGROUND_UTI,
    SWIFT_SOURCE_UTI,
    BufferDelta,
    SourceBuffer,
    Transaction,
)
from .document import LineDocument
from .state import Position, Selection
from .sync import BufferValidationError, LineStore
from .text import split_lines, utf16_length, utf16_to_index
from .validation import ensure_position, ensure_selection

__all__ = [
    "PLAYGROUND_UTI",
    "SWIFT_SOURCE_UTI",
    "BufferDelta",
    "SourceBuffer",
    "Transaction",
    "LineDocument",
    "Position",
    "Selection",
    "BufferValidationError",
    "LineStore",
    "split_lines",
    "utf16_length",
    "utf16_to_index",
    "ensure_position",
    "ensure_selection",
]
