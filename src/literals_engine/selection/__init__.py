"""Selection resolution and transform splicing."""

from .editor import SelectionEditor, apply_transform
from .normalize import effective_selections, whole_buffer_selection

__all__ = [
    "SelectionEditor",
    "apply_transform",
    "effective_selections",
    "whole_buffer_selection",
]
