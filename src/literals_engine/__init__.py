"""Selection-scoped literal conversion for line-oriented source buffers."""

__all__ = [
    "buffer",
    "commands",
    "runtime",
    "selection",
    "transforms",
]

__version__ = "0.1.0"
