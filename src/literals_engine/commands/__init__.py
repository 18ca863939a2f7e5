"""Editor commands exposed to hosts."""

from .convert import (
    DEFAULT_CONTENT_TYPES,
    Completion,
    ConvertLiteralsCommand,
    Invocation,
    UnsupportedContentTypeError,
    configured_content_types,
)

__all__ = [
    "DEFAULT_CONTENT_TYPES",
    "Completion",
    "ConvertLiteralsCommand",
    "Invocation",
    "UnsupportedContentTypeError",
    "configured_content_types",
]
