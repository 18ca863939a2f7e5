"""The convert-literals editor command and its content-type gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, Optional

from literals_engine.buffer import (
    PLAYGROUND_UTI,
    SWIFT_SOURCE_UTI,
    BufferDelta,
    BufferValidationError,
    SourceBuffer,
)
from literals_engine.runtime import telemetry
from literals_engine.selection import SelectionEditor, effective_selections
from literals_engine.transforms import TransformLike

Completion = Callable[[Optional[Exception]], None]

DEFAULT_CONTENT_TYPES: FrozenSet[str] = frozenset({SWIFT_SOURCE_UTI, PLAYGROUND_UTI})


class UnsupportedContentTypeError(RuntimeError):
    """Raised when a buffer's content type is not one the command handles."""

    def __init__(self, content_uti: str, supported: Iterable[str]) -> None:
        supported_tuple = tuple(sorted(supported))
        super().__init__(
            f"Content type '{content_uti}' is not supported (expected one of {list(supported_tuple)})"
        )
        self.content_uti = content_uti
        self.supported = supported_tuple


def configured_content_types() -> FrozenSet[str]:
    raw = telemetry.env("CONTENT_TYPES")
    if not raw:
        return DEFAULT_CONTENT_TYPES
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


@dataclass(slots=True)
class Invocation:
    """What the host hands a command."""

    buffer: SourceBuffer


class ConvertLiteralsCommand:
    def __init__(
        self,
        transform: TransformLike,
        *,
        supported_content_types: Optional[Iterable[str]] = None,
    ) -> None:
        self.editor = SelectionEditor(transform, label="convert_literals")
        if supported_content_types is None:
            self.supported_content_types = configured_content_types()
        else:
            self.supported_content_types = frozenset(supported_content_types)

    def check_content_type(self, buffer: SourceBuffer) -> None:
        if buffer.content_uti not in self.supported_content_types:
            telemetry.record_event(
                "convert.rejected",
                level="warning",
                data={"buffer": buffer.name, "content_uti": buffer.content_uti},
            )
            raise UnsupportedContentTypeError(
                buffer.content_uti, self.supported_content_types
            )

    def run(self, buffer: SourceBuffer) -> List[BufferDelta]:
        """Convert every selection of ``buffer`` in place and return the splices."""

        self.check_content_type(buffer)
        selections = effective_selections(buffer.selections, buffer)
        with telemetry.span(
            "command::convert_literals",
            component="commands",
            metadata={"buffer": buffer.name, "content_uti": buffer.content_uti},
        ):
            deltas = self.editor.apply(buffer, selections)
        telemetry.record_event(
            "convert.completed",
            data={"buffer": buffer.name, "selections": len(selections)},
        )
        return deltas

    def perform(self, invocation: Invocation, completion: Completion) -> None:
        """Host entry point; ``completion`` is called exactly once."""

        try:
            self.run(invocation.buffer)
        except UnsupportedContentTypeError as exc:
            completion(exc)
            return
        except BufferValidationError as exc:
            telemetry.record_event(
                "convert.invalid_selection",
                level="warning",
                data={"buffer": invocation.buffer.name, "reason": str(exc)},
            )
            completion(exc)
            return
        completion(None)


__all__ = [
    "Completion",
    "ConvertLiteralsCommand",
    "DEFAULT_CONTENT_TYPES",
    "Invocation",
    "UnsupportedContentTypeError",
    "configured_content_types",
]
