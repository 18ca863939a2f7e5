"""Host-style source buffer: lines, content type, and reported selections."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, List, Optional, Sequence

from literals_engine.runtime import telemetry

from .document import LineDocument
from .state import Selection

SWIFT_SOURCE_UTI = "public.swift-source"
PLAYGROUND_UTI = "com.apple.dt.playground"


@dataclass(slots=True)
class BufferDelta:
    version: int
    start: int
    removed: tuple[str, ...]
    inserted: tuple[str, ...]
    label: str

    @property
    def line_change(self) -> int:
        return len(self.inserted) - len(self.removed)


class SourceBuffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
        content_uti: str = SWIFT_SOURCE_UTI,
        selections: Iterable[Selection] = (),
    ) -> None:
        self.name = name
        self.document = document or LineDocument()
        self.content_uti = content_uti
        self.selections: List[Selection] = list(selections)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        content_uti: str = SWIFT_SOURCE_UTI,
        selections: Iterable[Selection] = (),
    ) -> "SourceBuffer":
        return cls(
            name=name,
            document=LineDocument.from_text(text),
            content_uti=content_uti,
            selections=selections,
        )

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def text(self) -> str:
        return "".join(self.document.snapshot())

    def lines_at(self, start: int, stop: int) -> list[str]:
        return self.document.get_lines(start, stop)

    def replace_lines(
        self,
        start: int,
        length: int,
        new_lines: Sequence[str],
        *,
        label: str = "replace_lines",
    ) -> BufferDelta:
        with Transaction(self, label) as tx:
            removed = tuple(self.document.get_lines(start, start + length))
            self.document.update_lines(start, start + length, new_lines)
            delta = BufferDelta(
                version=self.document.version,
                start=start,
                removed=removed,
                inserted=tuple(new_lines),
                label=label,
            )
            tx.commit(delta)
        return delta


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: SourceBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.delta: Optional[BufferDelta] = None
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"splice_buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, delta: BufferDelta) -> None:
        self.delta = delta
        telemetry.record_event(
            "buffer.splice",
            level="debug",
            data={
                "buffer": self.buffer.name,
                "start": delta.start,
                "removed": len(delta.removed),
                "inserted": len(delta.inserted),
                "version": delta.version,
            },
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
