"""Output sink protocol and an in-memory sink."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Anything accepting sequential text chunks (files, sys.stdout, io.StringIO)."""

    def write(self, chunk: str, /) -> object: ...


class StringSink:
    """Collects written chunks in memory."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, chunk: str, /) -> int:
        self.chunks.append(chunk)
        return len(chunk)

    def getvalue(self) -> str:
        return "".join(self.chunks)

    def clear(self) -> None:
        self.chunks.clear()
