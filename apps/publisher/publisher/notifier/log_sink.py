"""Operator-facing log sink.

The build console shows one line per message, tagged with its severity.
This output is separate from the diagnostic logging configured in
publisher.core.logging.
"""

import sys
from typing import Protocol, TextIO


class LogSink(Protocol):
    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...


class ConsoleLogSink:
    """Writes "[LEVEL] message" lines to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdout

    def info(self, message: str) -> None:
        self._write("INFO", message)

    def error(self, message: str) -> None:
        self._write("ERROR", message)

    def success(self, message: str) -> None:
        self._write("SUCCESS", message)

    def _write(self, level: str, message: str) -> None:
        self._stream.write(f"[{level}] {message}\n")
        self._stream.flush()
