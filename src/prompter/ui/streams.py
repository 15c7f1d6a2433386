"""
Line-oriented input and output collaborators used by the prompt engine.
"""
from __future__ import annotations
import sys
from typing import Iterable, Protocol, TextIO

from prompter.core.errors import InputExhausted


class LineReader(Protocol):
    def read_line(self) -> str:
        """Return the next physical line without its terminator, or raise InputExhausted."""
        ...


class OutputSink(Protocol):
    def write(self, text: str) -> None:
        ...


class TextStreamReader:
    """Reads lines from a text stream (stdin unless told otherwise)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise InputExhausted("end of stream")
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line


class TextStreamSink:
    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class ScriptedReader:
    """Hands out a fixed sequence of lines, then reports exhaustion."""

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self.consumed = 0

    @property
    def remaining(self) -> int:
        return len(self._lines) - self.consumed

    def read_line(self) -> str:
        if self.consumed >= len(self._lines):
            raise InputExhausted(f"script ended after {self.consumed} line(s)")
        line = self._lines[self.consumed]
        self.consumed += 1
        return line
