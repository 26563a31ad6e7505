"""
Output sinks. A sink has exactly one capability, namely to `textalign.sinks.Sink.write` a string
fragment. The fragment is either written completely, or `textalign.lib.exceptions.SinkWriteFailure`
is raised and the run is aborted.
"""
from __future__ import annotations

import sys

from abc import ABC, abstractmethod
from typing import TextIO

from textalign.lib.exceptions import SinkWriteFailure

__all__ = ['Sink', 'ConsoleSink', 'FileSink', 'MemorySink']


class Sink(ABC):
    """
    Abstract base class for all output sinks.
    """

    @abstractmethod
    def write(self, fragment: str) -> None:
        """
        Record the given fragment. Raises `textalign.lib.exceptions.SinkWriteFailure` if that is
        not possible.
        """
        raise NotImplementedError


class ConsoleSink(Sink):
    """
    Writes to standard output. The stream is looked up at the time of writing unless a specific
    stream was given.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def write(self, fragment: str) -> None:
        try:
            self.stream.write(fragment)
        except (OSError, ValueError) as E:
            raise SinkWriteFailure(F'unable to write to standard output: {E}') from E

    def __repr__(self):
        return F'{self.__class__.__name__}({self.stream!r})'


class FileSink(Sink):
    """
    Writes to a file. The file is created or truncated on construction and closed when the sink is
    closed, which also happens when it is used as a context manager.
    """

    def __init__(self, path: str, encoding: str = 'utf8'):
        self.path = path
        try:
            self._file = open(path, 'w', encoding=encoding, newline='')
        except OSError as E:
            raise SinkWriteFailure(F'unable to open {path} for writing: {E}') from E

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, fragment: str) -> None:
        try:
            self._file.write(fragment)
        except (OSError, ValueError) as E:
            raise SinkWriteFailure(F'unable to write to {self.path}: {E}') from E

    def close(self):
        try:
            self._file.close()
        except OSError as E:
            raise SinkWriteFailure(F'unable to close {self.path}: {E}') from E

    def __enter__(self):
        return self

    def __exit__(self, et, ev, tb):
        self.close()
        return False

    def __repr__(self):
        return F'{self.__class__.__name__}({self.path!r})'


class MemorySink(Sink):
    """
    Collects all fragments in memory; mostly useful for testing and for
    `textalign.wrap.align_text`.
    """

    def __init__(self):
        self.fragments: list[str] = []

    def write(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def getvalue(self) -> str:
        return ''.join(self.fragments)

    def __str__(self):
        return self.getvalue()
