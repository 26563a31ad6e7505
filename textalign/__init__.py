R"""
Reformats plain text into lines of a fixed width which are aligned to the left, aligned to the
right, or justified. The main entry point for use from code is `textalign.wrap.run`, which writes
its output to a `textalign.sinks.Sink`:

    >>> from textalign import Align, MemorySink, run
    >>> sink = MemorySink()
    >>> run('Hi there! My name is Roben Li.\n', sink, 10, Align.JUSTIFY)
    >>> print(sink.getvalue(), end='')
    Hi  there!
    My name is
    Roben  Li.

The function `textalign.wrap.align_text` returns the output as a string instead. The command
line interface is implemented in `textalign.cli`.
"""
from __future__ import annotations

__version__ = '0.3.1'
__distribution__ = 'textalign'

from textalign.lib.exceptions import (
    ConfigurationError,
    SinkWriteFailure,
    TextAlignException,
    WordTooLong,
)
from textalign.line import Line, Push
from textalign.render import Align, render
from textalign.sinks import ConsoleSink, FileSink, MemorySink, Sink
from textalign.words import Word, tokenize
from textalign.wrap import align_text, run

__all__ = [
    'Align',
    'ConfigurationError',
    'ConsoleSink',
    'FileSink',
    'Line',
    'MemorySink',
    'Push',
    'Sink',
    'SinkWriteFailure',
    'TextAlignException',
    'Word',
    'WordTooLong',
    'align_text',
    'render',
    'run',
    'tokenize',
]
