"""
Exceptions raised by textalign. All of them derive from `textalign.lib.exceptions.TextAlignException`
so that callers can catch everything the package raises on purpose with a single clause.
"""
from __future__ import annotations


class TextAlignException(Exception):
    """
    Base class for all exceptions raised deliberately by textalign.
    """


class WordTooLong(TextAlignException, ValueError):
    """
    Raised when a single word is longer than the configured line width. No line can ever hold such
    a word, so the whole run is aborted before anything is written.
    """
    def __init__(self, word: str, width: int):
        self.word = word
        self.width = width
        super().__init__(
            F'word of length {len(word)} does not fit into a line of width {width}: {word!r}')


class SinkWriteFailure(TextAlignException, OSError):
    """
    Raised by a `textalign.sinks.Sink` when a fragment could not be written. The original error is
    available as the `__cause__` of this exception.
    """


class ConfigurationError(TextAlignException, ValueError):
    """
    Raised by the command line interface when the given parameters are missing or invalid.
    """
