"""
The line builder: words are pushed into a `textalign.line.Line` until one no longer fits, at which
point the caller has to render and clear the line before pushing that word again.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator

from textalign.lib.exceptions import WordTooLong
from textalign.words import Word

__all__ = ['Line', 'Push']


class Push(str, Enum):
    """
    The result of pushing a word into a line.
    """
    ACCEPTED = 'accepted'
    """The word was appended to the line."""
    REJECTED = 'rejected'
    """The word does not fit; the line has to be wrapped and the word pushed again."""


class Line:
    """
    An ordered sequence of words whose content length, i.e. the sum of all word lengths plus one
    separating space between each pair of adjacent words, never exceeds `max_width`.
    """

    words: list[Word]
    content_length: int
    max_width: int

    def __init__(self, max_width: int):
        if max_width < 0:
            raise ValueError(F'The line width must not be negative, got {max_width}.')
        self.max_width = max_width
        self.words = []
        self.content_length = 0

    @property
    def word_count(self) -> int:
        return len(self.words)

    def push(self, word: Word | str) -> Push:
        if not isinstance(word, Word):
            word = Word(word)
        if not word.text or ' ' in word.text or '\n' in word.text:
            raise ValueError(F'A word must be non-empty and free of spaces and line breaks, got {word.text!r}.')
        size = word.length
        if size > self.max_width:
            raise WordTooLong(word.text, self.max_width)
        if self.words:
            size += 1
        if self.content_length + size > self.max_width:
            return Push.REJECTED
        self.words.append(word)
        self.content_length += size
        return Push.ACCEPTED

    def clear(self):
        self.words.clear()
        self.content_length = 0

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __len__(self):
        return len(self.words)

    def __repr__(self):
        text = ' '.join(w.text for w in self.words)
        return F'<Line {self.content_length}/{self.max_width}: {text!r}>'
