"""
Splits input text into paragraphs and words. A paragraph is the content between two line
terminators and a word is a maximal run of characters that contains neither a space nor a line
terminator. Both `\\r\\n` and a lone `\\r` are treated like `\\n`.
"""
from __future__ import annotations

from typing import NamedTuple

from textalign.lib.exceptions import WordTooLong

__all__ = ['Word', 'paragraphs', 'tokenize']


class Word(NamedTuple):
    """
    An immutable slice of the input text without spaces. The length is measured in code points.
    """
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    def __str__(self):
        return self.text


def paragraphs(content: str) -> list[str]:
    """
    Split the content at line terminators. A single terminator at the very end of the content does
    not open another, empty paragraph.
    """
    content = content.replace('\r\n', '\n').replace('\r', '\n')
    if not content:
        return []
    if content.endswith('\n'):
        content = content[:-1]
    return content.split('\n')


def tokenize(content: str, max_width: int | None = None) -> list[list[Word]]:
    """
    Tokenize the entire content into a list of paragraphs, each of which is a list of words. Runs
    of spaces collapse, so that no word is ever empty; a blank input line becomes an empty
    paragraph. If `max_width` is given, every word is checked against it and `WordTooLong` is
    raised for the first word that exceeds it.
    """
    result = []
    for paragraph in paragraphs(content):
        words = [Word(chunk) for chunk in paragraph.split(' ') if chunk]
        if max_width is not None:
            for word in words:
                if word.length > max_width:
                    raise WordTooLong(word.text, max_width)
        result.append(words)
    return result
