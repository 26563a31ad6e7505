"""
Rendering of completed lines. There is exactly one rendering routine, `textalign.render.render`,
which dispatches on the `textalign.render.Align` variant; it writes the line fragment by fragment
to a sink and never modifies the line.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textalign.line import Line
    from textalign.sinks import Sink

__all__ = ['Align', 'render']


class Align(str, Enum):
    """
    The alignment mode. It is chosen once per run.
    """
    LEFT = 'left'
    RIGHT = 'right'
    JUSTIFY = 'justify'

    @classmethod
    def parse(cls, token: str) -> Align:
        """
        Parse an alignment from its name, ignoring capitalization.
        """
        needle = token.strip().lower()
        for item in cls:
            if item.value == needle:
                return item
        options = ', '.join(F'`{item.value}`' for item in cls)
        raise ValueError(F'Align option is incorrect. Expected {options}, got: {token}')

    def __str__(self):
        return self.value


def _gaps(line: Line, width: int, align: Align):
    """
    Generate the number of spaces to be written in front of each word of the line.
    """
    free = width - line.content_length
    if align is Align.RIGHT:
        yield free
        for _ in range(line.word_count - 1):
            yield 1
        return
    yield 0
    if align is Align.LEFT:
        for _ in range(line.word_count - 1):
            yield 1
        return
    big_jump, remainder = divmod(free, max(line.word_count - 1, 1))
    for k in range(line.word_count - 1):
        yield 1 + big_jump + (k < remainder)


def render(line: Line, sink: Sink, width: int, align: Align):
    """
    Write the words of the line to the sink, aligned within the given width.
    """
    if not line:
        return
    for gap, word in zip(_gaps(line, width, align), line):
        if gap > 0:
            sink.write(' ' * gap)
        sink.write(word.text)
