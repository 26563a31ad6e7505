"""
The driver that composes tokenizer, line builder, and renderer: `textalign.wrap.run` wraps one
input into lines of bounded width and writes them to a sink.
"""
from __future__ import annotations

from textalign.lib.environment import logger
from textalign.lib.tools import lookahead
from textalign.line import Line, Push
from textalign.render import Align, render
from textalign.sinks import MemorySink, Sink
from textalign.words import tokenize

__all__ = ['run', 'align_text']

LINE_TERMINATOR = '\n'

log = logger(__name__)


def run(content: str, sink: Sink, width: int, align: Align, ragged: bool = False) -> None:
    """
    Wrap the content into lines of at most `width` characters and write them to the sink, aligned
    according to `align`. Each line is followed by a line terminator. Every line terminator in the
    input ends a paragraph; the last line of each paragraph is aligned like all others unless
    `ragged` is set, in which case it is aligned to the left.

    All words are checked against the width before anything is written, so a `WordTooLong` error
    never leaves partial output behind. Errors of the sink are propagated unchanged.
    """
    if not isinstance(align, Align):
        align = Align.parse(align)
    if width < 0:
        raise ValueError(F'The line width must not be negative, got {width}.')

    document = tokenize(content, width)
    final = Align.LEFT if ragged else align
    line = Line(width)
    count = 0

    log.debug(F'wrapping {len(document)} paragraph(s) to width {width} with {align} alignment')

    for words in document:
        if not words:
            sink.write(LINE_TERMINATOR)
            continue
        for last, word in lookahead(words):
            if line.push(word) is Push.REJECTED:
                render(line, sink, width, align)
                sink.write(LINE_TERMINATOR)
                count += 1
                line.clear()
                line.push(word)
            if last:
                render(line, sink, width, final)
                sink.write(LINE_TERMINATOR)
                count += 1
                line.clear()

    log.info(F'wrote {count} line(s)')


def align_text(content: str, width: int, align: Align, ragged: bool = False) -> str:
    """
    Convenience wrapper around `textalign.wrap.run` that returns the output as a string.
    """
    sink = MemorySink()
    run(content, sink, width, align, ragged)
    return sink.getvalue()
