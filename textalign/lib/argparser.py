"""
Provides a customized argument parser for the `textalign` command line interface.
"""
from __future__ import annotations

from argparse import (
    ArgumentError,
    ArgumentParser,
    ArgumentTypeError,
    RawDescriptionHelpFormatter,
)
from typing import Sequence

import sys

from textalign.lib.exceptions import WordTooLong
from textalign.lib.tools import get_terminal_size


class ArgparseError(ValueError):
    """
    This custom exception type is thrown from the custom argument parser rather than terminating
    program execution immediately. The `parser` parameter is a reference to the argument parser
    that threw the original argument parsing exception with the given `message`.
    """
    def __init__(self, parser, message):
        self.parser = parser
        super().__init__(message)


def terminalfit(text: str, width: int = 0) -> str:
    """
    Justify the given text to fit the given width, or the terminal width if none is given. Lines
    that are indented are kept as they are.
    """
    from textalign.render import Align
    from textalign.wrap import align_text

    width = width or get_terminal_size(80)
    blocks = []
    for block in text.strip('\n').split('\n\n'):
        if block.startswith(' '):
            blocks.append(block)
            continue
        try:
            fitted = align_text(' '.join(block.split()), width, Align.JUSTIFY, ragged=True)
        except WordTooLong:
            blocks.append(block)
        else:
            blocks.append(fitted.rstrip('\n'))
    return '\n\n'.join(blocks)


class LineWrapRawTextHelpFormatter(RawDescriptionHelpFormatter):
    """
    The help text formatter uses the full width of the terminal and justifies all descriptive
    paragraphs to that width.
    """

    def __init__(self, prog, indent_increment=2, max_help_position=30, width=None):
        super().__init__(prog, indent_increment, max_help_position, width=get_terminal_size(80))

    def add_text(self, text):
        if isinstance(text, str):
            text = terminalfit(text, width=get_terminal_size(80))
        return super().add_text(text)


class TextAlignArgumentParser(ArgumentParser):
    """
    An argument parser that raises `textalign.lib.argparser.ArgparseError` instead of exiting
    when the command line is malformed.
    """

    def __init__(self, prog=None, description=None, add_help=True):
        super().__init__(
            prog=prog,
            description=description,
            add_help=add_help,
            formatter_class=LineWrapRawTextHelpFormatter,
        )
        if sys.version_info >= (3, 14):
            self.color = False

    def error(self, message):
        raise ArgparseError(self, message)

    def parse_args_safely(self, args: Sequence[str], namespace=None):
        try:
            return self.parse_args(args=list(args), namespace=namespace)
        except (ArgumentError, ArgumentTypeError, ArgparseError) as e:
            self.error(str(e))
