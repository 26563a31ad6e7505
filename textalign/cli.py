"""
Reformat the text from a source file into lines of a fixed width. Lines are filled greedily with
as many words as fit and then aligned to the left, to the right, or justified to both sides.
Every line break of the input ends a paragraph, the text within a paragraph is only split at
spaces.

If no destination is given, the output is written to standard output. A width of zero uses the
width of the attached terminal; set TEXTALIGN_TERM_SIZE to override it.
"""
from __future__ import annotations

import dataclasses
import logging
import os
import sys

from argparse import ArgumentTypeError
from typing import Sequence

from textalign import __version__
from textalign.lib.argparser import ArgparseError, TextAlignArgumentParser
from textalign.lib.environment import LogLevel, environment, logger
from textalign.lib.exceptions import ConfigurationError, SinkWriteFailure, WordTooLong
from textalign.lib.tools import exception_to_string, get_terminal_size
from textalign.render import Align
from textalign.sinks import ConsoleSink, FileSink
from textalign.words import tokenize
from textalign.wrap import run

log = logger(__name__)

EXIT_SUCCESS = 0
EXIT_CONFIGURATION = 1
EXIT_FAILURE = 2


def _width(value: str) -> int:
    try:
        width = int(value, 10)
    except ValueError:
        raise ArgumentTypeError(F'expected a non-negative integer for the width, got: {value}')
    if width < 0:
        raise ArgumentTypeError(F'expected a non-negative integer for the width, got: {value}')
    return width


def _align(value: str) -> Align:
    try:
        return Align.parse(value)
    except ValueError as V:
        raise ArgumentTypeError(str(V)) from V


def build_parser() -> TextAlignArgumentParser:
    parser = TextAlignArgumentParser(prog='textalign', description=__doc__)
    parser.add_argument('source', metavar='SOURCE',
        help='Path of the text file to be reformatted, or - to read standard input.')
    parser.add_argument('width', metavar='WIDTH', type=_width,
        help='The maximum number of characters per line.')
    parser.add_argument('align', metavar='ALIGN', type=_align,
        help='One of left, right, or justify; capitalization is ignored.')
    parser.add_argument('destination', metavar='DESTINATION', nargs='?', default=None,
        help='Optional path of a file to write the output to.')
    parser.add_argument('-g', '--ragged', action='store_true',
        help='Align the last line of every paragraph to the left.')
    parser.add_argument('-v', '--verbose', action='count', default=0,
        help='Specify up to two times to increase log level.')
    parser.add_argument('-q', '--quiet', action='store_true',
        help='Disable all log output.')
    parser.add_argument('--version', action='version', version=F'%(prog)s {__version__}')
    return parser


@dataclasses.dataclass
class Config:
    """
    The validated command line configuration.
    """
    source: str
    width: int
    align: Align
    destination: str | None = None
    ragged: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @classmethod
    def build(cls, argv: Sequence[str]) -> Config:
        """
        Parse the given command line arguments, excluding the program name.
        """
        parser = build_parser()
        try:
            args = parser.parse_args_safely(argv)
        except ArgparseError as AE:
            raise ConfigurationError(str(AE)) from AE
        width = args.width
        if width == 0:
            width = get_terminal_size()
            if not width:
                raise ConfigurationError(
                    'A width of zero was given, but the terminal width could not be determined.')
        if args.quiet:
            log_level = LogLevel.NONE
        elif args.verbose:
            log_level = LogLevel.FromVerbosity(args.verbose)
        else:
            log_level = environment.verbosity.value or LogLevel.WARNING
        return cls(
            source=args.source,
            width=width,
            align=args.align,
            destination=args.destination,
            ragged=args.ragged,
            log_level=log_level,
        )

    def read(self) -> str:
        """
        Read the entire source text.
        """
        try:
            if self.source == '-':
                return sys.stdin.read()
            with open(self.source, 'r', encoding='utf8', newline='') as stream:
                return stream.read()
        except (OSError, UnicodeDecodeError) as E:
            raise ConfigurationError(F'Unable to read {self.source}: {exception_to_string(E)}') from E


def report(message: str, stream=None):
    """
    Print a message to standard error; it is colored red when standard error is a terminal.
    """
    stream = stream or sys.stderr
    if environment.colorless.value or not stream.isatty():
        print(message, file=stream)
        return
    import colorama
    if os.name == 'nt':
        stream = colorama.AnsiToWin32(stream).stream
    print(F'{colorama.Fore.RED}{message}{colorama.Style.RESET_ALL}', file=stream)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line interface and return the exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = Config.build(argv)
        content = config.read()
    except ConfigurationError as CE:
        report(F'Problem parsing parameters: {CE}')
        return EXIT_CONFIGURATION

    logging.getLogger('textalign').setLevel(config.log_level)
    log.debug(F'read {len(content)} characters from {config.source}')

    try:
        tokenize(content, config.width)
        if config.destination is None:
            run(content, ConsoleSink(), config.width, config.align, config.ragged)
        else:
            with FileSink(config.destination) as sink:
                run(content, sink, config.width, config.align, config.ragged)
    except WordTooLong as WE:
        report(F'Unable to align text: {WE}')
        return EXIT_FAILURE
    except SinkWriteFailure as SE:
        report(F'Unable to write output: {SE}')
        return EXIT_FAILURE

    return EXIT_SUCCESS


def entry():
    sys.exit(main())
