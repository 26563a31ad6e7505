#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Settings of textalign that are read from environment variables, and the logging setup that is
shared by all modules. Every setting is read from the variable `TEXTALIGN_<NAME>` once, at import
time. A value that cannot be parsed is reported as a warning and the default is used instead.

- `TEXTALIGN_VERBOSITY`: a log level name like `info`, or a number of `-v` switches.
- `TEXTALIGN_TERM_SIZE`: the terminal width to assume when the width argument is zero.
- `TEXTALIGN_COLORLESS`: disables colored error messages.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Callable, Generic, Optional, TypeVar

_T = TypeVar('_T')

PREFIX = 'TEXTALIGN_'
LOG_FORMAT = '{name}: {level}: {message}'


class LogLevel(IntEnum):
    """
    The log levels that can be selected on the command line; `NONE` suppresses all log output.
    """
    NONE    = logging.CRITICAL + 50  # noqa
    ERROR   = logging.ERROR          # noqa
    WARNING = logging.WARNING        # noqa
    INFO    = logging.INFO           # noqa
    DEBUG   = logging.DEBUG          # noqa

    @classmethod
    def FromVerbosity(cls, verbosity: int) -> LogLevel:
        """
        Translate the number of `-v` switches into a log level.
        """
        if verbosity <= 0:
            return cls.WARNING
        if verbosity == 1:
            return cls.INFO
        return cls.DEBUG

    @classmethod
    def parse(cls, value: str) -> LogLevel:
        if value.isdigit():
            return cls.FromVerbosity(int(value))
        try:
            return cls[value.upper()]
        except KeyError:
            choices = ', '.join(level.name.lower() for level in cls)
            raise ValueError(F'unknown log level {value!r}, pick from: {choices}')


class LogFormatter(logging.Formatter):
    """
    Provides the lower case level name of a record as the `level` field.
    """
    def formatMessage(self, record: logging.LogRecord) -> str:
        record.level = record.levelname.lower()
        return super().formatMessage(record)


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger that writes to standard error in the textalign format.
    """
    logger = logging.getLogger(name)
    logger.propagate = False
    if not logger.hasHandlers():
        stream = logging.StreamHandler()
        stream.setFormatter(LogFormatter(LOG_FORMAT, style='{'))
        logger.addHandler(stream)
    return logger


class Setting(Generic[_T]):
    """
    A setting backed by the environment variable `TEXTALIGN_<name>`. When the variable is missing
    or blank, the setting holds the given default.
    """
    key: str
    value: _T

    def __init__(self, name: str, parse: Callable[[str], _T], default: _T):
        self.key = PREFIX + name
        self.default = default
        self.value = self.read(parse)

    def read(self, parse: Callable[[str], _T]) -> _T:
        value = os.environ.get(self.key, '').strip()
        if not value:
            return self.default
        try:
            return parse(value)
        except ValueError as V:
            logger(__name__).warning(F'ignoring {self.key}: {V}')
            return self.default


def switch(value: str) -> bool:
    value = value.lower()
    if value.isdigit():
        return bool(int(value))
    if value in {'yes', 'on', 'true'}:
        return True
    if value in {'no', 'off', 'false'}:
        return False
    raise ValueError(F'expected yes or no, got {value!r}')


def columns(value: str) -> int:
    width = int(value, 0)
    if width < 0:
        raise ValueError(F'expected a non-negative number of columns, got {value}')
    return width


class environment:
    verbosity: Setting[Optional[LogLevel]] = Setting('VERBOSITY', LogLevel.parse, None)
    term_size: Setting[int] = Setting('TERM_SIZE', columns, 0)
    colorless: Setting[bool] = Setting('COLORLESS', switch, False)
