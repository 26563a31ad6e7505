import logging
import os

from unittest.mock import patch

from textalign.lib.environment import LogFormatter, LogLevel, Setting, columns, logger, switch

from .. import TestBase


class TestLogLevel(TestBase):

    def test_from_verbosity(self):
        self.assertIs(LogLevel.FromVerbosity(0), LogLevel.WARNING)
        self.assertIs(LogLevel.FromVerbosity(1), LogLevel.INFO)
        self.assertIs(LogLevel.FromVerbosity(2), LogLevel.DEBUG)
        self.assertIs(LogLevel.FromVerbosity(9), LogLevel.DEBUG)

    def test_parse(self):
        self.assertIs(LogLevel.parse('2'), LogLevel.DEBUG)
        self.assertIs(LogLevel.parse('info'), LogLevel.INFO)
        self.assertIs(LogLevel.parse('NONE'), LogLevel.NONE)
        with self.assertRaises(ValueError) as context:
            LogLevel.parse('chatty')
        self.assertContains(str(context.exception), 'warning')

    def test_none_silences_critical_messages(self):
        self.assertGreater(LogLevel.NONE, logging.CRITICAL)


class TestSettings(TestBase):

    def test_switch(self):
        for value, expected in [('1', True), ('yes', True), ('ON', True), ('0', False), ('off', False)]:
            self.assertIs(switch(value), expected, msg=value)
        with self.assertRaises(ValueError):
            switch('perhaps')

    def test_columns(self):
        self.assertEqual(columns('0x20'), 32)
        self.assertEqual(columns('80'), 80)
        for value in ('wide', '-4'):
            with self.assertRaises(ValueError):
                columns(value)

    def test_setting_reads_prefixed_variable(self):
        with patch.dict(os.environ, {'TEXTALIGN_TEST': ' 72 '}):
            setting = Setting('TEST', columns, 0)
        self.assertEqual(setting.key, 'TEXTALIGN_TEST')
        self.assertEqual(setting.value, 72)

    def test_setting_default(self):
        with patch.dict(os.environ, clear=True):
            self.assertFalse(Setting('TEST', switch, False).value)
        with patch.dict(os.environ, {'TEXTALIGN_TEST': '  '}):
            self.assertIsNone(Setting('TEST', LogLevel.parse, None).value)

    def test_invalid_value_is_ignored_with_warning(self):
        with patch.dict(os.environ, {'TEXTALIGN_TEST': 'chatty'}), \
                patch('textalign.lib.environment.logger') as log:
            setting = Setting('TEST', LogLevel.parse, None)
        self.assertIsNone(setting.value)
        message, = log.return_value.warning.call_args[0]
        self.assertContains(message, 'TEXTALIGN_TEST')


class TestLogger(TestBase):

    def test_single_handler(self):
        first = logger('textalign.test.single')
        second = logger('textalign.test.single')
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertFalse(first.propagate)

    def test_formatter(self):
        formatter = LogFormatter('{name}: {level}: {message}', style='{')
        record = logging.LogRecord('textalign.wrap', logging.INFO, __file__, 1, 'wrote 3 line(s)', None, None)
        self.assertEqual(formatter.format(record), 'textalign.wrap: info: wrote 3 line(s)')
