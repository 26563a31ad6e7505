from textalign import Word, WordTooLong, tokenize
from textalign.words import paragraphs

from . import TestBase


class TestParagraphs(TestBase):

    def test_empty(self):
        self.assertEqual(paragraphs(''), [])

    def test_single_trailing_terminator_is_dropped(self):
        self.assertEqual(paragraphs('abc\n'), ['abc'])
        self.assertEqual(paragraphs('abc'), ['abc'])

    def test_lone_terminator(self):
        self.assertEqual(paragraphs('\n'), [''])

    def test_embedded_terminators(self):
        self.assertEqual(paragraphs('a\nb\n\nc\n\n'), ['a', 'b', '', 'c', ''])

    def test_windows_and_mac_terminators(self):
        self.assertEqual(paragraphs('a\r\nb\rc\r\n'), ['a', 'b', 'c'])


class TestTokenize(TestBase):

    def test_words(self):
        self.assertEqual(tokenize('Hi there! My name\n'), [[Word('Hi'), Word('there!'), Word('My'), Word('name')]])

    def test_word_attributes(self):
        word = Word('there!')
        self.assertEqual(word.text, 'there!')
        self.assertEqual(word.length, 6)
        self.assertEqual(str(word), 'there!')

    def test_length_counts_code_points(self):
        self.assertEqual(Word('café').length, 4)

    def test_no_empty_words(self):
        self.assertEqual(tokenize('  a  b '), [[Word('a'), Word('b')]])

    def test_blank_line_is_an_empty_paragraph(self):
        self.assertEqual(tokenize('a\n\nb'), [[Word('a')], [], [Word('b')]])

    def test_tabs_are_part_of_words(self):
        self.assertEqual(tokenize('a\tb c'), [[Word('a\tb'), Word('c')]])

    def test_width_check(self):
        self.assertEqual(len(tokenize('abc def', 3)[0]), 2)
        with self.assertRaises(WordTooLong) as context:
            tokenize('abc\ndefg', 3)
        self.assertEqual(context.exception.word, 'defg')
