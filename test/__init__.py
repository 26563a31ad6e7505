import logging
import os
import random
import shutil
import string
import tempfile
import textalign
import unittest


__all__ = ['textalign', 'TestBase']


class TestBase(unittest.TestCase):

    def generate_random_text(self, words: int, max_word_length: int = 12) -> str:
        return ' '.join(
            ''.join(random.choice(string.ascii_letters + string.punctuation)
                for _ in range(random.randint(1, max_word_length)))
            for _ in range(words))

    def make_temporary_directory(self) -> str:
        path = tempfile.mkdtemp(prefix='textalign-test-')
        self.addCleanup(shutil.rmtree, path, ignore_errors=True)
        return path

    def make_temporary_file(self, content: str, name: str = 'input.txt') -> str:
        path = os.path.join(self.make_temporary_directory(), name)
        with open(path, 'w', encoding='utf8', newline='') as stream:
            stream.write(content)
        return path

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' texts
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def assertContains(self, container, member, msg=None):
        self.assertIn(member, container, msg)
