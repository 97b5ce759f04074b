import unittest

from interactive.chooser.alphabet import KNOWN_KEYS, Alphabet
from interactive.chooser.keys import symbol_for
from sink.errors import ConfigError
from sink.unittest import LoggedTestCase

class TestAlphabet(LoggedTestCase):
    def test_keeps_order(self):
        a = Alphabet('asdf')
        self.assertEqual(list(a), ['a', 's', 'd', 'f'])
        self.assertEqual(len(a), 4)
        self.assertEqual(a[0], 'a')
        self.assertEqual(str(a), 'asdf')

    def test_contains(self):
        a = Alphabet('jk')
        self.assertIn('j', a)
        self.assertNotIn('x', a)
        self.assertNotIn(None, a)
        self.assertNotIn(['j'], a)

    def test_rejects_too_few_keys(self):
        for symbols in ['', 'a']:
            with self.assertRaises(ConfigError):
                Alphabet(symbols)

    def test_rejects_duplicates(self):
        with self.assertRaises(ConfigError) as ctx:
            Alphabet('abca')
        self.logger.info(f'error: {ctx.exception}')
        self.assertIn('a', str(ctx.exception))

    def test_rejects_multi_character_symbols(self):
        with self.assertRaises(ConfigError):
            Alphabet(['ab', 'c'])

    def test_from_characters_only_known_keys(self):
        self.assertEqual(Alphabet.from_characters('09az'), Alphabet('09az'))
        for bad in ['aB', 'a-b', 'a b']:
            with self.assertRaises(ConfigError):
                Alphabet.from_characters(bad)

    def test_known_keys(self):
        self.assertEqual(len(KNOWN_KEYS), 36)
        Alphabet.from_characters(KNOWN_KEYS)


class TestSymbolFor(LoggedTestCase):
    def test_maps_alphabet_keys(self):
        a = Alphabet('asdf')
        self.assertEqual(symbol_for('s', a), 's')

    def test_unrecognised_keys(self):
        a = Alphabet('asdf')
        for data in ['x', 'S', '\x1b', '\x1b[A', '']:
            self.assertIsNone(symbol_for(data, a))


if __name__ == '__main__':
    unittest.main()
