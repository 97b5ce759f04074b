import select
from collections import deque

from interactive.chooser.alphabet import Alphabet


def symbol_for(key_data: str, alphabet: Alphabet) -> str | None:
    """The alphabet symbol a key press stands for, or None if it isn't one"""
    if len(key_data) == 1 and key_data in alphabet:
        return key_data
    return None


class KeyReader:
    """Reads single key presses from the terminal, falling back to /dev/tty when stdin is redirected"""
    def __init__(self, alphabet: Alphabet, input=None):
        self.alphabet = alphabet
        self._input = input
        # keys typed faster than they are consumed arrive in one read
        self._pending = deque()

    def read_symbol(self) -> str | None:
        if not self._pending:
            self._pending.extend(self._read_keys())
        return symbol_for(self._pending.popleft().data, self.alphabet)

    def _read_keys(self) -> list:
        from prompt_toolkit.input import create_input
        if self._input is None:
            self._input = create_input(always_prefer_tty=True)
        inp = self._input
        with inp.raw_mode():
            keys = []
            while not keys:
                select.select([inp.fileno()], [], [])
                # a lone escape stays buffered in the parser until flushed
                keys = inp.read_keys() or inp.flush_keys()
        return keys

    def close(self):
        if self._input is not None:
            self._input.close()
            self._input = None
