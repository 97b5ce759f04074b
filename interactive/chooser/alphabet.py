from typing import Iterable, Iterator
import string

from sink.errors import ConfigError

# keys with an obvious one character representation
KNOWN_KEYS = string.digits + string.ascii_lowercase


class Alphabet:
    """The keys a user may type to choose a label, in priority order: earlier keys label earlier items"""
    def __init__(self, symbols: Iterable[str]):
        symbols = tuple(symbols)
        for s in symbols:
            if not isinstance(s, str) or len(s) != 1:
                raise ConfigError(f'Keys must be single characters, got {s!r}')
        if len(symbols) < 2:
            raise ConfigError(f'Expected at least two keys, got {len(symbols)}')
        seen = set()
        dupes = []
        for s in symbols:
            if s in seen and s not in dupes:
                dupes.append(s)
            seen.add(s)
        if dupes:
            raise ConfigError(f'Duplicate keys: {"".join(dupes)}')
        self._symbols = symbols
        self._positions = {s: i for i, s in enumerate(symbols)}

    @classmethod
    def from_characters(cls, characters: str) -> 'Alphabet':
        """Build an alphabet from a string like 'asdfjkl', only allowing KNOWN_KEYS"""
        unknown = [c for c in characters if c not in KNOWN_KEYS]
        if unknown:
            raise ConfigError(f'Unknown character: {unknown[0]} (allowed characters are 0-9 and a-z)')
        return cls(characters)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __getitem__(self, i):
        return self._symbols[i]

    def __contains__(self, symbol) -> bool:
        return isinstance(symbol, str) and symbol in self._positions

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return ''.join(self._symbols)

    def __repr__(self) -> str:
        return f'Alphabet({str(self)!r})'
