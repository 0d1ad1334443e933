"""Input symbols and the finite alphabets they are drawn from."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Union

from dfakit.exceptions import MalformedAutomatonError


@dataclass(frozen=True, order=True)
class Symbol:
    """A single input character.

    Attributes:
        char: The character, a string of length one.
    """

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise MalformedAutomatonError(
                f"A symbol must be exactly one character, got {self.char!r}"
            )

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class Alphabet:
    """A finite, immutable set of symbols.

    Iteration is in character order so every algorithm that walks the
    alphabet behaves the same from run to run.
    """

    symbols: FrozenSet[Symbol] = frozenset()

    def __post_init__(self) -> None:
        symbols = frozenset(self.symbols)
        for symbol in symbols:
            if not isinstance(symbol, Symbol):
                raise MalformedAutomatonError(
                    f"Alphabet members must be symbols, got {symbol!r}"
                )
        object.__setattr__(self, "symbols", symbols)

    @classmethod
    def of(cls, chars: Iterable[str]) -> "Alphabet":
        """Build an alphabet from characters, e.g. ``Alphabet.of("ab")``."""
        return cls(frozenset(Symbol(c) for c in chars))

    def __contains__(self, item: Union[Symbol, str]) -> bool:
        if isinstance(item, str):
            return len(item) == 1 and Symbol(item) in self.symbols
        return item in self.symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(sorted(self.symbols))

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return "[" + ", ".join(str(s) for s in self) + "]"

    def chars(self) -> List[str]:
        return [s.char for s in self]

    def is_in_kleene_star(self, word: str) -> bool:
        """Check whether ``word`` is composed only of this alphabet's symbols."""
        return all(Symbol(c) in self.symbols for c in word)

    def union(self, other: "Alphabet") -> "Alphabet":
        return Alphabet(self.symbols | other.symbols)

    def intersection(self, other: "Alphabet") -> "Alphabet":
        return Alphabet(self.symbols & other.symbols)

    def difference(self, other: "Alphabet") -> "Alphabet":
        return Alphabet(self.symbols - other.symbols)
