"""Side-by-side comparison of the languages of two automata."""

from logging import getLogger
from typing import Any, Callable, Dict, List, Optional, Sequence

from dfakit.algorithms import (
    difference,
    equivalent,
    minimized_product_dfa,
    witness_accepted_by_one_rejected_by_two,
)
from dfakit.automaton.alphabet import Alphabet
from dfakit.automaton.completion import complete
from dfakit.automaton.dfa import DFA, universal_dfa
from dfakit.automaton.product import ProductSemantics
from dfakit.config import Config
from dfakit.regex.ast import Regex
from dfakit.regex.conversion import to_regex

logger = getLogger(__name__)


def combine_constraint_automata(alphabet: Alphabet, automata: Sequence[DFA]) -> DFA:
    """Intersect the automata of a set of constraints into one complete DFA.

    Without constraints every word over ``alphabet`` is allowed; a single
    automaton is only completed.
    """
    if not automata:
        return universal_dfa(alphabet)
    if len(automata) == 1:
        return complete(automata[0])
    return complete(minimized_product_dfa(automata, ProductSemantics.INTERSECTION))


class Comparison:
    """Compares the languages of two DFAs.

    Equivalence is decided on construction; witnesses, regexes and word
    listings are computed on first access and cached.
    """

    def __init__(self, first: DFA, second: DFA, config: Optional[Config] = None):
        self.first = first
        self.second = second
        self.config = config or Config.default()
        self._cache: Dict[str, Any] = {}
        self.are_equivalent = equivalent(first, second)
        logger.debug("Automata equivalent: %s", self.are_equivalent)

    @classmethod
    def compare(
        cls, first: DFA, second: DFA, config: Optional[Config] = None
    ) -> "Comparison":
        return cls(first, second, config)

    @classmethod
    def from_constraint_automata(
        cls,
        alphabet: Alphabet,
        first_automata: Sequence[DFA],
        second_automata: Sequence[DFA],
        config: Optional[Config] = None,
    ) -> "Comparison":
        """Compare two constraint sets given as per-constraint automata."""
        return cls(
            combine_constraint_automata(alphabet, first_automata),
            combine_constraint_automata(alphabet, second_automata),
            config,
        )

    @property
    def max_word_length(self) -> int:
        return self.config.max_word_length

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def witness_first_not_in_second(self) -> Optional[str]:
        """A shortest word of L(first) - L(second); None if L(first) is a subset."""
        return self._cached(
            "witness12",
            lambda: witness_accepted_by_one_rejected_by_two(self.first, self.second),
        )

    def witness_second_not_in_first(self) -> Optional[str]:
        """A shortest word of L(second) - L(first); None if L(second) is a subset."""
        return self._cached(
            "witness21",
            lambda: witness_accepted_by_one_rejected_by_two(self.second, self.first),
        )

    def first_regex(self) -> Regex:
        return self._cached("regex1", lambda: to_regex(self.first))

    def second_regex(self) -> Regex:
        return self._cached("regex2", lambda: to_regex(self.second))

    def _words(self, key: str, dfa: Callable[[], DFA]) -> List[str]:
        words = self._cached(
            key, lambda: sorted(dfa().accepts_until_length(self.max_word_length))
        )
        return list(words)

    def words_of_first(self) -> List[str]:
        return self._words("words1", lambda: self.first)

    def words_of_second(self) -> List[str]:
        return self._words("words2", lambda: self.second)

    def words_first_not_in_second(self) -> List[str]:
        return self._words("words12", lambda: difference(self.first, self.second))

    def words_second_not_in_first(self) -> List[str]:
        return self._words("words21", lambda: difference(self.second, self.first))
