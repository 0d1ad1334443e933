"""The immutable deterministic finite automaton."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from dfakit.automaton.alphabet import Alphabet, Symbol
from dfakit.automaton.relation import Relation, TransitionFunction
from dfakit.automaton.state import State
from dfakit.exceptions import InvalidWordError, MalformedAutomatonError

StateLike = Union[State, str]


def _as_state(state: StateLike) -> State:
    return state if isinstance(state, State) else State(state)


@dataclass(frozen=True)
class DFA:
    """Deterministic Finite Automaton.

    All invariants are checked once, at construction; a DFA value is
    well-formed for its whole lifetime. Algorithms never mutate a DFA,
    they return new ones.

    Attributes:
        states: The finite state set.
        alphabet: The input alphabet.
        transitions: The (possibly partial) transition function.
        start: The start state, a member of ``states``.
        accepting: The accepting states, a subset of ``states``.
    """

    states: FrozenSet[State]
    alphabet: Alphabet
    transitions: TransitionFunction
    start: State
    accepting: FrozenSet[State] = frozenset()

    def __post_init__(self) -> None:
        states = frozenset(self.states)
        accepting = frozenset(self.accepting)
        transitions = self.transitions
        if not isinstance(transitions, TransitionFunction):
            transitions = TransitionFunction.from_triples(transitions)

        if not accepting <= states:
            raise MalformedAutomatonError(
                "The accepting states must be a subset of the state set"
            )
        if self.start not in states:
            raise MalformedAutomatonError(
                f"The start state {self.start} is not in the state set"
            )
        for source, symbol, target in transitions.triples():
            if source not in states or target not in states:
                raise MalformedAutomatonError(
                    f"The transition ({source}, {symbol}) -> {target} "
                    "uses a state outside the state set"
                )
            if symbol not in self.alphabet:
                raise MalformedAutomatonError(
                    f"The transition ({source}, {symbol}) -> {target} "
                    "uses a symbol outside the alphabet"
                )

        object.__setattr__(self, "states", states)
        object.__setattr__(self, "accepting", accepting)
        object.__setattr__(self, "transitions", transitions)

    @property
    def non_accepting(self) -> FrozenSet[State]:
        return self.states - self.accepting

    def is_complete(self) -> bool:
        """Check whether a transition is defined for every state and symbol."""
        # Every key is a distinct (state, symbol) pair from states x alphabet.
        return len(self.transitions) == len(self.states) * len(self.alphabet)

    def step(self, state: State, symbol: Symbol) -> Optional[State]:
        return self.transitions.apply(state, symbol)

    def run(self, word: str) -> Optional[State]:
        """Return the state reached by reading ``word``, or None on a dead end."""
        if not self.alphabet.is_in_kleene_star(word):
            raise InvalidWordError(word, str(self.alphabet))
        current: Optional[State] = self.start
        for char in word:
            current = self.transitions.apply(current, Symbol(char))
            if current is None:
                return None
        return current

    def accepts(self, word: str) -> bool:
        """Check whether this automaton accepts ``word``.

        A missing transition rejects the word.

        Raises:
            InvalidWordError: If ``word`` uses characters outside the alphabet.
        """
        return self.run(word) in self.accepting

    def accepts_of_length(self, length: int) -> Set[str]:
        """All accepted words of exactly ``length`` symbols."""
        return self._accepted_words(length, exact=True)

    def accepts_until_length(self, length: int) -> Set[str]:
        """All accepted words of at most ``length`` symbols."""
        return self._accepted_words(length, exact=False)

    def _accepted_words(self, max_depth: int, exact: bool) -> Set[str]:
        accepted: Set[str] = set()
        if max_depth < 0:
            return accepted
        symbols = list(self.alphabet)
        stack: List[Tuple[State, str]] = [(self.start, "")]
        while stack:
            state, word = stack.pop()
            depth = len(word)
            if (not exact or depth == max_depth) and state in self.accepting:
                accepted.add(word)
            if depth == max_depth:
                continue
            for symbol in symbols:
                target = self.transitions.apply(state, symbol)
                if target is not None:
                    stack.append((target, word + symbol.char))
        return accepted

    def inverse_transition_relation(self) -> Relation:
        """The relation ((target, symbol), source) for every transition."""
        return Relation(
            frozenset(((t, a), s) for s, a, t in self.transitions.triples())
        )

    def with_alphabet(self, alphabet: Alphabet) -> "DFA":
        """The same automaton over a different alphabet (may become partial)."""
        return DFA(self.states, alphabet, self.transitions, self.start, self.accepting)

    def with_accepting(self, accepting: Iterable[State]) -> "DFA":
        return DFA(
            self.states, self.alphabet, self.transitions, self.start, frozenset(accepting)
        )

    def __str__(self) -> str:
        def names(states: Iterable[State]) -> str:
            return "[" + ", ".join(s.name for s in sorted(states)) + "]"

        return "\n".join(
            [
                "{",
                f'"States": {names(self.states)},',
                f'"Alphabet": {self.alphabet},',
                f'"TransitionFunction": {self.transitions},',
                f'"StartState": {self.start},',
                f'"AcceptingStates": {names(self.accepting)}',
                "}",
            ]
        )


def build_dfa(
    states: Iterable[str],
    alphabet: Iterable[str],
    transitions: Iterable[Tuple[str, str, str]],
    start: str,
    accepting: Iterable[str],
) -> DFA:
    """Build a DFA from plain strings.

    Example:
        >>> dfa = build_dfa(
        ...     states=["s0", "s1"],
        ...     alphabet="ab",
        ...     transitions=[("s0", "a", "s1")],
        ...     start="s0",
        ...     accepting=["s1"],
        ... )
        >>> dfa.accepts("a")
        True
    """
    return DFA(
        states=frozenset(State(name) for name in states),
        alphabet=Alphabet.of(alphabet),
        transitions=TransitionFunction.from_triples(
            (State(s), Symbol(a), State(t)) for s, a, t in transitions
        ),
        start=State(start),
        accepting=frozenset(State(name) for name in accepting),
    )


def empty_set_dfa(alphabet: Alphabet, start: StateLike = "q0") -> DFA:
    """A single-state DFA without transitions that accepts nothing."""
    start_state = _as_state(start)
    return DFA(frozenset([start_state]), alphabet, TransitionFunction(), start_state)


def universal_dfa(alphabet: Alphabet, start: StateLike = "q0") -> DFA:
    """A single accepting state looping on every symbol; accepts every word."""
    start_state = _as_state(start)
    return DFA(
        frozenset([start_state]),
        alphabet,
        TransitionFunction.from_triples(
            (start_state, symbol, start_state) for symbol in alphabet
        ),
        start_state,
        frozenset([start_state]),
    )
