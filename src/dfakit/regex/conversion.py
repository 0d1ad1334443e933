"""DFA to regex conversion by state elimination."""

from dataclasses import dataclass
from logging import getLogger
from typing import Dict, FrozenSet, List, Mapping, Set, Tuple

from dfakit.automaton.dfa import DFA
from dfakit.automaton.state import State, fresh_state
from dfakit.regex.ast import (
    EMPTY_SET,
    EMPTY_WORD,
    Regex,
    alternate,
    concatenate,
    kleene_star,
    symbol,
)

logger = getLogger(__name__)

Edge = Tuple[State, State]

TERMINAL_SEPARATOR = "--"


@dataclass(frozen=True, eq=False)
class RegexAutomaton:
    """The automaton left over after eliminating every non-start state.

    Only the start state and the terminal duplicates created for accepting
    states survive; every edge carries a regex.

    Attributes:
        states: Surviving states.
        start: The start state of the original DFA.
        accepting: Surviving accepting states.
        edges: Regex label for each (source, target) pair.
        regex: The regex deciding the language of the original DFA.
    """

    states: FrozenSet[State]
    start: State
    accepting: FrozenSet[State]
    edges: Mapping[Edge, Regex]
    regex: Regex

    def transitions(self) -> List[Tuple[State, Regex, State]]:
        return [(s, r, t) for (s, t), r in sorted(self.edges.items(), key=lambda e: e[0])]


def _add_edge(edges: Dict[Edge, Regex], source: State, target: State, regex: Regex) -> None:
    existing = edges.get((source, target))
    edges[(source, target)] = regex if existing is None else alternate(existing, regex)


class _Eliminator:
    """Mutable working state of one conversion; never escapes :func:`eliminate_states`."""

    def __init__(self, dfa: DFA) -> None:
        self.start = dfa.start
        self.states: Set[State] = set(dfa.states)
        self.accepting: Set[State] = set(dfa.accepting)
        self.edges: Dict[Edge, Regex] = {}
        for source, sym, target in dfa.transitions.triples():
            _add_edge(self.edges, source, target, symbol(sym))

    def eliminate(self, state: State) -> None:
        loop = self.edges.pop((state, state), None)
        loop_star = EMPTY_WORD if loop is None else kleene_star(loop)

        ordered = sorted(self.edges.items(), key=lambda e: e[0])
        incoming = [(s, r) for (s, t), r in ordered if t == state]
        outgoing = [(t, r) for (s, t), r in ordered if s == state]
        for source, _ in incoming:
            del self.edges[(source, state)]
        for target, _ in outgoing:
            del self.edges[(state, target)]

        is_accepting = state in self.accepting
        self.states.discard(state)
        self.accepting.discard(state)

        for index, (source, incoming_regex) in enumerate(incoming):
            through = concatenate(incoming_regex, loop_star)
            if is_accepting:
                # Keep acceptance reachable once ``state`` is gone.
                terminal = fresh_state(
                    f"{state.name}{TERMINAL_SEPARATOR}{index}", self.states
                )
                self.states.add(terminal)
                self.accepting.add(terminal)
                _add_edge(self.edges, source, terminal, through)
            for target, outgoing_regex in outgoing:
                _add_edge(
                    self.edges, source, target, concatenate(through, outgoing_regex)
                )

    def regex(self) -> Regex:
        loop = self.edges.get((self.start, self.start))
        start_star = EMPTY_WORD if loop is None else kleene_star(loop)

        out = EMPTY_WORD if self.start in self.accepting else EMPTY_SET
        for state in sorted(self.accepting - {self.start}):
            edge = self.edges.get((self.start, state))
            if edge is not None:
                out = alternate(out, edge)
        return concatenate(start_star, out)


def eliminate_states(dfa: DFA) -> RegexAutomaton:
    """Eliminate every non-start state of ``dfa``, in name order."""
    eliminator = _Eliminator(dfa)
    for state in sorted(dfa.states - {dfa.start}):
        eliminator.eliminate(state)

    regex = eliminator.regex()
    logger.debug(
        "Eliminated %d states, %d terminal states left",
        len(dfa.states) - 1,
        len(eliminator.accepting - {dfa.start}),
    )
    return RegexAutomaton(
        states=frozenset(eliminator.states),
        start=dfa.start,
        accepting=frozenset(eliminator.accepting),
        edges=dict(eliminator.edges),
        regex=regex,
    )


def to_regex(dfa: DFA) -> Regex:
    """Return a regex deciding the same language as ``dfa``."""
    return eliminate_states(dfa).regex
