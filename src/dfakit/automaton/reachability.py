"""Forward and reverse reachability over a DFA's transition graph.

All traversals use an explicit worklist, so automata of any size can be
walked without hitting the interpreter's recursion limit.
"""

from collections import deque
from typing import Deque, FrozenSet, Iterable, Set

from dfakit.automaton.alphabet import Symbol
from dfakit.automaton.dfa import DFA
from dfakit.automaton.state import State


def _require_state(dfa: DFA, state: State) -> None:
    if state not in dfa.states:
        raise ValueError(f"{state} is not a state of this automaton")


def reachable_states(dfa: DFA, origin: State) -> FrozenSet[State]:
    """All states reachable from ``origin`` (including itself)."""
    _require_state(dfa, origin)
    symbols = list(dfa.alphabet)
    visited: Set[State] = {origin}
    queue: Deque[State] = deque([origin])
    while queue:
        current = queue.popleft()
        for symbol in symbols:
            target = dfa.transitions.apply(current, symbol)
            if target is not None and target not in visited:
                visited.add(target)
                queue.append(target)
    return frozenset(visited)


def unreachable_states(dfa: DFA, origin: State) -> FrozenSet[State]:
    """All states that cannot be reached from ``origin``."""
    return dfa.states - reachable_states(dfa, origin)


def reaching_states(dfa: DFA, destination: State) -> FrozenSet[State]:
    """All states with a path to ``destination`` (including itself)."""
    _require_state(dfa, destination)
    visited: Set[State] = {destination}
    queue: Deque[State] = deque([destination])
    while queue:
        current = queue.popleft()
        for source in dfa.transitions.preimage_states(current):
            if source not in visited:
                visited.add(source)
                queue.append(source)
    return frozenset(visited)


def non_reaching_states(dfa: DFA, destination: State) -> FrozenSet[State]:
    """All states without a path to ``destination``."""
    return dfa.states - reaching_states(dfa, destination)


def directly_reaching_states(
    dfa: DFA, destinations: Iterable[State], symbol: Symbol
) -> FrozenSet[State]:
    """All states that move into ``destinations`` by reading ``symbol``."""
    reaching: Set[State] = set()
    for destination in destinations:
        reaching.update(dfa.transitions.preimage_states(destination, symbol))
    return frozenset(reaching)
