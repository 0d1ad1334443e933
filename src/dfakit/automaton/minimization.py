"""DFA reduction: unreachable and dead state pruning, Hopcroft minimization."""

from logging import getLogger
from typing import Dict, FrozenSet, List, Set

from dfakit.automaton.completion import complete
from dfakit.automaton.dfa import DFA, empty_set_dfa
from dfakit.automaton.reachability import (
    directly_reaching_states,
    non_reaching_states,
    unreachable_states,
)
from dfakit.automaton.relation import TransitionFunction
from dfakit.automaton.state import State

logger = getLogger(__name__)

Partition = List[FrozenSet[State]]


def _restrict(dfa: DFA, keep: FrozenSet[State]) -> DFA:
    """Drop every state outside ``keep`` along with the transitions touching it."""
    return DFA(
        keep,
        dfa.alphabet,
        TransitionFunction.from_triples(
            (s, a, t) for s, a, t in dfa.transitions.triples() if s in keep and t in keep
        ),
        dfa.start,
        dfa.accepting & keep,
    )


def remove_unreachable_states(dfa: DFA) -> DFA:
    """Return an equivalent DFA without states unreachable from the start."""
    return _restrict(dfa, dfa.states - unreachable_states(dfa, dfa.start))


def remove_dead_states(dfa: DFA) -> DFA:
    """Return an equivalent DFA without states that cannot reach acceptance.

    A state is dead if it cannot reach any accepting state. If the start
    state itself is dead the result is the single-state DFA accepting
    nothing.
    """
    dead = set(dfa.states)
    for accepting_state in dfa.accepting:
        dead &= non_reaching_states(dfa, accepting_state)

    if dfa.start in dead:
        return empty_set_dfa(dfa.alphabet, dfa.start)
    return _restrict(dfa, dfa.states - dead)


def hopcroft_partition(dfa: DFA) -> Partition:
    """Compute the Myhill-Nerode equivalence classes of a complete DFA.

    The input must be complete and should have its unreachable states
    removed; :func:`minimize` takes care of both.

    Returns:
        The classes as a list of frozensets, in a stable order.
    """
    accepting = dfa.accepting
    non_accepting = dfa.non_accepting
    if not accepting or not non_accepting:
        return [frozenset(dfa.states)]

    partition: Set[FrozenSet[State]] = {accepting, non_accepting}
    worklist: List[FrozenSet[State]] = [accepting, non_accepting]
    in_worklist: Set[FrozenSet[State]] = set(worklist)
    symbols = list(dfa.alphabet)

    while worklist:
        splitter = worklist.pop()
        in_worklist.discard(splitter)

        for symbol in symbols:
            reaching = directly_reaching_states(dfa, splitter, symbol)
            if not reaching:
                continue
            for block in sorted(partition, key=sorted):
                inside = block & reaching
                if not inside or inside == block:
                    continue
                outside = block - inside
                partition.discard(block)
                partition.add(inside)
                partition.add(outside)
                if block in in_worklist:
                    worklist.remove(block)
                    in_worklist.discard(block)
                    worklist.extend([inside, outside])
                    in_worklist.update([inside, outside])
                else:
                    smaller = inside if len(inside) <= len(outside) else outside
                    worklist.append(smaller)
                    in_worklist.add(smaller)

    return sorted(partition, key=sorted)


def minimize(dfa: DFA) -> DFA:
    """Return the minimal DFA equivalent to ``dfa``.

    Unreachable states are pruned and the result completed before
    partitioning, so the result is complete. Each class is represented by
    its smallest state name.
    """
    reduced = complete(remove_unreachable_states(dfa))
    classes = hopcroft_partition(reduced)

    representative: Dict[State, State] = {}
    for block in classes:
        chosen = min(block)
        for state in block:
            representative[state] = chosen

    states = frozenset(representative.values())
    transitions = TransitionFunction.from_triples(
        (representative[s], a, representative[t])
        for s, a, t in reduced.transitions.triples()
    )
    logger.debug("Minimized automaton from %d to %d states", len(dfa.states), len(states))
    return DFA(
        states,
        reduced.alphabet,
        transitions,
        representative[reduced.start],
        frozenset(representative[s] for s in reduced.accepting),
    )


def complete_minimized(dfa: DFA) -> DFA:
    """Complete, minimize, then complete again."""
    return complete(minimize(complete(dfa)))
