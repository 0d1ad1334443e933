"""Completion of partial DFAs with a sink ("trash") state."""

from logging import getLogger
from typing import Optional, Union

from dfakit.automaton.dfa import DFA
from dfakit.automaton.relation import TransitionFunction
from dfakit.automaton.state import State, fresh_state
from dfakit.exceptions import InvalidTrashStateError

logger = getLogger(__name__)

TRASH_STATE_NAME = "trash"


def _check_trash_state(dfa: DFA, trash: State) -> None:
    if trash not in dfa.states:
        return
    if trash in dfa.accepting:
        raise InvalidTrashStateError(
            f"The trash state {trash} is in the state set and accepting"
        )
    for source, symbol, target in dfa.transitions.triples():
        if source == trash and target != trash:
            raise InvalidTrashStateError(
                f"The trash state {trash} has an outgoing transition "
                f"on {symbol} to {target}"
            )


def complete(dfa: DFA, trash: Optional[Union[State, str]] = None) -> DFA:
    """Return a complete DFA deciding the same language as ``dfa``.

    Every undefined (state, symbol) pair is routed to a sink state that
    loops on every symbol. If ``dfa`` is already complete a structural copy
    is returned and no sink is added.

    Args:
        dfa: The automaton to complete.
        trash: The sink state to use. It may already be a state of ``dfa``
            as long as it is not accepting and only moves to itself. A name
            that does not collide with any state is synthesized when omitted.

    Raises:
        InvalidTrashStateError: If an existing ``trash`` state is accepting or
            has a transition to another state.
    """
    if trash is None:
        trash_state = fresh_state(TRASH_STATE_NAME, dfa.states)
    else:
        trash_state = trash if isinstance(trash, State) else State(trash)
        _check_trash_state(dfa, trash_state)

    if dfa.is_complete():
        return DFA(dfa.states, dfa.alphabet, dfa.transitions, dfa.start, dfa.accepting)

    states = dfa.states | {trash_state}
    triples = dfa.transitions.triples()
    added = 0
    for state in sorted(states):
        for symbol in dfa.alphabet:
            if not dfa.transitions.is_defined(state, symbol):
                triples.append((state, symbol, trash_state))
                added += 1

    logger.debug(
        "Completed automaton with trash state %s (%d transitions added)",
        trash_state,
        added,
    )
    return DFA(
        states,
        dfa.alphabet,
        TransitionFunction.from_triples(triples),
        dfa.start,
        dfa.accepting,
    )
