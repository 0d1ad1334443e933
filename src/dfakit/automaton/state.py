"""Automaton states and fresh state-name synthesis."""

from dataclasses import dataclass
from typing import Container, Union

# Appended to a candidate name until it no longer collides.
NAME_MARKER = "!"


@dataclass(frozen=True, order=True)
class State:
    """A named automaton vertex.

    States are value objects: two states with the same name are the same
    state.
    """

    name: str

    def __str__(self) -> str:
        return self.name


def fresh_state(candidate: Union[State, str], taken: Container[State]) -> State:
    """Return a state named after ``candidate`` that is not in ``taken``.

    The candidate name is extended with ``!`` until it is unique, so the
    result only depends on the candidate and the taken names.
    """
    name = candidate.name if isinstance(candidate, State) else candidate
    state = State(name)
    while state in taken:
        name += NAME_MARKER
        state = State(name)
    return state
