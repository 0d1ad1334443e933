"""Finite automata data model and structural algorithms."""

from dfakit.automaton.alphabet import Alphabet, Symbol
from dfakit.automaton.completion import TRASH_STATE_NAME, complete
from dfakit.automaton.dfa import DFA, build_dfa, empty_set_dfa, universal_dfa
from dfakit.automaton.minimization import (
    complete_minimized,
    hopcroft_partition,
    minimize,
    remove_dead_states,
    remove_unreachable_states,
)
from dfakit.automaton.product import ProductSemantics, product
from dfakit.automaton.reachability import (
    directly_reaching_states,
    non_reaching_states,
    reachable_states,
    reaching_states,
    unreachable_states,
)
from dfakit.automaton.relation import Function, Relation, TransitionFunction
from dfakit.automaton.state import State, fresh_state

__all__ = [
    "Alphabet",
    "DFA",
    "Function",
    "ProductSemantics",
    "Relation",
    "State",
    "Symbol",
    "TRASH_STATE_NAME",
    "TransitionFunction",
    "build_dfa",
    "complete",
    "complete_minimized",
    "directly_reaching_states",
    "empty_set_dfa",
    "fresh_state",
    "hopcroft_partition",
    "minimize",
    "non_reaching_states",
    "product",
    "reachable_states",
    "reaching_states",
    "remove_dead_states",
    "remove_unreachable_states",
    "universal_dfa",
    "unreachable_states",
]
