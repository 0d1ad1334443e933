"""Synchronized product automata under boolean acceptance semantics."""

from enum import Enum
from logging import getLogger
from typing import Dict, FrozenSet, List, Set, Tuple

from dfakit.automaton.completion import complete
from dfakit.automaton.dfa import DFA
from dfakit.automaton.relation import TransitionFunction
from dfakit.automaton.state import State, fresh_state
from dfakit.exceptions import IncompleteAutomatonError

logger = getLogger(__name__)

StatePair = Tuple[State, State]

PAIR_SEPARATOR = ":"


def _pairs(first: FrozenSet[State], second: FrozenSet[State]) -> Set[StatePair]:
    return {(p, q) for p in first for q in second}


class ProductSemantics(Enum):
    """Which pairs of a product automaton accept.

    For L1 = L(dfa1) and L2 = L(dfa2) over alphabet A:

    - INTERSECTION: L1 & L2
    - ONEMINUSTWO: L1 - L2
    - TWOMINUSONE: L2 - L1
    - UNIONCOMPLEMENT: A* - (L1 | L2)
    - SYMMETRICDIFFERENCE: (L1 - L2) | (L2 - L1)
    - UNION: L1 | L2
    - ORIGINAL1: L1
    - ORIGINAL2: L2
    """

    INTERSECTION = "intersection"
    ONEMINUSTWO = "one_minus_two"
    TWOMINUSONE = "two_minus_one"
    UNIONCOMPLEMENT = "union_complement"
    SYMMETRICDIFFERENCE = "symmetric_difference"
    UNION = "union"
    ORIGINAL1 = "original1"
    ORIGINAL2 = "original2"

    def accepting_pairs(self, dfa1: DFA, dfa2: DFA) -> Set[StatePair]:
        """Select the accepting pairs of the product of ``dfa1`` and ``dfa2``.

        Raises:
            IncompleteAutomatonError: For every semantics but INTERSECTION
                when either input is not complete.
        """
        if self is not ProductSemantics.INTERSECTION and not (
            dfa1.is_complete() and dfa2.is_complete()
        ):
            raise IncompleteAutomatonError(
                f"{self.name} products require complete automata"
            )

        if self is ProductSemantics.INTERSECTION:
            return _pairs(dfa1.accepting, dfa2.accepting)
        if self is ProductSemantics.ONEMINUSTWO:
            return _pairs(dfa1.accepting, dfa2.non_accepting)
        if self is ProductSemantics.TWOMINUSONE:
            return _pairs(dfa1.non_accepting, dfa2.accepting)
        if self is ProductSemantics.UNIONCOMPLEMENT:
            return _pairs(dfa1.non_accepting, dfa2.non_accepting)
        if self is ProductSemantics.SYMMETRICDIFFERENCE:
            return ProductSemantics.ONEMINUSTWO.accepting_pairs(
                dfa1, dfa2
            ) | ProductSemantics.TWOMINUSONE.accepting_pairs(dfa1, dfa2)
        if self is ProductSemantics.UNION:
            return ProductSemantics.SYMMETRICDIFFERENCE.accepting_pairs(
                dfa1, dfa2
            ) | ProductSemantics.INTERSECTION.accepting_pairs(dfa1, dfa2)
        if self is ProductSemantics.ORIGINAL1:
            return _pairs(dfa1.accepting, dfa2.states)
        return _pairs(dfa1.states, dfa2.accepting)


def pair_name(pair: StatePair) -> str:
    return f"{pair[0].name}{PAIR_SEPARATOR}{pair[1].name}"


def _name_pairs(pairs: List[StatePair]) -> Dict[StatePair, State]:
    """Name each pair "p:q"; colliding names are made unique with "!"."""
    names: Dict[StatePair, State] = {}
    taken: Set[State] = set()
    for pair in pairs:
        state = fresh_state(pair_name(pair), taken)
        taken.add(state)
        names[pair] = state
    return names


def product(
    dfa1: DFA, dfa2: DFA, semantics: ProductSemantics = ProductSemantics.INTERSECTION
) -> DFA:
    """Build the cross product of two DFAs.

    If the alphabets differ both automata are lifted onto their union.
    Both inputs are completed first, so every semantics is well defined.
    Product states are named "p:q" after their components.
    """
    alphabet = dfa1.alphabet.union(dfa2.alphabet)
    if dfa1.alphabet != dfa2.alphabet:
        dfa1 = dfa1.with_alphabet(alphabet)
        dfa2 = dfa2.with_alphabet(alphabet)
    dfa1 = complete(dfa1)
    dfa2 = complete(dfa2)

    pairs = sorted(_pairs(dfa1.states, dfa2.states))
    names = _name_pairs(pairs)
    accepting = semantics.accepting_pairs(dfa1, dfa2)

    triples = []
    for pair in pairs:
        for symbol in alphabet:
            target1 = dfa1.transitions.apply(pair[0], symbol)
            target2 = dfa2.transitions.apply(pair[1], symbol)
            if target1 is None or target2 is None:
                continue
            triples.append((names[pair], symbol, names[(target1, target2)]))

    logger.debug(
        "Built %s product with %d states (%d x %d)",
        semantics.name,
        len(pairs),
        len(dfa1.states),
        len(dfa2.states),
    )
    return DFA(
        frozenset(names.values()),
        alphabet,
        TransitionFunction.from_triples(triples),
        names[(dfa1.start, dfa2.start)],
        frozenset(names[pair] for pair in accepting),
    )
