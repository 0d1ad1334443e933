"""Language-level algorithms over DFAs.

This module is the entry point most callers need: it chains completion,
minimization and products to decide equivalence and inclusion, to find
distinguishing words and to fold many automata into one.

Example:
    >>> from dfakit.automaton import build_dfa
    >>> from dfakit.algorithms import equivalent, complement
    >>> has_a = build_dfa(
    ...     ["s0", "s1"], "ab",
    ...     [("s0", "a", "s1"), ("s0", "b", "s0"), ("s1", "a", "s1"), ("s1", "b", "s1")],
    ...     "s0", ["s1"],
    ... )
    >>> equivalent(has_a, complement(complement(has_a)))
    True
"""

import itertools
from logging import getLogger
from typing import Optional, Sequence

from dfakit.automaton.completion import complete
from dfakit.automaton.dfa import DFA
from dfakit.automaton.minimization import (
    complete_minimized,
    hopcroft_partition,
    minimize,
    remove_dead_states,
    remove_unreachable_states,
)
from dfakit.automaton.product import ProductSemantics, product
from dfakit.exceptions import NotEnoughAutomataError
from dfakit.regex.conversion import to_regex

logger = getLogger(__name__)

__all__ = [
    "complement",
    "complete",
    "complete_minimized",
    "decides_subset",
    "decides_subset_bidirectional",
    "difference",
    "equivalent",
    "hopcroft_partition",
    "intersection",
    "minimize",
    "minimized_product_dfa",
    "product",
    "remove_dead_states",
    "remove_unreachable_states",
    "to_regex",
    "witness_accepted_by_one_rejected_by_two",
]


def _decides_empty_language(dfa: DFA) -> bool:
    return not minimize(dfa).accepting


def difference(dfa1: DFA, dfa2: DFA) -> DFA:
    """A product DFA deciding L(dfa1) - L(dfa2)."""
    return product(dfa1, dfa2, ProductSemantics.ONEMINUSTWO)


def intersection(dfa1: DFA, dfa2: DFA) -> DFA:
    """A product DFA deciding L(dfa1) & L(dfa2)."""
    return product(dfa1, dfa2, ProductSemantics.INTERSECTION)


def equivalent(dfa1: DFA, dfa2: DFA) -> bool:
    """Check whether two DFAs decide the same language."""
    return _decides_empty_language(
        product(
            complete_minimized(dfa1),
            complete_minimized(dfa2),
            ProductSemantics.SYMMETRICDIFFERENCE,
        )
    )


def decides_subset(dfa1: DFA, dfa2: DFA) -> bool:
    """Check whether L(dfa1) is a subset of L(dfa2)."""
    return _decides_empty_language(
        difference(complete_minimized(dfa1), complete_minimized(dfa2))
    )


def decides_subset_bidirectional(dfa1: DFA, dfa2: DFA) -> bool:
    """Check whether either language contains the other."""
    return decides_subset(dfa1, dfa2) or decides_subset(dfa2, dfa1)


def witness_accepted_by_one_rejected_by_two(dfa1: DFA, dfa2: DFA) -> Optional[str]:
    """Find a shortest word accepted by ``dfa1`` and rejected by ``dfa2``.

    Lengths are searched in increasing order; among the words of the
    shortest length the first in character order is returned.

    Returns:
        The word, or None if L(dfa1) is a subset of L(dfa2).
    """
    if decides_subset(dfa1, dfa2):
        return None

    diff = remove_dead_states(
        minimize(difference(complete_minimized(dfa1), complete_minimized(dfa2)))
    )
    for length in itertools.count():
        words = diff.accepts_of_length(length)
        if words:
            witness = min(words)
            logger.debug("Found witness %r of length %d", witness, length)
            return witness


def minimized_product_dfa(
    dfas: Sequence[DFA],
    semantics: ProductSemantics = ProductSemantics.INTERSECTION,
) -> DFA:
    """Fold a list of DFAs into one product, minimizing along the way.

    The list is combined left to right, ``((d1 x d2) x d3) x ...``.

    Raises:
        NotEnoughAutomataError: If fewer than two automata are given.
    """
    if len(dfas) < 2:
        raise NotEnoughAutomataError(
            f"A product needs at least 2 automata, got {len(dfas)}"
        )

    result = dfas[0]
    for dfa in dfas[1:]:
        result = product(complete_minimized(result), complete_minimized(dfa), semantics)
    logger.debug("Folded %d automata into %d states", len(dfas), len(result.states))
    return minimize(result)


def complement(dfa: DFA) -> DFA:
    """A DFA deciding A* - L(dfa), where A is the alphabet of ``dfa``."""
    completed = complete(dfa)
    return completed.with_accepting(completed.non_accepting)