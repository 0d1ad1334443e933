"""Automata for the Declare templates.

Every template is a small complete DFA over the model's activities. States
are named ``"0"``, ``"1"``, ... and ``"0"`` is the start state. Besides the
transitions on the template's own parameters, a state usually has an
"otherwise" move taken on every remaining activity of the alphabet.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Callable, Dict, List, Sequence, Tuple

from dfakit.automaton.alphabet import Alphabet, Symbol
from dfakit.automaton.dfa import DFA, build_dfa
from dfakit.constraints.definitions import Constraint, ConstraintType
from dfakit.exceptions import ConstraintError

logger = getLogger(__name__)

Triple = Tuple[str, str, str]

T = ConstraintType


@dataclass(frozen=True)
class Template:
    """Shape of a fixed-size template.

    Parameters are referred to by position: ``"a"`` is the first activity
    and ``"b"`` the second.

    Attributes:
        size: Number of states.
        accepting: Accepting state numbers.
        moves: ``(source, parameter, target)`` transitions.
        otherwise: ``(source, excluded parameters, target)``; taken on every
            activity not named in the excluded parameters.
    """

    size: int
    accepting: Tuple[int, ...]
    moves: Tuple[Tuple[int, str, int], ...]
    otherwise: Tuple[Tuple[int, str, int], ...]


TEMPLATES: Dict[ConstraintType, Template] = {
    T.INIT: Template(
        3, (0, 1),
        moves=((0, "a", 1),),
        otherwise=((0, "a", 2), (1, "", 1), (2, "", 2)),
    ),
    T.LAST: Template(
        2, (1,),
        moves=((0, "a", 1), (1, "a", 1)),
        otherwise=((0, "a", 0), (1, "a", 0)),
    ),
    T.PRECEDENCE: Template(
        3, (0, 1),
        moves=((0, "a", 1), (0, "b", 2)),
        otherwise=((0, "ab", 0), (1, "", 1), (2, "", 2)),
    ),
    T.RESPONSE: Template(
        2, (0,),
        moves=((0, "a", 1), (1, "b", 0)),
        otherwise=((0, "a", 0), (1, "b", 1)),
    ),
    T.SUCCESSION: Template(
        4, (0, 1),
        moves=((0, "a", 3), (0, "b", 2), (3, "b", 1), (1, "a", 3)),
        otherwise=((0, "ab", 0), (1, "a", 1), (2, "", 2), (3, "b", 3)),
    ),
    T.ALTERNATE_PRECEDENCE: Template(
        3, (0, 1),
        moves=((0, "a", 1), (0, "b", 2), (1, "b", 0)),
        otherwise=((0, "ab", 0), (1, "b", 1), (2, "", 2)),
    ),
    T.ALTERNATE_RESPONSE: Template(
        3, (0,),
        moves=((0, "a", 2), (2, "a", 1), (2, "b", 0)),
        otherwise=((0, "a", 0), (2, "ab", 2), (1, "", 1)),
    ),
    T.ALTERNATE_SUCCESSION: Template(
        3, (0,),
        moves=((0, "a", 2), (0, "b", 1), (2, "a", 1), (2, "b", 0)),
        otherwise=((0, "ab", 0), (2, "ab", 2), (1, "", 1)),
    ),
    T.CHAIN_PRECEDENCE: Template(
        3, (0, 1),
        moves=((0, "a", 1), (0, "b", 2), (1, "a", 1)),
        otherwise=((0, "ab", 0), (1, "a", 0), (2, "", 2)),
    ),
    T.CHAIN_RESPONSE: Template(
        3, (0,),
        moves=((0, "a", 2), (2, "b", 0)),
        otherwise=((0, "a", 0), (2, "b", 1), (1, "", 1)),
    ),
    T.CHAIN_SUCCESSION: Template(
        3, (0,),
        moves=((0, "a", 2), (0, "b", 1), (2, "b", 0)),
        otherwise=((0, "ab", 0), (2, "b", 1), (1, "", 1)),
    ),
    T.RESPONDED_EXISTENCE: Template(
        3, (0, 1),
        moves=((0, "a", 2), (0, "b", 1), (2, "b", 1)),
        otherwise=((0, "ab", 0), (2, "b", 2), (1, "", 1)),
    ),
    T.CO_EXISTENCE: Template(
        4, (0, 1),
        moves=((0, "a", 3), (0, "b", 2), (2, "a", 1), (3, "b", 1)),
        otherwise=((0, "ab", 0), (2, "a", 2), (3, "b", 3), (1, "", 1)),
    ),
    T.CHOICE1OF2: Template(
        2, (1,),
        moves=((0, "a", 1), (0, "b", 1)),
        otherwise=((0, "ab", 0), (1, "", 1)),
    ),
    T.EXCLUSIVE_CHOICE1OF2: Template(
        4, (2, 3),
        moves=((0, "a", 2), (0, "b", 3), (3, "a", 1), (2, "b", 1)),
        otherwise=((0, "ab", 0), (1, "", 1), (2, "b", 2), (3, "a", 3)),
    ),
    T.NOT_CO_EXISTENCE: Template(
        4, (0, 1, 3),
        moves=((0, "a", 3), (0, "b", 1), (3, "b", 2), (1, "a", 2)),
        otherwise=((0, "ab", 0), (2, "", 2), (3, "b", 3), (1, "a", 1)),
    ),
    T.NOT_SUCCESSION: Template(
        3, (0, 2),
        moves=((0, "a", 2), (2, "b", 1)),
        otherwise=((0, "a", 0), (1, "", 1), (2, "b", 2)),
    ),
    T.NOT_CHAIN_SUCCESSION: Template(
        3, (0, 2),
        moves=((0, "a", 2), (2, "a", 2), (2, "b", 1)),
        otherwise=((0, "a", 0), (1, "", 1), (2, "ab", 0)),
    ),
    T.NOT_RESPONDED_EXISTENCE: Template(
        4, (0, 1, 3),
        moves=((0, "a", 1), (0, "b", 3), (1, "b", 2), (3, "a", 2)),
        otherwise=((0, "ab", 0), (1, "b", 1), (2, "", 2), (3, "a", 3)),
    ),
    T.NOT_RESPONSE: Template(
        3, (0, 1),
        moves=((0, "a", 1), (1, "b", 2)),
        otherwise=((0, "a", 0), (1, "b", 1), (2, "", 2)),
    ),
}


def _otherwise(
    alphabet: Alphabet, excluded: Sequence[Symbol], source: str, target: str
) -> List[Triple]:
    return [(source, s.char, target) for s in alphabet if s not in excluded]


def _instantiate(
    template: Template, alphabet: Alphabet, activities: Sequence[Symbol]
) -> DFA:
    params = dict(zip("ab", activities))
    triples = [(str(s), params[p].char, str(t)) for s, p, t in template.moves]
    for source, excluded, target in template.otherwise:
        triples.extend(
            _otherwise(alphabet, [params[p] for p in excluded], str(source), str(target))
        )
    return build_dfa(
        states=[str(i) for i in range(template.size)],
        alphabet=alphabet.chars(),
        transitions=triples,
        start="0",
        accepting=[str(i) for i in template.accepting],
    )


def _counter(alphabet: Alphabet, a: Symbol, size: int) -> List[Triple]:
    # States 0..size-2 count occurrences of ``a``; the last state absorbs.
    triples: List[Triple] = []
    for i in range(size - 1):
        triples.append((str(i), a.char, str(i + 1)))
        triples.extend(_otherwise(alphabet, [a], str(i), str(i)))
    triples.extend(_otherwise(alphabet, [], str(size - 1), str(size - 1)))
    return triples


def existence_dfa(alphabet: Alphabet, a: Symbol, n: int) -> DFA:
    """Words with at least ``n`` occurrences of ``a``."""
    return build_dfa(
        [str(i) for i in range(n + 1)], alphabet.chars(),
        _counter(alphabet, a, n + 1), "0", [str(n)],
    )


def absence_dfa(alphabet: Alphabet, a: Symbol, n: int) -> DFA:
    """Words with fewer than ``n`` occurrences of ``a``."""
    return build_dfa(
        [str(i) for i in range(n + 1)], alphabet.chars(),
        _counter(alphabet, a, n + 1), "0", [str(i) for i in range(n)],
    )


def exactly_dfa(alphabet: Alphabet, a: Symbol, n: int) -> DFA:
    """Words with exactly ``n`` occurrences of ``a``."""
    return build_dfa(
        [str(i) for i in range(n + 2)], alphabet.chars(),
        _counter(alphabet, a, n + 2), "0", [str(n)],
    )


COUNT_TEMPLATES: Dict[ConstraintType, Callable[[Alphabet, Symbol, int], DFA]] = {
    T.EXISTENCE: existence_dfa,
    T.ABSENCE: absence_dfa,
    T.EXACTLY: exactly_dfa,
}


def constraint_dfa(alphabet: Alphabet, constraint: Constraint) -> DFA:
    """Build the complete DFA deciding ``constraint`` over ``alphabet``.

    Args:
        alphabet: The activities of the model.
        constraint: The constraint to decide.

    Returns:
        A complete DFA whose states are named by number.

    Raises:
        ConstraintError: If the constraint names an activity outside
            ``alphabet``.
    """
    missing = [a.char for a in constraint.activities if a not in alphabet]
    if missing:
        raise ConstraintError(
            f"{constraint} uses activities {missing} outside the alphabet {alphabet}"
        )
    logger.debug("Building automaton for %s", constraint)
    if constraint.type.is_count:
        build = COUNT_TEMPLATES[constraint.type]
        return build(alphabet, constraint.activities[0], constraint.count)  # type: ignore[arg-type]
    return _instantiate(TEMPLATES[constraint.type], alphabet, constraint.activities)
