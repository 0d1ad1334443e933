"""Reading and writing automata in the persisted JSON record format.

A record looks like::

    {
        "States": ["0", "1", "2"],
        "Alphabet": ["a", "b"],
        "TransitionFunction": [["0", "a", "1"], ["1", "b", "2"]],
        "StartState": "0",
        "AcceptingStates": ["2"]
    }

Records written by this module list states, symbols and transitions in
sorted order, so equal automata always serialize to equal text. Alphabet
entries must be single characters other than the regex operators
``+_(){}*``.
"""

import json
import os
from typing import IO, Any, Dict, List, Tuple, Union

from dfakit.automaton.dfa import DFA, build_dfa
from dfakit.exceptions import AutomatonFormatError
from dfakit.regex.ast import OPERATOR_SYMBOLS

STATES = "States"
ALPHABET = "Alphabet"
TRANSITION_FUNCTION = "TransitionFunction"
START_STATE = "StartState"
ACCEPTING_STATES = "AcceptingStates"

FIELDS = (STATES, ALPHABET, TRANSITION_FUNCTION, START_STATE, ACCEPTING_STATES)

PathOrFile = Union[str, os.PathLike, IO[str]]


def dfa_to_dict(dfa: DFA) -> Dict[str, Any]:
    """Convert ``dfa`` to a JSON-compatible record."""
    return {
        STATES: [s.name for s in sorted(dfa.states)],
        ALPHABET: dfa.alphabet.chars(),
        TRANSITION_FUNCTION: [
            [s.name, a.char, t.name] for s, a, t in dfa.transitions.triples()
        ],
        START_STATE: dfa.start.name,
        ACCEPTING_STATES: [s.name for s in sorted(dfa.accepting)],
    }


def _string(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise AutomatonFormatError(f"Expected a string, got {value!r}", field)
    return value


def _string_list(record: Dict[str, Any], field: str) -> List[str]:
    value = record[field]
    if not isinstance(value, list):
        raise AutomatonFormatError("Expected an array", field)
    return [_string(item, field) for item in value]


def _transition_list(record: Dict[str, Any]) -> List[Tuple[str, str, str]]:
    value = record[TRANSITION_FUNCTION]
    if not isinstance(value, list):
        raise AutomatonFormatError("Expected an array", TRANSITION_FUNCTION)
    transitions = []
    for item in value:
        if not isinstance(item, list) or len(item) != 3:
            raise AutomatonFormatError(
                f"Expected a [from, symbol, to] array, got {item!r}",
                TRANSITION_FUNCTION,
            )
        source, sym, target = (_string(part, TRANSITION_FUNCTION) for part in item)
        if len(sym) != 1:
            raise AutomatonFormatError(
                f"Expected a single-character symbol, got {sym!r}",
                TRANSITION_FUNCTION,
            )
        transitions.append((source, sym, target))
    return transitions


def dfa_from_dict(record: Dict[str, Any]) -> DFA:
    """Build a DFA from a persisted record.

    Raises:
        AutomatonFormatError: If the record does not have the expected shape
            or its alphabet contains a regex operator.
        MalformedAutomatonError: If the record describes an invalid automaton.
    """
    if not isinstance(record, dict):
        raise AutomatonFormatError("The document does not define an automaton")
    for field in FIELDS:
        if field not in record:
            raise AutomatonFormatError("Missing field", field)

    alphabet = _string_list(record, ALPHABET)
    for sym in alphabet:
        if len(sym) != 1:
            raise AutomatonFormatError(
                f"Expected a single-character symbol, got {sym!r}", ALPHABET
            )
        if sym in OPERATOR_SYMBOLS:
            raise AutomatonFormatError(
                f"The symbol {sym!r} is reserved for regular expressions", ALPHABET
            )

    return build_dfa(
        states=_string_list(record, STATES),
        alphabet=alphabet,
        transitions=_transition_list(record),
        start=_string(record[START_STATE], START_STATE),
        accepting=_string_list(record, ACCEPTING_STATES),
    )


def dumps(dfa: DFA, indent: int = 4) -> str:
    return json.dumps(dfa_to_dict(dfa), indent=indent)


def loads(text: str) -> DFA:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise AutomatonFormatError(f"Invalid JSON: {e}") from e
    return dfa_from_dict(record)


def dump(dfa: DFA, target: PathOrFile) -> None:
    """Write ``dfa`` to a path or an open text file."""
    if hasattr(target, "write"):
        target.write(dumps(dfa))  # type: ignore[union-attr]
        return
    with open(target, "w", encoding="utf-8") as f:  # type: ignore[arg-type]
        f.write(dumps(dfa))


def load(source: PathOrFile) -> DFA:
    """Read a DFA from a path or an open text file."""
    if hasattr(source, "read"):
        return loads(source.read())  # type: ignore[union-attr]
    with open(source, encoding="utf-8") as f:  # type: ignore[arg-type]
        return loads(f.read())
