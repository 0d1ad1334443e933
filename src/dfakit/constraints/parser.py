"""Reader for Declare model files.

A model file lists the activities followed by the constraints, each item
terminated by a semicolon. Whitespace is ignored everywhere::

    a,b,c;
    init(a);
    existence(a,12);
    co_existence(b,c);

Activities are single letters or digits. A constraint is a template name
followed by its parameters in parentheses; count templates take a
positive bound as their last parameter.
"""

import re
from logging import getLogger
from typing import List

from dfakit.automaton.alphabet import Alphabet
from dfakit.constraints.definitions import Constraint, ConstraintType
from dfakit.constraints.model import Model
from dfakit.exceptions import ConstraintError, ModelFormatError
from dfakit.serialization import PathOrFile

logger = getLogger(__name__)

INVALID_ALPHABET = "Invalid alphabet"
INVALID_CONSTRAINT = "Invalid constraint"
INVALID_ACTIVITY = "Constraint uses an activity not defined in the alphabet"
NO_CONSTRAINTS = "No constraints"

_ACTIVITY = r"[A-Za-z0-9]"
_ALPHABET_RE = re.compile(rf"{_ACTIVITY}(,{_ACTIVITY})*")
_CONSTRAINT_RE = re.compile(
    rf"(?P<name>\w*)\((?P<args>{_ACTIVITY}(,{_ACTIVITY})*(,[1-9][0-9]*)?)\)", re.ASCII
)
_WHITESPACE_RE = re.compile(r"\s+")


def _items(text: str) -> List[str]:
    items = _WHITESPACE_RE.sub("", text).split(";")
    if items and items[-1] == "":
        items.pop()
    return items


def _parse_alphabet(item: str) -> Alphabet:
    if not _ALPHABET_RE.fullmatch(item):
        raise ModelFormatError(INVALID_ALPHABET, item)
    return Alphabet.of(item.split(","))


def _parse_constraint(item: str) -> Constraint:
    match = _CONSTRAINT_RE.fullmatch(item)
    if match is None:
        raise ModelFormatError(INVALID_CONSTRAINT, item)
    args = match.group("args").split(",")

    try:
        template = ConstraintType.from_name(match.group("name"))
        if template.is_count:
            if len(args) != 2 or not args[1].isdigit():
                raise ModelFormatError(INVALID_CONSTRAINT, item)
            return Constraint(template, (args[0],), int(args[1]))
        if len(args) != template.arity or any(len(a) != 1 for a in args):
            raise ModelFormatError(INVALID_CONSTRAINT, item)
        return Constraint(template, tuple(args))
    except ConstraintError as e:
        raise ModelFormatError(INVALID_CONSTRAINT, item) from e


def parse_model(text: str) -> Model:
    """Parse the contents of a model file.

    Raises:
        ModelFormatError: If the text is not a valid model. The error names
            the offending item.
    """
    items = _items(text)
    if not items:
        raise ModelFormatError(INVALID_ALPHABET)

    activities = _parse_alphabet(items[0])
    constraints = [_parse_constraint(item) for item in items[1:]]
    if not constraints:
        raise ModelFormatError(NO_CONSTRAINTS)
    for constraint in constraints:
        if any(a not in activities for a in constraint.activities):
            raise ModelFormatError(INVALID_ACTIVITY, str(constraint))

    logger.debug("Parsed %d constraints over %s", len(constraints), activities)
    return Model(activities, tuple(constraints))


def load_model(source: PathOrFile) -> Model:
    """Read a model from a path or an open text file."""
    if hasattr(source, "read"):
        return parse_model(source.read())  # type: ignore[union-attr]
    with open(source, encoding="utf-8") as f:  # type: ignore[arg-type]
        return parse_model(f.read())
