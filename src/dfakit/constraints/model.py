"""Declare models: a set of activities and the constraints over them."""

from dataclasses import dataclass
from logging import getLogger
from typing import List, Optional, Tuple

from dfakit.automaton.alphabet import Alphabet
from dfakit.automaton.dfa import DFA
from dfakit.comparison import Comparison, combine_constraint_automata
from dfakit.config import Config
from dfakit.constraints.definitions import Constraint
from dfakit.constraints.templates import constraint_dfa
from dfakit.exceptions import ConstraintError

logger = getLogger(__name__)


@dataclass(frozen=True)
class Model:
    """A Declare model.

    A trace belongs to the model when it satisfies every constraint; a
    model without constraints allows every trace over its activities.

    Attributes:
        activities: The alphabet of the model.
        constraints: The constraints, in file order.
    """

    activities: Alphabet
    constraints: Tuple[Constraint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "constraints", tuple(self.constraints))
        for constraint in self.constraints:
            for activity in constraint.activities:
                if activity not in self.activities:
                    raise ConstraintError(
                        f"{constraint} uses activity {activity.char!r} "
                        f"outside the alphabet {self.activities}"
                    )

    def automata(self) -> List[DFA]:
        """One complete DFA per constraint."""
        return [constraint_dfa(self.activities, c) for c in self.constraints]

    def to_dfa(self) -> DFA:
        """A complete DFA accepting exactly the traces allowed by the model."""
        logger.debug(
            "Combining %d constraints over %s", len(self.constraints), self.activities
        )
        return combine_constraint_automata(self.activities, self.automata())

    def __str__(self) -> str:
        items = [",".join(self.activities.chars())]
        items.extend(str(c) for c in self.constraints)
        return "".join(f"{item};\n" for item in items)


def compare_models(
    first: Model, second: Model, config: Optional[Config] = None
) -> Comparison:
    """Compare the trace languages of two models."""
    return Comparison.compare(first.to_dfa(), second.to_dfa(), config)
