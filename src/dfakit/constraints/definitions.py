"""Declare constraint templates and their instances."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from dfakit.automaton.alphabet import Symbol
from dfakit.exceptions import ConstraintError


class ConstraintType(Enum):
    """The supported Declare templates.

    Unary templates take one activity, binary templates two distinct
    activities and count templates one activity and a positive bound.
    """

    INIT = "init"
    LAST = "last"
    EXISTENCE = "existence"
    ABSENCE = "absence"
    EXACTLY = "exactly"
    PRECEDENCE = "precedence"
    RESPONSE = "response"
    SUCCESSION = "succession"
    ALTERNATE_PRECEDENCE = "alternate_precedence"
    ALTERNATE_RESPONSE = "alternate_response"
    ALTERNATE_SUCCESSION = "alternate_succession"
    CHAIN_PRECEDENCE = "chain_precedence"
    CHAIN_RESPONSE = "chain_response"
    CHAIN_SUCCESSION = "chain_succession"
    RESPONDED_EXISTENCE = "responded_existence"
    CO_EXISTENCE = "co_existence"
    CHOICE1OF2 = "choice1of2"
    EXCLUSIVE_CHOICE1OF2 = "exclusive_choice1of2"
    NOT_CO_EXISTENCE = "not_co_existence"
    NOT_SUCCESSION = "not_succession"
    NOT_CHAIN_SUCCESSION = "not_chain_succession"
    NOT_RESPONDED_EXISTENCE = "not_responded_existence"
    NOT_RESPONSE = "not_response"

    @property
    def is_unary(self) -> bool:
        return self in (ConstraintType.INIT, ConstraintType.LAST)

    @property
    def is_count(self) -> bool:
        return self in (
            ConstraintType.EXISTENCE,
            ConstraintType.ABSENCE,
            ConstraintType.EXACTLY,
        )

    @property
    def is_binary(self) -> bool:
        return not (self.is_unary or self.is_count)

    @property
    def arity(self) -> int:
        """Number of activity parameters."""
        return 2 if self.is_binary else 1

    @property
    def call(self) -> str:
        """Usage form such as ``response(a,b)``."""
        if self.is_unary:
            return f"{self.value}(a)"
        if self.is_count:
            return f"{self.value}(a,n)"
        return f"{self.value}(a,b)"

    @classmethod
    def from_name(cls, name: str) -> "ConstraintType":
        try:
            return cls(name)
        except ValueError:
            raise ConstraintError(f"No such constraint type: {name!r}") from None

    def __str__(self) -> str:
        return self.value


def constraint_calls() -> List[str]:
    """Usage forms of every template, in declaration order."""
    return [t.call for t in ConstraintType]


@dataclass(frozen=True)
class Constraint:
    """One instantiated template.

    Attributes:
        type: The template.
        activities: One activity, or two distinct ones for binary templates.
        count: The bound of a count template; None otherwise.

    Raises:
        ConstraintError: If the parameters do not fit the template.
    """

    type: ConstraintType
    activities: Tuple[Symbol, ...]
    count: Optional[int] = None

    def __post_init__(self) -> None:
        activities = tuple(
            a if isinstance(a, Symbol) else Symbol(a) for a in self.activities
        )
        object.__setattr__(self, "activities", activities)

        if len(activities) != self.type.arity:
            raise ConstraintError(
                f"{self.type} takes {self.type.arity} activities, got {len(activities)}"
            )
        if self.type.is_binary and activities[0] == activities[1]:
            raise ConstraintError(f"{self.type} needs two different activities")
        if self.type.is_count:
            if self.count is None or self.count < 1:
                raise ConstraintError(f"{self.type} needs a positive bound")
        elif self.count is not None:
            raise ConstraintError(f"{self.type} does not take a bound")

    @classmethod
    def of(
        cls,
        template: Union[ConstraintType, str],
        activities: Sequence[Union[Symbol, str]],
        count: Optional[int] = None,
    ) -> "Constraint":
        """Build a constraint from a template name and activity characters.

        Example:
            >>> str(Constraint.of("response", "ab"))
            'response(a,b)'
        """
        if not isinstance(template, ConstraintType):
            template = ConstraintType.from_name(template)
        return cls(template, tuple(activities), count)

    def __str__(self) -> str:
        params = [a.char for a in self.activities]
        if self.count is not None:
            params.append(str(self.count))
        return f"{self.type}({','.join(params)})"
