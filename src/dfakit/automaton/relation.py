"""Binary relations, functions and DFA transition functions."""

from dataclasses import dataclass
from typing import (
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from dfakit.automaton.alphabet import Symbol
from dfakit.automaton.state import State
from dfakit.exceptions import MalformedAutomatonError

X = TypeVar("X")  # Domain type
Y = TypeVar("Y")  # Codomain type

Transition = Tuple[State, Symbol, State]


def _index(pairs: Iterable[Tuple[X, Y]]) -> Tuple[Dict[X, Set[Y]], Dict[Y, Set[X]]]:
    images: Dict[X, Set[Y]] = {}
    preimages: Dict[Y, Set[X]] = {}
    for x, y in pairs:
        images.setdefault(x, set()).add(y)
        preimages.setdefault(y, set()).add(x)
    return images, preimages


@dataclass(frozen=True)
class Relation(Generic[X, Y]):
    """A binary relation R, a set of pairs (x, y).

    Attributes:
        pairs: The pairs of the relation.
    """

    pairs: FrozenSet[Tuple[X, Y]] = frozenset()

    def __post_init__(self) -> None:
        pairs = frozenset(self.pairs)
        images, preimages = _index(pairs)
        object.__setattr__(self, "pairs", pairs)
        object.__setattr__(self, "_images", images)
        object.__setattr__(self, "_preimages", preimages)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Tuple[X, Y]]:
        return iter(self.pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self.pairs

    @property
    def domain(self) -> FrozenSet[X]:
        return frozenset(self._images)

    @property
    def codomain(self) -> FrozenSet[Y]:
        return frozenset(self._preimages)

    def image(self, x: X) -> FrozenSet[Y]:
        """All y with (x, y) in R; empty if x is outside the domain."""
        return frozenset(self._images.get(x, ()))

    def preimage(self, y: Y) -> FrozenSet[X]:
        """All x with (x, y) in R; empty if y is outside the codomain."""
        return frozenset(self._preimages.get(y, ()))

    def is_right_unique(self) -> bool:
        return all(len(ys) == 1 for ys in self._images.values())

    def is_left_unique(self) -> bool:
        return all(len(xs) == 1 for xs in self._preimages.values())

    def is_function(self) -> bool:
        return self.is_right_unique()

    def as_function(self) -> "Function[X, Y]":
        """Return this relation as a :class:`Function`.

        Raises:
            ValueError: If the relation is not right-unique.
        """
        return Function(self.pairs)

    def inverse(self) -> "Relation[Y, X]":
        return Relation(frozenset((y, x) for x, y in self.pairs))


class Function(Relation[X, Y]):
    """A right-unique relation, possibly partial."""

    def __post_init__(self) -> None:
        super().__post_init__()
        for x, ys in self._images.items():
            if len(ys) > 1:
                raise ValueError(f"{x!r} is mapped to more than one value")
        object.__setattr__(
            self, "_mapping", {x: next(iter(ys)) for x, ys in self._images.items()}
        )

    def apply(self, x: X) -> Optional[Y]:
        """Return f(x), or None when x is outside the domain."""
        return self._mapping.get(x)

    def is_defined(self, x: X) -> bool:
        return x in self._mapping


class TransitionFunction(Function[Tuple[State, Symbol], State]):
    """A (possibly partial) function from (state, symbol) to state."""

    def __post_init__(self) -> None:
        try:
            super().__post_init__()
        except ValueError as e:
            raise MalformedAutomatonError(
                f"The transitions are not deterministic: {e}"
            ) from e

        by_symbol: Dict[Tuple[Symbol, State], Set[State]] = {}
        for (source, symbol), target in self.pairs:
            by_symbol.setdefault((symbol, target), set()).add(source)
        object.__setattr__(self, "_by_symbol", by_symbol)

    @classmethod
    def from_triples(cls, triples: Iterable[Transition]) -> "TransitionFunction":
        """Build a transition function from (source, symbol, target) triples."""
        return cls(frozenset(((s, a), t) for s, a, t in triples))

    def apply(self, state: State, symbol: Symbol) -> Optional[State]:  # type: ignore[override]
        """Return the successor of ``state`` on ``symbol``, or None if undefined."""
        return self._mapping.get((state, symbol))

    def is_defined(self, state: State, symbol: Symbol) -> bool:  # type: ignore[override]
        return (state, symbol) in self._mapping

    def domain_states(self) -> FrozenSet[State]:
        return frozenset(state for state, _ in self._mapping)

    def symbols(self) -> FrozenSet[Symbol]:
        return frozenset(symbol for _, symbol in self._mapping)

    def preimage_states(
        self, target: State, symbol: Optional[Symbol] = None
    ) -> FrozenSet[State]:
        """States leading to ``target``, on ``symbol`` or on any symbol."""
        if symbol is not None:
            return frozenset(self._by_symbol.get((symbol, target), ()))
        return frozenset(state for state, _ in self._preimages.get(target, ()))

    def triples(self) -> List[Transition]:
        """All transitions as (source, symbol, target), in a stable order."""
        return sorted((s, a, t) for (s, a), t in self.pairs)

    def __str__(self) -> str:
        return (
            "["
            + ", ".join(f"({s}, {a}) -> {t}" for s, a, t in self.triples())
            + "]"
        )
