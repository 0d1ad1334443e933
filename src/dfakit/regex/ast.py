"""Regular expression AST with eager algebraic simplification.

The variant set is closed: :class:`EmptySet`, :class:`EmptyWord`,
:class:`SymbolLiteral`, :class:`Alternation`, :class:`Concatenation` and
:class:`KleeneStar`. Build expressions with the constructor functions
(:func:`alternate`, :func:`concatenate`, :func:`kleene_star`, ...) rather
than the classes, so the identities below are applied as the tree grows:

- ``{} r = r {} = {}``
- ``_ r = r _ = r``
- ``{} + r = r + {} = r``
- ``(r*)* = r*``, ``_* = {}* = _``

Two expressions are equal iff their string forms are equal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Tuple, Union

from dfakit.automaton.alphabet import Alphabet, Symbol
from dfakit.exceptions import RegexSymbolError

# Characters with a meaning in the string form; they cannot be symbols.
OPERATOR_SYMBOLS: FrozenSet[str] = frozenset("+_(){}*")


class Regex(ABC):
    """Base class for all regex nodes."""

    @abstractmethod
    def children(self) -> "List[Regex]":
        """Return child nodes."""

    @abstractmethod
    def render(self, parts: List[str]) -> str:
        """Build the string form of this node.

        Args:
            parts: The string forms of :meth:`children`, in the same order.
        """

    def walk(self) -> "Iterator[Regex]":
        """Yield this node and all descendants."""
        stack: List[Regex] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    @property
    def alphabet(self) -> Alphabet:
        """The symbols occurring in this expression."""
        return Alphabet(
            frozenset(n.symbol for n in self.walk() if isinstance(n, SymbolLiteral))
        )

    def is_empty_set(self) -> bool:
        return isinstance(self, EmptySet)

    def is_empty_word(self) -> bool:
        return isinstance(self, EmptyWord)

    def __str__(self) -> str:
        text = self.__dict__.get("_text")
        if text is None:
            text = _render_tree(self)
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Regex):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


def _render_tree(root: Regex) -> str:
    # Children are rendered before their parent; every node caches its text.
    stack: List[Tuple[Regex, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if "_text" in node.__dict__:
            continue
        children = node.children()
        if children and not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in children)
            continue
        parts = [child.__dict__["_text"] for child in children]
        object.__setattr__(node, "_text", node.render(parts))
    return root.__dict__["_text"]


@dataclass(frozen=True, eq=False)
class EmptySet(Regex):
    """Matches nothing, written ``{}``."""

    def children(self) -> "List[Regex]":
        return []

    def render(self, parts: List[str]) -> str:
        return "{}"


@dataclass(frozen=True, eq=False)
class EmptyWord(Regex):
    """Matches only the empty word, written ``_``."""

    def children(self) -> "List[Regex]":
        return []

    def render(self, parts: List[str]) -> str:
        return "_"


@dataclass(frozen=True, eq=False)
class SymbolLiteral(Regex):
    """A single symbol.

    Attributes:
        symbol: The symbol; operator characters are rejected.
    """

    symbol: Symbol

    def __post_init__(self) -> None:
        if self.symbol.char in OPERATOR_SYMBOLS:
            raise RegexSymbolError(
                f"The symbol {self.symbol.char!r} is a regex operator and cannot "
                f"be one of {''.join(sorted(OPERATOR_SYMBOLS))}"
            )

    def children(self) -> "List[Regex]":
        return []

    def render(self, parts: List[str]) -> str:
        return self.symbol.char


@dataclass(frozen=True, eq=False)
class Alternation(Regex):
    """Either operand, written ``left + right``."""

    left: Regex
    right: Regex

    def children(self) -> "List[Regex]":
        return [self.left, self.right]

    def render(self, parts: List[str]) -> str:
        return f"{parts[0]} + {parts[1]}"


@dataclass(frozen=True, eq=False)
class Concatenation(Regex):
    """``left`` followed by ``right``; alternations are parenthesized."""

    left: Regex
    right: Regex

    def children(self) -> "List[Regex]":
        return [self.left, self.right]

    def render(self, parts: List[str]) -> str:
        left, right = parts
        if isinstance(self.left, Alternation):
            left = f"({left})"
        if isinstance(self.right, Alternation):
            right = f"({right})"
        return left + right


@dataclass(frozen=True, eq=False)
class KleeneStar(Regex):
    """Zero or more repetitions, written ``(operand)*``."""

    operand: Regex

    def children(self) -> "List[Regex]":
        return [self.operand]

    def render(self, parts: List[str]) -> str:
        return f"({parts[0]})*"


EMPTY_SET = EmptySet()
EMPTY_WORD = EmptyWord()


def empty_set() -> Regex:
    return EMPTY_SET


def empty_word() -> Regex:
    return EMPTY_WORD


def symbol(value: Union[Symbol, str]) -> Regex:
    """A regex matching the single symbol ``value``."""
    return SymbolLiteral(value if isinstance(value, Symbol) else Symbol(value))


def alternate(left: Regex, right: Regex) -> Regex:
    if left.is_empty_set():
        return right
    if right.is_empty_set():
        return left
    return Alternation(left, right)


def concatenate(left: Regex, right: Regex) -> Regex:
    if left.is_empty_set() or right.is_empty_set():
        return EMPTY_SET
    if left.is_empty_word():
        return right
    if right.is_empty_word():
        return left
    return Concatenation(left, right)


def kleene_star(operand: Regex) -> Regex:
    if isinstance(operand, KleeneStar):
        return operand
    if operand.is_empty_word() or operand.is_empty_set():
        return EMPTY_WORD
    return KleeneStar(operand)
