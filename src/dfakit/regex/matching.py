"""Regex membership testing with Brzozowski derivatives.

Both passes walk the tree with an explicit stack, so arbitrarily deep
expressions (such as the concatenation chains produced for long paths
through an automaton) do not hit the interpreter's recursion limit.
"""

from typing import Dict, List, Tuple, Union

from dfakit.automaton.alphabet import Symbol
from dfakit.regex.ast import (
    EMPTY_SET,
    EMPTY_WORD,
    Alternation,
    Concatenation,
    EmptySet,
    EmptyWord,
    KleeneStar,
    Regex,
    SymbolLiteral,
    alternate,
    concatenate,
    kleene_star,
)


def _nullable_node(node: Regex, table: Dict[int, bool]) -> bool:
    if isinstance(node, (EmptyWord, KleeneStar)):
        return True
    if isinstance(node, (EmptySet, SymbolLiteral)):
        return False
    if isinstance(node, Alternation):
        return table[id(node.left)] or table[id(node.right)]
    if isinstance(node, Concatenation):
        return table[id(node.left)] and table[id(node.right)]
    raise TypeError(f"unexpected regex node {type(node).__name__}")


def _nullable_table(regex: Regex) -> Dict[int, bool]:
    """Nullability of ``regex`` and every node below it, keyed by node id."""
    table: Dict[int, bool] = {}
    stack: List[Tuple[Regex, bool]] = [(regex, False)]
    while stack:
        node, expanded = stack.pop()
        if id(node) in table:
            continue
        children = node.children()
        if children and not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in children)
            continue
        table[id(node)] = _nullable_node(node, table)
    return table


def nullable(regex: Regex) -> bool:
    """Check whether ``regex`` matches the empty word."""
    return _nullable_table(regex)[id(regex)]


def _union(left: Regex, right: Regex) -> Regex:
    # r + r = r keeps repeated derivatives from growing.
    if left == right:
        return left
    return alternate(left, right)


def _derivative_inputs(node: Regex, table: Dict[int, bool]) -> List[Regex]:
    # The right operand of a concatenation only matters after a nullable left.
    if isinstance(node, Concatenation) and not table[id(node.left)]:
        return [node.left]
    return node.children()


def _derive_node(
    node: Regex, sym: Symbol, table: Dict[int, bool], derived: Dict[int, Regex]
) -> Regex:
    if isinstance(node, (EmptySet, EmptyWord)):
        return EMPTY_SET
    if isinstance(node, SymbolLiteral):
        return EMPTY_WORD if node.symbol == sym else EMPTY_SET
    if isinstance(node, Alternation):
        return _union(derived[id(node.left)], derived[id(node.right)])
    if isinstance(node, Concatenation):
        head = concatenate(derived[id(node.left)], node.right)
        if table[id(node.left)]:
            return _union(head, derived[id(node.right)])
        return head
    if isinstance(node, KleeneStar):
        return concatenate(derived[id(node.operand)], kleene_star(node.operand))
    raise TypeError(f"unexpected regex node {type(node).__name__}")


def derivative(regex: Regex, value: Union[Symbol, str]) -> Regex:
    """The regex matching every w such that ``value`` w matches ``regex``."""
    sym = value if isinstance(value, Symbol) else Symbol(value)
    table = _nullable_table(regex)
    derived: Dict[int, Regex] = {}
    stack: List[Tuple[Regex, bool]] = [(regex, False)]
    while stack:
        node, expanded = stack.pop()
        if id(node) in derived:
            continue
        inputs = _derivative_inputs(node, table)
        if inputs and not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in inputs)
            continue
        derived[id(node)] = _derive_node(node, sym, table, derived)
    return derived[id(regex)]


def matches(regex: Regex, word: str) -> bool:
    """Check whether ``regex`` matches the whole of ``word``."""
    current = regex
    for char in word:
        current = derivative(current, char)
        if current.is_empty_set():
            return False
    return nullable(current)
