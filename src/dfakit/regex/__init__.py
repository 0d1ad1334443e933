"""Regular expressions: syntax tree, DFA conversion and matching."""

from dfakit.regex.ast import (
    Alternation,
    Concatenation,
    EmptySet,
    EmptyWord,
    KleeneStar,
    Regex,
    SymbolLiteral,
    alternate,
    concatenate,
    empty_set,
    empty_word,
    kleene_star,
    symbol,
)
from dfakit.regex.conversion import RegexAutomaton, eliminate_states, to_regex
from dfakit.regex.matching import derivative, matches, nullable

__all__ = [
    "Alternation",
    "Concatenation",
    "EmptySet",
    "EmptyWord",
    "KleeneStar",
    "Regex",
    "RegexAutomaton",
    "SymbolLiteral",
    "alternate",
    "concatenate",
    "derivative",
    "eliminate_states",
    "empty_set",
    "empty_word",
    "kleene_star",
    "matches",
    "nullable",
    "symbol",
    "to_regex",
]
