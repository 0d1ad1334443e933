"""
dfakit - Deterministic finite automata algebra.

Build DFAs, complete and minimize them, combine them with products and
decide language equivalence and inclusion. Distinguishing words and
equivalent regular expressions explain why two automata differ. Declare
constraint models are compiled to automata and compared the same way.

Example usage:
    >>> from dfakit import build_dfa, complement, equivalent
    >>> has_a = build_dfa(
    ...     ["s0", "s1"], "ab",
    ...     [("s0", "a", "s1"), ("s0", "b", "s0"), ("s1", "a", "s1"), ("s1", "b", "s1")],
    ...     "s0", ["s1"],
    ... )
    >>> equivalent(has_a, complement(has_a))
    False

For a full report:
    >>> from dfakit import Comparison, Config
    >>> report = Comparison.compare(has_a, complement(has_a), Config(max_word_length=2))
    >>> report.witness_first_not_in_second()
    'a'
"""

from dfakit.algorithms import (
    complement,
    decides_subset,
    decides_subset_bidirectional,
    difference,
    equivalent,
    intersection,
    minimized_product_dfa,
    witness_accepted_by_one_rejected_by_two,
)
from dfakit.automaton import (
    DFA,
    Alphabet,
    ProductSemantics,
    State,
    Symbol,
    build_dfa,
    complete,
    complete_minimized,
    empty_set_dfa,
    minimize,
    product,
    remove_dead_states,
    remove_unreachable_states,
    universal_dfa,
)
from dfakit.comparison import Comparison, combine_constraint_automata
from dfakit.config import Config
from dfakit.constraints import (
    Constraint,
    ConstraintType,
    Model,
    compare_models,
    load_model,
    parse_model,
)
from dfakit.exceptions import (
    AutomatonFormatError,
    ConstraintError,
    DFAKitError,
    IncompleteAutomatonError,
    InvalidTrashStateError,
    InvalidWordError,
    MalformedAutomatonError,
    ModelFormatError,
    NotEnoughAutomataError,
    RegexSymbolError,
)
from dfakit.regex import Regex, matches, to_regex
from dfakit.serialization import dump, dumps, load, loads

__version__ = "0.1.0"

__all__ = [
    # Data model
    "Alphabet",
    "DFA",
    "State",
    "Symbol",
    "build_dfa",
    "empty_set_dfa",
    "universal_dfa",
    # Algorithms
    "ProductSemantics",
    "complement",
    "complete",
    "complete_minimized",
    "decides_subset",
    "decides_subset_bidirectional",
    "difference",
    "equivalent",
    "intersection",
    "minimize",
    "minimized_product_dfa",
    "product",
    "remove_dead_states",
    "remove_unreachable_states",
    "witness_accepted_by_one_rejected_by_two",
    # Regular expressions
    "Regex",
    "matches",
    "to_regex",
    # Comparison
    "Comparison",
    "Config",
    "combine_constraint_automata",
    # Declare models
    "Constraint",
    "ConstraintType",
    "Model",
    "compare_models",
    "load_model",
    "parse_model",
    # Persistence
    "dump",
    "dumps",
    "load",
    "loads",
    # Exceptions
    "AutomatonFormatError",
    "ConstraintError",
    "DFAKitError",
    "IncompleteAutomatonError",
    "InvalidTrashStateError",
    "InvalidWordError",
    "MalformedAutomatonError",
    "ModelFormatError",
    "NotEnoughAutomataError",
    "RegexSymbolError",
    # Version
    "__version__",
]
