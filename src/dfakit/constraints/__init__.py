"""Declare constraint models and the automata deciding them."""

from dfakit.constraints.definitions import Constraint, ConstraintType, constraint_calls
from dfakit.constraints.model import Model, compare_models
from dfakit.constraints.parser import load_model, parse_model
from dfakit.constraints.templates import (
    TEMPLATES,
    Template,
    absence_dfa,
    constraint_dfa,
    exactly_dfa,
    existence_dfa,
)

__all__ = [
    "Constraint",
    "ConstraintType",
    "Model",
    "TEMPLATES",
    "Template",
    "absence_dfa",
    "compare_models",
    "constraint_calls",
    "constraint_dfa",
    "exactly_dfa",
    "existence_dfa",
    "load_model",
    "parse_model",
]
