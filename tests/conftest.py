"""Shared automata for the test suite.

All fixtures are over the alphabet {a, b} unless noted otherwise.
"""

import itertools
from typing import Iterator

import pytest

from dfakit.automaton import DFA, build_dfa


def all_words(chars: str, max_length: int) -> Iterator[str]:
    for length in range(max_length + 1):
        for letters in itertools.product(chars, repeat=length):
            yield "".join(letters)


@pytest.fixture
def words():
    """Every word over a given alphabet up to a given length."""
    return all_words


@pytest.fixture
def contains_a() -> DFA:
    """Words with at least one ``a``."""
    return build_dfa(
        ["s0", "s1"],
        "ab",
        [("s0", "a", "s1"), ("s0", "b", "s0"), ("s1", "a", "s1"), ("s1", "b", "s1")],
        "s0",
        ["s1"],
    )


@pytest.fixture
def even_b() -> DFA:
    """Words with an even number of ``b``."""
    return build_dfa(
        ["e0", "e1"],
        "ab",
        [("e0", "a", "e0"), ("e0", "b", "e1"), ("e1", "a", "e1"), ("e1", "b", "e0")],
        "e0",
        ["e0"],
    )


@pytest.fixture
def ends_with_b() -> DFA:
    return build_dfa(
        ["t0", "t1"],
        "ab",
        [("t0", "a", "t0"), ("t0", "b", "t1"), ("t1", "a", "t0"), ("t1", "b", "t1")],
        "t0",
        ["t1"],
    )


@pytest.fixture
def partial() -> DFA:
    """Two states, only ``(s0, a) -> s1`` defined; accepts just ``a``."""
    return build_dfa(["s0", "s1"], "ab", [("s0", "a", "s1")], "s0", ["s1"])


@pytest.fixture
def redundant() -> DFA:
    """Non-empty words, with two interchangeable accepting states."""
    return build_dfa(
        ["q0", "q1", "q2"],
        "ab",
        [
            ("q0", "a", "q1"),
            ("q0", "b", "q2"),
            ("q1", "a", "q1"),
            ("q1", "b", "q2"),
            ("q2", "a", "q1"),
            ("q2", "b", "q2"),
        ],
        "q0",
        ["q1", "q2"],
    )


SAMPLE_AUTOMATA = ["contains_a", "even_b", "ends_with_b", "partial", "redundant"]


@pytest.fixture(params=SAMPLE_AUTOMATA)
def sample_dfa(request) -> DFA:
    """Each of the sample automata in turn."""
    return request.getfixturevalue(request.param)
