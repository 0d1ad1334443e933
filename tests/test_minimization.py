"""Tests for reachability, state pruning and Hopcroft minimization."""

import pytest

from dfakit.automaton import (
    Alphabet,
    State,
    Symbol,
    build_dfa,
    complete,
    complete_minimized,
    directly_reaching_states,
    empty_set_dfa,
    hopcroft_partition,
    minimize,
    non_reaching_states,
    reachable_states,
    reaching_states,
    remove_dead_states,
    remove_unreachable_states,
    unreachable_states,
    universal_dfa,
)


def same_language(dfa1, dfa2, words) -> bool:
    return all(dfa1.accepts(w) == dfa2.accepts(w) for w in words("ab", 4))


@pytest.fixture
def with_orphan(contains_a):
    """``contains_a`` plus a state nothing leads to."""
    return build_dfa(
        ["s0", "s1", "u"],
        "ab",
        [(s.name, a.char, t.name) for s, a, t in contains_a.transitions.triples()]
        + [("u", "a", "s0"), ("u", "b", "u")],
        "s0",
        ["s1", "u"],
    )


class TestReachability:
    def test_forward(self, with_orphan):
        s0, s1, u = State("s0"), State("s1"), State("u")
        assert reachable_states(with_orphan, s0) == frozenset([s0, s1])
        assert reachable_states(with_orphan, u) == frozenset([s0, s1, u])
        assert unreachable_states(with_orphan, s0) == frozenset([u])

    def test_backward(self, partial):
        s0, s1 = State("s0"), State("s1")
        assert reaching_states(partial, s1) == frozenset([s0, s1])
        assert reaching_states(partial, s0) == frozenset([s0])
        assert non_reaching_states(partial, s0) == frozenset([s1])

    def test_directly_reaching(self, contains_a):
        s0, s1 = State("s0"), State("s1")
        assert directly_reaching_states(contains_a, [s1], Symbol("a")) == frozenset([s0, s1])
        assert directly_reaching_states(contains_a, [s0], Symbol("b")) == frozenset([s0])
        assert directly_reaching_states(contains_a, [s0], Symbol("a")) == frozenset()

    def test_unknown_state(self, contains_a):
        with pytest.raises(ValueError):
            reachable_states(contains_a, State("nope"))


class TestPruning:
    def test_remove_unreachable_states(self, with_orphan, words):
        pruned = remove_unreachable_states(with_orphan)
        assert pruned.states == frozenset([State("s0"), State("s1")])
        assert pruned.accepting == frozenset([State("s1")])
        assert same_language(pruned, with_orphan, words)

    def test_remove_dead_states(self, partial, words):
        pruned = remove_dead_states(complete(partial))
        assert pruned.states == partial.states
        assert pruned.transitions == partial.transitions
        assert same_language(pruned, partial, words)

    def test_dead_start_gives_empty_language(self, contains_a):
        pruned = remove_dead_states(contains_a.with_accepting([]))
        assert pruned == empty_set_dfa(contains_a.alphabet, "s0")

    def test_prunings_preserve_language(self, sample_dfa, words):
        assert same_language(remove_dead_states(sample_dfa), sample_dfa, words)
        assert same_language(remove_unreachable_states(sample_dfa), sample_dfa, words)


class TestHopcroftPartition:
    def test_distinguishable_states(self, contains_a):
        assert hopcroft_partition(contains_a) == [
            frozenset([State("s0")]),
            frozenset([State("s1")]),
        ]

    def test_equivalent_accepting_states_share_a_class(self, redundant):
        assert hopcroft_partition(redundant) == [
            frozenset([State("q0")]),
            frozenset([State("q1"), State("q2")]),
        ]

    def test_single_class_without_accepting_states(self, contains_a):
        assert hopcroft_partition(contains_a.with_accepting([])) == [contains_a.states]

    def test_single_class_when_all_accept(self):
        dfa = universal_dfa(Alphabet.of("ab"))
        assert hopcroft_partition(dfa) == [dfa.states]

    def test_refines_beyond_the_initial_split(self, partial):
        assert len(hopcroft_partition(complete(partial))) == 3


class TestMinimize:
    def test_merges_equivalent_accepting_states(self, redundant, words):
        minimal = minimize(redundant)
        assert len(minimal.states) == len(redundant.states) - 1
        assert minimal.states == frozenset([State("q0"), State("q1")])
        assert minimal.accepting == frozenset([State("q1")])
        assert same_language(minimal, redundant, words)

    def test_result_is_complete(self, partial):
        minimal = minimize(partial)
        assert minimal.is_complete()
        assert len(minimal.states) == 3

    def test_idempotent(self, sample_dfa):
        once = minimize(sample_dfa)
        assert minimize(once) == once

    def test_preserves_language(self, sample_dfa, words):
        assert same_language(minimize(sample_dfa), sample_dfa, words)

    def test_drops_unreachable_states(self, with_orphan):
        assert State("u") not in minimize(with_orphan).states

    def test_empty_language_collapses_to_one_state(self):
        minimal = minimize(empty_set_dfa(Alphabet.of("ab")))
        assert minimal.states == frozenset([State("q0")])
        assert not minimal.accepting
        assert minimal.is_complete()

    def test_complete_minimized(self, sample_dfa, words):
        result = complete_minimized(sample_dfa)
        assert result.is_complete()
        assert same_language(result, sample_dfa, words)
