"""Tests for symbols, alphabets, states and relations."""

import pytest

from dfakit.automaton.alphabet import Alphabet, Symbol
from dfakit.automaton.relation import Function, Relation, TransitionFunction
from dfakit.automaton.state import State, fresh_state
from dfakit.exceptions import MalformedAutomatonError

A, B = Symbol("a"), Symbol("b")
S0, S1, S2 = State("s0"), State("s1"), State("s2")


class TestSymbol:
    @pytest.mark.parametrize("value", ["", "ab", None, 1])
    def test_rejects_non_characters(self, value):
        with pytest.raises(MalformedAutomatonError):
            Symbol(value)

    def test_value_semantics(self):
        assert Symbol("a") == A
        assert len({Symbol("a"), A}) == 1
        assert str(A) == "a"
        assert A < B


class TestAlphabet:
    def test_iterates_in_character_order(self):
        alphabet = Alphabet.of("cab")
        assert alphabet.chars() == ["a", "b", "c"]
        assert str(alphabet) == "[a, b, c]"
        assert len(alphabet) == 3

    CONTAINS = [
        ("a", True),
        (Symbol("b"), True),
        ("c", False),
        ("ab", False),
        ("", False),
    ]

    @pytest.mark.parametrize("item,expected", CONTAINS)
    def test_membership(self, item, expected):
        assert (item in Alphabet.of("ab")) is expected

    KLEENE_STAR = [
        ("", True),
        ("abba", True),
        ("abc", False),
        ("c", False),
    ]

    @pytest.mark.parametrize("word,expected", KLEENE_STAR)
    def test_is_in_kleene_star(self, word, expected):
        assert Alphabet.of("ab").is_in_kleene_star(word) is expected

    def test_set_algebra(self):
        ab, bc = Alphabet.of("ab"), Alphabet.of("bc")
        assert ab.union(bc) == Alphabet.of("abc")
        assert ab.intersection(bc) == Alphabet.of("b")
        assert ab.difference(bc) == Alphabet.of("a")

    def test_rejects_non_symbols(self):
        with pytest.raises(MalformedAutomatonError):
            Alphabet(frozenset(["a"]))


class TestFreshState:
    def test_unused_name_is_kept(self):
        assert fresh_state("trash", {S0}) == State("trash")

    def test_marker_is_appended_until_unique(self):
        taken = {State("trash"), State("trash!")}
        assert fresh_state("trash", taken) == State("trash!!")

    def test_accepts_state_candidates(self):
        assert fresh_state(S0, {S0}) == State("s0!")


class TestRelation:
    def setup_method(self):
        self.relation = Relation(frozenset([(1, "x"), (1, "y"), (2, "y")]))

    def test_derived_sets(self):
        assert self.relation.domain == frozenset([1, 2])
        assert self.relation.codomain == frozenset(["x", "y"])
        assert self.relation.image(1) == frozenset(["x", "y"])
        assert self.relation.preimage("y") == frozenset([1, 2])
        assert self.relation.image(3) == frozenset()

    def test_uniqueness(self):
        assert not self.relation.is_right_unique()
        assert not self.relation.is_left_unique()
        assert not self.relation.is_function()
        injective = Relation(frozenset([(1, "x"), (2, "y")]))
        assert injective.is_right_unique()
        assert injective.is_left_unique()

    def test_as_function_requires_right_uniqueness(self):
        with pytest.raises(ValueError):
            self.relation.as_function()

    def test_inverse(self):
        assert self.relation.inverse().image("y") == frozenset([1, 2])
        assert len(self.relation.inverse()) == len(self.relation)


class TestFunction:
    def test_apply(self):
        f = Function(frozenset([(1, "x"), (2, "y")]))
        assert f.apply(1) == "x"
        assert f.apply(3) is None
        assert f.is_defined(2)
        assert not f.is_defined(3)


class TestTransitionFunction:
    def setup_method(self):
        self.delta = TransitionFunction.from_triples(
            [(S0, A, S1), (S0, B, S0), (S2, A, S1)]
        )

    def test_apply(self):
        assert self.delta.apply(S0, A) == S1
        assert self.delta.apply(S1, A) is None
        assert self.delta.is_defined(S2, A)
        assert not self.delta.is_defined(S2, B)

    def test_preimage_states(self):
        assert self.delta.preimage_states(S1) == frozenset([S0, S2])
        assert self.delta.preimage_states(S1, A) == frozenset([S0, S2])
        assert self.delta.preimage_states(S1, B) == frozenset()
        assert self.delta.preimage_states(S0, B) == frozenset([S0])

    def test_domain(self):
        assert self.delta.domain_states() == frozenset([S0, S2])
        assert self.delta.symbols() == frozenset([A, B])

    def test_triples_are_sorted(self):
        assert self.delta.triples() == [(S0, A, S1), (S0, B, S0), (S2, A, S1)]
        assert str(self.delta) == "[(s0, a) -> s1, (s0, b) -> s0, (s2, a) -> s1]"

    def test_rejects_nondeterminism(self):
        with pytest.raises(MalformedAutomatonError):
            TransitionFunction.from_triples([(S0, A, S0), (S0, A, S1)])
