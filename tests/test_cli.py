"""Tests for the dfakit-compare command."""

import pytest

from dfakit.algorithms import complement, intersection, minimize
from dfakit.cli import format_report, main
from dfakit.comparison import Comparison
from dfakit.config import Config
from dfakit.constraints import constraint_calls
from dfakit.exceptions import RegexSymbolError
from dfakit.serialization import dump


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("DFAKIT_MAX_WORD_LENGTH", "DFAKIT_SHOW_AUTOMATA", "DFAKIT_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write(tmp_path):
    def write_dfa(name, dfa):
        path = tmp_path / name
        dump(dfa, path)
        return str(path)

    return write_dfa


class TestReport:
    def test_incomparable_languages(self, contains_a):
        comparison = Comparison.compare(
            contains_a, complement(contains_a), Config(max_word_length=2)
        )
        assert format_report(comparison) == [
            "The test for equivalence of the two DFAs returned: False",
            "",
            "Is L(DFA1) subset of L(DFA2): No! --> 'a' is in L(DFA1) and not in L(DFA2)",
            "Is L(DFA2) subset of L(DFA1): No! --> '' is in L(DFA2) and not in L(DFA1)",
            "",
            "An equivalent regular expression for DFA1 is: (b)*a(a + b)*",
            "An equivalent regular expression for DFA2 is: (b)*",
            "",
            "All words in L(DFA1) of maximum length 2 are:",
            "['a', 'aa', 'ab', 'ba']",
            "All words in L(DFA2) of maximum length 2 are:",
            "['', 'b', 'bb']",
            "",
            "All words in L(DFA1) - L(DFA2) of maximum length 2 are:",
            "['a', 'aa', 'ab', 'ba']",
            "All words in L(DFA2) - L(DFA1) of maximum length 2 are:",
            "['', 'b', 'bb']",
        ]

    def test_equivalent_stops_after_verdict(self, redundant):
        lines = format_report(Comparison.compare(redundant, minimize(redundant)))
        assert lines == ["The test for equivalence of the two DFAs returned: True", ""]

    def test_first_subset_of_second(self, contains_a, even_b):
        both = intersection(contains_a, even_b)
        lines = format_report(Comparison.compare(both, contains_a))
        assert lines[-1] == "Is L(DFA1) subset of L(DFA2): Yes!"
        assert not any("regular expression" in line for line in lines)

    def test_second_subset_of_first(self, contains_a, even_b):
        both = intersection(contains_a, even_b)
        lines = format_report(Comparison.compare(contains_a, both))
        assert lines[-2].startswith("Is L(DFA1) subset of L(DFA2): No! --> 'ab'")
        assert lines[-1] == "Is L(DFA2) subset of L(DFA1): Yes!"

    def test_show_automata(self, contains_a, even_b):
        lines = format_report(
            Comparison.compare(contains_a, even_b, Config(show_automata=True))
        )
        assert lines[0] == "The first DFA:"
        assert lines[1] == str(contains_a)
        assert "The second DFA:" in lines


class TestMain:
    def test_compares_files(self, write, contains_a, capsys):
        first = write("first.json", contains_a)
        second = write("second.json", complement(contains_a))
        assert main([first, second, "--max-word-length", "1"]) == 0
        out = capsys.readouterr().out
        assert "The test for equivalence of the two DFAs returned: False" in out
        assert "'a' is in L(DFA1) and not in L(DFA2)" in out
        assert "All words in L(DFA1) of maximum length 1 are:\n['a']\n" in out

    def test_equivalent_files(self, write, redundant, capsys):
        first = write("first.json", redundant)
        second = write("second.json", minimize(redundant))
        assert main([first, second]) == 0
        assert "returned: True" in capsys.readouterr().out

    def test_default_length_from_environment(self, write, contains_a, even_b, monkeypatch, capsys):
        monkeypatch.setenv("DFAKIT_MAX_WORD_LENGTH", "1")
        assert main([write("a.json", contains_a), write("b.json", even_b)]) == 0
        assert "of maximum length 1 are:" in capsys.readouterr().out

    def test_missing_file(self, write, tmp_path, contains_a, capsys):
        first = write("first.json", contains_a)
        assert main([first, str(tmp_path / "missing.json")]) == 2
        assert "error: cannot read automaton" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "content",
        ["{not json", '{"States": []}', '{"States": ["0"], "Alphabet": ["a"], '
         '"TransitionFunction": [], "StartState": "1", "AcceptingStates": []}'],
    )
    def test_malformed_file(self, write, tmp_path, contains_a, capsys, content):
        bad = tmp_path / "bad.json"
        bad.write_text(content)
        assert main([write("first.json", contains_a), str(bad)]) == 2
        assert "error: invalid automaton" in capsys.readouterr().err

    @pytest.mark.parametrize("length", ["0", "-3", "many"])
    def test_rejects_bad_word_length(self, write, contains_a, length):
        path = write("first.json", contains_a)
        with pytest.raises(SystemExit) as excinfo:
            main([path, path, "--max-word-length", length])
        assert excinfo.value.code == 2

    def test_invalid_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("DFAKIT_VERBOSE", "maybe")
        assert main(["a.json", "b.json"]) == 2
        assert "DFAKIT_VERBOSE" in capsys.readouterr().err

    def test_operator_symbol_in_alphabet(self, tmp_path, capsys):
        record = (
            '{"States": ["0", "1"], "Alphabet": ["*", "a"], '
            '"TransitionFunction": [["0", "*", "1"]], "StartState": "0", '
            '"AcceptingStates": ["1"]}'
        )
        path = tmp_path / "star.json"
        path.write_text(record)
        assert main([str(path), str(path)]) == 2
        err = capsys.readouterr().err
        assert "error: invalid automaton" in err
        assert "'Alphabet'" in err

    def test_comparison_errors_are_reported(self, write, contains_a, monkeypatch, capsys):
        def fail(self):
            raise RegexSymbolError("no regular expression")

        monkeypatch.setattr(Comparison, "first_regex", fail)
        first = write("first.json", contains_a)
        second = write("second.json", complement(contains_a))
        assert main([first, second]) == 1
        captured = capsys.readouterr()
        assert "error: cannot compare: no regular expression" in captured.err
        assert captured.out == ""

    def test_requires_two_files(self, write, contains_a):
        with pytest.raises(SystemExit) as excinfo:
            main([write("first.json", contains_a)])
        assert excinfo.value.code == 2


class TestModels:
    @pytest.fixture
    def write_model(self, tmp_path):
        def write_text(name, text):
            path = tmp_path / name
            path.write_text(text)
            return str(path)

        return write_text

    def test_list_constraints(self, capsys):
        assert main(["--list-constraints"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == constraint_calls()
        assert "existence(a,n)" in lines

    def test_compares_models(self, write_model, capsys):
        first = write_model("response.decl", "a,b;\nresponse(a,b);\n")
        second = write_model("succession.decl", "a,b;\nsuccession(a,b);\n")
        assert main(["--models", first, second]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Two deterministic finite automata have been created for the given models!",
            "",
            "The test for equivalence of the two DFAs returned: False",
            "",
            "Is L(DFA1) subset of L(DFA2): No! --> 'b' is in L(DFA1) and not in L(DFA2)",
            "Is L(DFA2) subset of L(DFA1): Yes!",
        ]

    def test_equivalent_models(self, write_model, capsys):
        first = write_model("one.decl", "a,b; init(a); absence(b,2);")
        second = write_model("two.decl", "b,a; init(a); init(a); absence(b,3); absence(b,2);")
        assert main(["--models", first, second]) == 0
        assert "returned: True" in capsys.readouterr().out

    def test_show_automata(self, write_model, capsys):
        path = write_model("init.decl", "a,b; init(a);")
        assert main(["--models", "--dfa-output", path, path]) == 0
        assert "The first DFA:" in capsys.readouterr().out

    def test_invalid_model(self, write_model, capsys):
        good = write_model("good.decl", "a,b; init(a);")
        bad = write_model("bad.decl", "a,b; response(a,c);")
        assert main(["--models", good, bad]) == 2
        err = capsys.readouterr().err
        assert "error: invalid model: Constraint uses an activity" in err

    def test_missing_model(self, write_model, tmp_path, capsys):
        good = write_model("good.decl", "a,b; init(a);")
        assert main(["--models", good, str(tmp_path / "missing.decl")]) == 2
        assert "error: cannot read model" in capsys.readouterr().err

    def test_json_files_are_not_models(self, write, contains_a, capsys):
        path = write("first.json", contains_a)
        assert main(["--models", path, path]) == 2
        assert "error: invalid model: Invalid alphabet" in capsys.readouterr().err
