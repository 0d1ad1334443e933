"""Command line interface: compare the languages of two stored automata.

The inputs are either JSON automaton records or, with ``--models``, Declare
model files whose constraints are compiled to automata first.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from dfakit.automaton.dfa import DFA
from dfakit.comparison import Comparison
from dfakit.config import Config
from dfakit.constraints import constraint_calls, load_model
from dfakit.exceptions import DFAKitError
from dfakit.serialization import load

logger = logging.getLogger(__name__)


def _subset_lines(comparison: Comparison) -> List[str]:
    lines = []
    witness = comparison.witness_first_not_in_second()
    if witness is None:
        return ["Is L(DFA1) subset of L(DFA2): Yes!"]
    lines.append(
        f"Is L(DFA1) subset of L(DFA2): No! --> {witness!r} is in L(DFA1) and not in L(DFA2)"
    )
    witness = comparison.witness_second_not_in_first()
    if witness is None:
        lines.append("Is L(DFA2) subset of L(DFA1): Yes!")
        return lines
    lines.append(
        f"Is L(DFA2) subset of L(DFA1): No! --> {witness!r} is in L(DFA2) and not in L(DFA1)"
    )
    return lines


def format_report(comparison: Comparison) -> List[str]:
    """Render a comparison as report lines.

    The report stops after the subset checks when one language contains
    the other; regexes and word listings are only shown for incomparable
    languages.
    """
    lines = []
    if comparison.config.show_automata:
        lines.extend(["The first DFA:", str(comparison.first), ""])
        lines.extend(["The second DFA:", str(comparison.second), ""])

    lines.append(f"The test for equivalence of the two DFAs returned: {comparison.are_equivalent}")
    lines.append("")
    if comparison.are_equivalent:
        return lines

    subset_lines = _subset_lines(comparison)
    lines.extend(subset_lines)
    if subset_lines[-1].endswith("Yes!"):
        return lines
    lines.append("")

    lines.append(f"An equivalent regular expression for DFA1 is: {comparison.first_regex()}")
    lines.append(f"An equivalent regular expression for DFA2 is: {comparison.second_regex()}")
    lines.append("")

    n = comparison.max_word_length
    lines.append(f"All words in L(DFA1) of maximum length {n} are:")
    lines.append(str(comparison.words_of_first()))
    lines.append(f"All words in L(DFA2) of maximum length {n} are:")
    lines.append(str(comparison.words_of_second()))
    lines.append("")
    lines.append(f"All words in L(DFA1) - L(DFA2) of maximum length {n} are:")
    lines.append(str(comparison.words_first_not_in_second()))
    lines.append(f"All words in L(DFA2) - L(DFA1) of maximum length {n} are:")
    lines.append(str(comparison.words_second_not_in_first()))
    return lines


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError("the value has to be positive")
    return number


MODEL_EPILOG = """\
Declare model files (--models) have the form

  a,b,c;
  init(a);
  existence(a,12);
  co_existence(b,c);

The first item lists the activities; every further item is a constraint.
Use --list-constraints to see the available templates.
"""


def build_parser(defaults: Config) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dfakit-compare",
        description="Compare the languages of the two automata stored in FILE FILE.",
        epilog=MODEL_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "first", metavar="FILE", nargs="?", help="the first automaton or model"
    )
    p.add_argument(
        "second", metavar="FILE", nargs="?", help="the second automaton or model"
    )
    p.add_argument(
        "--models",
        action="store_true",
        help="read FILE FILE as Declare models instead of JSON automata",
    )
    p.add_argument(
        "--list-constraints",
        action="store_true",
        help="list the available constraint templates and exit",
    )
    p.add_argument(
        "--max-word-length",
        type=_positive_int,
        default=defaults.max_word_length,
        help="maximum word length for language listings (default: %(default)s)",
    )
    p.add_argument(
        "--show-automata",
        "--dfa-output",
        action="store_true",
        default=defaults.show_automata,
        help="also print the compared automata",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=defaults.verbose,
        help="log algorithm progress",
    )
    return p


def _load_automata(first: str, second: str) -> Tuple[DFA, DFA]:
    logger.debug("Loading automata %s and %s", first, second)
    return load(first), load(second)


def _load_models(first: str, second: str) -> Tuple[DFA, DFA]:
    logger.debug("Loading models %s and %s", first, second)
    return load_model(first).to_dfa(), load_model(second).to_dfa()


def main(argv: Optional[List[str]] = None) -> int:
    try:
        defaults = Config.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    if args.list_constraints:
        for call in constraint_calls():
            print(call)
        return 0
    if args.second is None:
        parser.error("two files are required")

    config = Config(
        max_word_length=args.max_word_length,
        show_automata=args.show_automata,
        verbose=args.verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    kind = "model" if args.models else "automaton"
    try:
        if args.models:
            first, second = _load_models(args.first, args.second)
        else:
            first, second = _load_automata(args.first, args.second)
    except OSError as e:
        print(f"error: cannot read {kind}: {e}", file=sys.stderr)
        return 2
    except DFAKitError as e:
        print(f"error: invalid {kind}: {e}", file=sys.stderr)
        return 2

    try:
        lines = format_report(Comparison.compare(first, second, config))
    except DFAKitError as e:
        print(f"error: cannot compare: {e}", file=sys.stderr)
        return 1

    if args.models:
        print("Two deterministic finite automata have been created for the given models!")
        print()
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
