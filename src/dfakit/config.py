"""Configuration for comparisons and the command line."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_WORD_LENGTH = 3

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Config:
    """Settings shared by :class:`~dfakit.comparison.Comparison` and the CLI.

    Attributes:
        max_word_length: Longest word listed when enumerating languages.
        show_automata: Whether reports include the compared automata.
        verbose: Whether the command line logs at DEBUG level.
    """

    max_word_length: int = DEFAULT_MAX_WORD_LENGTH
    show_automata: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.max_word_length < 1:
            raise ValueError(
                f"max_word_length must be positive, got {self.max_word_length}"
            )

    @classmethod
    def default(cls) -> "Config":
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``DFAKIT_*`` environment variables."""
        env = os.environ if environ is None else environ

        max_word_length = DEFAULT_MAX_WORD_LENGTH
        raw = env.get("DFAKIT_MAX_WORD_LENGTH")
        if raw is not None:
            try:
                max_word_length = int(raw)
            except ValueError:
                raise ValueError(
                    f"DFAKIT_MAX_WORD_LENGTH must be an integer, got {raw!r}"
                ) from None

        show_automata = False
        raw = env.get("DFAKIT_SHOW_AUTOMATA")
        if raw is not None:
            show_automata = _parse_bool("DFAKIT_SHOW_AUTOMATA", raw)

        verbose = False
        raw = env.get("DFAKIT_VERBOSE")
        if raw is not None:
            verbose = _parse_bool("DFAKIT_VERBOSE", raw)

        return cls(
            max_word_length=max_word_length,
            show_automata=show_automata,
            verbose=verbose,
        )
