"""Custom exceptions for dfakit."""

from typing import Optional


class DFAKitError(Exception):
    """Base exception for all dfakit errors."""

    pass


class MalformedAutomatonError(DFAKitError, ValueError):
    """Raised when automaton components do not describe a valid DFA."""

    pass


class InvalidTrashStateError(DFAKitError, ValueError):
    """Raised when an explicit trash state is accepting or leaves itself."""

    pass


class IncompleteAutomatonError(DFAKitError, ValueError):
    """Raised when an operation requires complete automata but got partial ones."""

    pass


class InvalidWordError(DFAKitError, ValueError):
    """Raised when a word contains characters outside the automaton's alphabet."""

    def __init__(self, word: str, alphabet: str = "") -> None:
        self.word = word
        message = f"{word!r} is not a word over the alphabet"
        if alphabet:
            message += f" {alphabet}"
        super().__init__(message)


class NotEnoughAutomataError(DFAKitError, ValueError):
    """Raised when an n-ary product is requested for fewer than two automata."""

    pass


class RegexSymbolError(DFAKitError, ValueError):
    """Raised when a symbol cannot appear in a regex because it is an operator."""

    pass


class AutomatonFormatError(DFAKitError):
    """Raised when a persisted automaton record cannot be read."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        if self.field is not None:
            return f"{super().__str__()} (field {self.field!r})"
        return super().__str__()


class ConstraintError(DFAKitError, ValueError):
    """Raised when a constraint has the wrong parameters for its template."""

    pass


class ModelFormatError(DFAKitError):
    """Raised when a constraint model file cannot be read."""

    def __init__(self, message: str, item: Optional[str] = None) -> None:
        self.item = item
        super().__init__(message)

    def __str__(self) -> str:
        if self.item is not None:
            return f"{super().__str__()} (in {self.item!r})"
        return super().__str__()
