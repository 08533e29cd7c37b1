"""Input errors raised by the evaluator."""

from typing import Iterable


class InputError(ValueError):
    """Base class for rejected evaluation input."""


class CardParseError(InputError):
    """A card code could not be parsed."""


class ArityError(InputError):
    """A hand, the board, or the player list has the wrong number of entries."""


class DuplicateCardError(InputError):
    """The same card appears more than once in one evaluation."""

    def __init__(self, duplicates: Iterable[str]) -> None:
        self.duplicates = tuple(duplicates)
        super().__init__(f"Duplicate cards detected: {', '.join(self.duplicates)}")
