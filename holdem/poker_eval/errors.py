"""
Errors raised by card parsing, hand containers and the range calculator.

Every error is a ``ValueError`` so callers that only care about bad input can
catch that.
"""


class PokerError(ValueError):
    """Base class for all library errors."""


class RankParseError(PokerError):
    def __init__(self, char: str = ""):
        super().__init__(f"Unable to parse rank: {char!r}")
        self.char = char


class SuitParseError(PokerError):
    def __init__(self, char: str = ""):
        super().__init__(f"Unable to parse suit: {char!r}")
        self.char = char


class CardParseError(PokerError):
    def __init__(self, text: str = ""):
        super().__init__(f"Error reading characters while parsing card: {text!r}")
        self.text = text


class InvalidHandSizeError(PokerError):
    def __init__(self, size: int):
        super().__init__(f"Hand must contain exactly 2 cards, got {size}")
        self.size = size


class HoldemHandSizeError(PokerError):
    def __init__(self, size: int):
        super().__init__(f"Holdem hands should never have more than 7 cards in them, got {size}")
        self.size = size


class RangeParseError(PokerError):
    """A range token did not match the range grammar."""

    def __init__(self):
        super().__init__("Unable to parse hand range")
