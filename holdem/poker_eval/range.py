"""
Starting hand range percentage calculator.

Ranges are written as comma separated tokens such as "88+, AJo+, ATs+":

- "TT"   one pocket pair; "88+" every pair from 88 up to AA
- "AKo"  offsuit only, "AKs" suited only, "AK" both
- "AJo+" keeps the high card and walks the kicker up to (not including) it:
         AJo, AQo, AKo

Every token is expanded into rank labels held in three sets (offsuit, suited,
paired), so overlapping tokens like "88+, 22+" are only counted once. Each
label stands for a fixed number of deals: 12 offsuit, 4 suited, 6 paired,
out of 1326 two-card starting hands.
"""

import logging
import re
from typing import Iterable, List, Set, Tuple

from .cardset import Rank
from .errors import RangeParseError
from .hand import HandType
from .tables.constants import (
    HAND_COMBINATIONS,
    OFFSUIT_COMBINATIONS,
    SUITED_COMBINATIONS,
    PAIRED_COMBINATIONS,
)

LOGGER = logging.getLogger(__name__)

# Compiled once at import and never mutated
RANGE_REGEX = re.compile(r"[AKQJT2-9]{2}[os]?\+?", re.IGNORECASE)
TRIM_REGEX = re.compile(r"\s*,\s*")


def parse_range_token(token: str) -> Tuple[Rank, Rank, HandType, bool]:
    """
    Parse one range token.

    Returns:
        Tuple of (high rank, low rank, hand type, plus modifier)

    Raises:
        RangeParseError: the token does not match the range grammar
    """
    if RANGE_REGEX.fullmatch(token) is None:
        raise RangeParseError()

    first, second = Rank.from_char(token[0]), Rank.from_char(token[1])
    high, low = max(first, second), min(first, second)
    suffix = token[2:].rstrip("+").lower()
    plus = token.endswith("+")

    if high == low:
        hand_type = HandType.PAIRED
    elif suffix == "o":
        hand_type = HandType.OFFSUIT
    elif suffix == "s":
        hand_type = HandType.SUITED
    else:
        hand_type = HandType.UNPAIRED
    return high, low, hand_type, plus


def split_range(range_text: str) -> List[str]:
    """Normalize whitespace around commas and split into tokens."""
    return TRIM_REGEX.sub(",", range_text).strip().split(",")


class RangeCombinations:
    """De-duplicated rank labels covered by a range."""

    def __init__(self):
        self.offsuit: Set[str] = set()
        self.suited: Set[str] = set()
        self.paired: Set[str] = set()

    @classmethod
    def from_text(cls, range_text: str) -> "RangeCombinations":
        """
        Expand a whole range string.

        Raises:
            RangeParseError: on the first token that does not parse
        """
        combinations = cls()
        combinations.add_tokens(split_range(range_text))
        return combinations

    def add_tokens(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.add_token(token)

    def add_token(self, token: str) -> None:
        high, low, hand_type, plus = parse_range_token(token)

        if hand_type == HandType.PAIRED:
            # "+" walks the pair up to aces
            steps = high.gap_with_ace() + 1 if plus else 1
            for step in range(steps):
                self.paired.add(Rank(high + step).char)
        else:
            # "+" walks the kicker up to one below the high card
            steps = high.gap(low) if plus else 1
            for step in range(steps):
                label = high.char + Rank(low + step).char
                if hand_type in (HandType.OFFSUIT, HandType.UNPAIRED):
                    self.offsuit.add(label)
                if hand_type in (HandType.SUITED, HandType.UNPAIRED):
                    self.suited.add(label)

        LOGGER.debug(
            "Expanded %r: %d offsuit, %d suited, %d paired labels",
            token, len(self.offsuit), len(self.suited), len(self.paired),
        )

    def len_of_offsuit(self) -> int:
        return len(self.offsuit)

    def len_of_suited(self) -> int:
        return len(self.suited)

    def len_of_paired(self) -> int:
        return len(self.paired)

    @property
    def combination_count(self) -> int:
        return (
            self.len_of_offsuit() * OFFSUIT_COMBINATIONS
            + self.len_of_suited() * SUITED_COMBINATIONS
            + self.len_of_paired() * PAIRED_COMBINATIONS
        )

    @property
    def fraction(self) -> float:
        return self.combination_count / HAND_COMBINATIONS


def measure(range_text: str) -> float:
    """
    Fraction of all 1326 starting hands covered by a range.

    Example:
        >>> round(measure("KK+"), 4)
        0.009

    Raises:
        RangeParseError: on the first token that does not parse; no partial
            result is returned
    """
    return RangeCombinations.from_text(range_text).fraction
