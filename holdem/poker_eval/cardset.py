"""
Card representation and conversion utilities for poker hand evaluation.

Cards are exchanged with the evaluator as integer IDs (0-51) and reduced to
bit planes: one 13-bit rank pattern per suit plus the rank multiplicity sets.

Card ID format: card_id = suit * 13 + rank
- suit: 0=clubs, 1=diamonds, 2=hearts, 3=spades
- rank: 0=2, 1=3, ..., 11=K, 12=A
Padding slots hold -1.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

import jax
import jax.numpy as jnp

from .errors import CardParseError, RankParseError, SuitParseError
from .tables.constants import NUM_RANKS, NUM_SUITS, RANK_BITS

RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "CDHS"
SUIT_ICONS = "♣♦♥♠"


class Rank(IntEnum):
    """Card ranks, Ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_char(cls, char: str) -> "Rank":
        idx = RANK_CHARS.find(char.upper()) if len(char) == 1 else -1
        if idx < 0:
            raise RankParseError(char)
        return cls(idx + 2)

    @classmethod
    def from_index(cls, index: int) -> "Rank":
        """Rank for a bit index (0=2, ..., 12=A)."""
        return cls(index + 2)

    @property
    def char(self) -> str:
        return RANK_CHARS[self.index]

    @property
    def index(self) -> int:
        return self.value - 2

    @property
    def bit(self) -> int:
        return 1 << self.index

    def gap(self, other: "Rank") -> int:
        return abs(self.value - other.value)

    def gap_with_ace(self) -> int:
        return Rank.ACE.value - self.value


class Suit(IntEnum):
    """Card suits. Only used as a bit plane index when ranking."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @classmethod
    def from_char(cls, char: str) -> "Suit":
        idx = SUIT_CHARS.find(char.upper()) if len(char) == 1 else -1
        if idx < 0:
            raise SuitParseError(char)
        return cls(idx)

    @property
    def char(self) -> str:
        return SUIT_CHARS[self.value]

    @property
    def icon(self) -> str:
        return SUIT_ICONS[self.value]


@dataclass(frozen=True, order=True)
class Card:
    suit: Suit
    rank: Rank

    @property
    def code(self) -> str:
        """Two-letter code, e.g. "SA" for the ace of spades."""
        return self.suit.char + self.rank.char

    @property
    def id(self) -> int:
        return card_to_id(self.suit, self.rank.index)

    @classmethod
    def from_id(cls, card_id: int) -> "Card":
        suit, rank = id_to_card(card_id)
        return cls(Suit(suit), Rank.from_index(rank))

    def __str__(self) -> str:
        return self.suit.icon + self.rank.char


def card_to_id(suit: int, rank: int) -> int:
    """
    Convert suit and rank index to card ID.

    Args:
        suit: 0=clubs, 1=diamonds, 2=hearts, 3=spades
        rank: 0=2, 1=3, ..., 11=K, 12=A

    Returns:
        Card ID (0-51)
    """
    return int(suit) * NUM_RANKS + int(rank)


def id_to_card(card_id: int) -> Tuple[int, int]:
    """Convert card ID to (suit, rank index)."""
    return card_id // NUM_RANKS, card_id % NUM_RANKS


def parse_card(code: str) -> Card:
    """
    Parse a card code such as "SA", "ht" or "d9".

    The suit character comes first, then the rank character; both are
    case-insensitive.

    Raises:
        CardParseError: fewer than two characters
        SuitParseError: unknown suit character
        RankParseError: unknown rank character
    """
    if len(code) < 2:
        raise CardParseError(code)
    return Card(Suit.from_char(code[0]), Rank.from_char(code[1]))


def format_card(card: Card) -> str:
    return card.code


def parse_cards(codes: Iterable[str]) -> List[Card]:
    return [parse_card(code) for code in codes]


def format_hand(cards: Iterable[Card]) -> str:
    """Format cards as readable string like "♠A, ♥T"."""
    return ", ".join(str(card) for card in cards)


def cards_to_ids(cards: Sequence[Card], pad_to: Optional[int] = None) -> jnp.ndarray:
    """
    Convert cards to an int32 card ID array.

    Args:
        cards: Cards to convert
        pad_to: Optional length; missing slots are filled with -1

    Returns:
        Array of card IDs
    """
    ids = [card.id for card in cards]
    if pad_to is not None:
        ids.extend([-1] * (pad_to - len(ids)))
    return jnp.array(ids, dtype=jnp.int32)


def ids_to_cards(card_ids: Iterable[int]) -> List[Card]:
    """Convert card IDs back to cards, skipping -1 padding."""
    return [Card.from_id(int(card_id)) for card_id in card_ids if int(card_id) >= 0]


@jax.jit
def cards_to_suit_patterns(cards: jnp.ndarray) -> jnp.ndarray:
    """
    Vectorized conversion of card IDs to per-suit rank patterns.

    Args:
        cards: Array of card IDs (0-51), padded with -1 for invalid cards

    Returns:
        Array of shape (4,), 13-bit rank pattern for each suit
    """
    valid_mask = cards >= 0
    valid_cards = jnp.where(valid_mask, cards, 0)

    suits = valid_cards // NUM_RANKS
    ranks = valid_cards % NUM_RANKS

    bit_patterns = jnp.where(valid_mask, jnp.left_shift(jnp.int32(1), ranks), 0)

    # Shape: (4, num_cards)
    suit_indicators = jnp.arange(NUM_SUITS)[:, None] == suits[None, :]

    # Distinct cards never share a bit inside one suit, so sum == OR
    return jnp.sum(
        jnp.where(suit_indicators, bit_patterns[None, :], 0),
        axis=1,
        dtype=jnp.int32,
    )


@jax.jit
def get_rank_counts(cards: jnp.ndarray) -> jnp.ndarray:
    """
    Count occurrences of each rank across all suits.

    Args:
        cards: Array of card IDs (0-51), padded with -1

    Returns:
        Array of 13 integers with count of each rank
    """
    ranks = jnp.where(cards >= 0, cards % NUM_RANKS, -1)
    return jnp.sum(jnp.arange(NUM_RANKS)[:, None] == ranks[None, :], axis=1, dtype=jnp.int32)


@jax.jit
def rank_counts_to_sets(rank_counts: jnp.ndarray) -> jnp.ndarray:
    """
    Group ranks by multiplicity.

    Returns:
        Array of shape (5,): entry k has bit r set iff rank r occurs exactly k times
    """
    hits = jnp.arange(5)[:, None] == rank_counts[None, :]  # Shape: (5, 13)
    return jnp.sum(jnp.where(hits, RANK_BITS[None, :], 0), axis=1, dtype=jnp.int32)


@jax.jit
def cards_to_bit_planes(cards: jnp.ndarray) -> Tuple[jnp.ndarray, jnp.ndarray, jnp.ndarray]:
    """
    Reduce card IDs to the three bit structures the evaluator works on.

    Returns:
        (count_to_value[5], suit_patterns[4], value_set)
    """
    suit_patterns = cards_to_suit_patterns(cards)
    value_set = suit_patterns[0] | suit_patterns[1] | suit_patterns[2] | suit_patterns[3]
    count_to_value = rank_counts_to_sets(get_rank_counts(cards))
    return count_to_value, suit_patterns, value_set
