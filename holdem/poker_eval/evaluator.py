"""
Core poker hand evaluation functions using rank bit planes.

Hands are reduced to per-suit 13-bit rank patterns and rank multiplicity sets,
and the best five-card hand is read straight off those masks without
enumerating five-card subsets. The kernels are flattened (every category
value is computed, then selected) so they compile once under jax.jit and map
over batches with jax.vmap.
"""

import functools
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple, Union

import jax
import jax.numpy as jnp

from .cardset import Card, cards_to_bit_planes
from .cardset_ops import keep_highest, keep_n, pack, popcount, rank_straight
from .tables import (
    HANDCLASS_HIGH_CARD, HANDCLASS_PAIR, HANDCLASS_TWO_PAIR,
    HANDCLASS_TRIPS, HANDCLASS_STRAIGHT, HANDCLASS_FLUSH,
    HANDCLASS_FULL_HOUSE, HANDCLASS_QUADS, HANDCLASS_STRAIGHT_FLUSH,
)


class Category(IntEnum):
    HIGH_CARD = HANDCLASS_HIGH_CARD
    ONE_PAIR = HANDCLASS_PAIR
    TWO_PAIR = HANDCLASS_TWO_PAIR
    THREE_OF_A_KIND = HANDCLASS_TRIPS
    STRAIGHT = HANDCLASS_STRAIGHT
    FLUSH = HANDCLASS_FLUSH
    FULL_HOUSE = HANDCLASS_FULL_HOUSE
    FOUR_OF_A_KIND = HANDCLASS_QUADS
    STRAIGHT_FLUSH = HANDCLASS_STRAIGHT_FLUSH

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Category.HIGH_CARD: "High Card",
    Category.ONE_PAIR: "Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
}


@functools.total_ordering
@dataclass(frozen=True)
class HandCategory:
    """
    A ranked hand: category plus tie-break payload.

    The category always dominates; the payload only breaks ties between
    hands of the same category.
    """

    category: Category
    payload: int

    def __post_init__(self):
        object.__setattr__(self, "category", Category(int(self.category)))
        object.__setattr__(self, "payload", int(self.payload))

    @property
    def sort_key(self) -> Tuple[int, int]:
        return int(self.category), self.payload

    @property
    def description(self) -> str:
        return self.category.description

    def __lt__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.description}({self.payload})"


CardsLike = Union[Iterable[Card], jax.Array]


def _to_card_ids(cards: CardsLike) -> jnp.ndarray:
    if isinstance(cards, jax.Array):
        return cards.astype(jnp.int32)
    ids = [card.id if isinstance(card, Card) else int(card) for card in cards]
    return jnp.array(ids, dtype=jnp.int32)


@jax.jit
def rank_cardset(cards: jnp.ndarray) -> jnp.ndarray:
    """
    Rank the best five-card hand among 5-7 cards.

    Args:
        cards: Array of card IDs (0-51), can be padded with -1

    Returns:
        int32[2] array of (category, payload)
    """
    count_to_value, suit_patterns, value_set = cards_to_bit_planes(cards)
    pairs = count_to_value[2]
    trips = count_to_value[3]
    quads = count_to_value[4]

    # With at most 7 cards only one suit can reach 5
    suit_counts = popcount(suit_patterns)
    has_flush = jnp.any(suit_counts >= 5)
    flush_ranks = suit_patterns[jnp.argmax(suit_counts)]
    is_straight_flush, straight_flush_rank = rank_straight(flush_ranks)
    is_straight_flush = has_flush & is_straight_flush
    is_straight, straight_rank = rank_straight(value_set)

    # Pre-compute every candidate payload
    high_card_val = keep_n(value_set, 5)
    pair_val = pack(pairs, keep_n(value_set ^ pairs, 3))
    top_two_pairs = keep_n(pairs, 2)
    two_pair_val = pack(top_two_pairs, keep_highest(value_set ^ top_two_pairs))
    trips_val = pack(trips, keep_n(value_set ^ trips, 2))
    flush_val = keep_n(flush_ranks, 5)
    full_house_val = pack(trips, keep_highest(pairs))
    top_trips = keep_highest(trips)
    double_trips_val = pack(top_trips, trips ^ top_trips)
    quads_val = pack(quads, keep_highest(value_set ^ quads))

    has_trips = trips != 0
    has_double_trips = popcount(trips) >= 2

    # Weakest first; each later match overrides
    candidates = (
        (pairs != 0, HANDCLASS_PAIR, pair_val),
        (popcount(pairs) >= 2, HANDCLASS_TWO_PAIR, two_pair_val),
        (has_trips, HANDCLASS_TRIPS, trips_val),
        (is_straight, HANDCLASS_STRAIGHT, straight_rank),
        (has_flush, HANDCLASS_FLUSH, flush_val),
        (has_trips & (pairs != 0), HANDCLASS_FULL_HOUSE, full_house_val),
        (has_double_trips, HANDCLASS_FULL_HOUSE, double_trips_val),
        (quads != 0, HANDCLASS_QUADS, quads_val),
        (is_straight_flush, HANDCLASS_STRAIGHT_FLUSH, straight_flush_rank),
    )

    category = jnp.int32(HANDCLASS_HIGH_CARD)
    payload = high_card_val
    for matched, hand_class, value in candidates:
        category = jnp.where(matched, hand_class, category)
        payload = jnp.where(matched, value, payload)

    return jnp.stack([category, payload]).astype(jnp.int32)


@jax.jit
def rank_five_cardset(cards: jnp.ndarray) -> jnp.ndarray:
    """
    Rank exactly five distinct cards.

    The number of distinct ranks (5/4/3/2) together with one straight and
    flush check decides the category.

    Returns:
        int32[2] array of (category, payload)
    """
    count_to_value, suit_patterns, value_set = cards_to_bit_planes(cards)
    pairs = count_to_value[2]
    trips = count_to_value[3]
    quads = count_to_value[4]
    unique_ranks = popcount(value_set)

    # 5 distinct ranks
    is_flush = jnp.any(popcount(suit_patterns) == 5)
    is_straight, straight_rank = rank_straight(value_set)
    five_class = jnp.where(
        is_straight,
        jnp.where(is_flush, HANDCLASS_STRAIGHT_FLUSH, HANDCLASS_STRAIGHT),
        jnp.where(is_flush, HANDCLASS_FLUSH, HANDCLASS_HIGH_CARD),
    )
    five_val = jnp.where(is_straight, straight_rank, value_set)

    # 3 distinct ranks: trips or two pair
    has_trips = trips != 0
    three_major = jnp.where(has_trips, trips, pairs)
    three_class = jnp.where(has_trips, HANDCLASS_TRIPS, HANDCLASS_TWO_PAIR)

    # 2 distinct ranks: full house or quads
    two_major = jnp.where(has_trips, trips, quads)
    two_class = jnp.where(has_trips, HANDCLASS_FULL_HOUSE, HANDCLASS_QUADS)

    # 4 distinct ranks is always one pair
    major = jnp.where(
        unique_ranks == 4,
        pairs,
        jnp.where(unique_ranks == 3, three_major, two_major),
    )
    grouped_class = jnp.where(
        unique_ranks == 4,
        HANDCLASS_PAIR,
        jnp.where(unique_ranks == 3, three_class, two_class),
    )
    grouped_val = pack(major, value_set ^ major)

    category = jnp.where(unique_ranks == 5, five_class, grouped_class)
    payload = jnp.where(unique_ranks == 5, five_val, grouped_val)
    return jnp.stack([category, payload]).astype(jnp.int32)


@jax.jit
def batch_rank(hands: jnp.ndarray) -> jnp.ndarray:
    """
    Rank multiple hands in parallel.

    Args:
        hands: Array of shape (batch_size, num_cards) with card IDs, padded with -1

    Returns:
        Array of shape (batch_size, 2) of (category, payload)
    """
    return jax.vmap(rank_cardset)(hands)


def _to_hand_category(ranked: jnp.ndarray) -> HandCategory:
    return HandCategory(int(ranked[0]), int(ranked[1]))


def rank(cards: CardsLike) -> HandCategory:
    """
    Rank the best five-card hand among 5, 6 or 7 distinct cards.

    Duplicate cards are not checked.
    """
    return _to_hand_category(rank_cardset(_to_card_ids(cards)))


def rank_five(cards: CardsLike) -> HandCategory:
    """Rank exactly five distinct cards."""
    return _to_hand_category(rank_five_cardset(_to_card_ids(cards)))


def rank_batch(card_ids) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Rank a batch of padded hands.

    Args:
        card_ids: Array-like of shape (batch_size, num_cards), padded with -1

    Returns:
        Tuple of (categories, payloads), each of shape (batch_size,)
    """
    ranked = batch_rank(jnp.asarray(card_ids, dtype=jnp.int32))
    return ranked[:, 0], ranked[:, 1]


def compare(categories: Sequence[HandCategory]) -> List[int]:
    """
    Find the winning hands.

    Returns:
        Indices of every hand tied for the best category, in input order
    """
    winners: List[int] = []
    best = None
    for idx, hand_category in enumerate(categories):
        if best is None or hand_category > best:
            best = hand_category
            winners = [idx]
        elif hand_category == best:
            winners.append(idx)
    return winners
