"""
Hand and deck containers, and the two-card starting hand classifier.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Union

import jax
import jax.numpy as jnp

from .cardset import Card, Rank, Suit, format_hand, parse_card
from .errors import HoldemHandSizeError, InvalidHandSizeError
from .tables.constants import MAX_HAND_CARDS

LOGGER = logging.getLogger(__name__)


class HandType(Enum):
    OFFSUIT = "offsuit"
    SUITED = "suited"
    PAIRED = "paired"
    # Range tokens without a suffix: both suited and offsuit
    UNPAIRED = "unpaired"


class Hand:
    """Ordered, mutable sequence of at most 7 cards."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = []
        self.extend(cards)

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> "Hand":
        """Build a hand from card codes like ["SA", "ht"]."""
        return cls(parse_card(code) for code in codes)

    def cards(self) -> List[Card]:
        return list(self._cards)

    def push(self, card: Card) -> "Hand":
        if len(self._cards) >= MAX_HAND_CARDS:
            raise HoldemHandSizeError(len(self._cards) + 1)
        self._cards.append(card)
        return self

    def extend(self, cards: Iterable[Card]) -> "Hand":
        for card in cards:
            self.push(card)
        return self

    def remove(self, index: int) -> "Hand":
        del self._cards[index]
        return self

    def truncate(self, length: int) -> "Hand":
        del self._cards[length:]
        return self

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index):
        return self._cards[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Hand([{', '.join(card.code for card in self._cards)}])"

    def __str__(self) -> str:
        return format_hand(self._cards)


def classify(cards: Union[Hand, Sequence[Card]]) -> HandType:
    """
    Classify a two-card starting hand.

    Raises:
        InvalidHandSizeError: the hand does not hold exactly 2 cards
    """
    if len(cards) != 2:
        raise InvalidHandSizeError(len(cards))
    first, second = cards[0], cards[1]
    if first.rank == second.rank:
        return HandType.PAIRED
    if first.suit == second.suit:
        return HandType.SUITED
    return HandType.OFFSUIT


class Deck:
    """Set of distinct cards; the default deck holds all 52."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        if cards is None:
            cards = (Card(suit, rank) for suit in Suit for rank in Rank)
        self._cards: Set[Card] = set(cards)

    @classmethod
    def empty(cls) -> "Deck":
        return cls(())

    def insert(self, card: Card) -> bool:
        """Add a card; False if it was already there."""
        if card in self._cards:
            return False
        self._cards.add(card)
        return True

    def remove(self, card: Card) -> bool:
        """Remove a card; False if it was not there."""
        if card not in self._cards:
            return False
        self._cards.remove(card)
        return True

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def cards(self) -> List[Card]:
        """Cards ordered by card ID."""
        return sorted(self._cards, key=lambda card: card.id)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffled(self, key: jax.Array) -> List[Card]:
        """Cards in a random order drawn from a jax.random key."""
        ordered = self.cards()
        order = jax.random.permutation(key, len(ordered))
        return [ordered[int(idx)] for idx in order]

    def deal(self, key: Optional[jax.Array] = None) -> Optional[Card]:
        """
        Remove and return one card.

        Without a key the card with the lowest ID is dealt; with a jax.random
        key the card is picked uniformly. Returns None when the deck is empty.
        """
        if not self._cards:
            return None
        ordered = self.cards()
        if key is None:
            card = ordered[0]
        else:
            card = ordered[int(jax.random.randint(key, (), 0, len(ordered)))]
        self._cards.remove(card)
        LOGGER.debug("Dealt %s, %d cards left", card.code, len(self._cards))
        return card

    def deal_ids(self, key: jax.Array, count: int) -> jnp.ndarray:
        """Deal `count` random cards at once and return their card IDs."""
        dealt = self.shuffled(key)[:count]
        for card in dealt:
            self._cards.remove(card)
        LOGGER.debug("Dealt %d cards, %d cards left", len(dealt), len(self._cards))
        return jnp.array([card.id for card in dealt], dtype=jnp.int32)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards())

    def __str__(self) -> str:
        return format_hand(self.cards())
