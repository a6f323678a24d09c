"""
Poker hand evaluation and starting hand range combinatorics.

Hands are ranked from rank bit planes (per-suit 13-bit rank patterns and rank
multiplicity sets), with JAX kernels that also run batched under jax.vmap.
"""

from .cardset import Card, Rank, Suit, card_to_id, cards_to_ids, format_card, ids_to_cards, parse_card, parse_cards
from .errors import (
    PokerError, RankParseError, SuitParseError, CardParseError,
    InvalidHandSizeError, HoldemHandSizeError, RangeParseError,
)
from .evaluator import Category, HandCategory, compare, rank, rank_batch, rank_five
from .hand import Deck, Hand, HandType, classify
from .range import RangeCombinations, measure, parse_range_token

__all__ = [
    'Card',
    'Rank',
    'Suit',
    'card_to_id',
    'cards_to_ids',
    'format_card',
    'ids_to_cards',
    'parse_card',
    'parse_cards',
    'PokerError',
    'RankParseError',
    'SuitParseError',
    'CardParseError',
    'InvalidHandSizeError',
    'HoldemHandSizeError',
    'RangeParseError',
    'Category',
    'HandCategory',
    'compare',
    'rank',
    'rank_batch',
    'rank_five',
    'Deck',
    'Hand',
    'HandType',
    'classify',
    'RangeCombinations',
    'measure',
    'parse_range_token',
]
