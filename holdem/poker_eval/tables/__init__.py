from .constants import (
    NUM_RANKS, NUM_SUITS, MAX_HAND_CARDS, WHEEL, PAYLOAD_SHIFT,
    HANDCLASS_HIGH_CARD, HANDCLASS_PAIR, HANDCLASS_TWO_PAIR,
    HANDCLASS_TRIPS, HANDCLASS_STRAIGHT, HANDCLASS_FLUSH,
    HANDCLASS_FULL_HOUSE, HANDCLASS_QUADS, HANDCLASS_STRAIGHT_FLUSH,
    RANK_BITS, HAND_COMBINATIONS,
    OFFSUIT_COMBINATIONS, SUITED_COMBINATIONS, PAIRED_COMBINATIONS,
)
