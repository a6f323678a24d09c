"""
Fixed masks and combinatorial constants.

Rank bit layout used everywhere: bit 0 = 2, bit 1 = 3, ..., bit 12 = A.
"""

import jax.numpy as jnp

NUM_RANKS = 13
NUM_SUITS = 4

# Maximum number of cards a Hold'em hand can hold (2 hole + 5 board)
MAX_HAND_CARDS = 7

# A-2-3-4-5
WHEEL = 0b1_0000_0000_1111

# Major group shift of the tie-break payload
PAYLOAD_SHIFT = 13

# Hand categories (ordered weakest to strongest)
HANDCLASS_HIGH_CARD = 0
HANDCLASS_PAIR = 1
HANDCLASS_TWO_PAIR = 2
HANDCLASS_TRIPS = 3
HANDCLASS_STRAIGHT = 4
HANDCLASS_FLUSH = 5
HANDCLASS_FULL_HOUSE = 6
HANDCLASS_QUADS = 7
HANDCLASS_STRAIGHT_FLUSH = 8

# Bit value for every rank index (2=0, 3=1, ..., A=12)
RANK_BITS = jnp.left_shift(jnp.int32(1), jnp.arange(NUM_RANKS, dtype=jnp.int32))

# Two-card starting hands
HAND_COMBINATIONS = 1326

# Deals per specific rank combination
OFFSUIT_COMBINATIONS = 12
SUITED_COMBINATIONS = 4
PAIRED_COMBINATIONS = 6
