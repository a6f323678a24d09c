"""
Rank pattern operations on 13-bit masks.

A rank pattern is an int32 whose bit r is set when rank r is present
(bit 0 = 2, ..., bit 12 = A). Tie-break payloads pack a major pattern above
a minor one as (major << 13) | minor and therefore need more than 16 bits.

All operations are branch-free so they can be traced by jax.jit and mapped
with jax.vmap.
"""

import jax
import jax.numpy as jnp

from .tables.constants import NUM_RANKS, PAYLOAD_SHIFT, WHEEL


@jax.jit
def popcount(value: jnp.ndarray) -> jnp.ndarray:
    """Number of set bits. Works on both scalars and arrays."""
    return jnp.bitwise_count(value).astype(jnp.int32)


@jax.jit
def top_bit(value: jnp.ndarray) -> jnp.ndarray:
    """
    Position of the highest set bit: log2(int), -1 for zero.
    Works on both scalars and arrays.
    """
    value = value | (value >> 1)
    value = value | (value >> 2)
    value = value | (value >> 4)
    value = value | (value >> 8)
    return popcount(value) - 1


@jax.jit
def keep_highest(value: jnp.ndarray) -> jnp.ndarray:
    """Clear every bit except the highest one."""
    shift = jnp.maximum(top_bit(value), 0)
    return jnp.where(value == 0, 0, jnp.left_shift(jnp.int32(1), shift))


def keep_n(value: jnp.ndarray, to_keep: int) -> jnp.ndarray:
    """Clear the lowest set bit until at most `to_keep` bits remain."""
    result = jnp.asarray(value, dtype=jnp.int32)
    for _ in range(NUM_RANKS):
        result = jnp.where(popcount(result) > to_keep, result & (result - 1), result)
    return result


@jax.jit
def rank_straight(value_set: jnp.ndarray):
    """
    Find the best five-rank run in a rank pattern.

    Returns:
        Tuple of (is_straight, straight_rank); rank 9 is ace-high, rank 0 the wheel
    """
    left = (
        value_set
        & (value_set << 1)
        & (value_set << 2)
        & (value_set << 3)
        & (value_set << 4)
    )
    has_run = left != 0
    is_wheel = (value_set & WHEEL) == WHEEL

    straight_rank = jnp.where(has_run, top_bit(left) - 3, 0)
    return has_run | is_wheel, straight_rank.astype(jnp.int32)


@jax.jit
def pack(major: jnp.ndarray, minor: jnp.ndarray) -> jnp.ndarray:
    """Pack a major rank pattern above a minor one."""
    return (major << PAYLOAD_SHIFT) | minor
