"""
Test suite for 13-bit rank pattern operations.
"""

import jax
import jax.numpy as jnp
import pytest

from ..cardset_ops import keep_highest, keep_n, pack, popcount, rank_straight, top_bit
from ..tables.constants import WHEEL


class TestRankPatternOperations:
    """Test bit primitives used by the evaluator."""

    def test_popcount(self):
        """Test bit counting."""
        assert int(popcount(jnp.int32(0))) == 0
        assert int(popcount(jnp.int32(0b1011))) == 3
        assert popcount(jnp.array([0, 1, 0b111], dtype=jnp.int32)).tolist() == [0, 1, 3]

    def test_top_bit(self):
        """Test highest set bit lookup."""
        assert int(top_bit(jnp.int32(0))) == -1
        assert int(top_bit(jnp.int32(1))) == 0
        assert int(top_bit(jnp.int32(0b1_0000_0000_0001))) == 12
        assert int(top_bit(jnp.int32(0b0110))) == 2

    def test_keep_highest(self):
        """Test keeping only the highest rank."""
        assert int(keep_highest(jnp.int32(0b111))) == 0b100
        assert int(keep_highest(jnp.int32(0))) == 0
        assert int(keep_highest(jnp.int32(1 << 12 | 1))) == 1 << 12

    def test_keep_n(self):
        """Test keeping the n highest ranks."""
        assert int(popcount(keep_n(jnp.int32(0b1111), 3))) == 3
        assert int(keep_n(jnp.int32(0b1111), 3)) == 0b1110
        assert int(keep_n(jnp.int32(0b1_1111_1100_0000), 5)) == 0b1_1111_0000_0000
        # Fewer bits than requested are left alone
        assert int(keep_n(jnp.int32(0b101), 5)) == 0b101

    def test_keep_n_under_jit(self):
        """Test keep_n inside a jitted function."""
        keep_two = jax.jit(lambda value: keep_n(value, 2))
        assert int(keep_two(jnp.int32(0b10110))) == 0b10100

    def test_pack(self):
        """Test payload packing."""
        assert int(pack(jnp.int32(1), jnp.int32(0b11))) == (1 << 13) | 0b11
        # Highest rank in the major group survives the shift
        assert int(pack(jnp.int32(1 << 12), jnp.int32(0))) == 1 << 25


class TestStraightDetection:
    """Test straight detection on rank patterns."""

    @pytest.mark.parametrize("low, expected_rank", [(idx, idx + 1) for idx in range(9)])
    def test_five_runs(self, low, expected_rank):
        """Test every five-rank run."""
        is_straight, straight_rank = rank_straight(jnp.int32(0b11111 << low))
        assert bool(is_straight)
        assert int(straight_rank) == expected_rank

    def test_wheel(self):
        """Test the ace-low straight."""
        is_straight, straight_rank = rank_straight(jnp.int32(WHEEL))
        assert bool(is_straight)
        assert int(straight_rank) == 0

    def test_wheel_loses_to_six_high_run(self):
        """Test that the wheel ranks below a six-high straight."""
        # A-2-3-4-5-6 is a six-high straight, not a wheel
        is_straight, straight_rank = rank_straight(jnp.int32(WHEEL | 0b10000))
        assert bool(is_straight)
        assert int(straight_rank) == 1

    def test_longest_run_reports_top(self):
        """Test that longer runs report their top straight."""
        # 8 through A
        is_straight, straight_rank = rank_straight(jnp.int32(0b1_1111_1100_0000))
        assert bool(is_straight)
        assert int(straight_rank) == 9

    def test_no_straight(self):
        """Test patterns without a straight."""
        for pattern in [0, 0b1111, 0b1_0000_0000_0111, 0b1_1110_1111_0000]:
            is_straight, _ = rank_straight(jnp.int32(pattern))
            assert not bool(is_straight)
