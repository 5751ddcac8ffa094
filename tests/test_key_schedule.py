"""Tests for the round constants and key splitting."""

from tea2cipher.key_schedule import (
    DELTA, MASK64, CYCLES, accumulator_start, split_key,
)


def test_decrypt_accumulator_start_value():
    """64 cycles of delta wrap to the documented start value."""
    assert accumulator_start() == 0x8DDE6E5FD29F0540
    assert accumulator_start(CYCLES) == (DELTA << 6) & MASK64


def test_accumulator_start_matches_repeated_addition():
    """The derived start value equals summing delta cycle by cycle."""
    for cycles in (1, 2, 17, 64, 100):
        sum_val = 0
        for _ in range(cycles):
            sum_val = (sum_val + DELTA) & MASK64
        assert accumulator_start(cycles) == sum_val


def test_accumulator_start_zero_cycles():
    assert accumulator_start(0) == 0


def test_split_key_pairs():
    """First pair drives the left word, second pair the right word."""
    assert split_key((1, 2, 3, 4)) == ((1, 2), (3, 4))


def test_split_key_reduces_words():
    """Words outside 64 bits are reduced modulo 2^64."""
    (k0, k1), (k2, k3) = split_key((2**64 + 5, -1, 0, MASK64))
    assert (k0, k1, k2, k3) == (5, MASK64, 0, MASK64)
