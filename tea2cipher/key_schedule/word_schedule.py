"""
Word Schedule

This module holds the fixed parameters of the TEA2 round function and
the key usage pattern: the first two key words feed the update of the
left word, the last two feed the update of the right word.
"""

from typing import Sequence, Tuple

# Golden ratio derived round constant, 64-bit variant of the TEA delta
DELTA = 0x9E3779B97F4A7C15

# All word arithmetic is reduced modulo 2^64
MASK64 = 0xFFFFFFFFFFFFFFFF

# One cycle is two Feistel rounds
CYCLES = 64

SHIFT_LEFT = 14
SHIFT_RIGHT = 15


def split_key(key: Sequence[int]) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Split a 256-bit key into the subkey pairs of the two round halves.

    Args:
        key: Four 64-bit key words (k0, k1, k2, k3)

    Returns:
        A tuple of ((k0, k1), (k2, k3)), each word reduced to 64 bits
    """
    k0, k1, k2, k3 = (word & MASK64 for word in key)
    return (k0, k1), (k2, k3)


def accumulator_start(cycles: int = CYCLES) -> int:
    """
    Compute the accumulator value after the given number of cycles.

    Decryption starts from this value and walks the schedule backward.
    For 64 cycles it equals 0x8DDE6E5FD29F0540.

    Args:
        cycles: Number of encryption cycles

    Returns:
        (DELTA * cycles) mod 2^64
    """
    return (DELTA * cycles) & MASK64


if __name__ == "__main__":
    print(f"Accumulator start: {accumulator_start():016X}")
    assert accumulator_start() == 0x8DDE6E5FD29F0540
    print(f"Subkey pairs: {split_key((0, 1, 2, 3))}")
