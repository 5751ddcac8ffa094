"""
Key Schedule Package

This package defines the round constant, the word arithmetic limits and
the way the 256-bit key is split into the subkey pairs used by each half
of the Feistel round.
"""

from .word_schedule import (
    DELTA, MASK64, CYCLES, SHIFT_LEFT, SHIFT_RIGHT,
    split_key, accumulator_start,
)

__all__ = [
    'DELTA', 'MASK64', 'CYCLES', 'SHIFT_LEFT', 'SHIFT_RIGHT',
    'split_key', 'accumulator_start',
]
