"""Shared test fixtures."""

import numpy as np
import pytest

from tea2cipher.key_schedule import MASK64


REFERENCE_KEY = (0x0000000000000000, 0x0000000000000000,
                 0x0000000000000000, 0x0000000000000001)

# (plaintext, ciphertext) under REFERENCE_KEY
REFERENCE_VECTORS = [
    ((0x0000000000000000, 0x0000000000000000), (0xD713374DD796B948, 0x93E198C8BF480EEA)),
    ((0x0000000000000000, 0x0000000000000001), (0x85B25256E406EF80, 0x88B6D9C61E7C08F1)),
    ((0x0000000000000001, 0x0000000000000001), (0x9F6CCED0EAF20C18, 0xCA4F15379C175F5C)),
]


@pytest.fixture
def reference_key():
    """The all-zero key with the lowest bit of the last word set."""
    return REFERENCE_KEY


@pytest.fixture
def rng():
    """Provide a seeded numpy Generator for deterministic tests."""
    return np.random.default_rng(seed=42)


def random_words(rng: np.random.Generator, count: int) -> list:
    """Draw uniformly random 64-bit words as Python ints."""
    return [int(w) for w in rng.integers(0, MASK64, size=count,
                                         dtype=np.uint64, endpoint=True)]
