"""
Diffusion Analysis

This module measures the avalanche behaviour of TEA2: how many
ciphertext bits change when a single plaintext or key bit is flipped.
A well-diffusing cipher changes about half of the 128 output bits for
every single-bit input change.

Flipped variants are encrypted in one batch through the vectorized
transforms, so a full key sweep costs 256 blocks per sample.
"""

import logging
from typing import Dict, Optional, Sequence, Union

import numpy as np

from ..cipher_core.block_cipher import encrypt
from ..cipher_core.vectorized import encrypt_words
from ..key_schedule.word_schedule import CYCLES, MASK64

logger = logging.getLogger(__name__)

BLOCK_BITS = 128
KEY_BITS = 256
WORD_BITS = 64

DIFFUSION_DEFAULT_PARAMS = {
    'samples': 16,       # Random (block, key) pairs per evaluation
    'log_interval': 4,   # Samples between progress messages
}

_BIT_MASKS = np.uint64(1) << np.arange(WORD_BITS, dtype=np.uint64)


def hamming_weight(words: Union[Sequence[int], np.ndarray]) -> np.ndarray:
    """
    Count the set bits of each 64-bit word.

    Args:
        words: Array of uint64 words

    Returns:
        Array of bit counts with the same shape as the input
    """
    words = np.ascontiguousarray(words, dtype=np.uint64)
    bits = np.unpackbits(words.reshape(-1, 1).view(np.uint8), axis=1)
    return bits.sum(axis=1).reshape(words.shape)


def plaintext_avalanche(block: Sequence[int], key: Sequence[int],
                        cycles: int = CYCLES) -> np.ndarray:
    """
    Measure ciphertext changes for every single-bit plaintext flip.

    Bit i refers to bit (i % 64) of word (i // 64), least significant
    bit first.

    Args:
        block: Two 64-bit plaintext words
        key: Four 64-bit key words
        cycles: Number of cycles (default: 64)

    Returns:
        Array of 128 counts of changed ciphertext bits
    """
    base0, base1 = encrypt(block, key, cycles)

    v0 = np.full(BLOCK_BITS, block[0] & MASK64, dtype=np.uint64)
    v1 = np.full(BLOCK_BITS, block[1] & MASK64, dtype=np.uint64)
    v0[:WORD_BITS] ^= _BIT_MASKS
    v1[WORD_BITS:] ^= _BIT_MASKS

    c0, c1 = encrypt_words(v0, v1, key, cycles)
    return (hamming_weight(c0 ^ np.uint64(base0))
            + hamming_weight(c1 ^ np.uint64(base1)))


def key_avalanche(block: Sequence[int], key: Sequence[int],
                  cycles: int = CYCLES) -> np.ndarray:
    """
    Measure ciphertext changes for every single-bit key flip.

    Args:
        block: Two 64-bit plaintext words
        key: Four 64-bit key words
        cycles: Number of cycles (default: 64)

    Returns:
        Array of 256 counts of changed ciphertext bits
    """
    base0, base1 = encrypt(block, key, cycles)

    key_words = [np.full(KEY_BITS, word & MASK64, dtype=np.uint64) for word in key]
    for i, words in enumerate(key_words):
        words[i * WORD_BITS:(i + 1) * WORD_BITS] ^= _BIT_MASKS

    c0, c1 = encrypt_words(block[0], block[1], key_words, cycles)
    return (hamming_weight(c0 ^ np.uint64(base0))
            + hamming_weight(c1 ^ np.uint64(base1)))


def evaluate_diffusion(samples: int = DIFFUSION_DEFAULT_PARAMS['samples'],
                       seed: Optional[int] = None,
                       cycles: int = CYCLES,
                       log_interval: int = DIFFUSION_DEFAULT_PARAMS['log_interval']
                       ) -> Dict[str, float]:
    """
    Evaluate avalanche statistics over random blocks and keys.

    Args:
        samples: Number of random (block, key) pairs
        seed: Optional seed for reproducible sampling
        cycles: Number of cycles (default: 64)
        log_interval: Samples between progress log messages

    Returns:
        Dictionary of fractions of changed ciphertext bits
        (plaintext_mean/min/max, key_mean/min/max), the overall score
        (distance of the mean from 0.5, lower is better) and the sample count
    """
    if samples < 1:
        raise ValueError(f"Sample count must be positive, got {samples}")

    rng = np.random.default_rng(seed)
    plaintext_counts = []
    key_counts = []

    for i in range(samples):
        words = [int(w) for w in rng.integers(0, MASK64, size=6,
                                              dtype=np.uint64, endpoint=True)]
        block, key = words[:2], words[2:]

        plaintext_counts.append(plaintext_avalanche(block, key, cycles))
        key_counts.append(key_avalanche(block, key, cycles))

        if log_interval and (i + 1) % log_interval == 0:
            logger.info(f"Diffusion analysis: {i + 1}/{samples} samples")

    plaintext_fractions = np.concatenate(plaintext_counts) / BLOCK_BITS
    key_fractions = np.concatenate(key_counts) / BLOCK_BITS
    overall_mean = np.concatenate([plaintext_fractions, key_fractions]).mean()

    return {
        'plaintext_mean': float(plaintext_fractions.mean()),
        'plaintext_min': float(plaintext_fractions.min()),
        'plaintext_max': float(plaintext_fractions.max()),
        'key_mean': float(key_fractions.mean()),
        'key_min': float(key_fractions.min()),
        'key_max': float(key_fractions.max()),
        'score': float(abs(overall_mean - 0.5)),
        'samples': samples,
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    metrics = evaluate_diffusion(samples=8, seed=2006)
    print(f"Plaintext avalanche: {metrics['plaintext_mean']:.4f} "
          f"(min {metrics['plaintext_min']:.4f}, max {metrics['plaintext_max']:.4f})")
    print(f"Key avalanche: {metrics['key_mean']:.4f} "
          f"(min {metrics['key_min']:.4f}, max {metrics['key_max']:.4f})")
    print(f"Score: {metrics['score']:.4f}")
