"""
Block Cipher Implementation

This module provides the Block Transform Engine of TEA2, a Feistel
cipher with a 128-bit block and a 256-bit key. A block is two 64-bit
words (v0, v1) and a key is four 64-bit words (k0, k1, k2, k3).

Each cycle performs two Feistel rounds, one per word, and a full block
transform runs 64 cycles (128 rounds). Python integers are unbounded, so
every addition, subtraction and left shift is reduced with MASK64.
"""

from typing import Sequence, Tuple

from ..key_schedule.word_schedule import (
    DELTA, MASK64, CYCLES, SHIFT_LEFT, SHIFT_RIGHT,
    split_key, accumulator_start,
)

Block = Tuple[int, int]
Key = Tuple[int, int, int, int]


def mix(v: int, sum_val: int, ka: int, kb: int) -> int:
    """
    Round mixing function shared by both halves of a cycle.

    Args:
        v: The word driving the update (64-bit)
        sum_val: Current accumulator value
        ka: Subkey added to the left-shifted word
        kb: Subkey added to the right-shifted word

    Returns:
        ((v << 14) + ka) ^ (v + sum) ^ ((v >> 15) + kb), reduced to 64 bits
    """
    return (((v << SHIFT_LEFT) + ka)
            ^ (v + sum_val)
            ^ ((v >> SHIFT_RIGHT) + kb)) & MASK64


def encrypt(block: Sequence[int], key: Sequence[int], cycles: int = CYCLES) -> Block:
    """
    Encrypt a single 128-bit block.

    Args:
        block: Two 64-bit plaintext words (v0, v1)
        key: Four 64-bit key words (k0, k1, k2, k3)
        cycles: Number of cycles, two rounds each (default: 64)

    Returns:
        The ciphertext block as a new (v0, v1) tuple
    """
    v0, v1 = (word & MASK64 for word in block)
    (k0, k1), (k2, k3) = split_key(key)

    sum_val = 0
    for _ in range(cycles):
        sum_val = (sum_val + DELTA) & MASK64
        v0 = (v0 + mix(v1, sum_val, k0, k1)) & MASK64
        # v1 uses the v0 just computed
        v1 = (v1 + mix(v0, sum_val, k2, k3)) & MASK64

    return v0, v1


def decrypt(block: Sequence[int], key: Sequence[int], cycles: int = CYCLES) -> Block:
    """
    Decrypt a single 128-bit block.

    Runs the encryption cycles backward, undoing the v1 update before the
    v0 update in each cycle.

    Args:
        block: Two 64-bit ciphertext words (v0, v1)
        key: Four 64-bit key words (k0, k1, k2, k3)
        cycles: Number of cycles used for encryption (default: 64)

    Returns:
        The plaintext block as a new (v0, v1) tuple
    """
    v0, v1 = (word & MASK64 for word in block)
    (k0, k1), (k2, k3) = split_key(key)

    sum_val = accumulator_start(cycles)
    for _ in range(cycles):
        v1 = (v1 - mix(v0, sum_val, k2, k3)) & MASK64
        v0 = (v0 - mix(v1, sum_val, k0, k1)) & MASK64
        sum_val = (sum_val - DELTA) & MASK64

    return v0, v1


class TEA2Cipher:
    """
    TEA2 block cipher bound to a 256-bit key.
    """

    def __init__(self, key: Sequence[int], cycles: int = CYCLES):
        """
        Initialize the cipher with a key.

        Args:
            key: Four 64-bit key words (k0, k1, k2, k3)
            cycles: Number of cycles per block (default: 64)
        """
        if len(key) != 4:
            raise ValueError(f"Key must be exactly 4 words, got {len(key)}")

        if cycles < 1:
            raise ValueError(f"Cycle count must be positive, got {cycles}")

        self.cycles = cycles
        (k0, k1), (k2, k3) = split_key(key)
        self.key: Key = (k0, k1, k2, k3)

    def encrypt_block(self, block: Sequence[int]) -> Block:
        """
        Encrypt one block with the bound key.

        Args:
            block: Two 64-bit plaintext words

        Returns:
            The ciphertext block
        """
        if len(block) != 2:
            raise ValueError(f"Block must be exactly 2 words, got {len(block)}")

        return encrypt(block, self.key, self.cycles)

    def decrypt_block(self, block: Sequence[int]) -> Block:
        """
        Decrypt one block with the bound key.

        Args:
            block: Two 64-bit ciphertext words

        Returns:
            The plaintext block
        """
        if len(block) != 2:
            raise ValueError(f"Block must be exactly 2 words, got {len(block)}")

        return decrypt(block, self.key, self.cycles)


def encrypt_block(block: Sequence[int], key: Sequence[int],
                  cycles: int = CYCLES) -> Block:
    """
    Convenience function to encrypt a single block.

    Args:
        block: The plaintext block
        key: The key words
        cycles: Number of cycles (default: 64)

    Returns:
        The ciphertext block
    """
    cipher = TEA2Cipher(key, cycles=cycles)
    return cipher.encrypt_block(block)


def decrypt_block(block: Sequence[int], key: Sequence[int],
                  cycles: int = CYCLES) -> Block:
    """
    Convenience function to decrypt a single block.

    Args:
        block: The ciphertext block
        key: The key words
        cycles: Number of cycles (default: 64)

    Returns:
        The plaintext block
    """
    cipher = TEA2Cipher(key, cycles=cycles)
    return cipher.decrypt_block(block)


if __name__ == "__main__":
    key = (0, 0, 0, 1)
    for plaintext in [(0, 0), (0, 1), (1, 1)]:
        ciphertext = encrypt(plaintext, key)
        print(f"{plaintext[0]:016X} {plaintext[1]:016X} -> "
              f"{ciphertext[0]:016X} {ciphertext[1]:016X}")
        assert decrypt(ciphertext, key) == plaintext

    print("Block cipher tests completed successfully!")
