"""
Cipher Core Package

This package implements the Block Transform Engine of TEA2: the round
mixing function, the scalar encrypt/decrypt transforms, a cipher object
bound to a key, and numpy-vectorized transforms over batches of blocks.
"""

from .block_cipher import (
    TEA2Cipher, mix, encrypt, decrypt, encrypt_block, decrypt_block,
)
from .vectorized import mix_words, encrypt_words, decrypt_words

__all__ = [
    'TEA2Cipher', 'mix', 'encrypt', 'decrypt', 'encrypt_block', 'decrypt_block',
    'mix_words', 'encrypt_words', 'decrypt_words',
]
