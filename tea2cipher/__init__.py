"""
TEA2 - 128-bit Block Cipher Library

This library implements TEA2, a Feistel block cipher from the TEA family
by Alexander Pukall (2006), based on TEA by David Wheeler and Roger M.
Needham.

Key Features:
- 128-bit block of two 64-bit words
- 256-bit key of four 64-bit words
- 64 cycles (128 Feistel rounds) per block
- Exact 64-bit wraparound arithmetic, constant-time loop
- numpy-vectorized transforms over batches of blocks
- Avalanche and diffusion analysis

"""

from .cipher_core import TEA2Cipher, encrypt, decrypt, encrypt_block, decrypt_block

__version__ = '0.1.0'
__author__ = 'TEA2Cipher Team'

__all__ = ['TEA2Cipher', 'encrypt', 'decrypt', 'encrypt_block', 'decrypt_block']
