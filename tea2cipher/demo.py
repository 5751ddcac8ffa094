"""
Demonstration Harness

Encrypts and decrypts the three reference scenarios and prints each step
as fixed-width hexadecimal words.
"""

from typing import Callable, List, Sequence, Tuple

from .cipher_core.block_cipher import encrypt, decrypt

BANNER = (
    "TEA2 by Alexander PUKALL 2006 \n"
    " 128-bit block 256-bit key 128 rounds\n"
    "Code can be freely use even for commercial software\n"
    "Based on TEA by David Wheeler & Roger M. Needham\n"
)

# (key, plaintext, expected ciphertext); the demo recomputes the
# ciphertext, the third column is the published reference output
DEMO_VECTORS: List[Tuple[Tuple[int, ...], Tuple[int, int], Tuple[int, int]]] = [
    ((0, 0, 0, 1), (0, 0), (0xD713374DD796B948, 0x93E198C8BF480EEA)),
    ((0, 0, 0, 1), (0, 1), (0x85B25256E406EF80, 0x88B6D9C61E7C08F1)),
    ((0, 0, 0, 1), (1, 1), (0x9F6CCED0EAF20C18, 0xCA4F15379C175F5C)),
]


def format_words(words: Sequence[int]) -> str:
    """Format 64-bit words as space separated 16-digit uppercase hex."""
    return " ".join(f"{word:016X}" for word in words)


def run_demo(out: Callable[[str], None] = print) -> None:
    """
    Run the reference scenarios.

    Args:
        out: Line sink, print by default
    """
    out(BANNER)

    for number, (key, plaintext, _) in enumerate(DEMO_VECTORS, start=1):
        ciphertext = encrypt(plaintext, key)
        decrypted = decrypt(ciphertext, key)

        out(f"Encryption {number}")
        out(f"Key: {format_words(key)}")
        out(f"Plaintext: {format_words(plaintext)}")
        out(f"Ciphertext:{format_words(ciphertext)}")
        out(f"Decrypted: {format_words(decrypted)}\n")
