"""
Diffusion Analysis Package

This package measures the avalanche properties of the cipher over
single-bit plaintext and key changes.
"""

from .diffusion import (
    hamming_weight, plaintext_avalanche, key_avalanche,
    evaluate_diffusion, DIFFUSION_DEFAULT_PARAMS,
)

__all__ = [
    'hamming_weight', 'plaintext_avalanche', 'key_avalanche',
    'evaluate_diffusion', 'DIFFUSION_DEFAULT_PARAMS',
]
