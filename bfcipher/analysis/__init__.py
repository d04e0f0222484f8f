"""
Analysis Package

This package implements avalanche and state-difference diagnostics for
sanity-checking the diffusion of the cipher and its key schedule.
"""

from .avalanche import (
    AvalancheResult,
    hamming_distance,
    key_avalanche,
    plaintext_avalanche,
    state_difference,
)

__all__ = ['AvalancheResult', 'hamming_distance', 'key_avalanche', 'plaintext_avalanche', 'state_difference']
