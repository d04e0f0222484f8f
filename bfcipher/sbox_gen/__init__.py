"""
S-box Tables Package

This package holds the initial Blowfish P-array and S-boxes derived from
the digits of pi, plus statistical checks for key-dependent S-boxes.
"""

from .pi_tables import (
    INITIAL_P_ARRAY,
    INITIAL_S_BOXES,
    P_ARRAY_LENGTH,
    SBOX_COUNT,
    SBOX_LENGTH,
    generate_initial_state,
    evaluate_sbox,
)

__all__ = [
    'INITIAL_P_ARRAY', 'INITIAL_S_BOXES', 'P_ARRAY_LENGTH', 'SBOX_COUNT', 'SBOX_LENGTH',
    'generate_initial_state', 'evaluate_sbox',
]
