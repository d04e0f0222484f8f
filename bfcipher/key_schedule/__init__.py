"""
Key Schedule Package

This package implements the Blowfish key expansion that turns a
variable-length key into the key-dependent P-array and S-boxes.
"""

from .blowfish_key_schedule import (
    BLOWFISH_DEFAULT_PARAMS,
    CipherState,
    InvalidKeyError,
    key_to_words,
    schedule_key,
    validate_key_length,
)

__all__ = [
    'BLOWFISH_DEFAULT_PARAMS', 'CipherState', 'InvalidKeyError',
    'key_to_words', 'schedule_key', 'validate_key_length',
]
