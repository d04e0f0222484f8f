"""
Primitives Package

This package implements the small arithmetic helpers shared by the
key schedule and the cipher core: big-endian word packing and the GCD
used to size the key-word buffer.
"""

from .word_ops import MASK32, bytes_to_word, word_to_bytes, read_block, write_block, gcd

__all__ = ['MASK32', 'bytes_to_word', 'word_to_bytes', 'read_block', 'write_block', 'gcd']
