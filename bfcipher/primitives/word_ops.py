"""
Word Packing Helpers

This module converts between bytes and the 32-bit words Blowfish works on.
Blowfish words are big-endian (most significant byte first) regardless of
the host byte order, so every conversion here is done with shifts and masks.
"""

from typing import Tuple

MASK32 = 0xFFFFFFFF


def bytes_to_word(b0: int, b1: int, b2: int, b3: int) -> int:
    """
    Pack four bytes into a 32-bit word, b0 being the most significant.

    Args:
        b0, b1, b2, b3: Byte values in the range 0-255

    Returns:
        The packed 32-bit word
    """
    return (b0 << 24) | (b1 << 16) | (b2 << 8) | b3


def word_to_bytes(word: int) -> Tuple[int, int, int, int]:
    """
    Split a 32-bit word into four bytes, most significant first.

    Args:
        word: The word to split

    Returns:
        A tuple of (b0, b1, b2, b3)
    """
    return (word >> 24) & 0xFF, (word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF


def read_block(buffer, offset: int) -> Tuple[int, int]:
    """Read the (left, right) halves of the 8-byte block at offset."""
    return (bytes_to_word(buffer[offset], buffer[offset + 1], buffer[offset + 2], buffer[offset + 3]),
            bytes_to_word(buffer[offset + 4], buffer[offset + 5], buffer[offset + 6], buffer[offset + 7]))


def write_block(buffer, offset: int, left: int, right: int) -> None:
    """Store the (left, right) halves as an 8-byte block at offset."""
    buffer[offset:offset + 4] = bytes(word_to_bytes(left))
    buffer[offset + 4:offset + 8] = bytes(word_to_bytes(right))


def gcd(larger: int, smaller: int) -> int:
    """
    Greatest common divisor by Euclid's algorithm.

    Args:
        larger: First operand
        smaller: Second operand

    Returns:
        The greatest common divisor (gcd(a, 0) is a)
    """
    while smaller:
        larger, smaller = smaller, larger % smaller
    return larger
