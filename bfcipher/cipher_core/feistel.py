"""
Blowfish Feistel Network

This module implements the Blowfish round function and the 16-round
Feistel network (forward and inverse) over a pair of 32-bit halves.
Everything here is a pure function of the cipher state passed in.
"""

from typing import List, Sequence, Tuple

from ..primitives.word_ops import MASK32

ROUNDS = 16


def feistel(s_boxes: Sequence[Sequence[int]], word: int) -> int:
    """
    Apply the Blowfish F function to one 32-bit word.

    F(x) = ((S0[a] + S1[b]) ^ S2[c]) + S3[d], with a..d the bytes of x
    from most to least significant and additions modulo 2**32.

    Args:
        s_boxes: The four key-dependent S-boxes
        word: The input word

    Returns:
        The output word
    """
    s0, s1, s2, s3 = s_boxes
    return ((((s0[word >> 24] + s1[(word >> 16) & 0xFF]) & MASK32)
             ^ s2[(word >> 8) & 0xFF]) + s3[word & 0xFF]) & MASK32


def _run_rounds(p_array: List[int], order: Sequence[int], s_boxes, left: int, right: int) -> Tuple[int, int]:
    for i in order:
        left ^= p_array[i]
        right ^= feistel(s_boxes, left)
        left, right = right, left
    # The last swap is undone
    return right, left


def encrypt_halves(state, left: int, right: int) -> Tuple[int, int]:
    """
    Encrypt one block given as two 32-bit halves.

    Args:
        state: CipherState with p_array and s_boxes
        left: Left (high) half
        right: Right (low) half

    Returns:
        The encrypted (left, right) halves
    """
    p_array = state.p_array
    left, right = _run_rounds(p_array, range(ROUNDS), state.s_boxes, left, right)
    return left ^ p_array[17], right ^ p_array[16]


def decrypt_halves(state, left: int, right: int) -> Tuple[int, int]:
    """
    Decrypt one block given as two 32-bit halves.

    Args:
        state: CipherState with p_array and s_boxes
        left: Left (high) half
        right: Right (low) half

    Returns:
        The decrypted (left, right) halves
    """
    p_array = state.p_array
    left, right = _run_rounds(p_array, range(17, 1, -1), state.s_boxes, left, right)
    return left ^ p_array[0], right ^ p_array[1]
