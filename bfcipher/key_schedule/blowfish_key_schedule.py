"""
Blowfish Key Schedule Implementation

This module expands a variable-length key into the key-dependent cipher
state: the 18-word P-array and the four 256-word S-boxes. The state is
derived by XORing the key into the P-array and then repeatedly encrypting
an all-zero block with the partially updated tables.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from ..primitives.word_ops import bytes_to_word, gcd
from ..sbox_gen.pi_tables import P_ARRAY_LENGTH, SBOX_COUNT, SBOX_LENGTH, generate_initial_state

logger = logging.getLogger(__name__)

# Default cipher parameters
BLOWFISH_DEFAULT_PARAMS = {
    'block_size': 8,        # Bytes per block
    'rounds': 16,           # Feistel rounds
    'p_array_length': P_ARRAY_LENGTH,
    'sbox_count': SBOX_COUNT,
    'sbox_length': SBOX_LENGTH,
    'min_key_size': 4,      # 32 bits
    'max_key_size': 56      # 448 bits
}

KeyLike = Union[bytes, bytearray, memoryview]


class InvalidKeyError(ValueError):
    """Raised when a key cannot be scheduled."""


@dataclass
class CipherState:
    """Key-dependent Blowfish tables."""
    p_array: List[int]
    s_boxes: List[List[int]]


BlockEncrypt = Callable[[CipherState, int, int], Tuple[int, int]]


def validate_key_length(key: KeyLike, key_length: Optional[int] = None, strict: bool = False) -> int:
    """
    Check a key and resolve the number of key bytes to schedule.

    Args:
        key: The key material
        key_length: Number of leading key bytes to use (default: len(key))
        strict: Whether to enforce the conventional 4..56 byte range

    Returns:
        The resolved key length

    Raises:
        TypeError: If the key is text rather than bytes
        InvalidKeyError: If the length cannot be scheduled
    """
    if isinstance(key, str):
        raise TypeError("Key must be bytes-like, not str")

    if key_length is None:
        key_length = len(key)

    if key_length <= 0:
        raise InvalidKeyError(f"Key length must be positive, got {key_length}")

    if key_length > len(key):
        raise InvalidKeyError(f"Key length {key_length} exceeds the {len(key)} bytes supplied")

    if strict:
        min_size = BLOWFISH_DEFAULT_PARAMS['min_key_size']
        max_size = BLOWFISH_DEFAULT_PARAMS['max_key_size']
        if not min_size <= key_length <= max_size:
            raise InvalidKeyError(f"Key must be between {min_size} and {max_size} bytes, got {key_length}")

    return key_length


def key_to_words(key: KeyLike, key_length: int) -> List[int]:
    """
    Build the cyclic key-word buffer.

    Word i is made of key bytes (4i .. 4i+3) mod key_length. Generating
    key_length / gcd(key_length, 4) words covers exactly one period of the
    cyclic key stream, so indexing the buffer modulo its length reproduces
    the stream for any number of words.

    Args:
        key: The key material
        key_length: Number of key bytes in use

    Returns:
        A list of 32-bit words
    """
    buffer_length = key_length // gcd(key_length, 4)
    return [bytes_to_word(key[(i * 4) % key_length],
                          key[(i * 4 + 1) % key_length],
                          key[(i * 4 + 2) % key_length],
                          key[(i * 4 + 3) % key_length])
            for i in range(buffer_length)]


def schedule_key(key: KeyLike,
                 key_length: Optional[int] = None,
                 block_encrypt: Optional[BlockEncrypt] = None,
                 strict: bool = False) -> CipherState:
    """
    Expand a key into the Blowfish cipher state.

    Args:
        key: The key material
        key_length: Number of leading key bytes to use (default: len(key))
        block_encrypt: Forward block transform (state, left, right) -> (left, right)
        strict: Whether to enforce the conventional 4..56 byte range

    Returns:
        The scheduled CipherState

    Raises:
        InvalidKeyError: If the key length is not usable
    """
    key_length = validate_key_length(key, key_length, strict)
    if block_encrypt is None:
        raise TypeError("block_encrypt is required to derive the key-dependent tables")

    p_array, s_boxes = generate_initial_state()
    state = CipherState(p_array=p_array, s_boxes=s_boxes)

    # XOR the cyclic key stream into the P-array
    key_words = key_to_words(key, key_length)
    for i in range(P_ARRAY_LENGTH):
        p_array[i] ^= key_words[i % len(key_words)]

    # Each encryption sees every table entry written so far
    left, right = 0, 0
    for i in range(0, P_ARRAY_LENGTH, 2):
        left, right = block_encrypt(state, left, right)
        p_array[i], p_array[i + 1] = left, right

    for sbox in s_boxes:
        for j in range(0, SBOX_LENGTH, 2):
            left, right = block_encrypt(state, left, right)
            sbox[j], sbox[j + 1] = left, right

    logger.debug("Scheduled %d-byte key (%d key words)", key_length, len(key_words))
    return state
