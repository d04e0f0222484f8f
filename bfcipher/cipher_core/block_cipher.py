"""
Block Cipher Implementation

This module provides the Blowfish cipher object: it schedules a key into
the P-array and S-boxes, and encrypts or decrypts single blocks and whole
buffers of consecutive 8-byte blocks.

Buffers are processed block by block with no chaining (ECB-style). Any
trailing bytes past the last full block are left untouched; callers that
need partial blocks must pad before encrypting.
"""

import logging
from typing import Optional, Tuple, Union

from ..key_schedule.blowfish_key_schedule import (
    BLOWFISH_DEFAULT_PARAMS,
    CipherState,
    schedule_key,
)
from ..primitives.word_ops import read_block, write_block
from .feistel import encrypt_halves, decrypt_halves

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Blowfish:
    """
    Blowfish block cipher with a 64-bit block and a 32 to 448-bit key.

    Once scheduled, the cipher state is only read, so one instance can be
    shared by concurrent encrypt/decrypt calls. Calling set_key while a
    transform is in flight on the same instance is not supported.
    """

    block_size = BLOWFISH_DEFAULT_PARAMS['block_size']
    key_size = BLOWFISH_DEFAULT_PARAMS['max_key_size']
    rounds = BLOWFISH_DEFAULT_PARAMS['rounds']

    def __init__(self, key: BytesLike, key_length: Optional[int] = None, strict: bool = False):
        """
        Initialize the cipher and schedule the key.

        Args:
            key: The secret key
            key_length: Number of leading key bytes to use (default: len(key))
            strict: Whether to reject keys outside 4..56 bytes
        """
        self.strict = strict
        self._state = None
        self.set_key(key, key_length)

    @property
    def state(self) -> CipherState:
        """The scheduled P-array and S-boxes (treat as read-only)."""
        return self._state

    def set_key(self, key: BytesLike, key_length: Optional[int] = None) -> None:
        """
        Schedule a key, replacing any previous cipher state.

        Args:
            key: The secret key
            key_length: Number of leading key bytes to use (default: len(key))

        Raises:
            InvalidKeyError: If the key length is not usable
        """
        self._state = schedule_key(key, key_length, block_encrypt=encrypt_halves, strict=self.strict)

    def encrypt_block(self, left: int, right: int) -> Tuple[int, int]:
        """Encrypt one block given as (left, right) 32-bit halves."""
        return encrypt_halves(self._state, left, right)

    def decrypt_block(self, left: int, right: int) -> Tuple[int, int]:
        """Decrypt one block given as (left, right) 32-bit halves."""
        return decrypt_halves(self._state, left, right)

    def _check_block(self, block: BytesLike) -> None:
        if len(block) != self.block_size:
            raise ValueError(f"Block must be exactly {self.block_size} bytes, got {len(block)}")

    def encrypt_block_bytes(self, block: BytesLike) -> bytes:
        """
        Encrypt a single 8-byte block.

        Args:
            block: The plaintext block

        Returns:
            The ciphertext block
        """
        self._check_block(block)
        out = bytearray(block)
        write_block(out, 0, *self.encrypt_block(*read_block(out, 0)))
        return bytes(out)

    def decrypt_block_bytes(self, block: BytesLike) -> bytes:
        """
        Decrypt a single 8-byte block.

        Args:
            block: The ciphertext block

        Returns:
            The plaintext block
        """
        self._check_block(block)
        out = bytearray(block)
        write_block(out, 0, *self.decrypt_block(*read_block(out, 0)))
        return bytes(out)

    def _transform_buffer(self, dst, src: BytesLike, byte_length: Optional[int], transform) -> None:
        if isinstance(src, str) or isinstance(dst, str):
            raise TypeError("Buffers must be bytes-like, not str")

        if byte_length is None:
            byte_length = len(src)

        if byte_length < 0 or byte_length > len(src):
            raise ValueError(f"Byte length {byte_length} is outside the {len(src)}-byte source")

        if len(dst) < byte_length:
            raise ValueError(f"Destination holds {len(dst)} bytes, need {byte_length}")

        if dst is not src:
            dst[:byte_length] = src[:byte_length]

        full_length = byte_length - byte_length % self.block_size
        if full_length != byte_length:
            logger.debug("Leaving %d trailing bytes untouched", byte_length - full_length)

        state = self._state
        for offset in range(0, full_length, self.block_size):
            left, right = transform(state, *read_block(dst, offset))
            write_block(dst, offset, left, right)

    def encrypt_buffer(self, dst, src: BytesLike, byte_length: Optional[int] = None) -> None:
        """
        Encrypt consecutive 8-byte blocks of src into dst.

        dst may be src itself (in-place). When it is not, src[:byte_length]
        is copied into dst first. Bytes past the last full block are copied
        but not encrypted.

        Args:
            dst: Writable destination buffer (bytearray or memoryview)
            src: Source buffer
            byte_length: Number of bytes to process (default: len(src))
        """
        self._transform_buffer(dst, src, byte_length, encrypt_halves)

    def decrypt_buffer(self, dst, src: BytesLike, byte_length: Optional[int] = None) -> None:
        """
        Decrypt consecutive 8-byte blocks of src into dst.

        Same buffer rules as encrypt_buffer.

        Args:
            dst: Writable destination buffer (bytearray or memoryview)
            src: Source buffer
            byte_length: Number of bytes to process (default: len(src))
        """
        self._transform_buffer(dst, src, byte_length, decrypt_halves)

    def encrypt(self, data: BytesLike) -> bytes:
        """Encrypt data block by block and return the result as bytes."""
        out = bytearray(data)
        self.encrypt_buffer(out, out)
        return bytes(out)

    def decrypt(self, data: BytesLike) -> bytes:
        """Decrypt data block by block and return the result as bytes."""
        out = bytearray(data)
        self.decrypt_buffer(out, out)
        return bytes(out)


def encrypt(data: BytesLike, key: BytesLike) -> bytes:
    """
    Convenience function to encrypt a buffer with a one-off key.

    Args:
        data: The plaintext (a multiple of 8 bytes)
        key: The secret key

    Returns:
        The ciphertext
    """
    return Blowfish(key).encrypt(data)


def decrypt(data: BytesLike, key: BytesLike) -> bytes:
    """
    Convenience function to decrypt a buffer with a one-off key.

    Args:
        data: The ciphertext (a multiple of 8 bytes)
        key: The secret key

    Returns:
        The plaintext
    """
    return Blowfish(key).decrypt(data)


if __name__ == "__main__":
    # Known-answer check for the all-zero key and block
    cipher = Blowfish(bytes(8))
    ciphertext = cipher.encrypt(bytes(8))
    print(f"Ciphertext: {ciphertext.hex()}")
    assert ciphertext.hex() == '4ef997456198dd78'
    assert cipher.decrypt(ciphertext) == bytes(8)
    print("Blowfish known-answer test passed!")
