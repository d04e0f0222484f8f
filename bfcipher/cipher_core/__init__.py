"""
Cipher Core Package

This package implements the core of the Blowfish cipher: the Feistel
round function, the 16-round block transform and its inverse, and the
buffer-level encryption and decryption entry points.
"""

from .feistel import feistel, encrypt_halves, decrypt_halves
from .block_cipher import Blowfish, encrypt, decrypt

__all__ = ['feistel', 'encrypt_halves', 'decrypt_halves', 'Blowfish', 'encrypt', 'decrypt']
