"""
bfcipher - Blowfish Symmetric Block Cipher Library

This library implements the Blowfish block cipher from scratch: a
16-round Feistel network on 64-bit blocks with key-dependent S-boxes.

Key Features:
- Variable key length (32 to 448 bits)
- Key schedule deriving the P-array and S-boxes from the digits of pi
- Block-level and buffer-level encryption and decryption
- Bit-exact compatibility with standard Blowfish (big-endian words)
- Avalanche diagnostics for keys and plaintexts

Chaining modes, padding and key management are left to the caller.
"""

from .cipher_core import Blowfish, encrypt, decrypt
from .key_schedule import InvalidKeyError

__version__ = '0.1.0'
__author__ = 'bfcipher Team'

__all__ = ['Blowfish', 'InvalidKeyError', 'encrypt', 'decrypt']
