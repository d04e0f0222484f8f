"""
Avalanche Diagnostics

Measures how many ciphertext bits change when a single plaintext or key
bit is flipped, and how far apart the tables of two scheduled keys are.
A well-behaved cipher flips about half of the output bits.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..cipher_core.block_cipher import Blowfish
from ..key_schedule.blowfish_key_schedule import CipherState


@dataclass
class AvalancheResult:
    """Avalanche measurement for one input type."""
    input_type: str             # "plaintext" or "key"
    num_trials: int
    per_bit_mean: List[float] = field(default_factory=list)
    mean: float = 0.0
    std: float = 0.0
    min_bit: float = 0.0
    max_bit: float = 0.0

    @property
    def passes(self) -> bool:
        """Heuristic: mean within 0.05 of one half and no weak input bit."""
        return abs(self.mean - 0.5) < 0.05 and self.min_bit > 0.3

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return (
            f"[{status}] avalanche({self.input_type}): "
            f"mean={self.mean:.4f}, std={self.std:.4f}, "
            f"min={self.min_bit:.4f}, max={self.max_bit:.4f}"
        )


def hamming_distance(a: bytes, b: bytes) -> int:
    """
    Count the differing bits of two equal-length byte strings.

    Raises:
        ValueError: If the lengths differ
    """
    if len(a) != len(b):
        raise ValueError(f"Inputs must have equal length, got {len(a)} and {len(b)}")
    diff = np.frombuffer(bytes(a), dtype=np.uint8) ^ np.frombuffer(bytes(b), dtype=np.uint8)
    return int(np.unpackbits(diff).sum())


def _flip_bit(data: bytes, bit: int) -> bytes:
    out = bytearray(data)
    out[bit // 8] ^= 0x80 >> (bit % 8)
    return bytes(out)


def _build_result(input_type: str, trials: int, flips: np.ndarray, output_bits: int) -> AvalancheResult:
    # flips has shape (input_bits, trials)
    per_bit = flips.mean(axis=1) / output_bits
    return AvalancheResult(
        input_type=input_type,
        num_trials=trials,
        per_bit_mean=[float(p) for p in per_bit],
        mean=round(float(per_bit.mean()), 6),
        std=round(float(per_bit.std()), 6),
        min_bit=round(float(per_bit.min()), 6),
        max_bit=round(float(per_bit.max()), 6),
    )


def plaintext_avalanche(cipher: Blowfish, trials: int = 64, seed: int = 1337) -> AvalancheResult:
    """
    Flip each plaintext bit of random blocks and measure ciphertext change.

    Args:
        cipher: A keyed Blowfish instance
        trials: Number of random blocks per input bit
        seed: Random seed for reproducibility

    Returns:
        AvalancheResult over the 64 plaintext bits
    """
    rng = np.random.default_rng(seed)
    block_bits = cipher.block_size * 8
    flips = np.zeros((block_bits, trials), dtype=np.int64)

    for t in range(trials):
        block = rng.integers(0, 256, size=cipher.block_size, dtype=np.uint8).tobytes()
        reference = cipher.encrypt_block_bytes(block)
        for bit in range(block_bits):
            flips[bit, t] = hamming_distance(reference, cipher.encrypt_block_bytes(_flip_bit(block, bit)))

    return _build_result("plaintext", trials, flips, block_bits)


def key_avalanche(key: bytes, trials: int = 8, seed: int = 1337,
                  block: Optional[bytes] = None) -> AvalancheResult:
    """
    Flip each key bit and measure the change in ciphertext.

    Every flipped key requires a full key schedule, so keep trials small.

    Args:
        key: The reference key
        trials: Number of random plaintext blocks per key bit
        seed: Random seed for reproducibility
        block: Fixed plaintext block to use instead of random ones

    Returns:
        AvalancheResult over the key bits
    """
    rng = np.random.default_rng(seed)
    key_bits = len(key) * 8
    if block is not None:
        blocks = [bytes(block)] * trials
    else:
        blocks = [rng.integers(0, 256, size=Blowfish.block_size, dtype=np.uint8).tobytes()
                  for _ in range(trials)]

    reference = Blowfish(key)
    expected = [reference.encrypt_block_bytes(b) for b in blocks]
    flips = np.zeros((key_bits, trials), dtype=np.int64)

    for bit in range(key_bits):
        flipped = Blowfish(_flip_bit(key, bit))
        for t, b in enumerate(blocks):
            flips[bit, t] = hamming_distance(expected[t], flipped.encrypt_block_bytes(b))

    return _build_result("key", trials, flips, Blowfish.block_size * 8)


def _state_words(state: CipherState) -> np.ndarray:
    return np.concatenate([np.asarray(state.p_array, dtype=np.uint32)]
                          + [np.asarray(sbox, dtype=np.uint32) for sbox in state.s_boxes])


def state_difference(a: CipherState, b: CipherState) -> float:
    """
    Fraction of P-array and S-box words that differ between two states.

    Returns:
        0.0 for identical states, close to 1.0 for unrelated keys
    """
    words_a = _state_words(a)
    words_b = _state_words(b)
    return float(np.count_nonzero(words_a != words_b)) / len(words_a)
