import pytest

from bfcipher import Blowfish
from bfcipher.analysis import (
    AvalancheResult,
    hamming_distance,
    key_avalanche,
    plaintext_avalanche,
    state_difference,
)
from bfcipher.sbox_gen import INITIAL_S_BOXES, evaluate_sbox


# ---------------------------------------------------------------------------
# Avalanche
# ---------------------------------------------------------------------------

def test_hamming_distance():
    assert hamming_distance(b"\x00", b"\xff") == 8
    assert hamming_distance(b"\x0f\xf0", b"\x0f\xf0") == 0
    assert hamming_distance(b"\x01\x80", b"\x00\x00") == 2


def test_hamming_distance_length_mismatch():
    with pytest.raises(ValueError):
        hamming_distance(b"\x00", b"\x00\x00")


def test_plaintext_avalanche_is_close_to_half():
    result = plaintext_avalanche(Blowfish(b"avalanche"), trials=16)
    assert isinstance(result, AvalancheResult)
    assert result.input_type == "plaintext"
    assert len(result.per_bit_mean) == 64
    assert result.passes, result.summary()


def test_key_avalanche_is_close_to_half():
    result = key_avalanche(b"\x01\x02\x03\x04", trials=2)
    assert len(result.per_bit_mean) == 32
    assert 0.4 < result.mean < 0.6, result.summary()


def test_key_avalanche_with_fixed_block():
    result = key_avalanche(b"\xa5\x5a\xa5\x5a", trials=1, block=bytes(8))
    assert result.num_trials == 1
    assert 0.0 < result.min_bit <= result.max_bit <= 1.0


def test_summary_reports_status():
    result = AvalancheResult(input_type="key", num_trials=1, mean=0.1, min_bit=0.1, max_bit=0.1)
    assert not result.passes
    assert result.summary().startswith("[FAIL]")


def test_state_difference_identical_keys():
    assert state_difference(Blowfish(b"same").state, Blowfish(b"same").state) == 0.0


def test_state_difference_single_bit():
    a = Blowfish(bytes(8)).state
    b = Blowfish(bytes(7) + b"\x01").state
    assert state_difference(a, b) > 0.9


# ---------------------------------------------------------------------------
# S-box metrics
# ---------------------------------------------------------------------------

def test_evaluate_initial_sbox():
    metrics = evaluate_sbox(INITIAL_S_BOXES[0])
    assert set(metrics) == {'bit_bias', 'distinct_ratio', 'mean_hamming_weight'}
    assert metrics['distinct_ratio'] == 1.0
    assert 14.0 < metrics['mean_hamming_weight'] < 18.0


def test_evaluate_scheduled_sboxes():
    for sbox in Blowfish(b"metrics").state.s_boxes:
        metrics = evaluate_sbox(sbox)
        assert metrics['bit_bias'] < 0.2
        assert metrics['distinct_ratio'] > 0.99
        assert 14.0 < metrics['mean_hamming_weight'] < 18.0


def test_evaluate_constant_sbox():
    metrics = evaluate_sbox([0xFFFFFFFF] * 256)
    assert metrics['bit_bias'] == 0.5
    assert metrics['distinct_ratio'] == 1 / 256
    assert metrics['mean_hamming_weight'] == 32.0


def test_evaluate_sbox_wrong_size():
    with pytest.raises(ValueError):
        evaluate_sbox([0] * 255)
