import random

import pytest

from bfcipher import Blowfish

CryptodomeBlowfish = pytest.importorskip("Cryptodome.Cipher.Blowfish")


def _reference(key):
    return CryptodomeBlowfish.new(key, CryptodomeBlowfish.MODE_ECB)


@pytest.mark.parametrize("key_length", [4, 5, 7, 8, 13, 16, 23, 32, 55, 56])
def test_matches_pycryptodome_ecb(key_length):
    rng = random.Random(key_length)
    key = bytes(rng.randrange(256) for _ in range(key_length))
    data = bytes(rng.randrange(256) for _ in range(64))

    ours = Blowfish(key)
    reference = _reference(key)

    ciphertext = ours.encrypt(data)
    assert ciphertext == reference.encrypt(data)
    assert ours.decrypt(ciphertext) == reference.decrypt(ciphertext)


def test_decrypts_reference_ciphertext():
    key = b"interoperability"
    data = b"sixteen byte msg" * 4
    assert Blowfish(key).decrypt(_reference(key).encrypt(data)) == data
