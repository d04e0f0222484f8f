import pytest

from bfcipher.primitives import bytes_to_word, word_to_bytes, read_block, write_block, gcd


def test_bytes_to_word_is_big_endian():
    assert bytes_to_word(0x01, 0x02, 0x03, 0x04) == 0x01020304
    assert bytes_to_word(0xFF, 0x00, 0x00, 0x00) == 0xFF000000


def test_word_to_bytes_is_big_endian():
    assert word_to_bytes(0x01020304) == (0x01, 0x02, 0x03, 0x04)
    assert word_to_bytes(0xDEADBEEF) == (0xDE, 0xAD, 0xBE, 0xEF)


def test_read_block_splits_halves():
    buf = bytes.fromhex("aabbccdd11223344" "0102030405060708")
    assert read_block(buf, 0) == (0xAABBCCDD, 0x11223344)
    assert read_block(buf, 8) == (0x01020304, 0x05060708)


def test_write_block_touches_only_its_block():
    buf = bytearray(b"\xee" * 12)
    write_block(buf, 2, 0x01020304, 0x05060708)
    assert bytes(buf) == b"\xee\xee" + bytes(range(1, 9)) + b"\xee\xee"


def test_write_block_into_memoryview():
    raw = bytearray(8)
    write_block(memoryview(raw), 0, 0xCAFEBABE, 0x0BADF00D)
    assert raw.hex() == "cafebabe0badf00d"


@pytest.mark.parametrize("a,b,expected", [
    (4, 4, 4),
    (6, 4, 2),
    (5, 4, 1),
    (56, 4, 4),
    (4, 0, 4),
    (12, 18, 6),
])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected
