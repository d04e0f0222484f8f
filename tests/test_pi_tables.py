from bfcipher.sbox_gen import (
    INITIAL_P_ARRAY,
    INITIAL_S_BOXES,
    P_ARRAY_LENGTH,
    SBOX_COUNT,
    SBOX_LENGTH,
    generate_initial_state,
)


def test_table_dimensions():
    assert len(INITIAL_P_ARRAY) == P_ARRAY_LENGTH == 18
    assert len(INITIAL_S_BOXES) == SBOX_COUNT == 4
    assert all(len(sbox) == SBOX_LENGTH == 256 for sbox in INITIAL_S_BOXES)


def test_tables_start_with_pi():
    # 0x243f6a88 are the first fractional hex digits of pi
    assert INITIAL_P_ARRAY[0] == 0x243F6A88
    assert INITIAL_P_ARRAY[17] == 0x8979FB1B
    assert INITIAL_S_BOXES[0][0] == 0xD1310BA6
    assert INITIAL_S_BOXES[1][0] == 0x4B7A70E9
    assert INITIAL_S_BOXES[2][0] == 0xE93D5A68
    assert INITIAL_S_BOXES[3][0] == 0x3A39CE37
    assert INITIAL_S_BOXES[3][255] == 0x3AC372E6


def test_tables_are_immutable_tuples():
    assert isinstance(INITIAL_P_ARRAY, tuple)
    assert all(isinstance(sbox, tuple) for sbox in INITIAL_S_BOXES)


def test_generate_initial_state_returns_copies():
    p_array, s_boxes = generate_initial_state()
    p_array[0] = 0
    s_boxes[0][0] = 0
    assert INITIAL_P_ARRAY[0] == 0x243F6A88
    assert INITIAL_S_BOXES[0][0] == 0xD1310BA6

    fresh_p, fresh_s = generate_initial_state()
    assert fresh_p == list(INITIAL_P_ARRAY)
    assert fresh_s[0] == list(INITIAL_S_BOXES[0])
