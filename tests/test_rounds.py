import pytest

from des_trace.bits import binary_to_hex, hex_to_binary
from des_trace.errors import InvariantViolation
from des_trace.rounds import run_round, sbox_lookup, substitute

L0 = hex_to_binary("CC00CCFF")
R0 = hex_to_binary("F0AAF0AA")
K1 = hex_to_binary("1B02EFFC7072")


@pytest.fixture(scope="module")
def first_round():
    return run_round(1, L0, R0, K1)


def test_first_round_values(first_round):
    assert first_round.round_number == 1
    assert first_round.left == L0
    assert first_round.right == R0
    assert first_round.expanded_right == "011110100001010101010101011110100001010101010101"
    assert first_round.sub_key == K1
    assert first_round.xor_result == "011000010001011110111010100001100110010100100111"
    assert binary_to_hex(first_round.sbox_output) == "5C82B597"
    assert binary_to_hex(first_round.pbox_output) == "234AA9BB"
    assert binary_to_hex(first_round.new_right) == "EF4A6544"


def test_record_widths(first_round):
    assert len(first_round.expanded_right) == 48
    assert len(first_round.xor_result) == 48
    assert len(first_round.sbox_output) == 32
    assert len(first_round.pbox_output) == 32
    assert len(first_round.new_right) == 32


def test_sbox_lookup_uses_outer_bits_for_row():
    lookup = sbox_lookup("011000", 0)
    assert lookup.row_bits == "00"
    assert lookup.col_bits == "1100"
    assert (lookup.row, lookup.col) == (0, 12)
    assert lookup.value == 5
    assert lookup.output == "0101"

    # row 3, column 15 of S8
    lookup = sbox_lookup("111111", 7)
    assert (lookup.row, lookup.col, lookup.value) == (3, 15, 11)


def test_substitute_all_zero_input():
    # row 0, column 0 of each box: 14 15 10 7 2 12 4 13
    assert binary_to_hex(substitute("0" * 48)) == "EFA72C4D"


def test_round_rejects_wrong_widths():
    with pytest.raises(InvariantViolation):
        run_round(1, L0[:31], R0, K1)
    with pytest.raises(InvariantViolation):
        run_round(1, L0, R0, K1[:47])
    with pytest.raises(InvariantViolation):
        substitute("0" * 47)
