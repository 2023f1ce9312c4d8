import pytest

from des_trace.bits import (
    binary_to_hex,
    hex_to_binary,
    left_rotate,
    normalize_hex,
    permute,
    split_halves,
    xor,
)
from des_trace.errors import InvariantViolation, MalformedInput


def test_hex_to_binary_is_msb_first():
    assert hex_to_binary("1") == "0001"
    assert hex_to_binary("A5") == "10100101"
    assert hex_to_binary("f") == "1111"
    assert len(hex_to_binary("0123456789ABCDEF")) == 64


def test_hex_to_binary_rejects_non_hex():
    with pytest.raises(MalformedInput) as excinfo:
        hex_to_binary("12GZ")
    assert excinfo.value.position == 2


def test_binary_to_hex_is_uppercase():
    assert binary_to_hex("10101111") == "AF"
    assert binary_to_hex("") == ""


@pytest.mark.parametrize("text", ["0123456789abcdef", "133457799BBCDFF1", "FFFFFFFFFFFFFFFF"])
def test_hex_round_trip(text):
    assert binary_to_hex(hex_to_binary(text)) == text.upper()


def test_binary_to_hex_requires_whole_nibbles():
    with pytest.raises(InvariantViolation):
        binary_to_hex("101")
    with pytest.raises(InvariantViolation):
        binary_to_hex("10x1")


def test_normalize_hex_pads_and_truncates():
    assert normalize_hex("ABCD") == "ABCD000000000000"
    assert normalize_hex("0123456789ABCDEF0123") == "0123456789ABCDEF"
    assert normalize_hex("  abcd \n") == "ABCD000000000000"
    assert normalize_hex("") == "0" * 16


def test_normalize_hex_validates_before_truncating():
    with pytest.raises(MalformedInput):
        normalize_hex("0123456789ABCDEF012Z")
    with pytest.raises(MalformedInput):
        normalize_hex("12GZ34")


def test_permute_uses_one_based_positions():
    assert permute("abcd", [4, 1, 1, 3]) == "daac"
    assert permute("0110", [2, 3]) == "11"


def test_permute_rejects_out_of_range_positions():
    with pytest.raises(InvariantViolation):
        permute("0101", [0])
    with pytest.raises(InvariantViolation):
        permute("0101", [5])


def test_xor():
    assert xor("1100", "1010") == "0110"
    with pytest.raises(InvariantViolation):
        xor("1", "10")


def test_left_rotate_wraps():
    assert left_rotate("100000", 1) == "000001"
    assert left_rotate("110000", 2) == "000011"
    assert left_rotate("1010", 4) == "1010"


def test_split_halves():
    assert split_halves("11110000") == ("1111", "0000")
    with pytest.raises(InvariantViolation):
        split_halves("111")


def test_normalize_hex_checks_before_upper_casing():
    # U+FB00 upper-cases to "FF"
    with pytest.raises(MalformedInput) as excinfo:
        normalize_hex("ﬀ")
    assert excinfo.value.position == 0
    with pytest.raises(MalformedInput):
        normalize_hex("12ß")


def test_malformed_position_indexes_caller_text():
    with pytest.raises(MalformedInput) as excinfo:
        normalize_hex("  ab1g")
    assert excinfo.value.text == "  ab1g"
    assert excinfo.value.position == 5
    assert excinfo.value.text[excinfo.value.position] == "g"


def test_normalize_hex_whitespace_only():
    assert normalize_hex("   ") == "0" * 16
