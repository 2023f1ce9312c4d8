"""
bits.py - bit-string helpers used by every stage of the cipher.

A bit string is a plain ``str`` made of '0' and '1' characters, indexed
from 0. Permutation tables, on the other hand, are 1-based: entry ``p`` at
output position ``i`` means "output[i] is input bit p-1". That is the
convention used by the published DES tables, so we keep it.
"""

import string
from typing import Optional, Sequence, Tuple

from .errors import InvariantViolation, MalformedInput

HEX_DIGITS = frozenset(string.hexdigits)

BLOCK_HEX_LENGTH = 16


# ============================================================
# Hex <-> binary
# ============================================================

def _check_hex(text: str, start: int = 0, end: Optional[int] = None) -> None:
    """Validate text[start:end]; reported positions index into ``text``."""
    end = len(text) if end is None else end
    for position in range(start, end):
        if text[position] not in HEX_DIGITS:
            raise MalformedInput(text, position)


def hex_to_binary(hex_text: str) -> str:
    """
    Convert a hex string to a bit string, 4 bits per digit, MSB first.
    Raises MalformedInput on any character that is not a hex digit.
    """
    _check_hex(hex_text)
    return "".join(format(int(ch, 16), "04b") for ch in hex_text)


def binary_to_hex(bits: str) -> str:
    """Convert a bit string (length multiple of 4) to uppercase hex."""
    if len(bits) % 4 != 0:
        raise InvariantViolation(f"Bit string length {len(bits)} is not a multiple of 4")
    if set(bits) - {"0", "1"}:
        raise InvariantViolation(f"Not a bit string: {bits!r}")
    return "".join(format(int(bits[i:i + 4], 2), "X") for i in range(0, len(bits), 4))


def normalize_hex(text: str, width: int = BLOCK_HEX_LENGTH) -> str:
    """
    Bring user input to exactly ``width`` uppercase hex digits.

    Surrounding whitespace is stripped and the whole string is validated
    first, so a bad character past the cut-off still raises MalformedInput.
    Longer input is truncated, shorter input is padded on the right with '0'.
    """
    start = len(text) - len(text.lstrip())
    end = len(text.rstrip())
    # check before upper-casing: str.upper can turn non-ASCII into hex digits
    _check_hex(text, start, max(start, end))
    cleaned = text[start:end].upper()
    return cleaned[:width].ljust(width, "0")


# ============================================================
# Permutation / bitwise helpers
# ============================================================

def require_width(bits: str, width: int, label: str) -> None:
    """Raise InvariantViolation if ``bits`` is not exactly ``width`` long."""
    if len(bits) != width:
        raise InvariantViolation(f"{label} must be {width} bits, got {len(bits)}")


def permute(bits: str, table: Sequence[int]) -> str:
    """
    Generic permutation / selection.
    - bits:  input bit string
    - table: 1-based source positions, one per output bit
    Returns a bit string whose length == len(table).
    """
    size = len(bits)
    out = []
    for position in table:
        if not 1 <= position <= size:
            raise InvariantViolation(
                f"Table index {position} out of range for a {size}-bit input"
            )
        out.append(bits[position - 1])
    return "".join(out)


def xor(a: str, b: str) -> str:
    """Bitwise XOR of two equal-length bit strings."""
    if len(a) != len(b):
        raise InvariantViolation(f"Cannot XOR {len(a)} bits with {len(b)} bits")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def left_rotate(bits: str, shift: int) -> str:
    """Circular left shift: the leading ``shift`` bits move to the tail."""
    if not bits:
        return bits
    shift %= len(bits)
    return bits[shift:] + bits[:shift]


def split_halves(bits: str) -> Tuple[str, str]:
    """Split an even-width bit string into its left and right halves."""
    if len(bits) % 2 != 0:
        raise InvariantViolation(f"Cannot split {len(bits)} bits into halves")
    middle = len(bits) // 2
    return bits[:middle], bits[middle:]
