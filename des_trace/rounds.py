"""
rounds.py - one DES round, with every intermediate value kept.

f(R, K) is:
    1. Expansion E: 32 -> 48 bits
    2. XOR with the round key
    3. S-box substitution: eight 6 -> 4 boxes, yields 32 bits
    4. P permutation on the 32-bit result

The round then combines f with the left half. Swapping the halves for the
next round is left to the caller.
"""

from dataclasses import dataclass

from .bits import permute, require_width, xor
from .tables import STANDARD_TABLES, TableSet


@dataclass(frozen=True)
class SBoxLookup:
    """How a single 6-bit group was substituted."""
    box: int
    chunk: str
    row_bits: str
    col_bits: str
    row: int
    col: int
    value: int
    output: str


@dataclass(frozen=True)
class RoundRecord:
    """
    Snapshot of one round. ``left`` and ``right`` are the halves entering
    the round; ``new_right`` is left XOR pbox_output.
    """
    round_number: int
    left: str
    right: str
    expanded_right: str
    sub_key: str
    xor_result: str
    sbox_output: str
    pbox_output: str
    new_right: str


def sbox_lookup(chunk: str, box: int, tables: TableSet = STANDARD_TABLES) -> SBoxLookup:
    """
    Substitute one 6-bit group through S-box ``box`` (0-based).
    Row = first and last bits, column = the middle four.
    """
    require_width(chunk, 6, f"S{box + 1} input")
    row_bits = chunk[0] + chunk[5]
    col_bits = chunk[1:5]
    row = int(row_bits, 2)
    col = int(col_bits, 2)
    value = tables.s_boxes[box][row][col]
    return SBoxLookup(
        box=box,
        chunk=chunk,
        row_bits=row_bits,
        col_bits=col_bits,
        row=row,
        col=col,
        value=value,
        output=format(value, "04b"),
    )


def substitute(bits48: str, tables: TableSet = STANDARD_TABLES) -> str:
    """Apply the 8 S-boxes to a 48-bit string, giving 32 bits."""
    require_width(bits48, 48, "S-box input")
    return "".join(
        sbox_lookup(bits48[6 * i:6 * i + 6], i, tables).output
        for i in range(len(tables.s_boxes))
    )


def run_round(round_number: int, left: str, right: str, sub_key: str,
              tables: TableSet = STANDARD_TABLES) -> RoundRecord:
    """
    Run one Feistel round.
    - left, right: the 32-bit halves entering the round
    - sub_key: the 48-bit round key
    Steps:
        1. Expansion E: right 32 -> 48 bits
        2. XOR with sub_key
        3. S-boxes: 48 -> 32 bits
        4. P permutation
        5. new_right = left XOR P output
    """
    require_width(left, 32, "Left half")
    require_width(right, 32, "Right half")
    require_width(sub_key, 48, "Round key")

    expanded = permute(right, tables.expansion)
    mixed = xor(expanded, sub_key)
    sbox_output = substitute(mixed, tables)
    pbox_output = permute(sbox_output, tables.permutation)

    return RoundRecord(
        round_number=round_number,
        left=left,
        right=right,
        expanded_right=expanded,
        sub_key=sub_key,
        xor_result=mixed,
        sbox_output=sbox_output,
        pbox_output=pbox_output,
        new_right=xor(left, pbox_output),
    )
