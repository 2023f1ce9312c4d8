"""
tables.py - the fixed data that defines DES.

Everything here is immutable. The standard tables are bundled into a single
``TableSet`` that is built (and validated) once at import time as
``STANDARD_TABLES`` and then passed by reference into the engine. Handing the
engine a different ``TableSet`` gives a different DES variant.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import InvariantViolation

Table = Tuple[int, ...]
SBox = Tuple[Tuple[int, ...], ...]


# ============================================================
# DES TABLES (FIPS 46-3)
# ============================================================

# Initial Permutation (IP)
IP_TABLE: Table = (
    58, 50, 42, 34, 26, 18, 10,  2,
    60, 52, 44, 36, 28, 20, 12,  4,
    62, 54, 46, 38, 30, 22, 14,  6,
    64, 56, 48, 40, 32, 24, 16,  8,
    57, 49, 41, 33, 25, 17,  9,  1,
    59, 51, 43, 35, 27, 19, 11,  3,
    61, 53, 45, 37, 29, 21, 13,  5,
    63, 55, 47, 39, 31, 23, 15,  7,
)

# Final Permutation (IP^-1)
FP_TABLE: Table = (
    40,  8, 48, 16, 56, 24, 64, 32,
    39,  7, 47, 15, 55, 23, 63, 31,
    38,  6, 46, 14, 54, 22, 62, 30,
    37,  5, 45, 13, 53, 21, 61, 29,
    36,  4, 44, 12, 52, 20, 60, 28,
    35,  3, 43, 11, 51, 19, 59, 27,
    34,  2, 42, 10, 50, 18, 58, 26,
    33,  1, 41,  9, 49, 17, 57, 25,
)

# Expansion E (32 -> 48 bits)
E_TABLE: Table = (
    32,  1,  2,  3,  4,  5,
     4,  5,  6,  7,  8,  9,
     8,  9, 10, 11, 12, 13,
    12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21,
    20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29,
    28, 29, 30, 31, 32,  1,
)

# Round permutation P (32 -> 32 bits)
P_TABLE: Table = (
    16,  7, 20, 21,
    29, 12, 28, 17,
     1, 15, 23, 26,
     5, 18, 31, 10,
     2,  8, 24, 14,
    32, 27,  3,  9,
    19, 13, 30,  6,
    22, 11,  4, 25,
)

# PC-1 (64 -> 56 bits, parity bits 8, 16, ..., 64 are dropped)
PC1_TABLE: Table = (
    57, 49, 41, 33, 25, 17,  9,
     1, 58, 50, 42, 34, 26, 18,
    10,  2, 59, 51, 43, 35, 27,
    19, 11,  3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15,
     7, 62, 54, 46, 38, 30, 22,
    14,  6, 61, 53, 45, 37, 29,
    21, 13,  5, 28, 20, 12,  4,
)

# PC-2 (56 -> 48 bits)
PC2_TABLE: Table = (
    14, 17, 11, 24,  1,  5,
     3, 28, 15,  6, 21, 10,
    23, 19, 12,  4, 26,  8,
    16,  7, 27, 20, 13,  2,
    41, 52, 31, 37, 47, 55,
    30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53,
    46, 42, 50, 36, 29, 32,
)

# Left rotations applied to C and D in each of the 16 rounds
SHIFT_SCHEDULE: Table = (1, 1, 2, 2, 2, 2, 2, 2,
                         1, 2, 2, 2, 2, 2, 2, 1)

# S-boxes: 8 boxes, each 4 rows x 16 columns
S_BOXES: Tuple[SBox, ...] = (
    # S1
    (
        (14,  4, 13,  1,  2, 15, 11,  8,  3, 10,  6, 12,  5,  9,  0,  7),
        ( 0, 15,  7,  4, 14,  2, 13,  1, 10,  6, 12, 11,  9,  5,  3,  8),
        ( 4,  1, 14,  8, 13,  6,  2, 11, 15, 12,  9,  7,  3, 10,  5,  0),
        (15, 12,  8,  2,  4,  9,  1,  7,  5, 11,  3, 14, 10,  0,  6, 13),
    ),
    # S2
    (
        (15,  1,  8, 14,  6, 11,  3,  4,  9,  7,  2, 13, 12,  0,  5, 10),
        ( 3, 13,  4,  7, 15,  2,  8, 14, 12,  0,  1, 10,  6,  9, 11,  5),
        ( 0, 14,  7, 11, 10,  4, 13,  1,  5,  8, 12,  6,  9,  3,  2, 15),
        (13,  8, 10,  1,  3, 15,  4,  2, 11,  6,  7, 12,  0,  5, 14,  9),
    ),
    # S3
    (
        (10,  0,  9, 14,  6,  3, 15,  5,  1, 13, 12,  7, 11,  4,  2,  8),
        (13,  7,  0,  9,  3,  4,  6, 10,  2,  8,  5, 14, 12, 11, 15,  1),
        (13,  6,  4,  9,  8, 15,  3,  0, 11,  1,  2, 12,  5, 10, 14,  7),
        ( 1, 10, 13,  0,  6,  9,  8,  7,  4, 15, 14,  3, 11,  5,  2, 12),
    ),
    # S4
    (
        ( 7, 13, 14,  3,  0,  6,  9, 10,  1,  2,  8,  5, 11, 12,  4, 15),
        (13,  8, 11,  5,  6, 15,  0,  3,  4,  7,  2, 12,  1, 10, 14,  9),
        (10,  6,  9,  0, 12, 11,  7, 13, 15,  1,  3, 14,  5,  2,  8,  4),
        ( 3, 15,  0,  6, 10,  1, 13,  8,  9,  4,  5, 11, 12,  7,  2, 14),
    ),
    # S5
    (
        ( 2, 12,  4,  1,  7, 10, 11,  6,  8,  5,  3, 15, 13,  0, 14,  9),
        (14, 11,  2, 12,  4,  7, 13,  1,  5,  0, 15, 10,  3,  9,  8,  6),
        ( 4,  2,  1, 11, 10, 13,  7,  8, 15,  9, 12,  5,  6,  3,  0, 14),
        (11,  8, 12,  7,  1, 14,  2, 13,  6, 15,  0,  9, 10,  4,  5,  3),
    ),
    # S6
    (
        (12,  1, 10, 15,  9,  2,  6,  8,  0, 13,  3,  4, 14,  7,  5, 11),
        (10, 15,  4,  2,  7, 12,  9,  5,  6,  1, 13, 14,  0, 11,  3,  8),
        ( 9, 14, 15,  5,  2,  8, 12,  3,  7,  0,  4, 10,  1, 13, 11,  6),
        ( 4,  3,  2, 12,  9,  5, 15, 10, 11, 14,  1,  7,  6,  0,  8, 13),
    ),
    # S7
    (
        ( 4, 11,  2, 14, 15,  0,  8, 13,  3, 12,  9,  7,  5, 10,  6,  1),
        (13,  0, 11,  7,  4,  9,  1, 10, 14,  3,  5, 12,  2, 15,  8,  6),
        ( 1,  4, 11, 13, 12,  3,  7, 14, 10, 15,  6,  8,  0,  5,  9,  2),
        ( 6, 11, 13,  8,  1,  4, 10,  7,  9,  5,  0, 15, 14,  2,  3, 12),
    ),
    # S8
    (
        (13,  2,  8,  4,  6, 15, 11,  1, 10,  9,  3, 14,  5,  0, 12,  7),
        ( 1, 15, 13,  8, 10,  3,  7,  4, 12,  5,  6, 11,  0, 14,  9,  2),
        ( 7, 11,  4,  1,  9, 12, 14,  2,  0,  6, 10, 13, 15,  3,  5,  8),
        ( 2,  1, 14,  7,  4, 10,  8, 13, 15, 12,  9,  0,  3,  5,  6, 11),
    ),
)


# ============================================================
# Table set
# ============================================================

def _check_selection(name: str, table: Sequence[int], length: int, input_bits: int) -> None:
    if len(table) != length:
        raise InvariantViolation(f"{name} must have {length} entries, got {len(table)}")
    for position in table:
        if not 1 <= position <= input_bits:
            raise InvariantViolation(
                f"{name} entry {position} outside 1..{input_bits}"
            )


def _check_permutation(name: str, table: Sequence[int], size: int) -> None:
    _check_selection(name, table, size, size)
    if sorted(table) != list(range(1, size + 1)):
        raise InvariantViolation(f"{name} is not a permutation of 1..{size}")


@dataclass(frozen=True)
class TableSet:
    """
    All the static tables the engine reads.

    ip / fp         64 -> 64, fp must undo ip
    expansion       32 -> 48
    permutation     32 -> 32 (the P-box)
    pc1             64 -> 56
    pc2             56 -> 48
    shift_schedule  16 left-rotation amounts for the C/D registers
    s_boxes         8 boxes of 4 x 16 values in 0..15
    """
    ip: Table
    fp: Table
    expansion: Table
    permutation: Table
    pc1: Table
    pc2: Table
    shift_schedule: Table
    s_boxes: Tuple[SBox, ...]

    def __post_init__(self) -> None:
        # store private tuple copies so callers cannot change a validated set
        for name in ("ip", "fp", "expansion", "permutation", "pc1", "pc2", "shift_schedule"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "s_boxes", tuple(
            tuple(tuple(row) for row in box) for box in self.s_boxes
        ))
        self.validate()

    def validate(self) -> None:
        _check_permutation("IP", self.ip, 64)
        _check_permutation("FP", self.fp, 64)
        for i, position in enumerate(self.ip):
            if self.fp[position - 1] != i + 1:
                raise InvariantViolation("FP is not the inverse of IP")
        _check_permutation("P", self.permutation, 32)
        _check_selection("E", self.expansion, 48, 32)
        _check_selection("PC-1", self.pc1, 56, 64)
        _check_selection("PC-2", self.pc2, 48, 56)

        if len(self.shift_schedule) != 16:
            raise InvariantViolation("Shift schedule must have 16 entries")
        if any(shift < 1 for shift in self.shift_schedule):
            raise InvariantViolation("Shift amounts must be positive")

        if len(self.s_boxes) != 8:
            raise InvariantViolation("Expected 8 S-boxes")
        for n, box in enumerate(self.s_boxes, start=1):
            if len(box) != 4 or any(len(row) != 16 for row in box):
                raise InvariantViolation(f"S{n} must be 4 rows x 16 columns")
            if any(not 0 <= value <= 15 for row in box for value in row):
                raise InvariantViolation(f"S{n} values must be 0..15")

    @property
    def rounds(self) -> int:
        return len(self.shift_schedule)


STANDARD_TABLES = TableSet(
    ip=IP_TABLE,
    fp=FP_TABLE,
    expansion=E_TABLE,
    permutation=P_TABLE,
    pc1=PC1_TABLE,
    pc2=PC2_TABLE,
    shift_schedule=SHIFT_SCHEDULE,
    s_boxes=S_BOXES,
)
