"""
key_schedule.py - derive the 16 DES round keys and record every step.

Steps:
    - PC-1: 64 -> 56 bits
    - split into C and D (28 bits each)
    - for each round: left-rotate C and D, join them, apply PC-2: 56 -> 48 bits
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .bits import left_rotate, permute, require_width, split_halves
from .tables import STANDARD_TABLES, TableSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyGenStep:
    """C/D registers before and after one round's rotation, and the subkey."""
    round: int
    c_before: str
    d_before: str
    c_after: str
    d_after: str
    shift_amount: int
    sub_key: str


@dataclass(frozen=True)
class KeySchedule:
    """PC-1 output, the 16 round keys and the per-round register history."""
    pc1_output: str
    sub_keys: Tuple[str, ...]
    steps: Tuple[KeyGenStep, ...]


def generate_key_schedule(key_bits: str, tables: TableSet = STANDARD_TABLES) -> KeySchedule:
    """
    Generate the round keys (each 48 bits) from a 64-bit key bit string.

    The parity bits are simply dropped by PC-1, they are never checked.
    """
    require_width(key_bits, 64, "Key")

    pc1_output = permute(key_bits, tables.pc1)
    c, d = split_halves(pc1_output)

    sub_keys = []
    steps = []
    for round_number, shift in enumerate(tables.shift_schedule, start=1):
        c_before, d_before = c, d
        c = left_rotate(c, shift)
        d = left_rotate(d, shift)
        sub_key = permute(c + d, tables.pc2)
        sub_keys.append(sub_key)
        steps.append(KeyGenStep(
            round=round_number,
            c_before=c_before,
            d_before=d_before,
            c_after=c,
            d_after=d,
            shift_amount=shift,
            sub_key=sub_key,
        ))

    logger.debug("Generated %d round keys", len(sub_keys))
    return KeySchedule(
        pc1_output=pc1_output,
        sub_keys=tuple(sub_keys),
        steps=tuple(steps),
    )
