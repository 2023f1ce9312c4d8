"""
projections.py - read-only lookups used to inspect a trace bit by bit.

These answer questions like "which input bit does output bit 7 come from?"
or "which bits of the XOR result does S3 read?". None of them hold state;
they are derived on demand from the tables and the trace.

All indices here are 0-based positions in a bit string.
"""

from typing import List, Optional, Sequence, Tuple

from .bits import binary_to_hex
from .rounds import RoundRecord, SBoxLookup, sbox_lookup
from .tables import STANDARD_TABLES, TableSet
from .trace import CipherTrace


def source_index(table: Sequence[int], output_index: int) -> int:
    """Input position that output bit ``output_index`` is copied from."""
    if not 0 <= output_index < len(table):
        raise IndexError(f"Output index {output_index} outside 0..{len(table) - 1}")
    return table[output_index] - 1


def target_indices(table: Sequence[int], input_index: int,
                   input_bits: Optional[int] = None) -> List[int]:
    """
    Output positions that copy input bit ``input_index``.
    Empty for bits a selection table drops, two entries for bits E repeats.

    ``input_bits`` is the width of the table's input; it defaults to the
    highest position the table reads, so pass it for tables (like PC-1)
    that never read their last input bit.
    """
    width = max(table) if input_bits is None else input_bits
    if not 0 <= input_index < width:
        raise IndexError(f"Input index {input_index} outside 0..{width - 1}")
    return [i for i, position in enumerate(table) if position == input_index + 1]


def sbox_group_indices(box: int) -> List[int]:
    """Positions of the 48-bit XOR result read by S-box ``box``."""
    _check_box(box)
    return list(range(6 * box, 6 * box + 6))


def sbox_output_indices(box: int) -> List[int]:
    """Positions of the 32-bit substitution output written by S-box ``box``."""
    _check_box(box)
    return list(range(4 * box, 4 * box + 4))


def sbox_details(record: RoundRecord, tables: TableSet = STANDARD_TABLES) -> List[SBoxLookup]:
    """The eight S-box lookups performed in ``record``, in box order."""
    return [
        sbox_lookup(record.xor_result[6 * box:6 * box + 6], box, tables)
        for box in range(len(tables.s_boxes))
    ]


def nibble_context(bits: str, index: int) -> Tuple[int, str]:
    """The hex digit (and its position) that bit ``index`` belongs to."""
    if not 0 <= index < len(bits):
        raise IndexError(f"Bit index {index} outside 0..{len(bits) - 1}")
    nibble = index // 4
    return nibble, binary_to_hex(bits[4 * nibble:4 * nibble + 4])


def round_halves(trace: CipherTrace, round_number: int) -> Tuple[str, str]:
    """(L_i, R_i) after round ``round_number``; round 0 gives the IP halves."""
    if not 0 <= round_number <= len(trace.rounds):
        raise IndexError(f"Round {round_number} outside 0..{len(trace.rounds)}")
    if round_number == 0:
        first = trace.rounds[0]
        return first.left, first.right
    record = trace.rounds[round_number - 1]
    return record.right, record.new_right


def _check_box(box: int) -> None:
    if not 0 <= box < 8:
        raise IndexError(f"S-box index {box} outside 0..7")
