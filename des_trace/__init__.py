"""
des_trace - compute the full execution trace of DES for a single block.

    >>> trace = encrypt_block("0123456789ABCDEF", "133457799BBCDFF1")
    >>> trace.ciphertext
    '85E813540F0AB405'
"""

from .bits import binary_to_hex, hex_to_binary, normalize_hex, permute, xor
from .errors import InvariantViolation, MalformedInput
from .key_schedule import KeyGenStep, KeySchedule, generate_key_schedule
from .rounds import RoundRecord, SBoxLookup, run_round, sbox_lookup, substitute
from .tables import STANDARD_TABLES, TableSet
from .trace import CipherTrace, encrypt_block

__version__ = "0.1.0"

__all__ = [
    "CipherTrace",
    "InvariantViolation",
    "KeyGenStep",
    "KeySchedule",
    "MalformedInput",
    "RoundRecord",
    "SBoxLookup",
    "STANDARD_TABLES",
    "TableSet",
    "binary_to_hex",
    "encrypt_block",
    "generate_key_schedule",
    "hex_to_binary",
    "normalize_hex",
    "permute",
    "run_round",
    "sbox_lookup",
    "substitute",
    "xor",
]
