"""
trace.py - encrypt one 64-bit block and keep the whole execution trace.

Public entry point:

    encrypt_block(plaintext_hex: str, key_hex: str) -> CipherTrace

Both inputs are normalised to 16 hex digits (truncated if longer, padded on
the right with '0' if shorter). Nothing is computed until both inputs have
been validated, so a MalformedInput never leaves a half-built trace behind.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from .bits import binary_to_hex, hex_to_binary, normalize_hex, permute, split_halves
from .key_schedule import KeyGenStep, generate_key_schedule
from .rounds import RoundRecord, run_round
from .tables import STANDARD_TABLES, TableSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CipherTrace:
    """
    Everything computed while encrypting one block.
    ``rounds[i]`` holds the halves entering round i+1 and that round's
    intermediates; ``fp_output`` is the ciphertext as bits.
    """
    plaintext: str
    key: str
    binary_plaintext: str
    binary_key: str
    ip_output: str
    rounds: Tuple[RoundRecord, ...]
    sub_keys: Tuple[str, ...]
    key_gen_steps: Tuple[KeyGenStep, ...]
    pc1_output: str
    fp_output: str

    @property
    def pre_output(self) -> str:
        """R16 || L16, the block fed into the final permutation."""
        last = self.rounds[-1]
        return last.new_right + last.right

    @property
    def ciphertext(self) -> str:
        return binary_to_hex(self.fp_output)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data rendering, suitable for json.dumps."""
        data = asdict(self)
        data["rounds"] = list(data["rounds"])
        data["key_gen_steps"] = list(data["key_gen_steps"])
        data["sub_keys"] = list(data["sub_keys"])
        data["pre_output"] = self.pre_output
        data["ciphertext"] = self.ciphertext
        return data


def encrypt_block(plaintext_hex: str, key_hex: str,
                  tables: TableSet = STANDARD_TABLES) -> CipherTrace:
    """
    Run DES over a single block.

    Steps:
        1. normalise and convert both inputs to 64-bit strings
        2. build the key schedule
        3. initial permutation, split into L0 / R0
        4. 16 rounds: L_i = R_{i-1}, R_i = L_{i-1} XOR f(R_{i-1}, K_i)
        5. final permutation over R16 || L16 (no extra swap)
    """
    plaintext = normalize_hex(plaintext_hex)
    key = normalize_hex(key_hex)
    logger.debug("Encrypting %s under key %s", plaintext, key)

    binary_plaintext = hex_to_binary(plaintext)
    binary_key = hex_to_binary(key)

    schedule = generate_key_schedule(binary_key, tables)

    ip_output = permute(binary_plaintext, tables.ip)
    left, right = split_halves(ip_output)

    rounds = []
    for round_number, sub_key in enumerate(schedule.sub_keys, start=1):
        record = run_round(round_number, left, right, sub_key, tables)
        rounds.append(record)
        left, right = right, record.new_right
        logger.debug("Round %2d: L=%s R=%s", round_number,
                     binary_to_hex(left), binary_to_hex(right))

    fp_output = permute(right + left, tables.fp)
    logger.debug("Ciphertext %s", binary_to_hex(fp_output))

    return CipherTrace(
        plaintext=plaintext,
        key=key,
        binary_plaintext=binary_plaintext,
        binary_key=binary_key,
        ip_output=ip_output,
        rounds=tuple(rounds),
        sub_keys=schedule.sub_keys,
        key_gen_steps=schedule.steps,
        pc1_output=schedule.pc1_output,
        fp_output=fp_output,
    )
