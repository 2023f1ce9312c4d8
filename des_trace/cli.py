"""
cli.py - print a DES trace from the command line.

    python -m des_trace [PLAINTEXT] [KEY] [--round N] [--json] [-v]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .bits import binary_to_hex
from .errors import MalformedInput
from .projections import round_halves, sbox_details
from .trace import CipherTrace, encrypt_block

DEFAULT_PLAINTEXT = "123456ABCD132536"
DEFAULT_KEY = "AABB09182736CCDD"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options: plaintext, key, --round / --json, -v."""
    parser = argparse.ArgumentParser(
        prog="des_trace",
        description="Encrypt one 64-bit block with DES and print every intermediate value.",
    )
    parser.add_argument("plaintext", nargs="?", default=DEFAULT_PLAINTEXT,
                        help="plaintext block in hex (default: %(default)s)")
    parser.add_argument("key", nargs="?", default=DEFAULT_KEY,
                        help="key in hex (default: %(default)s)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--round", type=int, choices=range(1, 17), metavar="N",
                        help="only show round N (1-16)")
    output.add_argument("--json", action="store_true",
                        help="dump the full trace as JSON")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def print_round(trace: CipherTrace, round_number: int) -> None:
    """Print the intermediates of one round (1-based), S-box by S-box."""
    record = trace.rounds[round_number - 1]
    i = round_number
    print(f"Round {i}:")
    print(f"  Input:  L{i - 1} = {binary_to_hex(record.left)}, R{i - 1} = {binary_to_hex(record.right)}")
    print(f"  E(R{i - 1})      = {binary_to_hex(record.expanded_right)}")
    print(f"  K{i:<2d}          = {binary_to_hex(record.sub_key)}")
    print(f"  E XOR K       = {binary_to_hex(record.xor_result)}")
    for lookup in sbox_details(record):
        print(f"    S{lookup.box + 1}: {lookup.chunk} row={lookup.row} col={lookup.col:<2d} -> {lookup.output}")
    print(f"  S-box output  = {binary_to_hex(record.sbox_output)}")
    print(f"  F(R{i - 1}, K{i})    = {binary_to_hex(record.pbox_output)}")
    left, right = round_halves(trace, i)
    print(f"  Output: L{i} = {binary_to_hex(left)}, R{i} = {binary_to_hex(right)}")


def print_trace(trace: CipherTrace) -> None:
    """
    Print the whole trace: subkeys, IP halves, every round,
    R16||L16 and the ciphertext.
    """
    print("=" * 60)
    print(f"Plaintext: {trace.plaintext}")
    print(f"Key:       {trace.key}")
    print("=" * 60)

    print(f"\nPC-1 output: {trace.pc1_output}")
    print("Subkeys generated:")
    for n, sub_key in enumerate(trace.sub_keys, start=1):
        print(f"  K{n:<2d}: {binary_to_hex(sub_key)}")

    left, right = round_halves(trace, 0)
    print(f"\nAfter Initial Permutation: {binary_to_hex(trace.ip_output)}")
    print(f"  L0 = {binary_to_hex(left)}")
    print(f"  R0 = {binary_to_hex(right)}\n")

    for n in range(1, len(trace.rounds) + 1):
        print_round(trace, n)

    print(f"\nR16||L16 = {binary_to_hex(trace.pre_output)}")
    print(f"Ciphertext = {trace.ciphertext}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns 0 on success, 2 on malformed hex input."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        trace = encrypt_block(args.plaintext, args.key)
    except MalformedInput as e:
        logger.debug("Rejected input", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(trace.to_dict(), indent=2))
    elif args.round is not None:
        print_round(trace, args.round)
    else:
        print_trace(trace)
    return 0
