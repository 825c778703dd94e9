#!/usr/bin/env python3
"""
scripts/transpose_key.py — transpose an ABC key field and show both keys.

Prints the accidental table for the source key and for the key it becomes
after transposition, so added accidentals (e.g. the ^g of "D ^g") can be
checked degree by degree:

    [Key]  |  C  D  E  F  G  A  B  |  added

Usage:
    python scripts/transpose_key.py "D ^g" 2
    python scripts/transpose_key.py "Bbdor" -3
    python scripts/transpose_key.py "Em" 5 --verbose
"""
import os
import sys
import argparse
import logging

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from abckey.constants import LETTERS, _ALTER_TO_ABC_PREFIX
from abckey.errors import KeySignatureError
from abckey.parser import parse_key_field
from abckey.transpose import added_accidentals, transpose

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
GREEN = "\033[92m"
YELL  = "\033[93m"
RED   = "\033[91m"
DIM   = "\033[2m"
RESET = "\033[0m"


def _cell(alter: int) -> str:
    if alter == 0:
        return f"{DIM}{'=':>3}{RESET}"
    col = YELL if alter > 0 else CYAN
    return f"{col}{_ALTER_TO_ABC_PREFIX[alter]:>3}{RESET}"


def print_key_row(label: str, key) -> None:
    cells = "".join(_cell(int(a)) for a in key.accidentals)
    added = added_accidentals(key)
    marks = " ".join(
        f"{key.degree(i + 1)}{int(a):+d}" for i, a in enumerate(added) if a
    ) or "-"
    print(f"   {label:<10}  {BOLD}{key.to_literal_notation():<8}{RESET}  {cells}   {marks}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Transpose an ABC key field by a number of semitones.")
    parser.add_argument("key", type=str, help='K: field body, e.g. "D ^g" or "Ebmix"')
    parser.add_argument("semitones", type=int, help="Semitones to move (may be negative)")
    parser.add_argument("--verbose", action="store_true", help="Log resolution details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = parse_key_field(args.key)
        target = transpose(source, args.semitones)
    except KeySignatureError as e:
        print(f"{RED}{e}{RESET}", file=sys.stderr)
        return 1

    header = "".join(f"{l:>3}" for l in LETTERS)
    print(f"\n   {'':<10}  {'Key':<8}  {header}   added")
    print(f"   {'─'*10}  {'─'*8}  {'─'*21}   {'─'*8}")
    print_key_row("source", source)
    print_key_row(f"{args.semitones:+d} st", target)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
