#!/usr/bin/env python3
"""
scripts/key_table.py — print the resolved key signature of every tonic.

For each of the 21 tonic spellings (C..B × flat/natural/sharp) in one mode:

    [Tonic]  →  key index  →  stored spelling  →  C D E F G A B  (#/b count)

Tonics that were respelled (D# major → Eb major) are highlighted, and the
natural spellings that fall on key index 6 are listed as unrepresentable.

Usage:
    python scripts/key_table.py
    python scripts/key_table.py --mode dor
    python scripts/key_table.py --mode m
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from abckey.constants import LETTERS
from abckey.errors import UnrepresentableKeyError
from abckey.key_signature import KeySignature
from abckey.notation import Accidental, accidental_to_literal, mode_from_code

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
YELL  = "\033[93m"
RED   = "\033[91m"
DIM   = "\033[2m"
RESET = "\033[0m"

_SPELLINGS = (Accidental.FLAT, Accidental.NATURAL, Accidental.SHARP)
_SYMBOL = {0: "·", 1: "#", -1: "b", 2: "x", -2: "d"}


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print the key signature of every tonic spelling in a mode.")
    parser.add_argument("--mode", type=str, default="maj",
                        help="Mode code: maj min m dor phr lyd mix aeo loc ion (default: maj)")
    args = parser.parse_args()

    mode = mode_from_code(args.mode)
    if mode is None:
        print(f"Unknown mode code {args.mode!r}", file=sys.stderr)
        return 1

    print(f"\n{BOLD}── Key signatures, mode {mode.name} ──{RESET}")
    print(f"   {'Tonic':<6}  {'Index':>5}  {'Stored':<8}  {' '.join(LETTERS)}   count")
    print(f"   {'─'*6}  {'─'*5}  {'─'*8}  {'─'*13}   {'─'*5}")

    for letter in LETTERS:
        for acc in _SPELLINGS:
            tonic = letter + accidental_to_literal(acc)
            try:
                key = KeySignature(letter, acc, mode)
            except UnrepresentableKeyError as e:
                print(f"   {tonic:<6}  {e.key_index:>5}  {RED}unrepresentable{RESET}")
                continue
            stored = key.to_literal_notation()
            respelled = (key.note, key.accidental) != (letter, acc)
            stored_col = f"{YELL}{stored:<8}{RESET}" if respelled else f"{stored:<8}"
            pattern = " ".join(_SYMBOL[int(a)] for a in key.accidentals)
            sharps = sum(1 for a in key.accidentals if a.is_sharp)
            flats = sum(1 for a in key.accidentals if a.is_flat)
            count = f"{sharps}#" if sharps else f"{flats}b" if flats else "0"
            print(f"   {tonic:<6}  {key.key_index:>5}  {stored_col}  {CYAN}{pattern}{RESET}   {count}")

    print(f"\n   {DIM}yellow = tonic respelled to match its key signature{RESET}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
