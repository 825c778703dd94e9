import numpy as np

# ── Letter / pitch-class lookup tables ────────────────────────────────────────

LETTERS: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

_LETTER_TO_PC: dict[str, int] = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}
# Reverse: chromatic value of a natural note → letter (lenient int input)
_PC_TO_LETTER: dict[int, str] = {pc: letter for letter, pc in _LETTER_TO_PC.items()}

# Mode name → semitones from the mode's tonic up to its relative major tonic
_MODAL_OFFSET: dict[str, int] = {
    "AEOLIAN":    3,
    "DORIAN":     10,
    "IONIAN":     0,
    "LOCRIAN":    1,
    "LYDIAN":     7,
    "MAJOR":      0,
    "MINOR":      3,
    "MIXOLYDIAN": 5,
    "PHRYGIAN":   8,
    "OTHER":      0,
}

# Mode name → literal code written after the tonic (OTHER writes nothing)
_MODE_TO_CODE: dict[str, str] = {
    "AEOLIAN":    "aeo",
    "DORIAN":     "dor",
    "IONIAN":     "ion",
    "LOCRIAN":    "loc",
    "LYDIAN":     "lyd",
    "MAJOR":      "maj",
    "MINOR":      "min",
    "MIXOLYDIAN": "mix",
    "PHRYGIAN":   "phr",
    "OTHER":      "",
}
# Reverse, upper-cased for case-insensitive lookup; "M" is the short minor form
_CODE_TO_MODE: dict[str, str] = {
    code.upper(): name for name, code in _MODE_TO_CODE.items() if code
}
_CODE_TO_MODE["M"] = "MINOR"

# Accidental value → ABC prefix used inside a K: field (^f, _b, =c)
_ALTER_TO_ABC_PREFIX: dict[int, str] = {
    0: "=", 1: "^", -1: "_", 2: "^^", -2: "__",
}

# ── Accidental rule tables ────────────────────────────────────────────────────
#
# One row per key_index (pitch class of the relative major tonic), one column
# per letter C D E F G A B.  Values are chromatic alterations: 0 natural,
# 1 sharp, -1 flat.  Index 6 has no standard row: it is only defined through
# its Gb / F# spellings in the exception tables.

_N, _S, _F = 0, 1, -1


def _frozen(rows: dict[int, tuple[int, ...]]) -> np.ndarray:
    """Build a 12×7 int8 table, flagged read-only.  Missing rows stay at 0."""
    table = np.zeros((12, 7), dtype=np.int8)
    for idx, row in rows.items():
        table[idx] = row
    table.flags.writeable = False
    return table


#                 C   D   E   F   G   A   B
STANDARD_RULES = _frozen({
    0:  (_N, _N, _N, _N, _N, _N, _N),   # C
    1:  (_N, _F, _F, _N, _F, _F, _F),   # Db
    2:  (_S, _N, _N, _S, _N, _N, _N),   # D
    3:  (_N, _N, _F, _N, _N, _F, _F),   # Eb
    4:  (_S, _S, _N, _S, _S, _N, _N),   # E
    5:  (_N, _N, _N, _N, _N, _N, _F),   # F
    7:  (_N, _N, _N, _S, _N, _N, _N),   # G
    8:  (_N, _F, _F, _N, _N, _F, _F),   # Ab
    9:  (_S, _N, _N, _S, _S, _N, _N),   # A
    10: (_N, _N, _F, _N, _N, _N, _F),   # Bb
    11: (_S, _S, _N, _S, _S, _S, _N),   # B
})
STANDARD_ROWS: frozenset[int] = frozenset(range(12)) - {6}

FLAT_EXCEPTION_RULES = _frozen({
    6:  (_F, _F, _F, _N, _F, _F, _F),   # Gb, the C is flat
    11: (_F, _F, _F, _F, _F, _F, _F),   # Cb
})
FLAT_EXCEPTION_ROWS: frozenset[int] = frozenset({6, 11})

SHARP_EXCEPTION_RULES = _frozen({
    1:  (_S, _S, _S, _S, _S, _S, _S),   # C#
    6:  (_S, _S, _S, _S, _S, _S, _N),   # F#, the E is sharp
})
SHARP_EXCEPTION_ROWS: frozenset[int] = frozenset({1, 6})

# key_index of the augmented-fourth position that has no natural spelling
GAP_KEY_INDEX = 6

# ── Dominance sets (circle of fifths) ─────────────────────────────────────────
# Plain key indices are sharp/flat-sided whatever the tonic spelling; the
# (key_index, alteration) pairs are disambiguated by the tonic accidental.
_SHARP_SIDE_INDICES: frozenset[int] = frozenset({2, 4, 7, 9})
_SHARP_SIDE_SPELLED: frozenset[tuple[int, int]] = frozenset({(1, _S), (6, _S), (11, _N)})
_FLAT_SIDE_INDICES: frozenset[int] = frozenset({3, 5, 8, 10})
_FLAT_SIDE_SPELLED: frozenset[tuple[int, int]] = frozenset({(1, _F), (6, _F), (11, _F)})
