"""
Enumerations shared by the key-signature engine and the field classifier,
plus the small literal conversions used when reading ABC text.

Accidental values are chromatic alterations so that key-signature deltas can
be computed with plain integer arithmetic (SHARP - FLAT == 2).
"""
from enum import Enum, IntEnum

from .constants import _CODE_TO_MODE, _LETTER_TO_PC, _PC_TO_LETTER, LETTERS
from .errors import InvalidArgumentError


class Accidental(IntEnum):
    NATURAL = 0
    SHARP = 1
    FLAT = -1
    DOUBLE_SHARP = 2
    DOUBLE_FLAT = -2
    # Construction-only sentinel: "no accidental given", resolved as NATURAL.
    NONE = 10

    @property
    def is_sharp(self) -> bool:
        return self in (Accidental.SHARP, Accidental.DOUBLE_SHARP)

    @property
    def is_flat(self) -> bool:
        return self in (Accidental.FLAT, Accidental.DOUBLE_FLAT)


# Accidentals a key signature may hold on a single degree.
KEY_ACCIDENTALS = frozenset({
    Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT,
    Accidental.DOUBLE_SHARP, Accidental.DOUBLE_FLAT,
})
# Accidentals a caller may put on a degree through set_accidental().
SETTABLE_ACCIDENTALS = frozenset({Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT})
# Accidentals accepted on the tonic of a (note, accidental, mode) triple.
TONIC_ACCIDENTALS = SETTABLE_ACCIDENTALS | {Accidental.NONE}


class Mode(Enum):
    AEOLIAN = "AEOLIAN"
    DORIAN = "DORIAN"
    IONIAN = "IONIAN"
    LOCRIAN = "LOCRIAN"
    LYDIAN = "LYDIAN"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    MIXOLYDIAN = "MIXOLYDIAN"
    PHRYGIAN = "PHRYGIAN"
    OTHER = "OTHER"


class TokenType(Enum):
    """Tags carried by classifier states."""
    UNKNOWN = "UNKNOWN"
    FIELD_AREA = "A"
    FIELD_BOOK = "B"
    FIELD_COMPOSER = "C"
    FIELD_DISCOGRAPHY = "D"
    FIELD_FILE_URL = "F"
    FIELD_GROUP = "G"
    FIELD_HISTORY = "H"
    FIELD_INFORMATION = "I"
    FIELD_KEY = "K"
    FIELD_DEFAULT_LENGTH = "L"
    FIELD_METER = "M"
    FIELD_NOTES = "N"
    FIELD_ORIGIN = "O"
    FIELD_PARTS = "P"
    FIELD_TEMPO = "Q"
    FIELD_RHYTHM = "R"
    FIELD_SOURCE = "S"
    FIELD_TITLE = "T"
    FIELD_WORDS = "W"
    FIELD_REFERENCE_NUMBER = "X"
    FIELD_TRANSCRIPTION = "Z"


def letter_index(letter) -> int:
    """
    Return the diatonic index (C=0 .. B=6) of a note letter.

    Accepts a letter string ("C".."B", either case) or the lenient integer
    form: an int is reduced mod 12 and must then be the chromatic value of a
    natural note (C=0, D=2, E=4, F=5, G=7, A=9, B=11).
    """
    if isinstance(letter, str):
        up = letter.upper()
        if up in _LETTER_TO_PC:
            return LETTERS.index(up)
    elif isinstance(letter, int) and not isinstance(letter, bool):
        name = _PC_TO_LETTER.get(letter % 12)
        if name is not None:
            return LETTERS.index(name)
    raise InvalidArgumentError(f"Invalid note letter: {letter!r}")


def normalize_letter(letter) -> str:
    return LETTERS[letter_index(letter)]


def mode_from_code(code):
    """
    Map a mode code ("maj", "MIX", "m", ...) to a Mode.

    Returns None for anything unrecognised so callers can probe a string
    without catching exceptions.
    """
    if code is None:
        return None
    name = _CODE_TO_MODE.get(code.strip().upper())
    return Mode[name] if name else None


def accidental_from_literal(text) -> Accidental:
    """"#" → SHARP, "b" → FLAT, None or "" → NATURAL; anything else raises."""
    if text is None or text == "":
        return Accidental.NATURAL
    if text == "#":
        return Accidental.SHARP
    if text == "b":
        return Accidental.FLAT
    raise InvalidArgumentError(f"{text!r} is not a valid accidental")


def accidental_to_literal(accidental: Accidental) -> str:
    if accidental == Accidental.SHARP:
        return "#"
    if accidental == Accidental.FLAT:
        return "b"
    return ""
