"""
Key signatures defined by a tonic, an accidental on that tonic and a mode.

                          1   2   3   4   5   6   7
Major (Ionian, mode 1)    D   E   F#  G   A   B   C#
Dorian (mode 2)               E   F#  G   A   B   C#  D
Mixolydian (mode 5)                       A   B   C#  D   E   F#  G
Aeolian (mode 6)                              B   C#  D   E   F#  G   A

In "Ab aeolian", A is the note, b (flat) the key accidental and aeolian the
mode.  Every mode is reduced to the pitch class of its relative major
(key_index), which selects a 7-entry accidental pattern for C..B.

Resolution rules (applied in order):
  1. key_index = letter offset + tonic alteration + modal offset, mod 12
  2. key_index 6 / 11 / 1 look up the flat or sharp exception table
     depending on the tonic accidental (Gb vs F#, Cb vs B, C# vs Db)
  3. key_index 6 with a natural tonic is unrepresentable
  4. everything else reads the standard table
  5. the tonic is respelled when its accidental disagrees with the pattern
"""
import logging
import re

import numpy as np

from .constants import (
    FLAT_EXCEPTION_ROWS,
    FLAT_EXCEPTION_RULES,
    GAP_KEY_INDEX,
    LETTERS,
    SHARP_EXCEPTION_ROWS,
    SHARP_EXCEPTION_RULES,
    STANDARD_RULES,
    _ALTER_TO_ABC_PREFIX,
    _FLAT_SIDE_INDICES,
    _FLAT_SIDE_SPELLED,
    _LETTER_TO_PC,
    _MODAL_OFFSET,
    _MODE_TO_CODE,
    _SHARP_SIDE_INDICES,
    _SHARP_SIDE_SPELLED,
)
from .enharmonic import normalize_tonic
from .errors import InvalidArgumentError, UnrepresentableKeyError
from .notation import (
    KEY_ACCIDENTALS,
    SETTABLE_ACCIDENTALS,
    TONIC_ACCIDENTALS,
    Accidental,
    Mode,
    accidental_from_literal,
    accidental_to_literal,
    letter_index,
    mode_from_code,
    normalize_letter,
)

logger = logging.getLogger(__name__)

# <Letter>[#|b]<mode code>, e.g. "Ebmix", "F#m", "C"
_LITERAL_RE = re.compile(r"^([A-Ga-g])([#b]?)([A-Za-z]*)$")


def compute_key_index(note: str, accidental: Accidental, mode: Mode) -> int:
    """Pitch class (0-11) of the relative major tonic of note+accidental in mode."""
    index = _LETTER_TO_PC[normalize_letter(note)]
    if accidental == Accidental.SHARP:
        index += 1
    elif accidental == Accidental.FLAT:
        index -= 1
    index += _MODAL_OFFSET[mode.name]
    return index % 12


def rule_for(key_index: int, accidental: Accidental):
    """
    Return a writable copy of the accidental pattern for key_index, or None
    for key_index 6 with a natural tonic, which has no pattern.
    """
    if accidental == Accidental.FLAT and key_index in FLAT_EXCEPTION_ROWS:
        return FLAT_EXCEPTION_RULES[key_index].copy()
    if accidental == Accidental.SHARP and key_index in SHARP_EXCEPTION_ROWS:
        return SHARP_EXCEPTION_RULES[key_index].copy()
    if key_index == GAP_KEY_INDEX:
        return None
    return STANDARD_RULES[key_index].copy()


class KeySignature:
    """
    Accidentals for each of the seven note letters implied by tonic + mode.

    Construct with ``KeySignature("D", Mode.MAJOR)``,
    ``KeySignature("E", Accidental.FLAT, Mode.MIXOLYDIAN)`` or
    ``KeySignature.from_accidentals([...7 accidentals...])``.
    """

    def __init__(self, note="C", accidental=Accidental.NONE, mode=None):
        # KeySignature(note, mode) form
        if isinstance(accidental, Mode) and mode is None:
            accidental, mode = Accidental.NONE, accidental
        if mode is None:
            mode = Mode.OTHER
        if not isinstance(mode, Mode):
            raise InvalidArgumentError(
                "Mode must be one of AEOLIAN, DORIAN, IONIAN, LOCRIAN, LYDIAN, "
                f"MAJOR, MINOR, MIXOLYDIAN, PHRYGIAN or OTHER, got {mode!r}")
        if accidental not in TONIC_ACCIDENTALS:
            raise InvalidArgumentError(
                f"Key accidental must be FLAT, NATURAL, SHARP or NONE, got {accidental!r}")

        self._note = normalize_letter(note)
        self._accidental = (Accidental.NATURAL if accidental == Accidental.NONE
                            else Accidental(accidental))
        self._mode = mode
        self._key_index = compute_key_index(self._note, self._accidental, mode)
        pattern = rule_for(self._key_index, self._accidental)
        if pattern is None:
            raise UnrepresentableKeyError(self._note, mode, self._key_index)
        self._accidentals = pattern
        logger.debug("%s%s %s resolved to key index %d", self._note,
                     accidental_to_literal(self._accidental), mode.name, self._key_index)

        # D# major is Eb major: keep the tonic on the same side as its pattern
        self._note, self._accidental = normalize_tonic(self)

    @classmethod
    def from_accidentals(cls, accidentals) -> "KeySignature":
        """
        Key signature holding exactly the given accidentals for C..B.

        The tonic is C natural with mode OTHER, as no tonic can be inferred.
        """
        values = list(accidentals)
        if len(values) != 7:
            raise InvalidArgumentError(
                f"A key signature needs 7 accidentals (C to B), got {len(values)}")
        for v in values:
            if v not in KEY_ACCIDENTALS:
                raise InvalidArgumentError(f"Invalid key accidental: {v!r}")
        key = cls("C", Accidental.NATURAL, Mode.OTHER)
        key._accidentals = np.array([int(v) for v in values], dtype=np.int8)
        return key

    @classmethod
    def from_literal(cls, text: str) -> "KeySignature":
        """Parse ``<Letter>[#|b]<mode code>`` as written by to_literal_notation()."""
        m = _LITERAL_RE.match(text.strip()) if text else None
        if not m:
            raise InvalidArgumentError(f"Unparseable key literal: {text!r}")
        letter, acc, code = m.groups()
        if code:
            mode = mode_from_code(code)
            if mode is None:
                raise InvalidArgumentError(f"Unknown mode code {code!r} in {text!r}")
        else:
            mode = Mode.OTHER
        return cls(letter.upper(), accidental_from_literal(acc), mode)

    # ── Accessors ─────────────────────────────────────────────────────────────

    @property
    def note(self) -> str:
        return self._note

    @property
    def accidental(self) -> Accidental:
        return self._accidental

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def key_index(self) -> int:
        return self._key_index

    @property
    def accidentals(self) -> list[Accidental]:
        """Accidentals for C, D, E, F, G, A, B (a new list on every call)."""
        return [Accidental(int(v)) for v in self._accidentals]

    def get_accidentals(self) -> list[Accidental]:
        return self.accidentals

    def accidental_for(self, letter) -> Accidental:
        return Accidental(int(self._accidentals[letter_index(letter)]))

    def set_accidental(self, letter, accidental) -> None:
        """Change the accidental of one letter in this key only."""
        index = letter_index(letter)
        if accidental not in SETTABLE_ACCIDENTALS:
            raise InvalidArgumentError(
                f"Accidental must be SHARP, FLAT or NATURAL, got {accidental!r}")
        self._accidentals[index] = int(accidental)

    def _alter_degree(self, letter, alteration: int) -> None:
        # Transposition may push a degree to a double sharp/flat, which
        # set_accidental() does not accept from callers.
        index = letter_index(letter)
        value = int(self._accidentals[index]) + alteration
        if value not in KEY_ACCIDENTALS:
            raise InvalidArgumentError(
                f"Altering {LETTERS[index]} by {alteration:+d} gives an alteration "
                f"of {value:+d}, beyond a double accidental")
        self._accidentals[index] = value

    def degree(self, n: int) -> str:
        """Letter of degree n (1-7) of the mode; degree(1) is the tonic letter."""
        if not isinstance(n, int) or isinstance(n, bool) or n < 1 or n > 7:
            raise InvalidArgumentError(f"Degree must be between 1 and 7 (included), got {n!r}")
        return LETTERS[(LETTERS.index(self._note) + n - 1) % 7]

    # ── Sharp / flat classification ───────────────────────────────────────────

    def has_sharps_and_flats(self) -> bool:
        """
        True if the key holds sharps *and* flats, e.g. the nawa athar scale
        ``K:Cm ^f =b`` (C D Eb F# G Ab B).
        """
        acc = self._accidentals
        return bool((acc > 0).any() and (acc < 0).any())

    def is_sharp_dominant(self) -> bool:
        """True when tonic and mode alone put the key on the sharp side (E, E =f, G _a)."""
        return (self._key_index in _SHARP_SIDE_INDICES
                or (self._key_index, int(self._accidental)) in _SHARP_SIDE_SPELLED)

    def is_flat_dominant(self) -> bool:
        """True when tonic and mode alone put the key on the flat side (Dm, Dm ^c)."""
        return (self._key_index in _FLAT_SIDE_INDICES
                or (self._key_index, int(self._accidental)) in _FLAT_SIDE_SPELLED)

    def has_only_sharps(self) -> bool:
        return self.is_sharp_dominant() and not self.has_sharps_and_flats()

    def has_only_flats(self) -> bool:
        return self.is_flat_dominant() and not self.has_sharps_and_flats()

    # ── Notation ──────────────────────────────────────────────────────────────

    def to_literal_notation(self) -> str:
        return self._note + accidental_to_literal(self._accidental) + _MODE_TO_CODE[self._mode.name]

    def _describe_accidentals(self) -> str:
        return ", ".join(
            _ALTER_TO_ABC_PREFIX[int(v)] + letter
            for letter, v in zip(LETTERS, self._accidentals)
        )

    def __repr__(self) -> str:
        return f"KeySignature: {self.to_literal_notation()} ({self._describe_accidentals()})"

    __str__ = __repr__

    # ── Value semantics ───────────────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, KeySignature):
            return NotImplemented
        return (self._note == other._note
                and self._key_index == other._key_index
                and self._accidental == other._accidental
                and self._mode == other._mode
                and np.array_equal(self._accidentals, other._accidentals))

    __hash__ = None

    def copy(self) -> "KeySignature":
        return self.__copy__()

    def __copy__(self) -> "KeySignature":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._accidentals = self._accidentals.copy()
        return clone

    def __deepcopy__(self, memo) -> "KeySignature":
        return self.__copy__()

    def transpose(self, semitones: int) -> "KeySignature":
        from .transpose import transpose
        return transpose(self, semitones)
