"""
Tonic spelling helpers backed by music21.

- ``respell``          – enharmonic equivalent of a tonic (D# → Eb, Fb → E).
- ``normalize_tonic``  – spelling a freshly resolved key should carry so the
                         tonic agrees with the sharp/flat side of its pattern.
- ``gap_respelling``   – single-accidental spelling of a natural tonic that
                         landed on the key_index 6 gap (B → Cb, F → E#).
- ``transpose_note``   – semitone transposition of a tonic letter+accidental.
"""
import logging

import music21.pitch

from .constants import LETTERS
from .errors import InvalidArgumentError
from .notation import Accidental

logger = logging.getLogger(__name__)

# Accidental → music21 pitch-name suffix
_M21_SUFFIX = {
    Accidental.NATURAL: "",
    Accidental.NONE: "",
    Accidental.SHARP: "#",
    Accidental.FLAT: "-",
    Accidental.DOUBLE_SHARP: "##",
    Accidental.DOUBLE_FLAT: "--",
}


def _to_pitch(letter: str, accidental: Accidental) -> music21.pitch.Pitch:
    return music21.pitch.Pitch(letter + _M21_SUFFIX[Accidental(accidental)])


def _from_pitch(pitch: music21.pitch.Pitch) -> tuple[str, Accidental]:
    return pitch.step, Accidental(int(pitch.alter))


def _is_single(pitch: music21.pitch.Pitch) -> bool:
    return abs(int(pitch.alter)) <= 1


def respell(letter: str, accidental: Accidental):
    """
    Return the enharmonic (letter, accidental) of a tonic, or None when the
    only equivalent needs a double accidental.
    """
    enh = _to_pitch(letter, accidental).getEnharmonic()
    if not _is_single(enh):
        return None
    return _from_pitch(enh)


def normalize_tonic(key) -> tuple[str, Accidental]:
    """
    Spelling the tonic of ``key`` should carry once its pattern is known.

    A sharp tonic whose pattern only holds flats moves to the flat side
    (D# major → Eb major); a flat tonic whose pattern only holds sharps moves
    to the sharp side (Fb major → E major).  Anything else is unchanged.
    """
    current = (key.note, key.accidental)
    lopsided = (
        (key.accidental == Accidental.SHARP and key.has_only_flats())
        or (key.accidental == Accidental.FLAT and key.has_only_sharps())
    )
    if not lopsided:
        return current
    spelled = respell(*current)
    if spelled is None:
        return current
    logger.debug("Respelled tonic %s%s as %s%s", current[0],
                 _M21_SUFFIX[current[1]], spelled[0], _M21_SUFFIX[spelled[1]])
    return spelled


def gap_respelling(letter: str, accidental: Accidental):
    """
    Single-accidental enharmonic of a natural tonic (B → Cb, F → E#), or
    None when every equivalent spelling needs a double accidental (D, G, A).
    """
    pitch = _to_pitch(letter, accidental)
    for candidate in (pitch.getLowerEnharmonic(), pitch.getHigherEnharmonic()):
        if int(candidate.alter) != 0 and _is_single(candidate):
            return _from_pitch(candidate)
    return None


def transpose_note(letter: str, accidental: Accidental, semitones: int) -> tuple[str, Accidental]:
    """
    Transpose a tonic by ``semitones`` and return its new (letter, accidental).

    The result never carries a double accidental, and it keeps the
    accidental direction of the source: a flat tonic never comes back sharp
    and a sharp one never comes back flat.
    """
    if letter not in LETTERS:
        raise InvalidArgumentError(f"Invalid note letter: {letter!r}")
    moved = _to_pitch(letter, accidental).transpose(semitones)
    if not _is_single(moved):
        moved = moved.getEnharmonic()
    alter = int(moved.alter)
    if (accidental == Accidental.FLAT and alter > 0) or (accidental == Accidental.SHARP and alter < 0):
        moved = moved.getEnharmonic()
    return _from_pitch(moved)
