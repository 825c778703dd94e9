"""
Transpose a key signature while keeping the accidentals the user added.

"K:D ^g" up a tone is "K:E ^a": the G# was one semitone above D major's G,
so the 4th degree of E major gets the same extra semitone.

Steps:
  1. build a reference key from the same tonic/mode with no added accidentals
  2. delta[degree] = key accidental − reference accidental, for degrees 1-7
  3. transpose the tonic note and resolve a fresh key in the same mode
  4. add every nonzero delta back onto the same degree of the new key
"""
import logging

import numpy as np

from .enharmonic import gap_respelling, respell, transpose_note
from .errors import InvalidArgumentError, UnrepresentableKeyError
from .key_signature import KeySignature
from .notation import accidental_to_literal

logger = logging.getLogger(__name__)

DEGREES = range(1, 8)


def added_accidentals(key: KeySignature) -> np.ndarray:
    """
    Per-degree chromatic alterations of ``key`` beyond its diatonic default
    (index 0 is degree I).  All zeros for a key built from tonic + mode alone.
    """
    reference = KeySignature(key.note, key.accidental, key.mode)
    actual = np.array([key.accidental_for(key.degree(d)) for d in DEGREES], dtype=np.int8)
    default = np.array([reference.accidental_for(reference.degree(d)) for d in DEGREES], dtype=np.int8)
    return actual - default


def _resolve(note, accidental, mode) -> KeySignature:
    """Resolve a key, respelling a natural tonic that lands on the key index 6 gap."""
    try:
        return KeySignature(note, accidental, mode)
    except UnrepresentableKeyError:
        spelled = gap_respelling(note, accidental)
        if spelled is None:
            raise
        logger.debug("%s %s has no natural key signature, using %s%s",
                     note, mode.name, spelled[0], "#" if spelled[1] > 0 else "b")
        return KeySignature(spelled[0], spelled[1], mode)


def _reapply(key: KeySignature, deltas: np.ndarray) -> None:
    for i in np.flatnonzero(deltas):
        key._alter_degree(key.degree(int(i) + 1), int(deltas[i]))


def transpose(key: KeySignature, semitones: int) -> KeySignature:
    """
    Return ``key`` moved by ``semitones`` (any sign), keeping added accidentals.

    A multiple of 12 returns an independent copy of ``key``.
    """
    if semitones % 12 == 0:
        return key.copy()

    deltas = added_accidentals(key)
    note, accidental = transpose_note(key.note, key.accidental, semitones)
    result = _resolve(note, accidental, key.mode)
    try:
        _reapply(result, deltas)
    except InvalidArgumentError:
        # the enharmonic tonic may hold the alteration within a double accidental
        spelled = respell(note, accidental)
        if spelled is None:
            raise
        logger.debug("Added accidentals do not fit %s%s, trying %s%s",
                     note, accidental_to_literal(accidental),
                     spelled[0], accidental_to_literal(spelled[1]))
        result = _resolve(spelled[0], spelled[1], key.mode)
        _reapply(result, deltas)

    logger.debug("Transposed %s by %+d: %s", key.to_literal_notation(), semitones,
                 result.to_literal_notation())
    return result
