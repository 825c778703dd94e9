import re
import sys
import argparse
import logging

from .errors import InvalidArgumentError, KeySignatureError
from .fields import build_header_classifier
from .key_signature import KeySignature
from .notation import Accidental, Mode, TokenType, accidental_from_literal, mode_from_code

logger = logging.getLogger(__name__)

# ── K: field syntax ───────────────────────────────────────────────────────────

# Tonic letter, optional #/b, optional mode word (with or without a space)
_TONIC_RE = re.compile(r"^([A-Ga-g])([#b]?)\s*([A-Za-z]*)(?![\w=])")
# Explicit key accidental: ^f sharp, _b flat, =c natural
_EXPLICIT_RE = re.compile(r"^([\^_=])([A-Ga-g])$")
# key=value modifiers (clef=bass, middle=d, transpose=-2) are not key data
_MODIFIER_RE = re.compile(r"^[A-Za-z-]+=\S+$")

_ABC_PREFIX_TO_ACCIDENTAL = {
    "^": Accidental.SHARP,
    "_": Accidental.FLAT,
    "=": Accidental.NATURAL,
}

# Built once; classification never changes the graph.
_HEADER_CLASSIFIER = build_header_classifier()


def _mode_from_word(word: str) -> Mode:
    """
    Map the mode word of a K: field to a Mode.

    ABC only looks at the first three letters ("Mixolydian" → mix); a missing
    word means major and a lone "m" means minor.
    """
    if not word:
        return Mode.MAJOR
    mode = mode_from_code(word if len(word) < 3 else word[:3])
    if mode is None:
        raise InvalidArgumentError(f"Unknown mode {word!r}")
    return mode


def parse_key_field(value: str) -> KeySignature:
    """
    Parse the body of an ABC K: field into a KeySignature.

    Rules (applied in order):
      1. Tonic letter + optional # / b       Eb, F#, c
      2. Optional mode word                  Dm, D min, Ador, Emixolydian
      3. Explicit accidentals                ^c (C#), _b (Bb), =f (F natural)
      4. key=value modifiers are skipped     clef=bass, middle=d

    ``K:Dm ^c`` therefore holds both B flat and C sharp.
    """
    text = (value or "").strip()
    m = _TONIC_RE.match(text)
    if not m:
        raise InvalidArgumentError(f"Unparseable key field: {value!r}")
    letter, acc, word = m.groups()
    key = KeySignature(letter.upper(), accidental_from_literal(acc), _mode_from_word(word))

    for token in text[m.end():].split():
        explicit = _EXPLICIT_RE.match(token)
        if explicit:
            prefix, note = explicit.groups()
            key.set_accidental(note.upper(), _ABC_PREFIX_TO_ACCIDENTAL[prefix])
        elif _MODIFIER_RE.match(token):
            logger.debug("Skipping key modifier %r", token)
        else:
            raise InvalidArgumentError(f"Unexpected {token!r} in key field {value!r}")
    return key


def parse_header_line(line: str):
    """
    Classify an ABC header line and return (TokenType, value).

    K: lines come back with a parsed KeySignature, other recognised fields
    with the stripped text after the colon, anything else as (UNKNOWN, line).
    """
    token_type, consumed = _HEADER_CLASSIFIER.match(line)
    if token_type is TokenType.UNKNOWN:
        return token_type, line
    value = line[consumed:].strip()
    if token_type is TokenType.FIELD_KEY:
        return token_type, parse_key_field(value)
    return token_type, value


def main():
    parser = argparse.ArgumentParser(description='Parse ABC header lines from a file.')
    parser.add_argument('file', type=str, help='Path to the ABC file')
    args = parser.parse_args()

    with open(args.file, encoding="utf-8", errors="replace") as f:
        lines = [l.rstrip("\n") for l in f]
    for line in lines:
        try:
            token_type, value = parse_header_line(line)
        except KeySignatureError as e:
            print(f"Error in {line!r}: {e}", file=sys.stderr)
            continue
        if token_type is not TokenType.UNKNOWN:
            print(f"{token_type.name:<24} {value}")

if __name__ == "__main__":
    main()
