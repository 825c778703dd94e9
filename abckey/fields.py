"""
ABC header-field recognizers.

Each header field is its identifying letter followed by a colon ("K:",
"T:", ...).  Every recognizer hangs its own two-edge graph off the shared
start state of an Automaton:

    start ──'K'──▶ (UNKNOWN) ──is-colon──▶ (FIELD_KEY, accepting)
"""
from .automaton import Automaton, Predicate, State
from .notation import TokenType

# Field letter → token type, in the order the ABC standard lists them
HEADER_FIELDS: dict[str, TokenType] = {
    "A": TokenType.FIELD_AREA,
    "B": TokenType.FIELD_BOOK,
    "C": TokenType.FIELD_COMPOSER,
    "D": TokenType.FIELD_DISCOGRAPHY,
    "F": TokenType.FIELD_FILE_URL,
    "G": TokenType.FIELD_GROUP,
    "H": TokenType.FIELD_HISTORY,
    "I": TokenType.FIELD_INFORMATION,
    "K": TokenType.FIELD_KEY,
    "L": TokenType.FIELD_DEFAULT_LENGTH,
    "M": TokenType.FIELD_METER,
    "N": TokenType.FIELD_NOTES,
    "O": TokenType.FIELD_ORIGIN,
    "P": TokenType.FIELD_PARTS,
    "Q": TokenType.FIELD_TEMPO,
    "R": TokenType.FIELD_RHYTHM,
    "S": TokenType.FIELD_SOURCE,
    "T": TokenType.FIELD_TITLE,
    "W": TokenType.FIELD_WORDS,
    "X": TokenType.FIELD_REFERENCE_NUMBER,
    "Z": TokenType.FIELD_TRANSCRIPTION,
}


def field_definition(letter: str, token_type: TokenType):
    """Builder for the generic <letter>: recognizer."""
    def build(start: State) -> None:
        letter_seen = start.on_char(letter, State(TokenType.UNKNOWN, False))
        letter_seen.on(Predicate.COLON, State(token_type, True))
    build.__name__ = f"field_{token_type.name.lower()}"
    return build


def build_header_classifier() -> Automaton:
    automaton = Automaton()
    for letter, token_type in HEADER_FIELDS.items():
        automaton.add_definition(field_definition(letter, token_type))
    return automaton
