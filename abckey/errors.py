"""Exceptions raised by the key-signature engine."""


class KeySignatureError(ValueError):
    """Base class for every error raised by abckey."""


class InvalidArgumentError(KeySignatureError):
    """A letter, degree, accidental, mode or literal outside its allowed values."""


class UnrepresentableKeyError(KeySignatureError):
    """
    The tonic/mode lands on key_index 6 with a natural tonic.

    That chromatic position only has key signatures through its F# or Gb
    spelling, so there is no pattern to give the natural spelling.
    """

    def __init__(self, note, mode, key_index):
        self.note = note
        self.mode = mode
        self.key_index = key_index
        super().__init__(
            f"Cannot map {note}/natural/{getattr(mode, 'name', mode)} to a key signature "
            f"(key index {key_index} has no natural spelling)"
        )
