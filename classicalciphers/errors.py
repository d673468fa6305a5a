class CipherError(ValueError):
    """Base class for every error raised by the cipher engines."""


class InvalidKeyError(CipherError):
    """
    The key cannot be used with the selected cipher: a Rail Fence key that is
    not a positive integer, or a Hill key matrix whose determinant has no
    inverse modulo 26.
    """


class InvalidCharacterError(CipherError):
    """A character outside a..z (or an integer outside 0..25) reached the alphabet lookup."""


class PreconditionError(CipherError):
    """An engine was called without the checks it depends on (e.g. an unvalidated rail key)."""
