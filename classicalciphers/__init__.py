"""Playfair, Hill and Rail Fence ciphers (classical, not for real secrecy)."""
from .errors import CipherError, InvalidCharacterError, InvalidKeyError, PreconditionError
from .hill import hill_decrypt, hill_encrypt
from .playfair import playfair_decrypt, playfair_encrypt
from .railfence import RailKey, is_valid_rail_key, rail_decode, rail_encode, validate_rail_key

__all__ = [
    "CipherError", "InvalidCharacterError", "InvalidKeyError", "PreconditionError",
    "playfair_encrypt", "playfair_decrypt",
    "hill_encrypt", "hill_decrypt",
    "RailKey", "is_valid_rail_key", "validate_rail_key", "rail_encode", "rail_decode",
]
