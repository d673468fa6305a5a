import string
from typing import Optional

from .errors import InvalidCharacterError

ALPHABET = string.ascii_lowercase
M = len(ALPHABET)

# a -> 0, b -> 1, ..., z -> 25 and back
letter_to_num_map = {ch: i for i, ch in enumerate(ALPHABET)}
num_to_letter_map = {i: ch for i, ch in enumerate(ALPHABET)}


def mod(a: int, b: int) -> int:
    """
    Canonical representative of a in [0, b), also for negative a.
    e.g. mod(-27, 26) -> 25
    """
    r = a % b
    return r + b if r < 0 else r


def mod_inverse(a: int, m: int = M) -> Optional[int]:
    """
    Returns the smallest positive x with (a * x) mod m == 1, or None when
    a shares a factor with m.
    """
    a = mod(a, m)
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def letter_to_num(ch: str) -> int:
    try:
        return letter_to_num_map[ch]
    except KeyError:
        raise InvalidCharacterError(f"Cannot map character {ch!r}: expected a lowercase letter a-z") from None


def num_to_letter(n: int) -> str:
    try:
        return num_to_letter_map[n]
    except KeyError:
        raise InvalidCharacterError(f"Cannot map integer {n!r}: expected a value in 0..{M - 1}") from None
