"""
Playfair cipher on a 5x5 key matrix (I/J share one cell).

Rules, checked in this order for every digraph (a, b):
  1. same column -> take the letter below (decrypt: above), wrapping around
  2. same row    -> take the letter to the right (decrypt: left), wrapping around
  3. rectangle   -> keep the row, take the other letter's column (self-inverse)

Odd-length input gets one PAD_CHAR appended; the engine never strips it.
"""
from typing import Dict, List, Tuple

from .arithmetic import ALPHABET
from .errors import InvalidCharacterError

EDGE = 5
IGNORE_CHAR = 'j'
REPLACE_CHAR = 'i'
PAD_CHAR = 'z'

KeyMatrix = List[List[str]]


def _merge(ch: str) -> str:
    if ch not in ALPHABET:
        raise InvalidCharacterError(f"Playfair accepts lowercase letters only, got {ch!r}")
    return REPLACE_CHAR if ch == IGNORE_CHAR else ch


def build_key_matrix(key: str) -> KeyMatrix:
    """
    Key letters first (left to right, duplicates skipped, j -> i), then the
    rest of the alphabet in order. Always 25 distinct letters.
    """
    placed = []
    for ch in key:
        ch = _merge(ch)
        if ch not in placed:
            placed.append(ch)
    for ch in ALPHABET:
        if ch == IGNORE_CHAR or ch in placed:
            continue
        placed.append(ch)
    return [placed[r * EDGE:(r + 1) * EDGE] for r in range(EDGE)]


def positions(matrix: KeyMatrix) -> Dict[str, Tuple[int, int]]:
    pos = {matrix[r][c]: (r, c) for r in range(EDGE) for c in range(EDGE)}
    # the merged letter sits where its replacement sits
    pos[IGNORE_CHAR] = pos[REPLACE_CHAR]
    return pos


def prepare_message(message: str) -> str:
    text = ''.join(_merge(ch) for ch in message)
    if len(text) % 2 != 0:
        text += PAD_CHAR
    return text


def print_matrix(matrix: KeyMatrix, indent: str = "\t"):
    for row in matrix:
        print(indent + "  ".join(row))


def _substitute(a: str, b: str, matrix: KeyMatrix, pos: Dict[str, Tuple[int, int]], step: int) -> Tuple[str, str, int]:
    """Apply one digraph rule. step is +1 to encrypt, -1 to decrypt."""
    r1, c1 = pos[a]
    r2, c2 = pos[b]
    if c1 == c2:
        return matrix[(r1 + step) % EDGE][c1], matrix[(r2 + step) % EDGE][c2], 1
    if r1 == r2:
        return matrix[r1][(c1 + step) % EDGE], matrix[r2][(c2 + step) % EDGE], 2
    return matrix[r1][c2], matrix[r2][c1], 3


def _playfair(message: str, key: str, step: int, verbose: bool) -> str:
    matrix = build_key_matrix(key)
    pos = positions(matrix)
    text = prepare_message(message)

    if verbose:
        print("[PLAYFAIR] Key Matrix:")
        print_matrix(matrix)
        print(f"[PLAYFAIR] Original Message: `{text}`")

    out = []
    for i in range(0, len(text), 2):
        a, b = text[i], text[i + 1]
        x, y, rule = _substitute(a, b, matrix, pos, step)
        out.append(x)
        out.append(y)
        if verbose:
            print(f"[PLAYFAIR] PASS {i // 2 + 1}: \"{a}{b}\" -> \"{x}{y}\" (Rule-{rule:02d})")
            print(f"           Resultant String: `{''.join(out) + text[i + 2:]}`")
    return ''.join(out)


def playfair_encrypt(plaintext: str, key: str, verbose: bool = False) -> str:
    return _playfair(plaintext, key, 1, verbose)


def playfair_decrypt(ciphertext: str, key: str, verbose: bool = False) -> str:
    return _playfair(ciphertext, key, -1, verbose)
