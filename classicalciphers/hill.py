"""
Hill cipher with a 3x3 key matrix (mod 26).

Encryption multiplies each 3-letter block (as a column vector) by the forward
key matrix; decryption uses the same routine with the inverse matrix.
All arithmetic stays in integers.
"""
from typing import List

import numpy as np

from .arithmetic import ALPHABET, M, letter_to_num, mod, mod_inverse, num_to_letter
from .errors import InvalidKeyError

BLOCK = 3
FILLER = 'x'


def build_key_matrix(key: str) -> np.ndarray:
    """
    Key letters left to right (already placed letters skipped) until the 9
    cells are full, then the unused letters of a..z in order.
    Returns the matrix as integers 0..25.
    """
    placed = []
    for ch in key:
        letter_to_num(ch)
        if ch not in placed:
            placed.append(ch)
        if len(placed) == BLOCK * BLOCK:
            break
    for ch in ALPHABET:
        if len(placed) == BLOCK * BLOCK:
            break
        if ch not in placed:
            placed.append(ch)
    nums = [letter_to_num(ch) for ch in placed]
    return np.array(nums, dtype=np.int64).reshape(BLOCK, BLOCK)


def determinant(matrix: np.ndarray) -> int:
    """
    Cofactor expansion along the first row:
        det = a*(e*i - f*h) - b*(d*i - f*g) + c*(d*h - e*g)
    Not reduced mod 26.
    """
    (a, b, c), (d, e, f), (g, h, i) = matrix.tolist()
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def cofactor_matrix(matrix: np.ndarray) -> List[List[int]]:
    m = matrix.tolist()
    n = len(m)
    cof = [[0] * n for _ in range(n)]
    for r in range(n):
        for c in range(n):
            minor = [row[:c] + row[c + 1:] for k, row in enumerate(m) if k != r]
            sign = -1 if (r + c) % 2 else 1
            cof[r][c] = sign * (minor[0][0] * minor[1][1] - minor[0][1] * minor[1][0])
    return cof


def inverse_key_matrix(matrix: np.ndarray) -> np.ndarray:
    """
    Inverse modulo 26: transpose of the cofactor matrix times the modular
    inverse of the determinant. Raises InvalidKeyError when the determinant
    shares a factor with 26.
    """
    det = mod(determinant(matrix), M)
    inv_det = mod_inverse(det, M)
    if inv_det is None:
        raise InvalidKeyError(
            f"Hill key matrix is not invertible modulo {M} (determinant mod {M} = {det})"
        )
    adjugate = np.array(cofactor_matrix(matrix), dtype=np.int64).T
    return (adjugate * inv_det) % M


def matrix_letters(matrix: np.ndarray) -> List[List[str]]:
    return [[num_to_letter(int(v)) for v in row] for row in matrix]


def print_key_matrix(matrix: np.ndarray, indent: str = "\t"):
    for row in matrix_letters(matrix):
        print(indent + "  ".join(row))


def hill_padded_length(length: int) -> int:
    # n + (n mod 3) characters are walked block by block; the last block is
    # completed with FILLER, so the result is rounded up to a whole block.
    nominal = length + length % BLOCK
    return -(-nominal // BLOCK) * BLOCK


def _apply(message: str, matrix: np.ndarray, verbose: bool) -> str:
    nums = [letter_to_num(ch) for ch in message]
    total = hill_padded_length(len(nums))
    nums.extend([letter_to_num(FILLER)] * (total - len(nums)))

    if verbose:
        print("[HILL] Key Matrix:")
        print_key_matrix(matrix)
        print(f"[HILL] Original Message: `{message}`")
        print(f"[HILL] Padded length: {total}")

    out = []
    for i in range(0, total, BLOCK):
        block = np.array(nums[i:i + BLOCK], dtype=np.int64)
        result = matrix.dot(block) % M
        out.extend(num_to_letter(int(v)) for v in result)
        if verbose:
            src = ''.join(num_to_letter(v) for v in nums[i:i + BLOCK])
            dst = ''.join(out[-BLOCK:])
            print(f"[HILL] Iteration {i // BLOCK + 1}: K x `{src}` = `{dst}`  {block.tolist()} -> {result.tolist()}")
            print(f"       Current Result: `{''.join(out)}`")
    return ''.join(out)


def hill_encrypt(plaintext: str, key: str, verbose: bool = False) -> str:
    return _apply(plaintext, build_key_matrix(key), verbose)


def hill_decrypt(ciphertext: str, key: str, verbose: bool = False) -> str:
    inverse = inverse_key_matrix(build_key_matrix(key))
    return _apply(ciphertext, inverse, verbose)
