"""
Rail Fence transposition.

The key must be a positive integer and must go through validate_rail_key()
first; rail_encode/rail_decode only accept the RailKey it returns.

The message is padded with FILLER until the zigzag ends on the bottom rail,
so the same path can be replayed to decode.
"""
import re
from typing import Iterator, List, Optional

from .errors import InvalidKeyError, PreconditionError

FILLER = 'X'
BLANK = ' '

_KEY_PATTERN = re.compile(r"[1-9][0-9]*")


class RailKey:
    """A rail count that passed validate_rail_key()."""

    __slots__ = ("rows",)

    def __init__(self, rows: int):
        self.rows = rows

    def __eq__(self, other):
        return isinstance(other, RailKey) and other.rows == self.rows

    def __hash__(self):
        return hash(self.rows)

    def __repr__(self):
        return f"RailKey({self.rows})"


def is_valid_rail_key(key: str) -> bool:
    return isinstance(key, str) and _KEY_PATTERN.fullmatch(key) is not None


def validate_rail_key(key: str) -> RailKey:
    if not is_valid_rail_key(key):
        raise InvalidKeyError(f"The key `{key}` cannot be used with Rail Fence cipher: expected a positive integer")
    return RailKey(int(key))


def _require(key) -> int:
    if not isinstance(key, RailKey):
        raise PreconditionError("Rail Fence key must be validated with validate_rail_key() before use")
    rows = key.rows
    if isinstance(rows, bool) or not isinstance(rows, int) or rows < 1:
        raise PreconditionError(f"Rail Fence needs at least one rail, got {rows!r}")
    return rows


def zigzag(rows: int) -> Iterator[int]:
    """Endless sequence of rail indices: 0, 1, ..., rows-1, rows-2, ..., 0, 1, ..."""
    if rows < 1:
        raise PreconditionError(f"Rail Fence needs at least one rail, got {rows!r}")
    if rows == 1:
        while True:
            yield 0
    row = 0
    down = False
    while True:
        if row == 0 or row == rows - 1:
            down = not down
        yield row
        row += 1 if down else -1


def padded_length(length: int, rows: int) -> int:
    """Smallest count > length whose last step lands on the bottom rail."""
    count = 0
    for row in zigzag(rows):
        count += 1
        if count > length and row == rows - 1:
            return count


def rail_path(total: int, rows: int) -> List[int]:
    path = zigzag(rows)
    return [next(path) for _ in range(total)]


def print_grid(grid: List[List[Optional[str]]], indent: str = "\t"):
    for line in grid:
        print(indent + " ".join(BLANK if ch is None else ch for ch in line))


def rail_encode(key: RailKey, message: str, verbose: bool = False) -> str:
    rows = _require(key)
    total = padded_length(len(message), rows)
    padded = message + FILLER * (total - len(message))
    path = rail_path(total, rows)

    grid = [[None] * total for _ in range(rows)]
    for col, (row, ch) in enumerate(zip(path, padded)):
        grid[row][col] = ch

    if verbose:
        print(f"[RAIL] Rails: {rows}  Message length: {len(message)}  Padded length: {total}")
        print(f"[RAIL] Padded message: `{padded}`")
        print("[RAIL] Matrix:")
        print_grid(grid)

    # read back rail by rail, skipping unused cells
    return ''.join(ch for line in grid for ch in line if ch is not None)


def rail_decode(key: RailKey, message: str, verbose: bool = False) -> str:
    rows = _require(key)
    total = len(message)
    path = rail_path(total, rows)

    grid = [[None] * total for _ in range(rows)]
    it = iter(message)
    for r in range(rows):
        for col in range(total):
            if path[col] == r:
                grid[r][col] = next(it)

    if verbose:
        print(f"[RAIL] Rails: {rows}  Message length: {total}")
        print("[RAIL] Matrix:")
        print_grid(grid)

    return ''.join(grid[row][col] for col, row in enumerate(path))
