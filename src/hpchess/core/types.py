"""Square value object and coordinate helpers.

Board layout (row-major, black at the top)::

    row 0 = rank 8 (black's back rank)
    row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h

So ``Square(6, 4)`` is e2 and ``Square(0, 4)`` is e8.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from hpchess.core.errors import InvalidSquareError

BOARD_SIZE = 8
FILES = "abcdefgh"


def in_bounds(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board coordinate. Construction outside the board raises."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not in_bounds(self.row, self.col):
            raise InvalidSquareError(f"Square out of bounds: ({self.row}, {self.col})")

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Shifted square, or ``None`` if it falls off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if not in_bounds(row, col):
            return None
        return Square(row, col)

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(6, 4)`` → ``'e2'``."""
    return f"{FILES[sq.col]}{BOARD_SIZE - sq.row}"


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), FILES.index(name[0]))


def all_squares() -> Iterator[Square]:
    """Every square, row by row from row 0."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)
