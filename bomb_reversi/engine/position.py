from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

# Board is 8x8, rows and columns numbered 0..7 from the top-left corner.
BOARD_SIZE = 8

# All eight compass directions as (drow, dcol).
DIRS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    @property
    def valid(self) -> bool:
        return in_bounds(self.row, self.col)

    def step(self, d: Tuple[int, int]) -> "Position":
        return Position(self.row + d[0], self.col + d[1])

    def neighbours(self) -> Iterator["Position"]:
        """Yield the in-bounds cells surrounding this one."""
        for d in DIRS:
            p = self.step(d)
            if p.valid:
                yield p

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def all_positions() -> Iterator[Position]:
    """Every cell of the board in row-major order."""
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            yield Position(r, c)
