from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .discs import Disc, DiscKind
from .players import Player
from .position import BOARD_SIZE, Position, all_positions


class Board:
    """Fixed 8x8 grid of optional discs.

    Access outside the grid is a programming error and raises IndexError;
    the engine only ever hands out in-bounds positions.
    """

    def __init__(self) -> None:
        self._cells: List[List[Optional[Disc]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @property
    def size(self) -> int:
        return BOARD_SIZE

    def _check(self, pos: Position) -> None:
        if not pos.valid:
            raise IndexError(f"position out of range: {pos}")

    def get(self, pos: Position) -> Optional[Disc]:
        self._check(pos)
        return self._cells[pos.row][pos.col]

    def set(self, pos: Position, disc: Optional[Disc]) -> None:
        self._check(pos)
        self._cells[pos.row][pos.col] = disc

    def clear(self) -> None:
        for row in self._cells:
            for c in range(BOARD_SIZE):
                row[c] = None

    def empty_positions(self) -> Iterator[Position]:
        for p in all_positions():
            if self._cells[p.row][p.col] is None:
                yield p

    def discs(self) -> Iterator[Tuple[Position, Disc]]:
        for p in all_positions():
            d = self._cells[p.row][p.col]
            if d is not None:
                yield p, d

    def count(self, player: Player) -> int:
        return sum(1 for _, d in self.discs() if d.owner is player)

    def snapshot(self) -> Tuple[Tuple[Optional[Tuple[DiscKind, bool]], ...], ...]:
        """Immutable view of the grid as (kind, owner-is-first) per cell."""
        return tuple(
            tuple(None if d is None else (d.kind, d.owner.is_first) for d in row)
            for row in self._cells
        )


def start_board(first: Player, second: Player) -> Board:
    b = Board()
    b.set(Position(3, 3), Disc(DiscKind.STANDARD, first))
    b.set(Position(4, 4), Disc(DiscKind.STANDARD, first))
    b.set(Position(3, 4), Disc(DiscKind.STANDARD, second))
    b.set(Position(4, 3), Disc(DiscKind.STANDARD, second))
    return b
