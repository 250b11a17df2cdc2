from __future__ import annotations

from typing import Iterable, List, Set

from .board import Board
from .discs import Disc
from .players import Player
from .position import DIRS, Position


def bomb_neighbourhood(board: Board, bomb: Position, mover: Player, visited: Set[Position]) -> List[Position]:
    """Collect the chain capture set set off by the bomb at ``bomb``.

    Every neighbour not owned by ``mover`` is pulled in; neighbouring bombs
    recurse. ``visited`` is shared across the chain and is updated in place,
    so a bomb reached twice contributes its neighbourhood once.
    """
    pulled: List[Position] = []
    visited.add(bomb)
    stack = [bomb]
    while stack:
        cur = stack.pop()
        for n in cur.neighbours():
            if n in visited:
                continue
            d = board.get(n)
            if d is None or d.owner is mover:
                continue
            visited.add(n)
            pulled.append(n)
            if d.is_bomb:
                stack.append(n)
    return pulled


def compute_captures(board: Board, pos: Position, disc: Disc) -> frozenset[Position]:
    """Positions captured if ``disc`` is played at ``pos``. Does not mutate ``board``."""
    mover = disc.owner
    captured: Set[Position] = set()
    for d in DIRS:
        run: List[Position] = []
        visited: Set[Position] = set()
        cur = pos.step(d)
        while cur.valid:
            here = board.get(cur)
            if here is None or here.owner is mover:
                break
            if cur not in visited:
                visited.add(cur)
                run.append(cur)
            if here.is_bomb:
                run.extend(bomb_neighbourhood(board, cur, mover, visited))
            cur = cur.step(d)
        # Commit only when bracketed by a disc of the mover
        if run and cur.valid:
            end = board.get(cur)
            if end is not None and end.owner is mover:
                captured.update(run)
    return frozenset(captured)


def count_ownership_changes(board: Board, captures: Iterable[Position]) -> int:
    """Number of captured discs that actually change hands (unflippables excluded)."""
    n = 0
    for p in captures:
        d = board.get(p)
        if d is not None and d.flippable:
            n += 1
    return n
