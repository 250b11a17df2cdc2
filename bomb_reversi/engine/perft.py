from __future__ import annotations

from typing import Iterable, Optional

from .discs import DiscKind
from .game import GameLogic, new_game
from .notation import string_to_moves


def perft(game: GameLogic, depth: int, kinds: Iterable[DiscKind] = (DiscKind.STANDARD,)) -> int:
    """Count leaf nodes of the move tree, walking it with place/undo.

    ``kinds`` selects which disc kinds are tried at every legal cell; kinds the
    mover cannot afford are skipped.
    """
    if depth == 0:
        return 1
    kinds = tuple(kinds)
    total = 0
    for pos in game.legal_moves():
        for kind in kinds:
            res = game.place(pos, kind)
            if not res.ok:
                continue
            total += perft(game, depth - 1, kinds)
            if game.undo() is None:
                raise RuntimeError("perft requires an undoable game")
    return total


def play_moves(game: Optional[GameLogic], moves: str) -> GameLogic:
    """Apply a transcript such as 'd3c5f6B' to ``game`` (a fresh game when None)."""
    g = new_game() if game is None else game
    for pos, kind in string_to_moves(moves):
        res = g.place(pos, kind)
        if not res.ok:
            raise ValueError(f"illegal move {pos} ({kind.value}): {res.reason.value}")
    return g
