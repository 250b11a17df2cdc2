from __future__ import annotations

from typing import Optional

from .base import Choice, GameView, Strategy


class GreedyStrategy(Strategy):
    """Play the standard disc that changes the most owners right now.

    Ties go to the highest column, then the highest row.
    """

    name = "greedy"

    def select_move(self, view: GameView) -> Optional[Choice]:
        moves = view.legal_moves()
        if not moves:
            return None
        best = max(moves, key=lambda p: (view.count_flips(p), p.col, p.row))
        self.move_count += 1
        return Choice(best)
