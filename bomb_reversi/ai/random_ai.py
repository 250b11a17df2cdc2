from __future__ import annotations

from typing import Optional

from .base import Choice, GameView, Strategy


class RandomStrategy(Strategy):
    """Uniform over legal cells, then uniform over the disc kinds still affordable."""

    name = "random"

    def select_move(self, view: GameView) -> Optional[Choice]:
        moves = view.legal_moves()
        if not moves:
            return None
        pos = self.rng.choice(moves)
        kind = self.rng.choice(view.affordable_kinds())
        self.move_count += 1
        return Choice(pos, kind)
