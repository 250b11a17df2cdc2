"""Strategy contract for automated players"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..engine.discs import DiscKind
from ..engine.position import Position

if TYPE_CHECKING:
    from ..engine.game import GameLogic


@dataclass(frozen=True)
class Choice:
    position: Position
    kind: DiscKind = DiscKind.STANDARD


class GameView:
    """Read-only window onto a game for the player whose turn it is.

    Exposes only what a strategy may base its decision on; the engine
    re-validates whatever comes back.
    """

    __slots__ = ("_game",)

    def __init__(self, game: "GameLogic") -> None:
        self._game = game

    @property
    def is_first(self) -> bool:
        return self._game.is_first_player_turn

    def legal_moves(self) -> List[Position]:
        return self._game.legal_moves()

    def count_flips(self, pos: Position) -> int:
        return self._game.count_flips(pos)

    @property
    def bombs_left(self) -> int:
        return self._game.current_player.bombs

    @property
    def unflippables_left(self) -> int:
        return self._game.current_player.unflippables

    def affordable_kinds(self) -> List[DiscKind]:
        mover = self._game.current_player
        return [k for k in DiscKind if mover.can_afford(k)]


class Strategy(ABC):
    """Base class for automated move selection.

    Each instance owns its RNG so that games are reproducible under a fixed
    seed.
    """

    name = "base"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)
        self.move_count = 0

    @abstractmethod
    def select_move(self, view: GameView) -> Optional[Choice]:
        """Pick a legal position and an affordable disc kind, or None when there is no legal move."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"
