from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .discs import DiscKind

if TYPE_CHECKING:
    from ..ai.base import Strategy

DEFAULT_BOMBS = 3
DEFAULT_UNFLIPPABLES = 2


@dataclass(eq=False)
class Player:
    """One side of the game.

    A player with a ``strategy`` attached is automated; without one it is
    human-operated. Budgets for the special discs live here and are mutated
    only by the engine.
    """

    is_first: bool
    strategy: Optional["Strategy"] = None
    starting_bombs: int = DEFAULT_BOMBS
    starting_unflippables: int = DEFAULT_UNFLIPPABLES
    wins: int = 0
    bombs: int = field(init=False)
    unflippables: int = field(init=False)

    def __post_init__(self) -> None:
        self.reset_budgets()

    @property
    def name(self) -> str:
        return "Player 1" if self.is_first else "Player 2"

    @property
    def is_human(self) -> bool:
        return self.strategy is None

    def reset_budgets(self) -> None:
        self.bombs = self.starting_bombs
        self.unflippables = self.starting_unflippables

    def remaining(self, kind: DiscKind) -> Optional[int]:
        """Remaining budget for ``kind``; ``None`` for unlimited standard discs."""
        if kind is DiscKind.BOMB:
            return self.bombs
        if kind is DiscKind.UNFLIPPABLE:
            return self.unflippables
        return None

    def can_afford(self, kind: DiscKind) -> bool:
        left = self.remaining(kind)
        return left is None or left > 0

    def spend(self, kind: DiscKind) -> None:
        if kind is DiscKind.BOMB:
            if self.bombs <= 0:
                raise RuntimeError(f"{self.name} has no bombs left")
            self.bombs -= 1
        elif kind is DiscKind.UNFLIPPABLE:
            if self.unflippables <= 0:
                raise RuntimeError(f"{self.name} has no unflippable discs left")
            self.unflippables -= 1

    def refund(self, kind: DiscKind) -> None:
        # Inverse of spend(); never goes above the starting allotment
        if kind is DiscKind.BOMB:
            if self.bombs >= self.starting_bombs:
                raise RuntimeError(f"{self.name} bomb budget already full")
            self.bombs += 1
        elif kind is DiscKind.UNFLIPPABLE:
            if self.unflippables >= self.starting_unflippables:
                raise RuntimeError(f"{self.name} unflippable budget already full")
            self.unflippables += 1

    def add_win(self) -> None:
        self.wins += 1

    def remove_win(self) -> None:
        if self.wins <= 0:
            raise RuntimeError(f"{self.name} has no win to remove")
        self.wins -= 1

    def __repr__(self) -> str:
        kind = "human" if self.is_human else type(self.strategy).__name__
        return f"Player({self.name}, {kind}, bombs={self.bombs}, unflippables={self.unflippables})"
