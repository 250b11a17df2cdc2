from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .players import Player


class DiscKind(Enum):
    STANDARD = "standard"
    UNFLIPPABLE = "unflippable"
    BOMB = "bomb"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def code(self) -> str:
        """Single letter used in move transcripts."""
        return _CODES[self]

    @property
    def special(self) -> bool:
        return self is not DiscKind.STANDARD

    @classmethod
    def from_code(cls, code: str) -> "DiscKind":
        for kind, c in _CODES.items():
            if c == code.upper():
                return kind
        raise ValueError(f"Unknown disc code: {code}")


_SYMBOLS = {
    DiscKind.STANDARD: "⬤",
    DiscKind.UNFLIPPABLE: "⭕",
    DiscKind.BOMB: "💣",
}

_CODES = {
    DiscKind.STANDARD: "S",
    DiscKind.UNFLIPPABLE: "U",
    DiscKind.BOMB: "B",
}


# eq=False: discs are compared by identity, a capture mutates the owner in place
@dataclass(eq=False)
class Disc:
    kind: DiscKind
    owner: "Player"

    @property
    def is_bomb(self) -> bool:
        return self.kind is DiscKind.BOMB

    @property
    def flippable(self) -> bool:
        return self.kind is not DiscKind.UNFLIPPABLE

    def __repr__(self) -> str:
        return f"Disc({self.kind.value}, owner={self.owner.name})"
