from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, start_board
from .captures import compute_captures, count_ownership_changes
from .discs import Disc, DiscKind
from .players import DEFAULT_BOMBS, DEFAULT_UNFLIPPABLES, Player
from .position import BOARD_SIZE, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """History record: enough to reverse a placement exactly."""
    position: Position
    disc: Disc
    kind: DiscKind
    player: Player
    captured: frozenset[Position]


class RejectReason(Enum):
    OCCUPIED = "cell is occupied"
    ILLEGAL = "no capture available at this cell"
    NO_BUDGET = "no special discs of this kind left"


@dataclass(frozen=True)
class PlaceResult:
    ok: bool
    reason: Optional[RejectReason] = None
    move: Optional[Move] = None
    # Captured cells whose owner actually changed (unflippables excluded)
    flipped: frozenset[Position] = field(default_factory=frozenset)

    @property
    def captured(self) -> frozenset[Position]:
        return self.move.captured if self.move is not None else frozenset()


@dataclass(frozen=True)
class Outcome:
    first_count: int
    second_count: int
    winner: Optional[Player]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class GameLogic:
    """Owns the board, both players, the turn and the move history.

    Only :meth:`place`, :meth:`undo` and :meth:`reset` mutate state.
    """

    def __init__(self, first: Player, second: Player) -> None:
        if not first.is_first or second.is_first:
            raise ValueError("first player must have is_first=True and second is_first=False")
        self.first = first
        self.second = second
        self.board: Board = Board()
        self._first_to_move = True
        self._history: List[Move] = []
        self._result_recorded = False
        self._credited: Optional[Player] = None
        self.reset()

    # --- lifecycle -----------------------------------------------------

    def reset(self) -> None:
        self.board = start_board(self.first, self.second)
        self._first_to_move = True
        self._history.clear()
        # wins of a finished game survive a reset
        self._result_recorded = False
        self._credited = None
        self.first.reset_budgets()
        self.second.reset_budgets()

    # --- queries -------------------------------------------------------

    @property
    def board_size(self) -> int:
        return BOARD_SIZE

    @property
    def is_first_player_turn(self) -> bool:
        return self._first_to_move

    @property
    def current_player(self) -> Player:
        return self.first if self._first_to_move else self.second

    def opponent(self, player: Player) -> Player:
        return self.second if player is self.first else self.first

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    def disc_at(self, pos: Position) -> Optional[Disc]:
        return self.board.get(pos)

    def compute_captures(self, pos: Position, disc: Disc) -> frozenset[Position]:
        return compute_captures(self.board, pos, disc)

    def count_flips(self, pos: Position) -> int:
        """Ownership-changing captures for a standard disc of the current player at ``pos``."""
        trial = Disc(DiscKind.STANDARD, self.current_player)
        return count_ownership_changes(self.board, compute_captures(self.board, pos, trial))

    def legal_moves(self) -> List[Position]:
        trial = Disc(DiscKind.STANDARD, self.current_player)
        moves: List[Position] = []
        for p in self.board.empty_positions():
            caps = compute_captures(self.board, p, trial)
            if caps and count_ownership_changes(self.board, caps) > 0:
                moves.append(p)
        return moves

    # --- commands ------------------------------------------------------

    def place(self, pos: Position, kind: DiscKind = DiscKind.STANDARD) -> PlaceResult:
        mover = self.current_player
        if self.board.get(pos) is not None:
            return self._reject(pos, kind, RejectReason.OCCUPIED)
        # Legality always follows the standard capture rule, whatever the kind
        if pos not in self.legal_moves():
            return self._reject(pos, kind, RejectReason.ILLEGAL)
        if not mover.can_afford(kind):
            return self._reject(pos, kind, RejectReason.NO_BUDGET)

        disc = Disc(kind, mover)
        self.board.set(pos, disc)
        mover.spend(kind)

        captured = compute_captures(self.board, pos, disc)
        flipped = set()
        for p in captured:
            d = self.board.get(p)
            if d.flippable:
                d.owner = mover
                flipped.add(p)

        move = Move(pos, disc, kind, mover, captured)
        self._history.append(move)
        self._first_to_move = not self._first_to_move
        logger.debug(
            "%s placed %s at %s capturing %d (flipped %d)",
            mover.name, kind.value, pos, len(captured), len(flipped),
        )
        return PlaceResult(True, move=move, flipped=frozenset(flipped))

    def _reject(self, pos: Position, kind: DiscKind, reason: RejectReason) -> PlaceResult:
        logger.debug("%s rejected %s at %s: %s", self.current_player.name, kind.value, pos, reason.value)
        return PlaceResult(False, reason=reason)

    @property
    def undo_allowed(self) -> bool:
        return self.first.is_human and self.second.is_human

    def undo(self) -> Optional[Move]:
        """Reverse the last placement. Returns the undone move, or None for a no-op."""
        if not self.undo_allowed:
            logger.debug("undo ignored: automated player in game")
            return None
        if not self._history:
            logger.debug("undo ignored: no previous move")
            return None
        move = self._history.pop()
        # A capture never includes a cell the mover already owned, so the
        # previous owner of every captured cell is the other player.
        prev_owner = self.opponent(move.player)
        self.board.set(move.position, None)
        for p in move.captured:
            self.board.get(p).owner = prev_owner
        if move.kind.special:
            move.player.refund(move.kind)
        self._first_to_move = move.player is self.first
        if self._result_recorded:
            # withdraw the recorded result
            if self._credited is not None:
                self._credited.remove_win()
                self._credited = None
            self._result_recorded = False
        logger.debug("undo %s at %s restoring %d discs", move.kind.value, move.position, len(move.captured))
        return move

    def rebuild_from_history(self) -> Board:
        """Replay the history onto a fresh start layout and return the resulting board."""
        b = start_board(self.first, self.second)
        for move in self._history:
            b.set(move.position, Disc(move.kind, move.player))
            for p in move.captured:
                d = b.get(p)
                if d.flippable:
                    d.owner = move.player
        return b

    # --- game end ------------------------------------------------------

    def is_terminal(self) -> bool:
        return not self.legal_moves()

    def outcome(self) -> Outcome:
        n1 = self.board.count(self.first)
        n2 = self.board.count(self.second)
        winner = self.first if n1 > n2 else self.second if n2 > n1 else None
        return Outcome(n1, n2, winner)

    def record_result(self) -> Optional[Outcome]:
        """Credit the winner of a finished game once. None while the game is still running.

        Undoing out of a recorded terminal position takes the win back.
        """
        if not self.is_terminal():
            return None
        out = self.outcome()
        if not self._result_recorded:
            if out.winner is not None:
                out.winner.add_win()
            self._credited = out.winner
            self._result_recorded = True
            logger.info(
                "game over: %s (%d-%d)",
                "draw" if out.is_draw else f"{out.winner.name} wins",
                out.first_count, out.second_count,
            )
        return out


def new_game(starting_bombs: int = DEFAULT_BOMBS, starting_unflippables: int = DEFAULT_UNFLIPPABLES) -> GameLogic:
    """Two human players so that undo is available."""
    return GameLogic(
        Player(True, starting_bombs=starting_bombs, starting_unflippables=starting_unflippables),
        Player(False, starting_bombs=starting_bombs, starting_unflippables=starting_unflippables),
    )
