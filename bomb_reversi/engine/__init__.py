"""Rule engine: board, discs, captures, move history and scoring"""

from .position import BOARD_SIZE, Position
from .discs import Disc, DiscKind
from .players import Player
from .board import Board, start_board
from .captures import compute_captures, count_ownership_changes
from .game import GameLogic, Move, Outcome, PlaceResult, RejectReason, new_game

__all__ = [
    'BOARD_SIZE',
    'Position',
    'Disc',
    'DiscKind',
    'Player',
    'Board',
    'start_board',
    'compute_captures',
    'count_ownership_changes',
    'GameLogic',
    'Move',
    'Outcome',
    'PlaceResult',
    'RejectReason',
    'new_game',
]
