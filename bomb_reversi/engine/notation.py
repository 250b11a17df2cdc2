"""
Coordinate notation for board positions.

Columns map to files a-h and rows to ranks 1-8, so Position(0, 0) is 'a1' and
Position(7, 7) is 'h8'. Transcripts append the disc code for special discs
(e.g. 'd3', 'c4B', 'f5U').
"""

from typing import List, Tuple

from .discs import DiscKind
from .position import BOARD_SIZE, Position

FILES = "abcdefgh"


def position_to_notation(pos: Position) -> str:
    """Convert a position to coordinate notation (e.g. 'e4')."""
    if not pos.valid:
        raise ValueError(f"Invalid position: {pos}")
    return f"{FILES[pos.col]}{pos.row + 1}"


def notation_to_position(notation: str) -> Position:
    """Convert coordinate notation (e.g. 'e4') to a position."""
    if len(notation) != 2:
        raise ValueError(f"Invalid notation format: {notation}")

    file_char = notation[0].lower()
    rank_char = notation[1]

    if not file_char.isalpha() or not rank_char.isdigit():
        raise ValueError(f"Invalid notation format: {notation}")

    col = ord(file_char) - ord('a')
    row = int(rank_char) - 1

    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"Invalid notation: {notation}")

    return Position(row, col)


def move_to_notation(pos: Position, kind: DiscKind = DiscKind.STANDARD) -> str:
    text = position_to_notation(pos)
    return text if kind is DiscKind.STANDARD else text + kind.code


def moves_to_string(moves: List[Tuple[Position, DiscKind]]) -> str:
    """Convert a list of (position, kind) moves to a transcript string."""
    return ''.join(move_to_notation(p, k) for p, k in moves)


def string_to_moves(moves_str: str) -> List[Tuple[Position, DiscKind]]:
    """Parse a transcript string produced by :func:`moves_to_string`."""
    moves = []
    i = 0
    while i < len(moves_str):
        if i + 1 >= len(moves_str):
            raise ValueError(f"Incomplete move at end of transcript: {moves_str[i:]}")
        pos = notation_to_position(moves_str[i:i + 2])
        i += 2
        kind = DiscKind.STANDARD
        # Codes are upper case and files lower case, so "d3b5" is two moves
        if i < len(moves_str) and moves_str[i] in ("U", "B"):
            kind = DiscKind.from_code(moves_str[i])
            i += 1
        moves.append((pos, kind))
    return moves


def is_valid_notation(moves_str: str) -> bool:
    """Check if a transcript string parses cleanly."""
    try:
        string_to_moves(moves_str)
    except ValueError:
        return False
    return True
