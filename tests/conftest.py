from __future__ import annotations

import pytest

from bomb_reversi.engine import Disc, DiscKind, Position, new_game
from bomb_reversi.tools import diag


@pytest.fixture(autouse=True)
def user_config(tmp_path, monkeypatch):
    """Point the user config home into the test's temporary directory."""
    path = tmp_path / ".bomb_reversi" / "config.toml"
    monkeypatch.setattr(diag, "CONFIG_HOME", path.parent)
    monkeypatch.setattr(diag, "CONFIG_PATH", path)
    return path


@pytest.fixture
def game():
    """Fresh game between two human players, first player to move."""
    return new_game()


@pytest.fixture
def blank(game):
    """Same game with an empty board, for hand-built positions."""
    game.board.clear()
    return game


@pytest.fixture
def put():
    def _put(game, row, col, owner, kind=DiscKind.STANDARD):
        disc = Disc(kind, owner)
        game.board.set(Position(row, col), disc)
        return disc
    return _put


def state_of(game):
    """Everything place/undo must restore."""
    return (
        game.board.snapshot(),
        game.is_first_player_turn,
        (game.first.bombs, game.first.unflippables),
        (game.second.bombs, game.second.unflippables),
        len(game.history),
    )


@pytest.fixture
def snapshot():
    return state_of
