from __future__ import annotations

import random

from bomb_reversi.engine import Disc, DiscKind, Position, RejectReason, count_ownership_changes, new_game
from bomb_reversi.engine.position import all_positions

P = Position


def test_start_is_not_terminal(game):
    assert not game.is_terminal()
    assert game.record_result() is None
    assert game.first.wins == 0 and game.second.wins == 0


def test_full_board_is_terminal(blank, put):
    a, b = blank.first, blank.second
    for p in all_positions():
        put(blank, p.row, p.col, a if p.row < 5 else b)
    assert blank.is_terminal()
    assert blank.legal_moves() == []
    out = blank.outcome()
    assert (out.first_count, out.second_count) == (40, 24)
    assert out.winner is a and not out.is_draw


def test_wipeout_is_terminal(blank, put):
    put(blank, 0, 0, blank.second)
    put(blank, 7, 7, blank.second, DiscKind.BOMB)
    assert blank.is_terminal()
    assert blank.outcome().winner is blank.second
    assert blank.place(P(0, 1)).reason is RejectReason.ILLEGAL


def _has_move(game, player):
    disc = Disc(DiscKind.STANDARD, player)
    return any(
        count_ownership_changes(game.board, game.compute_captures(p, disc)) > 0
        for p in game.board.empty_positions()
    )


def test_neither_side_can_move_draw(blank, put):
    a, b = blank.first, blank.second
    put(blank, 0, 0, a)
    put(blank, 7, 7, b)
    assert blank.is_terminal()
    assert not _has_move(blank, a) and not _has_move(blank, b)
    out = blank.outcome()
    assert out.is_draw and out.winner is None
    assert (out.first_count, out.second_count) == (1, 1)
    assert blank.record_result().is_draw
    assert a.wins == 0 and b.wins == 0


def test_stuck_after_a_real_move(blank, put):
    a, b = blank.first, blank.second
    put(blank, 0, 0, a)
    put(blank, 0, 1, b)
    put(blank, 7, 7, b)
    assert blank.place(P(0, 2)).ok
    # second player to move, and the first player is stuck too
    assert not blank.is_first_player_turn
    assert blank.is_terminal()
    assert not _has_move(blank, a)
    assert blank.outcome().winner is a


def test_neither_side_can_move_winner(blank, put):
    a, b = blank.first, blank.second
    put(blank, 0, 0, a)
    put(blank, 0, 7, a)
    put(blank, 7, 7, b)
    assert blank.is_terminal()
    out = blank.record_result()
    assert out.winner is a
    assert a.wins == 1
    # credited once per game
    blank.record_result()
    assert a.wins == 1
    blank.reset()
    assert a.wins == 1


def _play_out(game, seed):
    rng = random.Random(seed)
    while not game.is_terminal():
        kinds = [k for k in DiscKind if game.current_player.can_afford(k)]
        assert game.place(rng.choice(game.legal_moves()), rng.choice(kinds)).ok
    return game


def test_random_games_end_with_no_legal_moves():
    for seed in range(5):
        g = _play_out(new_game(), seed)
        assert g.legal_moves() == []
        out = g.record_result()
        assert out.first_count + out.second_count == len(list(g.board.discs()))
        if out.first_count > out.second_count:
            assert out.winner is g.first and g.first.wins == 1
        elif out.second_count > out.first_count:
            assert out.winner is g.second and g.second.wins == 1
        else:
            assert out.is_draw
        for p in g.board.empty_positions():
            assert g.place(p).reason is RejectReason.ILLEGAL


def test_wins_accumulate_across_resets():
    g = new_game()
    total = 0
    for seed in range(4):
        g.reset()
        _play_out(g, seed)
        if not g.record_result().is_draw:
            total += 1
    assert g.first.wins + g.second.wins == total


def test_undo_takes_back_a_recorded_win(blank, put):
    a, b = blank.first, blank.second
    put(blank, 0, 1, b)
    put(blank, 0, 2, a)
    assert blank.place(P(0, 0)).ok
    assert blank.record_result().winner is a
    assert a.wins == 1
    blank.undo()
    assert a.wins == 0
    assert not blank.is_terminal()
    assert blank.place(P(0, 0)).ok
    blank.record_result()
    blank.record_result()
    assert a.wins == 1 and b.wins == 0


def test_undo_of_a_recorded_draw_keeps_wins(blank, put):
    a, b = blank.first, blank.second
    for col in range(3):
        put(blank, 0, col, b)
    put(blank, 7, 4, a)
    put(blank, 7, 5, b)
    assert blank.place(P(7, 6)).ok
    assert blank.record_result().is_draw
    blank.undo()
    assert a.wins == 0 and b.wins == 0


def test_undo_before_recording_leaves_wins(blank, put):
    a, b = blank.first, blank.second
    a.wins = 2
    put(blank, 0, 1, b)
    put(blank, 0, 2, a)
    blank.place(P(0, 0))
    blank.undo()
    assert a.wins == 2
