from __future__ import annotations

import pytest

from bomb_reversi.ai import Choice, Strategy
from bomb_reversi.config import GameSettings
from bomb_reversi.engine import GameLogic, Player, Position
from bomb_reversi.engine.perft import play_moves
from bomb_reversi.logging_setup import reset_logging
from bomb_reversi.selfplay.runner import build_game, main, play_game, play_one, run_games


def test_play_one_is_deterministic():
    a = play_one(3, "random", "random")
    b = play_one(3, "random", "random")
    assert a == b
    assert a.plies > 0
    assert a.first_count + a.second_count == 4 + a.plies


def test_result_matches_counts_and_transcript_replays():
    for seed in range(4):
        rec = play_one(seed, "greedy", "random")
        if rec.first_count > rec.second_count:
            assert rec.result == 1
        elif rec.first_count < rec.second_count:
            assert rec.result == -1
        else:
            assert rec.result == 0
        g = play_moves(None, rec.transcript)
        assert g.is_terminal()
        out = g.outcome()
        assert (out.first_count, out.second_count) == (rec.first_count, rec.second_count)


def test_greedy_mirror_is_fully_deterministic():
    a = play_one(0, "greedy", "greedy")
    b = play_one(99, "greedy", "greedy")
    assert a.transcript == b.transcript


def test_zero_budgets_mean_standard_discs_only():
    cfg = GameSettings(starting_bombs=0, starting_unflippables=0)
    rec = play_one(5, "random", "random", cfg)
    assert "B" not in rec.transcript and "U" not in rec.transcript


def test_build_game_wires_strategies_and_budgets():
    g = build_game("greedy", "random", 1, GameSettings(starting_bombs=1, starting_unflippables=0))
    assert not g.first.is_human and not g.second.is_human
    assert g.first.strategy.name == "greedy"
    assert g.second.strategy.name == "random"
    assert (g.second.bombs, g.second.unflippables) == (1, 0)
    assert not g.undo_allowed


def test_run_games_tally():
    tally, records = run_games(range(4), "greedy", "random", workers=1)
    assert len(records) == 4
    assert tally.first_wins + tally.second_wins + tally.draws == 4
    assert sorted(r.seed for r in records) == [0, 1, 2, 3]


class _Stubborn(Strategy):
    name = "stubborn"

    def select_move(self, view):
        return Choice(Position(3, 3))


def test_contract_violation_raises():
    g = GameLogic(Player(True, strategy=_Stubborn()), Player(False, strategy=_Stubborn()))
    with pytest.raises(RuntimeError):
        play_game(g)


def test_human_player_rejected():
    g = GameLogic(Player(True), Player(False))
    with pytest.raises(RuntimeError):
        play_game(g)


def test_main_runs_from_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        '[logging]\nfile = "run.log"\n\n[selfplay]\ngames = 2\nworkers = 1\n',
        encoding="utf-8",
    )
    try:
        main(["--config", str(cfg), "--first", "random", "--seed", "10"])
    finally:
        reset_logging()
    log = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert '"event":"game_over"' in log
    assert "random vs random" in log


def test_main_bad_config_exits(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text('[selfplay]\nsecond = "nobody"\n', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg)])
    assert exc.value.code == 1


def test_main_reads_user_config_by_default(tmp_path, monkeypatch, user_config):
    monkeypatch.chdir(tmp_path)
    user_config.parent.mkdir(parents=True)
    user_config.write_text(
        '[logging]\nfile = "home.log"\n\n[selfplay]\ngames = 1\nworkers = 1\nfirst = "random"\n',
        encoding="utf-8",
    )
    try:
        main([])
    finally:
        reset_logging()
    log = (tmp_path / "home.log").read_text(encoding="utf-8")
    assert "random vs random" in log
