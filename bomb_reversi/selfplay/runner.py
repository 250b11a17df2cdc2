from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from multiprocessing import Pool
from typing import Iterable, List, Optional, Tuple

from ..ai.base import GameView
from ..ai.factory import make_strategy
from ..config import ConfigError, GameSettings
from ..engine.discs import DiscKind
from ..engine.game import GameLogic
from ..engine.notation import moves_to_string
from ..engine.players import Player
from ..engine.position import Position
from ..logging_setup import setup_logging
from ..tools.diag import load_settings, log_event

logger = logging.getLogger(__name__)

# 60 empty cells at the start, one is filled per placement
MAX_PLIES = 60


@dataclass
class GameRecord:
    seed: int
    first: str
    second: str
    result: int  # +1 first player won, -1 second won, 0 draw
    first_count: int
    second_count: int
    plies: int
    transcript: str


def build_game(first: str, second: str, seed: int, game_cfg: Optional[GameSettings] = None) -> GameLogic:
    cfg = game_cfg or GameSettings()
    p1 = Player(
        True,
        strategy=make_strategy(first, seed),
        starting_bombs=cfg.starting_bombs,
        starting_unflippables=cfg.starting_unflippables,
    )
    p2 = Player(
        False,
        # distinct stream for the second player under the same game seed
        strategy=make_strategy(second, seed + 1_000_003),
        starting_bombs=cfg.starting_bombs,
        starting_unflippables=cfg.starting_unflippables,
    )
    return GameLogic(p1, p2)


def play_game(game: GameLogic) -> Tuple[int, List[Tuple[Position, DiscKind]]]:
    """Drive an automated game to the end. Returns (plies, moves)."""
    hist: List[Tuple[Position, DiscKind]] = []
    while not game.is_terminal():
        mover = game.current_player
        if mover.strategy is None:
            raise RuntimeError(f"{mover.name} is human; play_game needs automated players")
        choice = mover.strategy.select_move(GameView(game))
        if choice is None:
            raise RuntimeError(f"{mover.strategy!r} returned no move while legal moves exist")
        res = game.place(choice.position, choice.kind)
        if not res.ok:
            raise RuntimeError(
                f"{mover.strategy!r} chose {choice.position} ({choice.kind.value}): {res.reason.value}"
            )
        hist.append((choice.position, choice.kind))
        if len(hist) > MAX_PLIES:
            raise RuntimeError("game exceeded the number of board cells")
    return len(hist), hist


def play_one(seed: int, first: str = "greedy", second: str = "random",
             game_cfg: Optional[GameSettings] = None) -> GameRecord:
    game = build_game(first, second, seed, game_cfg)
    log_event("selfplay", "start", seed=seed, first=first, second=second)
    plies, hist = play_game(game)
    out = game.record_result()
    result = 0 if out.is_draw else (1 if out.winner is game.first else -1)
    record = GameRecord(seed, first, second, result, out.first_count, out.second_count, plies, moves_to_string(hist))
    log_event(
        "selfplay", "game_over",
        seed=seed, result=result, plies=plies,
        first_count=out.first_count, second_count=out.second_count,
        transcript=record.transcript,
    )
    return record


def _play_one_entry(args_tuple):
    return play_one(*args_tuple)


@dataclass
class Tally:
    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0

    def add(self, record: GameRecord) -> None:
        if record.result > 0:
            self.first_wins += 1
        elif record.result < 0:
            self.second_wins += 1
        else:
            self.draws += 1


def run_games(seeds: Iterable[int], first: str, second: str, workers: int = 1,
              game_cfg: Optional[GameSettings] = None) -> Tuple[Tally, List[GameRecord]]:
    tally = Tally()
    records: List[GameRecord] = []
    jobs = [(s, first, second, game_cfg) for s in seeds]
    if workers <= 1:
        results = map(_play_one_entry, jobs)
        for rec in results:
            tally.add(rec)
            records.append(rec)
    else:
        with Pool(processes=workers) as pool:
            for rec in pool.imap_unordered(_play_one_entry, jobs):
                tally.add(rec)
                records.append(rec)
    return tally, records


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="bomb-reversi-selfplay")
    ap.add_argument("--config", default=None, help="Path to config.toml (defaults to ~/.bomb_reversi/config.toml)")
    ap.add_argument("--games", type=int, default=None)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--first", default=None, help="Strategy for the first player")
    ap.add_argument("--second", default=None, help="Strategy for the second player")
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError:
        logging.basicConfig(level=logging.INFO)
        logger.exception("Error loading config")
        sys.exit(1)

    setup_logging(
        overwrite=settings.logging.overwrite,
        level=settings.logging.level_no,
        log_path=settings.logging.file,
    )
    sp = settings.selfplay
    games = args.games if args.games is not None else sp.games
    workers = args.workers if args.workers is not None else sp.workers
    first = args.first or sp.first
    second = args.second or sp.second
    seed = args.seed if args.seed is not None else sp.seed

    seeds = range(seed, seed + games)
    try:
        tally, records = run_games(seeds, first, second, workers, settings.game)
    except ValueError:
        logger.exception("Invalid self-play options")
        sys.exit(1)
    for rec in sorted(records, key=lambda r: r.seed):
        logger.info("game seed=%d result=%d len=%d score=%d-%d", rec.seed, rec.result, rec.plies,
                    rec.first_count, rec.second_count)
    logger.info("%s vs %s: %d-%d with %d draws", first, second,
                tally.first_wins, tally.second_wins, tally.draws)


if __name__ == "__main__":
    main()
