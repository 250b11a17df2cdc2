from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter

from ..config import ConfigError
from ..engine.discs import DiscKind
from ..engine.game import new_game
from ..engine.perft import perft, play_moves
from ..logging_setup import setup_logging
from .diag import load_settings


def main() -> None:
    p = argparse.ArgumentParser(prog="bomb-reversi-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--position", type=str, default=None, help="move transcript like d3c5f6B")
    p.add_argument("--special", action="store_true", help="also try bomb and unflippable discs at every node")
    p.add_argument("--config", default=None, help="Path to config.toml (defaults to ~/.bomb_reversi/config.toml)")
    args = p.parse_args()

    log = logging.getLogger(__name__)
    try:
        settings = load_settings(args.config)
    except ConfigError:
        logging.basicConfig(level=logging.INFO)
        log.exception("Error loading config")
        sys.exit(1)
    setup_logging(overwrite=settings.logging.overwrite, level=settings.logging.level_no,
                  log_path=settings.logging.file)

    game = new_game(settings.game.starting_bombs, settings.game.starting_unflippables)
    if args.position:
        try:
            play_moves(game, args.position)
        except ValueError:
            log.exception("Bad --position")
            sys.exit(1)
    kinds = tuple(DiscKind) if args.special else (DiscKind.STANDARD,)
    t0 = perf_counter()
    n = perft(game, args.depth, kinds)
    dt = perf_counter() - t0
    log.info("perft(d=%d)=%d in %.3fs", args.depth, n, dt)


if __name__ == "__main__":
    main()
