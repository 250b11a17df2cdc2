from __future__ import annotations

from typing import Dict, Optional, Type

from .base import Strategy
from .greedy import GreedyStrategy
from .random_ai import RandomStrategy

STRATEGIES: Dict[str, Type[Strategy]] = {
    GreedyStrategy.name: GreedyStrategy,
    RandomStrategy.name: RandomStrategy,
}


def make_strategy(name: str, seed: Optional[int] = None) -> Strategy:
    try:
        cls = STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown strategy '{name}', expected one of {sorted(STRATEGIES)}") from None
    return cls(seed=seed)
