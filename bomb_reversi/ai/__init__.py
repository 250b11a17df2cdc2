"""Automated players: strategy contract and built-in strategies"""

from .base import Choice, GameView, Strategy
from .greedy import GreedyStrategy
from .random_ai import RandomStrategy
from .factory import STRATEGIES, make_strategy

__all__ = [
    'Choice',
    'GameView',
    'Strategy',
    'GreedyStrategy',
    'RandomStrategy',
    'STRATEGIES',
    'make_strategy',
]
