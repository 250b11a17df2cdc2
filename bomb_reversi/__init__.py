"""Reversi rule engine with unflippable and bomb discs"""

__version__ = "1.0.0"
