"""Settings schema"""

import logging

from pydantic import BaseModel, Field, field_validator

from ..ai.factory import STRATEGIES


class ConfigError(Exception):
    """Configuration file could not be read or failed validation"""


class GameSettings(BaseModel):
    """Per-game special disc allotments"""
    starting_bombs: int = Field(3, ge=0, le=64, description="Bombs per player per game")
    starting_unflippables: int = Field(2, ge=0, le=64, description="Unflippable discs per player per game")


class LoggingSettings(BaseModel):
    level: str = Field("INFO", description="Root log level name")
    overwrite: bool = Field(True, description="Truncate the log file on startup")
    file: str = Field("bomb-reversi.log", description="Log file, relative to the working directory")

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {v}")
        return name

    @property
    def level_no(self) -> int:
        return logging.getLevelName(self.level)


class SelfplaySettings(BaseModel):
    games: int = Field(100, ge=1)
    workers: int = Field(2, ge=1)
    first: str = Field("greedy", description="Strategy for the first player")
    second: str = Field("random", description="Strategy for the second player")
    seed: int = Field(0, description="Base seed; game i uses seed + i")

    @field_validator("first", "second")
    @classmethod
    def _known_strategy(cls, v: str) -> str:
        name = v.lower()
        if name not in STRATEGIES:
            raise ValueError(f"unknown strategy '{v}', expected one of {sorted(STRATEGIES)}")
        return name


class Settings(BaseModel):
    game: GameSettings = Field(default_factory=GameSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    selfplay: SelfplaySettings = Field(default_factory=SelfplaySettings)
