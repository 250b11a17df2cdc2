"""Configuration schema and packaged defaults"""

from .schema import ConfigError, GameSettings, LoggingSettings, SelfplaySettings, Settings

__all__ = [
    'ConfigError',
    'GameSettings',
    'LoggingSettings',
    'SelfplaySettings',
    'Settings',
]
