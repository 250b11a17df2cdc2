from __future__ import annotations

import logging
import os
import pathlib
import time
from dataclasses import dataclass
from importlib import resources
from typing import Optional, Union

import orjson
import tomli
from pydantic import ValidationError

from ..config import ConfigError, Settings

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.bomb_reversi"))
CONFIG_PATH = CONFIG_HOME / "config.toml"


@dataclass
class InitResult:
    config_created: bool
    config_path: pathlib.Path


def defaults_text() -> str:
    return resources.files("bomb_reversi.config").joinpath("defaults.toml").read_text(encoding="utf-8")


def ensure_config(path: Optional[pathlib.Path] = None) -> bool:
    path = CONFIG_PATH if path is None else path
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(defaults_text(), encoding="utf-8")
        return True
    return False


def install_and_init(path: Optional[pathlib.Path] = None) -> InitResult:
    path = CONFIG_PATH if path is None else path
    created = ensure_config(path)
    if created:
        logging.getLogger(__name__).info("Initialised configuration at %s", path)
    return InitResult(created, path)


def load_settings(path: Optional[Union[str, pathlib.Path]] = None) -> Settings:
    """Load and validate settings.

    With no path the user config at CONFIG_PATH is read, created from the
    packaged defaults on first use. Raises ConfigError on an unreadable file,
    bad TOML or a schema violation.
    """
    try:
        if path is None:
            path = install_and_init().config_path
        with open(path, "rb") as f:
            data = tomli.load(f)
        return Settings.model_validate(data)
    except FileNotFoundError as e:
        raise ConfigError(f"config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"cannot read config {path or CONFIG_PATH}: {e}") from e
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"invalid configuration in {path}: {e}") from e


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    line = orjson.dumps(payload, default=str).decode("utf-8")
    logging.getLogger(f"event.{module}").info(line)
