from __future__ import annotations

import logging
import pathlib
import sys
import threading
import traceback
from typing import Optional, Union

LOG_FILE_NAME = "bomb-reversi.log"


def get_log_path(name: str = LOG_FILE_NAME) -> pathlib.Path:
    return pathlib.Path.cwd() / name


def setup_logging(
    overwrite: bool = True,
    level: int = logging.INFO,
    log_path: Optional[Union[str, pathlib.Path]] = None,
) -> None:
    """Configure root logging to a single file plus STDERR.

    - Overwrites the log file on first setup (per process) if overwrite is True
    - Installs sys.excepthook and threading excepthook
    - Captures warnings via logging
    """
    root_logger = logging.getLogger()
    # Prevent duplicate handlers on re-entry
    if getattr(root_logger, "_br_logging_configured", False):
        return

    path = pathlib.Path(log_path) if log_path is not None else get_log_path()
    fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(process)d:%(threadName)s] %(name)s - %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    handlers: list[logging.Handler] = []
    file_handler = logging.FileHandler(path, mode="w" if overwrite else "a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    handlers.append(file_handler)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    handlers.append(stderr_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    root_logger._br_logging_configured = True  # type: ignore[attr-defined]

    logging.captureWarnings(True)

    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]
    threading.excepthook = _log_thread_exception  # type: ignore[assignment]


def reset_logging() -> None:
    """Drop handlers installed by setup_logging so it can run again."""
    root_logger = logging.getLogger()
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
        h.close()
    root_logger._br_logging_configured = False  # type: ignore[attr-defined]
    logging.captureWarnings(False)
    sys.excepthook = sys.__excepthook__
    threading.excepthook = threading.__excepthook__  # type: ignore[attr-defined]


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("unhandled")
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", tb_str)


def _log_thread_exception(args) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("thread")
    tb_str = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    logger.critical("Unhandled thread exception in %s:\n%s", getattr(args, "thread", None), tb_str)
