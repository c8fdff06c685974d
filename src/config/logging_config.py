# src/config/logging_config.py

"""Per-run timestamped logging for product_showcase.

Each launch (server, one-off render or health check) gets its own file
in ``logs/`` named after the launch time, e.g.
``logs/run_20260214_153045.log``.  The file collects everything under
the ``product_showcase`` logger plus uvicorn's server and access logs,
so a page request and the catalog fetch it triggered sit side by side.
"""

import copy
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from src.config.settings import Settings

ROOT_LOGGER_NAME = "product_showcase"

# uvicorn.error propagates to "uvicorn"; access does not
SERVER_LOGGER_NAMES: tuple[str, ...] = ("uvicorn", "uvicorn.access")

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _run_log_path() -> Path:
    """Timestamped log path for this launch; creates ``logs/``."""
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Settings.LOGS_DIR / f"run_{stamp}.log"


def _file_handler(log_file: Path) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(Settings.CONSOLE_LOG_LEVEL)
    handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    return handler


def setup_logging() -> Path:
    """Install the run's handlers and return the log file path.

    The project logger gets a DEBUG file handler and a stderr handler
    at ``Settings.CONSOLE_LOG_LEVEL``.  Calling this again is a no-op
    apart from returning a fresh path.
    """
    log_file = _run_log_path()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    if root_logger.handlers:
        return log_file

    root_logger.addHandler(_file_handler(log_file))
    root_logger.addHandler(_console_handler())

    root_logger.info("Logging initialised, log file: %s", log_file)
    return log_file


def server_log_config(log_file: Path) -> dict[str, Any]:
    """Uvicorn's default ``log_config`` plus a handler on *log_file*.

    Uvicorn applies its config with ``dictConfig`` at startup, which
    replaces handlers on its loggers, so the run file has to be part
    of that config rather than attached beforehand.
    """
    from uvicorn.config import LOGGING_CONFIG

    config: dict[str, Any] = copy.deepcopy(LOGGING_CONFIG)
    config["formatters"]["run_file"] = {
        "format": _FILE_FORMAT,
        "datefmt": _DATE_FORMAT,
    }
    config["handlers"]["run_file"] = {
        "class": "logging.FileHandler",
        "filename": str(log_file),
        "encoding": "utf-8",
        "formatter": "run_file",
        "level": "DEBUG",
    }
    for name in SERVER_LOGGER_NAMES:
        logger_config = config["loggers"].setdefault(name, {})
        logger_config.setdefault("handlers", []).append("run_file")
    return config
