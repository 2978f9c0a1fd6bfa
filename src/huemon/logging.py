from datetime import datetime
import logging
from pathlib import Path
import sys
from typing import Literal

COMPONENT_LOGGERS: dict[str, logging.Logger] = {}

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_default_log_dir() -> Path:
    """Return the default log directory: ~/.logs/huemon/"""
    return Path.home() / ".logs" / "huemon"


def _add_file_handler(logger: logging.Logger, log_dir: Path) -> None:
    log_dir = log_dir.expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)

    date_str = datetime.now().strftime("%Y-%m-%d")
    log_file = log_dir / f"huemon-{date_str}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(file_handler)


def get_logger(name: str, log_dir: Path | None = None) -> logging.Logger:
    """Return the logger for a component, creating its handlers on first use.

    Dotted names (``huemon.bridge``) only get a level; their records reach
    the handlers of the top-level logger through propagation. A ``log_dir``
    passed after the logger was first created still attaches the file handler.
    """
    if name in COMPONENT_LOGGERS:
        logger = COMPONENT_LOGGERS[name]
        has_file_handler = any(
            isinstance(h, logging.FileHandler) for h in logger.handlers
        )
        if log_dir is not None and "." not in name and not has_file_handler:
            _add_file_handler(logger, log_dir)
        return logger

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if "." not in name:
        if log_dir is not None:
            _add_file_handler(logger, log_dir)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        logger.addHandler(console_handler)

    COMPONENT_LOGGERS[name] = logger
    return logger


def setup_logging(log_dir: Path | None = None) -> dict[str, logging.Logger]:
    loggers: dict[str, logging.Logger] = {}

    components = [
        "huemon",
        "huemon.bridge",
        "huemon.lights",
        "huemon.system_state",
        "huemon.keyboard",
        "huemon.daemon",
    ]

    for component in components:
        loggers[component] = get_logger(component, log_dir)

    return loggers


def set_console_level(level: int) -> None:
    """Change the level of every console handler on the registered loggers."""
    for logger in COMPONENT_LOGGERS.values():
        for handler in logger.handlers:
            if not isinstance(handler, logging.FileHandler) and isinstance(
                handler, logging.StreamHandler
            ):
                handler.setLevel(level)


def get_level_name(
    level: int,
) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
    return logging.getLevelName(level)  # type: ignore[return-value]
