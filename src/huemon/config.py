"""Loading of the huemon INI configuration file."""

import configparser
from dataclasses import dataclass
from pathlib import Path

from huemon.logging import get_logger

logger = get_logger("huemon")

DEFAULT_CONFIG_PATH = Path("huemon.ini")


class ConfigLoadError(Exception):
    """Raised when the configuration file is missing or cannot be parsed."""


@dataclass(frozen=True)
class Config:
    address: str = ""
    user: str = ""
    play_model_ids: tuple[str, ...] = ("",)
    manage_numlock: bool = False
    debug: bool = False

    def __str__(self) -> str:
        return (
            f"User: {self.user}, Address: {self.address}, "
            f"HuePlayID: {list(self.play_model_ids)}, "
            f"ManageNumlock: {self.manage_numlock}, Debug: {self.debug}"
        )


def _get_string(parser: configparser.ConfigParser, section: str, key: str) -> str:
    if not parser.has_section(section):
        return ""
    return parser.get(section, key, fallback="")


def _get_bool(parser: configparser.ConfigParser, section: str, key: str) -> bool:
    if not parser.has_section(section):
        return False
    try:
        return parser.getboolean(section, key, fallback=False)
    except ValueError:
        logger.warning("Invalid boolean for [%s] %s, using false", section, key)
        return False


def load_config(config_path: Path) -> Config:
    """Load configuration from an INI file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        The populated, immutable configuration.

    Raises:
        ConfigLoadError: If the file does not exist or is not valid INI.
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigLoadError(msg)

    parser = configparser.ConfigParser(interpolation=None)
    try:
        with config_path.open(encoding="utf-8") as f:
            parser.read_file(f)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        msg = f"Failed to load config file {config_path}: {e}"
        raise ConfigLoadError(msg) from e

    config = Config(
        address=_get_string(parser, "Hue", "Address"),
        user=_get_string(parser, "Hue", "User"),
        play_model_ids=tuple(_get_string(parser, "Hue", "HuePlayID").split(",")),
        manage_numlock=_get_bool(parser, "Keyboard", "ManageNumlock"),
        debug=_get_bool(parser, "Default", "Debug"),
    )
    logger.debug("Loaded configuration from: %s", config_path)
    return config
