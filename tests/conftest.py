from collections.abc import Callable, Generator
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from huemon.bridge.client import HueBridgeClient
from huemon.bridge.data import Light


def _reset_loggers() -> None:
    from huemon import logging as hm_logging

    hm_logging.COMPONENT_LOGGERS.clear()

    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if logger_name.startswith("huemon") or logger_name.startswith("test_"):
            logger = logging.getLogger(logger_name)
            # Close all handlers before clearing
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)
            logger.propagate = True


@pytest.fixture(autouse=True)
def clear_logger_cache() -> Generator[None, None, None]:
    """Clear the logger cache before and after each test to prevent test interference."""
    _reset_loggers()
    yield
    _reset_loggers()


@pytest.fixture
def sample_lights() -> list[Light]:
    return [
        Light(light_id=1, model_id="LCT015", is_on=True, name="Ceiling"),
        Light(light_id=2, model_id="LCX004", is_on=False, name="Play left"),
        Light(light_id=3, model_id="LWB010", is_on=False, name="Hallway"),
        Light(light_id=4, model_id="LCX004", is_on=True, name="Play right"),
        Light(light_id=5, model_id="LCT024", is_on=False, name="Play bar"),
    ]


@pytest.fixture
def mock_client(sample_lights: list[Light]) -> MagicMock:
    """A HueBridgeClient mock whose get_light answers from sample_lights."""
    mock = MagicMock(spec=HueBridgeClient)
    by_id = {light.light_id: light for light in sample_lights}
    mock.get_lights.return_value = list(sample_lights)
    mock.get_light.side_effect = lambda light_id: by_id[light_id]
    return mock


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str) -> Path:
        config_path = tmp_path / "huemon.ini"
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write
