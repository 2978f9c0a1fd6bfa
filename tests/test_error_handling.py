"""Tests for error handling across components."""

from unittest.mock import MagicMock

from huemon.bridge.client import BridgeError, HueBridgeClient
from huemon.config import ConfigLoadError
from huemon.keyboard.numlock_controller import NumlockController
from huemon.lights.switch import LightSwitch
from huemon.system_state.screensaver_monitor import (
    ScreensaverCommandError,
    ScreensaverMonitor,
)


class TestErrorHandlingProperties:
    """Test that non-fatal components have a last_error_msg attribute."""

    def test_light_switch_has_last_error_msg(self) -> None:
        switch = LightSwitch(MagicMock(spec=HueBridgeClient))
        assert hasattr(switch, "last_error_msg")
        assert switch.last_error_msg is None

    def test_numlock_controller_has_last_error_msg(self) -> None:
        controller = NumlockController(manage_numlock=True)
        assert hasattr(controller, "last_error_msg")
        assert controller.last_error_msg is None

    def test_screensaver_monitor_has_last_error_msg(self) -> None:
        monitor = ScreensaverMonitor()
        assert hasattr(monitor, "last_error_msg")
        assert monitor.last_error_msg is None


class TestFatalErrorTypes:
    """Fatal errors are plain exceptions, distinct from each other."""

    def test_fatal_errors_are_exceptions(self) -> None:
        for error_type in (ConfigLoadError, BridgeError, ScreensaverCommandError):
            assert issubclass(error_type, Exception)

    def test_fatal_errors_are_unrelated(self) -> None:
        assert not issubclass(BridgeError, ConfigLoadError)
        assert not issubclass(ScreensaverCommandError, BridgeError)
        assert not issubclass(ConfigLoadError, ScreensaverCommandError)


class TestBulbFailureDoesNotStopOthers:
    def test_every_light_is_attempted_when_all_fail(self) -> None:
        client = MagicMock(spec=HueBridgeClient)
        client.get_light.side_effect = BridgeError("bridge busy")
        switch = LightSwitch(client)

        assert switch.turn_off([1, 2, 3]) == 0
        assert [c.args[0] for c in client.get_light.call_args_list] == [1, 2, 3]
        assert switch.last_error_msg == "Failed to get light 3: bridge busy"
