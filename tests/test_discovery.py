from unittest.mock import MagicMock

import pytest
import requests

from huemon.bridge.client import BridgeError, LinkButtonNotPressedError
from huemon.bridge.data import DiscoveryResult
from huemon.discovery import discover_and_register


def _response(payload: object) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.json.return_value = payload
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


class TestDiscoverAndRegister:
    def test_returns_address_and_token(self, session: MagicMock) -> None:
        session.request.side_effect = [
            _response([{"id": "001788fffe100491", "internalipaddress": "192.168.1.20"}]),
            _response([{"success": {"username": "83b7780291a6ceffbe0bd049104df"}}]),
        ]

        result = discover_and_register("workstation", session=session)

        assert result == DiscoveryResult(
            address="192.168.1.20", username="83b7780291a6ceffbe0bd049104df"
        )
        assert result.address
        assert result.username
        register_call = session.request.call_args_list[1]
        assert register_call.args == ("POST", "http://192.168.1.20/api")
        assert register_call.kwargs["json"] == {"devicetype": "workstation"}

    def test_link_button_not_pressed(self, session: MagicMock) -> None:
        session.request.side_effect = [
            _response([{"internalipaddress": "192.168.1.20"}]),
            _response([{"error": {"type": 101, "description": "link button not pressed"}}]),
        ]

        with pytest.raises(LinkButtonNotPressedError):
            discover_and_register("workstation", session=session)

    def test_no_bridge(self, session: MagicMock) -> None:
        session.request.return_value = _response([])

        with pytest.raises(BridgeError):
            discover_and_register("workstation", session=session)
        assert session.request.call_count == 1
