"""HueBridgeClient - thin wrapper around the Hue bridge v1 REST API."""

from typing import Any

import requests

from huemon.bridge.data import Light
from huemon.logging import get_logger

logger = get_logger("huemon.bridge")

DISCOVERY_URL = "https://discovery.meethue.com/"
REQUEST_TIMEOUT_SECONDS = 5.0

# Hue API error type returned by POST /api before the link button is pressed
LINK_BUTTON_NOT_PRESSED = 101


class BridgeError(Exception):
    """Raised when the bridge cannot be reached or reports an error."""


class LinkButtonNotPressedError(BridgeError):
    """Raised when user registration is attempted without pressing the link button."""


class HueBridgeClient:
    """Talks to a single Hue bridge on behalf of one registered user.

    All calls are blocking and share one ``requests.Session``. Transport
    failures, non-2xx responses, undecodable bodies and error entries in the
    bridge's JSON replies are all raised as ``BridgeError``.
    """

    def __init__(
        self,
        address: str = "",
        username: str = "",
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.address = address
        self.username = username
        self._session = session or requests.Session()
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"HueBridgeClient(address={self.address!r}, username={self.username!r})"

    @classmethod
    def discover(
        cls,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> "HueBridgeClient":
        """Find a bridge on the local network via the Hue discovery service.

        Returns:
            A client bound to the first bridge reported, with no user yet.
        """
        client = cls(session=session, timeout=timeout)
        bridges = client._request("GET", DISCOVERY_URL)

        if not isinstance(bridges, list) or not bridges:
            msg = "No Hue bridge found on the local network"
            raise BridgeError(msg)

        first = bridges[0] if isinstance(bridges[0], dict) else {}
        address = first.get("internalipaddress", "")
        if not address:
            msg = f"Discovery returned no bridge address: {bridges[0]!r}"
            raise BridgeError(msg)

        client.address = address
        logger.info("Discovered Hue bridge at %s", address)
        return client

    def create_user(self, device_type: str) -> str:
        """Register a new user on the bridge.

        The bridge's link button must have been pressed shortly before.

        Args:
            device_type: Name the bridge shows for this device.

        Returns:
            The new username (API token).
        """
        payload = self._request(
            "POST", f"{self._base_url()}/api", json={"devicetype": device_type}
        )
        for entry in payload if isinstance(payload, list) else []:
            success = entry.get("success") if isinstance(entry, dict) else None
            username = success.get("username") if isinstance(success, dict) else None
            if username:
                self.username = username
                logger.info("Registered user for device %s", device_type)
                return username

        msg = f"Bridge did not return a username: {payload!r}"
        raise BridgeError(msg)

    def login(self, username: str) -> "HueBridgeClient":
        """Return a client for the same bridge authenticated as ``username``."""
        return HueBridgeClient(
            address=self.address,
            username=username,
            session=self._session,
            timeout=self._timeout,
        )

    def get_lights(self) -> list[Light]:
        """List every light known to the bridge, in the order the bridge reports."""
        payload = self._request("GET", f"{self._user_url()}/lights")
        if not isinstance(payload, dict):
            msg = f"Unexpected lights payload: {payload!r}"
            raise BridgeError(msg)
        return [self._parse_light(light_id, data) for light_id, data in payload.items()]

    def get_light(self, light_id: int) -> Light:
        payload = self._request("GET", f"{self._user_url()}/lights/{light_id}")
        return self._parse_light(light_id, payload)

    def set_light_on(self, light_id: int, on: bool) -> None:  # noqa: FBT001
        """Switch a light on or off."""
        self._request(
            "PUT", f"{self._user_url()}/lights/{light_id}/state", json={"on": on}
        )
        logger.debug("Light %d turned %s", light_id, "on" if on else "off")

    def _base_url(self) -> str:
        if not self.address:
            msg = "Bridge address is not configured"
            raise BridgeError(msg)
        return f"http://{self.address}"

    def _user_url(self) -> str:
        return f"{self._base_url()}/api/{self.username}"

    def _request(self, method: str, url: str, json: dict[str, Any] | None = None) -> Any:  # noqa: ANN401
        try:
            response = self._session.request(method, url, json=json, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            msg = f"{method} {url} failed: {e}"
            raise BridgeError(msg) from e
        except ValueError as e:
            msg = f"{method} {url} returned invalid JSON: {e}"
            raise BridgeError(msg) from e

        self._raise_for_api_error(payload)
        return payload

    @staticmethod
    def _raise_for_api_error(payload: Any) -> None:  # noqa: ANN401
        if not isinstance(payload, list):
            return
        for entry in payload:
            if not isinstance(entry, dict) or "error" not in entry:
                continue
            error = entry["error"]
            description = error.get("description", "unknown error")
            if error.get("type") == LINK_BUTTON_NOT_PRESSED:
                raise LinkButtonNotPressedError(description)
            msg = f"Bridge error {error.get('type')}: {description}"
            raise BridgeError(msg)

    @staticmethod
    def _parse_light(light_id: int | str, data: Any) -> Light:  # noqa: ANN401
        if not isinstance(data, dict):
            msg = f"Unexpected payload for light {light_id}: {data!r}"
            raise BridgeError(msg)
        try:
            parsed_id = int(light_id)
        except ValueError as e:
            msg = f"Invalid light id: {light_id!r}"
            raise BridgeError(msg) from e

        state = data.get("state") or {}
        return Light(
            light_id=parsed_id,
            model_id=data.get("modelid", ""),
            is_on=bool(state.get("on", False)),
            name=data.get("name", ""),
        )
