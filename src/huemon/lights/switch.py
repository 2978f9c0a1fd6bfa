"""LightSwitch - idempotent on/off for a set of bridge lights."""

from collections.abc import Iterable

from huemon.bridge.client import BridgeError, HueBridgeClient
from huemon.logging import get_logger

logger = get_logger("huemon.lights")


class LightSwitch:
    """Switches selected lights, touching only those not already in the target state.

    A light that cannot be fetched or switched is logged and skipped; the
    remaining lights are still processed.
    """

    def __init__(self, client: HueBridgeClient) -> None:
        self._client = client
        self.last_error_msg: str | None = None

    def apply(self, desired_on: bool, light_ids: Iterable[int]) -> int:  # noqa: FBT001
        """Bring every light to ``desired_on``.

        Returns:
            The number of lights that were actually switched.
        """
        switched = 0
        for light_id in light_ids:
            try:
                light = self._client.get_light(light_id)
            except BridgeError as e:
                self._record_error(f"Failed to get light {light_id}: {e}")
                continue

            if light.is_on == desired_on:
                continue

            try:
                self._client.set_light_on(light_id, desired_on)
            except BridgeError as e:
                self._record_error(f"Failed to switch light {light_id}: {e}")
                continue

            switched += 1
            logger.info(
                "Light %d (%s) turned %s", light_id, light.name, "on" if desired_on else "off"
            )

        return switched

    def turn_on(self, light_ids: Iterable[int]) -> int:
        return self.apply(True, light_ids)  # noqa: FBT003

    def turn_off(self, light_ids: Iterable[int]) -> int:
        return self.apply(False, light_ids)  # noqa: FBT003

    def _record_error(self, msg: str) -> None:
        logger.warning(msg)
        self.last_error_msg = msg
