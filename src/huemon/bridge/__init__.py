"""Client for the Philips Hue bridge REST API."""

from huemon.bridge.client import (
    BridgeError,
    HueBridgeClient,
    LinkButtonNotPressedError,
)
from huemon.bridge.data import DiscoveryResult, Light

__all__ = [
    "BridgeError",
    "DiscoveryResult",
    "HueBridgeClient",
    "Light",
    "LinkButtonNotPressedError",
]
