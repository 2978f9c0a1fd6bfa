"""First-time bridge discovery and user registration."""

import requests

from huemon.bridge.client import HueBridgeClient
from huemon.bridge.data import DiscoveryResult
from huemon.logging import get_logger

logger = get_logger("huemon.bridge")


def discover_and_register(
    hostname: str, session: requests.Session | None = None
) -> DiscoveryResult:
    """Find the local bridge and register ``hostname`` as a new user on it.

    The bridge's link button must be pressed before calling this; otherwise
    LinkButtonNotPressedError is raised.

    Args:
        hostname: Device name the bridge records for the new user.
        session: Optional HTTP session, mainly for tests.

    Returns:
        The bridge address and the new user token.
    """
    bridge = HueBridgeClient.discover(session=session)
    username = bridge.create_user(hostname)
    bridge = bridge.login(username)
    logger.info("Bridge %s registered user %s", bridge.address, username)
    return DiscoveryResult(address=bridge.address, username=username)
