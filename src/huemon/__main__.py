import argparse
import logging as logging_module
from pathlib import Path
import signal
import socket
import sys
from typing import NoReturn, TypedDict, cast

from huemon.bridge.client import BridgeError, HueBridgeClient
from huemon.config import DEFAULT_CONFIG_PATH, ConfigLoadError, load_config
from huemon.daemon.watch_controller import WatchController
from huemon.discovery import discover_and_register
from huemon.keyboard.numlock_controller import NumlockController
from huemon.lights.selector import select_lights
from huemon.lights.switch import LightSwitch
from huemon.logging import get_default_log_dir, get_logger, set_console_level, setup_logging
from huemon.system_state.screensaver_monitor import ScreensaverCommandError

logger = get_logger("huemon")

COMMANDS = ("on", "off", "watch")


class CliArgs(TypedDict):
    command: str
    cfg: Path
    discover: bool
    hostname: str


def parse_args(argv: list[str] | None = None) -> CliArgs:
    """Parse command-line arguments.

    Single-dash long options (``-command watch``) are the documented form;
    the double-dash spelling is accepted too.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="huemon",
        description="huemon - switch Hue lights and Num Lock with the screensaver",
        allow_abbrev=False,
    )

    parser.add_argument(
        "-command",
        "--command",
        default="",
        help=f"Action to run: {', '.join(COMMANDS)}",
    )

    parser.add_argument(
        "-cfg",
        "--cfg",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to configuration ini (default: {DEFAULT_CONFIG_PATH})",
    )

    parser.add_argument(
        "-discover",
        "--discover",
        action="store_true",
        help="Discover the Hue bridge and register a new user",
    )

    parser.add_argument(
        "-hostname",
        "--hostname",
        default=socket.gethostname(),
        help="Device name used for discovery (default: system hostname)",
    )

    parsed = parser.parse_args(argv)

    return cast(
        "CliArgs",
        {
            "command": parsed.command,
            "cfg": parsed.cfg,
            "discover": parsed.discover,
            "hostname": parsed.hostname,
        },
    )


def configure_logging(*, debug_mode: bool, log_dir: Path | None = None) -> None:
    """Configure logging based on debug mode.

    Args:
        debug_mode: Whether debug mode is enabled.
        log_dir: Optional custom log directory.
    """
    if not debug_mode:
        log_dir = None
    elif log_dir is None:
        log_dir = get_default_log_dir()

    setup_logging(log_dir)

    if debug_mode:
        set_console_level(logging_module.DEBUG)


def run_discovery(hostname: str) -> int:
    """Discover the bridge, register ``hostname`` and print the config section."""
    logger.info("Press the link button on the Hue bridge before registering")
    try:
        result = discover_and_register(hostname)
    except BridgeError:
        logger.exception("Bridge discovery failed")
        return 1

    logger.info("Bridge address: %s", result.address)
    logger.info("User token: %s", result.username)
    print(result.as_config_section())  # noqa: T201
    return 0


def run_command(command: str, config_path: Path) -> int:
    """Load the configuration, select lights and run one command.

    Returns:
        The process exit status.
    """
    try:
        config = load_config(config_path)
    except ConfigLoadError:
        logger.exception("Unable to load configuration")
        return 1

    configure_logging(debug_mode=config.debug)
    if config.debug:
        logger.debug("Debug mode enabled")
        logger.debug("%s", config)

    client = HueBridgeClient(config.address, config.user)
    try:
        lights = client.get_lights()
    except BridgeError:
        logger.exception("Unable to list lights on bridge %s", config.address)
        return 1
    logger.debug("Bridge lights: %s", lights)

    light_ids = select_lights(lights, config.play_model_ids)
    logger.info("Selected lights: %s", list(light_ids))

    numlock = NumlockController(config.manage_numlock)
    numlock.turn_on()

    controller = WatchController.for_lights(light_ids, LightSwitch(client), numlock)

    if command == "on":
        controller.lights_on()
    elif command == "off":
        controller.lights_off()
    elif command == "watch":
        return watch(controller)
    else:
        logger.warning("Unsupported command: `%s`", command)

    return 0


def watch(controller: WatchController) -> int:
    def handle_shutdown(signum: int, frame: object) -> None:  # noqa: ARG001
        sig_name = signal.Signals(signum).name
        logger.info("Received %s signal, shutting down gracefully...", sig_name)
        controller.stop()

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    try:
        controller.run()
    except ScreensaverCommandError:
        logger.exception("Screensaver status unavailable")
        return 1

    logger.info("Shutdown complete")
    return 0


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the application."""
    args = parse_args(argv)

    if args["discover"]:
        sys.exit(run_discovery(args["hostname"]))

    sys.exit(run_command(args["command"], args["cfg"]))


if __name__ == "__main__":
    main()
