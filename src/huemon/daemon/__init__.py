"""Daemon module for the screensaver watch loop."""

from huemon.daemon.watch_controller import WatchConfig, WatchController

__all__ = ["WatchConfig", "WatchController"]
