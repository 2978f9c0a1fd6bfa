from huemon.system_state.screensaver_monitor import (
    ScreensaverCommandError,
    ScreensaverMonitor,
    ScreensaverState,
    parse_status_output,
)

__all__ = [
    "ScreensaverCommandError",
    "ScreensaverMonitor",
    "ScreensaverState",
    "parse_status_output",
]
