"""ScreensaverMonitor for reading the X screensaver blank/lock state."""

from enum import Enum
import re
import subprocess  # noqa: S404

from huemon.logging import get_logger

logger = get_logger("huemon.system_state")

STATUS_COMMAND = ("xscreensaver-command", "-time")

_LABEL_PREFIX = re.compile(r"^.+: screen")
_SINCE_SUFFIX = re.compile(r" since.*")


class ScreensaverCommandError(Exception):
    """Raised when the screensaver status command cannot be run."""


class ScreensaverState(Enum):
    BLANKED = "blanked"
    LOCKED = "locked"
    NON_BLANKED = "non-blanked"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str) -> "ScreensaverState":
        """Map a parsed status token to a state; anything unrecognised is UNKNOWN."""
        for state in (cls.BLANKED, cls.LOCKED, cls.NON_BLANKED):
            if state.value == token:
                return state
        return cls.UNKNOWN

    @property
    def is_idle(self) -> bool:
        return self in {ScreensaverState.BLANKED, ScreensaverState.LOCKED}


def parse_status_output(output: str) -> str:
    """Extract the state token from ``xscreensaver-command -time`` output.

    ``"XScreenSaver 6.06: screen blanked since Mon Jan  1 00:00:00 2024"``
    becomes ``"blanked"``. Text without the label or the ``since`` suffix is
    returned trimmed but otherwise unchanged.
    """
    result = _LABEL_PREFIX.sub("", output)
    result = _SINCE_SUFFIX.sub("", result)
    return result.strip()


class ScreensaverMonitor:
    """Queries xscreensaver for whether the screen is blanked, locked or active.

    Notes:
        There is no fallback when the status command is unavailable: without it
        the daemon has nothing to act on, so ``read_state`` raises
        ScreensaverCommandError and callers are expected to terminate.
    """

    def __init__(self, command: tuple[str, ...] = STATUS_COMMAND) -> None:
        self._command = command
        self.last_error_msg: str | None = None
        logger.debug("Initialized ScreensaverMonitor")

    def read_state(self) -> str:
        """Run the status command and return the parsed state token.

        Returns:
            ``"blanked"``, ``"locked"``, ``"non-blanked"`` or whatever other
            text the command printed.

        Raises:
            ScreensaverCommandError: If the command is missing or fails.
        """
        try:
            completed = subprocess.run(  # noqa: S603
                self._command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            error_msg = f"Failed to run {' '.join(self._command)}: {e}"
            self.last_error_msg = error_msg
            raise ScreensaverCommandError(error_msg) from e

        return parse_status_output(completed.stdout or "")

    def current_state(self) -> ScreensaverState:
        return ScreensaverState.from_token(self.read_state())
