"""NumlockController - toggles the Num Lock indicator through numlockx."""

import subprocess  # noqa: S404
from threading import Lock

from huemon.logging import get_logger

logger = get_logger("huemon.keyboard")

NUMLOCK_COMMAND = "numlockx"


class NumlockController:
    """Keeps Num Lock in a requested state while remembering the last state it set.

    The cached state avoids running numlockx on every poll. Check-then-act on
    the cache happens under a lock so two overlapping calls never issue the
    command twice. A failed command leaves the cache untouched, so the next
    call tries again.
    """

    def __init__(self, manage_numlock: bool, command: str = NUMLOCK_COMMAND) -> None:  # noqa: FBT001
        self._manage_numlock = manage_numlock
        self._command = command
        self._is_on = False
        self._lock = Lock()
        self.last_error_msg: str | None = None

    @property
    def is_on(self) -> bool:
        """Return the last Num Lock state successfully set."""
        return self._is_on

    @property
    def enabled(self) -> bool:
        return self._manage_numlock

    def turn_on(self) -> bool:
        """Switch Num Lock on. Returns whether numlockx was invoked."""
        return self._set_state(True)  # noqa: FBT003

    def turn_off(self) -> bool:
        """Switch Num Lock off. Returns whether numlockx was invoked."""
        return self._set_state(False)  # noqa: FBT003

    def _set_state(self, on: bool) -> bool:  # noqa: FBT001
        if not self._manage_numlock:
            logger.debug("Numlock support disabled by configuration")
            return False

        if self._is_on == on:
            return False

        with self._lock:
            if self._is_on == on:
                return False

            arg = "on" if on else "off"
            try:
                subprocess.run(  # noqa: S603
                    [self._command, arg],
                    capture_output=True,
                    check=True,
                )
            except (OSError, subprocess.CalledProcessError) as e:
                error_msg = f"Failed to turn numlock {arg}: {e}"
                logger.error(error_msg)
                self.last_error_msg = error_msg
                return True

            self._is_on = on

        logger.debug("Numlock turned %s", arg)
        return True
