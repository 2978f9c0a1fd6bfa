"""WatchController - polls the screensaver and switches lights and Num Lock to match."""

from collections.abc import Iterable
from dataclasses import dataclass
from threading import Event

from huemon.keyboard.numlock_controller import NumlockController
from huemon.lights.switch import LightSwitch
from huemon.logging import get_logger
from huemon.system_state.screensaver_monitor import ScreensaverMonitor, ScreensaverState

logger = get_logger("huemon.daemon")

DEFAULT_POLL_INTERVAL_SECONDS = 3.0


@dataclass(frozen=True)
class WatchConfig:
    """Configuration for the watch loop."""

    light_ids: tuple[int, ...]
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS


class WatchController:
    """Runs the read-decide-act cycle on a fixed interval.

    Each tick reads the screensaver state and maps it to an action:

    - blanked / locked: selected lights off, Num Lock off
    - non-blanked: selected lights on, Num Lock on
    - anything else: logged, nothing done

    The loop runs in the calling thread and every tick completes before the
    next wait starts. ScreensaverCommandError is not caught here: losing the
    screensaver status ends the loop.
    """

    def __init__(
        self,
        config: WatchConfig,
        light_switch: LightSwitch,
        numlock: NumlockController,
        screensaver_monitor: ScreensaverMonitor | None = None,
    ) -> None:
        if config.poll_interval_seconds <= 0:
            msg = "Poll interval must be positive"
            logger.error(msg)
            raise ValueError(msg)

        self._config = config
        self._light_switch = light_switch
        self._numlock = numlock
        self._screensaver_monitor = screensaver_monitor or ScreensaverMonitor()
        self._stop_event = Event()
        self._tick_count = 0

    @property
    def light_ids(self) -> tuple[int, ...]:
        return self._config.light_ids

    @property
    def tick_count(self) -> int:
        """Return the number of completed ticks."""
        return self._tick_count

    @property
    def is_stopping(self) -> bool:
        return self._stop_event.is_set()

    def lights_on(self) -> None:
        self._light_switch.turn_on(self._config.light_ids)
        self._numlock.turn_on()

    def lights_off(self) -> None:
        self._light_switch.turn_off(self._config.light_ids)
        self._numlock.turn_off()

    def dispatch(self, state: ScreensaverState, token: str = "") -> None:
        """Apply the action for one screensaver state."""
        if state.is_idle:
            self.lights_off()
        elif state is ScreensaverState.NON_BLANKED:
            self.lights_on()
        else:
            logger.info("Got unknown state: %s", token or state.value)

    def tick(self) -> ScreensaverState:
        """Perform one full read-decide-act cycle."""
        token = self._screensaver_monitor.read_state()
        logger.info("Screensaver state: %s", token)
        state = ScreensaverState.from_token(token)
        self.dispatch(state, token)
        self._tick_count += 1
        return state

    def run(self) -> None:
        """Poll until stop() is called."""
        self._stop_event.clear()
        logger.info(
            "Watching screensaver every %ss for %d light(s)",
            self._config.poll_interval_seconds,
            len(self._config.light_ids),
        )
        while not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(self._config.poll_interval_seconds)
        logger.info("Watch loop stopped after %d tick(s)", self._tick_count)

    def stop(self) -> None:
        """Ask the loop to exit once the current tick has finished."""
        self._stop_event.set()

    @classmethod
    def for_lights(
        cls,
        light_ids: Iterable[int],
        light_switch: LightSwitch,
        numlock: NumlockController,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
    ) -> "WatchController":
        return cls(
            WatchConfig(tuple(light_ids), poll_interval_seconds),
            light_switch,
            numlock,
        )
