import logging
from dataclasses import dataclass

from chaikin.config import ANIM_INTERVAL, MAX_STEPS

logger = logging.getLogger(__name__)


@dataclass
class Playback:
    """
    Idle/Playing state machine selecting which cached level is displayed.

    Times are plain floats in seconds (time.monotonic() in the app), passed in
    by the caller so the machine itself never reads a clock.
    """
    max_steps: int = MAX_STEPS
    interval: float = ANIM_INTERVAL
    running: bool = False
    level: int = 0
    last_advance: float = 0.0

    def toggle(self, point_count: int, now: float) -> bool:
        """
        Start or pause playback. Starting always restarts from level 0.
        Does nothing without points; returns the resulting `running` flag.
        """
        if point_count == 0:
            return self.running
        self.running = not self.running
        if self.running:
            self.level = 0
            self.last_advance = now
        logger.info("Playback %s at level %d", "started" if self.running else "paused", self.level)
        return self.running

    def reset(self) -> None:
        self.running = False
        self.level = 0

    def clamp(self, cache_len: int) -> None:
        if self.level >= cache_len:
            self.level = 0

    def tick(self, point_count: int, now: float) -> int:
        """
        Apply the per-render update and return the level to display.

        Fewer than 3 points, or a paused machine, shows level 0; the
        `running` flag itself is left untouched.
        """
        if not self.running or point_count < 3:
            self.level = 0
            return self.level
        if now - self.last_advance >= self.interval:
            self.last_advance = now
            self.level = (self.level + 1) % (self.max_steps + 1)
        return self.level
