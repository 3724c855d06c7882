"""
scheduler.py — Step Scheduler
==============================
The suspension gate every algorithm step passes through.

Two gates:
  • Pace gate  – wait the configured delay.  The delay is read when the
                 wait starts, so a slider change applies to the next
                 step, never to one already waiting.
  • Pause gate – while the run is paused, sleep in short poll slices
                 until it is resumed.

Both gates give up as soon as the run is no longer active (stop /
reset); the caller then checks the abort flag.  wait_step() never
raises.

Two ways to drive it:
  wait_step()  – blocking, for a dedicated run loop (RunController.run)
  ready(now)   – non-blocking, for a host loop that ticks periodically
                 (the web UI polls /api/tick)
"""

import logging
import time
from typing import Callable, Optional

from engine.config import DEFAULT_DELAY_MS


logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 50


class StepScheduler:
    """
    Attributes:
        delay_ms : Current per-step delay.  Mutable at any time.
    """

    def __init__(
        self,
        delay_ms: int = DEFAULT_DELAY_MS,
        paused: Callable[[], bool] = lambda: False,
        active: Callable[[], bool] = lambda: True,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.delay_ms:  int   = delay_ms
        self._paused          = paused
        self._active          = active
        self._clock           = clock
        self._sleep           = sleep
        self._due:      float = 0.0

    # ------------------------------------------------------------------
    # Blocking
    # ------------------------------------------------------------------
    def wait_step(self) -> None:
        """Block for one step: pause gate, pace gate, pause gate."""
        self._wait_while_paused()
        self._wait_delay(self.delay_ms)
        self._wait_while_paused()
        self.mark()

    def _wait_delay(self, delay_ms: int) -> None:
        deadline = self._clock() + delay_ms / 1000.0
        poll = POLL_INTERVAL_MS / 1000.0
        while self._active():
            remaining = deadline - self._clock()
            if remaining <= 0:
                return
            self._sleep(min(remaining, poll))

    def _wait_while_paused(self) -> None:
        if not self._paused():
            return
        logger.debug("Paused, polling every %d ms", POLL_INTERVAL_MS)
        while self._paused() and self._active():
            self._sleep(POLL_INTERVAL_MS / 1000.0)

    # ------------------------------------------------------------------
    # Non-blocking
    # ------------------------------------------------------------------
    def mark(self, now: Optional[float] = None) -> None:
        """Record that a step was just taken; the next one is due after delay_ms."""
        if now is None:
            now = self._clock()
        self._due = now + self.delay_ms / 1000.0

    def ready(self, now: Optional[float] = None) -> bool:
        """True if not paused and the delay captured at the last mark() has elapsed."""
        if self._paused():
            return False
        if now is None:
            now = self._clock()
        return now >= self._due
