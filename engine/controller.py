"""
controller.py — Run Controller
===============================
The RunController is the ONLY object the UI interacts with during a
run.  It owns the lifecycle state, the metrics and the published
snapshot, and drives one algorithm generator at a time.

State machine:
    IDLE     →  start()         →  RUNNING
    RUNNING  →  pause_resume()  →  PAUSED
    PAUSED   →  pause_resume()  →  RUNNING
    RUNNING  →  (generator exhausted)  →  IDLE
    any      →  reset()         →  STOPPED  →  IDLE

Every `yield` in an algorithm is a suspension point.  Two drivers:
    run()   – blocking loop: advance → scheduler.wait_step() → abort check
    tick()  – call from a host loop (e.g. every 50 ms); advances when the
              scheduler says the next step is due

Cancellation closes the generator at its suspension point, so the
algorithm performs no further mutation and publishes nothing more.

Thread safety:
  This class is NOT thread-safe.  Callers serialise access (the web app
  holds a per-session lock).
"""

import logging
import random
import time
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Callable, Generator, List, Optional, Sequence, Tuple

from algorithms import get_algorithm, AlgoInfo
from algorithms.step import Step
from dataset import generate_random
from engine.config import (
    RunConfig, clamp,
    SIZE_MIN, SIZE_MAX, DELAY_MIN_MS, DELAY_MAX_MS,
)
from engine.scheduler import StepScheduler


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    PAUSED  = "paused"
    STOPPED = "stopped"


# ---------------------------------------------------------------------------
# Published snapshot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RunSnapshot:
    """
    Read-only view of the controller handed to observers and the UI.

    Attributes:
        version     : Increments on every publish.
        state       : Current RunState.
        algorithm   : Selected registry key.
        array       : Array as currently displayed.
        original    : Array restored by reset().
        active      : Indices being compared / written.
        settled     : Indices in their final position.
        comparisons : Comparisons so far this run.
        swaps       : Swaps so far this run.
        explanation : Text of the latest step.
        notice      : User-visible message (e.g. unknown algorithm).
    """

    version:     int
    state:       RunState
    algorithm:   str
    size:        int
    delay_ms:    int
    array:       Tuple[int, ...]
    original:    Tuple[int, ...]
    active:      Tuple[int, ...]
    settled:     Tuple[int, ...]
    comparisons: int
    swaps:       int
    explanation: str = ""
    notice:      str = ""

    @property
    def running(self) -> bool:
        return self.state in (RunState.RUNNING, RunState.PAUSED)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["state"] = self.state.value
        data["running"] = self.running
        for key in ("array", "original", "active", "settled"):
            data[key] = list(data[key])
        return data


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        config      : Current RunConfig (algorithm, size, delay).
        state       : Current RunState.
        original    : The array restored by reset(); set by regenerate() / load().
        array       : The array as last published.
        active      : Active index set.
        settled     : Settled index set.
        comparisons : Comparison count for the current run.
        swaps       : Swap count for the current run.
        notice      : Last user-visible message, "" when none.
        scheduler   : The StepScheduler gating the pace.
    """

    def __init__(
        self,
        config: Optional[RunConfig] = None,
        values: Optional[Sequence[int]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        min_delay_ms: int = DELAY_MIN_MS,
    ):
        self.min_delay_ms: int       = min_delay_ms
        self.config:       RunConfig = (config or RunConfig()).clamped(min_delay_ms)
        self.state:        RunState  = RunState.IDLE
        self.original:     Tuple[int, ...] = ()
        self.array:        Tuple[int, ...] = ()
        self.active:       Tuple[int, ...] = ()
        self.settled:      Tuple[int, ...] = ()
        self.comparisons:  int = 0
        self.swaps:        int = 0
        self.explanation:  str = ""
        self.notice:       str = ""
        self.last_step:    Optional[Step] = None

        self._rng        = rng or random.Random()
        self._generator: Optional[Generator[Step, None, None]] = None
        self._algo:      Optional[AlgoInfo] = None
        self._version:   int = 0
        self._observers: List[Callable[[RunSnapshot], None]] = []

        self.scheduler = StepScheduler(
            delay_ms=self.config.delay_ms,
            paused=lambda: self.state is RunState.PAUSED,
            active=lambda: self.is_active,
            clock=clock,
            sleep=sleep,
        )

        if values is None:
            self.regenerate()
        else:
            self.load(values)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, callback: Callable[[RunSnapshot], None]) -> Callable[[], None]:
        """Call `callback` with every published snapshot.  Returns an unsubscribe function."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def snapshot(self) -> RunSnapshot:
        return RunSnapshot(
            version=self._version,
            state=self.state,
            algorithm=self.config.algorithm,
            size=self.config.size,
            delay_ms=self.config.delay_ms,
            array=self.array,
            original=self.original,
            active=self.active,
            settled=self.settled,
            comparisons=self.comparisons,
            swaps=self.swaps,
            explanation=self.explanation,
            notice=self.notice,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_algorithm(self, key: str) -> bool:
        """Select by registry key.  Ignored while a run is active or when `key` is not a string."""
        if self.is_active or not isinstance(key, str):
            return False
        self.config = RunConfig(key, self.config.size, self.config.delay_ms)
        self.notice = ""
        self._publish()
        return True

    def set_size(self, size: int) -> bool:
        """Clamp to the size bounds and regenerate.  Ignored while a run is active."""
        if self.is_active:
            return False
        size = clamp(size, SIZE_MIN, SIZE_MAX)
        self.config = RunConfig(self.config.algorithm, size, self.config.delay_ms)
        return self.regenerate()

    def set_delay(self, delay_ms: int) -> None:
        """Allowed at any time; takes effect on the next wait."""
        delay_ms = clamp(delay_ms, self.min_delay_ms, DELAY_MAX_MS)
        self.config = RunConfig(self.config.algorithm, self.config.size, delay_ms)
        self.scheduler.delay_ms = delay_ms
        self._publish()

    # ------------------------------------------------------------------
    # Array
    # ------------------------------------------------------------------
    def regenerate(self) -> bool:
        """New random array of the configured size.  No-op while a run is active."""
        if self.is_active:
            return False
        values = generate_random(self.config.size, rng=self._rng)
        logger.debug("Generated %d values", len(values))
        return self.load(values)

    def load(self, values: Sequence[int]) -> bool:
        """Use `values` as the new original array.  No-op while a run is active."""
        if self.is_active:
            return False
        self.original = tuple(values)
        self.array    = self.original
        self._clear_run_state()
        self.notice   = ""
        self._publish()
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_active(self) -> bool:
        return self.state in (RunState.RUNNING, RunState.PAUSED)

    def start(self) -> bool:
        """
        Attach a fresh generator for the selected algorithm and go RUNNING.

        Returns False (and changes nothing but `notice`) when a run is
        already active, the algorithm is unknown, or the algorithm
        rejects the input.
        """
        if self.is_active:
            return False

        info = get_algorithm(self.config.algorithm)
        if info is None:
            self.notice = f"Algorithm not implemented: {self.config.algorithm}"
            logger.warning("Unknown algorithm %r", self.config.algorithm)
            self._publish()
            return False

        try:
            generator = info.fn(list(self.array))
        except ValueError as exc:
            logger.exception("%s rejected the input", info.label)
            self.notice = str(exc)
            self._publish()
            return False

        self._clear_run_state()
        self.notice     = ""
        self._algo      = info
        self._generator = generator
        self.state      = RunState.RUNNING
        self.scheduler.mark()
        logger.info("Started %s on %d elements", info.label, len(self.array))
        self._publish()
        return True

    def pause_resume(self) -> bool:
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
            logger.debug("Paused after %d comparisons", self.comparisons)
        elif self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
            logger.debug("Resumed")
        else:
            return False
        self._publish()
        return True

    def reset(self) -> None:
        """Abort any run, restore the original array and clear all run state."""
        if self.is_active:
            self.state = RunState.STOPPED
            logger.info(
                "Stopped %s after %d comparisons, %d swaps",
                self._algo.label if self._algo else "run", self.comparisons, self.swaps,
            )
            self._publish()
        self._close()
        self.state  = RunState.IDLE
        self.array  = self.original
        self._clear_run_state()
        self.notice = ""
        self._publish()

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def advance(self) -> bool:
        """
        Publish steps up to and including the next suspension point.
        Returns True while the run continues.
        """
        generator = self._generator
        if generator is None or self.state is not RunState.RUNNING:
            return False

        for step in generator:
            self._apply(step)
            if self._generator is not generator:
                # reset() from an observer while we were publishing
                return False
            if step.wait:
                return True

        self._finish()
        return False

    def tick(self, now: Optional[float] = None) -> bool:
        """Host-loop entry point.  Returns True if a step was taken."""
        if self.state is not RunState.RUNNING:
            return False
        if not self.scheduler.ready(now):
            return False
        self.advance()
        return True

    def run(self) -> RunSnapshot:
        """Start and block until the run completes or is aborted."""
        if not self.start():
            return self.snapshot()
        while self.advance():
            self.scheduler.wait_step()
            if not self.is_active:
                break
        return self.snapshot()

    def run_to_completion(self) -> RunSnapshot:
        """
        Start and exhaust the generator with no pacing at all.

        An observer that pauses the run ends the loop early: the run is
        left PAUSED with its generator intact, and resuming continues
        from the same step (via tick() or advance()).
        """
        if not self.start():
            return self.snapshot()
        while self.advance():
            pass
        return self.snapshot()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _apply(self, step: Step) -> None:
        self.last_step   = step
        self.array       = step.array
        self.active      = step.active
        self.settled     = step.settled
        self.comparisons = step.comparisons
        self.swaps       = step.swaps
        if step.explanation:
            self.explanation = step.explanation
        if step.wait:
            self.scheduler.mark()
        self._publish()

    def _finish(self) -> None:
        self._generator = None
        self.state      = RunState.IDLE
        self.active     = ()
        logger.info(
            "Finished %s: %d comparisons, %d swaps",
            self._algo.label if self._algo else "run", self.comparisons, self.swaps,
        )
        self._publish()

    def _close(self) -> None:
        generator, self._generator = self._generator, None
        if generator is not None:
            generator.close()

    def _clear_run_state(self) -> None:
        self.active      = ()
        self.settled     = ()
        self.comparisons = 0
        self.swaps       = 0
        self.explanation = ""
        self.last_step   = None

    def _publish(self) -> None:
        self._version += 1
        snap = self.snapshot()
        for callback in list(self._observers):
            callback(snap)
