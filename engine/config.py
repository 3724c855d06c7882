"""
config.py — Run Configuration
==============================
Bounds and defaults for the three user-facing knobs, plus the RunConfig
record the controller holds.

The input widgets already keep values in range; the core still clamps
whatever it is handed.
"""

from dataclasses import dataclass, replace


SIZE_MIN = 5
SIZE_MAX = 50
DELAY_MIN_MS = 50
DELAY_MAX_MS = 1500

DEFAULT_ALGORITHM = "bubble"
DEFAULT_SIZE = 10
DEFAULT_DELAY_MS = 500


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


@dataclass(frozen=True)
class RunConfig:
    """
    Attributes:
        algorithm : Registry key of the selected algorithm.
        size      : Number of elements in generated arrays.
        delay_ms  : Pause after every suspension point, in milliseconds.
    """

    algorithm: str = DEFAULT_ALGORITHM
    size:      int = DEFAULT_SIZE
    delay_ms:  int = DEFAULT_DELAY_MS

    def clamped(self, min_delay_ms: int = DELAY_MIN_MS) -> "RunConfig":
        return replace(
            self,
            size=clamp(self.size, SIZE_MIN, SIZE_MAX),
            delay_ms=clamp(self.delay_ms, min_delay_ms, DELAY_MAX_MS),
        )
