"""
engine/
-------
Run lifecycle & pacing layer.

    from engine import RunController, RunState, StepScheduler
"""

from engine.config     import RunConfig, clamp
from engine.scheduler  import StepScheduler, POLL_INTERVAL_MS
from engine.controller import RunController, RunSnapshot, RunState

__all__ = [
    "RunConfig",
    "clamp",
    "StepScheduler",
    "POLL_INTERVAL_MS",
    "RunController",
    "RunSnapshot",
    "RunState",
]
