"""Shared fixtures: a fake clock and controller / app factories."""

from __future__ import annotations

import pytest

from engine import RunConfig, RunController
from main import create_app


class FakeClock:
    """Monotonic clock that only moves when something sleeps on it."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_controller(clock):
    def factory(values, algorithm="bubble", delay_ms=0, sleep=None):
        config = RunConfig(algorithm=algorithm, size=max(len(values), 5), delay_ms=delay_ms)
        return RunController(
            config=config,
            values=values,
            clock=clock,
            sleep=sleep or clock.sleep,
            min_delay_ms=0,
        )
    return factory


@pytest.fixture
def app():
    return create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "MIN_DELAY_MS": 0,
        "DEFAULT_DELAY_MS": 0,
    })


@pytest.fixture
def client(app):
    return app.test_client()
