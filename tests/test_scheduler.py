"""Tests for the pace / pause gates of the step scheduler."""

from __future__ import annotations

import pytest

from engine.scheduler import POLL_INTERVAL_MS, StepScheduler


POLL = POLL_INTERVAL_MS / 1000.0


class TestPaceGate:
    def test_waits_the_configured_delay(self, clock):
        sched = StepScheduler(delay_ms=200, clock=clock, sleep=clock.sleep)
        sched.wait_step()
        assert clock.now == pytest.approx(0.2)
        assert all(s <= POLL + 1e-9 for s in clock.sleeps)

    def test_zero_delay_does_not_sleep(self, clock):
        sched = StepScheduler(delay_ms=0, clock=clock, sleep=clock.sleep)
        sched.wait_step()
        assert clock.sleeps == []

    def test_delay_is_sampled_when_the_wait_starts(self, clock):
        sched = StepScheduler(delay_ms=100, clock=clock)

        def sleep(seconds):
            sched.delay_ms = 1000
            clock.sleep(seconds)

        sched._sleep = sleep
        sched.wait_step()
        assert clock.now == pytest.approx(0.1)
        assert sched.delay_ms == 1000

    def test_stop_unblocks_the_wait(self, clock):
        active = [True]

        def sleep(seconds):
            clock.sleep(seconds)
            active[0] = False

        sched = StepScheduler(delay_ms=1500, active=lambda: active[0], clock=clock, sleep=sleep)
        sched.wait_step()
        assert len(clock.sleeps) == 1


class TestPauseGate:
    def test_polls_until_resumed(self, clock):
        paused = [True]

        def sleep(seconds):
            clock.sleep(seconds)
            if len(clock.sleeps) == 3:
                paused[0] = False

        sched = StepScheduler(delay_ms=0, paused=lambda: paused[0], clock=clock, sleep=sleep)
        sched.wait_step()
        assert clock.sleeps == [POLL, POLL, POLL]

    def test_inactive_run_is_never_held(self, clock):
        sched = StepScheduler(
            delay_ms=500,
            paused=lambda: True,
            active=lambda: False,
            clock=clock,
            sleep=clock.sleep,
        )
        sched.wait_step()
        assert clock.sleeps == []


class TestReady:
    def test_due_after_delay(self, clock):
        sched = StepScheduler(delay_ms=500, clock=clock)
        sched.mark(now=10.0)
        assert not sched.ready(now=10.4)
        assert sched.ready(now=10.5)

    def test_never_ready_while_paused(self, clock):
        sched = StepScheduler(delay_ms=0, paused=lambda: True, clock=clock)
        sched.mark(now=0.0)
        assert not sched.ready(now=100.0)

    def test_mark_uses_the_clock_by_default(self, clock):
        sched = StepScheduler(delay_ms=100, clock=clock)
        clock.now = 3.0
        sched.mark()
        assert not sched.ready()
        clock.now = 3.2
        assert sched.ready()
