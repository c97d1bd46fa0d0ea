"""Deterministic clock and scheduler for driving animation models."""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flicker.animation.cycling import CyclingChars
    from flicker.animation.messages import Tick


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeScheduler:
    """Delivers a model's ticks in due order, moving the fake clock along."""

    def __init__(self, model: CyclingChars, clock: FakeClock) -> None:
        self.model = model
        self.clock = clock
        self.delivered: list[object] = []
        self.scheduled: list[Tick] = []
        self._order = itertools.count()
        self._pending: list[tuple[float, int, object]] = []

    def schedule(self, ticks: list[Tick]) -> None:
        for tick in ticks:
            self.scheduled.append(tick)
            due = self.clock.now + tick.delay
            heapq.heappush(self._pending, (due, next(self._order), tick.message))

    def start(self) -> FakeScheduler:
        self.schedule(self.model.init())
        return self

    def run_until(self, deadline: float) -> None:
        """Deliver every message due at or before ``deadline``."""
        while self._pending and self._pending[0][0] <= deadline:
            due, _, message = heapq.heappop(self._pending)
            self.clock.now = due
            self.delivered.append(message)
            self.schedule(self.model.update(message))
        self.clock.now = deadline
