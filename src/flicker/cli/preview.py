"""Inline preview of the animation without starting the TUI."""

from __future__ import annotations

import heapq
import itertools
import time
from typing import TYPE_CHECKING

from rich.live import Live

from flicker.animation.cycling import CyclingChars

if TYPE_CHECKING:
    from rich.console import Console

    from flicker.animation.messages import Tick
    from flicker.config import AnimationConfig


def run_preview(
    console: Console,
    label: str,
    chars: int,
    config: AnimationConfig,
    duration: float,
) -> CyclingChars:
    """Drive the animation inline for ``duration`` seconds.

    Ticks are kept on a heap ordered by due time; the loop sleeps until the
    next one is due and redraws after every delivered message.
    """
    model = CyclingChars(
        chars,
        label,
        color_system=console.color_system,
        config=config,
    )
    order = itertools.count()
    pending: list[tuple[float, int, object]] = []

    def schedule(ticks: list[Tick]) -> None:
        now = time.monotonic()
        for tick in ticks:
            heapq.heappush(pending, (now + tick.delay, next(order), tick.message))

    deadline = time.monotonic() + duration
    schedule(model.init())
    with Live(model.render(), console=console, auto_refresh=False, transient=True) as live:
        while pending:
            due, _, message = heapq.heappop(pending)
            if due > deadline:
                break
            time.sleep(max(0.0, due - time.monotonic()))
            schedule(model.update(message))
            live.update(model.render(), refresh=True)
    return model
