"""Messages exchanged between the animation models and their host."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StepChars:
    """Advance every cycling character by one frame."""


@dataclass(frozen=True, slots=True)
class EllipsisTick:
    """Advance the ellipsis spinner identified by ``id``."""

    id: int
    tag: int


@dataclass(frozen=True, slots=True)
class Tick:
    """Deliver ``message`` back to the model after ``delay`` seconds.

    The model never sleeps or owns a timer; the host turns each tick into
    a real timer and feeds the message back through ``update()``.
    """

    delay: float
    message: object


def step_chars(fps: float) -> Tick:
    """Schedule the next primary-cadence frame."""
    return Tick(1.0 / fps, StepChars())
