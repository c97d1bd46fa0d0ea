"""A single animated character and its time-derived lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random

CHAR_RUNES = "0123456789abcdefABCDEF~!@#$£€%^&*()+=_"
INITIAL_GLYPH = "."


class CharState(Enum):
    """Lifecycle stage of a cycling character."""

    INITIAL = auto()
    CYCLING = auto()
    END_OF_LIFE = auto()


def random_rune(rng: random.Random) -> str:
    return rng.choice(CHAR_RUNES)


@dataclass(slots=True)
class CyclingChar:
    """A single animated character.

    ``final_value`` of None means the character cycles forever. Otherwise it
    settles to ``final_value`` once its initial delay has elapsed. ``lifetime``
    is kept for each label character but does not delay settling.
    """

    final_value: str | None
    initial_delay: float
    lifetime: float = 0.0
    current_value: str = INITIAL_GLYPH

    @property
    def cycles_forever(self) -> bool:
        return self.final_value is None

    def state(self, start: float, now: float) -> CharState:
        """Derive the lifecycle stage from the animation start and the current time."""
        begins_at = start + self.initial_delay
        if now < begins_at:
            return CharState.INITIAL
        if self.final_value is not None and now > begins_at:
            return CharState.END_OF_LIFE
        return CharState.CYCLING

    def advance(self, start: float, now: float, rng: random.Random) -> CharState:
        """Recompute ``current_value`` for the frame at ``now``."""
        state = self.state(start, now)
        if state is CharState.INITIAL:
            self.current_value = INITIAL_GLYPH
        elif state is CharState.CYCLING:
            self.current_value = random_rune(rng)
        else:
            assert self.final_value is not None
            self.current_value = self.final_value
        return state
