"""Cycling-characters animation shown while work is in progress.

A row of placeholder characters flickers through random glyphs forever,
followed by a label whose characters flicker briefly and then settle. Once
every label character has settled, an ellipsis spinner starts after a short
pause.

Nothing here owns a timer. ``init()`` and ``update()`` return ``Tick``
commands and the host (see ``CyclingLabel``) delivers their messages back
when they are due. Every character's glyph is derived from the shared start
instant and the current clock reading, so there is no per-character state
to drift.
"""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING

from rich.style import Style
from rich.text import Text

from flicker.animation.chars import CharState, CyclingChar
from flicker.animation.ellipsis import Ellipsis
from flicker.animation.gradient import make_gradient_ramp, ramp_styles
from flicker.animation.messages import EllipsisTick, StepChars, Tick, step_chars
from flicker.config import AnimationConfig, clamp_cycling_chars
from flicker.limits import (
    INITIAL_DELAY_STEPS,
    INITIAL_DELAY_UNIT,
    LIFETIME_STEPS,
    LIFETIME_UNIT,
    MIN_RAMP_SIZE,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

TRUECOLOR = "truecolor"


class CyclingChars:
    """Model for the cycling-characters animation.

    Args:
        initial_chars: Placeholder characters that cycle forever, clamped to
            ``[0, MAX_CYCLING_CHARS]``.
        label: Text that resolves after the placeholders.
        color_system: Color system reported by the console (``"truecolor"``,
            ``"256"``, ``"standard"``, ``"windows"`` or None). The gradient ramp
            is drawn only in truecolor.
        config: Timing and color settings.
        clock: Monotonic clock in seconds.
        rng: Source of randomness for delays and glyphs.
    """

    def __init__(
        self,
        initial_chars: int,
        label: str,
        *,
        color_system: str | None = None,
        config: AnimationConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or AnimationConfig()
        self._clock = clock
        self._rng = rng or random.Random()

        n = clamp_cycling_chars(initial_chars)
        gap = " " if n else ""
        self._label = gap + label
        self._placeholder_count = n

        self.start = self._clock()
        self.ellipsis = Ellipsis(fps=self._config.ellipsis_fps)
        self.ellipsis_started = False
        self.cycling_style = Style.parse(self._config.cycling_color)

        self.ramp: list[Style] = []
        if n >= MIN_RAMP_SIZE and color_system == TRUECOLOR:
            colors = make_gradient_ramp(
                n, self._config.gradient_start, self._config.gradient_end
            )
            self.ramp = ramp_styles(colors)

        self.chars: list[CyclingChar] = [
            CyclingChar(final_value=None, initial_delay=self._initial_delay())
            for _ in range(n)
        ]
        self.chars.extend(
            CyclingChar(
                final_value=rune,
                initial_delay=self._initial_delay(),
                lifetime=self._delay(LIFETIME_STEPS, LIFETIME_UNIT),
            )
            for rune in self._label
        )

        logger.debug(
            "Cycling chars created: placeholders=%d label=%r ramp=%d",
            n,
            label,
            len(self.ramp),
        )

    @property
    def label(self) -> str:
        """The label as animated, including the leading gap when placeholders exist."""
        return self._label

    @property
    def placeholder_count(self) -> int:
        return self._placeholder_count

    def _delay(self, steps: int, unit: float) -> float:
        return self._rng.randrange(steps) * unit

    def _initial_delay(self) -> float:
        return self._delay(INITIAL_DELAY_STEPS, INITIAL_DELAY_UNIT)

    def init(self) -> list[Tick]:
        """Start the animation."""
        return [step_chars(self._config.fps)]

    def update(self, message: object) -> list[Tick]:
        """Handle a delivered message and return the follow-up ticks."""
        if isinstance(message, StepChars):
            return self._step(self._clock())
        if isinstance(message, EllipsisTick):
            tick = self.ellipsis.update(message)
            return [tick] if tick is not None else []
        return []

    def _step(self, now: float) -> list[Tick]:
        for char in self.chars:
            char.advance(self.start, now, self._rng)

        ticks = [step_chars(self._config.fps)]
        if not self.ellipsis_started and self.label_resolved(now):
            # The whole label has settled; start the ellipsis after a short pause.
            self.ellipsis_started = True
            ticks.append(Tick(self._config.ellipsis_delay, self.ellipsis.tick()))
            logger.debug("Label resolved after %.3fs: %r", now - self.start, self._label)
        return ticks

    def label_resolved(self, now: float) -> bool:
        """True once every label character (placeholders excluded) has settled."""
        return all(
            char.state(self.start, now) is CharState.END_OF_LIFE
            for char in self.chars[self._placeholder_count :]
        )

    def render(self) -> Text:
        """Render the current frame followed by the ellipsis."""
        text = Text(no_wrap=True)
        for index, char in enumerate(self.chars):
            style: Style | None = None
            if index < len(self.ramp):
                style = self.ramp[index]
            elif char.cycles_forever:
                style = self.cycling_style
            text.append(char.current_value, style=style)
        text.append(self.ellipsis.view())
        return text
