"""Ellipsis spinner shown once the label has fully resolved."""

from __future__ import annotations

from itertools import count

from flicker.animation.messages import EllipsisTick, Tick
from flicker.limits import ELLIPSIS_FPS

ELLIPSIS_FRAMES: tuple[str, ...] = ("", ".", "..", "...")

_spinner_ids = count(1)


class Ellipsis:
    """Frame-based spinner driven by ``EllipsisTick`` messages.

    Each spinner gets a unique id so several can share one host. The tag is
    bumped on every accepted tick, which drops duplicate or stale ticks that
    would otherwise speed the spinner up.
    """

    def __init__(
        self,
        frames: tuple[str, ...] = ELLIPSIS_FRAMES,
        fps: float = ELLIPSIS_FPS,
    ) -> None:
        self.id = next(_spinner_ids)
        self.frames = frames
        self.interval = 1.0 / fps
        self.frame = 0
        self._tag = 0

    def tick(self) -> EllipsisTick:
        """Message that starts (or continues) the spinner."""
        return EllipsisTick(id=self.id, tag=self._tag)

    def update(self, msg: EllipsisTick) -> Tick | None:
        if msg.id != self.id or msg.tag != self._tag:
            return None
        self.frame = (self.frame + 1) % len(self.frames)
        self._tag += 1
        return Tick(self.interval, self.tick())

    def view(self) -> str:
        return self.frames[self.frame]
