"""CyclingLabel widget hosting the cycling-characters animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.text import Text
from textual.message import Message
from textual.widget import Widget

from flicker.animation.cycling import CyclingChars
from flicker.config import AnimationConfig
from flicker.debug_log import log
from flicker.terminal import supports_truecolor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from textual.app import RenderResult
    from textual.timer import Timer

    from flicker.animation.messages import Tick


class CyclingLabel(Widget):
    """Flickering placeholder characters that resolve into a label."""

    DEFAULT_CSS = """
    CyclingLabel {
        width: 100%;
        height: 1;
    }
    """

    @dataclass
    class Resolved(Message):
        """Every label character has settled and the ellipsis is starting."""

        label: str
        """The label as animated, with the leading gap when placeholders exist."""

    def __init__(
        self,
        label: str | None = None,
        chars: int | None = None,
        *,
        config: AnimationConfig | None = None,
        color_system: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        if color_system is None:
            color_system = "truecolor" if supports_truecolor() else "256"
        self._color_system = color_system
        self._config = config or AnimationConfig()
        self._label = self._config.label if label is None else label
        self._chars = self._config.cycling_chars if chars is None else chars
        self._model: CyclingChars | None = None
        self._timers: set[Timer] = set()
        # Ticks carry the generation they were scheduled in; restart() bumps it
        self._generation = 0

    @property
    def model(self) -> CyclingChars | None:
        return self._model

    @property
    def resolved(self) -> bool:
        return self._model is not None and self._model.ellipsis_started

    def on_mount(self) -> None:
        """Start the animation once mounted."""
        self._start()

    def on_unmount(self) -> None:
        self._cancel_timers()

    def restart(self, label: str | None = None, chars: int | None = None) -> None:
        """Throw away the running animation and start a fresh one."""
        if label is not None:
            self._label = label
        if chars is not None:
            self._chars = chars
        self._cancel_timers()
        self._generation += 1
        self._start()

    def _start(self) -> None:
        self._model = CyclingChars(
            self._chars,
            self._label,
            color_system=self._color_system,
            config=self._config,
        )
        log.debug("Cycling label started", label=self._label, chars=self._chars)
        self._schedule(self._model.init())
        self.refresh(layout=True)

    def _schedule(self, ticks: Iterable[Tick]) -> None:
        for tick in ticks:
            self._schedule_one(tick)

    def _schedule_one(self, tick: Tick) -> None:
        generation = self._generation

        def fire() -> None:
            self._timers.discard(timer)
            self._deliver(tick.message, generation)

        timer = self.set_timer(tick.delay, fire, name="cycling-chars")
        self._timers.add(timer)

    def _deliver(self, message: object, generation: int) -> None:
        if self._model is None or generation != self._generation:
            return
        was_resolved = self._model.ellipsis_started
        self._schedule(self._model.update(message))
        if self._model.ellipsis_started and not was_resolved:
            log.info("Cycling label resolved", label=self._label)
            self.post_message(self.Resolved(self._model.label))
        self.refresh()

    def _cancel_timers(self) -> None:
        for timer in self._timers:
            timer.stop()
        self._timers.clear()

    def render(self) -> RenderResult:
        if self._model is None:
            return Text("")
        return self._model.render()
