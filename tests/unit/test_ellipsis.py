"""Unit tests for the ellipsis spinner."""

from __future__ import annotations

import pytest

from flicker.animation.ellipsis import ELLIPSIS_FRAMES, Ellipsis
from flicker.animation.messages import EllipsisTick

pytestmark = pytest.mark.unit


class TestEllipsis:
    def test_starts_empty(self):
        assert Ellipsis().view() == ""

    def test_tick_advances_one_frame(self):
        spinner = Ellipsis()
        tick = spinner.update(spinner.tick())
        assert spinner.view() == "."
        assert tick is not None
        assert tick.delay == pytest.approx(1 / 3)
        assert tick.message == EllipsisTick(spinner.id, 1)

    def test_frames_wrap(self):
        spinner = Ellipsis()
        seen = []
        for _ in range(len(ELLIPSIS_FRAMES) + 1):
            spinner.update(spinner.tick())
            seen.append(spinner.view())
        assert seen == [".", "..", "...", "", "."]

    def test_ignores_other_spinners(self):
        first, second = Ellipsis(), Ellipsis()
        assert first.id != second.id
        assert first.update(second.tick()) is None
        assert first.view() == ""

    def test_ignores_stale_tags(self):
        spinner = Ellipsis()
        stale = spinner.tick()
        spinner.update(stale)
        assert spinner.update(stale) is None
        assert spinner.view() == "."

    def test_custom_frames_and_rate(self):
        spinner = Ellipsis(frames=("-", "+"), fps=10)
        tick = spinner.update(spinner.tick())
        assert spinner.view() == "+"
        assert tick is not None
        assert tick.delay == pytest.approx(0.1)
