"""Unit tests for the cycling-characters animation model."""

from __future__ import annotations

import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st
from tests.helpers.clock import FakeClock, FakeScheduler

from flicker.animation.chars import CHAR_RUNES, CharState
from flicker.animation.cycling import CyclingChars
from flicker.animation.messages import EllipsisTick, StepChars, Tick
from flicker.config import AnimationConfig
from flicker.limits import (
    CHAR_CYCLING_FPS,
    ELLIPSIS_START_DELAY,
    MAX_CYCLING_CHARS,
    MAX_INITIAL_DELAY,
)

pytestmark = pytest.mark.unit


def make_model(
    chars: int = 5,
    label: str = "Go",
    *,
    clock: FakeClock | None = None,
    color_system: str | None = "truecolor",
    seed: int = 7,
) -> CyclingChars:
    return CyclingChars(
        chars,
        label,
        color_system=color_system,
        clock=clock or FakeClock(),
        rng=random.Random(seed),
    )


def is_multiple(value: float, unit: float, steps: int) -> bool:
    k = round(value / unit)
    return 0 <= k < steps and math.isclose(value, k * unit)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_placeholder_count_is_clamped(self):
        model = make_model(500, "Go")
        assert model.placeholder_count == MAX_CYCLING_CHARS
        assert sum(char.cycles_forever for char in model.chars) == MAX_CYCLING_CHARS

    def test_negative_count_clamps_to_zero(self):
        model = make_model(-4, "Go")
        assert model.placeholder_count == 0
        assert model.label == "Go"

    def test_no_placeholders_means_no_gap(self):
        model = make_model(0, "Loading")
        assert len(model.chars) == len("Loading")
        assert [char.final_value for char in model.chars] == list("Loading")

    def test_placeholders_get_a_leading_gap(self):
        model = make_model(5, "Go")
        assert model.label == " Go"
        assert [char.final_value for char in model.chars] == [None] * 5 + [" ", "G", "o"]

    @given(chars=st.integers(min_value=-50, max_value=300), label=st.text(max_size=40))
    def test_character_count_invariant(self, chars, label):
        model = make_model(chars, label)
        assert len(model.chars) == model.placeholder_count + len(model.label)
        assert 0 <= model.placeholder_count <= MAX_CYCLING_CHARS

    def test_delays_are_drawn_from_bounded_steps(self):
        model = make_model(40, "Generating", seed=99)
        for char in model.chars:
            assert is_multiple(char.initial_delay, 0.06, 8)
            assert char.initial_delay <= MAX_INITIAL_DELAY + 1e-9
        for char in model.chars[model.placeholder_count :]:
            assert is_multiple(char.lifetime, 0.18, 5)

    def test_placeholders_have_no_lifetime(self):
        model = make_model(10, "Go")
        assert all(char.lifetime == 0 for char in model.chars[:10])

    def test_start_is_read_from_clock(self):
        model = make_model(clock=FakeClock(42.5))
        assert model.start == 42.5

    def test_same_seed_same_delays(self):
        first = make_model(12, "Hello", seed=5)
        second = make_model(12, "Hello", seed=5)
        assert [c.initial_delay for c in first.chars] == [c.initial_delay for c in second.chars]


class TestGradientRamp:
    def test_truecolor_gets_one_style_per_placeholder(self):
        model = make_model(5, "Go", color_system="truecolor")
        assert len(model.ramp) == 5

    @pytest.mark.parametrize("color_system", ["256", "standard", "windows", None])
    def test_no_ramp_without_truecolor(self, color_system):
        assert make_model(5, "Go", color_system=color_system).ramp == []

    def test_no_ramp_below_minimum_size(self):
        assert make_model(2, "Go", color_system="truecolor").ramp == []

    def test_ramp_size_at_minimum(self):
        assert len(make_model(3, "Go", color_system="truecolor").ramp) == 3

    def test_ramp_uses_configured_colors(self):
        config = AnimationConfig(gradient_start="#000000", gradient_end="#FFFFFF")
        model = CyclingChars(4, "x", color_system="truecolor", config=config, clock=FakeClock())
        first = model.ramp[0].color
        assert first is not None
        assert first.get_truecolor() == (0, 0, 0)


# =============================================================================
# Advance
# =============================================================================


class TestAdvance:
    def test_init_schedules_primary_tick(self):
        ticks = make_model().init()
        assert len(ticks) == 1
        assert isinstance(ticks[0].message, StepChars)
        assert ticks[0].delay == pytest.approx(1 / CHAR_CYCLING_FPS)

    def test_step_reschedules_itself(self, clock):
        model = make_model(clock=clock)
        clock.advance(0.01)
        ticks = model.update(StepChars())
        assert [type(tick.message) for tick in ticks] == [StepChars]

    def test_unknown_message_is_ignored(self):
        assert make_model().update(object()) == []

    def test_initial_glyphs_before_delays(self, clock):
        model = make_model(clock=clock)
        model.update(StepChars())
        for char in model.chars:
            if char.initial_delay > 0:
                assert char.current_value == "."

    def test_resolution_starts_ellipsis_once(self, clock):
        model = make_model(clock=clock)
        clock.advance(MAX_INITIAL_DELAY + 0.01)

        ticks = model.update(StepChars())
        assert model.ellipsis_started
        ellipsis_ticks = [tick for tick in ticks if isinstance(tick.message, EllipsisTick)]
        assert ellipsis_ticks == [Tick(ELLIPSIS_START_DELAY, model.ellipsis.tick())]

        clock.advance(0.05)
        later = model.update(StepChars())
        assert not any(isinstance(tick.message, EllipsisTick) for tick in later)
        assert model.ellipsis_started

    def test_placeholders_never_block_resolution(self, clock):
        model = make_model(120, "ok", clock=clock)
        clock.advance(MAX_INITIAL_DELAY + 0.01)
        assert model.label_resolved(clock())
        assert all(
            char.state(model.start, clock()) is CharState.CYCLING
            for char in model.chars[: model.placeholder_count]
        )

    def test_not_resolved_while_any_label_char_waits(self, clock):
        model = make_model(0, "abc", clock=clock)
        model.chars[1].initial_delay = 0.42
        clock.advance(0.3)
        model.update(StepChars())
        assert not model.ellipsis_started

    def test_empty_label_resolves_on_first_step(self, clock):
        model = make_model(0, "", clock=clock)
        model.update(StepChars())
        assert model.ellipsis_started

    def test_ellipsis_ticks_are_forwarded(self, clock):
        model = make_model(clock=clock)
        ticks = model.update(model.ellipsis.tick())
        assert model.ellipsis.view() == "."
        assert len(ticks) == 1
        assert isinstance(ticks[0].message, EllipsisTick)

    def test_stale_ellipsis_tick_is_dropped(self, clock):
        model = make_model(clock=clock)
        stale = model.ellipsis.tick()
        model.update(stale)
        assert model.update(stale) == []
        assert model.ellipsis.view() == "."

    @given(seed=st.integers(), steps=st.integers(min_value=1, max_value=40))
    def test_placeholders_show_alphabet_glyphs_once_started(self, seed, steps):
        clock = FakeClock()
        model = make_model(8, "Hi", clock=clock, seed=seed)
        for _ in range(steps):
            clock.advance(1 / CHAR_CYCLING_FPS)
            model.update(StepChars())
            for char in model.chars[: model.placeholder_count]:
                if clock() >= model.start + char.initial_delay:
                    assert char.current_value in CHAR_RUNES
                else:
                    assert char.current_value == "."


# =============================================================================
# Render
# =============================================================================


class TestRender:
    def test_first_frame_is_all_initial_glyphs(self):
        text = make_model(5, "Go").render()
        assert text.plain == "." * 8

    def test_ramp_styles_placeholders(self, clock):
        model = make_model(5, "Go", clock=clock, color_system="truecolor")
        text = model.render()
        assert [span.style for span in text.spans] == model.ramp
        assert all(span.end <= 5 for span in text.spans)

    def test_cycling_style_without_ramp(self):
        model = make_model(5, "Go", color_system="256")
        text = model.render()
        assert len(text.spans) == 5
        assert all(span.style == model.cycling_style for span in text.spans)

    def test_label_chars_are_unstyled(self):
        model = make_model(0, "Go", color_system="truecolor")
        assert model.render().spans == []

    def test_ellipsis_is_appended(self, clock):
        model = make_model(0, "Go", clock=clock)
        clock.advance(1.0)
        model.update(StepChars())
        model.update(model.ellipsis.tick())
        assert model.render().plain == "Go."


# =============================================================================
# End to end with a fake scheduler
# =============================================================================


class TestEndToEnd:
    def test_label_resolves_then_ellipsis_starts(self):
        clock = FakeClock()
        model = make_model(5, "Go", clock=clock, seed=2024)
        scheduler = FakeScheduler(model, clock).start()

        # Step frame by frame until every delay has passed
        resolved_at: float | None = None
        while clock() <= MAX_INITIAL_DELAY:
            scheduler.run_until(clock() + 1 / CHAR_CYCLING_FPS)
            if model.ellipsis_started and resolved_at is None:
                resolved_at = clock()
            if resolved_at is None or clock() < resolved_at + ELLIPSIS_START_DELAY - 1e-9:
                assert model.ellipsis.view() == ""

        assert resolved_at is not None
        glyphs = model.render().plain[: len(model.chars)]
        assert glyphs[-2:] == "Go"

        scheduler.run_until(max(clock(), resolved_at + ELLIPSIS_START_DELAY) + 0.01)
        assert model.ellipsis.view() != ""
        plain = model.render().plain
        assert plain[: len(model.chars)].endswith("Go")
        assert plain[len(model.chars) :] == model.ellipsis.view()

    def test_ellipsis_start_is_scheduled_exactly_once(self):
        clock = FakeClock()
        model = make_model(10, "Working", clock=clock, seed=11)
        scheduler = FakeScheduler(model, clock).start()

        scheduler.run_until(3.0)

        starts = [
            tick
            for tick in scheduler.scheduled
            if isinstance(tick.message, EllipsisTick) and tick.message.tag == 0
        ]
        assert len(starts) == 1
        assert starts[0].delay == pytest.approx(ELLIPSIS_START_DELAY)

    def test_primary_cadence_keeps_running(self):
        clock = FakeClock()
        model = make_model(3, "x", clock=clock)
        scheduler = FakeScheduler(model, clock).start()

        scheduler.run_until(1.0)

        steps = [m for m in scheduler.delivered if isinstance(m, StepChars)]
        assert len(steps) == pytest.approx(CHAR_CYCLING_FPS, abs=1)
