"""Perceptual color ramps for the cycling characters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.style import Style
from rich.text import Text
from textual.color import Color, Lab, lab_to_rgb, rgb_to_lab

from flicker.limits import MIN_GRADIENT_TEXT_SIZE
from flicker.theme import GRADIENT_END, GRADIENT_START

if TYPE_CHECKING:
    from collections.abc import Sequence


def blend_lab(start: Color, end: Color, factor: float) -> Color:
    """Blend two colors in CIE L*a*b* space.

    A factor of 0 returns ``start`` unchanged; the L*a*b* round trip is lossy
    by a unit or so per channel.
    """
    if factor <= 0:
        return start
    a = rgb_to_lab(start)
    b = rgb_to_lab(end)
    mixed = Lab(
        a.L + (b.L - a.L) * factor,
        a.a + (b.a - a.a) * factor,
        a.b + (b.b - a.b) * factor,
    )
    return lab_to_rgb(mixed).clamped


def make_gradient_ramp(
    length: int,
    start: str = GRADIENT_START,
    end: str = GRADIENT_END,
) -> list[Color]:
    """Return ``length`` colors stepping from ``start`` toward ``end``.

    The blend parameter runs ``i / length`` for ``i`` in ``range(length)``, so
    the last color stops one step short of ``end``.
    """
    if length <= 0:
        return []
    start_color = Color.parse(start)
    end_color = Color.parse(end)
    return [blend_lab(start_color, end_color, i / length) for i in range(length)]


def ramp_styles(colors: Sequence[Color]) -> list[Style]:
    return [Style(color=color.rich_color) for color in colors]


def make_gradient_text(
    text: str,
    base_style: Style | None = None,
    start: str = GRADIENT_START,
    end: str = GRADIENT_END,
) -> Text:
    """Color each glyph of ``text`` along the gradient ramp.

    Strings shorter than three glyphs are returned unstyled; a one or two
    step gradient reads as noise.
    """
    if len(text) < MIN_GRADIENT_TEXT_SIZE:
        return Text(text)
    base = base_style or Style()
    result = Text()
    styles = ramp_styles(make_gradient_ramp(len(text), start, end))
    for glyph, style in zip(text, styles, strict=True):
        result.append(glyph, style=base + style)
    return result
