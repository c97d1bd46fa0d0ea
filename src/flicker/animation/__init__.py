"""Cycling-characters animation models."""

from flicker.animation.chars import CHAR_RUNES, CharState, CyclingChar
from flicker.animation.cycling import CyclingChars
from flicker.animation.ellipsis import ELLIPSIS_FRAMES, Ellipsis
from flicker.animation.gradient import make_gradient_ramp, make_gradient_text
from flicker.animation.messages import EllipsisTick, StepChars, Tick

__all__ = [
    "CHAR_RUNES",
    "ELLIPSIS_FRAMES",
    "CharState",
    "CyclingChar",
    "CyclingChars",
    "Ellipsis",
    "EllipsisTick",
    "StepChars",
    "Tick",
    "make_gradient_ramp",
    "make_gradient_text",
]
