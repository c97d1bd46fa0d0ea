"""Configuration loader for Flicker."""

from __future__ import annotations

import asyncio
import math
import tomllib
from typing import TYPE_CHECKING, TypeGuard

import tomlkit
from pydantic import BaseModel, Field, field_validator
from textual.color import Color, ColorParseError

from flicker.atomic import atomic_write
from flicker.limits import (
    CHAR_CYCLING_FPS,
    ELLIPSIS_FPS,
    ELLIPSIS_START_DELAY,
    MAX_CYCLING_CHARS,
)
from flicker.paths import ensure_directories, get_config_path
from flicker.theme import CYCLING_COLOR, GRADIENT_END, GRADIENT_START

if TYPE_CHECKING:
    from pathlib import Path

    from pydantic import ValidationInfo

_COLOR_DEFAULTS = {
    "gradient_start": GRADIENT_START,
    "gradient_end": GRADIENT_END,
    "cycling_color": CYCLING_COLOR,
}
_RATE_DEFAULTS = {
    "fps": CHAR_CYCLING_FPS,
    "ellipsis_fps": ELLIPSIS_FPS,
}


def clamp_cycling_chars(value: int) -> int:
    """Clamp a requested placeholder count into ``[0, MAX_CYCLING_CHARS]``."""
    return max(0, min(value, MAX_CYCLING_CHARS))


def _is_finite_number(value: object) -> TypeGuard[int | float]:
    # TOML accepts inf and nan; rates and delays must stay finite
    return (
        isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value)
    )


class AnimationConfig(BaseModel):
    """Timing and color settings for the cycling characters."""

    cycling_chars: int = Field(
        default=20, description="Placeholder characters that cycle forever (max 120)"
    )
    label: str = Field(default="Generating", description="Text that resolves after the noise")
    fps: float = Field(default=CHAR_CYCLING_FPS, description="Character cycling frame rate")
    ellipsis_fps: float = Field(default=ELLIPSIS_FPS, description="Ellipsis frame rate")
    ellipsis_delay: float = Field(
        default=ELLIPSIS_START_DELAY,
        description="Pause in seconds between the label resolving and the ellipsis",
    )
    gradient_start: str = Field(default=GRADIENT_START, description="First color of the ramp")
    gradient_end: str = Field(default=GRADIENT_END, description="Color the ramp blends toward")
    cycling_color: str = Field(
        default=CYCLING_COLOR, description="Placeholder color when no ramp is drawn"
    )

    @field_validator("cycling_chars", mode="before")
    @classmethod
    def validate_cycling_chars(cls, value: object) -> int:
        """Clamp out-of-range counts instead of rejecting them."""
        if isinstance(value, bool) or not isinstance(value, int):
            return 20
        return clamp_cycling_chars(value)

    @field_validator("fps", "ellipsis_fps", mode="before")
    @classmethod
    def validate_rate(cls, value: object, info: ValidationInfo) -> float:
        """Gracefully coerce non-positive, infinite or non-numeric rates to the default."""
        if _is_finite_number(value) and value > 0:
            return float(value)
        return _RATE_DEFAULTS[info.field_name]

    @field_validator("ellipsis_delay", mode="before")
    @classmethod
    def validate_ellipsis_delay(cls, value: object) -> float:
        if _is_finite_number(value):
            return max(0.0, float(value))
        return ELLIPSIS_START_DELAY

    @field_validator("gradient_start", "gradient_end", "cycling_color", mode="before")
    @classmethod
    def validate_color(cls, value: object, info: ValidationInfo) -> str:
        """Gracefully coerce unparseable colors to the brand default."""
        if isinstance(value, str):
            try:
                return Color.parse(value).hex
            except ColorParseError:
                pass
        return _COLOR_DEFAULTS[info.field_name]


class UIConfig(BaseModel):
    """UI-related user preferences."""

    exit_on_resolve: bool = Field(
        default=False, description="Quit the demo app once the label has resolved"
    )
    show_footer: bool = Field(default=True, description="Show the key binding footer")


class FlickerConfig(BaseModel):
    """Root configuration model."""

    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> FlickerConfig:
        """Load configuration from TOML file or use defaults."""
        ensure_directories()
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def to_toml(self) -> str:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Flicker configuration"))

        animation_table = tomlkit.table()
        for key, value in self.animation.model_dump().items():
            animation_table[key] = value
        doc["animation"] = animation_table

        ui_table = tomlkit.table()
        for key, value in self.ui.model_dump().items():
            ui_table[key] = value
        doc["ui"] = ui_table

        return tomlkit.dumps(doc)

    async def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        await asyncio.to_thread(atomic_write, path, self.to_toml())
