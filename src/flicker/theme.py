"""Shared Textual theme definition and brand colors for Flicker."""

from __future__ import annotations

from textual.theme import Theme

# Endpoints of the gradient ramp drawn over the cycling placeholders
GRADIENT_START = "#F967DC"  # Orchid Pink
GRADIENT_END = "#6B50FF"  # Electric Violet

# Placeholders that cycle forever, when no gradient ramp is drawn
CYCLING_COLOR = "#FF87D7"

# Full truecolor (24-bit) theme for modern terminals
FLICKER_THEME = Theme(
    name="flicker",
    primary="#6b50ff",  # Electric Violet - end of the ramp
    secondary="#f967dc",  # Orchid Pink - start of the ramp
    accent="#ff87d7",  # Cycling Pink
    foreground="#dddaf0",  # Lavender Mist
    background="#121018",  # Ink
    surface="#1a1724",
    panel="#241f33",
    warning="#f5c16c",
    error="#ff5f72",
    success="#6fe3a8",
    dark=True,
    variables={
        "border": "#342d4a",
        "border-blurred": "#342d4a80",
        "text-muted": "#7a7391",
        "text-disabled": "#7a739180",
        "footer-key-foreground": "#7a7391",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#7a739180",
    },
)

# 256-color fallback for terminals without truecolor
# Use this theme when supports_truecolor() returns False
FLICKER_THEME_256 = Theme(
    name="flicker-256",
    primary="#5f5fff",  # color(63) - closest to Electric Violet
    secondary="#ff5fd7",  # color(206) - closest to Orchid Pink
    accent="#ff87d7",  # color(212)
    foreground="#dadada",  # color(253)
    background="#121212",  # color(233)
    surface="#1c1c1c",  # color(234)
    panel="#262626",  # color(235)
    warning="#ffaf5f",  # color(215)
    error="#ff5f5f",  # color(203)
    success="#5fd787",  # color(78)
    dark=True,
    variables={
        "border": "#3a3a3a",  # color(237)
        "border-blurred": "#3a3a3a80",
        "text-muted": "#767676",  # color(243)
        "text-disabled": "#76767680",
        "footer-key-foreground": "#767676",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#76767680",
    },
)
