"""Terminal capability detection utilities."""

from __future__ import annotations

import os

# Terminals that are KNOWN to NOT support truecolor
# Check these FIRST, before trusting COLORTERM (which may be incorrectly set)
_NO_TRUECOLOR_TERMINALS = {
    "apple_terminal",  # macOS Terminal.app - only supports 256 colors
}

# Terminals that are KNOWN to support truecolor
_TRUECOLOR_TERMINALS = {
    "iterm.app",
    "vscode",
    "hyper",
    "alacritty",
    "kitty",
    "wezterm",
    "ghostty",
    "warp",
    "tabby",
    "rio",
    "contour",
}


def supports_truecolor() -> bool:
    """Check if the terminal supports truecolor (24-bit colors).

    Detection logic (in order of priority):
    1. TEXTUAL_COLOR_SYSTEM set to 'truecolor' wins, any other value loses
    2. TERM_PROGRAM known to NOT support truecolor (Apple_Terminal) returns False
    3. TERM_PROGRAM known to support truecolor (iTerm.app, vscode, etc.) returns True
    4. COLORTERM set to 'truecolor' or '24bit' returns True
    5. WT_SESSION set (Windows Terminal) returns True
    6. Otherwise False

    The gradient ramp over the cycling characters is only drawn when this
    returns True.
    """
    textual_color = os.environ.get("TEXTUAL_COLOR_SYSTEM", "").lower()
    if textual_color == "truecolor":
        return True
    if textual_color:
        return False

    # TERM_PROGRAM before COLORTERM: some shell configs export COLORTERM=truecolor
    # even in terminals that can't render it.
    term_program = os.environ.get("TERM_PROGRAM", "").lower()
    if term_program in _NO_TRUECOLOR_TERMINALS:
        return False
    if term_program in _TRUECOLOR_TERMINALS:
        return True

    colorterm = os.environ.get("COLORTERM", "").lower()
    if colorterm in ("truecolor", "24bit"):
        return True

    return bool(os.environ.get("WT_SESSION"))


def get_terminal_name() -> str:
    """Get a human-readable name for the current terminal."""
    term_program = os.environ.get("TERM_PROGRAM", "")
    if term_program:
        nice_names = {
            "Apple_Terminal": "macOS Terminal.app",
            "iTerm.app": "iTerm2",
            "vscode": "VS Code Terminal",
        }
        return nice_names.get(term_program, term_program)

    if os.environ.get("WT_SESSION"):
        return "Windows Terminal"

    term = os.environ.get("TERM", "")
    if term:
        return term

    return "Unknown terminal"
