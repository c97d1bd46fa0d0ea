"""Widget components for the Flicker TUI."""

from flicker.ui.widgets.cycling_label import CyclingLabel

__all__ = ["CyclingLabel"]
