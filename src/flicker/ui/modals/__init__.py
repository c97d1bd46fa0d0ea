"""Modal screens for the Flicker TUI."""

from flicker.ui.modals.debug_log import DebugLogModal

__all__ = ["DebugLogModal"]
