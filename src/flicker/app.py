"""Flicker demo TUI application."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.style import Style
from textual.app import App
from textual.containers import Vertical
from textual.widgets import Footer, Static

from flicker.animation.gradient import make_gradient_text
from flicker.config import FlickerConfig
from flicker.debug_log import log, setup_debug_logging
from flicker.keybindings import APP_BINDINGS
from flicker.terminal import supports_truecolor
from flicker.theme import FLICKER_THEME, FLICKER_THEME_256
from flicker.ui.widgets import CyclingLabel

if TYPE_CHECKING:
    from textual.app import ComposeResult

TITLE_TEXT = "F L I C K E R"

# Grace period after the label resolves so the ellipsis gets a frame or two
EXIT_AFTER_RESOLVE = 1.0


class FlickerApp(App):
    """Flicker TUI Application - cycling characters that resolve into a label."""

    TITLE = "flicker"
    CSS_PATH = "styles/flicker.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        label: str | None = None,
        chars: int | None = None,
        config: FlickerConfig | None = None,
        config_path: str | Path | None = None,
        exit_on_resolve: bool | None = None,
    ):
        super().__init__()

        self.register_theme(FLICKER_THEME)
        self.register_theme(FLICKER_THEME_256)

        self.truecolor = supports_truecolor()
        self.theme = "flicker" if self.truecolor else "flicker-256"

        if config is None:
            config = FlickerConfig.load(Path(config_path) if config_path else None)
        self.config: FlickerConfig = config
        self.label = label if label is not None else config.animation.label
        self.chars = chars if chars is not None else config.animation.cycling_chars
        self.exit_on_resolve = (
            config.ui.exit_on_resolve if exit_on_resolve is None else exit_on_resolve
        )
        self.resolved_label: str | None = None

    def compose(self) -> ComposeResult:
        animation = self.config.animation
        title = TITLE_TEXT
        if self.truecolor:
            title = make_gradient_text(
                TITLE_TEXT,
                Style(bold=True),
                animation.gradient_start,
                animation.gradient_end,
            )
        with Vertical(id="flicker-panel"):
            yield Static(title, id="flicker-title")
            yield CyclingLabel(
                self.label,
                self.chars,
                config=animation,
                color_system="truecolor" if self.truecolor else "256",
                id="cycling-label",
            )
            yield Static("", id="flicker-status")
        if self.config.ui.show_footer:
            yield Footer()

    def on_mount(self) -> None:
        """Initialize app on mount."""
        setup_debug_logging()
        log.info("Flicker started", label=self.label, chars=self.chars, truecolor=self.truecolor)

    def on_cycling_label_resolved(self, message: CyclingLabel.Resolved) -> None:
        self.resolved_label = message.label.strip()
        self.query_one("#flicker-status", Static).update(f"Resolved: {self.resolved_label}")
        if self.exit_on_resolve:
            self.set_timer(EXIT_AFTER_RESOLVE, self.exit)

    def action_restart(self) -> None:
        """Start the animation over with a new start instant."""
        self.resolved_label = None
        self.query_one("#flicker-status", Static).update("")
        self.query_one(CyclingLabel).restart()

    def action_toggle_debug_log(self) -> None:
        """Open the debug log viewer."""
        from flicker.ui.modals.debug_log import DebugLogModal

        self.push_screen(DebugLogModal())
