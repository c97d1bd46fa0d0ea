"""F12 viewer that tails the in-app debug log."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Label, RichLog, Rule

from flicker.debug_log import LogEntry, log_buffer
from flicker.keybindings import DEBUG_LOG_BINDINGS
from flicker.paths import get_debug_log_path

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.timer import Timer

    from flicker.debug_log import LogBuffer

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}
REFRESH_INTERVAL = 0.5


def format_entry(entry: LogEntry) -> Text:
    ts = datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S")
    prefix = f"{ts} [{entry.level}]"
    if entry.from_logging:
        prefix += f" {entry.origin}"
    # Messages are plain text; square brackets in them must not parse as markup
    return Text.assemble((prefix, _LEVEL_STYLES.get(entry.level, "white")), " ", entry.message)


class DebugLogModal(ModalScreen[None]):
    """Hidden debug log viewer (F12)."""

    BINDINGS = DEBUG_LOG_BINDINGS

    DEFAULT_CSS = """
    DebugLogModal {
        align: center middle;
    }
    #debug-log-container {
        width: 90%;
        height: 80%;
        border: round $primary;
        background: $surface;
        padding: 0 1;
    }
    """

    def __init__(self, buffer: LogBuffer | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._buffer = buffer if buffer is not None else log_buffer
        self._shown = 0
        self._generation = self._buffer.generation
        self._refresh_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container"):
            yield Label("Debug Logs", classes="modal-title")
            yield Label(
                "[dim]F12 to toggle | c to clear | s to save | Escape to close[/dim]",
                classes="modal-subtitle",
            )
            yield Rule()
            yield RichLog(id="debug-log", markup=True, auto_scroll=True, wrap=True)
        yield Footer()

    @property
    def shown(self) -> int:
        """Number of buffer entries written to the view since the last reset."""
        return self._shown

    def on_mount(self) -> None:
        self._sync()
        self._refresh_timer = self.set_interval(REFRESH_INTERVAL, self._sync)

    def on_unmount(self) -> None:
        self._stop_refresh()

    def _stop_refresh(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None

    def _reset_view(self, rich_log: RichLog) -> None:
        self._shown = 0
        rich_log.clear()

    def _sync(self) -> None:
        """Write entries added since the last sync."""
        rich_log = self.query_one("#debug-log", RichLog)
        if self._buffer.generation != self._generation:
            self._generation = self._buffer.generation
            self._reset_view(rich_log)
        elif len(self._buffer) < self._shown:
            # Wrapped past the ring size
            self._reset_view(rich_log)

        for entry in self._buffer.tail(self._shown):
            rich_log.write(format_entry(entry))
        self._shown = len(self._buffer)

    def action_close(self) -> None:
        self._stop_refresh()
        self.dismiss(None)

    def action_clear_logs(self) -> None:
        self._buffer.clear()
        self._generation = self._buffer.generation
        rich_log = self.query_one("#debug-log", RichLog)
        self._reset_view(rich_log)
        rich_log.write("[dim]Logs cleared[/dim]")

    def action_save_logs(self) -> None:
        """Export the buffer to the cache directory."""
        rich_log = self.query_one("#debug-log", RichLog)
        log_path = get_debug_log_path()
        try:
            count = self._buffer.export(log_path)
        except OSError as e:
            rich_log.write(f"[red]✗ Failed to export logs: {e}[/red]")
            return
        rich_log.write(f"[green]✓ Exported {count} log entries to {log_path}[/green]")
