"""In-app debug log.

Events from ``log`` and records from the ``flicker`` logging hierarchy land
in one bounded ``LogBuffer``. The F12 modal tails it and can export it to
the cache directory.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from textual import log as textual_log

from flicker.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from collections.abc import Iterator

TRUNCATION_MARKER = "... [truncated]"


def _truncate(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + TRUNCATION_MARKER
    return message


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One captured line."""

    level: str
    message: str
    timestamp: float
    from_logging: bool = False

    @property
    def origin(self) -> str:
        return "[PY]" if self.from_logging else "[TX]"

    def export_line(self) -> str:
        ts = datetime.fromtimestamp(self.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        return f"{ts} {self.origin} [{self.level}] {self.message}"


class LogBuffer:
    """Ring of recent log entries.

    ``generation`` is bumped on every clear so a viewer can tell a cleared
    buffer from one that merely wrapped.
    """

    def __init__(self, maxlen: int = MAX_LOG_LINES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=maxlen)
        self.generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        self._entries.clear()
        self.generation += 1

    def tail(self, start: int) -> list[LogEntry]:
        """Entries from position ``start`` onward."""
        return list(self._entries)[start:]

    def export(self, file_path: str | Path) -> int:
        """Write the buffer to ``file_path`` and return the number of entries written."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        entries = list(self._entries)
        lines = [
            "# Flicker Debug Log Export",
            f"# Total entries: {len(entries)}",
            f"# Buffer generation: {self.generation}",
            "",
            *(entry.export_line() for entry in entries),
        ]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return len(entries)


class FlickerLogger:
    """Event logger whose output shows up in the F12 viewer and Textual devtools.

    Keyword fields are appended as ``key=value`` pairs after the event text.
    """

    def __init__(self, buffer: LogBuffer) -> None:
        self._buffer = buffer

    def _log(self, level: str, event: str, fields: dict[str, object]) -> None:
        parts = [event, *(f"{key}={value!r}" for key, value in fields.items())]
        message = _truncate(" ".join(part for part in parts if part))
        self._buffer.append(LogEntry(level=level, message=message, timestamp=time.time()))
        textual_log(message)

    def debug(self, event: str, **fields: object) -> None:
        self._log("DEBUG", event, fields)

    def info(self, event: str, **fields: object) -> None:
        self._log("INFO", event, fields)


class DebugLogHandler(logging.Handler):
    """Copies ``logging`` records into a ``LogBuffer``."""

    def __init__(self, buffer: LogBuffer) -> None:
        super().__init__()
        self._buffer = buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = _truncate(self.format(record))
        except Exception:
            self.handleError(record)
            return
        self._buffer.append(
            LogEntry(
                level=record.levelname,
                message=message,
                timestamp=record.created,
                from_logging=True,
            )
        )


log_buffer = LogBuffer()
log = FlickerLogger(log_buffer)


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Route the ``flicker`` logger hierarchy into ``log_buffer``.

    Calling it again only updates the level.
    """
    package_logger = logging.getLogger("flicker")
    package_logger.setLevel(level)
    if any(isinstance(handler, DebugLogHandler) for handler in package_logger.handlers):
        return

    handler = DebugLogHandler(log_buffer)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    log.info("Debug logging initialized, press F12 to view logs")
