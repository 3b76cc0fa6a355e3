"""Simulation logging — a structured record of what each run did.

Every simulation run leaves a trail: the workload it was handed, how
many directional passes each strategy needed, the head movement each
one produced.  Rather than printing as it goes, the simulator appends
structured entries to an in-memory log that callers can filter and
render when (and if) they want to.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source).
- **Logger** — an append-only log with filtering, formatting and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — a record never changes once written.
    - **Sources name the subsystem** — ``"workload"``, ``"simulator"``, or
      a strategy name such as ``"SCAN"``.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The subsystem or strategy that produced the event.

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in the order they were written."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log."""
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = self._entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result if result is not self._entries else list(result)

    def format(self, *, min_level: LogLevel = LogLevel.DEBUG) -> str:
        """Render matching entries one per line."""
        return "\n".join(str(e) for e in self.filter(min_level=min_level))

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
