"""Tests for the simulation log.

The logger records structured entries for each run: which workload
was scheduled and what each strategy did with it.
"""

from py_disksched.logging import LogEntry, Logger, LogLevel
from py_disksched.simulation import Simulator
from py_disksched.workload import Workload


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_str(self) -> None:
        """String form should be ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="empty workload", source="simulator")
        assert str(entry) == "[WARNING] simulator: empty workload"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable in order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_returns_copy(self) -> None:
        """Mutating the returned list should not affect the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "kept", source="test")
        logger.entries.clear()
        assert len(logger.entries) == 1

    def test_filter_by_level(self) -> None:
        """min_level should drop less severe entries."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "noise", source="SCAN")
        logger.log(LogLevel.WARNING, "odd", source="SCAN")
        assert [e.message for e in logger.filter(min_level=LogLevel.INFO)] == ["odd"]

    def test_filter_by_source(self) -> None:
        """source should keep only matching entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="SCAN")
        logger.log(LogLevel.INFO, "b", source="SSTF")
        assert [e.message for e in logger.filter(source="SSTF")] == ["b"]

    def test_format(self) -> None:
        """format should render one entry per line."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "hidden", source="x")
        logger.log(LogLevel.INFO, "shown", source="x")
        assert logger.format(min_level=LogLevel.INFO) == "[INFO] x: shown"

    def test_clear(self) -> None:
        """clear should empty the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "gone", source="x")
        logger.clear()
        assert logger.entries == []


class TestSimulatorLogging:
    """Verify the simulator writes to its logger."""

    def test_logs_movement_per_strategy(self) -> None:
        """Each strategy should log its total movement."""
        logger = Logger()
        Simulator(logger=logger).run(Workload.of(50, 91, 10, 25, 63))
        scan = logger.filter(source="C-SCAN", min_level=LogLevel.INFO)
        assert [e.message for e in scan] == ["66 tracks traversed"]

    def test_warns_on_empty_workload(self) -> None:
        """An empty workload should produce a warning."""
        logger = Logger()
        Simulator(logger=logger).run(Workload.of())
        warnings = logger.filter(min_level=LogLevel.WARNING)
        assert [e.message for e in warnings] == ["empty workload"]
