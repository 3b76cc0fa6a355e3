"""Simulator — run every strategy over one workload and analyse each.

The simulator ties a set of ``DiskPolicy`` strategies to a workload and
an initial head position.  Each strategy runs independently over the
same immutable workload; its result then feeds the fairness analyzer
and the histogram builder.  Nothing flows from one strategy's run into
another's.

Usage::

    sim = Simulator(config=SimulationConfig(initial_head=50))
    report = sim.run(Workload.of(50, 91, 10, 25, 63))
    report.movement()   # {"FIFO": 175, "SSTF": 122, "SCAN": 122, "C-SCAN": 66}
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from py_disksched.config import SimulationConfig
from py_disksched.disk import DiskPolicy, ScheduleResult, default_policies
from py_disksched.fairness import FairnessReport, analyze_fairness
from py_disksched.histogram import Histogram, build_histogram
from py_disksched.logging import Logger, LogLevel
from py_disksched.workload import Workload


@dataclass(frozen=True)
class StrategyReport:
    """Everything known about one strategy's run."""

    result: ScheduleResult
    fairness: FairnessReport
    histogram: Histogram

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "result": self.result.to_dict(),
            "fairness": self.fairness.to_dict(),
            "histogram": self.histogram.to_dict(),
        }


@dataclass(frozen=True)
class SimulationReport:
    """The outcome of running every strategy over one workload.

    Attributes:
        workload: The workload that was scheduled.
        initial_head: Head position supplied to the strategies.
        strategies: Per-strategy reports, in run order.

    """

    workload: Workload
    initial_head: int
    strategies: dict[str, StrategyReport]

    def movement(self) -> dict[str, int]:
        """Return total head movement per strategy."""
        return {name: s.result.total_movement for name, s in self.strategies.items()}

    def __getitem__(self, name: str) -> StrategyReport:
        """Return the report for strategy *name*."""
        return self.strategies[name]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "request_count": len(self.workload),
            "initial_head": self.initial_head,
            "tracks": list(self.workload.tracks),
            "strategies": {name: s.to_dict() for name, s in self.strategies.items()},
        }


class Simulator:
    """Run a fixed set of strategies and analyse their results."""

    def __init__(
        self,
        *,
        config: SimulationConfig | None = None,
        logger: Logger | None = None,
        policies: Iterable[DiskPolicy] | None = None,
    ) -> None:
        """Create a simulator.

        Args:
            config: Settings; defaults reproduce the classic experiment.
            logger: Where run events are recorded (a fresh one if omitted).
            policies: Strategies to run, in reporting order.

        """
        self._config = (config or SimulationConfig()).validate()
        self._logger = logger if logger is not None else Logger()
        self._policies = tuple(policies) if policies is not None else default_policies()

    @property
    def config(self) -> SimulationConfig:
        """Return the simulator's settings."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the run log."""
        return self._logger

    @property
    def policies(self) -> tuple[DiskPolicy, ...]:
        """Return the strategies in run order."""
        return self._policies

    def run(self, workload: Workload, *, head: int | None = None) -> SimulationReport:
        """Schedule *workload* with every strategy.

        Args:
            workload: The requests to schedule.
            head: Initial head position; defaults to the configured one.

        Returns:
            A report keyed by strategy name.

        """
        head = self._config.initial_head if head is None else head
        if not workload.tracks:
            self._logger.log(LogLevel.WARNING, "empty workload", source="simulator")
        self._logger.log(
            LogLevel.INFO,
            f"scheduling {len(workload)} requests, initial head {head}",
            source="simulator",
        )
        strategies = {
            policy.name: self._analyse(policy.schedule(workload, head=head))
            for policy in self._policies
        }
        return SimulationReport(workload=workload, initial_head=head, strategies=strategies)

    def _analyse(self, result: ScheduleResult) -> StrategyReport:
        self._logger.log(
            LogLevel.DEBUG,
            f"start {result.start_position}, {result.passes} pass(es)",
            source=result.strategy,
        )
        self._logger.log(
            LogLevel.INFO,
            f"{result.total_movement} tracks traversed",
            source=result.strategy,
        )
        cfg = self._config
        return StrategyReport(
            result=result,
            fairness=analyze_fairness(result.requests, detail_rows=cfg.detail_rows),
            histogram=build_histogram(
                result.requests,
                track_space=cfg.track_space,
                bin_count=cfg.bin_count,
                render_width=cfg.render_width,
            ),
        )
