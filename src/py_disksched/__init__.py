"""Disk head scheduling simulator.

Re-exports public symbols so callers can write::

    from py_disksched import Simulator, Workload
"""

from py_disksched.config import ConfigError, SimulationConfig
from py_disksched.disk import (
    CSCANPolicy,
    Direction,
    DiskPolicy,
    FIFOPolicy,
    Request,
    SchedulingError,
    ScheduleResult,
    SCANPolicy,
    SSTFPolicy,
    build_requests,
    default_policies,
)
from py_disksched.fairness import FairnessReport, analyze_fairness
from py_disksched.histogram import Histogram, HistogramBin, build_histogram
from py_disksched.logging import LogEntry, Logger, LogLevel
from py_disksched.simulation import SimulationReport, Simulator, StrategyReport
from py_disksched.workload import (
    Workload,
    WorkloadError,
    dump_workload,
    generate_workload,
    load_workload,
)

__all__ = [
    "CSCANPolicy",
    "ConfigError",
    "Direction",
    "DiskPolicy",
    "FIFOPolicy",
    "FairnessReport",
    "Histogram",
    "HistogramBin",
    "LogEntry",
    "LogLevel",
    "Logger",
    "Request",
    "SCANPolicy",
    "SSTFPolicy",
    "ScheduleResult",
    "SchedulingError",
    "SimulationConfig",
    "SimulationReport",
    "Simulator",
    "StrategyReport",
    "Workload",
    "WorkloadError",
    "analyze_fairness",
    "build_histogram",
    "build_requests",
    "default_policies",
    "dump_workload",
    "generate_workload",
    "load_workload",
]
