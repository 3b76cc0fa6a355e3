"""Console report — render simulation results as text.

Every function here is pure: it takes report objects and returns a
string.  Printing is left to the caller (see ``cli.py``), which keeps
the formatting easy to test.
"""

from py_disksched.fairness import FairnessReport
from py_disksched.histogram import Histogram
from py_disksched.simulation import SimulationReport

BAR_CHAR = "█"

# FIFO is the fairness baseline, so it gets no fairness section of its own.
_BASELINE = "FIFO"


def format_movement(report: SimulationReport) -> str:
    """Return the head-movement summary for every strategy."""
    lines = [
        "=== Disk Scheduling Algorithm Performance ===",
        f"Initial head position: {report.initial_head}",
    ]
    lines.extend(f"{name}: {moved} tracks traversed" for name, moved in report.movement().items())
    return "\n".join(lines)


def format_fairness(fairness: FairnessReport) -> str:
    """Return the fairness statistics and the leading-requests table."""
    m = fairness.request_count
    lines = [
        f"Longest delay: {fairness.max_delay} requests",
        f"Requests delayed: {fairness.delayed_count} out of {m} "
        f"({fairness.delayed_percent:.2f}%)",
        "Average delay for delayed requests: "
        + _mean_text(fairness.delayed_count, fairness.mean_delay),
        f"Requests serviced early: {fairness.early_count} out of {m} "
        f"({fairness.early_percent:.2f}%)",
        "Average early service: " + _mean_text(fairness.early_count, fairness.mean_early),
        "",
        f"Detail for first {len(fairness.detail)} requests:",
        "Track | Entry Order | Service Order | Delay",
        "------|-------------|---------------|------",
    ]
    lines.extend(
        f"{r.track:<5} | {r.entry_order:<11} | {r.service_order:<13} | {r.delay:<5}"
        for r in fairness.detail
    )
    return "\n".join(lines)


def format_histogram(histogram: Histogram) -> str:
    """Return the per-bin delay table with bars."""
    lines = [
        "Track Range | Avg Delay | Max Delay | Histogram",
        "------------|-----------|-----------|-----------------------------------",
    ]
    lines.extend(
        f"{b.low:>2} - {b.high:>2}     | {b.mean_delay:9.2f} | {b.max_delay:9d} | "
        + BAR_CHAR * b.bar_length
        for b in histogram.bins
    )
    return "\n".join(lines)


def format_report(report: SimulationReport) -> str:
    """Return the full console report.

    Movement totals for every strategy, then fairness and histogram
    sections for every strategy except the FIFO baseline.
    """
    sections = [format_movement(report), "", "=== Fairness Analysis (compared to FIFO) ==="]
    for name, strategy in report.strategies.items():
        if name == _BASELINE:
            continue
        sections.extend(
            [
                "",
                f"{name} Fairness:",
                format_fairness(strategy.fairness),
                "",
                f"{name} Delay Histogram:",
                format_histogram(strategy.histogram),
            ]
        )
    return "\n".join(sections)


def _mean_text(count: int, mean: float) -> str:
    return f"{mean:.2f} requests" if count else "0"
