"""Fairness analysis — how far each strategy strays from arrival order.

FIFO services every request exactly when it arrived.  Any other
strategy trades that fairness for less head movement, and the price is
measured per request as its *delay*: ``service_order - entry_order``.

- A **delayed** request (delay > 0) was serviced later than FIFO would have.
- An **early** request (delay < 0) jumped ahead of the queue.

``analyze_fairness`` summarises one strategy's annotated requests into
counts, percentages and mean magnitudes for each group, the longest
delay seen, and a short detail table of the first few requests in
arrival order.  Empty groups (and an empty workload) report zeros
rather than dividing by zero.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from py_disksched.disk import Request

DEFAULT_DETAIL_ROWS = 10


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole else 0.0


def _mean(total: int, count: int) -> float:
    return total / count if count else 0.0


@dataclass(frozen=True)
class FairnessReport:
    """Delay statistics for one strategy run.

    Attributes:
        request_count: Number of requests analysed (m).
        delayed_count: Requests with a strictly positive delay.
        delayed_total: Sum of those positive delays.
        early_count: Requests with a strictly negative delay.
        early_total: Sum of the magnitudes of those negative delays.
        max_delay: Largest positive delay seen (0 if none).
        detail: The first few requests, in entry order.

    """

    request_count: int
    delayed_count: int
    delayed_total: int
    early_count: int
    early_total: int
    max_delay: int
    detail: tuple[Request, ...]

    @property
    def delayed_percent(self) -> float:
        """Return the share of delayed requests, as a percentage of m."""
        return _percent(self.delayed_count, self.request_count)

    @property
    def early_percent(self) -> float:
        """Return the share of early requests, as a percentage of m."""
        return _percent(self.early_count, self.request_count)

    @property
    def mean_delay(self) -> float:
        """Return the mean delay among delayed requests."""
        return _mean(self.delayed_total, self.delayed_count)

    @property
    def mean_early(self) -> float:
        """Return the mean magnitude of early service among early requests."""
        return _mean(self.early_total, self.early_count)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "request_count": self.request_count,
            "delayed_count": self.delayed_count,
            "delayed_percent": self.delayed_percent,
            "mean_delay": self.mean_delay,
            "early_count": self.early_count,
            "early_percent": self.early_percent,
            "mean_early": self.mean_early,
            "max_delay": self.max_delay,
            "detail": [r.to_dict() for r in self.detail],
        }


def analyze_fairness(
    requests: Sequence[Request],
    *,
    detail_rows: int = DEFAULT_DETAIL_ROWS,
) -> FairnessReport:
    """Summarise the delays of one strategy's annotated requests.

    Args:
        requests: Annotated requests indexed by entry order.
        detail_rows: How many leading requests to keep for the detail table.

    Returns:
        The fairness report.

    """
    delayed_count = delayed_total = 0
    early_count = early_total = 0
    max_delay = 0
    for request in requests:
        if request.delay > 0:
            delayed_count += 1
            delayed_total += request.delay
            max_delay = max(max_delay, request.delay)
        elif request.delay < 0:
            early_count += 1
            early_total += -request.delay
    return FairnessReport(
        request_count=len(requests),
        delayed_count=delayed_count,
        delayed_total=delayed_total,
        early_count=early_count,
        early_total=early_total,
        max_delay=max_delay,
        detail=tuple(requests[: min(len(requests), detail_rows)]),
    )
