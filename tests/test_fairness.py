"""Tests for the fairness analyzer.

A request's delay is how far its service position strays from its
arrival position.  The analyzer counts delayed and early requests,
their mean magnitudes, and the longest delay, reporting zeros instead
of dividing by zero when a group (or the whole workload) is empty.
"""

import pytest

from py_disksched.disk import FIFOPolicy, Request, SSTFPolicy
from py_disksched.fairness import analyze_fairness
from py_disksched.workload import Workload

_WORKLOAD = Workload.of(50, 91, 10, 25, 63)


def _request(entry: int, service: int, track: int = 0) -> Request:
    return Request(track=track, entry_order=entry, service_order=service, delay=service - entry)


class TestFairnessCounts:
    """Verify group counts, sums and percentages."""

    def test_sstf_reference(self) -> None:
        """SSTF delays [0, 1, 2, 0, -3] should split into 2 late and 1 early."""
        result = SSTFPolicy().schedule(_WORKLOAD, head=50)
        report = analyze_fairness(result.requests)
        assert report.request_count == 5
        assert report.delayed_count == 2
        assert report.delayed_total == 3
        assert report.early_count == 1
        assert report.early_total == 3
        assert report.max_delay == 2

    def test_sstf_derived_values(self) -> None:
        """Percentages are relative to m, means to each group's size."""
        report = analyze_fairness(SSTFPolicy().schedule(_WORKLOAD, head=50).requests)
        assert report.delayed_percent == pytest.approx(40.0)
        assert report.early_percent == pytest.approx(20.0)
        assert report.mean_delay == pytest.approx(1.5)
        assert report.mean_early == pytest.approx(3.0)

    def test_fifo_is_perfectly_fair(self) -> None:
        """FIFO's own output should show no delayed or early requests."""
        report = analyze_fairness(FIFOPolicy().schedule(_WORKLOAD, head=50).requests)
        assert report.delayed_percent == 0.0
        assert report.early_percent == 0.0
        assert report.mean_delay == 0.0
        assert report.mean_early == 0.0
        assert report.max_delay == 0

    def test_only_early_requests_keep_max_at_zero(self) -> None:
        """The longest delay counts positive delays only."""
        requests = [_request(1, 0), _request(0, 1)]
        report = analyze_fairness(requests)
        assert report.max_delay == 1
        report = analyze_fairness([_request(1, 0)])
        assert report.max_delay == 0
        assert report.mean_delay == 0.0

    def test_empty_workload(self) -> None:
        """An empty request list should report zeros without failing."""
        report = analyze_fairness([])
        assert report.request_count == 0
        assert report.delayed_percent == 0.0
        assert report.early_percent == 0.0
        assert report.mean_delay == 0.0
        assert report.mean_early == 0.0
        assert report.detail == ()


class TestFairnessDetail:
    """Verify the leading-requests detail table."""

    def test_detail_keeps_entry_order(self) -> None:
        """Detail rows should follow arrival order, not service order."""
        report = analyze_fairness(SSTFPolicy().schedule(_WORKLOAD, head=50).requests)
        assert [r.entry_order for r in report.detail] == [0, 1, 2, 3, 4]
        assert [r.service_order for r in report.detail] == [0, 2, 4, 3, 1]

    def test_detail_capped_at_ten(self) -> None:
        """At most ten rows should be kept by default."""
        workload = Workload(tracks=tuple(range(25)))
        report = analyze_fairness(FIFOPolicy().schedule(workload, head=0).requests)
        assert len(report.detail) == 10
        assert report.detail[-1].entry_order == 9

    def test_detail_rows_configurable(self) -> None:
        """The caller may ask for fewer rows."""
        report = analyze_fairness(
            SSTFPolicy().schedule(_WORKLOAD, head=50).requests, detail_rows=2
        )
        assert [r.track for r in report.detail] == [50, 91]

    def test_to_dict(self) -> None:
        """The report should serialize derived values too."""
        data = analyze_fairness(SSTFPolicy().schedule(_WORKLOAD, head=50).requests).to_dict()
        assert data["delayed_percent"] == pytest.approx(40.0)
        assert data["mean_early"] == pytest.approx(3.0)
        assert len(data["detail"]) == 5
