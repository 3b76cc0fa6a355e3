"""Tests for workloads and their text file format.

A workload is the immutable, ordered list of track requests every
strategy is measured on.  It can be generated from a seed, written to
a file (count line, then one track per line), and read back.
"""

from pathlib import Path

import pytest

from py_disksched.workload import (
    Workload,
    WorkloadError,
    dump_workload,
    generate_workload,
    load_workload,
)


class TestWorkload:
    """Verify the workload value type."""

    def test_entries_carry_arrival_index(self) -> None:
        """Entries should pair each track with its entry order."""
        workload = Workload.of(50, 91, 10)
        assert list(workload.entries()) == [(0, 50), (1, 91), (2, 10)]

    def test_len_and_iter(self) -> None:
        """A workload should behave like a read-only sequence of tracks."""
        workload = Workload.of(3, 1, 2)
        assert len(workload) == 3
        assert list(workload) == [3, 1, 2]

    def test_immutable(self) -> None:
        """Workloads should not be reassignable."""
        workload = Workload.of(1)
        with pytest.raises(AttributeError):
            workload.tracks = (2,)  # type: ignore[misc]


class TestGenerate:
    """Verify seeded generation."""

    def test_same_seed_same_workload(self) -> None:
        """Generation should be reproducible from the seed."""
        assert generate_workload(50, seed=7) == generate_workload(50, seed=7)

    def test_different_seed_differs(self) -> None:
        """Different seeds should (for this size) give different workloads."""
        assert generate_workload(50, seed=7) != generate_workload(50, seed=8)

    def test_tracks_in_range(self) -> None:
        """Every track should lie in [0, track_space)."""
        workload = generate_workload(500, seed=1, track_space=20)
        assert len(workload) == 500
        assert all(0 <= t < 20 for t in workload)

    def test_zero_requests(self) -> None:
        """A count of zero should give an empty workload."""
        assert len(generate_workload(0, seed=1)) == 0

    def test_negative_count_rejected(self) -> None:
        """A negative count is an error."""
        with pytest.raises(WorkloadError, match="negative"):
            generate_workload(-1, seed=1)

    def test_empty_track_space_rejected(self) -> None:
        """A track space of zero is an error."""
        with pytest.raises(WorkloadError, match="positive"):
            generate_workload(5, seed=1, track_space=0)


class TestFileFormat:
    """Verify dump and load."""

    def test_dump_format(self, tmp_path: Path) -> None:
        """The file should hold the count then one track per line."""
        path = tmp_path / "w.txt"
        dump_workload(Workload.of(50, 91, 10), path)
        assert path.read_text() == "3\n50\n91\n10\n"

    def test_round_trip(self, tmp_path: Path) -> None:
        """Loading a dumped workload should give it back."""
        path = tmp_path / "w.txt"
        workload = generate_workload(30, seed=3)
        dump_workload(workload, path)
        assert load_workload(path) == workload

    def test_whitespace_layout_ignored(self, tmp_path: Path) -> None:
        """Tokens may be spread over lines arbitrarily."""
        path = tmp_path / "w.txt"
        path.write_text("3 50\n\n91   10\n")
        assert load_workload(path) == Workload.of(50, 91, 10)

    def test_extra_tokens_ignored(self, tmp_path: Path) -> None:
        """Anything past the declared count is ignored."""
        path = tmp_path / "w.txt"
        path.write_text("2\n1\n2\n3\n")
        assert load_workload(path) == Workload.of(1, 2)

    def test_zero_count(self, tmp_path: Path) -> None:
        """A file declaring zero requests loads as an empty workload."""
        path = tmp_path / "w.txt"
        path.write_text("0\n")
        assert len(load_workload(path)) == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is fatal."""
        with pytest.raises(WorkloadError, match="cannot read"):
            load_workload(tmp_path / "nope.txt")

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file is fatal."""
        path = tmp_path / "w.txt"
        path.write_text("")
        with pytest.raises(WorkloadError, match="empty"):
            load_workload(path)

    def test_bad_count(self, tmp_path: Path) -> None:
        """A non-integer count is fatal."""
        path = tmp_path / "w.txt"
        path.write_text("three\n1\n2\n3\n")
        with pytest.raises(WorkloadError, match="request count"):
            load_workload(path)

    def test_negative_count(self, tmp_path: Path) -> None:
        """A negative count is fatal."""
        path = tmp_path / "w.txt"
        path.write_text("-2\n")
        with pytest.raises(WorkloadError, match="negative"):
            load_workload(path)

    def test_truncated_file(self, tmp_path: Path) -> None:
        """Fewer tracks than declared is fatal."""
        path = tmp_path / "w.txt"
        path.write_text("4\n1\n2\n")
        with pytest.raises(WorkloadError, match="declares 4 requests but holds 2"):
            load_workload(path)

    def test_bad_track(self, tmp_path: Path) -> None:
        """A non-integer track is fatal."""
        path = tmp_path / "w.txt"
        path.write_text("2\n1\nx\n")
        with pytest.raises(WorkloadError, match="request 1"):
            load_workload(path)

    def test_track_out_of_range(self, tmp_path: Path) -> None:
        """With a track space given, out-of-range tracks are fatal."""
        path = tmp_path / "w.txt"
        path.write_text("2\n1\n100\n")
        assert load_workload(path) == Workload.of(1, 100)
        with pytest.raises(WorkloadError, match="outside"):
            load_workload(path, track_space=100)

    def test_unwritable_path(self, tmp_path: Path) -> None:
        """Writing into a missing directory is reported as a workload error."""
        with pytest.raises(WorkloadError, match="cannot write"):
            dump_workload(Workload.of(1), tmp_path / "missing" / "w.txt")
