"""Workloads — the ordered track requests every strategy is measured on.

A workload is fixed and fully known before any strategy runs: an
ordered sequence of track numbers whose position in the sequence is
the request's *entry order* (its place in the arrival queue).  Every
strategy sees the same immutable workload, so their results can be
compared like for like.

Workloads travel between runs as a small text file::

    5        <- request count m
    50       <- track of request 0
    91       <- track of request 1
    ...

Module API:
    - ``generate_workload(count, seed=...)`` — reproducible pseudorandom draws.
    - ``dump_workload(workload, path)`` — write the text format.
    - ``load_workload(path)`` — read it back; malformed files are fatal.
"""

import random
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


class WorkloadError(Exception):
    """Raise when a workload cannot be generated or loaded."""


@dataclass(frozen=True)
class Workload:
    """An immutable, ordered sequence of track requests.

    The index of a track in ``tracks`` is its entry order.
    """

    tracks: tuple[int, ...]

    def __len__(self) -> int:
        """Return the number of requests."""
        return len(self.tracks)

    def __iter__(self) -> Iterator[int]:
        """Iterate over tracks in arrival order."""
        return iter(self.tracks)

    def entries(self) -> Iterator[tuple[int, int]]:
        """Yield ``(entry_order, track)`` pairs in arrival order."""
        return enumerate(self.tracks)

    @classmethod
    def of(cls, *tracks: int) -> "Workload":
        """Build a workload from positional track numbers."""
        return cls(tracks=tuple(tracks))


def generate_workload(count: int, *, seed: int, track_space: int = 100) -> Workload:
    """Draw *count* tracks uniformly from ``[0, track_space)``.

    The same seed always produces the same workload.

    Raises:
        WorkloadError: If *count* is negative or *track_space* is not positive.

    """
    if count < 0:
        msg = f"request count cannot be negative: {count}"
        raise WorkloadError(msg)
    if track_space < 1:
        msg = f"track space must be positive: {track_space}"
        raise WorkloadError(msg)
    rng = random.Random(seed)  # noqa: S311
    return Workload(tracks=tuple(rng.randrange(track_space) for _ in range(count)))


def dump_workload(workload: Workload, path: Path) -> None:
    """Write *workload* to *path* as a count line followed by one track per line.

    Raises:
        WorkloadError: If the file cannot be written.

    """
    lines = [str(len(workload)), *(str(track) for track in workload)]
    try:
        path.write_text("\n".join(lines) + "\n")
    except OSError as exc:
        msg = f"cannot write workload file {path}: {exc.strerror or exc}"
        raise WorkloadError(msg) from exc


def load_workload(path: Path, *, track_space: int | None = None) -> Workload:
    """Read a workload written by ``dump_workload``.

    Tokens are whitespace separated, so the layout of lines is not
    significant.  Anything after the declared number of tracks is
    ignored.

    Args:
        path: The file to read.
        track_space: If given, every track must lie in ``[0, track_space)``.

    Returns:
        The loaded workload.

    Raises:
        WorkloadError: If the file is missing, empty, truncated, holds a
            non-integer token, or a track falls outside the track space.

    """
    try:
        text = path.read_text()
    except OSError as exc:
        msg = f"cannot read workload file {path}: {exc.strerror or exc}"
        raise WorkloadError(msg) from exc

    tokens = text.split()
    if not tokens:
        msg = f"workload file {path} is empty"
        raise WorkloadError(msg)

    count = _parse_int(tokens[0], path=path, what="request count")
    if count < 0:
        msg = f"workload file {path} declares a negative request count: {count}"
        raise WorkloadError(msg)
    body = tokens[1 : count + 1]
    if len(body) < count:
        msg = f"workload file {path} declares {count} requests but holds {len(body)}"
        raise WorkloadError(msg)

    tracks: list[int] = []
    for index, token in enumerate(body):
        track = _parse_int(token, path=path, what=f"track of request {index}")
        if track_space is not None and not 0 <= track < track_space:
            msg = f"request {index} in {path} is outside [0, {track_space}): {track}"
            raise WorkloadError(msg)
        tracks.append(track)
    return Workload(tracks=tuple(tracks))


def _parse_int(token: str, *, path: Path, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        msg = f"{what} in {path} is not an integer: {token!r}"
        raise WorkloadError(msg) from None
