"""Disk scheduling strategies — ordering track requests to limit head travel.

A disk head services requests by moving between tracks.  The dominant
cost is how far the head travels, so a scheduling strategy decides the
*order* in which the queued requests are serviced.  Reordering saves
movement but costs fairness: a request may be serviced earlier or later
than its place in the arrival queue.

Think of the head like an elevator in a building:
    - **FIFO** — stop at every floor in the order buttons were pressed.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go up while anyone above is waiting, then come back down.
    - **C-SCAN** — go up, drop straight to the ground floor, go up again.

Strategies:
    - ``FIFOPolicy`` — no reordering, every delay is zero.
    - ``SSTFPolicy`` — nearest unserviced track next; ties go to the
      earliest arrival.
    - ``SCANPolicy`` — demand-driven elevator: the head reverses as soon
      as nothing is left ahead of it, not at the edge of the disk.
    - ``CSCANPolicy`` — upward sweeps only; the jump back to track 0 is
      free.

Start positions differ on purpose.  FIFO and SSTF begin at the first
request's track and ignore the supplied head; SCAN and C-SCAN begin at
the supplied head.  Each policy reports its choice through
``effective_start_position`` so callers are never surprised.

Every call to ``schedule`` owns its own bookkeeping and returns a fresh
``ScheduleResult``; results from different strategies never share state.
"""

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any, Protocol

from py_disksched.workload import Workload


class SchedulingError(Exception):
    """Raise when a service sequence is not a permutation of the workload."""


class Direction(StrEnum):
    """Direction of head travel during a sweep."""

    UP = "up"
    DOWN = "down"

    def flipped(self) -> "Direction":
        """Return the opposite direction."""
        return Direction.DOWN if self is Direction.UP else Direction.UP


@dataclass(frozen=True)
class Request:
    """One workload entry annotated with how a strategy serviced it.

    Attributes:
        track: The requested track.
        entry_order: Position in the arrival queue.
        service_order: Position in this strategy's service order.
        delay: ``service_order - entry_order``; positive means late.

    """

    track: int
    entry_order: int
    service_order: int
    delay: int

    def to_dict(self) -> dict[str, int]:
        """Serialize to a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of one strategy run over one workload.

    Attributes:
        strategy: Name of the strategy that produced this result.
        start_position: Where the head began for this strategy.
        total_movement: Sum of absolute track deltas travelled.
        service_sequence: Entry indices in the order they were serviced.
        requests: Annotated requests, indexed by entry order.
        passes: Number of directional passes that serviced something.

    """

    strategy: str
    start_position: int
    total_movement: int
    service_sequence: tuple[int, ...]
    requests: tuple[Request, ...]
    passes: int

    @property
    def head_path(self) -> list[int]:
        """Return the tracks visited, in service order."""
        return [self.requests[i].track for i in self.service_sequence]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "strategy": self.strategy,
            "start_position": self.start_position,
            "total_movement": self.total_movement,
            "service_sequence": list(self.service_sequence),
            "passes": self.passes,
            "requests": [r.to_dict() for r in self.requests],
        }


def build_requests(workload: Workload, service_sequence: tuple[int, ...]) -> tuple[Request, ...]:
    """Annotate every workload entry with its service order and delay.

    Args:
        workload: The workload that was scheduled.
        service_sequence: Entry indices in the order they were serviced.

    Returns:
        One ``Request`` per entry, in entry order.

    Raises:
        SchedulingError: If *service_sequence* does not use every entry
            index exactly once.

    """
    m = len(workload)
    if sorted(service_sequence) != list(range(m)):
        msg = f"service sequence is not a permutation of 0..{m - 1}: {service_sequence}"
        raise SchedulingError(msg)
    service_order = [0] * m
    for position, index in enumerate(service_sequence):
        service_order[index] = position
    return tuple(
        Request(
            track=track,
            entry_order=entry,
            service_order=service_order[entry],
            delay=service_order[entry] - entry,
        )
        for entry, track in workload.entries()
    )


class _HeadRun:
    """Bookkeeping owned by a single strategy run."""

    def __init__(self, workload: Workload, start: int) -> None:
        self.workload = workload
        self.tracks = workload.tracks
        self.start = start
        self.position = start
        self.movement = 0
        self.passes = 0
        self.sequence: list[int] = []
        # Unserviced entry indices, kept in arrival order.
        self.pending: list[int] = list(range(len(workload)))

    def service(self, index: int) -> None:
        track = self.tracks[index]
        self.movement += abs(track - self.position)
        self.position = track
        self.sequence.append(index)
        self.pending.remove(index)

    def sweep(self, batch: list[int]) -> None:
        if not batch:
            return
        self.passes += 1
        for index in batch:
            self.service(index)

    def nearest(self) -> int:
        """Return the pending index closest to the head, earliest arrival on ties."""
        # min() keeps the first minimum and pending is in arrival order.
        return min(self.pending, key=lambda i: abs(self.tracks[i] - self.position))

    def reachable(self, direction: Direction) -> list[int]:
        """Return pending indices ahead of the head, ordered by direction of travel."""
        if direction is Direction.UP:
            ahead = [i for i in self.pending if self.tracks[i] >= self.position]
            return sorted(ahead, key=self.tracks.__getitem__)
        ahead = [i for i in self.pending if self.tracks[i] <= self.position]
        return sorted(ahead, key=self.tracks.__getitem__, reverse=True)

    def result(self, strategy: str) -> ScheduleResult:
        sequence = tuple(self.sequence)
        return ScheduleResult(
            strategy=strategy,
            start_position=self.start,
            total_movement=self.movement,
            service_sequence=sequence,
            requests=build_requests(self.workload, sequence),
            passes=self.passes,
        )


class DiskPolicy(Protocol):
    """Protocol for disk scheduling strategies (Strategy pattern)."""

    @property
    def name(self) -> str:
        """Return the strategy's display name."""
        ...  # pragma: no cover

    def effective_start_position(self, workload: Workload, head: int) -> int:
        """Return where the head begins for this strategy."""
        ...  # pragma: no cover

    def schedule(self, workload: Workload, *, head: int) -> ScheduleResult:
        """Service every request in *workload* and report the outcome."""
        ...  # pragma: no cover


class _FirstTrackStart:
    """Mixin for strategies that start at the first request's track."""

    def effective_start_position(self, workload: Workload, head: int) -> int:
        """Return the first request's track, or *head* for an empty workload."""
        return workload.tracks[0] if workload.tracks else head


class _HeadStart:
    """Mixin for strategies that start at the supplied head position."""

    def effective_start_position(self, workload: Workload, head: int) -> int:  # noqa: ARG002
        """Return *head* unchanged."""
        return head


class FIFOPolicy(_FirstTrackStart):
    """First In, First Out — service in arrival order.

    Fair by construction (every delay is zero), but the head zigzags
    across the disk.  The supplied head position is ignored: movement is
    counted between consecutive requests only.
    """

    name = "FIFO"

    def schedule(self, workload: Workload, *, head: int) -> ScheduleResult:
        """Service requests in their original order."""
        run = _HeadRun(workload, self.effective_start_position(workload, head))
        run.sweep(list(range(len(workload))))
        return run.result(self.name)


class SSTFPolicy(_FirstTrackStart):
    """Shortest Seek Time First — always go to the nearest request.

    The first request is serviced where the head begins (its own track),
    then each step picks the unserviced request closest to the head.
    Among equally close requests the earliest arrival wins.  Greedy and
    cheap on movement, but requests far from a busy region can wait a
    long time.
    """

    name = "SSTF"

    def schedule(self, workload: Workload, *, head: int) -> ScheduleResult:
        """Return the nearest-first service order."""
        run = _HeadRun(workload, self.effective_start_position(workload, head))
        if not run.pending:
            return run.result(self.name)
        run.passes = 1
        run.service(0)
        while run.pending:
            run.service(run.nearest())
        return run.result(self.name)


class SCANPolicy(_HeadStart):
    """SCAN (elevator) — sweep one way, then reverse.

    The head services every pending request ahead of it in the current
    direction, then turns around.  It turns as soon as nothing is left
    ahead, without travelling to the edge of the disk first.

    Args:
        direction: Initial sweep direction.

    """

    name = "SCAN"

    def __init__(self, *, direction: Direction = Direction.UP) -> None:
        """Create a SCAN policy with an initial direction."""
        self._direction = direction

    def schedule(self, workload: Workload, *, head: int) -> ScheduleResult:
        """Return the elevator service order."""
        run = _HeadRun(workload, self.effective_start_position(workload, head))
        direction = self._direction
        while run.pending:
            run.sweep(run.reachable(direction))
            direction = direction.flipped()
        return run.result(self.name)


class CSCANPolicy(_HeadStart):
    """Circular SCAN — sweep up, jump back to track 0, sweep up again.

    Requests are only ever serviced while moving up.  When nothing is
    left above the head it returns to track 0; that return trip is not
    counted as movement.  Compared to SCAN, requests near either edge of
    the disk wait about equally long.
    """

    name = "C-SCAN"

    def schedule(self, workload: Workload, *, head: int) -> ScheduleResult:
        """Return the circular sweep service order."""
        run = _HeadRun(workload, self.effective_start_position(workload, head))
        while run.pending:
            run.sweep(run.reachable(Direction.UP))
            if run.pending:
                run.position = 0
                run.sweep(sorted(run.pending, key=run.tracks.__getitem__))
        return run.result(self.name)


def default_policies() -> tuple[DiskPolicy, ...]:
    """Return one instance of each strategy, in reporting order."""
    return (FIFOPolicy(), SSTFPolicy(), SCANPolicy(), CSCANPolicy())
