"""Delay histogram — where on the disk the unfairness lands.

The track domain ``[0, track_space)`` is cut into equal-width bins (ten
by default).  Each request falls into the bin of its track, and every
bin reports how many requests it holds, their mean delay, and the
largest delay seen.  A bar length is derived from the mean so the bins
can be drawn side by side.

Two behaviours are deliberate:
    - **Top-edge clamping** — a track past the last full bin is counted
      in the last bin (and a negative track in the first).
    - **Zero-baseline maximum** — the per-bin maximum starts at 0, so a
      bin whose requests were all serviced early reports 0, not its
      least negative delay.  It reads as "worst lateness", never as an
      extremum of early service.

Bars share one scale, computed once from the largest bin mean::

    scale = max(1, render_width / (floor(max_mean) + 1))
    bar   = floor(mean * scale)      # never below 0
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from py_disksched.disk import Request

DEFAULT_TRACK_SPACE = 100
DEFAULT_BIN_COUNT = 10
DEFAULT_RENDER_WIDTH = 50


@dataclass(frozen=True)
class HistogramBin:
    """Delay statistics for one contiguous track range.

    Attributes:
        index: Position of the bin, from 0.
        low: First track in the range.
        high: Last track in the range (inclusive).
        count: Requests whose track falls in the range.
        delay_total: Sum of their delays.
        max_delay: Largest delay above the zero baseline (0 if none).
        bar_length: Rendered bar length in characters.

    """

    index: int
    low: int
    high: int
    count: int
    delay_total: int
    max_delay: int
    bar_length: int

    @property
    def mean_delay(self) -> float:
        """Return the mean delay in this bin, or 0.0 when it is empty."""
        return self.delay_total / self.count if self.count else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "low": self.low,
            "high": self.high,
            "count": self.count,
            "mean_delay": self.mean_delay,
            "max_delay": self.max_delay,
            "bar_length": self.bar_length,
        }


@dataclass(frozen=True)
class Histogram:
    """A full set of bins plus the shared bar scale."""

    bins: tuple[HistogramBin, ...]
    bin_width: int
    scale: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "bin_width": self.bin_width,
            "scale": self.scale,
            "bins": [b.to_dict() for b in self.bins],
        }


def bin_index(track: int, *, bin_width: int, bin_count: int) -> int:
    """Return the bin a track belongs to, clamped to the valid range."""
    return min(max(track // bin_width, 0), bin_count - 1)


def build_histogram(
    requests: Sequence[Request],
    *,
    track_space: int = DEFAULT_TRACK_SPACE,
    bin_count: int = DEFAULT_BIN_COUNT,
    render_width: int = DEFAULT_RENDER_WIDTH,
) -> Histogram:
    """Bucket one strategy's delays by track range.

    Args:
        requests: Annotated requests from a single strategy run.
        track_space: Size of the track domain.
        bin_count: Number of equal-width bins.
        render_width: Bar-length budget used to derive the scale.

    Returns:
        The histogram, with ``bin_count`` bins in track order.

    Raises:
        ValueError: If the track space cannot be split into *bin_count*
            bins of at least one track each.

    """
    if bin_count < 1 or track_space < bin_count:
        msg = f"cannot split {track_space} tracks into {bin_count} bins"
        raise ValueError(msg)
    bin_width = track_space // bin_count

    counts = [0] * bin_count
    totals = [0] * bin_count
    maxima = [0] * bin_count
    for request in requests:
        i = bin_index(request.track, bin_width=bin_width, bin_count=bin_count)
        counts[i] += 1
        totals[i] += request.delay
        maxima[i] = max(maxima[i], request.delay)

    means = [totals[i] / counts[i] if counts[i] else 0.0 for i in range(bin_count)]
    max_mean = max(0.0, *means)
    scale = max(1.0, render_width / (math.floor(max_mean) + 1))

    bins = tuple(
        HistogramBin(
            index=i,
            low=i * bin_width,
            high=(i + 1) * bin_width - 1,
            count=counts[i],
            delay_total=totals[i],
            max_delay=maxima[i],
            bar_length=max(0, math.floor(means[i] * scale)),
        )
        for i in range(bin_count)
    )
    return Histogram(bins=bins, bin_width=bin_width, scale=scale)
