"""Simulation settings and where they come from.

A simulation is parameterised by a handful of integers: how wide the
track domain is, where the head starts for the sweep strategies, how
many requests to generate, and how the histogram is drawn.  The
defaults reproduce the classic console experiment (100 tracks, head at
50, ten bins, fifty-character bars).

Settings can be overridden through ``DISKSCHED_*`` environment
variables, the same key-value style a Unix process inherits its
configuration in::

    DISKSCHED_INITIAL_HEAD=20 DISKSCHED_SEED=7 py-disksched
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

ENV_PREFIX = "DISKSCHED_"

DEFAULT_TRACK_SPACE = 100
DEFAULT_INITIAL_HEAD = 50
DEFAULT_REQUEST_COUNT = 100
DEFAULT_BIN_COUNT = 10
DEFAULT_RENDER_WIDTH = 50
DEFAULT_DETAIL_ROWS = 10
DEFAULT_WORKLOAD_PATH = Path("track_requests.txt")

_INT_SETTINGS = (
    "track_space",
    "initial_head",
    "request_count",
    "bin_count",
    "render_width",
    "detail_rows",
)


class ConfigError(ValueError):
    """Raise when a setting is missing its expected shape or range."""


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable bundle of simulation settings.

    Attributes:
        track_space: Size of the track domain ``[0, track_space)``.
        initial_head: Head position for the SCAN-family strategies.
        request_count: Number of requests to generate.
        seed: Workload seed; ``None`` means "pick one at run time".
        bin_count: Number of histogram bins.
        render_width: Bar-length budget for the histogram.
        detail_rows: Requests shown in the fairness detail table.
        workload_path: Where the generated workload is written.

    """

    track_space: int = DEFAULT_TRACK_SPACE
    initial_head: int = DEFAULT_INITIAL_HEAD
    request_count: int = DEFAULT_REQUEST_COUNT
    seed: int | None = None
    bin_count: int = DEFAULT_BIN_COUNT
    render_width: int = DEFAULT_RENDER_WIDTH
    detail_rows: int = DEFAULT_DETAIL_ROWS
    workload_path: Path = field(default=DEFAULT_WORKLOAD_PATH)

    def validate(self) -> "SimulationConfig":
        """Return self if every setting is in range.

        Raises:
            ConfigError: On the first setting out of range.

        """
        if self.track_space < 1:
            msg = f"track_space must be positive, got {self.track_space}"
            raise ConfigError(msg)
        if self.bin_count < 1:
            msg = f"bin_count must be positive, got {self.bin_count}"
            raise ConfigError(msg)
        if self.track_space < self.bin_count:
            msg = f"track_space ({self.track_space}) is smaller than bin_count ({self.bin_count})"
            raise ConfigError(msg)
        if self.render_width < 1:
            msg = f"render_width must be positive, got {self.render_width}"
            raise ConfigError(msg)
        if self.request_count < 0:
            msg = f"request_count cannot be negative, got {self.request_count}"
            raise ConfigError(msg)
        if self.detail_rows < 0:
            msg = f"detail_rows cannot be negative, got {self.detail_rows}"
            raise ConfigError(msg)
        return self

    def with_overrides(self, **changes: object) -> "SimulationConfig":
        """Return a validated copy with *changes* applied (``None`` values skipped)."""
        kept = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **kept).validate()  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "SimulationConfig":
        """Build a config from ``DISKSCHED_*`` variables in *environ*.

        Unset variables keep their defaults.

        Raises:
            ConfigError: If a numeric variable does not parse as an integer
                or the resulting settings are out of range.

        """
        values: dict[str, object] = {}
        for name in (*_INT_SETTINGS, "seed"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None or not raw.strip():
                continue
            try:
                values[name] = int(raw)
            except ValueError:
                msg = f"{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}"
                raise ConfigError(msg) from None
        path = environ.get(ENV_PREFIX + "WORKLOAD_PATH")
        if path:
            values["workload_path"] = Path(path)
        return cls(**values).validate()  # type: ignore[arg-type]
