"""Command-line entry point — the ``py-disksched`` console script.

One run of the classic experiment:

    1. **Generate** — draw ``count`` random tracks from the seed.
    2. **Persist** — write them to the workload file.
    3. **Load** — read the file back (so a hand-edited file works too).
    4. **Simulate** — run every strategy and print the report.

Usage::

    py-disksched              # 100 requests, seed from the clock
    py-disksched 500 42       # 500 requests, seed 42
    py-disksched 20 7 --head 10 --verbose

Settings not given on the command line come from ``DISKSCHED_*``
environment variables, then from the built-in defaults.
"""

import argparse
import os
import sys
import time
from pathlib import Path

from py_disksched.config import ConfigError, SimulationConfig
from py_disksched.logging import Logger, LogLevel
from py_disksched.report import format_report
from py_disksched.simulation import Simulator
from py_disksched.workload import WorkloadError, dump_workload, generate_workload, load_workload


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the console script."""
    parser = argparse.ArgumentParser(
        prog="py-disksched",
        description="Compare FIFO, SSTF, SCAN and C-SCAN disk head scheduling.",
    )
    parser.add_argument("count", type=int, nargs="?", help="number of track requests")
    parser.add_argument("seed", type=int, nargs="?", help="random seed (default: current time)")
    parser.add_argument("--head", type=int, help="initial head position for SCAN and C-SCAN")
    parser.add_argument("--file", type=Path, help="workload file to write and read back")
    parser.add_argument("--track-space", type=int, help="number of tracks on the disk")
    parser.add_argument("--verbose", action="store_true", help="print the simulation log")
    return parser


def resolve_config(args: argparse.Namespace, environ: dict[str, str]) -> SimulationConfig:
    """Merge command-line arguments over environment settings."""
    return SimulationConfig.from_env(environ).with_overrides(
        request_count=args.count,
        seed=args.seed,
        initial_head=args.head,
        workload_path=args.file,
        track_space=args.track_space,
    )


def main(argv: list[str] | None = None) -> int:
    """Run one simulation and print the report.

    Returns:
        The process exit status: 0 on success, 1 on a configuration or
        workload error.

    """
    args = build_parser().parse_args(argv)
    logger = Logger()
    try:
        config = resolve_config(args, dict(os.environ))
        seed = config.seed if config.seed is not None else int(time.time())
        print(f"Generating {config.request_count} random track requests with seed {seed}")  # noqa: T201
        workload = generate_workload(
            config.request_count, seed=seed, track_space=config.track_space
        )
        dump_workload(workload, config.workload_path)
        logger.log(LogLevel.INFO, f"wrote {config.workload_path}", source="workload")
        workload = load_workload(config.workload_path, track_space=config.track_space)
        logger.log(LogLevel.INFO, f"read {len(workload)} requests", source="workload")
    except (ConfigError, WorkloadError) as exc:
        print(f"error: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    print(f"Testing with {len(workload)} track requests\n")  # noqa: T201
    report = Simulator(config=config, logger=logger).run(workload)
    print(format_report(report))  # noqa: T201
    if args.verbose:
        print("\n=== Simulation Log ===")  # noqa: T201
        print(logger.format())  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
