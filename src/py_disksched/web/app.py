"""Flask application factory for the simulator's JSON API.

The ``create_app`` function builds a simulator from the given settings
and returns a Flask app with two endpoints:

- ``GET /api/strategies`` — list the strategies in run order.
- ``POST /api/simulate`` — schedule a workload and return the report.

A simulate request names its workload either explicitly or by seed::

    {"tracks": [50, 91, 10, 25, 63], "head": 50}
    {"count": 100, "seed": 42}
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from py_disksched.config import SimulationConfig
from py_disksched.simulation import Simulator
from py_disksched.workload import Workload, WorkloadError, generate_workload

_HTTP_BAD_REQUEST = 400

# SSTF and the sweeps are quadratic in the request count.
MAX_REQUESTS = 10_000


class _BadRequestError(ValueError):
    """The request body does not describe a workload."""


def _as_int(data: dict[str, Any], key: str, default: int | None = None) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{key}' must be an integer"
        raise _BadRequestError(msg)
    return value


def _workload_from(data: dict[str, Any], config: SimulationConfig) -> Workload:
    if "tracks" in data:
        tracks = data["tracks"]
        if not isinstance(tracks, list) or any(
            isinstance(t, bool) or not isinstance(t, int) for t in tracks
        ):
            msg = "'tracks' must be a list of integers"
            raise _BadRequestError(msg)
        if len(tracks) > MAX_REQUESTS:
            msg = f"at most {MAX_REQUESTS} requests are accepted"
            raise _BadRequestError(msg)
        return Workload(tracks=tuple(tracks))

    if "count" in data:
        count = _as_int(data, "count")
        if count > MAX_REQUESTS:
            msg = f"at most {MAX_REQUESTS} requests are accepted"
            raise _BadRequestError(msg)
        seed = _as_int(data, "seed", 0)
        try:
            return generate_workload(count, seed=seed, track_space=config.track_space)
        except WorkloadError as exc:
            raise _BadRequestError(str(exc)) from exc

    msg = "Missing 'tracks' or 'count' field"
    raise _BadRequestError(msg)


def create_app(config: SimulationConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Simulation settings; defaults are used when omitted.

    Returns:
        A configured Flask application ready to serve.

    """
    config = (config or SimulationConfig()).validate()
    names = [policy.name for policy in Simulator(config=config).policies]

    app = Flask(__name__)

    @app.route("/api/strategies")
    def strategies() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the strategy names in run order."""
        return jsonify({"strategies": names})

    @app.route("/api/simulate", methods=["POST"])
    def simulate() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run every strategy over the posted workload.

        Returns:
            JSON simulation report, or ``{"error": ...}`` with status 400.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        try:
            workload = _workload_from(data, config)
            head = _as_int(data, "head", config.initial_head)
        except _BadRequestError as exc:
            return jsonify({"error": str(exc)}), _HTTP_BAD_REQUEST

        # A fresh simulator per request keeps each response's log separate.
        report = Simulator(config=config).run(workload, head=head)
        return jsonify(report.to_dict())

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-disksched-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
