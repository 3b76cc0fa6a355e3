"""JSON web API for the disk scheduling simulator.

This package provides a Flask application that runs simulations over
HTTP.  It is an **optional** extra — install with::

    pip install py-disksched[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/strategies`` — strategy names in run order.
- ``POST /api/simulate`` — run every strategy and return the report.
"""
