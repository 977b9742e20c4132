"""Test fixtures for care-rhythm-server."""

from tests.fixtures.activity_seed import at, instant, interval, seed_activity_log

__all__ = [
    "at",
    "instant",
    "interval",
    "seed_activity_log",
]
