"""Clock and random source for the tools.

Tools never call datetime.now() or the random module directly. They go
through utc_now() and rng() so tests can pin both with monkeypatch.
"""
from datetime import datetime, timezone
import random

_system_random = random.SystemRandom()


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def rng() -> random.Random:
    """Random source used for passwords, identifiers and sample data."""
    return _system_random
