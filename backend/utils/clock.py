"""
Clock abstraction.

Domain objects that stamp a time take a clock callable so tests can pin
the value.
"""
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current UTC time without tzinfo, matching what the database stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns `moment`."""
    return lambda: moment
