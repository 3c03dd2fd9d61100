# app/core/dependency.py
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_clock() -> Clock:
    """Timestamp source for created_at columns. Tests override this dependency."""
    return utc_now
