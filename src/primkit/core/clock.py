"""Time source definitions for the now-relative calendar utilities."""

from abc import ABC, abstractmethod
from typing import Optional

import pandas as pd

from primkit.core.config import settings
from primkit.core.types import DateLike

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
]


class Clock(ABC):
    """Abstract base class definition for time sources."""

    @abstractmethod
    def now(self, tz=None) -> pd.Timestamp:
        """Return the current moment.

        Args:
            tz: Zone the moment is expressed in. ``None`` returns a naive
                timestamp in the clock's own zone.
        """
        pass


class SystemClock(Clock):
    """Reads the process clock.

    When ``timezone`` (or ``Settings.TIMEZONE``) is set, naive readings are
    local wall time in that zone instead of the host's zone.
    """

    def __init__(self, timezone: Optional[str] = None):
        self.timezone = timezone if timezone is not None else settings.TIMEZONE

    def now(self, tz=None) -> pd.Timestamp:
        if tz is not None:
            return pd.Timestamp.now(tz=tz)
        if self.timezone is not None:
            return pd.Timestamp.now(tz=self.timezone).tz_localize(None)
        return pd.Timestamp.now()


class FixedClock(Clock):
    """Always returns the same moment."""

    def __init__(self, moment: DateLike):
        self.moment = pd.Timestamp(moment)

    def now(self, tz=None) -> pd.Timestamp:
        if tz is None:
            return self.moment.tz_localize(None) if self.moment.tz else self.moment
        if self.moment.tz is None:
            return self.moment.tz_localize(tz)
        return self.moment.tz_convert(tz)

    def __repr__(self) -> str:
        return f"FixedClock({self.moment.isoformat()})"


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    """Clock used when an operation receives no explicit ``clock``."""
    return _default_clock


def set_default_clock(clock: Clock) -> Clock:
    """Replace the process-wide default clock.

    Args:
        clock: New default time source.

    Returns:
        The previous default, so callers can restore it.
    """
    global _default_clock
    if not isinstance(clock, Clock):
        raise TypeError(f"Expected a Clock, got {type(clock).__name__}")
    previous = _default_clock
    _default_clock = clock
    return previous
