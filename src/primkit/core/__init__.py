"""Core configuration, types and time sources."""

from primkit.core.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    set_default_clock,
)
from primkit.core.config import Settings, settings
from primkit.core.enums import TimeUnit, Weekday

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "set_default_clock",
    "Settings",
    "settings",
    "TimeUnit",
    "Weekday",
]
