"""Enumerations for calendar units and weekdays."""

from enum import Enum, IntEnum

import pandas as pd


class TimeUnit(Enum):
    """Calendar units that have a start and an end boundary."""

    DAY = "D"
    WEEK = "W"
    MONTH = "M"
    YEAR = "Y"

    def to_offset(self) -> pd.DateOffset:
        """Offset that moves a start boundary to the next start boundary.

        Returns:
            Pandas DateOffset spanning one unit.
        """
        mapping = {
            TimeUnit.DAY: pd.DateOffset(days=1),
            TimeUnit.WEEK: pd.DateOffset(weeks=1),
            TimeUnit.MONTH: pd.DateOffset(months=1),
            TimeUnit.YEAR: pd.DateOffset(years=1),
        }
        return mapping[self]

    @classmethod
    def parse(cls, value: "TimeUnit | str") -> "TimeUnit":
        """Resolve a unit from an enum member, its name or its code.

        Args:
            value: ``TimeUnit``, a name such as ``"week"`` or a code such as ``"W"``.

        Returns:
            The matching ``TimeUnit``.

        Raises:
            ValueError: If the value does not name a unit.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.upper() in cls.__members__:
                return cls[value.upper()]
            for member in cls:
                if member.value == value.upper():
                    return member
        raise ValueError(f"Unknown time unit: {value!r}")


class Weekday(IntEnum):
    """Days of the week, numbered as ``datetime.weekday``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)
