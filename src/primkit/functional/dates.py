"""Calendar utilities.

Date arithmetic, boundaries and formatting over ``datetime.datetime``,
``datetime.date`` and ``pandas.Timestamp`` values. Results are
``pandas.Timestamp`` objects, which are ``datetime`` subclasses.

Operations relative to the current moment (``is_today``, ``is_past``,
``age``, ``time_ago``, ...) read it from a :class:`primkit.core.clock.Clock`.
They take an optional ``clock`` argument and otherwise use the process-wide
default clock, so tests can pin the reference moment with a ``FixedClock``.
Timezone-aware inputs are compared against the clock reading in their own zone.

Weeks start on Monday and end on Sunday. End boundaries are the last
representable microsecond of the unit, e.g. ``23:59:59.999999``.

Examples:
    >>> import datetime as dt
    >>> from primkit.functional.dates import add_business_days, quarter
    >>> add_business_days(dt.datetime(2024, 1, 5), 1)  # Friday
    Timestamp('2024-01-08 00:00:00')
    >>> quarter(dt.date(2024, 8, 1))
    3
"""

import re
import typing as tp

import pandas as pd

from primkit.core.clock import Clock, get_default_clock
from primkit.core.enums import TimeUnit, Weekday
from primkit.core.types import DateLike
from primkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "to_timestamp",
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_future",
    "is_past",
    "format_date",
    "start_of",
    "end_of",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "is_weekend",
    "add_business_days",
    "age",
    "time_ago",
    "is_between",
    "quarter",
    "week_number",
    "iso_week_number",
]

_ONE_DAY = pd.Timedelta(days=1)
_ONE_MICROSECOND = pd.Timedelta(microseconds=1)

# Quoted literal, or a run of one pattern letter
_FORMAT_TOKEN = re.compile(r"'((?:[^']|'')*)'|([yMdEHhmsSa])\2*")


def to_timestamp(value: DateLike) -> pd.Timestamp:
    """Convert a date-like value to a ``pandas.Timestamp``.

    ``datetime.date`` values become midnight of that day.
    """
    if isinstance(value, pd.Timestamp):
        return value
    return pd.Timestamp(value)


def _now(ts: pd.Timestamp, clock: tp.Optional[Clock]) -> pd.Timestamp:
    clock = clock or get_default_clock()
    return clock.now(tz=ts.tz)


# =============================================================================
# Relative to now
# =============================================================================


def is_today(value: DateLike, clock: tp.Optional[Clock] = None) -> bool:
    ts = to_timestamp(value)
    return ts.date() == _now(ts, clock).date()


def is_yesterday(value: DateLike, clock: tp.Optional[Clock] = None) -> bool:
    ts = to_timestamp(value)
    return ts.date() == (_now(ts, clock) - _ONE_DAY).date()


def is_tomorrow(value: DateLike, clock: tp.Optional[Clock] = None) -> bool:
    ts = to_timestamp(value)
    return ts.date() == (_now(ts, clock) + _ONE_DAY).date()


def is_future(value: DateLike, clock: tp.Optional[Clock] = None) -> bool:
    """Strictly after the current moment."""
    ts = to_timestamp(value)
    return ts > _now(ts, clock)


def is_past(value: DateLike, clock: tp.Optional[Clock] = None) -> bool:
    """Strictly before the current moment."""
    ts = to_timestamp(value)
    return ts < _now(ts, clock)


def age(value: DateLike, clock: tp.Optional[Clock] = None) -> int:
    """Completed years between ``value`` and now.

    One year is subtracted while this year's month and day of ``value`` have
    not been reached yet.
    """
    ts = to_timestamp(value)
    now = _now(ts, clock)
    years = now.year - ts.year
    if (now.month, now.day) < (ts.month, ts.day):
        years -= 1
    return years


def time_ago(value: DateLike, clock: tp.Optional[Clock] = None) -> str:
    """Describe how long ago ``value`` was, using a single unit.

    The largest applicable unit is reported, floored: more than 365 days is
    counted in years of 365 days, more than 30 days in months of 30 days, then
    days, hours and minutes. Anything under a minute, and any future moment,
    is ``"just now"``.

    Example:
        >>> time_ago(now - pd.Timedelta(hours=5))
        '5 hours ago'
    """
    ts = to_timestamp(value)
    delta = _now(ts, clock) - ts
    days = delta.days
    seconds = delta.total_seconds()

    if days > 365:
        count, unit = days // 365, "year"
    elif days > 30:
        count, unit = days // 30, "month"
    elif days > 0:
        count, unit = days, "day"
    elif seconds >= 3600:
        count, unit = int(seconds // 3600), "hour"
    elif seconds >= 60:
        count, unit = int(seconds // 60), "minute"
    else:
        return "just now"
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


# =============================================================================
# Formatting
# =============================================================================


def _render_token(token: str, ts: pd.Timestamp) -> str:
    letter, width = token[0], len(token)
    if letter == "y":
        if width == 2:
            return f"{ts.year % 100:02d}"
        return f"{ts.year:0{width}d}"
    if letter == "M":
        if width >= 4:
            return ts.month_name()
        if width == 3:
            return ts.month_name()[:3]
        return f"{ts.month:0{width}d}"
    if letter == "d":
        return f"{ts.day:0{width}d}"
    if letter == "E":
        return ts.day_name() if width >= 4 else ts.day_name()[:3]
    if letter == "H":
        return f"{ts.hour:0{width}d}"
    if letter == "h":
        return f"{(ts.hour % 12) or 12:0{width}d}"
    if letter == "m":
        return f"{ts.minute:0{width}d}"
    if letter == "s":
        return f"{ts.second:0{width}d}"
    if letter == "S":
        fraction = f"{ts.microsecond:06d}{ts.nanosecond:03d}"
        return fraction[:width].ljust(width, "0")
    # "a"
    return "AM" if ts.hour < 12 else "PM"


def format_date(value: DateLike, pattern: str) -> str:
    """Format ``value`` with a date pattern.

    Patterns containing ``%`` are passed to ``strftime``. Otherwise the
    pattern uses letter runs as in common date formatters: ``yyyy``/``yy``
    year, ``M``/``MM``/``MMM``/``MMMM`` month, ``d``/``dd`` day, ``EEE``/``EEEE``
    weekday name, ``H``/``HH`` 24-hour, ``h``/``hh`` 12-hour, ``mm`` minute,
    ``ss`` second, ``SSS`` fraction of a second and ``a`` for AM/PM. Text in
    single quotes is copied literally, and ``''`` gives a single quote.

    Example:
        >>> format_date(dt.datetime(2024, 3, 9, 14, 5), "EEE, d MMM yyyy 'at' h:mm a")
        'Sat, 9 Mar 2024 at 2:05 PM'
    """
    ts = to_timestamp(value)
    if "%" in pattern:
        return ts.strftime(pattern)

    def replace(match: re.Match) -> str:
        if match.group(2) is None:
            return match.group(1).replace("''", "'") or "'"
        return _render_token(match.group(0), ts)

    return _FORMAT_TOKEN.sub(replace, pattern)


# =============================================================================
# Boundaries
# =============================================================================


def start_of(value: DateLike, unit: tp.Union[TimeUnit, str]) -> pd.Timestamp:
    """First moment of the day, week, month or year containing ``value``.

    Args:
        value: Reference moment.
        unit: ``TimeUnit`` member, or its name or code (``"week"``, ``"W"``).

    Returns:
        Midnight at the start of the unit, in the zone of ``value``.
    """
    unit = TimeUnit.parse(unit)
    day = to_timestamp(value).normalize()
    if unit is TimeUnit.DAY:
        return day
    if unit is TimeUnit.WEEK:
        return (day - pd.Timedelta(days=day.weekday())).normalize()
    if unit is TimeUnit.MONTH:
        return day.replace(day=1)
    return day.replace(month=1, day=1)


def end_of(value: DateLike, unit: tp.Union[TimeUnit, str]) -> pd.Timestamp:
    """Last microsecond of the day, week, month or year containing ``value``."""
    unit = TimeUnit.parse(unit)
    return start_of(value, unit) + unit.to_offset() - _ONE_MICROSECOND


def start_of_day(value: DateLike) -> pd.Timestamp:
    return start_of(value, TimeUnit.DAY)


def end_of_day(value: DateLike) -> pd.Timestamp:
    return end_of(value, TimeUnit.DAY)


def start_of_week(value: DateLike) -> pd.Timestamp:
    """Monday midnight of the week containing ``value``."""
    return start_of(value, TimeUnit.WEEK)


def end_of_week(value: DateLike) -> pd.Timestamp:
    """Sunday ``23:59:59.999999`` of the week containing ``value``."""
    return end_of(value, TimeUnit.WEEK)


def start_of_month(value: DateLike) -> pd.Timestamp:
    return start_of(value, TimeUnit.MONTH)


def end_of_month(value: DateLike) -> pd.Timestamp:
    return end_of(value, TimeUnit.MONTH)


def start_of_year(value: DateLike) -> pd.Timestamp:
    return start_of(value, TimeUnit.YEAR)


def end_of_year(value: DateLike) -> pd.Timestamp:
    return end_of(value, TimeUnit.YEAR)


# =============================================================================
# Arithmetic and calendar fields
# =============================================================================


def is_weekend(value: DateLike) -> bool:
    return Weekday(to_timestamp(value).weekday()).is_weekend


def add_business_days(value: DateLike, days: int) -> pd.Timestamp:
    """Move ``days`` weekdays forward (or backward when negative).

    The date advances one calendar day at a time and only Monday to Friday
    are counted, so Saturdays and Sundays are skipped. The time of day is
    kept as wall-clock time, also when a daylight saving change lies in between.
    ``days == 0`` returns the input unchanged, even on a weekend.
    """
    ts = to_timestamp(value)
    if days == 0:
        return ts

    # Step in local wall time, localize once at the end
    result = ts.tz_localize(None) if ts.tz is not None else ts
    step = _ONE_DAY if days > 0 else -_ONE_DAY
    remaining = abs(days)
    while remaining > 0:
        result = result + step
        if not is_weekend(result):
            remaining -= 1

    if ts.tz is None:
        return result
    return result.tz_localize(
        ts.tz, ambiguous=bool(ts.dst()), nonexistent="shift_forward"
    )


def is_between(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Whether ``value`` lies within ``start`` and ``end``, bounds included.

    A moment equal to either bound is always inside, even when ``start`` is
    after ``end``.
    """
    ts, start, end = to_timestamp(value), to_timestamp(start), to_timestamp(end)
    return start < ts < end or ts == start or ts == end


def quarter(value: DateLike) -> int:
    """Quarter of the year, 1 to 4."""
    return (to_timestamp(value).month - 1) // 3 + 1


def week_number(value: DateLike) -> int:
    """Week of the year, with weeks starting on Monday.

    Week 1 is the (possibly partial) week containing January 1st, so the
    result ranges from 1 to 54. Use :func:`iso_week_number` for ISO-8601
    weeks.
    """
    ts = to_timestamp(value)
    jan_first = pd.Timestamp(year=ts.year, month=1, day=1)
    return (ts.dayofyear - 1 + jan_first.weekday()) // 7 + 1


def iso_week_number(value: DateLike) -> int:
    """ISO-8601 week number, 1 to 53."""
    return to_timestamp(value).isocalendar()[1]
