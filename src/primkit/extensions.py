"""Attachable receivers for the functional utilities.

Builtin types cannot gain new methods, so primkit exposes its operations on
thin subclasses of the primitives instead. Each receiver behaves like the
value it wraps and adds the matching functional operations as methods and
properties:

    - ``XList`` (``list``): sequence utilities and numeric aggregates
    - ``XDict`` (``dict``): mapping utilities
    - ``XStr`` (``str``): text utilities
    - ``XBool``: boolean utilities (``bool`` cannot be subclassed)
    - ``XDate`` (``datetime.datetime``): calendar utilities

``ext`` picks the receiver for a value.

Example:
    >>> from primkit.extensions import ext
    >>> ext([1, 2, 3, 4, 5]).chunked(2)
    [[1, 2], [3, 4], [5]]
    >>> ext("hello world").to_camel_case()
    'helloWorld'
"""

import datetime as dt
import random
import typing as tp

import pandas as pd

from primkit.core.clock import Clock
from primkit.core.enums import TimeUnit
from primkit.core.types import DateLike
from primkit.functional import booleans, dates, mappings, numeric, sequences, text

__all__ = ["XList", "XDict", "XStr", "XBool", "XDate", "ext"]


class XList(list):
    """``list`` with sequence utilities attached."""

    def get_or_none(self, index: int):
        return sequences.get_or_none(self, index)

    def get_or_default(self, index: int, default):
        return sequences.get_or_default(self, index, default)

    def chunked(self, size: int) -> "XList":
        return XList(XList(chunk) for chunk in sequences.chunked(self, size))

    def distinct_by(self, key: tp.Callable) -> "XList":
        return XList(sequences.distinct_by(self, key))

    def max_by(self, key: tp.Callable):
        return sequences.max_by(self, key)

    def min_by(self, key: tp.Callable):
        return sequences.min_by(self, key)

    def group_by(self, key: tp.Callable) -> "XDict":
        return XDict(
            (k, XList(group)) for k, group in sequences.group_by(self, key).items()
        )

    def combinations(self, length: int = 2) -> "XList":
        return XList(XList(c) for c in sequences.combinations(self, length))

    def shuffled(self, rng: tp.Optional[random.Random] = None) -> "XList":
        return XList(sequences.shuffled(self, rng))

    def contains_any(self, others: tp.Iterable) -> bool:
        return sequences.contains_any(self, others)

    def intersection(self, others: tp.Iterable) -> "XList":
        return XList(sequences.intersection(self, others))

    def union(self, others: tp.Iterable) -> "XList":
        return XList(sequences.union(self, others))

    @property
    def frequencies(self) -> "XDict":
        return XDict(sequences.frequencies(self))

    @property
    def most_frequent(self):
        return sequences.most_frequent(self)

    @property
    def first_or_none(self):
        return sequences.first_or_none(self)

    @property
    def last_or_none(self):
        return sequences.last_or_none(self)

    @property
    def unique(self) -> "XList":
        return XList(sequences.unique(self))

    # --- Numeric aggregates ---
    @property
    def sum(self):
        return numeric.sum_of(self)

    @property
    def average(self) -> float:
        return numeric.average(self)

    @property
    def median(self) -> float:
        return numeric.median(self)

    @property
    def standard_deviation(self) -> float:
        return numeric.standard_deviation(self)


class XDict(dict):
    """``dict`` with mapping utilities attached."""

    def get_or_default(self, key, default):
        return mappings.get_or_default(self, key, default)

    def merge(self, other: tp.Mapping) -> "XDict":
        return XDict(mappings.merge(self, other))

    def pick(self, keys: tp.Iterable) -> "XDict":
        return XDict(mappings.pick(self, keys))

    def omit(self, keys: tp.Iterable) -> "XDict":
        return XDict(mappings.omit(self, keys))

    def map_values(self, transform: tp.Callable) -> "XDict":
        return XDict(mappings.map_values(self, transform))

    def map_keys(self, transform: tp.Callable) -> "XDict":
        return XDict(mappings.map_keys(self, transform))

    def invert(self) -> "XDict":
        return XDict(mappings.invert(self))

    def update_or_add(self, key, update: tp.Callable, if_absent):
        return mappings.update_or_add(self, key, update, if_absent)

    def lower_case_keys(self) -> "XDict":
        return XDict(mappings.lower_case_keys(self))

    @property
    def keys_list(self) -> XList:
        return XList(mappings.keys_list(self))

    @property
    def values_list(self) -> XList:
        return XList(mappings.values_list(self))

    @property
    def is_null_or_empty(self) -> bool:
        return mappings.is_null_or_empty(self)


class XStr(str):
    """``str`` with text utilities attached.

    ``str.capitalize`` lowercases the rest of the string, so the
    first-character-only variant is exposed as ``capitalize_first``.
    """

    def capitalize_first(self) -> "XStr":
        return XStr(text.capitalize(self))

    def capitalize_words(self) -> "XStr":
        return XStr(text.capitalize_words(self))

    def to_title_case(self) -> "XStr":
        return XStr(text.to_title_case(self))

    def reverse(self) -> "XStr":
        return XStr(text.reverse(self))

    def to_camel_case(self) -> "XStr":
        return XStr(text.to_camel_case(self))

    def to_snake_case(self) -> "XStr":
        return XStr(text.to_snake_case(self))

    def to_pascal_case(self) -> "XStr":
        return XStr(text.to_pascal_case(self))

    def to_kebab_case(self) -> "XStr":
        return XStr(text.to_kebab_case(self))

    def split_words(self) -> XList:
        return XList(XStr(word) for word in text.split_words(self))

    def extract_numbers(self) -> XList:
        return XList(text.extract_numbers(self))

    def truncate(self, length: int, suffix: tp.Optional[str] = None) -> "XStr":
        return XStr(text.truncate(self, length, suffix))

    def count_occurrences(self, substring: str) -> int:
        return text.count_occurrences(self, substring)

    def remove_whitespace(self) -> "XStr":
        return XStr(text.remove_whitespace(self))

    @property
    def is_blank(self) -> bool:
        return text.is_blank(self)

    @property
    def is_empty(self) -> bool:
        return text.is_empty(self)

    @property
    def is_numeric(self) -> bool:
        return text.is_numeric(self)

    @property
    def is_valid_email(self) -> bool:
        return text.is_valid_email(self)

    @property
    def is_valid_url(self) -> bool:
        return text.is_valid_url(self)


class XBool:
    """Boolean receiver. Truthiness, equality and hashing follow ``value``."""

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, XBool):
            return self.value == other.value
        return self.value == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"XBool({self.value})"

    @property
    def to_int(self) -> int:
        return booleans.to_int(self.value)

    @property
    def negated(self) -> "XBool":
        return XBool(booleans.negate(self.value))

    def to_yes_no(self, yes: tp.Optional[str] = None, no: tp.Optional[str] = None):
        return booleans.to_yes_no(self.value, yes, no)

    def to_on_off(self, on: tp.Optional[str] = None, off: tp.Optional[str] = None):
        return booleans.to_on_off(self.value, on, off)

    def to_enabled_disabled(
        self, enabled: tp.Optional[str] = None, disabled: tp.Optional[str] = None
    ) -> str:
        return booleans.to_enabled_disabled(self.value, enabled, disabled)


class XDate(dt.datetime):
    """``datetime`` with calendar utilities attached.

    Boundary and arithmetic results are returned as ``XDate``. Nanoseconds of
    ``pandas.Timestamp`` inputs are dropped.
    """

    @classmethod
    def of(cls, value: DateLike) -> "XDate":
        ts = dates.to_timestamp(value)
        return cls(
            ts.year,
            ts.month,
            ts.day,
            ts.hour,
            ts.minute,
            ts.second,
            ts.microsecond,
            tzinfo=ts.tzinfo,
        )

    def is_today(self, clock: tp.Optional[Clock] = None) -> bool:
        return dates.is_today(self, clock)

    def is_yesterday(self, clock: tp.Optional[Clock] = None) -> bool:
        return dates.is_yesterday(self, clock)

    def is_tomorrow(self, clock: tp.Optional[Clock] = None) -> bool:
        return dates.is_tomorrow(self, clock)

    def is_future(self, clock: tp.Optional[Clock] = None) -> bool:
        return dates.is_future(self, clock)

    def is_past(self, clock: tp.Optional[Clock] = None) -> bool:
        return dates.is_past(self, clock)

    def age(self, clock: tp.Optional[Clock] = None) -> int:
        return dates.age(self, clock)

    def time_ago(self, clock: tp.Optional[Clock] = None) -> str:
        return dates.time_ago(self, clock)

    def format(self, pattern: str) -> str:
        return dates.format_date(self, pattern)

    def start_of(self, unit: tp.Union[TimeUnit, str]) -> "XDate":
        return XDate.of(dates.start_of(self, unit))

    def end_of(self, unit: tp.Union[TimeUnit, str]) -> "XDate":
        return XDate.of(dates.end_of(self, unit))

    def add_business_days(self, days: int) -> "XDate":
        return XDate.of(dates.add_business_days(self, days))

    def is_between(self, start: DateLike, end: DateLike) -> bool:
        return dates.is_between(self, start, end)

    @property
    def is_weekend(self) -> bool:
        return dates.is_weekend(self)

    @property
    def quarter(self) -> int:
        return dates.quarter(self)

    @property
    def week_number(self) -> int:
        return dates.week_number(self)

    @property
    def iso_week_number(self) -> int:
        return dates.iso_week_number(self)


def ext(value):
    """Wrap ``value`` in the receiver matching its type.

    Args:
        value: A ``bool``, ``str``, mapping, date-like value or other iterable.

    Returns:
        ``XBool``, ``XStr``, ``XDict``, ``XDate`` or ``XList``.

    Raises:
        TypeError: If no receiver handles the type.
    """
    if isinstance(value, (XList, XDict, XStr, XBool, XDate)):
        return value
    if isinstance(value, bool):
        return XBool(value)
    if isinstance(value, str):
        return XStr(value)
    if isinstance(value, tp.Mapping):
        return XDict(value)
    if isinstance(value, (dt.datetime, dt.date, pd.Timestamp)):
        return XDate.of(value)
    if isinstance(value, tp.Iterable):
        return XList(value)
    raise TypeError(f"No primkit receiver for {type(value).__name__}")
