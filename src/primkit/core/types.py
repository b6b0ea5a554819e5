"""Reusable type definitions for primkit.

This module provides type aliases and constrained types that are shared by the
functional modules for type safety and argument validation.

Type Aliases:
    KeySelector: A function projecting an element to a hashable key.
    Transform: A function mapping one value to another.
    PositiveInt: An integer strictly greater than zero.
    DateLike: Any value accepted by the calendar utilities.
"""

import datetime as dt
from typing import Annotated, Callable, TypeVar, Union

import annotated_types as at
import pandas as pd
from pydantic import TypeAdapter, ValidationError

__all__ = [
    "T",
    "K",
    "V",
    "R",
    "KeySelector",
    "Transform",
    "PositiveInt",
    "DateLike",
    "validate_positive",
]

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")

KeySelector = Callable[[T], K]
Transform = Callable[[T], R]

# An integer with a lower bound of one
PositiveInt = Annotated[int, at.Gt(0)]

DateLike = Union[dt.datetime, dt.date, pd.Timestamp]

_positive_int = TypeAdapter(PositiveInt)


def validate_positive(value: int, name: str = "value") -> int:
    """Validate that ``value`` is a positive integer.

    Args:
        value: The value to check.
        name: Argument name used in the error message.

    Returns:
        The validated integer.

    Raises:
        ValueError: If the value is not an integer greater than zero.
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got bool")
    try:
        return _positive_int.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"{name} must be greater than 0, got {value!r}") from e
