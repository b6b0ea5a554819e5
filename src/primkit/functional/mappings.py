"""Mapping utilities.

Structural transforms over key-unique mappings. All functions return a new
``dict`` except ``update_or_add``, which updates its receiver in place and
provides no locking of its own.

Iteration follows the mapping's own order. For ``dict`` that is insertion
order, which makes the collision rules of ``map_keys`` and ``invert``
(last entry wins) deterministic.
"""

import typing as tp

from primkit.core.types import K, R, Transform, V
from primkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "get_or_default",
    "merge",
    "pick",
    "omit",
    "map_values",
    "map_keys",
    "invert",
    "keys_list",
    "values_list",
    "is_null_or_empty",
    "update_or_add",
    "lower_case_keys",
]


def get_or_default(
    mapping: tp.Mapping[K, V], key: K, default: tp.Optional[V]
) -> tp.Optional[V]:
    """Value for ``key`` if present (even when it is ``None``), else ``default``."""
    return mapping[key] if key in mapping else default


def merge(mapping: tp.Mapping[K, V], other: tp.Mapping[K, V]) -> tp.Dict[K, V]:
    """Shallow merge where entries of ``other`` win on key collisions."""
    return {**mapping, **other}


def pick(mapping: tp.Mapping[K, V], keys: tp.Iterable[K]) -> tp.Dict[K, V]:
    """Entries for the requested keys, skipping keys absent from ``mapping``."""
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: tp.Mapping[K, V], keys: tp.Iterable[K]) -> tp.Dict[K, V]:
    """All entries except those for the given keys."""
    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}


def map_values(
    mapping: tp.Mapping[K, V], transform: Transform[V, R]
) -> tp.Dict[K, R]:
    """Apply ``transform`` to every value."""
    return {key: transform(value) for key, value in mapping.items()}


def map_keys(
    mapping: tp.Mapping[K, V], transform: Transform[K, R]
) -> tp.Dict[R, V]:
    """Apply ``transform`` to every key.

    When two keys transform to the same value, the entry iterated last wins.
    """
    return {transform(key): value for key, value in mapping.items()}


def invert(mapping: tp.Mapping[K, V]) -> tp.Dict[V, K]:
    """Swap keys and values.

    Values must be hashable. When several keys share a value, the key iterated
    last wins.
    """
    return {value: key for key, value in mapping.items()}


def keys_list(mapping: tp.Mapping[K, V]) -> tp.List[K]:
    return list(mapping.keys())


def values_list(mapping: tp.Mapping[K, V]) -> tp.List[V]:
    return list(mapping.values())


def is_null_or_empty(mapping: tp.Optional[tp.Mapping]) -> bool:
    """``True`` for ``None`` or a mapping without entries."""
    return mapping is None or len(mapping) == 0


def update_or_add(
    mapping: tp.MutableMapping[K, V],
    key: K,
    update: tp.Callable[[V], V],
    if_absent: V,
) -> V:
    """Update the value for ``key`` in place, or insert ``if_absent``.

    Args:
        mapping: Mapping to modify.
        key: Key to update.
        update: Called with the existing value when ``key`` is present.
        if_absent: Stored as-is when ``key`` is missing.

    Returns:
        The value now stored under ``key``.
    """
    if key in mapping:
        mapping[key] = update(mapping[key])
    else:
        mapping[key] = if_absent
    return mapping[key]


def lower_case_keys(mapping: tp.Mapping[str, V]) -> tp.Dict[str, V]:
    """Copy of ``mapping`` with every key lowercased.

    Keys that collide after lowercasing keep the value iterated last.

    Raises:
        TypeError: If any key is not a ``str``.
    """
    bad_keys = [key for key in mapping if not isinstance(key, str)]
    if bad_keys:
        logger.debug(f"lower_case_keys rejected non-string keys: {bad_keys!r}")
        raise TypeError(
            f"lower_case_keys requires string keys, found {type(bad_keys[0]).__name__}"
        )
    return {key.lower(): value for key, value in mapping.items()}
