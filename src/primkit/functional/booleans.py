"""Boolean-to-label utilities.

Label defaults come from ``Settings`` so an application can localize them
once through ``PRIMKIT_YES_LABEL`` and friends instead of at every call.
"""

import typing as tp

from primkit.core.config import settings

__all__ = [
    "to_int",
    "to_label",
    "to_yes_no",
    "to_on_off",
    "to_enabled_disabled",
    "negate",
]


def to_int(value: bool) -> int:
    return 1 if value else 0


def to_label(value: bool, true_label: str, false_label: str) -> str:
    """Render ``value`` with a caller-supplied pair of labels."""
    return true_label if value else false_label


def to_yes_no(
    value: bool, yes: tp.Optional[str] = None, no: tp.Optional[str] = None
) -> str:
    return to_label(
        value,
        settings.YES_LABEL if yes is None else yes,
        settings.NO_LABEL if no is None else no,
    )


def to_on_off(
    value: bool, on: tp.Optional[str] = None, off: tp.Optional[str] = None
) -> str:
    return to_label(
        value,
        settings.ON_LABEL if on is None else on,
        settings.OFF_LABEL if off is None else off,
    )


def to_enabled_disabled(
    value: bool,
    enabled: tp.Optional[str] = None,
    disabled: tp.Optional[str] = None,
) -> str:
    return to_label(
        value,
        settings.ENABLED_LABEL if enabled is None else enabled,
        settings.DISABLED_LABEL if disabled is None else disabled,
    )


def negate(value: bool) -> bool:
    return not value
