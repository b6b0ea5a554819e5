import pytest
from primkit.core.config import settings
from primkit.functional.booleans import (
    negate,
    to_enabled_disabled,
    to_int,
    to_label,
    to_on_off,
    to_yes_no,
)


def test_to_int():
    assert to_int(True) == 1
    assert to_int(False) == 0


def test_default_labels():
    assert to_yes_no(True) == "yes"
    assert to_yes_no(False) == "no"
    assert to_on_off(True) == "on"
    assert to_on_off(False) == "off"
    assert to_enabled_disabled(True) == "enabled"
    assert to_enabled_disabled(False) == "disabled"


def test_custom_labels():
    assert to_yes_no(True, yes="sí", no="no") == "sí"
    assert to_on_off(False, on="ON", off="OFF") == "OFF"
    assert to_enabled_disabled(False, disabled="") == ""
    assert to_label(True, "✓", "✗") == "✓"


def test_labels_follow_settings(monkeypatch):
    monkeypatch.setattr(settings, "YES_LABEL", "oui")
    monkeypatch.setattr(settings, "NO_LABEL", "non")
    assert to_yes_no(True) == "oui"
    assert to_yes_no(False) == "non"
    # Explicit labels still win
    assert to_yes_no(True, yes="Y") == "Y"


@pytest.mark.parametrize("value", [True, False])
def test_negate(value):
    assert negate(value) is (not value)
