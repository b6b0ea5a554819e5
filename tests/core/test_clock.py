import pandas as pd
import pytest
from primkit.core.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    set_default_clock,
)


def test_fixed_clock_naive(now):
    clock = FixedClock(now)
    assert clock.now() == now
    assert clock.now(tz="UTC") == pd.Timestamp("2024-03-13 15:30", tz="UTC")


def test_fixed_clock_aware_converts():
    clock = FixedClock(pd.Timestamp("2024-03-14 02:00", tz="UTC"))

    in_new_york = clock.now(tz="America/New_York")
    assert in_new_york == clock.moment
    assert in_new_york.hour == 22
    # Naive reading keeps the wall time of the fixed moment
    assert clock.now() == pd.Timestamp("2024-03-14 02:00")


def test_system_clock_moves_forward():
    clock = SystemClock()
    first = clock.now()
    second = clock.now()
    assert first.tz is None
    assert second >= first


def test_system_clock_timezone():
    clock = SystemClock(timezone="Asia/Tokyo")
    naive = clock.now()
    aware = pd.Timestamp.now(tz="Asia/Tokyo").tz_localize(None)

    assert naive.tz is None
    assert abs(aware - naive) < pd.Timedelta(minutes=1)
    assert clock.now(tz="UTC").tz is not None


def test_default_clock_swap(fixed_clock):
    original = get_default_clock()
    previous = set_default_clock(fixed_clock)
    try:
        assert previous is original
        assert get_default_clock() is fixed_clock
    finally:
        set_default_clock(original)


def test_set_default_clock_rejects_non_clock():
    with pytest.raises(TypeError):
        set_default_clock(object())


def test_clock_is_abstract():
    with pytest.raises(TypeError):
        Clock()
