import pandas as pd
import pytest
from primkit.core.clock import FixedClock, get_default_clock, set_default_clock


@pytest.fixture
def now():
    # Wednesday
    return pd.Timestamp("2024-03-13 15:30:00")


@pytest.fixture
def fixed_clock(now):
    return FixedClock(now)


@pytest.fixture
def default_clock(fixed_clock):
    """Install ``fixed_clock`` as the process-wide default for one test."""
    previous = set_default_clock(fixed_clock)
    yield fixed_clock
    set_default_clock(previous)
    assert get_default_clock() is previous
