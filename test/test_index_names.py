import pytest

from eshook.index_names import fixed_index, keep_latest, time_bucketed_index
from eshook.utils.time import FixedClock


# 2024-01-31T13:04:05Z
TS = 1706706245.0


def test_fixed_index():
    assert fixed_index("logs")() == "logs"


@pytest.mark.parametrize("rotation, expected", [
    ("hourly", "app-2024.01.31.13"),
    ("daily", "app-2024.01.31"),
    ("monthly", "app-2024.01"),
])
def test_time_bucketed_index(rotation, expected):
    assert time_bucketed_index("app", rotation, FixedClock(TS))() == expected


def test_time_bucketed_index_follows_clock():
    clock = FixedClock(TS)
    index_name = time_bucketed_index("app", "daily", clock)

    first = index_name()
    clock.advance(24 * 3600)

    assert first == "app-2024.01.31"
    assert index_name() == "app-2024.02.01"


def test_invalid_rotation():
    with pytest.raises(ValueError):
        time_bucketed_index("app", "weekly")


def test_keep_latest_prunes_oldest():
    indexes = {"app-2024.01.29": True, "app-2024.01.31": True, "app-2024.01.30": True}

    keep_latest(2)(indexes)

    assert indexes == {"app-2024.01.30": True, "app-2024.01.31": True}


def test_keep_latest_rejects_zero():
    with pytest.raises(ValueError):
        keep_latest(0)
