import logging

import pytest

from eshook.levels import Level, PANIC_LEVEL_NUM, levels_for


ORDER = [Level.PANIC, Level.FATAL, Level.ERROR, Level.WARNING, Level.INFO, Level.DEBUG]


@pytest.mark.parametrize("threshold", ORDER)
def test_levels_for_is_prefix_up_to_threshold(threshold):
    expected = ORDER[: ORDER.index(threshold) + 1]
    assert levels_for(threshold) == expected


def test_debug_yields_all_and_panic_yields_one():
    assert len(levels_for(Level.DEBUG)) == 6
    assert levels_for(Level.PANIC) == [Level.PANIC]


@pytest.mark.parametrize("levelno, expected", [
    (logging.DEBUG, Level.DEBUG),
    (5, Level.DEBUG),
    (logging.INFO, Level.INFO),
    (25, Level.INFO),
    (logging.WARNING, Level.WARNING),
    (logging.ERROR, Level.ERROR),
    (logging.CRITICAL, Level.FATAL),
    (PANIC_LEVEL_NUM, Level.PANIC),
    (99, Level.PANIC),
])
def test_from_levelno(levelno, expected):
    assert Level.from_levelno(levelno) is expected


def test_levelno_round_trips_through_stdlib():
    for level in Level:
        assert Level.from_levelno(level.levelno) is level
    assert logging.getLevelName(PANIC_LEVEL_NUM) == "PANIC"


@pytest.mark.parametrize("name, expected", [
    ("debug", Level.DEBUG),
    (" Info ", Level.INFO),
    ("warn", Level.WARNING),
    ("WARNING", Level.WARNING),
    ("critical", Level.FATAL),
    ("panic", Level.PANIC),
])
def test_parse(name, expected):
    assert Level.parse(name) is expected


def test_parse_rejects_unknown():
    with pytest.raises(ValueError):
        Level.parse("trace")
