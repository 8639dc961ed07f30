from __future__ import annotations

from datetime import date

import pytest

from baziengine.calendar import DEFAULT_DAY_LOOKUP, DayPillarLookup, PerpetualDayPillarLookup
from baziengine.errors import CollaboratorError


@pytest.mark.parametrize(
    "day, label",
    [
        (date(1949, 10, 1), "甲子"),
        (date(1900, 1, 1), "甲戌"),
        (date(2000, 1, 1), "戊午"),
        (date(2000, 1, 2), "己未"),
        (date(1979, 2, 6), "甲辰"),
        (date(1984, 2, 5), "己巳"),
    ],
)
def test_known_day_pillars(day: date, label: str) -> None:
    """Anchor day and almanac cross-checks."""

    assert DEFAULT_DAY_LOOKUP.lookup(day.year, day.month, day.day).label() == label
    assert DEFAULT_DAY_LOOKUP.lookup_date(day).label() == label


def test_cycle_repeats_every_sixty_days() -> None:
    first = DEFAULT_DAY_LOOKUP.lookup(2010, 3, 1)
    later = DEFAULT_DAY_LOOKUP.lookup(2010, 4, 30)

    assert first == later


@pytest.mark.parametrize("year", [1899, 2101])
def test_out_of_range_years_fail(year: int) -> None:
    with pytest.raises(CollaboratorError):
        DEFAULT_DAY_LOOKUP.lookup(year, 6, 1)


def test_invalid_calendar_day_fails() -> None:
    with pytest.raises(CollaboratorError):
        DEFAULT_DAY_LOOKUP.lookup(2023, 2, 29)


def test_custom_range() -> None:
    lookup = PerpetualDayPillarLookup(min_year=1950, max_year=1960)

    assert isinstance(lookup, DayPillarLookup)
    with pytest.raises(CollaboratorError):
        lookup.lookup(1949, 10, 1)
    with pytest.raises(ValueError):
        PerpetualDayPillarLookup(min_year=2000, max_year=1990)
