from __future__ import annotations

from datetime import date, datetime

import pytest

from baziengine.calendar import (
    DEFAULT_RESOLVER,
    BoundaryResolver,
    FixedSolarTermResolver,
)
from baziengine.errors import InvalidInputError


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 2, 3, 23, 59), False),
        (datetime(2024, 2, 4, 0, 0), True),
        (datetime(2024, 1, 31, 12, 0), False),
        (datetime(2024, 12, 31, 12, 0), True),
    ],
)
def test_spring_boundary(moment: datetime, expected: bool) -> None:
    assert DEFAULT_RESOLVER.is_after_spring_boundary(moment) is expected


@pytest.mark.parametrize(
    "moment, branch",
    [
        (date(2024, 1, 4), "子"),
        (date(2024, 1, 5), "丑"),
        (date(2024, 2, 3), "丑"),
        (date(2024, 2, 4), "寅"),
        (date(2024, 7, 6), "午"),
        (date(2024, 7, 7), "未"),
        (date(2024, 10, 8), "戌"),
        (date(2024, 12, 7), "子"),
    ],
)
def test_solar_month_branch(moment: date, branch: str) -> None:
    assert DEFAULT_RESOLVER.solar_month_branch(moment).name == branch


def test_boundary_term() -> None:
    term = DEFAULT_RESOLVER.boundary_term(2)

    assert (term.name, term.month, term.day) == ("立春", 2, 4)
    assert term.branch.name == "寅"


def test_next_and_previous_boundary() -> None:
    resolver = DEFAULT_RESOLVER

    assert resolver.next_boundary(date(1979, 2, 6)) == date(1979, 3, 5)
    assert resolver.next_boundary(date(1979, 2, 4)) == date(1979, 3, 5)
    assert resolver.next_boundary(date(1979, 12, 20)) == date(1980, 1, 5)
    assert resolver.previous_boundary(date(1979, 2, 6)) == date(1979, 2, 4)
    assert resolver.previous_boundary(date(1979, 1, 2)) == date(1978, 12, 7)


def test_boundary_distances() -> None:
    assert DEFAULT_RESOLVER.days_to_next_boundary(date(1979, 2, 6)) == 27
    assert DEFAULT_RESOLVER.days_since_previous_boundary(date(1979, 2, 6)) == 2
    assert DEFAULT_RESOLVER.days_since_previous_boundary(date(1979, 2, 4)) == 0


def test_resolver_satisfies_protocol() -> None:
    assert isinstance(DEFAULT_RESOLVER, BoundaryResolver)


@pytest.mark.parametrize(
    "table",
    [
        {month: 5 for month in range(1, 12)},
        {**{month: 5 for month in range(1, 13)}, 3: 31},
    ],
)
def test_invalid_tables_are_rejected(table) -> None:
    with pytest.raises(InvalidInputError):
        FixedSolarTermResolver(table)
