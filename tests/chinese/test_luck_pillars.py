from __future__ import annotations

from datetime import date

import pytest

from baziengine.chinese import Gender, TenGod, chart_from_ganzhi, luck_cycle
from baziengine.chinese.luck_pillars import age_on, start_age
from baziengine.errors import InvalidInputError


def test_yin_year_male_runs_backward(chart_1979) -> None:
    """Ji (yin) year and a man: backward from Bing-Yin, two days after Li Chun."""

    cycle = luck_cycle(chart_1979, Gender.MALE)

    assert not cycle.forward
    assert cycle.start_age == 1
    assert [pillar.label() for pillar in cycle.pillars[:3]] == ["乙丑", "甲子", "癸亥"]
    assert cycle.pillars[0].ten_god is TenGod.ROB_WEALTH
    assert (cycle.pillars[0].start_age, cycle.pillars[0].end_age) == (1, 10)
    assert len(cycle.pillars) == 8


def test_yin_year_female_runs_forward(chart_1979) -> None:
    """27 days to Jing Zhe at three days a year gives a start age of nine."""

    cycle = luck_cycle(chart_1979, "female")

    assert cycle.forward
    assert cycle.start_age == 9
    assert cycle.pillars[0].label() == "丁卯"
    assert cycle.pillars[0].ten_god is TenGod.HURTING_OFFICER
    assert cycle.pillars[-1].end_age == 9 + 8 * 10 - 1


def test_pillar_at_age(chart_1979) -> None:
    cycle = luck_cycle(chart_1979, Gender.FEMALE)

    assert cycle.pillar_at(5) is None
    assert cycle.pillar_at(9) is cycle.pillars[0]
    assert cycle.pillar_at(19) is cycle.pillars[1]
    assert cycle.pillar_at(200) is None


def test_start_age_has_floor_of_one() -> None:
    assert start_age(date(2024, 2, 4), forward=False) == 1


def test_count_is_configurable(chart_1979) -> None:
    assert len(luck_cycle(chart_1979, Gender.MALE, count=3).pillars) == 3


def test_requires_birth_date() -> None:
    chart = chart_from_ganzhi("己未", "丙寅", "甲辰", "丙寅")

    with pytest.raises(InvalidInputError):
        luck_cycle(chart, Gender.MALE)


def test_rejects_unknown_gender(chart_1979) -> None:
    with pytest.raises(InvalidInputError):
        luck_cycle(chart_1979, "unknown")


@pytest.mark.parametrize(
    "on, expected",
    [
        (date(2000, 2, 5), 20),
        (date(2000, 2, 6), 21),
        (date(1979, 2, 6), 0),
    ],
)
def test_age_on(on: date, expected: int) -> None:
    assert age_on(date(1979, 2, 6), on) == expected
