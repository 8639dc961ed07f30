from __future__ import annotations

from datetime import date, time

import pytest

from baziengine.chinese import (
    PatternGrade,
    PatternType,
    SeasonStrength,
    StrengthLevel,
    TenGod,
    chart_from_ganzhi,
    compute_chart,
    determine_pattern,
    score_strength,
)
from baziengine.chinese.patterns import grade_pattern


def _pattern_for(chart):
    strength = score_strength(chart.day_master_element, chart.month_order, chart)
    return determine_pattern(chart, strength)


def test_companion_month_is_established_prosperity() -> None:
    """Jia born in Yin: the month's main qi is a companion, giving Jian Lu."""

    pattern = _pattern_for(compute_chart(date(1979, 2, 6), time(4, 0)))

    assert pattern.name == "建禄格"
    assert pattern.pattern_type is PatternType.ORDINARY
    assert pattern.month_ten_god is TenGod.PARALLEL
    assert pattern.grade is PatternGrade.SUPERIOR


def test_month_main_qi_names_the_pattern() -> None:
    pattern = _pattern_for(chart_from_ganzhi("甲子", "癸酉", "甲子", "甲子"))

    assert pattern.name == "正官格"
    assert pattern.month_ten_god is TenGod.DIRECT_OFFICER
    assert pattern.grade is PatternGrade.WEAK


def test_follow_strong_takes_precedence() -> None:
    pattern = _pattern_for(chart_from_ganzhi("甲寅", "丙寅", "甲寅", "甲寅"))

    assert pattern.name == "从强格"
    assert pattern.is_special
    assert pattern.grade is PatternGrade.SUPERIOR


def test_follow_weak() -> None:
    pattern = _pattern_for(chart_from_ganzhi("庚申", "庚申", "甲申", "庚申"))

    assert pattern.name == "从弱格"
    assert pattern.pattern_type is PatternType.SPECIAL


@pytest.mark.parametrize(
    "season, level, expected",
    [
        (SeasonStrength.PROSPEROUS, StrengthLevel.BALANCED, PatternGrade.SUPERIOR),
        (SeasonStrength.PROSPEROUS, StrengthLevel.VERY_STRONG, PatternGrade.WEAK),
        (SeasonStrength.SUPPORTED, StrengthLevel.WEAK, PatternGrade.GOOD),
        (SeasonStrength.NASCENT, StrengthLevel.STRONG, PatternGrade.GOOD),
        (SeasonStrength.RESTING, StrengthLevel.BALANCED, PatternGrade.AVERAGE),
        (SeasonStrength.RESIDUAL, StrengthLevel.WEAK, PatternGrade.AVERAGE),
        (SeasonStrength.DEAD, StrengthLevel.BALANCED, PatternGrade.WEAK),
    ],
)
def test_ordinary_pattern_grades(
    season: SeasonStrength, level: StrengthLevel, expected: PatternGrade
) -> None:
    assert grade_pattern(PatternType.ORDINARY, season, level) is expected


def test_special_pattern_grade_depends_on_extremity() -> None:
    assert (
        grade_pattern(PatternType.SPECIAL, SeasonStrength.DEAD, StrengthLevel.VERY_WEAK)
        is PatternGrade.SUPERIOR
    )
    assert (
        grade_pattern(PatternType.SPECIAL, SeasonStrength.DEAD, StrengthLevel.WEAK)
        is PatternGrade.AVERAGE
    )
