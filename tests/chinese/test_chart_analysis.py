from __future__ import annotations

from datetime import date, time

import orjson
import pytest

from baziengine.chinese import (
    Element,
    Gender,
    StrengthLevel,
    analyze_chart,
    chart_from_ganzhi,
    compute_chart,
)


def test_end_to_end_reference_chart(chart_1979) -> None:
    """Jia in Yin: Wang, strong, so Metal/Fire/Earth are favorable."""

    analysis = analyze_chart(chart_1979)

    assert analysis.strength.month_score == 4
    assert analysis.strength.strength_level is StrengthLevel.STRONG
    assert analysis.use_god.favorable == (Element.METAL, Element.FIRE, Element.EARTH)
    assert analysis.use_god.unfavorable == (Element.WOOD, Element.WATER)
    assert analysis.pattern.name == "建禄格"
    assert analysis.luck is None
    assert analysis.current_luck is None


def test_luck_and_current_pillar(chart_1979) -> None:
    analysis = analyze_chart(chart_1979, Gender.MALE, on=date(2000, 6, 1))

    assert analysis.luck is not None
    assert analysis.current_age == 21
    assert analysis.current_luck is analysis.luck.pillars[2]


def test_chart_without_birth_date_skips_luck() -> None:
    chart = chart_from_ganzhi("己未", "丙寅", "甲辰", "丙寅")

    analysis = analyze_chart(chart, Gender.FEMALE)

    assert analysis.luck is None
    assert analysis.strength.strength_level is StrengthLevel.STRONG


def test_to_dict_is_json_ready(chart_1979) -> None:
    payload = analyze_chart(chart_1979, "male", on=date(2000, 6, 1)).to_dict()

    orjson.dumps(payload)
    assert payload["pillars"]["year"]["ganzhi"] == "己未"
    assert payload["pillars"]["day"]["ten_god"] == "日主"
    assert payload["strength"]["overall_score"] == 4.3
    assert payload["strength"]["strength_level"] == "strong"
    assert payload["use_god"]["favorable"] == ["金", "火", "土"]
    assert payload["distribution"]["missing"] == ["金"]
    assert payload["pattern"]["grade"] == "上等"
    assert payload["luck"]["forward"] is False
    assert payload["luck"]["current"] == payload["luck"]["pillars"][2]["ganzhi"]


def test_analysis_is_deterministic(chart_1979) -> None:
    first = analyze_chart(chart_1979, Gender.MALE)
    second = analyze_chart(compute_chart(date(1979, 2, 6), time(4, 0)), Gender.MALE)

    assert first == second
