from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from baziengine.chinese import (
    HEAVENLY_STEMS,
    Element,
    StrengthLevel,
    TenGod,
    compute_chart,
    draining_element,
    infer_use_god,
    score_strength,
    ten_god,
)
from baziengine.divination import HEXAGRAMS, changed_hexagram

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

DATES = st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 30))
TIMES = st.times()
STEMS = st.sampled_from(HEAVENLY_STEMS)


@settings(deadline=None, max_examples=200)
@given(day=DATES, moment=TIMES)
def test_chart_is_deterministic(day: date, moment: time) -> None:
    assert compute_chart(day, moment) == compute_chart(day, moment)


@settings(deadline=None, max_examples=200)
@given(day=DATES, minute=st.integers(min_value=0, max_value=59))
def test_late_zi_hour_matches_next_early_zi(day: date, minute: int) -> None:
    late = compute_chart(day, time(23, minute))
    early = compute_chart(day + timedelta(days=1), time(0, minute))

    assert late.hour.label() == early.hour.label()
    assert late.day.label() != early.day.label()


@settings(deadline=None, max_examples=200)
@given(day=DATES, moment=TIMES)
def test_strength_level_matches_bands(day: date, moment: time) -> None:
    chart = compute_chart(day, moment)
    result = score_strength(chart.day_master_element, chart.month_order, chart)

    total = result.month_score + result.hidden_stem_support.total + result.stem_support.total
    assert result.overall_score == pytest.approx(total)
    assert result.overall_score == round(result.overall_score, 1)
    if result.overall_score >= 6:
        expected = StrengthLevel.VERY_STRONG
    elif result.overall_score >= 3:
        expected = StrengthLevel.STRONG
    elif result.overall_score >= -1:
        expected = StrengthLevel.BALANCED
    elif result.overall_score >= -4:
        expected = StrengthLevel.WEAK
    else:
        expected = StrengthLevel.VERY_WEAK
    assert result.strength_level is expected


@given(stem=STEMS)
def test_ten_god_with_itself_is_parallel(stem) -> None:
    assert ten_god(stem, stem) is TenGod.PARALLEL


@given(reference=STEMS, target=STEMS)
def test_producing_relation_is_asymmetric(reference, target) -> None:
    if draining_element(reference.element) is target.element:
        assert ten_god(reference, target) in (TenGod.EATING_GOD, TenGod.HURTING_OFFICER)
        assert ten_god(target, reference) in (TenGod.INDIRECT_RESOURCE, TenGod.DIRECT_RESOURCE)


@given(element=st.sampled_from(list(Element)), level=st.sampled_from(list(StrengthLevel)))
def test_use_god_sets_never_overlap(element: Element, level: StrengthLevel) -> None:
    result = infer_use_god(element, level)

    assert not set(result.favorable) & set(result.unfavorable)


@given(number=st.integers(min_value=1, max_value=64), line=st.integers(min_value=1, max_value=6))
def test_changing_a_line_twice_restores_hexagram(number: int, line: int) -> None:
    hexagram = HEXAGRAMS[number]
    changed = changed_hexagram(hexagram, line)

    assert changed is not hexagram
    assert changed_hexagram(changed, line) is hexagram
