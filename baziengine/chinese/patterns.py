"""Chart pattern (格局) determination and grading."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .constants import Element
from .four_pillars import FourPillarsChart
from .strength import ElementStrengthAnalysis, SeasonStrength, StrengthLevel
from .ten_gods import TenGod, restraining_element, ten_god

SPECIAL_PATTERN_THRESHOLD: Final[int] = 3

FOLLOW_STRONG: Final[str] = "从强格"
FOLLOW_WEAK: Final[str] = "从弱格"
ESTABLISHED_PROSPERITY: Final[str] = "建禄格"


class PatternType(StrEnum):
    ORDINARY = "正格"
    SPECIAL = "特殊格局"


class PatternGrade(StrEnum):
    SUPERIOR = "上等"
    GOOD = "中上"
    AVERAGE = "中等"
    WEAK = "偏弱"


@dataclass(frozen=True)
class ChartPattern:
    name: str
    pattern_type: PatternType
    grade: PatternGrade
    month_ten_god: TenGod

    @property
    def is_special(self) -> bool:
        return self.pattern_type is PatternType.SPECIAL


def _count_elements(chart: FourPillarsChart, element: Element) -> int:
    """Count stems and hidden stems of ``element`` outside the day pillar."""

    count = 0
    for pillar in chart.ordered_pillars():
        if pillar.is_day_master:
            continue
        if pillar.stem.element == element:
            count += 1
        count += sum(1 for hidden in pillar.hidden_stems if hidden.stem.element == element)
    return count


def special_pattern(chart: FourPillarsChart, level: StrengthLevel) -> str | None:
    """Return a following pattern name when the chart qualifies for one."""

    own = chart.day_master_element
    if level is StrengthLevel.VERY_STRONG:
        if _count_elements(chart, own) >= SPECIAL_PATTERN_THRESHOLD:
            return FOLLOW_STRONG
    elif level is StrengthLevel.VERY_WEAK:
        if _count_elements(chart, restraining_element(own)) >= SPECIAL_PATTERN_THRESHOLD:
            return FOLLOW_WEAK
    return None


def grade_pattern(
    pattern_type: PatternType,
    month_strength: SeasonStrength,
    level: StrengthLevel,
) -> PatternGrade:
    if pattern_type is PatternType.SPECIAL:
        if level in (StrengthLevel.VERY_STRONG, StrengthLevel.VERY_WEAK):
            return PatternGrade.SUPERIOR
        return PatternGrade.AVERAGE
    if month_strength is SeasonStrength.PROSPEROUS and level in (
        StrengthLevel.BALANCED,
        StrengthLevel.STRONG,
    ):
        return PatternGrade.SUPERIOR
    if month_strength in (SeasonStrength.SUPPORTED, SeasonStrength.NASCENT):
        return PatternGrade.GOOD
    if month_strength in (SeasonStrength.RESTING, SeasonStrength.RESIDUAL):
        return PatternGrade.AVERAGE
    return PatternGrade.WEAK


def determine_pattern(chart: FourPillarsChart, strength: ElementStrengthAnalysis) -> ChartPattern:
    """Name and grade the chart's pattern.

    Following patterns take precedence; otherwise the pattern is named by the
    Ten God of the month branch's main hidden stem.
    """

    month_main = chart.month.hidden_stems[0].stem
    month_god = ten_god(chart.day_master, month_main)
    level = strength.strength_level

    name = special_pattern(chart, level)
    if name is not None:
        pattern_type = PatternType.SPECIAL
    else:
        pattern_type = PatternType.ORDINARY
        if month_god in (TenGod.PARALLEL, TenGod.ROB_WEALTH):
            name = ESTABLISHED_PROSPERITY
        else:
            name = f"{month_god}格"

    return ChartPattern(
        name=name,
        pattern_type=pattern_type,
        grade=grade_pattern(pattern_type, strength.month_strength, level),
        month_ten_god=month_god,
    )


__all__ = [
    "PatternType",
    "PatternGrade",
    "ChartPattern",
    "special_pattern",
    "grade_pattern",
    "determine_pattern",
]
