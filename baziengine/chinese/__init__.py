"""Four Pillars (BaZi) chart computation and analysis."""

from __future__ import annotations

from .constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    EarthlyBranch,
    Element,
    Gender,
    HeavenlyStem,
    HiddenStem,
    Polarity,
    QiTier,
    branch_by_name,
    branch_for_index,
    stem_by_name,
    stem_for_index,
)
from .sexagenary import (
    SexagenaryCycleEntry,
    nayin_for_index,
    sexagenary_entry_for_index,
    sexagenary_index,
)
from .ten_gods import (
    DAY_MASTER_LABEL,
    ElementRelation,
    TenGod,
    consumed_element,
    draining_element,
    element_relation,
    generating_element,
    restraining_element,
    ten_god,
)
from .four_pillars import (
    FourPillarsChart,
    Pillar,
    PillarPosition,
    ZiShi,
    chart_from_ganzhi,
    compute_chart,
)
from .strength import (
    ElementStrengthAnalysis,
    SeasonStrength,
    StrengthLevel,
    SupportDetail,
    SupportScore,
    classify_strength,
    month_strength,
    score_strength,
)
from .use_god import ElementRole, UseGodAnalysis, infer_use_god
from .distribution import ElementDistribution, element_distribution
from .patterns import ChartPattern, PatternGrade, PatternType, determine_pattern
from .luck_pillars import LuckCycle, LuckPillar, age_on, luck_cycle
from .analysis import BaziAnalysis, analyze_chart

__all__ = [
    "EARTHLY_BRANCHES",
    "HEAVENLY_STEMS",
    "EarthlyBranch",
    "Element",
    "Gender",
    "HeavenlyStem",
    "HiddenStem",
    "Polarity",
    "QiTier",
    "branch_by_name",
    "branch_for_index",
    "stem_by_name",
    "stem_for_index",
    "SexagenaryCycleEntry",
    "nayin_for_index",
    "sexagenary_entry_for_index",
    "sexagenary_index",
    "DAY_MASTER_LABEL",
    "ElementRelation",
    "TenGod",
    "consumed_element",
    "draining_element",
    "element_relation",
    "generating_element",
    "restraining_element",
    "ten_god",
    "FourPillarsChart",
    "Pillar",
    "PillarPosition",
    "ZiShi",
    "chart_from_ganzhi",
    "compute_chart",
    "ElementStrengthAnalysis",
    "SeasonStrength",
    "StrengthLevel",
    "SupportDetail",
    "SupportScore",
    "classify_strength",
    "month_strength",
    "score_strength",
    "ElementRole",
    "UseGodAnalysis",
    "infer_use_god",
    "ElementDistribution",
    "element_distribution",
    "ChartPattern",
    "PatternGrade",
    "PatternType",
    "determine_pattern",
    "LuckCycle",
    "LuckPillar",
    "age_on",
    "luck_cycle",
    "BaziAnalysis",
    "analyze_chart",
]
