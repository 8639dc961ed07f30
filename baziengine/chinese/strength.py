"""Day-master strength (旺衰) scoring.

The overall score is the plain sum of three terms:

* the month-order score, from the season strength of the day master's
  element in the month branch;
* hidden-stem support, over every hidden stem of all four branches, weighted
  by tier (main 1.0, middle 0.6, residual 0.3);
* visible-stem support from the year, month and hour stems.

The five strength levels are bands on that sum with inclusive lower bounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Mapping

from .constants import EarthlyBranch, Element, HeavenlyStem, QiTier
from .four_pillars import FourPillarsChart, PillarPosition
from .ten_gods import ElementRelation, element_relation

LOG = logging.getLogger(__name__)


class SeasonStrength(StrEnum):
    PROSPEROUS = "旺"
    SUPPORTED = "相"
    RESTING = "休"
    TRAPPED = "囚"
    DEAD = "死"
    VOID = "绝"
    STORED = "墓"
    NASCENT = "生"
    RESIDUAL = "余气"


class StrengthLevel(StrEnum):
    VERY_STRONG = "very_strong"
    STRONG = "strong"
    BALANCED = "balanced"
    WEAK = "weak"
    VERY_WEAK = "very_weak"

    @property
    def chinese(self) -> str:
        return _LEVEL_CHINESE[self]

    @property
    def is_strong(self) -> bool:
        return self in (StrengthLevel.VERY_STRONG, StrengthLevel.STRONG)

    @property
    def is_weak(self) -> bool:
        return self in (StrengthLevel.WEAK, StrengthLevel.VERY_WEAK)


_LEVEL_CHINESE: Final[Mapping[StrengthLevel, str]] = {
    StrengthLevel.VERY_STRONG: "太旺",
    StrengthLevel.STRONG: "偏旺",
    StrengthLevel.BALANCED: "中和",
    StrengthLevel.WEAK: "偏弱",
    StrengthLevel.VERY_WEAK: "太弱",
}

_P, _S, _R, _D, _V, _T, _N, _Q = (
    SeasonStrength.PROSPEROUS,
    SeasonStrength.SUPPORTED,
    SeasonStrength.RESTING,
    SeasonStrength.DEAD,
    SeasonStrength.VOID,
    SeasonStrength.STORED,
    SeasonStrength.NASCENT,
    SeasonStrength.RESIDUAL,
)

# Element -> season strength per month branch, in branch order 子 丑 寅 … 亥.
_SEASON_ROWS: Final[Mapping[Element, tuple[SeasonStrength, ...]]] = {
    Element.WOOD: (_N, _R, _P, _P, _Q, _D, _D, _D, _V, _V, _T, _N),
    Element.FIRE: (_V, _D, _N, _N, _R, _P, _P, _Q, _D, _D, _T, _V),
    Element.EARTH: (_D, _P, _D, _D, _P, _S, _S, _P, _R, _R, _P, _D),
    Element.METAL: (_N, _S, _V, _V, _T, _D, _D, _D, _P, _P, _Q, _N),
    Element.WATER: (_P, _Q, _D, _D, _T, _V, _V, _D, _N, _N, _D, _P),
}

SEASON_STRENGTH: Final[Mapping[tuple[Element, int], SeasonStrength]] = {
    (element, branch_index): label
    for element, row in _SEASON_ROWS.items()
    for branch_index, label in enumerate(row)
}

SEASON_SCORE: Final[Mapping[SeasonStrength, int]] = {
    SeasonStrength.PROSPEROUS: 4,
    SeasonStrength.SUPPORTED: 2,
    SeasonStrength.RESTING: 0,
    SeasonStrength.TRAPPED: -2,
    SeasonStrength.DEAD: -3,
    SeasonStrength.VOID: -4,
    SeasonStrength.STORED: -1,
    SeasonStrength.NASCENT: 1,
    SeasonStrength.RESIDUAL: 1,
}

# Base scores keyed by how the day master relates to the contributing element.
HIDDEN_STEM_BASE: Final[Mapping[ElementRelation, float]] = {
    ElementRelation.SAME: 3.0,
    ElementRelation.GENERATED_BY: 2.0,  # contributor produces the day master
    ElementRelation.GENERATES: -1.0,  # day master produces the contributor
    ElementRelation.OVERCOMES: -2.0,  # day master destroys the contributor
    ElementRelation.OVERCOME_BY: -3.0,  # contributor destroys the day master
}

VISIBLE_STEM_BASE: Final[Mapping[ElementRelation, float]] = {
    ElementRelation.SAME: 2.0,
    ElementRelation.GENERATED_BY: 1.5,
    ElementRelation.GENERATES: -0.5,
    ElementRelation.OVERCOMES: -1.0,
    ElementRelation.OVERCOME_BY: -1.5,
}

HIDDEN_DETAIL_THRESHOLD: Final[float] = 0.5

# Tier weights are tenths, so sums are rounded back onto the decimal grid
# before they meet the inclusive band bounds.
SCORE_DIGITS: Final[int] = 6

# (lower bound, level), checked top-down; lower bounds are inclusive.
STRENGTH_BANDS: Final[tuple[tuple[float, StrengthLevel], ...]] = (
    (6.0, StrengthLevel.VERY_STRONG),
    (3.0, StrengthLevel.STRONG),
    (-1.0, StrengthLevel.BALANCED),
    (-4.0, StrengthLevel.WEAK),
)


@dataclass(frozen=True)
class SupportDetail:
    """One itemised contribution to a support score."""

    position: PillarPosition
    stem: HeavenlyStem
    relation: ElementRelation
    score: float
    branch: EarthlyBranch | None = None
    tier: QiTier | None = None


@dataclass(frozen=True)
class SupportScore:
    total: float
    details: tuple[SupportDetail, ...]
    level: str


@dataclass(frozen=True)
class ElementStrengthAnalysis:
    day_master_element: Element
    month_branch: EarthlyBranch
    month_strength: SeasonStrength
    month_score: int
    hidden_stem_support: SupportScore
    stem_support: SupportScore
    overall_score: float
    strength_level: StrengthLevel


def month_strength(element: Element, month_branch: EarthlyBranch) -> SeasonStrength:
    """Return the season strength of ``element`` in ``month_branch``."""

    return SEASON_STRENGTH[(element, month_branch.index)]


def _support_level(total: float, strong: float, weak: float) -> str:
    if total > strong:
        return "强"
    if total > 0:
        return "中"
    if total > weak:
        return "弱"
    return "很弱"


def hidden_stem_support(day_master_element: Element, chart: FourPillarsChart) -> SupportScore:
    total = 0.0
    details: list[SupportDetail] = []
    for pillar in chart.ordered_pillars():
        for hidden in pillar.hidden_stems:
            relation = element_relation(day_master_element, hidden.stem.element)
            weighted = round(HIDDEN_STEM_BASE[relation] * hidden.weight, SCORE_DIGITS)
            total += weighted
            if abs(weighted) > HIDDEN_DETAIL_THRESHOLD:
                details.append(
                    SupportDetail(
                        position=pillar.position,
                        stem=hidden.stem,
                        relation=relation,
                        score=weighted,
                        branch=pillar.branch,
                        tier=hidden.tier,
                    )
                )
    total = round(total, SCORE_DIGITS)
    return SupportScore(total=total, details=tuple(details), level=_support_level(total, 3, -3))


def stem_support(day_master_element: Element, chart: FourPillarsChart) -> SupportScore:
    total = 0.0
    details: list[SupportDetail] = []
    for pillar in chart.ordered_pillars():
        if pillar.is_day_master:
            continue
        relation = element_relation(day_master_element, pillar.stem.element)
        score = VISIBLE_STEM_BASE[relation]
        total += score
        if score:
            details.append(
                SupportDetail(
                    position=pillar.position, stem=pillar.stem, relation=relation, score=score
                )
            )
    return SupportScore(total=total, details=tuple(details), level=_support_level(total, 2, -2))


def classify_strength(score: float) -> StrengthLevel:
    """Map an overall score onto the five strength bands."""

    score = round(score, SCORE_DIGITS)
    for lower_bound, level in STRENGTH_BANDS:
        if score >= lower_bound:
            return level
    return StrengthLevel.VERY_WEAK


def score_strength(
    day_master_element: Element,
    month_branch: EarthlyBranch,
    chart: FourPillarsChart,
) -> ElementStrengthAnalysis:
    """Score the day master's strength for ``chart``."""

    season = month_strength(day_master_element, month_branch)
    month_score = SEASON_SCORE[season]
    hidden = hidden_stem_support(day_master_element, chart)
    visible = stem_support(day_master_element, chart)
    overall = round(month_score + hidden.total + visible.total, SCORE_DIGITS)
    level = classify_strength(overall)
    LOG.debug(
        "Strength for %s in %s: month=%s hidden=%.2f stems=%.2f total=%.2f -> %s",
        day_master_element,
        month_branch,
        month_score,
        hidden.total,
        visible.total,
        overall,
        level,
    )
    return ElementStrengthAnalysis(
        day_master_element=day_master_element,
        month_branch=month_branch,
        month_strength=season,
        month_score=month_score,
        hidden_stem_support=hidden,
        stem_support=visible,
        overall_score=overall,
        strength_level=level,
    )


__all__ = [
    "SeasonStrength",
    "StrengthLevel",
    "SEASON_STRENGTH",
    "SEASON_SCORE",
    "HIDDEN_STEM_BASE",
    "VISIBLE_STEM_BASE",
    "STRENGTH_BANDS",
    "SupportDetail",
    "SupportScore",
    "ElementStrengthAnalysis",
    "month_strength",
    "hidden_stem_support",
    "stem_support",
    "classify_strength",
    "score_strength",
]
