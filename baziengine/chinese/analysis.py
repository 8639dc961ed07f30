"""Assemble a complete chart analysis from the individual scorers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from .constants import Element, Gender
from .distribution import ElementDistribution, element_distribution
from .four_pillars import FourPillarsChart, Pillar
from .luck_pillars import DEFAULT_PILLAR_COUNT, LuckCycle, LuckPillar, age_on, luck_cycle
from .patterns import ChartPattern, determine_pattern
from .strength import ElementStrengthAnalysis, SupportScore, score_strength
from .use_god import UseGodAnalysis, infer_use_god

if TYPE_CHECKING:
    from ..calendar.solar_terms import FixedSolarTermResolver


@dataclass(frozen=True)
class BaziAnalysis:
    chart: FourPillarsChart
    strength: ElementStrengthAnalysis
    use_god: UseGodAnalysis
    distribution: ElementDistribution
    pattern: ChartPattern
    luck: LuckCycle | None = None
    current_age: int | None = None

    @property
    def current_luck(self) -> LuckPillar | None:
        if self.luck is None or self.current_age is None:
            return None
        return self.luck.pillar_at(self.current_age)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready view for report and narrative layers."""

        chart = self.chart
        payload: dict[str, Any] = {
            "birth_date": chart.birth_date.isoformat() if chart.birth_date else None,
            "birth_time": chart.birth_time.strftime("%H:%M") if chart.birth_time else None,
            "pillars": {
                str(position): _pillar_dict(pillar) for position, pillar in chart.pillars.items()
            },
            "day_master": chart.day_master.name,
            "day_master_element": chart.day_master_element.chinese,
            "month_order": chart.month_order.name,
            "strength": {
                "month_strength": str(self.strength.month_strength),
                "month_score": self.strength.month_score,
                "hidden_stem_support": _support_dict(self.strength.hidden_stem_support),
                "stem_support": _support_dict(self.strength.stem_support),
                "overall_score": round(self.strength.overall_score, 2),
                "strength_level": str(self.strength.strength_level),
                "strength_level_chinese": self.strength.strength_level.chinese,
            },
            "use_god": {
                "favorable": _element_names(self.use_god.favorable),
                "unfavorable": _element_names(self.use_god.unfavorable),
                "rationale": self.use_god.rationale,
                "situational": self.use_god.situational,
            },
            "distribution": {
                "totals": {
                    element.chinese: total for element, total in self.distribution.totals.items()
                },
                "sources": {
                    element.chinese: list(items)
                    for element, items in self.distribution.sources.items()
                },
                "strongest": self.distribution.strongest.chinese,
                "weakest": self.distribution.weakest.chinese,
                "missing": _element_names(self.distribution.missing),
            },
            "pattern": {
                "name": self.pattern.name,
                "type": str(self.pattern.pattern_type),
                "grade": str(self.pattern.grade),
                "month_ten_god": str(self.pattern.month_ten_god),
            },
            "luck": None,
        }
        if self.luck is not None:
            current = self.current_luck
            payload["luck"] = {
                "gender": str(self.luck.gender),
                "forward": self.luck.forward,
                "start_age": self.luck.start_age,
                "current_age": self.current_age,
                "current": current.label() if current else None,
                "pillars": [
                    {
                        "period": pillar.period,
                        "ganzhi": pillar.label(),
                        "start_age": pillar.start_age,
                        "end_age": pillar.end_age,
                        "ten_god": str(pillar.ten_god),
                    }
                    for pillar in self.luck.pillars
                ],
            }
        return payload


def _element_names(elements: tuple[Element, ...]) -> list[str]:
    return [element.chinese for element in elements]


def _pillar_dict(pillar: Pillar) -> dict[str, Any]:
    return {
        "ganzhi": pillar.label(),
        "stem": pillar.stem.name,
        "branch": pillar.branch.name,
        "element": pillar.element.chinese,
        "hidden_stems": [hidden.stem.name for hidden in pillar.hidden_stems],
        "ten_god": str(pillar.ten_god),
        "nayin": pillar.nayin,
        "zi_shi": str(pillar.zi_shi) if pillar.zi_shi else None,
    }


def _support_dict(support: SupportScore) -> dict[str, Any]:
    return {
        "total": round(support.total, 2),
        "level": support.level,
        "details": [
            {
                "position": str(detail.position),
                "stem": detail.stem.name,
                "branch": detail.branch.name if detail.branch else None,
                "relation": str(detail.relation),
                "score": round(detail.score, 2),
            }
            for detail in support.details
        ],
    }


def analyze_chart(
    chart: FourPillarsChart,
    gender: Gender | str | None = None,
    *,
    on: date | None = None,
    resolver: FixedSolarTermResolver | None = None,
    luck_pillar_count: int = DEFAULT_PILLAR_COUNT,
) -> BaziAnalysis:
    """Run every scorer over ``chart``.

    ``luck`` is only computed when ``gender`` is given and the chart carries a
    birth date; ``on`` selects the current luck pillar.
    """

    strength = score_strength(chart.day_master_element, chart.month_order, chart)
    use_god = infer_use_god(chart.day_master_element, strength.strength_level)
    luck = None
    current_age = None
    if gender is not None and chart.birth_date is not None:
        luck = luck_cycle(chart, gender, resolver=resolver, count=luck_pillar_count)
        if on is not None:
            current_age = age_on(chart.birth_date, on)
    return BaziAnalysis(
        chart=chart,
        strength=strength,
        use_god=use_god,
        distribution=element_distribution(chart),
        pattern=determine_pattern(chart, strength),
        luck=luck,
        current_age=current_age,
    )


__all__ = ["BaziAnalysis", "analyze_chart"]
