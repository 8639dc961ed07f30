"""Five-element distribution over visible and hidden stems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from .constants import Element, QiTier
from .four_pillars import FourPillarsChart

VISIBLE_STEM_WEIGHT: Final[float] = 2.0
HIDDEN_TIER_WEIGHTS: Final[Mapping[QiTier, float]] = {
    QiTier.MAIN: 1.5,
    QiTier.MIDDLE: 1.0,
    QiTier.RESIDUAL: 0.5,
}


@dataclass(frozen=True)
class ElementDistribution:
    """Weighted element totals and the stems each total came from."""

    totals: Mapping[Element, float]
    sources: Mapping[Element, tuple[str, ...]]

    @property
    def strongest(self) -> Element:
        # Ties resolve to the earliest element in generation order.
        return max(Element, key=lambda element: self.totals[element])

    @property
    def weakest(self) -> Element:
        return min(Element, key=lambda element: self.totals[element])

    @property
    def missing(self) -> tuple[Element, ...]:
        return tuple(element for element in Element if not self.totals[element])

    def share(self, element: Element) -> float:
        total = sum(self.totals.values())
        return self.totals[element] / total if total else 0.0


def element_distribution(chart: FourPillarsChart) -> ElementDistribution:
    totals: dict[Element, float] = {element: 0.0 for element in Element}
    sources: dict[Element, list[str]] = {element: [] for element in Element}

    for pillar in chart.ordered_pillars():
        totals[pillar.stem.element] += VISIBLE_STEM_WEIGHT
        sources[pillar.stem.element].append(f"{pillar.position.chinese}干{pillar.stem.name}")

    for pillar in chart.ordered_pillars():
        for hidden in pillar.hidden_stems:
            element = hidden.stem.element
            totals[element] += HIDDEN_TIER_WEIGHTS[hidden.tier]
            sources[element].append(f"{pillar.position.chinese}支藏{hidden.stem.name}")

    return ElementDistribution(
        totals=totals,
        sources={element: tuple(items) for element, items in sources.items()},
    )


__all__ = [
    "VISIBLE_STEM_WEIGHT",
    "HIDDEN_TIER_WEIGHTS",
    "ElementDistribution",
    "element_distribution",
]
