"""Five-element cycles and the Ten Gods (十神) relation algebra.

Every relation used by the scorer and the use-god inference is derived from
the two cycle tables below; the ten labels follow from crossing the five
element relations with a polarity match.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final, Mapping

from .constants import Element, HeavenlyStem

# Production: Wood -> Fire -> Earth -> Metal -> Water -> Wood
GENERATION_CYCLE: Final[Mapping[Element, Element]] = {
    Element.WOOD: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
}

# Destruction: Wood -> Earth -> Water -> Fire -> Metal -> Wood
CONTROL_CYCLE: Final[Mapping[Element, Element]] = {
    Element.WOOD: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.METAL,
    Element.METAL: Element.WOOD,
}

_GENERATED_BY: Final[Mapping[Element, Element]] = {
    child: parent for parent, child in GENERATION_CYCLE.items()
}
_CONTROLLED_BY: Final[Mapping[Element, Element]] = {
    victim: controller for controller, victim in CONTROL_CYCLE.items()
}


class ElementRelation(StrEnum):
    """How a target element relates to a reference element."""

    SAME = "same"
    GENERATES = "generates"  # reference produces target
    OVERCOMES = "overcomes"  # reference destroys target
    GENERATED_BY = "generated_by"  # target produces reference
    OVERCOME_BY = "overcome_by"  # target destroys reference


class TenGod(StrEnum):
    PARALLEL = "比肩"
    ROB_WEALTH = "劫财"
    EATING_GOD = "食神"
    HURTING_OFFICER = "伤官"
    INDIRECT_WEALTH = "偏财"
    DIRECT_WEALTH = "正财"
    SEVEN_KILLINGS = "七杀"
    DIRECT_OFFICER = "正官"
    INDIRECT_RESOURCE = "偏印"
    DIRECT_RESOURCE = "正印"


# Label assigned to the day pillar itself; never produced by :func:`ten_god`.
DAY_MASTER_LABEL: Final[str] = "日主"

# (relation, same polarity) -> label
_TEN_GOD_TABLE: Final[Mapping[tuple[ElementRelation, bool], TenGod]] = {
    (ElementRelation.SAME, True): TenGod.PARALLEL,
    (ElementRelation.SAME, False): TenGod.ROB_WEALTH,
    (ElementRelation.GENERATES, True): TenGod.EATING_GOD,
    (ElementRelation.GENERATES, False): TenGod.HURTING_OFFICER,
    (ElementRelation.OVERCOMES, True): TenGod.INDIRECT_WEALTH,
    (ElementRelation.OVERCOMES, False): TenGod.DIRECT_WEALTH,
    (ElementRelation.OVERCOME_BY, True): TenGod.SEVEN_KILLINGS,
    (ElementRelation.OVERCOME_BY, False): TenGod.DIRECT_OFFICER,
    (ElementRelation.GENERATED_BY, True): TenGod.INDIRECT_RESOURCE,
    (ElementRelation.GENERATED_BY, False): TenGod.DIRECT_RESOURCE,
}


def element_relation(reference: Element, target: Element) -> ElementRelation:
    """Return how ``target`` relates to ``reference`` on the two cycles."""

    if reference == target:
        return ElementRelation.SAME
    if GENERATION_CYCLE[reference] == target:
        return ElementRelation.GENERATES
    if CONTROL_CYCLE[reference] == target:
        return ElementRelation.OVERCOMES
    if GENERATION_CYCLE[target] == reference:
        return ElementRelation.GENERATED_BY
    return ElementRelation.OVERCOME_BY


def ten_god(reference: HeavenlyStem, target: HeavenlyStem) -> TenGod:
    """Classify ``target`` relative to the ``reference`` (day master) stem."""

    if reference == target:
        return TenGod.PARALLEL
    relation = element_relation(reference.element, target.element)
    return _TEN_GOD_TABLE[(relation, reference.polarity == target.polarity)]


def generating_element(element: Element) -> Element:
    """Element that produces ``element`` (印, resource)."""

    return _GENERATED_BY[element]


def restraining_element(element: Element) -> Element:
    """Element that destroys ``element`` (官杀, officer)."""

    return _CONTROLLED_BY[element]


def draining_element(element: Element) -> Element:
    """Element produced by ``element`` (食伤, output)."""

    return GENERATION_CYCLE[element]


def consumed_element(element: Element) -> Element:
    """Element destroyed by ``element`` (财, wealth)."""

    return CONTROL_CYCLE[element]


__all__ = [
    "GENERATION_CYCLE",
    "CONTROL_CYCLE",
    "DAY_MASTER_LABEL",
    "ElementRelation",
    "TenGod",
    "element_relation",
    "ten_god",
    "generating_element",
    "restraining_element",
    "draining_element",
    "consumed_element",
]
