"""Use-god (用神) inference from the day master's strength level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .constants import Element
from .strength import StrengthLevel
from .ten_gods import (
    consumed_element,
    draining_element,
    generating_element,
    restraining_element,
)


class ElementRole(StrEnum):
    """Role an element plays relative to the day master."""

    COMPANION = "比劫"
    RESOURCE = "印星"
    OFFICER = "官杀"
    OUTPUT = "食伤"
    WEALTH = "财星"


@dataclass(frozen=True)
class UseGodAnalysis:
    day_master_element: Element
    strength_level: StrengthLevel
    favorable: tuple[Element, ...]
    unfavorable: tuple[Element, ...]
    rationale: str
    situational: bool = False

    def role_of(self, element: Element) -> ElementRole:
        return element_role(self.day_master_element, element)

    def is_favorable(self, element: Element) -> bool:
        return element in self.favorable


def element_role(day_master_element: Element, element: Element) -> ElementRole:
    if element == day_master_element:
        return ElementRole.COMPANION
    if element == generating_element(day_master_element):
        return ElementRole.RESOURCE
    if element == restraining_element(day_master_element):
        return ElementRole.OFFICER
    if element == draining_element(day_master_element):
        return ElementRole.OUTPUT
    return ElementRole.WEALTH


def _names(elements: tuple[Element, ...]) -> str:
    return "、".join(element.chinese for element in elements)


def infer_use_god(day_master_element: Element, strength_level: StrengthLevel) -> UseGodAnalysis:
    """Derive favorable and unfavorable elements for a day master.

    A strong day master wants to be restrained, drained and consumed; a weak
    one wants resource and companions. A balanced chart yields no fixed
    recommendation and is flagged ``situational``.
    """

    level = StrengthLevel(strength_level)
    own = day_master_element
    if level.is_strong:
        favorable = (
            restraining_element(own),
            draining_element(own),
            consumed_element(own),
        )
        unfavorable = (own, generating_element(own))
        rationale = (
            f"日主{own.chinese}{level.chinese}，宜克泄耗，"
            f"取{_names(favorable)}为用，忌{_names(unfavorable)}"
        )
        return UseGodAnalysis(own, level, favorable, unfavorable, rationale)
    if level.is_weak:
        favorable = (generating_element(own), own)
        unfavorable = (
            restraining_element(own),
            draining_element(own),
            consumed_element(own),
        )
        rationale = (
            f"日主{own.chinese}{level.chinese}，宜生扶，"
            f"取{_names(favorable)}为用，忌{_names(unfavorable)}"
        )
        return UseGodAnalysis(own, level, favorable, unfavorable, rationale)
    rationale = f"日主{own.chinese}中和，五行较为平衡，用神需结合岁运具体分析"
    return UseGodAnalysis(own, level, (), (), rationale, situational=True)


__all__ = ["ElementRole", "UseGodAnalysis", "element_role", "infer_use_god"]
