from __future__ import annotations

import pytest

from baziengine.chinese import (
    Element,
    ElementRelation,
    TenGod,
    consumed_element,
    draining_element,
    element_relation,
    generating_element,
    restraining_element,
    stem_by_name,
    ten_god,
)


@pytest.mark.parametrize(
    "target, expected",
    [
        ("甲", TenGod.PARALLEL),
        ("乙", TenGod.ROB_WEALTH),
        ("丙", TenGod.EATING_GOD),
        ("丁", TenGod.HURTING_OFFICER),
        ("戊", TenGod.INDIRECT_WEALTH),
        ("己", TenGod.DIRECT_WEALTH),
        ("庚", TenGod.SEVEN_KILLINGS),
        ("辛", TenGod.DIRECT_OFFICER),
        ("壬", TenGod.INDIRECT_RESOURCE),
        ("癸", TenGod.DIRECT_RESOURCE),
    ],
)
def test_ten_gods_for_jia_day_master(target: str, expected: TenGod) -> None:
    """All ten labels for a Jia day master."""

    assert ten_god(stem_by_name("甲"), stem_by_name(target)) is expected


def test_ten_gods_for_yin_day_master() -> None:
    gui = stem_by_name("癸")

    assert ten_god(gui, stem_by_name("壬")) is TenGod.ROB_WEALTH
    assert ten_god(gui, stem_by_name("戊")) is TenGod.DIRECT_OFFICER
    assert ten_god(gui, stem_by_name("己")) is TenGod.SEVEN_KILLINGS
    assert ten_god(gui, stem_by_name("庚")) is TenGod.DIRECT_RESOURCE


def test_ten_god_is_directional() -> None:
    """When Jia produces Bing the relation reads differently from each side."""

    jia, bing = stem_by_name("甲"), stem_by_name("丙")

    assert ten_god(jia, bing) is TenGod.EATING_GOD
    assert ten_god(bing, jia) is TenGod.INDIRECT_RESOURCE


@pytest.mark.parametrize(
    "reference, target, expected",
    [
        (Element.WOOD, Element.WOOD, ElementRelation.SAME),
        (Element.WOOD, Element.FIRE, ElementRelation.GENERATES),
        (Element.WOOD, Element.EARTH, ElementRelation.OVERCOMES),
        (Element.WOOD, Element.WATER, ElementRelation.GENERATED_BY),
        (Element.WOOD, Element.METAL, ElementRelation.OVERCOME_BY),
        (Element.WATER, Element.FIRE, ElementRelation.OVERCOMES),
        (Element.FIRE, Element.WATER, ElementRelation.OVERCOME_BY),
    ],
)
def test_element_relation(reference: Element, target: Element, expected: ElementRelation) -> None:
    assert element_relation(reference, target) is expected


@pytest.mark.parametrize(
    "element, generates, restrains, drains, consumes",
    [
        (Element.WOOD, Element.WATER, Element.METAL, Element.FIRE, Element.EARTH),
        (Element.FIRE, Element.WOOD, Element.WATER, Element.EARTH, Element.METAL),
        (Element.EARTH, Element.FIRE, Element.WOOD, Element.METAL, Element.WATER),
        (Element.METAL, Element.EARTH, Element.FIRE, Element.WATER, Element.WOOD),
        (Element.WATER, Element.METAL, Element.EARTH, Element.WOOD, Element.FIRE),
    ],
)
def test_relation_helpers(
    element: Element,
    generates: Element,
    restrains: Element,
    drains: Element,
    consumes: Element,
) -> None:
    """The four helpers agree with the production and destruction cycles."""

    assert generating_element(element) is generates
    assert restraining_element(element) is restrains
    assert draining_element(element) is drains
    assert consumed_element(element) is consumes
