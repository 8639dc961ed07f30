"""Lookup tables for Heavenly Stems and Earthly Branches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Mapping

from ..errors import InvalidInputError


class Element(StrEnum):
    """The five phases (五行)."""

    WOOD = "Wood"
    FIRE = "Fire"
    EARTH = "Earth"
    METAL = "Metal"
    WATER = "Water"

    @property
    def chinese(self) -> str:
        return _ELEMENT_CHINESE[self]


_ELEMENT_CHINESE: Final[Mapping[Element, str]] = {
    Element.WOOD: "木",
    Element.FIRE: "火",
    Element.EARTH: "土",
    Element.METAL: "金",
    Element.WATER: "水",
}


class Polarity(StrEnum):
    YANG = "Yang"
    YIN = "Yin"


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"

    @property
    def chinese(self) -> str:
        return "男" if self is Gender.MALE else "女"


class QiTier(StrEnum):
    """Position of a hidden stem inside its branch (本气/中气/余气)."""

    MAIN = "main"
    MIDDLE = "middle"
    RESIDUAL = "residual"

    @property
    def weight(self) -> float:
        return _QI_WEIGHTS[self]


_QI_WEIGHTS: Final[Mapping[QiTier, float]] = {
    QiTier.MAIN: 1.0,
    QiTier.MIDDLE: 0.6,
    QiTier.RESIDUAL: 0.3,
}

_TIER_ORDER: Final[tuple[QiTier, ...]] = (QiTier.MAIN, QiTier.MIDDLE, QiTier.RESIDUAL)


@dataclass(frozen=True)
class HeavenlyStem:
    """Representation of one of the ten Heavenly Stems (天干)."""

    index: int
    name: str
    pinyin: str
    element: Element
    polarity: Polarity

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class HiddenStem:
    """A stem stored inside a branch together with its tier."""

    stem: HeavenlyStem
    tier: QiTier

    @property
    def weight(self) -> float:
        return self.tier.weight


@dataclass(frozen=True)
class EarthlyBranch:
    """Representation of one of the twelve Earthly Branches (地支)."""

    index: int
    name: str
    pinyin: str
    animal: str
    element: Element
    polarity: Polarity
    hidden_stems: tuple[HiddenStem, ...]

    def __str__(self) -> str:
        return self.name


HEAVENLY_STEMS: Final[tuple[HeavenlyStem, ...]] = (
    HeavenlyStem(0, "甲", "Jia", Element.WOOD, Polarity.YANG),
    HeavenlyStem(1, "乙", "Yi", Element.WOOD, Polarity.YIN),
    HeavenlyStem(2, "丙", "Bing", Element.FIRE, Polarity.YANG),
    HeavenlyStem(3, "丁", "Ding", Element.FIRE, Polarity.YIN),
    HeavenlyStem(4, "戊", "Wu", Element.EARTH, Polarity.YANG),
    HeavenlyStem(5, "己", "Ji", Element.EARTH, Polarity.YIN),
    HeavenlyStem(6, "庚", "Geng", Element.METAL, Polarity.YANG),
    HeavenlyStem(7, "辛", "Xin", Element.METAL, Polarity.YIN),
    HeavenlyStem(8, "壬", "Ren", Element.WATER, Polarity.YANG),
    HeavenlyStem(9, "癸", "Gui", Element.WATER, Polarity.YIN),
)

_STEMS_BY_NAME: Final[Mapping[str, HeavenlyStem]] = {stem.name: stem for stem in HEAVENLY_STEMS}


def _hidden(*names: str) -> tuple[HiddenStem, ...]:
    return tuple(
        HiddenStem(_STEMS_BY_NAME[name], tier) for name, tier in zip(names, _TIER_ORDER)
    )


EARTHLY_BRANCHES: Final[tuple[EarthlyBranch, ...]] = (
    EarthlyBranch(0, "子", "Zi", "Rat", Element.WATER, Polarity.YANG, _hidden("癸")),
    EarthlyBranch(1, "丑", "Chou", "Ox", Element.EARTH, Polarity.YIN, _hidden("己", "癸", "辛")),
    EarthlyBranch(2, "寅", "Yin", "Tiger", Element.WOOD, Polarity.YANG, _hidden("甲", "丙", "戊")),
    EarthlyBranch(3, "卯", "Mao", "Rabbit", Element.WOOD, Polarity.YIN, _hidden("乙")),
    EarthlyBranch(4, "辰", "Chen", "Dragon", Element.EARTH, Polarity.YANG, _hidden("戊", "乙", "癸")),
    EarthlyBranch(5, "巳", "Si", "Snake", Element.FIRE, Polarity.YIN, _hidden("丙", "戊", "庚")),
    EarthlyBranch(6, "午", "Wu", "Horse", Element.FIRE, Polarity.YANG, _hidden("丁", "己")),
    EarthlyBranch(7, "未", "Wei", "Goat", Element.EARTH, Polarity.YIN, _hidden("己", "丁", "乙")),
    EarthlyBranch(8, "申", "Shen", "Monkey", Element.METAL, Polarity.YANG, _hidden("庚", "壬", "戊")),
    EarthlyBranch(9, "酉", "You", "Rooster", Element.METAL, Polarity.YIN, _hidden("辛")),
    EarthlyBranch(10, "戌", "Xu", "Dog", Element.EARTH, Polarity.YANG, _hidden("戊", "辛", "丁")),
    EarthlyBranch(11, "亥", "Hai", "Pig", Element.WATER, Polarity.YIN, _hidden("壬", "甲")),
)

_BRANCHES_BY_NAME: Final[Mapping[str, EarthlyBranch]] = {
    branch.name: branch for branch in EARTHLY_BRANCHES
}


def stem_for_index(index: int) -> HeavenlyStem:
    """Return the Heavenly Stem for ``index`` (0-9)."""

    return HEAVENLY_STEMS[index % len(HEAVENLY_STEMS)]


def branch_for_index(index: int) -> EarthlyBranch:
    """Return the Earthly Branch for ``index`` (0-11)."""

    return EARTHLY_BRANCHES[index % len(EARTHLY_BRANCHES)]


def stem_by_name(name: str) -> HeavenlyStem:
    """Return the stem written as ``name`` (``甲``) or romanised (``Jia``)."""

    stem = _STEMS_BY_NAME.get(name)
    if stem is None:
        stem = next((s for s in HEAVENLY_STEMS if s.pinyin.lower() == name.lower()), None)
    if stem is None:
        raise InvalidInputError(f"Unknown heavenly stem: {name!r}", field="stem")
    return stem


def branch_by_name(name: str) -> EarthlyBranch:
    """Return the branch written as ``name`` (``子``) or romanised (``Zi``)."""

    branch = _BRANCHES_BY_NAME.get(name)
    if branch is None:
        branch = next(
            (b for b in EARTHLY_BRANCHES if b.pinyin.lower() == name.lower()), None
        )
    if branch is None:
        raise InvalidInputError(f"Unknown earthly branch: {name!r}", field="branch")
    return branch


__all__ = [
    "Element",
    "Polarity",
    "Gender",
    "QiTier",
    "HeavenlyStem",
    "HiddenStem",
    "EarthlyBranch",
    "HEAVENLY_STEMS",
    "EARTHLY_BRANCHES",
    "stem_for_index",
    "branch_for_index",
    "stem_by_name",
    "branch_by_name",
]
