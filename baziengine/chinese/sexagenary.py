"""Utilities for working with the sixty Jia-Zi combinations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from ..errors import InvalidInputError
from .constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    EarthlyBranch,
    Element,
    HeavenlyStem,
    branch_by_name,
    stem_by_name,
)

SEXAGENARY_CYCLE_LENGTH: Final[int] = 60

# 1984 was a Jia-Zi year.
YEAR_CYCLE_EPOCH: Final[int] = 1984

TIGER_BRANCH_INDEX: Final[int] = 2


@dataclass(frozen=True)
class SexagenaryCycleEntry:
    """Pairing of a Heavenly Stem and Earthly Branch."""

    index: int
    stem_index: int
    branch_index: int

    @property
    def stem(self) -> HeavenlyStem:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> EarthlyBranch:
        return EARTHLY_BRANCHES[self.branch_index]

    @property
    def nayin(self) -> str:
        return nayin_for_index(self.index)

    def label(self) -> str:
        """Return the two-character stem-branch label (e.g., ``甲子``)."""

        return f"{self.stem.name}{self.branch.name}"


# Five Tigers (五虎遁): 甲己 -> 丙寅, 乙庚 -> 戊寅, 丙辛 -> 庚寅, 丁壬 -> 壬寅, 戊癸 -> 甲寅.
FIVE_TIGER_START: Final[Mapping[int, int]] = {0: 2, 5: 2, 1: 4, 6: 4, 2: 6, 7: 6, 3: 8, 8: 8, 4: 0, 9: 0}

# Five Rats (五鼠遁): 甲己 -> 甲子, 乙庚 -> 丙子, 丙辛 -> 戊子, 丁壬 -> 庚子, 戊癸 -> 壬子.
RAT_START: Final[Mapping[int, int]] = {0: 0, 5: 0, 1: 2, 6: 2, 2: 4, 7: 4, 3: 6, 8: 6, 4: 8, 9: 8}

# One name per consecutive pair of the cycle, starting at Jia-Zi / Yi-Chou.
NAYIN_NAMES: Final[tuple[str, ...]] = (
    "海中金", "炉中火", "大林木", "路旁土", "剑锋金", "山头火",
    "涧下水", "城头土", "白蜡金", "杨柳木", "泉中水", "屋上土",
    "霹雳火", "松柏木", "长流水", "砂中金", "山下火", "平地木",
    "壁上土", "金箔金", "覆灯火", "天河水", "大驿土", "钗钏金",
    "桑柘木", "大溪水", "沙中土", "天上火", "石榴木", "大海水",
)

_NAYIN_ELEMENTS: Final[Mapping[str, Element]] = {
    element.chinese: element for element in Element
}


def sexagenary_entry_for_index(index: int) -> SexagenaryCycleEntry:
    """Return the cycle entry for ``index`` (0-59)."""

    idx = index % SEXAGENARY_CYCLE_LENGTH
    return SexagenaryCycleEntry(index=idx, stem_index=idx % 10, branch_index=idx % 12)


def sexagenary_index(stem_index: int, branch_index: int) -> int:
    """Return the 0-59 index for the provided stem/branch combination."""

    stem = stem_index % 10
    branch = branch_index % 12
    if stem % 2 != branch % 2:
        raise InvalidInputError(
            f"{HEAVENLY_STEMS[stem].name} and {EARTHLY_BRANCHES[branch].name} never pair in the cycle"
        )
    return (6 * stem - 5 * branch) % SEXAGENARY_CYCLE_LENGTH


def entry_for_label(label: str) -> SexagenaryCycleEntry:
    """Parse a two-character label such as ``甲子`` into a cycle entry."""

    if len(label) != 2:
        raise InvalidInputError(f"Expected a stem-branch pair, got {label!r}")
    stem = stem_by_name(label[0])
    branch = branch_by_name(label[1])
    return sexagenary_entry_for_index(sexagenary_index(stem.index, branch.index))


def year_entry(solar_year: int) -> SexagenaryCycleEntry:
    """Return the cycle entry naming ``solar_year``."""

    return sexagenary_entry_for_index(solar_year - YEAR_CYCLE_EPOCH)


def month_stem_index(year_stem_index: int, month_branch_index: int) -> int:
    """Month stem from the year stem using the Five Tigers rule."""

    steps_from_tiger = (month_branch_index - TIGER_BRANCH_INDEX) % 12
    return (FIVE_TIGER_START[year_stem_index] + steps_from_tiger) % 10


def hour_branch_index(hour: int) -> int:
    """Double-hour (时辰) branch for a clock ``hour``; 23:00 and 00:00 are both Zi."""

    return ((hour + 1) // 2) % 12


def hour_stem_index(day_stem_index: int, branch_index: int) -> int:
    """Hour stem from the day stem using the Five Rats rule."""

    return (RAT_START[day_stem_index] + branch_index) % 10


def nayin_for_index(index: int) -> str:
    """Return the Nayin (纳音) name of cycle position ``index``."""

    return NAYIN_NAMES[(index % SEXAGENARY_CYCLE_LENGTH) // 2]


def nayin_element(index: int) -> Element:
    """Return the element carried by the Nayin name of ``index``."""

    return _NAYIN_ELEMENTS[nayin_for_index(index)[-1]]


__all__ = [
    "SexagenaryCycleEntry",
    "SEXAGENARY_CYCLE_LENGTH",
    "YEAR_CYCLE_EPOCH",
    "FIVE_TIGER_START",
    "RAT_START",
    "NAYIN_NAMES",
    "sexagenary_entry_for_index",
    "sexagenary_index",
    "entry_for_label",
    "year_entry",
    "month_stem_index",
    "hour_branch_index",
    "hour_stem_index",
    "nayin_for_index",
    "nayin_element",
]
