"""Luck pillars (大运): ten-year periods stepped from the month pillar."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Final

from ..calendar import solar_terms as _solar_terms
from ..errors import InvalidInputError
from .constants import EarthlyBranch, Element, Gender, HeavenlyStem, Polarity
from .four_pillars import FourPillarsChart
from .sexagenary import SEXAGENARY_CYCLE_LENGTH, sexagenary_entry_for_index
from .ten_gods import TenGod, ten_god

if TYPE_CHECKING:
    from ..calendar.solar_terms import FixedSolarTermResolver

LOG = logging.getLogger(__name__)

DEFAULT_PILLAR_COUNT: Final[int] = 8
YEARS_PER_PILLAR: Final[int] = 10
DAYS_PER_YEAR_OF_LUCK: Final[int] = 3
MINIMUM_START_AGE: Final[int] = 1


@dataclass(frozen=True)
class LuckPillar:
    period: int
    cycle_index: int
    start_age: int
    end_age: int
    ten_god: TenGod

    @property
    def stem(self) -> HeavenlyStem:
        return sexagenary_entry_for_index(self.cycle_index).stem

    @property
    def branch(self) -> EarthlyBranch:
        return sexagenary_entry_for_index(self.cycle_index).branch

    @property
    def element(self) -> Element:
        return self.stem.element

    def covers(self, age: int) -> bool:
        return self.start_age <= age <= self.end_age

    def label(self) -> str:
        return sexagenary_entry_for_index(self.cycle_index).label()


@dataclass(frozen=True)
class LuckCycle:
    gender: Gender
    forward: bool
    start_age: int
    pillars: tuple[LuckPillar, ...]

    def pillar_at(self, age: int) -> LuckPillar | None:
        """Return the luck pillar in force at ``age``, or ``None`` before the first one."""

        for pillar in self.pillars:
            if pillar.covers(age):
                return pillar
        return None


def age_on(birth_date: date, on: date) -> int:
    """Whole years elapsed between ``birth_date`` and ``on``."""

    years = on.year - birth_date.year
    if (on.month, on.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def is_forward(gender: Gender, year_stem: HeavenlyStem) -> bool:
    """Yang-year men and yin-year women run forward; everyone else runs backward."""

    yang = year_stem.polarity is Polarity.YANG
    return yang if Gender(gender) is Gender.MALE else not yang


def start_age(
    birth_date: date,
    forward: bool,
    resolver: FixedSolarTermResolver | None = None,
) -> int:
    """Three days to the nearest boundary in the running direction count as one year."""

    resolver = resolver or _solar_terms.DEFAULT_RESOLVER
    if forward:
        days = resolver.days_to_next_boundary(birth_date)
    else:
        days = resolver.days_since_previous_boundary(birth_date)
    return max(MINIMUM_START_AGE, days // DAYS_PER_YEAR_OF_LUCK)


def luck_cycle(
    chart: FourPillarsChart,
    gender: Gender | str,
    *,
    resolver: FixedSolarTermResolver | None = None,
    count: int = DEFAULT_PILLAR_COUNT,
) -> LuckCycle:
    if chart.birth_date is None:
        raise InvalidInputError("Luck pillars need the chart's birth date", field="birth_date")
    if count < 1:
        raise InvalidInputError(f"count must be positive, got {count}", field="count")
    try:
        gender = Gender(gender)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown gender: {gender!r}", field="gender") from exc

    forward = is_forward(gender, chart.year.stem)
    first_age = start_age(chart.birth_date, forward, resolver)
    step = 1 if forward else -1

    pillars = []
    for offset in range(count):
        cycle_index = (chart.month.cycle_index + step * (offset + 1)) % SEXAGENARY_CYCLE_LENGTH
        begins = first_age + offset * YEARS_PER_PILLAR
        pillars.append(
            LuckPillar(
                period=offset + 1,
                cycle_index=cycle_index,
                start_age=begins,
                end_age=begins + YEARS_PER_PILLAR - 1,
                ten_god=ten_god(chart.day_master, sexagenary_entry_for_index(cycle_index).stem),
            )
        )
    LOG.debug(
        "Luck cycle for %s: %s from age %s",
        chart.label(),
        "forward" if forward else "backward",
        first_age,
    )
    return LuckCycle(gender=gender, forward=forward, start_age=first_age, pillars=tuple(pillars))


__all__ = [
    "DEFAULT_PILLAR_COUNT",
    "LuckPillar",
    "LuckCycle",
    "age_on",
    "is_forward",
    "start_age",
    "luck_cycle",
]
