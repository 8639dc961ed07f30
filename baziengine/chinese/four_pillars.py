"""Four Pillars (BaZi) computation logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Mapping, Sequence

from ..calendar import day_pillar as _day_pillar
from ..calendar import solar_terms as _solar_terms
from ..errors import InvalidInputError
from .constants import EarthlyBranch, Element, HeavenlyStem, HiddenStem
from .sexagenary import (
    SexagenaryCycleEntry,
    entry_for_label,
    hour_branch_index,
    hour_stem_index,
    month_stem_index,
    nayin_for_index,
    sexagenary_entry_for_index,
    sexagenary_index,
    year_entry,
)
from .ten_gods import DAY_MASTER_LABEL, TenGod, ten_god

if TYPE_CHECKING:
    from ..calendar.protocols import BoundaryResolver, DayPillarLookup

LOG = logging.getLogger(__name__)

DEFAULT_BIRTH_TIME: Final[time] = time(12, 0)


class PillarPosition(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"

    @property
    def chinese(self) -> str:
        return _POSITION_CHINESE[self]


_POSITION_CHINESE: Final[Mapping[PillarPosition, str]] = {
    PillarPosition.YEAR: "年",
    PillarPosition.MONTH: "月",
    PillarPosition.DAY: "日",
    PillarPosition.HOUR: "时",
}


class ZiShi(StrEnum):
    """Which half of the Rat double-hour a birth falls in."""

    EARLY = "早子时"  # 00:00-00:59, day and hour both from the birth day
    LATE = "晚子时"  # 23:00-23:59, hour stem from the following day


@dataclass(frozen=True)
class Pillar:
    """A single pillar made up of a Heavenly Stem and Earthly Branch."""

    position: PillarPosition
    stem: HeavenlyStem
    branch: EarthlyBranch
    cycle_index: int
    ten_god: TenGod | str
    zi_shi: ZiShi | None = None

    @property
    def element(self) -> Element:
        return self.stem.element

    @property
    def hidden_stems(self) -> tuple[HiddenStem, ...]:
        return self.branch.hidden_stems

    @property
    def nayin(self) -> str:
        return nayin_for_index(self.cycle_index)

    @property
    def is_day_master(self) -> bool:
        return self.position is PillarPosition.DAY

    @property
    def is_month_order(self) -> bool:
        return self.position is PillarPosition.MONTH

    def label(self) -> str:
        return sexagenary_entry_for_index(self.cycle_index).label()


@dataclass(frozen=True)
class FourPillarsChart:
    """Container for the year, month, day, and hour pillars."""

    birth_date: date | None
    birth_time: time | None
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar

    @property
    def day_master(self) -> HeavenlyStem:
        return self.day.stem

    @property
    def day_master_element(self) -> Element:
        return self.day.stem.element

    @property
    def month_order(self) -> EarthlyBranch:
        return self.month.branch

    @property
    def pillars(self) -> Mapping[PillarPosition, Pillar]:
        return MappingProxyType(
            {
                PillarPosition.YEAR: self.year,
                PillarPosition.MONTH: self.month,
                PillarPosition.DAY: self.day,
                PillarPosition.HOUR: self.hour,
            }
        )

    @property
    def nayin(self) -> Mapping[PillarPosition, str]:
        return MappingProxyType(
            {position: pillar.nayin for position, pillar in self.pillars.items()}
        )

    def ordered_pillars(self) -> Sequence[Pillar]:
        return (self.year, self.month, self.day, self.hour)

    def label(self) -> str:
        """Return the chart as four space separated labels (``甲子 丙寅 ...``)."""

        return " ".join(pillar.label() for pillar in self.ordered_pillars())


def _build_pillar(
    position: PillarPosition,
    entry: SexagenaryCycleEntry,
    day_master: HeavenlyStem,
    *,
    zi_shi: ZiShi | None = None,
) -> Pillar:
    label: TenGod | str
    if position is PillarPosition.DAY:
        label = DAY_MASTER_LABEL
    else:
        label = ten_god(day_master, entry.stem)
    return Pillar(
        position=position,
        stem=entry.stem,
        branch=entry.branch,
        cycle_index=entry.index,
        ten_god=label,
        zi_shi=zi_shi,
    )


def _zi_shi_for(hour: int) -> ZiShi | None:
    if hour == 23:
        return ZiShi.LATE
    if hour == 0:
        return ZiShi.EARLY
    return None


def compute_chart(
    birth_date: date,
    birth_time: time | None = None,
    *,
    resolver: BoundaryResolver | None = None,
    day_lookup: DayPillarLookup | None = None,
) -> FourPillarsChart:
    """Compute the Four Pillars for a civil birth date and local clock time.

    Parameters
    ----------
    birth_date:
        Gregorian calendar date of birth.
    birth_time:
        Local clock time; defaults to noon when unknown.
    resolver:
        Solar-term boundary resolver; defaults to the fixed almanac table.
    day_lookup:
        Perpetual day-pillar lookup; defaults to the 1949-10-01 anchored count.

    Collaborator failures propagate unchanged; no partial chart is returned.
    """

    if isinstance(birth_date, datetime) or not isinstance(birth_date, date):
        raise InvalidInputError("birth_date must be a datetime.date", field="birth_date")
    if birth_time is None:
        birth_time = DEFAULT_BIRTH_TIME
    elif not isinstance(birth_time, time):
        raise InvalidInputError("birth_time must be a datetime.time", field="birth_time")

    resolver = resolver or _solar_terms.DEFAULT_RESOLVER
    day_lookup = day_lookup or _day_pillar.DEFAULT_DAY_LOOKUP
    instant = datetime.combine(birth_date, birth_time)

    solar_year = birth_date.year
    if not resolver.is_after_spring_boundary(instant):
        solar_year -= 1
    year = year_entry(solar_year)

    month_branch = resolver.solar_month_branch(instant)
    month = sexagenary_entry_for_index(
        sexagenary_index(month_stem_index(year.stem_index, month_branch.index), month_branch.index)
    )

    day = day_lookup.lookup(birth_date.year, birth_date.month, birth_date.day)

    zi_shi = _zi_shi_for(birth_time.hour)
    stem_source = day
    if zi_shi is ZiShi.LATE:
        following = birth_date + timedelta(days=1)
        stem_source = day_lookup.lookup(following.year, following.month, following.day)
    branch_index = hour_branch_index(birth_time.hour)
    hour = sexagenary_entry_for_index(
        sexagenary_index(hour_stem_index(stem_source.stem_index, branch_index), branch_index)
    )

    day_master = day.stem
    chart = FourPillarsChart(
        birth_date=birth_date,
        birth_time=birth_time,
        year=_build_pillar(PillarPosition.YEAR, year, day_master),
        month=_build_pillar(PillarPosition.MONTH, month, day_master),
        day=_build_pillar(PillarPosition.DAY, day, day_master),
        hour=_build_pillar(PillarPosition.HOUR, hour, day_master, zi_shi=zi_shi),
    )
    LOG.debug("Computed chart %s for %s %s", chart.label(), birth_date, birth_time)
    return chart


def chart_from_ganzhi(year: str, month: str, day: str, hour: str) -> FourPillarsChart:
    """Build a chart from four stem-branch labels such as ``"甲子"``.

    The pillars are taken as given; no calendar consistency is checked.
    """

    entries = [entry_for_label(label) for label in (year, month, day, hour)]
    day_master = entries[2].stem
    return FourPillarsChart(
        birth_date=None,
        birth_time=None,
        year=_build_pillar(PillarPosition.YEAR, entries[0], day_master),
        month=_build_pillar(PillarPosition.MONTH, entries[1], day_master),
        day=_build_pillar(PillarPosition.DAY, entries[2], day_master),
        hour=_build_pillar(PillarPosition.HOUR, entries[3], day_master),
    )


__all__ = [
    "DEFAULT_BIRTH_TIME",
    "PillarPosition",
    "ZiShi",
    "Pillar",
    "FourPillarsChart",
    "compute_chart",
    "chart_from_ganzhi",
]
