"""Fixed per-month solar-term boundaries used for year and month pillars.

Each Gregorian month contains one sectional term (节) that opens a solar
month. The boundaries are taken from a fixed almanac table rather than
computed from the Sun's longitude, so a birth on a boundary day always
belongs to the new solar month regardless of the hour.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Final, Mapping

from ..chinese.constants import EarthlyBranch, branch_for_index
from ..errors import InvalidInputError


@dataclass(frozen=True)
class SolarTerm:
    """A sectional term opening the solar month named by ``branch``."""

    name: str
    month: int
    day: int

    @property
    def branch(self) -> EarthlyBranch:
        return branch_for_index(self.month % 12)


TERM_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        1: "小寒",
        2: "立春",
        3: "惊蛰",
        4: "清明",
        5: "立夏",
        6: "芒种",
        7: "小暑",
        8: "立秋",
        9: "白露",
        10: "寒露",
        11: "立冬",
        12: "大雪",
    }
)

DEFAULT_BOUNDARY_DAYS: Final[Mapping[int, int]] = MappingProxyType(
    {1: 5, 2: 4, 3: 5, 4: 4, 5: 5, 6: 5, 7: 7, 8: 7, 9: 7, 10: 8, 11: 7, 12: 7}
)

SPRING_MONTH: Final[int] = 2


def _validated(boundary_days: Mapping[int, int]) -> Mapping[int, int]:
    table = {int(month): int(day) for month, day in boundary_days.items()}
    missing = sorted(set(range(1, 13)) - set(table))
    if missing:
        raise InvalidInputError(
            f"Solar-term table is missing months: {missing}", field="boundary_days"
        )
    for month, day in table.items():
        if not 1 <= month <= 12 or not 1 <= day <= 28:
            raise InvalidInputError(
                f"Invalid solar-term boundary {month}/{day}", field="boundary_days"
            )
    return MappingProxyType(table)


class FixedSolarTermResolver:
    """Boundary resolver backed by a fixed month -> day table."""

    __slots__ = ("_days",)

    def __init__(self, boundary_days: Mapping[int, int] = DEFAULT_BOUNDARY_DAYS) -> None:
        self._days = _validated(boundary_days)

    @property
    def boundary_days(self) -> Mapping[int, int]:
        return self._days

    def boundary_term(self, month: int) -> SolarTerm:
        """Return the sectional term that opens the solar month in ``month``."""

        return SolarTerm(name=TERM_NAMES[month], month=month, day=self._days[month])

    def is_after_spring_boundary(self, moment: datetime | date) -> bool:
        """Return ``True`` when ``moment`` is on or after Start of Spring (立春)."""

        return (moment.month, moment.day) >= (SPRING_MONTH, self._days[SPRING_MONTH])

    def solar_month_branch(self, moment: datetime | date) -> EarthlyBranch:
        """Return the branch of the solar month containing ``moment``."""

        if moment.day >= self._days[moment.month]:
            return branch_for_index(moment.month % 12)
        return branch_for_index((moment.month - 1) % 12)

    def _boundary_date(self, year: int, month: int) -> date:
        return date(year, month, self._days[month])

    def next_boundary(self, day: date) -> date:
        """Return the first boundary strictly after ``day``."""

        current = self._boundary_date(day.year, day.month)
        if day < current:
            return current
        if day.month == 12:
            return self._boundary_date(day.year + 1, 1)
        return self._boundary_date(day.year, day.month + 1)

    def previous_boundary(self, day: date) -> date:
        """Return the latest boundary on or before ``day``."""

        current = self._boundary_date(day.year, day.month)
        if day >= current:
            return current
        if day.month == 1:
            return self._boundary_date(day.year - 1, 12)
        return self._boundary_date(day.year, day.month - 1)

    def days_to_next_boundary(self, day: date) -> int:
        return (self.next_boundary(day) - day).days

    def days_since_previous_boundary(self, day: date) -> int:
        return (day - self.previous_boundary(day)).days

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._days)!r})"


DEFAULT_RESOLVER: Final[FixedSolarTermResolver] = FixedSolarTermResolver()


__all__ = [
    "SolarTerm",
    "TERM_NAMES",
    "DEFAULT_BOUNDARY_DAYS",
    "DEFAULT_RESOLVER",
    "FixedSolarTermResolver",
]
