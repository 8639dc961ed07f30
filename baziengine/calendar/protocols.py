"""Interfaces the pillar computation consumes from calendar collaborators."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, runtime_checkable

from ..chinese.constants import EarthlyBranch
from ..chinese.sexagenary import SexagenaryCycleEntry


@runtime_checkable
class BoundaryResolver(Protocol):
    """Answers the two solar-term questions needed for year and month pillars."""

    def is_after_spring_boundary(self, moment: datetime | date) -> bool:
        ...

    def solar_month_branch(self, moment: datetime | date) -> EarthlyBranch:
        ...


@runtime_checkable
class DayPillarLookup(Protocol):
    """Returns the stem-branch pair naming a Gregorian calendar day."""

    def lookup(self, year: int, month: int, day: int) -> SexagenaryCycleEntry:
        ...


__all__ = ["BoundaryResolver", "DayPillarLookup"]
