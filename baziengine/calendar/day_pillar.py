"""Perpetual (万年历) day-pillar lookup anchored to a verified Jia-Zi day."""

from __future__ import annotations

from datetime import date
from typing import Final

from ..chinese.sexagenary import (
    SEXAGENARY_CYCLE_LENGTH,
    SexagenaryCycleEntry,
    sexagenary_entry_for_index,
)
from ..errors import CollaboratorError

# Reference day: 1949-10-01 (Jia Zi). Cross-checked against 1900-01-01 (Jia Xu)
# and 2000-01-01 (Wu Wu).
DAY_ZERO: Final[date] = date(1949, 10, 1)
DAY_ZERO_INDEX: Final[int] = 0

DEFAULT_MIN_YEAR: Final[int] = 1900
DEFAULT_MAX_YEAR: Final[int] = 2100


class PerpetualDayPillarLookup:
    """Continuous 60-day count from :data:`DAY_ZERO` over a supported year range."""

    __slots__ = ("min_year", "max_year")

    def __init__(self, min_year: int = DEFAULT_MIN_YEAR, max_year: int = DEFAULT_MAX_YEAR) -> None:
        if min_year > max_year:
            raise ValueError(f"min_year {min_year} is after max_year {max_year}")
        self.min_year = min_year
        self.max_year = max_year

    def lookup(self, year: int, month: int, day: int) -> SexagenaryCycleEntry:
        """Return the stem-branch pair for the civil day ``year-month-day``."""

        if not self.min_year <= year <= self.max_year:
            raise CollaboratorError(
                f"Day pillar lookup supports {self.min_year}-{self.max_year}, got {year}"
            )
        try:
            civil_day = date(year, month, day)
        except ValueError as exc:
            raise CollaboratorError(f"No such calendar day: {year}-{month}-{day}") from exc
        delta_days = (civil_day - DAY_ZERO).days
        return sexagenary_entry_for_index(
            (DAY_ZERO_INDEX + delta_days) % SEXAGENARY_CYCLE_LENGTH
        )

    def lookup_date(self, civil_day: date) -> SexagenaryCycleEntry:
        return self.lookup(civil_day.year, civil_day.month, civil_day.day)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_year={self.min_year}, max_year={self.max_year})"


DEFAULT_DAY_LOOKUP: Final[PerpetualDayPillarLookup] = PerpetualDayPillarLookup()


__all__ = [
    "DAY_ZERO",
    "DEFAULT_DAY_LOOKUP",
    "PerpetualDayPillarLookup",
]
