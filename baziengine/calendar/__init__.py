"""Calendar collaborators consulted while computing the four pillars."""

from __future__ import annotations

from .day_pillar import DAY_ZERO, DEFAULT_DAY_LOOKUP, PerpetualDayPillarLookup
from .protocols import BoundaryResolver, DayPillarLookup
from .solar_terms import (
    DEFAULT_BOUNDARY_DAYS,
    DEFAULT_RESOLVER,
    TERM_NAMES,
    FixedSolarTermResolver,
    SolarTerm,
)

__all__ = [
    "BoundaryResolver",
    "DayPillarLookup",
    "DAY_ZERO",
    "DEFAULT_DAY_LOOKUP",
    "PerpetualDayPillarLookup",
    "DEFAULT_BOUNDARY_DAYS",
    "DEFAULT_RESOLVER",
    "TERM_NAMES",
    "FixedSolarTermResolver",
    "SolarTerm",
]
