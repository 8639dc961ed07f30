"""Facade tying validation, caching and chart analysis together."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional

from .cache.chart_cache import ChartCache, fingerprint
from .chinese.analysis import BaziAnalysis, analyze_chart
from .chinese.four_pillars import FourPillarsChart, compute_chart
from .config.settings import (
    Settings,
    build_day_lookup,
    build_resolver,
    default_settings,
    load_settings,
)
from .errors import BaziError, CollaboratorError, InvalidInputError
from .validation import BirthData, parse_birth_data

LOG = logging.getLogger(__name__)


class BaziService:
    """Validate birth records and produce cached chart analyses.

    The constructor never touches the filesystem: without ``settings`` it runs
    on the built-in defaults. Use :meth:`from_config` to honour the YAML file
    under ``BAZIENGINE_HOME``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[ChartCache] = None,
    ) -> None:
        self.settings = settings or default_settings()
        self.resolver = build_resolver(self.settings)
        self.day_lookup = build_day_lookup(self.settings)
        if cache is None and self.settings.cache.enabled:
            cache = ChartCache(
                ttl_seconds=self.settings.cache.ttl_seconds,
                maxsize=self.settings.cache.maxsize,
            )
        self.cache = cache

    @classmethod
    def from_config(
        cls, path: Optional[Path] = None, cache: Optional[ChartCache] = None
    ) -> "BaziService":
        """Build a service from the on-disk settings file, creating it if missing."""

        return cls(load_settings(path), cache)

    def validate(self, payload: Mapping[str, Any] | BirthData, *, today: date | None = None) -> BirthData:
        try:
            return parse_birth_data(
                payload, today=today, min_year=self.settings.calendar.min_year
            )
        except InvalidInputError as exc:
            LOG.warning("Rejected birth record (%s): %s", exc.field, exc)
            raise

    def _compute_chart(self, birth: BirthData) -> FourPillarsChart:
        return compute_chart(
            birth.birth_date,
            birth.birth_time or self.settings.analysis.birth_time,
            resolver=self.resolver,
            day_lookup=self.day_lookup,
        )

    def _analyze(self, birth: BirthData, on: date) -> BaziAnalysis:
        chart = self._compute_chart(birth)
        return analyze_chart(
            chart,
            birth.gender,
            on=on,
            resolver=self.resolver,
            luck_pillar_count=self.settings.analysis.luck_pillar_count,
        )

    def chart(self, payload: Mapping[str, Any] | BirthData, *, today: date | None = None) -> FourPillarsChart:
        """Validate ``payload`` and compute its four pillars."""

        birth = self.validate(payload, today=today)
        try:
            return self._compute_chart(birth)
        except CollaboratorError:
            LOG.warning("Calendar lookup failed for %s", birth.birth_date, exc_info=True)
            raise

    def analyze(self, payload: Mapping[str, Any] | BirthData, *, today: date | None = None) -> BaziAnalysis:
        """Validate ``payload`` and return its full analysis, cached by fingerprint.

        The fingerprint covers the charted clock time and the reference date,
        so a changed default time or ``today`` never reuses another entry.
        """

        birth = self.validate(payload, today=today)
        on = today or date.today()
        try:
            if self.cache is None:
                return self._analyze(birth, on)
            key = fingerprint(birth, default_time=self.settings.analysis.birth_time, on=on)
            outcome = self.cache.get_or_compute(key, lambda: self._analyze(birth, on))
            LOG.debug("Chart %s served from %s", key, outcome.source)
            return outcome.value
        except BaziError:
            LOG.warning("Chart analysis failed for %s", birth.birth_date, exc_info=True)
            raise


__all__ = ["BaziService"]
