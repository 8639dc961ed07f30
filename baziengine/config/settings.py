"""Configuration models and helpers for baziengine settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from datetime import time
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ..calendar.day_pillar import PerpetualDayPillarLookup
from ..calendar.solar_terms import DEFAULT_BOUNDARY_DAYS, FixedSolarTermResolver

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2

# -------------------- Settings Schema --------------------


class CalendarCfg(BaseModel):
    """Solar-term boundary table and the supported day-pillar range."""

    boundary_days: Dict[int, int] = Field(
        default_factory=lambda: dict(DEFAULT_BOUNDARY_DAYS)
    )
    min_year: int = Field(default=1900, ge=1)
    max_year: int = Field(default=2100, ge=1)

    @field_validator("boundary_days")
    @classmethod
    def _check_boundary_days(cls, value: Dict[int, int]) -> Dict[int, int]:
        missing = sorted(set(range(1, 13)) - set(value))
        if missing:
            raise ValueError(f"boundary_days is missing months {missing}")
        for month, day in value.items():
            if not 1 <= month <= 12:
                raise ValueError(f"boundary_days has invalid month {month}")
            if not 1 <= day <= 28:
                raise ValueError(f"boundary day for month {month} must be 1-28, got {day}")
        return dict(sorted(value.items()))

    @model_validator(mode="after")
    def _check_year_range(self) -> "CalendarCfg":
        if self.min_year > self.max_year:
            raise ValueError("min_year must not be after max_year")
        return self


class AnalysisCfg(BaseModel):
    """Defaults applied while analysing a chart."""

    default_birth_time: str = "12:00"
    luck_pillar_count: int = 8

    @field_validator("default_birth_time")
    @classmethod
    def _check_birth_time(cls, value: str) -> str:
        time.fromisoformat(value)
        return value

    @field_validator("luck_pillar_count", mode="before")
    @classmethod
    def _cap_luck_pillar_count(cls, value: int) -> int:
        numeric = int(value)
        return max(1, min(12, numeric))

    @property
    def birth_time(self) -> time:
        return time.fromisoformat(self.default_birth_time)


class CacheCfg(BaseModel):
    """In-process chart cache bounds."""

    enabled: bool = True
    ttl_seconds: int = 1800
    maxsize: int = 500

    @field_validator("ttl_seconds", "maxsize", mode="before")
    @classmethod
    def _cap_positive(cls, value: int) -> int:
        return max(1, int(value))


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    calendar: CalendarCfg = Field(default_factory=CalendarCfg)
    analysis: AnalysisCfg = Field(default_factory=AnalysisCfg)
    cache: CacheCfg = Field(default_factory=CacheCfg)


def build_resolver(settings: Settings) -> FixedSolarTermResolver:
    return FixedSolarTermResolver(settings.calendar.boundary_days)


def build_day_lookup(settings: Settings) -> PerpetualDayPillarLookup:
    return PerpetualDayPillarLookup(settings.calendar.min_year, settings.calendar.max_year)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("BAZIENGINE_HOME", str(Path.home() / ".baziengine")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Bring an older settings payload up to the current schema."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < 2:
        # v1 kept the boundary table and cache TTL at the top level.
        calendar = dict(upgraded.get("calendar") or {})
        if "boundary_days" in upgraded:
            calendar.setdefault("boundary_days", upgraded.pop("boundary_days"))
        if calendar:
            upgraded["calendar"] = calendar
        if "cache_ttl_seconds" in upgraded:
            cache = dict(upgraded.get("cache") or {})
            cache.setdefault("ttl_seconds", upgraded.pop("cache_ttl_seconds"))
            upgraded["cache"] = cache
        version = 2
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings file %s", source_path)
        raw = {}
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        LOG.info("Upgraded settings %s to schema v%s", source_path, settings.schema_version)
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target
