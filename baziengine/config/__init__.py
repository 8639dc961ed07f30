"""Configuration helpers exposed at :mod:`baziengine.config`."""

from __future__ import annotations

from .settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    AnalysisCfg,
    CacheCfg,
    CalendarCfg,
    Settings,
    build_day_lookup,
    build_resolver,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "Settings",
    "CalendarCfg",
    "AnalysisCfg",
    "CacheCfg",
    "build_resolver",
    "build_day_lookup",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
    "ensure_default_config",
]
