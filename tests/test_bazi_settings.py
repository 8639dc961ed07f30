from __future__ import annotations

from datetime import date, time

import pytest
import yaml
from pydantic import ValidationError

from baziengine.config import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
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
from baziengine.errors import CollaboratorError


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    monkeypatch.setenv("BAZIENGINE_HOME", str(tmp_path))
    return tmp_path


def test_defaults() -> None:
    settings = default_settings()

    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert settings.calendar.boundary_days[2] == 4
    assert settings.analysis.birth_time == time(12, 0)
    assert settings.analysis.luck_pillar_count == 8
    assert (settings.cache.ttl_seconds, settings.cache.maxsize) == (1800, 500)


def test_config_home_honours_environment(config_home) -> None:
    assert get_config_home() == config_home
    assert config_path() == config_home / "config.yaml"


def test_load_creates_defaults(config_home) -> None:
    settings = load_settings()

    assert settings == default_settings()
    assert (config_home / "config.yaml").exists()


def test_roundtrip(config_home) -> None:
    settings = Settings(analysis={"luck_pillar_count": 10}, cache={"enabled": False})
    path = save_settings(settings)

    assert load_settings(path) == settings


def test_v1_payload_is_upgraded(config_home) -> None:
    legacy = {
        "boundary_days": {month: 6 for month in range(1, 13)},
        "cache_ttl_seconds": 60,
    }
    path = config_home / "config.yaml"
    path.write_text(yaml.safe_dump(legacy), encoding="utf-8")

    settings = load_settings(path)

    assert settings.schema_version == 2
    assert settings.calendar.boundary_days[2] == 6
    assert settings.cache.ttl_seconds == 60
    on_disk = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert on_disk["schema_version"] == 2
    assert "boundary_days" not in on_disk


def test_ensure_default_config(config_home) -> None:
    path = ensure_default_config()

    assert path.exists()
    assert ensure_default_config() == path


@pytest.mark.parametrize(
    "calendar",
    [
        {"boundary_days": {month: 5 for month in range(1, 12)}},
        {"boundary_days": {**{month: 5 for month in range(1, 13)}, 4: 29}},
        {"min_year": 2000, "max_year": 1990},
    ],
)
def test_invalid_calendar_settings(calendar) -> None:
    with pytest.raises(ValidationError):
        CalendarCfg(**calendar)


def test_luck_pillar_count_is_capped() -> None:
    assert Settings(analysis={"luck_pillar_count": 40}).analysis.luck_pillar_count == 12
    assert Settings(analysis={"luck_pillar_count": 0}).analysis.luck_pillar_count == 1


def test_collaborators_follow_settings() -> None:
    settings = Settings(
        calendar={"boundary_days": {month: 6 for month in range(1, 13)}, "max_year": 1960}
    )
    resolver = build_resolver(settings)
    lookup = build_day_lookup(settings)

    assert not resolver.is_after_spring_boundary(date(2024, 2, 5))
    with pytest.raises(CollaboratorError):
        lookup.lookup(1979, 2, 6)
