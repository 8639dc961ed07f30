"""Logging setup for applications embedding the chart engine."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

__all__ = ["LEVEL_ENV_VARS", "configure_logging", "resolve_level"]

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Checked in order; the package-specific variable wins over the generic one.
LEVEL_ENV_VARS: tuple[str, ...] = ("BAZIENGINE_LOG_LEVEL", "LOG_LEVEL")

_PACKAGE_LOGGER = "baziengine"


def resolve_level(value: str | int | None) -> int:
    """Turn a level name or number into a ``logging`` level.

    Unknown names and empty strings resolve to :data:`logging.INFO`.
    """

    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    candidate = value.strip()
    if not candidate:
        return logging.INFO
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _level_from_env(environ: Mapping[str, str]) -> str | None:
    for name in LEVEL_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    return None


def configure_logging(
    *,
    level: str | int | None = None,
    environ: Mapping[str, str] | None = None,
    **kwargs: Any,
) -> int:
    """Configure the root logger and return the level applied.

    ``level`` overrides the environment. Extra keyword arguments go to
    :func:`logging.basicConfig`.
    """

    if level is None:
        level = _level_from_env(os.environ if environ is None else environ)
    effective = resolve_level(level)

    logging.basicConfig(
        level=effective,
        format=kwargs.pop("format", _FORMAT),
        datefmt=kwargs.pop("datefmt", _DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )
    logging.getLogger(_PACKAGE_LOGGER).setLevel(effective)
    return effective
