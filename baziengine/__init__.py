"""baziengine package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("baziengine")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved baziengine package version."""

    return __version__


from .chinese import (  # noqa: E402
    BaziAnalysis,
    Element,
    FourPillarsChart,
    Gender,
    StrengthLevel,
    TenGod,
    analyze_chart,
    chart_from_ganzhi,
    compute_chart,
    infer_use_god,
    score_strength,
    ten_god,
)
from .errors import BaziError, CollaboratorError, InvalidInputError  # noqa: E402
from .service import BaziService  # noqa: E402
from .validation import BirthData, parse_birth_data  # noqa: E402

__all__ = [
    "__version__",
    "get_version",
    "BaziAnalysis",
    "BaziError",
    "BaziService",
    "BirthData",
    "CollaboratorError",
    "Element",
    "FourPillarsChart",
    "Gender",
    "InvalidInputError",
    "StrengthLevel",
    "TenGod",
    "analyze_chart",
    "chart_from_ganzhi",
    "compute_chart",
    "infer_use_god",
    "parse_birth_data",
    "score_strength",
    "ten_god",
]
