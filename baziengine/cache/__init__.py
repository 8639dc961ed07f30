"""Caching helpers for computed chart analyses."""

from .chart_cache import CacheOutcome, ChartCache, canonicalize_birth, fingerprint

__all__ = ["CacheOutcome", "ChartCache", "canonicalize_birth", "fingerprint"]
