"""In-process chart cache keyed by a canonical birth-record fingerprint."""
from __future__ import annotations

import hashlib
import logging
import threading
from dataclasses import dataclass
from datetime import date, time
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Hashable, Mapping, Optional, TypeVar

import orjson
from cachetools import TTLCache
from prometheus_client import Counter

if TYPE_CHECKING:
    from ..validation import BirthData

_LOGGER = logging.getLogger(__name__)

_CHART_CACHE_HITS = Counter("baziengine_chart_cache_hits_total", "Chart cache hits")
_CHART_CACHE_MISSES = Counter("baziengine_chart_cache_misses_total", "Chart cache misses")
_CHART_CACHE_COMPUTES = Counter(
    "baziengine_chart_cache_computes_total",
    "Chart computations performed on a cache miss",
    ["outcome"],
)

DEFAULT_TTL_SECONDS = 1800
DEFAULT_MAXSIZE = 500
_FINGERPRINT_VERSION = "v1"

T = TypeVar("T")


@dataclass(frozen=True)
class CanonicalBirth:
    payload: Mapping[str, Any]
    serialized: bytes
    digest: str


def canonicalize_birth(
    birth: BirthData,
    *,
    default_time: Optional[time] = None,
    on: Optional[date] = None,
) -> CanonicalBirth:
    """Reduce a birth record to the fields that change its analysis.

    ``default_time`` is the clock time charted when the record has none, and
    ``on`` is the reference date the current age and luck pillar are read at.
    """

    charted_time = birth.birth_time or default_time or birth.effective_time
    payload: Dict[str, Any] = {
        "date": birth.birth_date.isoformat(),
        "time": charted_time.strftime("%H:%M"),
        "gender": str(birth.gender),
        "name": (birth.name or "").strip(),
    }
    if on is not None:
        payload["on"] = on.isoformat()
    serialized = orjson.dumps(payload, option=orjson.OPT_SORT_KEYS)
    digest = hashlib.sha256(serialized).hexdigest()
    return CanonicalBirth(payload=payload, serialized=serialized, digest=digest)


def fingerprint(
    birth: BirthData,
    *,
    default_time: Optional[time] = None,
    on: Optional[date] = None,
) -> str:
    digest = canonicalize_birth(birth, default_time=default_time, on=on).digest
    return f"bazi:{_FINGERPRINT_VERSION}:{digest}"


@dataclass
class CacheOutcome(Generic[T]):
    value: T
    key: str
    source: str
    waited: bool = False


class ChartCache:
    """TTL-bounded cache with per-key single-flight computation."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        maxsize: int = DEFAULT_MAXSIZE,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.maxsize = maxsize
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds)
        self._entries_lock = threading.Lock()
        self._key_locks: Dict[Hashable, threading.Lock] = {}
        self._key_locks_guard = threading.Lock()

    def __len__(self) -> int:
        with self._entries_lock:
            return len(self._entries)

    def get(self, key: Hashable) -> Optional[Any]:
        with self._entries_lock:
            value = self._entries.get(key)
        if value is None:
            _CHART_CACHE_MISSES.inc()
            return None
        _CHART_CACHE_HITS.inc()
        return value

    def set(self, key: Hashable, value: Any) -> None:
        with self._entries_lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._entries_lock:
            self._entries.clear()

    def _lock_for(self, key: Hashable) -> threading.Lock:
        with self._key_locks_guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def _release_lock(self, key: Hashable, lock: threading.Lock) -> None:
        with self._key_locks_guard:
            if self._key_locks.get(key) is lock and not lock.locked():
                del self._key_locks[key]

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> CacheOutcome[T]:
        """Return the cached value for ``key`` or compute it exactly once.

        Concurrent callers for the same key wait on one computation. Exceptions
        from ``compute`` propagate and leave the cache untouched.
        """

        value = self.get(key)
        if value is not None:
            return CacheOutcome(value=value, key=key, source="cache")

        lock = self._lock_for(key)
        waited = lock.locked()
        try:
            with lock:
                with self._entries_lock:
                    value = self._entries.get(key)
                if value is not None:
                    _CHART_CACHE_HITS.inc()
                    return CacheOutcome(value=value, key=key, source="cache", waited=waited)
                try:
                    value = compute()
                except Exception:
                    _CHART_CACHE_COMPUTES.labels(outcome="error").inc()
                    _LOGGER.debug("Chart computation failed for %s", key, exc_info=True)
                    raise
                _CHART_CACHE_COMPUTES.labels(outcome="ok").inc()
                self.set(key, value)
                return CacheOutcome(value=value, key=key, source="compute", waited=waited)
        finally:
            self._release_lock(key, lock)


__all__ = [
    "CanonicalBirth",
    "CacheOutcome",
    "ChartCache",
    "canonicalize_birth",
    "fingerprint",
]
