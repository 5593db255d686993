from __future__ import annotations

import asyncio
import json
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from core.logging.logger import StructuredLogger, get_logger
from ..api.errors import CacheError

Decoder = Callable[[Any], Any]
Encoder = Callable[[Any], Any]
Clock = Callable[[], float]


@dataclass(slots=True)
class CacheEntry:
    payload: bytes
    headers: Dict[str, str]
    expires_at: float


@dataclass(frozen=True)
class CacheStatistics:
    hit_count: int
    miss_count: int
    current_size: int

    @property
    def hit_rate(self) -> float:
        total = self.hit_count + self.miss_count
        if self.hit_count == 0:
            return 0.0
        return self.hit_count / total


class ResponseCache:
    """In-memory TTL cache of serialized responses keyed by request fingerprint.

    Entries expire lazily on read or through ``clear_expired``. When the
    cache grows past ``max_size`` the entries closest to expiry are dropped
    first. All mutations go through one ``asyncio.Lock``.
    """

    def __init__(
        self,
        max_size: int = 100,
        *,
        clock: Clock = time.time,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0
        self.logger = logger or get_logger(__name__, service="cache")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    async def get(self, key: str, decoder: Decoder) -> Optional[Tuple[Any, Dict[str, str]]]:
        """Return ``(value, headers)`` or None on a miss or an expired entry.

        A stored entry that no longer decodes is removed and reported as
        :class:`CacheError`.
        """
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if self._clock() > entry.expires_at:
                del self._entries[key]
                self._misses += 1
                self.logger.trace(lambda: "expired", extra={"cache_key": key})
                return None
            try:
                value = decoder(json.loads(entry.payload))
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                del self._entries[key]
                self.logger.warning(lambda: f"dropping corrupt entry: {exc!r}", extra={"cache_key": key})
                raise CacheError(exc) from exc
            self._hits += 1
            self.logger.trace(lambda: "hit", extra={"cache_key": key})
            return value, dict(entry.headers)

    async def set(
        self,
        value: Any,
        headers: Mapping[str, str],
        key: str,
        ttl: float,
        encoder: Encoder,
    ) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds (``math.inf`` never expires)."""
        try:
            payload = json.dumps(encoder(value), separators=(",", ":")).encode("utf-8")
        except (ValueError, TypeError, AttributeError) as exc:
            raise CacheError(exc) from exc

        expires_at = math.inf if math.isinf(ttl) else self._clock() + ttl
        async with self._lock:
            self._entries[key] = CacheEntry(
                payload=payload,
                headers={str(k).lower(): str(v) for k, v in headers.items()},
                expires_at=expires_at,
            )
            self._evict_if_needed()

    async def clear_expired(self) -> int:
        async with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if now > e.expires_at]
            for k in expired:
                del self._entries[k]
        if expired:
            self.logger.debug(lambda: f"cleared {len(expired)} expired entries")
        return len(expired)

    async def clear_all(self) -> None:
        async with self._lock:
            self._entries.clear()

    def statistics(self) -> CacheStatistics:
        return CacheStatistics(
            hit_count=self._hits,
            miss_count=self._misses,
            current_size=len(self._entries),
        )

    def _evict_if_needed(self) -> None:
        overflow = len(self._entries) - self.max_size
        if overflow <= 0:
            return
        by_expiry = sorted(self._entries.items(), key=lambda item: item[1].expires_at)
        for k, _ in by_expiry[:overflow]:
            del self._entries[k]
        self.logger.debug(lambda: f"evicted {overflow} entries")
