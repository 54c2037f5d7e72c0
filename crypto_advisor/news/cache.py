"""Time-bounded per-asset news cache with a read-through helper.

One instance is built at process start and handed to the engine; there
is no module-level cache. Entries are valid while
``clock() - inserted_at < ttl`` and are dropped lazily on read.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Awaitable, Callable

from crypto_advisor.errors import NewsFetchError
from crypto_advisor.news.models import NewsArticle

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60

Fetcher = Callable[[str], Awaitable[list[NewsArticle]]]


@dataclass(frozen=True)
class CacheEntry:
    articles: tuple[NewsArticle, ...]
    inserted_at: float


class NewsCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._inflight: dict[str, asyncio.Future] = {}

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at < self._ttl

    def get(self, asset_name: str) -> list[NewsArticle] | None:
        """Return cached articles, or None if absent or expired."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(asset_name)
            if entry is None:
                return None
            if not self._is_fresh(entry, now):
                del self._entries[asset_name]
                return None
            return list(entry.articles)

    def put(self, asset_name: str, articles: list[NewsArticle]) -> None:
        entry = CacheEntry(articles=tuple(articles), inserted_at=self._clock())
        with self._lock:
            self._entries[asset_name] = entry

    def purge_expired(self) -> int:
        """Physically drop every expired entry. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            stale = [name for name, entry in self._entries.items() if not self._is_fresh(entry, now)]
            for name in stale:
                del self._entries[name]
        if stale:
            logger.debug("Purged %d expired news cache entries", len(stale))
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    async def _fetch_and_store(self, asset_name: str, fetch: Fetcher) -> list[NewsArticle]:
        try:
            articles = await fetch(asset_name)
        except (NewsFetchError, asyncio.TimeoutError) as exc:
            logger.warning("News fetch failed for %s, treating as no news: %r", asset_name, exc)
            return []
        self.put(asset_name, articles)
        return list(articles)

    def _forget_inflight(self, asset_name: str, task: asyncio.Future) -> None:
        if self._inflight.get(asset_name) is task:
            del self._inflight[asset_name]

    async def get_or_fetch(self, asset_name: str, fetch: Fetcher) -> list[NewsArticle]:
        """Read-through lookup.

        Concurrent misses for the same name all await one in-flight fetch
        and share its outcome. A failed fetch yields [] to every waiter and
        leaves the cache untouched, so the next call retries.
        """
        cached = self.get(asset_name)
        if cached is not None:
            return cached

        task = self._inflight.get(asset_name)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(asset_name, fetch))
            self._inflight[asset_name] = task
            task.add_done_callback(lambda t: self._forget_inflight(asset_name, t))
        # shield: one cancelled waiter must not cancel the fetch the others share
        return list(await asyncio.shield(task))
