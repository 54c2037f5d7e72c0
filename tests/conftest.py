"""
Shared pytest fixtures and fakes for the crypto_advisor test suite.

Provides:
  - ``FakeMarketSource`` / ``FakeNewsSource``: in-memory collaborators that
    record every call, so tests can assert "no external call was made".
  - ``FakeClock``: a manually advanced clock for cache TTL tests.
  - ``StubPolarity``: a title -> score lookup standing in for VADER.
  - ``make_asset``: terse Asset factory.
"""

from __future__ import annotations

import asyncio

import pytest

from crypto_advisor.config import Settings
from crypto_advisor.errors import NewsFetchError
from crypto_advisor.market.base import MarketDataSource
from crypto_advisor.market.models import Asset
from crypto_advisor.news.base import NewsSource
from crypto_advisor.news.cache import NewsCache
from crypto_advisor.news.models import NewsArticle
from crypto_advisor.sentiment.base import PolarityScorer


def make_asset(
    name: str,
    rank: int | None,
    market_cap: float = 1e9,
    change: float = 0.0,
    price: float = 1.0,
) -> Asset:
    return Asset(
        id=name.lower(),
        symbol=name[:3].upper(),
        name=name,
        market_cap_rank=rank,
        market_cap=market_cap,
        price_change_percentage_24h=change,
        current_price=price,
    )


class FakeMarketSource(MarketDataSource):
    def __init__(self, assets: list[Asset] | None = None, error: Exception | None = None) -> None:
        self.assets = list(assets or [])
        self.error = error
        self.calls: list[tuple[int, int]] = []

    async def fetch_market_snapshot(self, page_size: int, page: int = 1) -> list[Asset]:
        self.calls.append((page_size, page))
        if self.error is not None:
            raise self.error
        return self.assets[:page_size]


class FakeNewsSource(NewsSource):
    """Returns one article per configured title. Names in ``failing`` raise."""

    def __init__(
        self,
        titles: dict[str, list[str]] | None = None,
        failing: set[str] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.titles = titles or {}
        self.failing = failing or set()
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_news_articles(self, asset_name: str) -> list[NewsArticle]:
        self.calls.append(asset_name)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if asset_name in self.failing:
                raise NewsFetchError(f"boom: {asset_name}")
            return [NewsArticle(title=t) for t in self.titles.get(asset_name, [])]
        finally:
            self.in_flight -= 1


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubPolarity(PolarityScorer):
    def __init__(self, scores: dict[str, float]) -> None:
        self.scores = scores

    def polarity(self, text: str) -> float:
        return self.scores.get(text, 0.0)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        newsapi_key="",
        coingecko_api_key="",
        news_max_concurrency=5,
        news_fetch_timeout_seconds=1.0,
        default_mode="momentum",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> NewsCache:
    return NewsCache(ttl_seconds=24 * 3600, clock=clock)
