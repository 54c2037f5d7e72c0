"""Sentiment-Filtered mode: enrich each asset with news sentiment, then apply
the rank ceiling / sentiment floor for the risk level."""

from __future__ import annotations

import asyncio
import logging

from crypto_advisor.market.base import MarketDataSource
from crypto_advisor.market.models import Asset, ScoredAsset
from crypto_advisor.news.base import NewsSource
from crypto_advisor.news.cache import NewsCache
from crypto_advisor.news.models import NewsArticle
from crypto_advisor.recommend.models import Mode
from crypto_advisor.recommend.policy import sentiment_filter
from crypto_advisor.recommend.strategies.base import RecommendationStrategy
from crypto_advisor.sentiment.scorer import SentimentScorer

logger = logging.getLogger(__name__)


def filter_by_sentiment(assets: list[ScoredAsset], risk_level: int) -> list[ScoredAsset]:
    policy = sentiment_filter(risk_level)
    return [a for a in assets if policy.passes(a.market_cap_rank, a.sentiment_score or 0.0)]


class SentimentFilterStrategy(RecommendationStrategy):
    mode = Mode.SENTIMENT

    def __init__(
        self,
        market_source: MarketDataSource,
        news_source: NewsSource,
        cache: NewsCache,
        scorer: SentimentScorer,
        page_size: int = 50,
        top_n: int = 10,
        max_articles: int = 3,
        max_concurrency: int = 5,
        fetch_timeout: float = 10.0,
    ) -> None:
        self._market = market_source
        self._news = news_source
        self._cache = cache
        self._scorer = scorer
        self._page_size = page_size
        self._top_n = top_n
        self._max_articles = max_articles
        self._max_concurrency = max(1, max_concurrency)
        self._fetch_timeout = fetch_timeout

    async def _fetch_news(self, asset_name: str) -> list[NewsArticle]:
        # TimeoutError is handled by the cache like any other failed fetch
        return await asyncio.wait_for(
            self._news.fetch_news_articles(asset_name), timeout=self._fetch_timeout
        )

    async def _enrich_one(self, asset: Asset, sem: asyncio.Semaphore) -> ScoredAsset:
        async with sem:
            try:
                articles = await self._cache.get_or_fetch(asset.name, self._fetch_news)
            except Exception:
                logger.exception("News enrichment failed for %s, using neutral sentiment", asset.name)
                articles = []

        result = self._scorer.score_titles(a.title for a in articles)
        return ScoredAsset.derive(
            asset,
            sentiment_score=result.average_score,
            articles=articles[: self._max_articles],
        )

    async def enrich(self, assets: list[Asset]) -> list[ScoredAsset]:
        """Attach sentiment to every asset. Waits for all of them; keeps input order."""
        sem = asyncio.Semaphore(self._max_concurrency)
        return list(await asyncio.gather(*(self._enrich_one(a, sem) for a in assets)))

    async def recommend(self, risk_level: int) -> list[ScoredAsset]:
        # Resolve the policy first so a bad level never triggers network calls
        sentiment_filter(risk_level)

        assets = await self._market.fetch_market_snapshot(self._page_size, 1)
        enriched = await self.enrich(assets)
        passing = filter_by_sentiment(enriched, risk_level)
        logger.info(
            "Sentiment risk=%d: %d/%d assets pass, returning %d",
            risk_level,
            len(passing),
            len(assets),
            min(len(passing), self._top_n),
        )
        return passing[: self._top_n]
