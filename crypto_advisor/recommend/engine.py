"""Recommendation engine: validates input and dispatches to a named strategy."""

from __future__ import annotations

import logging

from crypto_advisor.config import Settings
from crypto_advisor.errors import InvalidInput
from crypto_advisor.market.base import MarketDataSource
from crypto_advisor.news.base import NewsSource
from crypto_advisor.news.cache import NewsCache
from crypto_advisor.recommend.models import Mode, RecommendationResult
from crypto_advisor.recommend.policy import RISK_LEVELS
from crypto_advisor.recommend.strategies.base import RecommendationStrategy
from crypto_advisor.recommend.strategies.momentum import MomentumRankStrategy
from crypto_advisor.recommend.strategies.sentiment import SentimentFilterStrategy
from crypto_advisor.sentiment.scorer import SentimentScorer

logger = logging.getLogger(__name__)


def parse_risk_level(raw) -> int:
    """Accept an int or a string holding an integer in 1..5, else InvalidInput."""
    if raw is None or isinstance(raw, bool):
        raise InvalidInput()
    if isinstance(raw, int):
        level = raw
    elif isinstance(raw, str):
        try:
            level = int(raw.strip())
        except ValueError:
            raise InvalidInput() from None
    else:
        raise InvalidInput()
    if level not in RISK_LEVELS:
        raise InvalidInput()
    return level


def parse_mode(raw) -> Mode:
    if isinstance(raw, Mode):
        return raw
    try:
        return Mode(str(raw).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise InvalidInput(f"Invalid mode. Please provide one of: {choices}.") from None


class RecommendationEngine:
    def __init__(
        self,
        market_source: MarketDataSource,
        news_source: NewsSource,
        cache: NewsCache,
        scorer: SentimentScorer | None = None,
        settings: Settings | None = None,
    ) -> None:
        cfg = settings or Settings()
        self._cache = cache
        strategies: list[RecommendationStrategy] = [
            MomentumRankStrategy(
                market_source,
                page_size=cfg.momentum_page_size,
                top_n=cfg.momentum_top_n,
            ),
            SentimentFilterStrategy(
                market_source,
                news_source,
                cache,
                scorer or SentimentScorer(),
                page_size=cfg.sentiment_page_size,
                top_n=cfg.sentiment_top_n,
                max_articles=cfg.max_articles_per_asset,
                max_concurrency=cfg.news_max_concurrency,
                fetch_timeout=cfg.news_fetch_timeout_seconds,
            ),
        ]
        self._strategies: dict[Mode, RecommendationStrategy] = {s.mode: s for s in strategies}
        self.default_mode = Mode(cfg.default_mode)

    @property
    def cache(self) -> NewsCache:
        return self._cache

    def strategy(self, mode: Mode) -> RecommendationStrategy:
        return self._strategies[mode]

    async def recommend(self, risk_level, mode=None) -> RecommendationResult:
        """Validate, then run the strategy for `mode` (default from settings).

        Raises InvalidInput before any external call; UpstreamFailure from the
        market source propagates unchanged.
        """
        level = parse_risk_level(risk_level)
        selected = parse_mode(mode) if mode is not None else self.default_mode

        logger.debug("Recommend risk=%d mode=%s", level, selected.value)
        recommendations = await self._strategies[selected].recommend(level)
        return RecommendationResult(risk_level=level, mode=selected, recommendations=recommendations)
