import asyncio
import logging

import uvicorn

from crypto_advisor.config import Settings, settings
from crypto_advisor.delivery.web.app import create_app
from crypto_advisor.market.coingecko import CoinGeckoMarketSource
from crypto_advisor.news.cache import NewsCache
from crypto_advisor.news.newsapi import NewsApiSource
from crypto_advisor.recommend.engine import RecommendationEngine
from crypto_advisor.sentiment.scorer import SentimentScorer
from crypto_advisor.utils.logging import setup_logging

logger = logging.getLogger(__name__)

# How often expired news entries are physically dropped
CACHE_PURGE_INTERVAL_SECONDS = 3600


def build_engine(cfg: Settings) -> RecommendationEngine:
    """Wire the process-lifetime collaborators. The cache lives as long as the engine."""
    cache = NewsCache(ttl_seconds=cfg.news_cache_ttl_hours * 3600)
    return RecommendationEngine(
        market_source=CoinGeckoMarketSource(cfg),
        news_source=NewsApiSource(cfg),
        cache=cache,
        scorer=SentimentScorer(),
        settings=cfg,
    )


async def _cache_purge_loop(cache: NewsCache) -> None:
    while True:
        await asyncio.sleep(CACHE_PURGE_INTERVAL_SECONDS)
        removed = cache.purge_expired()
        if removed:
            logger.info("News cache purge: removed %d expired entries, %d left", removed, len(cache))


async def main() -> None:
    setup_logging(settings.log_level, settings.log_json)

    engine = build_engine(settings)
    app = create_app(engine)

    if not settings.newsapi_key:
        logger.warning("NEWSAPI_KEY not set, sentiment mode will treat every asset as neutral")
    logger.info(
        "Default mode=%s, news cache TTL=%.0fh, news concurrency=%d",
        settings.default_mode,
        settings.news_cache_ttl_hours,
        settings.news_max_concurrency,
    )

    config = uvicorn.Config(app, host=settings.web_host, port=settings.web_port, log_level="info")
    server = uvicorn.Server(config)

    purge = asyncio.create_task(_cache_purge_loop(engine.cache))
    try:
        await server.serve()
    finally:
        purge.cancel()


if __name__ == "__main__":
    asyncio.run(main())
