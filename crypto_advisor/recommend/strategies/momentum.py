"""Momentum-Rank mode: rank-band filter, then market cap + 24h momentum score."""

from __future__ import annotations

import logging

from crypto_advisor.market.base import MarketDataSource
from crypto_advisor.market.models import Asset, ScoredAsset
from crypto_advisor.recommend.models import Mode
from crypto_advisor.recommend.policy import RankBand, momentum_band
from crypto_advisor.recommend.strategies.base import RecommendationStrategy

logger = logging.getLogger(__name__)

# Levels at or above this reward raw momentum instead of penalizing movement
AGGRESSIVE_FROM_LEVEL = 4


def momentum_term(price_change_pct: float, risk_level: int) -> float:
    if risk_level >= AGGRESSIVE_FROM_LEVEL:
        return price_change_pct
    return -abs(price_change_pct)


def classify(assets: list[Asset], band: RankBand) -> list[Asset]:
    return [a for a in assets if band.contains(a.market_cap_rank)]


def score_assets(assets: list[Asset], risk_level: int) -> list[ScoredAsset]:
    """Score and sort descending. sorted() is stable, so ties keep input order."""
    scored = [
        ScoredAsset.derive(
            a,
            score=a.market_cap / 1e9 + momentum_term(a.price_change_percentage_24h, risk_level),
        )
        for a in assets
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)


class MomentumRankStrategy(RecommendationStrategy):
    mode = Mode.MOMENTUM

    def __init__(self, market_source: MarketDataSource, page_size: int = 100, top_n: int = 5) -> None:
        self._market = market_source
        self._page_size = page_size
        self._top_n = top_n

    async def recommend(self, risk_level: int) -> list[ScoredAsset]:
        # Resolve the band first so a bad level never triggers network calls
        band = momentum_band(risk_level)
        assets = await self._market.fetch_market_snapshot(self._page_size, 1)
        matching = classify(assets, band)
        ranked = score_assets(matching, risk_level)
        logger.info(
            "Momentum risk=%d: %d/%d assets in band, returning %d",
            risk_level,
            len(matching),
            len(assets),
            min(len(ranked), self._top_n),
        )
        return ranked[: self._top_n]
