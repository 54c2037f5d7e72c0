from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from crypto_advisor.news.models import NewsArticle


def _as_float(value) -> float:
    """Coerce a provider number to a finite float; null, garbage, NaN and inf become 0.0."""
    try:
        number = float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _as_rank(value) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        rank = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return rank if rank > 0 else None


class Asset(BaseModel):
    """One coin as reported by the market data source. Never mutated."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = ""
    symbol: str = ""
    name: str
    market_cap_rank: int | None = None
    market_cap: float = 0.0  # USD
    price_change_percentage_24h: float = 0.0
    current_price: float = 0.0  # USD

    @classmethod
    def from_coingecko(cls, row: dict) -> Asset | None:
        """Normalize a `/coins/markets` row. Returns None for rows without a name."""
        name = (row.get("name") or "").strip()
        if not name:
            return None
        return cls(
            id=row.get("id") or "",
            symbol=(row.get("symbol") or "").upper(),
            name=name,
            market_cap_rank=_as_rank(row.get("market_cap_rank")),
            market_cap=max(_as_float(row.get("market_cap")), 0.0),
            price_change_percentage_24h=_as_float(row.get("price_change_percentage_24h")),
            current_price=max(_as_float(row.get("current_price")), 0.0),
        )


class ScoredAsset(Asset):
    """An Asset copy carrying the outputs of a recommendation strategy."""

    score: float | None = None
    sentiment_score: float | None = None
    articles: list[NewsArticle] = Field(default_factory=list)

    @classmethod
    def derive(cls, asset: Asset, **extra) -> ScoredAsset:
        data = asset.model_dump()
        data.update(extra)
        return cls(**data)
