"""CoinGecko `/coins/markets` snapshot client."""

from __future__ import annotations

import logging

import httpx

from crypto_advisor.config import Settings
from crypto_advisor.errors import UpstreamFailure
from crypto_advisor.market.base import MarketDataSource
from crypto_advisor.market.models import Asset

logger = logging.getLogger(__name__)

# CoinGecko caps per_page at 250
_MAX_PAGE_SIZE = 250


class CoinGeckoMarketSource(MarketDataSource):
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = settings.coingecko_base_url.rstrip("/")
        self._timeout = settings.http_timeout_seconds
        self._headers = {"accept": "application/json"}
        if settings.coingecko_api_key:
            self._headers["x-cg-demo-api-key"] = settings.coingecko_api_key
        self._transport = transport

    async def fetch_market_snapshot(self, page_size: int, page: int = 1) -> list[Asset]:
        params = {
            "vs_currency": "usd",
            "order": "market_cap_desc",
            "per_page": max(1, min(page_size, _MAX_PAGE_SIZE)),
            "page": max(1, page),
            "sparkline": "false",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, headers=self._headers, transport=self._transport
            ) as client:
                resp = await client.get(f"{self._base_url}/coins/markets", params=params)
                resp.raise_for_status()
                rows = resp.json()
        except httpx.HTTPError as exc:
            logger.error("CoinGecko markets fetch failed: %s", exc)
            raise UpstreamFailure(f"market data fetch failed: {exc}") from exc
        except ValueError as exc:
            logger.error("CoinGecko returned a non-JSON body: %s", exc)
            raise UpstreamFailure("market data response was not JSON") from exc

        if not isinstance(rows, list):
            # Error payloads come back as {"status": {...}} with a 200 on some plans
            logger.error("Unexpected CoinGecko payload: %.200s", rows)
            raise UpstreamFailure("market data response was not a list")

        assets = []
        for row in rows[:page_size]:
            if not isinstance(row, dict):
                continue
            asset = Asset.from_coingecko(row)
            if asset is not None:
                assets.append(asset)

        logger.debug("Fetched %d assets (page=%d, per_page=%d)", len(assets), page, page_size)
        return assets
