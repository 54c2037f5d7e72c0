"""NewsAPI `/everything` client used for per-asset sentiment."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from crypto_advisor.config import Settings
from crypto_advisor.errors import NewsFetchError
from crypto_advisor.news.base import NewsSource
from crypto_advisor.news.models import NewsArticle

logger = logging.getLogger(__name__)


def _parse_article(raw: dict) -> NewsArticle | None:
    title = (raw.get("title") or "").strip()
    # NewsAPI scrubs removed articles to this placeholder
    if not title or title == "[Removed]":
        return None
    try:
        return NewsArticle(
            title=title,
            published_at=raw.get("publishedAt") or None,
            url=raw.get("url") or "",
            source=(raw.get("source") or {}).get("name") or "",
        )
    except ValidationError:
        return NewsArticle(title=title, url=raw.get("url") or "")


class NewsApiSource(NewsSource):
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = settings.newsapi_base_url.rstrip("/")
        self._api_key = settings.newsapi_key
        self._page_size = settings.news_page_size
        self._language = settings.news_language
        self._timeout = settings.http_timeout_seconds
        self._transport = transport

    async def fetch_news_articles(self, asset_name: str) -> list[NewsArticle]:
        if not self._api_key:
            logger.debug("NEWSAPI_KEY not set, no news for %s", asset_name)
            return []

        params = {
            "q": f'"{asset_name}"',
            "searchIn": "title,description",
            "language": self._language,
            "sortBy": "publishedAt",
            "pageSize": self._page_size,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers={"X-Api-Key": self._api_key},
                transport=self._transport,
            ) as client:
                resp = await client.get(f"{self._base_url}/everything", params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as exc:
            raise NewsFetchError(f"NewsAPI fetch failed for {asset_name}: {exc}") from exc
        except ValueError as exc:
            raise NewsFetchError(f"NewsAPI returned a non-JSON body for {asset_name}") from exc

        if not isinstance(data, dict) or data.get("status") != "ok":
            detail = data if not isinstance(data, dict) else f"{data.get('code')} {data.get('message') or ''}"
            raise NewsFetchError(f"NewsAPI error for {asset_name}: {str(detail)[:200]}")

        articles = []
        for raw in data.get("articles") or []:
            article = _parse_article(raw) if isinstance(raw, dict) else None
            if article is not None:
                articles.append(article)
        return articles
