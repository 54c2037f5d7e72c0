from abc import ABC, abstractmethod

from crypto_advisor.news.models import NewsArticle


class NewsSource(ABC):
    @abstractmethod
    async def fetch_news_articles(self, asset_name: str) -> list[NewsArticle]:
        """Return recent articles about the asset, newest first.

        An empty list means "no news". Raise NewsFetchError on transport failure.
        """
        ...
