from abc import ABC, abstractmethod

from crypto_advisor.market.models import Asset


class MarketDataSource(ABC):
    @abstractmethod
    async def fetch_market_snapshot(self, page_size: int, page: int = 1) -> list[Asset]:
        """Return assets ordered by market cap descending.

        Raises UpstreamFailure when the provider cannot be reached.
        """
        ...
