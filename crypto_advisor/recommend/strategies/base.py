from abc import ABC, abstractmethod

from crypto_advisor.market.models import ScoredAsset
from crypto_advisor.recommend.models import Mode


class RecommendationStrategy(ABC):
    mode: Mode

    @abstractmethod
    async def recommend(self, risk_level: int) -> list[ScoredAsset]:
        """Return the ranked, truncated recommendation list for a validated risk level."""
        ...
