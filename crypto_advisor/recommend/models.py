from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from crypto_advisor.market.models import ScoredAsset


class Mode(str, Enum):
    MOMENTUM = "momentum"
    SENTIMENT = "sentiment"


class RecommendationResult(BaseModel):
    risk_level: int
    mode: Mode
    recommendations: list[ScoredAsset] = []

    def to_response(self) -> dict:
        """JSON body returned by the web layer."""
        exclude = _MODE_ONLY_FIELDS[self.mode]
        return {
            "recommendations": [
                asset.model_dump(mode="json", exclude=exclude) for asset in self.recommendations
            ]
        }


# Fields the other mode never fills in
_MODE_ONLY_FIELDS = {
    Mode.MOMENTUM: {"sentiment_score", "articles"},
    Mode.SENTIMENT: {"score"},
}
