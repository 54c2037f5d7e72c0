from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from crypto_advisor.sentiment.base import PolarityScorer
from crypto_advisor.sentiment.vader import VaderPolarity


@dataclass(frozen=True)
class SentimentResult:
    per_article_scores: list[float] = field(default_factory=list)
    average_score: float = 0.0


class SentimentScorer:
    """Scores each title independently and averages the result."""

    def __init__(self, polarity: PolarityScorer | None = None) -> None:
        self._polarity = polarity or VaderPolarity()

    def score_titles(self, titles: Iterable[str]) -> SentimentResult:
        scores = [float(self._polarity.polarity(title or "")) for title in titles]
        if not scores:
            return SentimentResult([], 0.0)
        return SentimentResult(scores, sum(scores) / len(scores))
