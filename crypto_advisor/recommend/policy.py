"""Risk tier tables.

Two policies, one per recommendation mode:

* Momentum-Rank: each risk level owns a market-cap-rank band. The bands
  partition the positive integers, so every ranked asset belongs to
  exactly one level. Unranked assets belong to none.
* Sentiment-Filtered: each risk level sets a rank ceiling and a
  minimum average news sentiment. Levels 4 and 5 have no ceiling.

Both are total over 1..5 and raise PolicyConfigurationError otherwise.
Caller input is validated before it gets here (see engine.parse_risk_level).
"""

from __future__ import annotations

from dataclasses import dataclass

from crypto_advisor.errors import PolicyConfigurationError

RISK_LEVELS = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class RankBand:
    min_rank: int | None  # exclusive lower bound, None = open
    max_rank: int | None  # inclusive upper bound, None = open

    def contains(self, rank: int | None) -> bool:
        if rank is None:
            return False
        if self.min_rank is not None and rank <= self.min_rank:
            return False
        if self.max_rank is not None and rank > self.max_rank:
            return False
        return True


@dataclass(frozen=True)
class SentimentFilter:
    max_rank: int | None  # None = unbounded
    min_sentiment: float

    def passes(self, rank: int | None, sentiment: float) -> bool:
        if self.max_rank is not None and (rank is None or rank > self.max_rank):
            return False
        return sentiment >= self.min_sentiment


MOMENTUM_BANDS: dict[int, RankBand] = {
    1: RankBand(None, 10),
    2: RankBand(10, 30),
    3: RankBand(30, 70),
    4: RankBand(70, 150),
    5: RankBand(150, None),
}

SENTIMENT_FILTERS: dict[int, SentimentFilter] = {
    1: SentimentFilter(10, 0.5),
    2: SentimentFilter(20, 0.3),
    3: SentimentFilter(100, 0.0),
    4: SentimentFilter(None, -0.2),
    5: SentimentFilter(None, -0.5),
}


def _check_level(risk_level) -> int:
    if isinstance(risk_level, bool) or not isinstance(risk_level, int) or risk_level not in RISK_LEVELS:
        raise PolicyConfigurationError(f"no risk tier configured for level {risk_level!r}")
    return risk_level


def momentum_band(risk_level: int) -> RankBand:
    return MOMENTUM_BANDS[_check_level(risk_level)]


def sentiment_filter(risk_level: int) -> SentimentFilter:
    return SENTIMENT_FILTERS[_check_level(risk_level)]
