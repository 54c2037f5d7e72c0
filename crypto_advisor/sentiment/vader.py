from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from crypto_advisor.sentiment.base import PolarityScorer

_analyzer = SentimentIntensityAnalyzer()


class VaderPolarity(PolarityScorer):
    def polarity(self, text: str) -> float:
        # compound is already normalized to -1..1
        return _analyzer.polarity_scores(text)["compound"]
