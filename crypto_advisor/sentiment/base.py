from abc import ABC, abstractmethod


class PolarityScorer(ABC):
    @abstractmethod
    def polarity(self, text: str) -> float:
        """Return a signed polarity for one piece of text. Must be deterministic."""
        ...
