from typing import Optional
from stock_sentiment.scoring.models import Metrics, Reputation
from stock_sentiment.scoring.components.reputation import ReputationClassifier

TREND_THRESHOLD = 0.03
VOLATILITY_THRESHOLD = 0.03
DRAWDOWN_THRESHOLD = 0.15

CONFIDENCE_PHRASES = {
    Reputation.HIGH: "Signal confidence is high based on trend/volatility alignment.",
    Reputation.MEDIUM: "Signal confidence is moderate and should be paired with risk controls.",
    Reputation.LOW: "Signal confidence is low due to unstable conditions.",
}

class NarrativeGenerator:
    def __init__(self, classifier: Optional[ReputationClassifier] = None):
        # Confidence wording follows the same buckets as the reputation label
        self.classifier = classifier or ReputationClassifier()

    def trend_phrase(self, metrics: Metrics) -> str:
        if metrics.momentum20 > TREND_THRESHOLD:
            return "shows strong upside momentum"
        if metrics.momentum20 < -TREND_THRESHOLD:
            return "is under persistent downside pressure"
        return "is moving in a mixed/sideways regime"

    def volatility_phrase(self, metrics: Metrics) -> str:
        if metrics.volatility20 > VOLATILITY_THRESHOLD:
            return "with elevated short-term volatility"
        return "with stable short-term volatility"

    def risk_phrase(self, metrics: Metrics) -> str:
        if metrics.drawdown60 > DRAWDOWN_THRESHOLD:
            return "Recent drawdown remains a material risk factor."
        return "Drawdown profile remains contained."

    def calculate(self, symbol: str, metrics: Metrics, confidence: float) -> str:
        confidence_phrase = CONFIDENCE_PHRASES[self.classifier.calculate(confidence)]
        return (
            f"{symbol} {self.trend_phrase(metrics)} {self.volatility_phrase(metrics)}. "
            f"{self.risk_phrase(metrics)} {confidence_phrase}"
        )
