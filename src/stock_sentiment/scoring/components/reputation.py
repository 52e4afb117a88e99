from stock_sentiment.scoring.models import Reputation

HIGH_THRESHOLD = 7.0
MEDIUM_THRESHOLD = 4.0

class ReputationClassifier:
    def __init__(self, high_threshold: float = HIGH_THRESHOLD, medium_threshold: float = MEDIUM_THRESHOLD):
        self.high_threshold = high_threshold
        self.medium_threshold = medium_threshold

    def calculate(self, confidence: float) -> Reputation:
        if confidence >= self.high_threshold:
            return Reputation.HIGH
        if confidence >= self.medium_threshold:
            return Reputation.MEDIUM
        return Reputation.LOW
