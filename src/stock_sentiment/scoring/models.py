from enum import Enum
from typing import Any, Dict, List
from pydantic import BaseModel

class Reputation(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class Metrics(BaseModel):
    momentum20: float
    mean_reversion_gap: float
    volatility20: float
    drawdown60: float

class HorizonEstimate(BaseModel):
    horizon: int
    expected_percent: str  # e.g. "+2.3%"

class Predictions(BaseModel):
    days: List[HorizonEstimate]
    months: List[HorizonEstimate]
    years: List[HorizonEstimate]

class SentimentEntry(BaseModel):
    timestamp: int
    confidence: float
    reputation: Reputation
    sentiment_text: str
    predictions: Predictions

    def to_wire(self) -> Dict[str, Any]:
        """
        Serialize in the public response shape, where each horizon is a
        single-key object: {"5": {"expected": "+1.2%"}}.
        """
        def nest(estimates: List[HorizonEstimate]) -> List[Dict[str, Dict[str, str]]]:
            return [{str(e.horizon): {"expected": e.expected_percent}} for e in estimates]

        return {
            "timestamp": self.timestamp,
            "confidence": self.confidence,
            "reputation": self.reputation.value,
            "sentimentText": self.sentiment_text,
            "futurePredictions": {
                "days": nest(self.predictions.days),
                "months": nest(self.predictions.months),
                "years": nest(self.predictions.years),
            },
        }
