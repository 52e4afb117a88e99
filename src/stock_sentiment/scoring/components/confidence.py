from stock_sentiment.scoring.models import Metrics
from stock_sentiment.utils.rounding import round_half_up

MIN_CONFIDENCE = 1.0
MAX_CONFIDENCE = 10.0
BASELINE = 6.0

class ConfidenceScorer:
    """
    Fixed linear model: momentum adds confidence, volatility, drawdown and
    distance from the 20-day mean subtract from it.
    """
    def __init__(self,
                 momentum_weight: float = 120.0,
                 volatility_weight: float = 120.0,
                 drawdown_weight: float = 20.0,
                 reversion_weight: float = 18.0):
        self.momentum_weight = momentum_weight
        self.volatility_weight = volatility_weight
        self.drawdown_weight = drawdown_weight
        self.reversion_weight = reversion_weight

    def raw_score(self, metrics: Metrics) -> float:
        trend_score = metrics.momentum20 * self.momentum_weight
        quality_penalty = metrics.volatility20 * self.volatility_weight + metrics.drawdown60 * self.drawdown_weight
        reversion_penalty = abs(metrics.mean_reversion_gap) * self.reversion_weight
        return BASELINE + trend_score - quality_penalty - reversion_penalty

    def calculate(self, metrics: Metrics) -> float:
        clamped = max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, self.raw_score(metrics)))
        return round_half_up(clamped, 1)
