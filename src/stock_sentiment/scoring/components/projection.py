import math
from typing import Dict, List, NamedTuple, Tuple
from stock_sentiment.scoring.models import HorizonEstimate, Metrics, Predictions
from stock_sentiment.utils.rounding import round_half_up

class HorizonFamily(NamedTuple):
    horizons: Tuple[int, ...]
    normalizer: float
    multiplier: float

# Horizon order within a family is part of the output contract
HORIZON_FAMILIES: Dict[str, HorizonFamily] = {
    "days": HorizonFamily((5, 10, 20, 30), 30.0, 0.55),
    "months": HorizonFamily((1, 3, 6, 12), 12.0, 1.3),
    "years": HorizonFamily((1, 3, 5), 5.0, 2.4),
}

REVERSION_FACTOR = 0.45
RISK_FACTOR = 0.25
DRAWDOWN_RISK_WEIGHT = 25.0


def format_percent(value: float) -> str:
    """2.34 -> '+2.3%', -0.04 -> '-0.0%'"""
    return f"{round_half_up(value, 1):+.1f}%"


class PredictionProjector:
    """
    Heuristic forward projection of the trailing metrics.
    Not a trained model: the scale grows with sqrt(horizon) inside each family.
    """

    def scale(self, horizon: int, family: HorizonFamily) -> float:
        return math.sqrt(horizon / family.normalizer) * family.multiplier

    def expected_change(self, metrics: Metrics, scale: float) -> float:
        trend_component = metrics.momentum20 * 100 * scale
        reversion_component = -metrics.mean_reversion_gap * 100 * (scale * REVERSION_FACTOR)
        risk_penalty = (metrics.volatility20 * 100 + metrics.drawdown60 * DRAWDOWN_RISK_WEIGHT) * (scale * RISK_FACTOR)
        return round_half_up(trend_component + reversion_component - risk_penalty, 1)

    def project_family(self, metrics: Metrics, family: HorizonFamily) -> List[HorizonEstimate]:
        return [
            HorizonEstimate(
                horizon=horizon,
                expected_percent=format_percent(self.expected_change(metrics, self.scale(horizon, family))),
            )
            for horizon in family.horizons
        ]

    def calculate(self, metrics: Metrics) -> Predictions:
        return Predictions(**{
            name: self.project_family(metrics, family)
            for name, family in HORIZON_FAMILIES.items()
        })
