import numpy as np
from typing import Sequence
from stock_sentiment.data_feeds.models import PricePoint
from stock_sentiment.scoring.models import Metrics

MOMENTUM_PERIOD = 20
MEAN_PERIOD = 20
VOLATILITY_PERIOD = 20
DRAWDOWN_LOOKBACK = 60


class MetricsComputer:
    """
    Trailing-window features used by every downstream component.
    All ratios use simple (unweighted) means and population variance.
    """

    def compute(self, window: Sequence[PricePoint]) -> Metrics:
        if not window:
            raise ValueError("Metrics require at least one price point")

        closes = np.fromiter((p.close for p in window), dtype=float, count=len(window))
        latest = closes[-1]

        momentum20 = 0.0
        if len(closes) > MOMENTUM_PERIOD:
            reference = closes[-(MOMENTUM_PERIOD + 1)]
            momentum20 = (latest - reference) / reference

        mean20 = closes[-MEAN_PERIOD:].mean()
        mean_reversion_gap = (latest - mean20) / mean20 if mean20 > 0 else 0.0

        returns = np.diff(closes) / closes[:-1]
        recent_returns = returns[-VOLATILITY_PERIOD:]
        volatility20 = recent_returns.std() if len(recent_returns) > 0 else 0.0

        max60 = closes[-DRAWDOWN_LOOKBACK:].max()
        drawdown60 = (max60 - latest) / max60 if max60 > 0 else 0.0

        return Metrics(
            momentum20=float(momentum20),
            mean_reversion_gap=float(mean_reversion_gap),
            volatility20=float(volatility20),
            drawdown60=float(drawdown60),
        )
