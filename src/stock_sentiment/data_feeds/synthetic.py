import time
import numpy as np
from typing import List, Optional
from .models import PricePoint

SYNTHETIC_DAYS = 730
DAY_MS = 24 * 60 * 60 * 1000
MIN_PRICE = 1.0


def symbol_seed(symbol: str) -> int:
    """Sum of character codes, e.g. AAPL -> 286"""
    return sum(ord(char) for char in symbol)


def base_price(symbol: str) -> float:
    return 40.0 + (symbol_seed(symbol) % 120)


class SyntheticPriceGenerator:
    """
    Random-walk daily closes used when no real history is available.
    The walk is seeded per symbol, so the same symbol and end time always
    yield the same series.
    """
    def __init__(self, days: int = SYNTHETIC_DAYS):
        self.days = days

    def generate(self, symbol: str, end_time: Optional[int] = None) -> List[PricePoint]:
        now = end_time if end_time is not None else int(time.time() * 1000)
        rng = np.random.default_rng(symbol_seed(symbol))
        drifts = (rng.random(self.days) - 0.49) * 0.03

        series: List[PricePoint] = []
        price = base_price(symbol)
        for i, day in enumerate(range(self.days - 1, -1, -1)):
            price = max(MIN_PRICE, price * (1 + drifts[i]))
            series.append(PricePoint(timestamp=now - day * DAY_MS, close=float(price)))

        return series
