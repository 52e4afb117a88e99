from typing import List, Optional
from stock_sentiment.logger import get_logger
from .models import PricePoint
from .synthetic import SyntheticPriceGenerator
from .yahoo_fetcher import PriceSourceError, YahooChartFetcher

logger = get_logger(__name__)

MIN_REAL_POINTS = 90

class PriceSeriesProvider:
    """
    Supplies an ordered daily close series for a symbol.
    Real data is preferred; any fetch failure or a short history is absorbed
    here by switching to the synthetic series.
    """
    def __init__(self, fetcher: YahooChartFetcher, generator: Optional[SyntheticPriceGenerator] = None):
        self.fetcher = fetcher
        self.generator = generator or SyntheticPriceGenerator()

    async def get_prices(self, symbol: str) -> List[PricePoint]:
        try:
            points = await self.fetcher.fetch_history(symbol)
        except PriceSourceError as e:
            logger.warning(f"Live prices unavailable for {symbol}: {e}. Using synthetic series.")
            return self.generator.generate(symbol)
        except Exception as e:
            logger.error(f"Unexpected error fetching {symbol}: {e}. Using synthetic series.", exc_info=True)
            return self.generator.generate(symbol)

        if len(points) < MIN_REAL_POINTS:
            logger.info(
                f"Only {len(points)} valid closes for {symbol} (need {MIN_REAL_POINTS}). Using synthetic series."
            )
            return self.generator.generate(symbol)

        return points
