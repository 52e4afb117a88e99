import asyncio
from typing import Dict, List, Optional
from stock_sentiment.logger import get_logger
from stock_sentiment.config import settings
from stock_sentiment.data_feeds.service import PriceSeriesProvider
from stock_sentiment.data_feeds.yahoo_fetcher import YahooChartFetcher
from stock_sentiment.scoring.engine import SeriesAssembler
from stock_sentiment.scoring.models import SentimentEntry

logger = get_logger(__name__)

class SentimentService:
    def __init__(self,
                 provider: Optional[PriceSeriesProvider] = None,
                 assembler: Optional[SeriesAssembler] = None,
                 max_concurrent_fetches: Optional[int] = None):
        if provider is None:
            fetcher = YahooChartFetcher(settings.yahoo_chart_base_url, timeout=settings.request_timeout)
            provider = PriceSeriesProvider(fetcher)
        self.provider = provider
        self.assembler = assembler or SeriesAssembler()
        if max_concurrent_fetches is None:
            max_concurrent_fetches = settings.max_concurrent_fetches
        if max_concurrent_fetches < 1:
            raise ValueError(f"max_concurrent_fetches must be at least 1, got {max_concurrent_fetches}")
        self.max_concurrent_fetches = max_concurrent_fetches
        logger.info(f"Initialized SentimentService (max concurrent fetches: {self.max_concurrent_fetches})")

    async def compute_symbol(self, symbol: str, semaphore: asyncio.Semaphore) -> List[SentimentEntry]:
        async with semaphore:
            prices = await self.provider.get_prices(symbol)
        return self.assembler.build(symbol, prices)

    async def compute_sentiments(self, symbols: List[str]) -> Dict[str, List[SentimentEntry]]:
        """
        Sentiment series for each symbol, computed concurrently.
        Symbols are expected to be validated and de-duplicated already.
        """
        semaphore = asyncio.Semaphore(self.max_concurrent_fetches)
        results = await asyncio.gather(*(self.compute_symbol(symbol, semaphore) for symbol in symbols))
        logger.info(f"Computed sentiment series for {len(symbols)} symbols")
        return dict(zip(symbols, results))
