from typing import List, Optional, Sequence
from stock_sentiment.data_feeds.models import PricePoint
from stock_sentiment.scoring.models import SentimentEntry
from stock_sentiment.scoring.metrics import MetricsComputer
from stock_sentiment.scoring.components.confidence import ConfidenceScorer
from stock_sentiment.scoring.components.reputation import ReputationClassifier
from stock_sentiment.scoring.components.narrative import NarrativeGenerator
from stock_sentiment.scoring.components.projection import PredictionProjector
from stock_sentiment.logger import get_logger

logger = get_logger(__name__)

FIRST_INDEX = 60          # first entry needs 61 points of history
MAX_WINDOW_LOOKBACK = 252  # window spans at most 253 points
MAX_ENTRIES = 730

class SeriesAssembler:
    def __init__(self,
                 metrics: Optional[MetricsComputer] = None,
                 scorer: Optional[ConfidenceScorer] = None,
                 classifier: Optional[ReputationClassifier] = None,
                 narrator: Optional[NarrativeGenerator] = None,
                 projector: Optional[PredictionProjector] = None):
        self.metrics = metrics or MetricsComputer()
        self.scorer = scorer or ConfidenceScorer()
        self.classifier = classifier or ReputationClassifier()
        self.narrator = narrator or NarrativeGenerator(self.classifier)
        self.projector = projector or PredictionProjector()

    def build_entry(self, symbol: str, window: Sequence[PricePoint]) -> SentimentEntry:
        metrics = self.metrics.compute(window)
        confidence = self.scorer.calculate(metrics)
        return SentimentEntry(
            timestamp=window[-1].timestamp,
            confidence=confidence,
            reputation=self.classifier.calculate(confidence),
            sentiment_text=self.narrator.calculate(symbol, metrics, confidence),
            predictions=self.projector.calculate(metrics),
        )

    def build(self, symbol: str, prices: Sequence[PricePoint]) -> List[SentimentEntry]:
        """
        One entry per day from the 61st price onward, newest 730 kept.
        Prices must already be in ascending timestamp order.
        """
        if len(prices) <= FIRST_INDEX:
            logger.warning(f"{symbol}: {len(prices)} prices is not enough history for a sentiment series")
            return []

        # Entries older than the cap would be dropped anyway
        start = max(FIRST_INDEX, len(prices) - MAX_ENTRIES)
        entries = [
            self.build_entry(symbol, prices[max(0, index - MAX_WINDOW_LOOKBACK):index + 1])
            for index in range(start, len(prices))
        ]
        logger.debug(f"{symbol}: built {len(entries)} sentiment entries from {len(prices)} prices")
        return entries
