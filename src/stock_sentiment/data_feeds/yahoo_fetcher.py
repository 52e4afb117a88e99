import math
from urllib.parse import quote
import httpx
from typing import Any, List, Optional
from stock_sentiment.logger import get_logger
from .models import PricePoint

logger = get_logger(__name__)

CHART_PATH = "/v8/finance/chart/{symbol}"
CHART_PARAMS = {"range": "2y", "interval": "1d"}


class PriceSourceError(Exception):
    """Raised when the chart endpoint cannot supply a usable payload."""


def parse_chart_payload(payload: Any) -> List[PricePoint]:
    """
    Extract daily closes from a v8 chart payload.

    Expected shape:
        chart.result[0].timestamp              -> [int seconds]
        chart.result[0].indicators.quote[0].close -> [float | null]

    Points whose close is missing, non-finite or <= 0 are dropped.
    """
    try:
        result = payload["chart"]["result"][0]
        timestamps = result.get("timestamp") or []
        closes = result["indicators"]["quote"][0].get("close") or []
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise PriceSourceError(f"Unexpected chart payload: {e!r}") from e

    if not isinstance(timestamps, list) or not isinstance(closes, list):
        raise PriceSourceError("Chart timestamp/close fields are not arrays")

    points: List[PricePoint] = []
    for ts, close in zip(timestamps, closes):
        if isinstance(close, bool) or not isinstance(close, (int, float)):
            continue
        if not math.isfinite(close) or close <= 0:
            continue
        if isinstance(ts, bool) or not isinstance(ts, (int, float)):
            raise PriceSourceError(f"Invalid timestamp in chart payload: {ts!r}")
        points.append(PricePoint(timestamp=int(ts) * 1000, close=float(close)))

    return points


class YahooChartFetcher:
    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Tests pass an httpx.MockTransport here
        self.transport = transport

    async def fetch_history(self, symbol: str) -> List[PricePoint]:
        """
        Fetch ~2 years of daily closes for a symbol.
        Single attempt, no caching. Any failure is raised as PriceSourceError.
        """
        path = CHART_PATH.format(symbol=quote(symbol, safe=""))
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
                headers={"Accept": "application/json", "Cache-Control": "no-cache"},
            ) as client:
                response = await client.get(path, params=CHART_PARAMS)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise PriceSourceError(
                f"Chart request for {symbol} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise PriceSourceError(f"Chart request for {symbol} failed: {e}") from e
        except ValueError as e:
            # Body was not JSON
            raise PriceSourceError(f"Chart response for {symbol} is not valid JSON") from e

        points = parse_chart_payload(payload)
        logger.debug(f"Fetched {len(points)} valid closes for {symbol}")
        return points
