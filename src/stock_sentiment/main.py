import asyncio
import json
import sys
import time
from typing import Any, Dict, List, Optional

import typer

from stock_sentiment.config import settings, validate_log_level
from stock_sentiment.logger import setup_logging, get_logger
from stock_sentiment.data_feeds.service import PriceSeriesProvider
from stock_sentiment.data_feeds.yahoo_fetcher import YahooChartFetcher
from stock_sentiment.scoring.models import SentimentEntry
from stock_sentiment.scoring.service import SentimentService
from stock_sentiment.symbols import InvalidSymbolError, parse_symbols

logger = get_logger("SentimentRunner")

app = typer.Typer(
    name="stock-sentiment",
    help="Rolling price-based sentiment series for ticker symbols.",
    add_completion=False,
)


def build_response(data: Dict[str, List[SentimentEntry]], timestamp: Optional[int] = None) -> Dict[str, Any]:
    """Response envelope: request time plus one wire-format series per symbol."""
    return {
        "timestamp": timestamp if timestamp is not None else int(time.time() * 1000),
        "data": {symbol: [entry.to_wire() for entry in entries] for symbol, entries in data.items()},
    }


async def run(symbols: List[str], service: Optional[SentimentService] = None) -> Dict[str, Any]:
    requested_at = int(time.time() * 1000)
    service = service or SentimentService()
    data = await service.compute_sentiments(symbols)
    return build_response(data, timestamp=requested_at)


def _log_level_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return validate_log_level(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def sentiments(
    symbols: str = typer.Argument(..., help="Comma-separated symbols, e.g. AAPL,MSFT"),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the chart endpoint base URL."
    ),
    indent: Optional[int] = typer.Option(None, "--indent", help="Pretty-print JSON with this indent."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", callback=_log_level_callback, help="Logging level (default from settings)."
    ),
) -> None:
    """Print the sentiment response for SYMBOLS as JSON."""
    # stdout carries the JSON document
    setup_logging(level=log_level, stream=sys.stderr)

    try:
        parsed = parse_symbols(symbols)
    except InvalidSymbolError as e:
        logger.error(str(e))
        raise typer.Exit(code=2)

    fetcher = YahooChartFetcher(base_url or settings.yahoo_chart_base_url, timeout=settings.request_timeout)
    service = SentimentService(provider=PriceSeriesProvider(fetcher))

    logger.info(f"Computing sentiments for {', '.join(parsed)}")
    response = asyncio.run(run(parsed, service=service))
    typer.echo(json.dumps(response, indent=indent))


if __name__ == "__main__":
    app()
