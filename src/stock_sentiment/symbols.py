import re
from typing import Iterable, List, Optional, Union
from stock_sentiment.config import settings

SYMBOL_PATTERN = re.compile(r"^[A-Z]{1,6}$")


class InvalidSymbolError(ValueError):
    pass


def parse_symbols(raw: Union[str, Iterable[str]], limit: Optional[int] = None) -> List[str]:
    """
    Normalize user input into the symbol list accepted by SentimentService.

    "aapl, msft,,AAPL" -> ["AAPL", "MSFT"]
    """
    if limit is None:
        limit = settings.max_symbols
    if limit < 1:
        raise ValueError(f"Symbol limit must be at least 1, got {limit}")
    tokens = raw.split(",") if isinstance(raw, str) else list(raw)

    symbols: List[str] = []
    for token in tokens:
        symbol = token.strip().upper()
        if not symbol:
            continue
        if not SYMBOL_PATTERN.match(symbol):
            raise InvalidSymbolError(f"Invalid symbol: {token!r}")
        if symbol not in symbols:
            symbols.append(symbol)

    if not symbols:
        raise InvalidSymbolError("No valid symbols provided")

    return symbols[:limit]
