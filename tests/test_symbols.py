import pytest
from stock_sentiment.symbols import parse_symbols, InvalidSymbolError

def test_normalizes_and_deduplicates():
    assert parse_symbols("aapl, msft,,AAPL ") == ["AAPL", "MSFT"]

def test_accepts_iterables():
    assert parse_symbols(["goog", " IBM", "goog"]) == ["GOOG", "IBM"]

def test_rejects_malformed_symbols():
    for bad in ("AAPL1", "TOOLONG", "BRK.B", "A-B"):
        with pytest.raises(InvalidSymbolError):
            parse_symbols(bad)

def test_empty_input():
    with pytest.raises(InvalidSymbolError, match="No valid symbols provided"):
        parse_symbols(" , ,")
    with pytest.raises(InvalidSymbolError):
        parse_symbols([])

def test_caps_symbol_count():
    symbols = ",".join("A" + chr(ord("A") + i) for i in range(25))
    parsed = parse_symbols(symbols)
    assert len(parsed) == 20
    assert parsed[0] == "AA"
    assert parse_symbols(symbols, limit=3) == ["AA", "AB", "AC"]

def test_invalid_symbol_error_is_value_error():
    assert issubclass(InvalidSymbolError, ValueError)

def test_explicit_zero_limit_is_not_replaced_by_default():
    with pytest.raises(ValueError, match="at least 1"):
        parse_symbols("AAPL", limit=0)
