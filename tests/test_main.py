import json
import pytest
from typer.testing import CliRunner
from stock_sentiment.main import app, build_response, run
from stock_sentiment.data_feeds.models import PricePoint
from stock_sentiment.data_feeds.yahoo_fetcher import YahooChartFetcher, PriceSourceError
from stock_sentiment.scoring.engine import SeriesAssembler
from stock_sentiment.scoring.service import SentimentService

runner = CliRunner()

def make_prices(n):
    return [PricePoint(timestamp=1_600_000_000_000 + i * 86_400_000, close=20.0 + i * 0.1) for i in range(n)]

@pytest.fixture
def offline(monkeypatch):
    async def unavailable(self, symbol):
        raise PriceSourceError("offline")
    monkeypatch.setattr(YahooChartFetcher, "fetch_history", unavailable)

def test_build_response_envelope():
    entries = SeriesAssembler().build("AAPL", make_prices(62))
    response = build_response({"AAPL": entries}, timestamp=123)

    assert response["timestamp"] == 123
    assert list(response["data"].keys()) == ["AAPL"]
    assert len(response["data"]["AAPL"]) == 2
    first = response["data"]["AAPL"][0]
    assert first["sentimentText"] == entries[0].sentiment_text
    assert list(first["futurePredictions"].keys()) == ["days", "months", "years"]
    # Must survive a JSON round trip
    assert json.loads(json.dumps(response)) == response

@pytest.mark.asyncio
async def test_run_uses_given_service():
    class FixedProvider:
        async def get_prices(self, symbol):
            return make_prices(70)

    response = await run(["AAPL"], service=SentimentService(provider=FixedProvider()))

    assert response["timestamp"] > 0
    assert len(response["data"]["AAPL"]) == 10

def test_cli_prints_json(offline):
    result = runner.invoke(app, ["aapl,msft"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert set(payload["data"].keys()) == {"AAPL", "MSFT"}
    assert len(payload["data"]["AAPL"]) == 670

def test_cli_rejects_invalid_symbols(offline):
    result = runner.invoke(app, ["AAPL,123"])
    assert result.exit_code == 2

def test_cli_rejects_unknown_log_level(offline):
    result = runner.invoke(app, ["AAPL", "--log-level", "verbose"])
    assert result.exit_code == 2

def test_cli_accepts_lowercase_log_level(offline):
    result = runner.invoke(app, ["AAPL", "--log-level", "debug"])
    assert result.exit_code == 0
    assert list(json.loads(result.stdout)["data"].keys()) == ["AAPL"]
