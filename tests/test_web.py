"""API-level tests for the sentiment endpoint."""

import pytest

import web.app as web_app
from core.scoring import LEVEL_EMOJIS
from workflows.aggregator import SentimentAggregator


@pytest.fixture
def client():
    return web_app.app.test_client()


@pytest.fixture
def install_aggregator(monkeypatch):
    def _install(aggregator):
        monkeypatch.setattr(web_app, "aggregator", aggregator)

    return _install


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert await response.get_json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_sentiment_payload(client, install_aggregator, static_source, fixed_momentum, make_item):
    install_aggregator(SentimentAggregator(
        news_source=static_source([make_item(30), make_item(-30)]),
        social_source=static_source([make_item(20, source_name="r/Gold")]),
        momentum_source=fixed_momentum(10),
    ))

    response = await client.get("/api/sentiment")
    data = await response.get_json()

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "no-store"
    assert data["success"] is True
    assert "timestamp" in data

    sentiment = data["sentiment"]
    # news +15 -15 +15, social 20, momentum 10: 5.25 + 9 + 2
    assert sentiment["overallScore"] == 16
    assert sentiment["level"] == "neutral"
    assert sentiment["label"] == "Neutral"
    assert sentiment["emoji"] == LEVEL_EMOJIS["neutral"]
    assert sentiment["sourceScores"] == {"news": 15, "social": 20, "momentum": 10}
    assert "computedAt" in sentiment

    assert [n["sentimentLabel"] for n in data["news"]] == ["bullish", "bearish", "bullish"]
    assert data["news"][2]["sourceName"] == "r/Gold"
    assert data["news"][0]["relevantMetals"] == ["gold"]


@pytest.mark.asyncio
async def test_sentiment_failure_returns_500(client, install_aggregator):
    class Broken:
        async def aggregate(self):
            raise RuntimeError("boom")

    install_aggregator(Broken())

    response = await client.get("/api/sentiment")

    assert response.status_code == 500
    assert await response.get_json() == {"success": False, "error": "Failed to calculate sentiment"}
