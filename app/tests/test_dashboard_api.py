from datetime import datetime, timedelta, timezone
from uuid import uuid4

from app.models.db.historical_trend import HistoricalTrend
from app.models.db.keyword import Keyword
from app.models.db.topic import Topic
from app.models.db.weekly_summary import WeeklySummary


def _keyword(word: str, frequency: int) -> Keyword:
    return Keyword(
        id=str(uuid4()),
        sector_id="sector-agriculture",
        keyword=word,
        frequency=frequency,
        sentiment="positive",
    )


def _trend(metric: str, value: float, days_ago: int) -> HistoricalTrend:
    return HistoricalTrend(
        id=str(uuid4()),
        sector_id="sector-agriculture",
        date=datetime.now(timezone.utc) - timedelta(days=days_ago),
        metric_name=metric,
        value=value,
    )


def test_list_sectors(client):
    response = client.get("/api/sectors")

    assert response.status_code == 200
    slugs = {s["slug"] for s in response.json()["data"]}
    assert slugs == {"retail", "telecom", "finance", "agriculture"}


def test_dashboard_unknown_sector(client):
    response = client.get("/api/dashboard/mining")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SECTOR_NOT_FOUND"


def test_dashboard_defaults_without_data(client):
    response = client.get("/api/dashboard/telecom")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sector"]["name"] == "Telecom"
    assert data["sentiment"]["current"]["positive_percent"] == 45.0
    assert data["sentiment"]["current"]["overall_score"] == 0.25
    assert data["sentiment"]["history"] == []
    assert data["keywords"] == []
    assert data["trends"] == {"sentiment": [], "volume": []}
    assert data["weekly_summary"] is None


def test_dashboard_bundle(client, add_rows, sentiment_row):
    add_rows(
        sentiment_row("sector-agriculture", positive=40.0, days_ago=2),
        sentiment_row("sector-agriculture", positive=60.0, overall=0.4, days_ago=0),
        _keyword("coffee", 12),
        _keyword("maize", 30),
        Topic(
            id=str(uuid4()),
            sector_id="sector-agriculture",
            name="Export prices",
            article_count=4,
        ),
        _trend("sentiment", 0.1, days_ago=5),
        _trend("sentiment", 0.3, days_ago=1),
        _trend("volume", 120, days_ago=2),
        _trend("volume", 999, days_ago=45),
        WeeklySummary(
            id=str(uuid4()),
            sector_id="sector-agriculture",
            week_start=datetime.now(timezone.utc) - timedelta(days=7),
            summary="Coffee exports held firm.",
        ),
    )

    response = client.get("/api/dashboard/agriculture")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sentiment"]["current"]["positive_percent"] == 60.0
    assert [h["positive_percent"] for h in data["sentiment"]["history"]] == [60.0, 40.0]
    assert [k["keyword"] for k in data["keywords"]] == ["maize", "coffee"]
    assert data["topics"][0]["name"] == "Export prices"
    assert [p["value"] for p in data["trends"]["sentiment"]] == [0.1, 0.3]
    assert [p["value"] for p in data["trends"]["volume"]] == [120]
    assert data["weekly_summary"]["summary"] == "Coffee exports held firm."
