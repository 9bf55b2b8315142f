from datetime import datetime

import pytest
from pydantic import ValidationError
from sqlalchemy import select

from app.core.config import settings
from app.middlewares.security import limiter
from app.models.db.data_report import DataReport
from app.models.db.sentiment_data import SentimentData
from app.schemas.sentiment import SentimentScoreData
from app.services.sentiment_service import SentimentService

EXAMPLE = "Strong growth and rising exports signal positive momentum"


def _reports(run_db):
    async def go(session):
        return list((await session.execute(select(DataReport))).scalars().all())

    return run_db(go)


# -------------------------------------
# ✅ Analysis with a sector and a prior aggregate
# -------------------------------------
def test_analyze_updates_latest_aggregate(client, add_rows, get_row, run_db, sentiment_row):
    row = sentiment_row("sector-finance", positive=50.0, neutral=30.0, negative=20.0)
    add_rows(row)

    response = client.post(
        "/api/sentiment/analyze", json={"text": EXAMPLE, "sectorId": "sector-finance"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["sentiment"]["label"] == "positive"
    assert data["sentiment"]["score"] > 0.2
    assert {"growth", "exports", "rising", "positive", "momentum"} <= set(
        data["keywords"]
    )
    datetime.fromisoformat(data["analyzedAt"])

    stored = get_row(SentimentData, row.id)
    assert stored.positive_percent == 55.0
    assert stored.neutral_percent == 30.0
    assert stored.negative_percent == 20.0

    reports = _reports(run_db)
    assert len(reports) == 1
    assert reports[0].sector_id == "sector-finance"
    assert reports[0].content == EXAMPLE
    assert reports[0].sentiment == data["sentiment"]["score"]
    assert reports[0].keywords == data["keywords"]
    assert reports[0].title.startswith("Analysis ")


def test_analyze_negative_text_lowers_positive_share(client, add_rows, get_row, sentiment_row):
    row = sentiment_row("sector-retail", positive=50.0)
    add_rows(row)

    response = client.post(
        "/api/sentiment/analyze",
        json={"text": "Shortage and inflation hit traders", "sectorId": "sector-retail"},
    )

    assert response.status_code == 200
    assert response.json()["data"]["sentiment"]["label"] == "negative"
    assert get_row(SentimentData, row.id).positive_percent == 45.0


def test_analyze_sector_without_aggregate_only_stores_report(client, run_db):
    response = client.post(
        "/api/sentiment/analyze", json={"text": EXAMPLE, "sectorId": "sector-telecom"}
    )

    assert response.status_code == 200
    assert len(_reports(run_db)) == 1


# -------------------------------------
# ✅ Analysis without a sector: no persistence
# -------------------------------------
def test_analyze_without_sector_persists_nothing(client, run_db):
    response = client.post("/api/sentiment/analyze", json={"text": "Markets were quiet"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sentiment"] == {"score": 0.0, "label": "neutral"}
    assert data["keywords"] == ["markets", "quiet"]
    assert _reports(run_db) == []


# -------------------------------------
# ❌ Missing text
# -------------------------------------
def test_analyze_missing_text(client):
    response = client.post("/api/sentiment/analyze", json={"sectorId": "sector-finance"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TEXT_REQUIRED"


def test_analyze_empty_text(client, run_db):
    response = client.post("/api/sentiment/analyze", json={"text": ""})

    assert response.status_code == 400
    assert _reports(run_db) == []


# -------------------------------------
# ❌ Storage failure
# -------------------------------------
def test_analyze_storage_failure_returns_500(client, monkeypatch):
    async def boom(*args, **kwargs):
        raise RuntimeError("simulated failure")

    monkeypatch.setattr(SentimentService, "apply_to_latest", boom)

    response = client.post(
        "/api/sentiment/analyze", json={"text": EXAMPLE, "sectorId": "sector-finance"}
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "SENTIMENT_ANALYSIS_FAILED"


# -------------------------------------
# ❌ Malformed body
# -------------------------------------
def test_analyze_non_string_text_uses_error_shape(client):
    response = client.post("/api/sentiment/analyze", json={"text": 123})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"].startswith("text:")


# -------------------------------------
# ❌ Rate limit
# -------------------------------------
def test_analyze_rate_limit_returns_429(client, monkeypatch):
    monkeypatch.setattr(settings, "ANALYZE_RATE_LIMIT", "3/minute")
    limiter.reset()
    try:
        responses = [
            client.post("/api/sentiment/analyze", json={"text": "Markets were quiet"})
            for _ in range(4)
        ]
    finally:
        limiter.reset()

    assert [r.status_code for r in responses] == [200, 200, 200, 429]
    assert responses[-1].json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
    assert "Retry-After" in responses[-1].headers


def test_score_label_outside_the_three_labels_is_rejected():
    with pytest.raises(ValidationError):
        SentimentScoreData(score=0.0, label="mixed")
