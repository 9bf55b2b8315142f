from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from app.models.db.keyword import Keyword
from app.models.db.weekly_summary import WeeklySummary
from app.services.report_service import fallback_summary, report_file_name, risk_level


# -------------------------------------
# Risk level and wording
# -------------------------------------
@pytest.mark.parametrize(
    "score,expected", [(0.31, "Low"), (0.3, "Medium"), (-0.3, "Medium"), (-0.5, "High")]
)
def test_risk_level(sentiment_row, score, expected):
    assert risk_level(sentiment_row(overall=score)) == expected


def test_risk_level_without_data():
    assert risk_level(None) == "Medium"


def test_fallback_summary(sentiment_row):
    assert "shows positive market" in fallback_summary("Retail", sentiment_row(overall=0.1))
    assert "shows moderate market" in fallback_summary("Retail", None)


def test_report_file_name():
    when = datetime(2024, 5, 17, tzinfo=timezone.utc)
    assert report_file_name("Real Estate", "monthly", when) == "Real_Estate_monthly_2024-05-17.pdf"
    assert report_file_name("Retail", None, when) == "Retail_report_2024-05-17.pdf"


# -------------------------------------
# Generated reports
# -------------------------------------
def test_generate_report(client, add_rows, sentiment_row):
    add_rows(
        sentiment_row("sector-finance", overall=0.45),
        Keyword(id=str(uuid4()), sector_id="sector-finance", keyword="loans", frequency=9),
        WeeklySummary(
            id=str(uuid4()),
            sector_id="sector-finance",
            week_start=datetime.now(timezone.utc) - timedelta(days=3),
            summary="Lending picked up.",
        ),
    )

    response = client.post(
        "/api/reports/generate", json={"sectorSlug": "finance", "userId": "user-1"}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["risk_level"] == "Low"
    assert data["title"] == "Finance Weekly Report"
    assert data["executive_summary"] == "Lending picked up."
    assert data["top_keywords"] == ["loans"]
    assert data["file_name"].startswith("Finance_report_")

    listed = client.get("/api/reports/generate", params={"userId": "user-1"})
    assert listed.status_code == 200
    reports = listed.json()["data"]
    assert [r["id"] for r in reports] == [data["report_id"]]
    assert reports[0]["report_type"] == "weekly"
    assert reports[0]["summary"] == "Lending picked up."


def test_generate_report_without_data(client):
    response = client.post(
        "/api/reports/generate",
        json={"sectorSlug": "retail", "userId": "user-2", "reportType": "monthly"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["risk_level"] == "Medium"
    assert data["sentiment"] is None
    assert data["title"] == "Retail monthly Report"
    assert "moderate market sentiment" in data["executive_summary"]


def test_generate_report_requires_sector_and_user(client):
    response = client.post("/api/reports/generate", json={"sectorSlug": "retail"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "SECTOR_AND_USER_REQUIRED"


def test_generate_report_unknown_sector(client):
    response = client.post(
        "/api/reports/generate", json={"sectorSlug": "mining", "userId": "user-1"}
    )

    assert response.status_code == 404


def test_list_reports_requires_user(client):
    assert client.get("/api/reports/generate").status_code == 400


# -------------------------------------
# Community reports
# -------------------------------------
def test_community_reports_round(client):
    created = client.post(
        "/api/reports", json={"location": "Mbarara", "report": "Milk prices rising"}
    )
    assert created.status_code == 201
    assert created.json()["data"]["location"] == "Mbarara"

    listed = client.get("/api/reports").json()["data"]
    assert [r["report"] for r in listed] == ["Milk prices rising"]


def test_community_report_requires_fields(client):
    response = client.post("/api/reports", json={"location": "Kampala"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "LOCATION_AND_REPORT_REQUIRED"
