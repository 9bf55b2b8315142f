from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4
import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.db.generated_report import GeneratedReport
from app.models.db.sector import Sector
from app.models.db.sentiment_data import SentimentData
from app.schemas.report import ReportContent
from app.schemas.sector import SentimentRecordOut
from app.services.dashboard_service import (
    latest_sentiment,
    latest_summary,
    top_keywords,
    top_topics,
)

RISK_LOW_ABOVE = 0.3
RISK_HIGH_BELOW = -0.3
REPORT_LIST_LIMIT = 20


def risk_level(latest: Optional[SentimentData]) -> str:
    if latest is None:
        return "Medium"
    if latest.overall_score > RISK_LOW_ABOVE:
        return "Low"
    if latest.overall_score < RISK_HIGH_BELOW:
        return "High"
    return "Medium"


def fallback_summary(sector_name: str, latest: Optional[SentimentData]) -> str:
    mood = "positive" if latest is not None and latest.overall_score > 0 else "moderate"
    return (
        f"The {sector_name} sector in Uganda shows {mood} market sentiment "
        f"based on recent analysis."
    )


def report_file_name(sector_name: str, report_type: Optional[str], when: datetime) -> str:
    name = re.sub(r"\s+", "_", sector_name)
    return f"{name}_{report_type or 'report'}_{when.date().isoformat()}.pdf"


async def generate_report(
    db: AsyncSession,
    *,
    sector: Sector,
    user_id: str,
    report_type: Optional[str] = None,
) -> ReportContent:
    records = await latest_sentiment(db, sector.id, 7)
    keywords = await top_keywords(db, sector.id, 10)
    topics = await top_topics(db, sector.id, 5)
    summary = await latest_summary(db, sector.id)

    latest = records[0] if records else None
    level = risk_level(latest)
    now = datetime.now(timezone.utc)
    kind = report_type or "weekly"

    row = GeneratedReport(
        id=str(uuid4()),
        user_id=user_id,
        sector_id=sector.id,
        title=f"{sector.name} {(report_type or 'Weekly')} Report",
        report_type=kind,
        summary=summary.summary if summary else "No summary available",
        risk_level=level,
        generated_at=now,
    )
    db.add(row)
    await db.commit()

    return ReportContent(
        report_id=row.id,
        file_name=report_file_name(sector.name, report_type, now),
        title=row.title,
        sector_name=sector.name,
        generated_at=now,
        executive_summary=summary.summary
        if summary
        else fallback_summary(sector.name, latest),
        risk_level=level,
        sentiment=SentimentRecordOut.model_validate(latest) if latest else None,
        top_keywords=[k.keyword for k in keywords],
        key_topics=[t.name for t in topics],
    )


async def list_reports(db: AsyncSession, user_id: str) -> List[GeneratedReport]:
    rows = await db.execute(
        select(GeneratedReport)
        .where(GeneratedReport.user_id == user_id)
        .order_by(GeneratedReport.generated_at.desc())
        .limit(REPORT_LIST_LIMIT)
    )
    return list(rows.scalars().all())
