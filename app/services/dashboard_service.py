from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.db.historical_trend import HistoricalTrend
from app.models.db.keyword import Keyword
from app.models.db.sector import Sector
from app.models.db.sentiment_data import SentimentData
from app.models.db.topic import Topic
from app.models.db.weekly_summary import WeeklySummary
from app.schemas.sector import (
    DashboardData,
    KeywordOut,
    SectorOut,
    SectorSentiment,
    SentimentRecordOut,
    TopicOut,
    TrendPoint,
    WeeklySummaryOut,
)

HISTORY_LIMIT = 30
KEYWORD_LIMIT = 20
TOPIC_LIMIT = 10
TREND_WINDOW_DAYS = 30

# Shown until a sector has its first sentiment row
DEFAULT_SENTIMENT = SentimentRecordOut(
    positive_percent=45.0,
    neutral_percent=35.0,
    negative_percent=20.0,
    overall_score=0.25,
    total_articles=0,
)


async def list_sectors(db: AsyncSession) -> List[Sector]:
    return list((await db.execute(select(Sector))).scalars().all())


async def sector_by_slug(db: AsyncSession, slug: str) -> Optional[Sector]:
    return (
        await db.execute(select(Sector).where(Sector.slug == slug).limit(1))
    ).scalar_one_or_none()


async def latest_sentiment(
    db: AsyncSession, sector_id: str, limit: int
) -> List[SentimentData]:
    rows = await db.execute(
        select(SentimentData)
        .where(SentimentData.sector_id == sector_id)
        .order_by(SentimentData.date.desc())
        .limit(limit)
    )
    return list(rows.scalars().all())


async def top_keywords(db: AsyncSession, sector_id: str, limit: int) -> List[Keyword]:
    rows = await db.execute(
        select(Keyword)
        .where(Keyword.sector_id == sector_id)
        .order_by(Keyword.frequency.desc())
        .limit(limit)
    )
    return list(rows.scalars().all())


async def top_topics(db: AsyncSession, sector_id: str, limit: int) -> List[Topic]:
    rows = await db.execute(
        select(Topic)
        .where(Topic.sector_id == sector_id)
        .order_by(Topic.article_count.desc())
        .limit(limit)
    )
    return list(rows.scalars().all())


async def latest_summary(db: AsyncSession, sector_id: str) -> Optional[WeeklySummary]:
    return (
        (
            await db.execute(
                select(WeeklySummary)
                .where(WeeklySummary.sector_id == sector_id)
                .order_by(WeeklySummary.week_start.desc())
                .limit(1)
            )
        )
        .scalars()
        .first()
    )


async def recent_trends(
    db: AsyncSession, sector_id: str, days: int = TREND_WINDOW_DAYS
) -> dict[str, List[TrendPoint]]:
    since = datetime.now(timezone.utc) - timedelta(days=days)
    rows = await db.execute(
        select(HistoricalTrend)
        .where(HistoricalTrend.sector_id == sector_id)
        .where(HistoricalTrend.date >= since)
        .order_by(HistoricalTrend.date)
    )
    trends: dict[str, List[TrendPoint]] = {"sentiment": [], "volume": []}
    for t in rows.scalars().all():
        if t.metric_name in trends:
            trends[t.metric_name].append(TrendPoint(date=t.date, value=t.value))
    return trends


async def get_sector_dashboard(db: AsyncSession, sector: Sector) -> DashboardData:
    records = await latest_sentiment(db, sector.id, HISTORY_LIMIT)
    history = [SentimentRecordOut.model_validate(r) for r in records]
    summary = await latest_summary(db, sector.id)

    return DashboardData(
        sector=SectorOut.model_validate(sector),
        sentiment=SectorSentiment(
            current=history[0] if history else DEFAULT_SENTIMENT,
            history=history,
        ),
        keywords=[
            KeywordOut.model_validate(k)
            for k in await top_keywords(db, sector.id, KEYWORD_LIMIT)
        ],
        topics=[
            TopicOut.model_validate(t)
            for t in await top_topics(db, sector.id, TOPIC_LIMIT)
        ],
        trends=await recent_trends(db, sector.id),
        weekly_summary=WeeklySummaryOut.model_validate(summary) if summary else None,
    )
