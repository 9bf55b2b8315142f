from __future__ import annotations
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.db.community_report import CommunityReport
from app.models.db.indicators import EconomicIndicator, SocialMetric
from app.models.db.system_log import SystemLog
from app.schemas.stats import (
    EconomicIndicatorOut,
    EconomicStats,
    SocialMetricOut,
    SocialStats,
    StatsData,
)


async def get_stats(db: AsyncSession) -> StatsData:
    economic = [
        EconomicIndicatorOut.model_validate(r)
        for r in (
            await db.execute(select(EconomicIndicator).order_by(EconomicIndicator.year))
        )
        .scalars()
        .all()
    ]
    social = [
        SocialMetricOut.model_validate(r)
        for r in (await db.execute(select(SocialMetric).order_by(SocialMetric.year)))
        .scalars()
        .all()
    ]
    # history is ascending by year, so the latest entry is the last one
    return StatsData(
        economic=EconomicStats(latest=economic[-1] if economic else None, history=economic),
        social=SocialStats(latest=social[-1] if social else None, history=social),
    )


async def list_logs(db: AsyncSession) -> List[SystemLog]:
    return list(
        (await db.execute(select(SystemLog).order_by(SystemLog.id))).scalars().all()
    )


async def create_log(db: AsyncSession, *, message: str, type: str, time: str) -> SystemLog:
    row = SystemLog(time=time, message=message, type=type)
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return row


async def list_community_reports(db: AsyncSession) -> List[CommunityReport]:
    return list(
        (await db.execute(select(CommunityReport).order_by(CommunityReport.id)))
        .scalars()
        .all()
    )


async def create_community_report(
    db: AsyncSession, *, location: str, report: str
) -> CommunityReport:
    row = CommunityReport(location=location, report=report)
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return row
