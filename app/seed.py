import argparse
import asyncio
import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import select

from app.core.database import Database, database
from app.models.db import (  # noqa: F401 ensure every table is registered
    community_report,
    data_report,
    generated_report,
    historical_trend,
    indicators,
    keyword,
    system_log,
    topic,
    weekly_summary,
)
from app.models.db.sector import Sector
from app.models.db.sentiment_data import SentimentData

logger = logging.getLogger(__name__)

SECTORS = [
    {
        "id": "sector-retail",
        "name": "Retail",
        "slug": "retail",
        "description": "Retail sector analysis, including supermarkets, shops, and e-commerce",
        "icon": "🛒",
    },
    {
        "id": "sector-telecom",
        "name": "Telecom",
        "slug": "telecom",
        "description": "Telecommunications sector including MTN, Airtel, and internet providers",
        "icon": "📱",
    },
    {
        "id": "sector-finance",
        "name": "Finance",
        "slug": "finance",
        "description": "Financial services including banking, insurance, and microfinance",
        "icon": "🏦",
    },
    {
        "id": "sector-agriculture",
        "name": "Agriculture",
        "slug": "agriculture",
        "description": "Agricultural sector including crops, livestock, and agribusiness",
        "icon": "🌾",
    },
]


async def seed_database(db: Database, *, with_baseline: bool = False) -> int:
    """Create tables and insert the tracked sectors; returns how many were added."""
    await db.create_all()

    async with db._SessionLocal() as session:
        existing = {s.slug for s in (await session.execute(select(Sector))).scalars()}
        added = 0
        for data in SECTORS:
            if data["slug"] in existing:
                continue
            session.add(Sector(is_active=True, **data))
            added += 1
            if with_baseline:
                session.add(
                    SentimentData(
                        id=str(uuid4()),
                        sector_id=data["id"],
                        date=datetime.now(timezone.utc),
                        positive_percent=45.0,
                        neutral_percent=35.0,
                        negative_percent=20.0,
                        overall_score=0.25,
                        total_articles=0,
                    )
                )
        await session.commit()

    if added:
        logger.info(f"✅ Seeded {added} sectors")
    else:
        logger.info("📊 Sectors already exist, skipping...")
    return added


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    parser = argparse.ArgumentParser(description="Seed the Uganda Insights database")
    parser.add_argument(
        "--with-baseline",
        action="store_true",
        help="Also insert a 45/35/20 sentiment row per new sector",
    )
    args = parser.parse_args()
    asyncio.run(seed_database(database, with_baseline=args.with_baseline))
