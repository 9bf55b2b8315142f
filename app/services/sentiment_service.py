from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4
import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.aggregation.aggregator import nudged_column
from app.core.keywords.extractor import KeywordExtractor
from app.core.sentiment.analyzer import SentimentAnalyzer, SentimentScore
from app.models.db.data_report import DataReport
from app.models.db.sentiment_data import SentimentData
from app.utils.telemetry import astep, count_label

logger = logging.getLogger(__name__)


@dataclass
class SentimentObservation:
    text: str
    sector_id: Optional[str] = None


@dataclass
class AnalysisResult:
    sentiment: SentimentScore
    keywords: List[str]
    analyzed_at: datetime


class SentimentService:
    """
    Scores a text, extracts its keywords and, when a sector is given, stores the
    text as a data report and nudges the sector's latest sentiment aggregate.
    """

    def __init__(self, analyzer: SentimentAnalyzer, keywords: KeywordExtractor):
        self.analyzer = analyzer
        self.keywords = keywords

    def score(self, text: str) -> tuple[SentimentScore, List[str]]:
        return self.analyzer.score(text), self.keywords.extract(text)

    async def analyze(
        self, db: AsyncSession, observation: SentimentObservation
    ) -> AnalysisResult:
        # 1) in-memory scoring
        sentiment, keywords = self.score(observation.text)
        now = datetime.now(timezone.utc)
        count_label(sentiment.label)
        result = AnalysisResult(sentiment=sentiment, keywords=keywords, analyzed_at=now)

        if not observation.sector_id:
            return result

        # 2) raw report
        async with astep("sentiment.db.save_report", sector_id=observation.sector_id):
            report = DataReport(
                id=str(uuid4()),
                sector_id=observation.sector_id,
                title=f"Analysis {now.isoformat()}",
                content=observation.text,
                sentiment=sentiment.score,
                keywords=keywords,
                uploaded_at=now,
            )
            db.add(report)

        # 3) aggregate nudge on the latest row, if any
        async with astep("sentiment.db.aggregate", label=sentiment.label):
            await self.apply_to_latest(db, observation.sector_id, sentiment.label)

        await db.commit()
        logger.info(
            f"✅ Analysed text for sector {observation.sector_id} "
            f"(label={sentiment.label}, score={sentiment.score:.2f})"
        )
        return result

    async def apply_to_latest(
        self, db: AsyncSession, sector_id: str, label: str
    ) -> Optional[str]:
        """Nudge positive_percent of the sector's latest row; returns its id or None.

        The row is located first and then updated with a single statement that
        reads the stored value, so neutral and negative percents stay as they are.
        """
        latest_id = (
            await db.execute(
                select(SentimentData.id)
                .where(SentimentData.sector_id == sector_id)
                .order_by(SentimentData.date.desc())
                .limit(1)
            )
        ).scalar_one_or_none()
        if latest_id is None:
            return None

        await db.execute(
            update(SentimentData)
            .where(SentimentData.id == latest_id)
            .values(positive_percent=nudged_column(SentimentData.positive_percent, label))
            .execution_options(synchronize_session=False)
        )
        return latest_id
