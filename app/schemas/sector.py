from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional

from app.schemas.common import BaseResponse


class SectorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    is_active: bool = True


class SentimentRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    date: Optional[datetime] = None
    positive_percent: float
    neutral_percent: float
    negative_percent: float
    overall_score: float
    total_articles: int = 0


class KeywordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    keyword: str
    frequency: int
    sentiment: Optional[str] = None
    last_mentioned: Optional[datetime] = None


class TopicOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    article_count: int
    sentiment: Optional[str] = None


class TrendPoint(BaseModel):
    date: datetime
    value: float


class WeeklySummaryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    week_start: datetime
    week_end: Optional[datetime] = None
    summary: str


class SectorSentiment(BaseModel):
    current: SentimentRecordOut
    history: List[SentimentRecordOut]


class DashboardData(BaseModel):
    sector: SectorOut
    sentiment: SectorSentiment
    keywords: List[KeywordOut]
    topics: List[TopicOut]
    trends: Dict[str, List[TrendPoint]]  # {'sentiment': [...], 'volume': [...]}
    weekly_summary: Optional[WeeklySummaryOut] = None


class SectorListResponse(BaseResponse):
    data: List[SectorOut]


class DashboardResponse(BaseResponse):
    data: DashboardData
