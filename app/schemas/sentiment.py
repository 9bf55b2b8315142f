from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.core.sentiment.analyzer import SentimentLabel
from app.schemas.common import BaseResponse


class SentimentRequest(BaseModel):
    """Body of an analysis call; sectorId is optional."""

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    sector_id: Optional[str] = Field(default=None, alias="sectorId")


class SentimentScoreData(BaseModel):
    score: float  # -1..1
    label: SentimentLabel


class SentimentAnalysisData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sentiment: SentimentScoreData
    keywords: List[str]
    analyzed_at: datetime = Field(serialization_alias="analyzedAt")


class SentimentAnalysisResponse(BaseResponse):
    data: SentimentAnalysisData
