from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.schemas.common import BaseResponse
from app.schemas.sector import SentimentRecordOut


class GenerateReportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sector_slug: Optional[str] = Field(default=None, alias="sectorSlug")
    user_id: Optional[str] = Field(default=None, alias="userId")
    report_type: Optional[str] = Field(default=None, alias="reportType")


class GeneratedReportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    sector_id: str
    title: str
    report_type: str
    summary: Optional[str] = None
    risk_level: str
    generated_at: Optional[datetime] = None


class ReportContent(BaseModel):
    report_id: str
    file_name: str
    title: str
    sector_name: str
    generated_at: datetime
    executive_summary: str
    risk_level: str  # 'Low', 'Medium', 'High'
    sentiment: Optional[SentimentRecordOut] = None
    top_keywords: List[str]
    key_topics: List[str]


class GenerateReportResponse(BaseResponse):
    data: ReportContent


class CommunityReportRequest(BaseModel):
    location: Optional[str] = None
    report: Optional[str] = None


class CommunityReportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    location: str
    report: str
    created_at: Optional[datetime] = None
