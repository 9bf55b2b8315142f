# app/models/db/data_report.py

from sqlalchemy import JSON, Column, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.sql import func
from app.core.database import Base


class DataReport(Base):
    """Raw text submitted for analysis, with its derived score."""

    __tablename__ = "data_reports"

    id = Column(String, primary_key=True, index=True)
    sector_id = Column(String, ForeignKey("sectors.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    sentiment = Column(Float, nullable=True)
    keywords = Column(JSON, nullable=True)  # ["growth", "exports", ...]
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now())
