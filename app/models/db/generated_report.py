from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from sqlalchemy.sql import func
from app.core.database import Base


class GeneratedReport(Base):
    __tablename__ = "generated_reports"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    sector_id = Column(String, ForeignKey("sectors.id"), nullable=False)
    title = Column(String, nullable=False)
    report_type = Column(String, nullable=False, default="weekly")
    summary = Column(Text, nullable=True)
    risk_level = Column(String, nullable=False)  # "Low", "Medium", "High"
    generated_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
