from sqlalchemy import Column, String, Float, DateTime, ForeignKey
from app.core.database import Base


class HistoricalTrend(Base):
    __tablename__ = "historical_trends"

    id = Column(String, primary_key=True, index=True)
    sector_id = Column(String, ForeignKey("sectors.id"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False)
    metric_name = Column(String, nullable=False)  # "sentiment", "volume"
    value = Column(Float, nullable=False)
