from sqlalchemy import Column, String, Float, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.core.database import Base


class SentimentData(Base):
    __tablename__ = "sentiment_data"

    id = Column(String, primary_key=True, index=True)
    sector_id = Column(String, ForeignKey("sectors.id"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # not required to sum to 100
    positive_percent = Column(Float, nullable=False, default=0.0)
    neutral_percent = Column(Float, nullable=False, default=0.0)
    negative_percent = Column(Float, nullable=False, default=0.0)

    overall_score = Column(Float, nullable=False, default=0.0)  # -1..1
    total_articles = Column(Integer, nullable=False, default=0)
