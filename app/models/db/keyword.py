from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.core.database import Base


class Keyword(Base):
    __tablename__ = "keywords"

    id = Column(String, primary_key=True, index=True)
    sector_id = Column(String, ForeignKey("sectors.id"), nullable=False, index=True)
    keyword = Column(String, nullable=False)
    frequency = Column(Integer, nullable=False, default=0)
    sentiment = Column(String, nullable=True)  # "positive", "neutral", "negative"
    last_mentioned = Column(DateTime(timezone=True), server_default=func.now())
