from sqlalchemy import Column, String, Integer, ForeignKey
from app.core.database import Base


class Topic(Base):
    __tablename__ = "topics"

    id = Column(String, primary_key=True, index=True)
    sector_id = Column(String, ForeignKey("sectors.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    article_count = Column(Integer, nullable=False, default=0)
    sentiment = Column(String, nullable=True)
