# app/models/db/sector.py

from sqlalchemy import Boolean, Column, String, DateTime, Text
from sqlalchemy.sql import func
from app.core.database import Base


class Sector(Base):
    __tablename__ = "sectors"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)
    icon = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
