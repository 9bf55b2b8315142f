# app/models/db/indicators.py

from sqlalchemy import Column, Integer, Float, DateTime
from sqlalchemy.sql import func
from app.core.database import Base


class EconomicIndicator(Base):
    __tablename__ = "economic_indicators"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year = Column(Integer, nullable=False)
    gdp_growth = Column(Float, nullable=False)  # %
    inflation_rate = Column(Float, nullable=False)  # %
    exports = Column(Float, nullable=True)  # billions USD
    imports = Column(Float, nullable=True)  # billions USD
    exchange_rate = Column(Float, nullable=True)  # UGX per USD
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class SocialMetric(Base):
    __tablename__ = "social_metrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year = Column(Integer, nullable=False)
    literacy_rate = Column(Float, nullable=False)  # %
    population = Column(Integer, nullable=True)
    healthcare_access = Column(Float, nullable=True)  # %
    employment_rate = Column(Float, nullable=True)  # %
    created_at = Column(DateTime(timezone=True), server_default=func.now())
