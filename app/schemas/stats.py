from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class EconomicIndicatorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    gdp_growth: float
    inflation_rate: float
    exports: Optional[float] = None
    imports: Optional[float] = None
    exchange_rate: Optional[float] = None
    created_at: Optional[datetime] = None


class SocialMetricOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    literacy_rate: float
    population: Optional[int] = None
    healthcare_access: Optional[float] = None
    employment_rate: Optional[float] = None
    created_at: Optional[datetime] = None


class EconomicStats(BaseModel):
    latest: Optional[EconomicIndicatorOut] = None
    history: List[EconomicIndicatorOut]


class SocialStats(BaseModel):
    latest: Optional[SocialMetricOut] = None
    history: List[SocialMetricOut]


class StatsData(BaseModel):
    economic: EconomicStats
    social: SocialStats
