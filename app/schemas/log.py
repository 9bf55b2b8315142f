from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class SystemLogRequest(BaseModel):
    message: Optional[str] = None
    type: Optional[str] = None  # info | success | warning | error | debug


class SystemLogOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    time: str
    message: str
    type: str
    created_at: Optional[datetime] = None
