from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.utils.constants import CompetitionLevel


class KeywordMetrics(BaseModel):
    keyword: str
    search_volume: int = Field(default=0, ge=0)
    competition: float = Field(default=0.0, ge=0.0, le=1.0)
    cpc: float = Field(default=0.0, ge=0.0)
    competition_level: CompetitionLevel = CompetitionLevel.LOW


class KeywordCreate(KeywordMetrics):
    campaign_id: int


class KeywordOut(KeywordMetrics):
    id: int
    campaign_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
