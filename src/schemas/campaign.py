from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .base import CamelModel
from .keyword import KeywordMetrics


class CampaignAnalyzeRequest(CamelModel):
    topic: str = ""
    business_description: str = ""


class CampaignCreate(BaseModel):
    topic: str
    description: str


class CampaignOut(CampaignCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TopicAnalysisResult(CamelModel):
    name: str
    description: str
    keywords: list[KeywordMetrics]
    campaign_id: Optional[int] = None
