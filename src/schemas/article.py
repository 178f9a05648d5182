from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.utils.constants import QueueStatusConst


class ArticleCreate(BaseModel):
    campaign_id: int
    site_domain: Optional[str] = None
    keyword: Optional[str] = None
    title: str
    slug: str
    excerpt: str = ""
    content: str
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    published_at: datetime


class ArticleOut(ArticleCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ArticleQueueCreate(BaseModel):
    campaign_id: int
    site_domain: Optional[str] = None
    keyword: str
    scheduled_at: datetime
    status: QueueStatusConst = QueueStatusConst.PENDING


class ArticleQueueOut(ArticleQueueCreate):
    id: int
    error: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DripFeedItemResult(BaseModel):
    id: int
    keyword: str
    status: QueueStatusConst
    error: Optional[str] = None


class DripFeedResponse(BaseModel):
    message: str
    count: int
    results: list[DripFeedItemResult] = Field(default_factory=list)


class DebugDbOut(BaseModel):
    articles: list[ArticleOut]
    queue: list[ArticleQueueOut]
