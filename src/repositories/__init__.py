from .campaign import CampaignRepository
from .keyword import KeywordRepository
from .article import ArticleRepository
from .article_queue import ArticleQueueRepository

__all__ = [
    "CampaignRepository",
    "KeywordRepository",
    "ArticleRepository",
    "ArticleQueueRepository",
]
