from .base import CamelModel
from .keyword import KeywordMetrics, KeywordCreate, KeywordOut
from .campaign import CampaignAnalyzeRequest, CampaignCreate, CampaignOut, TopicAnalysisResult
from .content import SiteContentRequest, SiteContent, GeneratedArticle
from .domain import (
    DomainGenerateRequest,
    DomainGenerateResponse,
    DomainCheckRequest,
    DomainCheckAllRequest,
    DomainCheckResult,
)
from .deploy import SiteIn, CampaignDeployRequest, SiteDeployResult, CampaignDeployResponse
from .article import (
    ArticleCreate,
    ArticleOut,
    ArticleQueueCreate,
    ArticleQueueOut,
    DripFeedItemResult,
    DripFeedResponse,
    DebugDbOut,
)

__all__ = [
    "CamelModel",
    "KeywordMetrics",
    "KeywordCreate",
    "KeywordOut",
    "CampaignAnalyzeRequest",
    "CampaignCreate",
    "CampaignOut",
    "TopicAnalysisResult",
    "SiteContentRequest",
    "SiteContent",
    "GeneratedArticle",
    "DomainGenerateRequest",
    "DomainGenerateResponse",
    "DomainCheckRequest",
    "DomainCheckAllRequest",
    "DomainCheckResult",
    "SiteIn",
    "CampaignDeployRequest",
    "SiteDeployResult",
    "CampaignDeployResponse",
    "ArticleCreate",
    "ArticleOut",
    "ArticleQueueCreate",
    "ArticleQueueOut",
    "DripFeedItemResult",
    "DripFeedResponse",
    "DebugDbOut",
]
