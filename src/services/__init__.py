from .keyword import KeywordService
from .content import ContentService
from .domain import DomainService
from .deploy import DeployService
from .drip_feed import DripFeedService
from .dashboard import DashboardService

__all__ = [
    "KeywordService",
    "ContentService",
    "DomainService",
    "DeployService",
    "DripFeedService",
    "DashboardService",
]
