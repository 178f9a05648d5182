from .campaign import router as campaign_router
from .content import router as content_router
from .domain import router as domain_router
from .cron import router as cron_router
from .debug import router as debug_router

__all__ = [
    "campaign_router",
    "content_router",
    "domain_router",
    "cron_router",
    "debug_router",
]
