import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from src.repositories import ArticleQueueRepository, ArticleRepository
from src.schemas import DripFeedItemResult, DripFeedResponse
from src.services.content import ContentService
from src.utils.constants import ArticleConst, QueueStatusConst
from src.utils.utils import utc_now


class DripFeedService:
    def __init__(self, db: Session, content_service: Optional[ContentService] = None):
        self.db = db
        self.article_repo = ArticleRepository(db)
        self.queue_repo = ArticleQueueRepository(db)
        self.content_service = content_service or ContentService(db)

    def run(self, now: Optional[datetime] = None) -> DripFeedResponse:
        """
        Publish up to DRIP_FEED_BATCH_SIZE due queue items.

        Each item moves pending -> processing -> completed, or to failed on
        any error; a failed item never stops the batch and is not retried.
        """
        # fail fast on missing credentials, before any item is claimed
        self.content_service.gemini

        now = now or utc_now()
        queue = self.queue_repo.list_due(now, ArticleConst.DRIP_FEED_BATCH_SIZE)
        if not queue:
            return DripFeedResponse(message="No articles to process", count=0)

        results = [self.process_item(item) for item in queue]
        completed = sum(1 for r in results if r.status == QueueStatusConst.COMPLETED)
        logging.info("Drip feed processed %d items (%d completed)", len(results), completed)
        return DripFeedResponse(message="Drip feed processed", count=len(queue), results=results)

    def process_item(self, item) -> DripFeedItemResult:
        item_id, keyword = item.id, item.keyword
        try:
            self.queue_repo.set_status(item, QueueStatusConst.PROCESSING)
            article = self.content_service.generate_article(keyword)
            self.article_repo.create(
                self.content_service.build_article(
                    item.campaign_id, keyword, article, site_domain=item.site_domain
                )
            )
            self.queue_repo.set_status(item, QueueStatusConst.COMPLETED)
            return DripFeedItemResult(id=item_id, keyword=keyword, status=QueueStatusConst.COMPLETED)
        except Exception as e:
            error = getattr(e, "message", None) or str(e)
            logging.error("Failed to process queue item %s: %s", item_id, error)
            self.db.rollback()
            self._mark_failed(item, error)
            return DripFeedItemResult(id=item_id, keyword=keyword, status=QueueStatusConst.FAILED, error=error)

    def _mark_failed(self, item, error: str) -> None:
        try:
            self.queue_repo.set_status(item, QueueStatusConst.FAILED, error=error)
        except Exception as e:
            self.db.rollback()
            logging.error("Could not mark queue item %s as failed: %s", item.id, e)
