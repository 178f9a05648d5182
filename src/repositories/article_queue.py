from datetime import datetime
from sqlalchemy.orm import Session
from typing import Optional, List

from src.models import ArticleQueue
from src.schemas.article import ArticleQueueCreate
from src.utils.constants import QueueStatusConst


class ArticleQueueRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, item_id: int) -> Optional[ArticleQueue]:
        return self.db.query(ArticleQueue).filter(ArticleQueue.id == item_id).first()

    def list_due(self, now: datetime, limit: int) -> List[ArticleQueue]:
        """Pending items whose scheduled time has arrived, oldest schedule first."""
        return (
            self.db.query(ArticleQueue)
            .filter(ArticleQueue.status == QueueStatusConst.PENDING.value)
            .filter(ArticleQueue.scheduled_at <= now)
            .order_by(ArticleQueue.scheduled_at, ArticleQueue.id)
            .limit(limit)
            .all()
        )

    def list_recent(self, limit: int = 10) -> List[ArticleQueue]:
        return (
            self.db.query(ArticleQueue)
            .order_by(ArticleQueue.created_at.desc(), ArticleQueue.id.desc())
            .limit(limit)
            .all()
        )

    def bulk_create(self, items: List[ArticleQueueCreate]) -> int:
        if not items:
            return 0
        self.db.add_all([
            ArticleQueue(
                campaign_id=item.campaign_id,
                site_domain=item.site_domain,
                keyword=item.keyword,
                scheduled_at=item.scheduled_at,
                status=item.status.value,
            )
            for item in items
        ])
        self.db.commit()
        return len(items)

    def set_status(self, db_item: ArticleQueue, status: QueueStatusConst, error: Optional[str] = None) -> ArticleQueue:
        db_item.status = status.value
        db_item.error = error
        self.db.commit()
        self.db.refresh(db_item)
        return db_item
