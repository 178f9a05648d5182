from sqlalchemy.orm import Session

from src.repositories import ArticleQueueRepository, ArticleRepository
from src.schemas import ArticleOut, ArticleQueueOut, DebugDbOut


class DashboardService:
    def __init__(self, db: Session):
        self.article_repo = ArticleRepository(db)
        self.queue_repo = ArticleQueueRepository(db)

    def get_debug_snapshot(self, article_limit: int = 20, queue_limit: int = 10) -> DebugDbOut:
        return DebugDbOut(
            articles=[ArticleOut.model_validate(a) for a in self.article_repo.list_recent(article_limit)],
            queue=[ArticleQueueOut.model_validate(q) for q in self.queue_repo.list_recent(queue_limit)],
        )
