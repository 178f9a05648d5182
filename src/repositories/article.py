from sqlalchemy.orm import Session
from typing import List

from src.models import Article
from src.schemas.article import ArticleCreate


class ArticleRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, article_in: ArticleCreate) -> Article:
        db_article = Article(**article_in.model_dump())
        self.db.add(db_article)
        self.db.commit()
        self.db.refresh(db_article)
        return db_article

    def list_recent(self, limit: int = 20) -> List[Article]:
        return (
            self.db.query(Article)
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(limit)
            .all()
        )
