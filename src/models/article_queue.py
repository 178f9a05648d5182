from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, Text, text

from src.config.database import Base


class ArticleQueue(Base):
    __tablename__ = 'article_queue'
    __table_args__ = (
        Index('idx_article_queue_due', 'status', 'scheduled_at'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    campaign_id = Column(Integer, ForeignKey('campaigns.id', ondelete='CASCADE'), nullable=False)
    site_domain = Column(String(255), nullable=True)
    keyword = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, server_default=text("'pending'"))
    scheduled_at = Column(DateTime(timezone=True), nullable=False)
    error = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=text('CURRENT_TIMESTAMP'))
