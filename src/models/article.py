from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, Text, JSON, text

from src.config.database import Base


class Article(Base):
    __tablename__ = 'articles'
    __table_args__ = (
        Index('idx_articles_campaign_slug', 'campaign_id', 'slug'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    campaign_id = Column(Integer, ForeignKey('campaigns.id', ondelete='CASCADE'), nullable=False)
    site_domain = Column(String(255), nullable=True, comment="Lander the article belongs to; NULL for campaign-wide articles")
    keyword = Column(String(255), nullable=True)
    title = Column(String(500), nullable=False)
    slug = Column(String(255), nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    category = Column(String(255), nullable=True)
    tags = Column(JSON, nullable=True)
    image_url = Column(String(2083), nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=text('CURRENT_TIMESTAMP'))
