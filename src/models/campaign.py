from sqlalchemy import Column, Integer, String, DateTime, Text, text
from sqlalchemy.orm import relationship

from src.config.database import Base


class Campaign(Base):
    __tablename__ = 'campaigns'

    id = Column(Integer, primary_key=True, autoincrement=True)
    topic = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    app_id = Column(String(50), nullable=False, server_default=text("'adseo-v2'"))
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=text('CURRENT_TIMESTAMP'))

    keywords = relationship(
        'Keyword',
        back_populates='campaign',
        cascade='all, delete-orphan',
        passive_deletes=True
    )
