from sqlalchemy import Column, Integer, String, DateTime, BigInteger, ForeignKey, Numeric, text
from sqlalchemy.orm import relationship

from src.config.database import Base


class Keyword(Base):
    __tablename__ = 'keywords'

    id = Column(Integer, primary_key=True, autoincrement=True)
    campaign_id = Column(Integer, ForeignKey('campaigns.id', ondelete='CASCADE'), nullable=False, index=True)
    keyword = Column(String(255), nullable=False)
    search_volume = Column(BigInteger, nullable=False, server_default=text('0'))
    competition = Column(Numeric(4, 3), nullable=False, server_default=text('0'))
    cpc = Column(Numeric(10, 2), nullable=False, server_default=text('0'))
    competition_level = Column(String(10), nullable=False, server_default=text("'LOW'"))
    app_id = Column(String(50), nullable=False, server_default=text("'adseo-v2'"))
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=text('CURRENT_TIMESTAMP'))

    campaign = relationship('Campaign', back_populates='keywords')
