from sqlalchemy.orm import Session
from typing import List

from src.models import Keyword
from src.schemas.keyword import KeywordMetrics
from src.utils.constants import APP_ID


class KeywordRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_by_campaign(self, campaign_id: int) -> List[Keyword]:
        return (
            self.db.query(Keyword)
            .filter(Keyword.campaign_id == campaign_id)
            .order_by(Keyword.search_volume.desc(), Keyword.id)
            .all()
        )

    def bulk_create(self, campaign_id: int, keywords: List[KeywordMetrics]) -> int:
        if not keywords:
            return 0
        self.db.add_all([
            Keyword(
                campaign_id=campaign_id,
                keyword=k.keyword,
                search_volume=k.search_volume,
                competition=k.competition,
                cpc=k.cpc,
                competition_level=k.competition_level.value,
                app_id=APP_ID,
            )
            for k in keywords
        ])
        self.db.commit()
        return len(keywords)
