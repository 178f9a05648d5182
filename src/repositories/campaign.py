from sqlalchemy.orm import Session
from typing import Optional

from src.models import Campaign
from src.schemas.campaign import CampaignCreate
from src.utils.constants import APP_ID


class CampaignRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, campaign_id: int) -> Optional[Campaign]:
        return self.db.query(Campaign).filter(Campaign.id == campaign_id).first()

    def create(self, campaign_in: CampaignCreate) -> Campaign:
        db_campaign = Campaign(
            topic=campaign_in.topic,
            description=campaign_in.description,
            app_id=APP_ID,
        )
        self.db.add(db_campaign)
        self.db.commit()
        self.db.refresh(db_campaign)
        return db_campaign
