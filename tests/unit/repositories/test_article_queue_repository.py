import unittest
from datetime import datetime, timedelta

import pytz
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import src.models  # noqa: F401  registers the tables on Base.metadata
from src.config.database import Base
from src.models import Article, Campaign
from src.repositories import ArticleQueueRepository, ArticleRepository, CampaignRepository, KeywordRepository
from src.schemas import ArticleCreate, ArticleQueueCreate, CampaignCreate, KeywordMetrics
from src.utils.constants import CompetitionLevel, QueueStatusConst

NOW = datetime(2026, 3, 8, 9, 0, tzinfo=pytz.UTC)


class TestRepositoriesOnSqlite(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine)()
        self.campaign = CampaignRepository(self.db).create(CampaignCreate(topic="idraulico", description="Roma"))
        self.queue_repo = ArticleQueueRepository(self.db)

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def enqueue(self, keyword, scheduled_at, status=QueueStatusConst.PENDING):
        self.queue_repo.bulk_create([ArticleQueueCreate(
            campaign_id=self.campaign.id,
            site_domain="uno.it",
            keyword=keyword,
            scheduled_at=scheduled_at,
            status=status,
        )])

    def test_campaign_gets_app_id(self):
        campaign = self.db.query(Campaign).one()
        self.assertEqual(campaign.app_id, "adseo-v2")

    def test_list_due_filters_pending_and_due(self):
        self.enqueue("past", NOW - timedelta(days=1))
        self.enqueue("now", NOW)
        self.enqueue("future", NOW + timedelta(minutes=5))
        self.enqueue("done", NOW - timedelta(days=2), status=QueueStatusConst.COMPLETED)
        self.enqueue("failed", NOW - timedelta(days=2), status=QueueStatusConst.FAILED)

        due = self.queue_repo.list_due(NOW, 5)

        self.assertEqual([i.keyword for i in due], ["past", "now"])

    def test_list_due_respects_batch_size(self):
        for i in range(8):
            self.enqueue(f"k{i}", NOW - timedelta(hours=8 - i))

        due = self.queue_repo.list_due(NOW, 5)

        self.assertEqual([i.keyword for i in due], ["k0", "k1", "k2", "k3", "k4"])

    def test_set_status_records_error(self):
        self.enqueue("k", NOW - timedelta(hours=1))
        item = self.queue_repo.list_due(NOW, 5)[0]

        self.queue_repo.set_status(item, QueueStatusConst.FAILED, error="generation failed")

        reloaded = self.queue_repo.get(item.id)
        self.assertEqual(reloaded.status, "failed")
        self.assertEqual(reloaded.error, "generation failed")
        self.assertEqual(self.queue_repo.list_due(NOW, 5), [])

    def test_keywords_and_articles_round_trip(self):
        saved = KeywordRepository(self.db).bulk_create(self.campaign.id, [
            KeywordMetrics(keyword="idraulico roma", search_volume=880, competition=0.42, cpc=1.9,
                           competition_level=CompetitionLevel.MEDIUM),
        ])
        ArticleRepository(self.db).create(ArticleCreate(
            campaign_id=self.campaign.id,
            keyword="idraulico roma",
            title="Guida",
            slug="guida",
            content="<p>x</p>",
            tags=["idraulica", "roma"],
            published_at=NOW,
        ))

        self.assertEqual(saved, 1)
        keywords = KeywordRepository(self.db).list_by_campaign(self.campaign.id)
        self.assertEqual(keywords[0].competition_level, "MEDIUM")
        article = self.db.query(Article).one()
        self.assertEqual(article.tags, ["idraulica", "roma"])
        self.assertEqual(len(ArticleRepository(self.db).list_recent()), 1)


if __name__ == "__main__":
    unittest.main()
