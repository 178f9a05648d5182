import unittest
from datetime import datetime
from unittest.mock import MagicMock

import pytz
from sqlalchemy.orm import Session

from src.schemas import GeneratedArticle
from src.services.content import ContentService
from src.services.drip_feed import DripFeedService
from src.utils.constants import QueueStatusConst
from src.utils.exceptions import CollaboratorError

NOW = datetime(2026, 3, 8, 9, 0, tzinfo=pytz.UTC)


def queue_item(item_id, keyword):
    item = MagicMock()
    item.id = item_id
    item.keyword = keyword
    item.campaign_id = 5
    item.site_domain = "uno.it"
    return item


class TestDripFeedService(unittest.TestCase):
    def setUp(self):
        self.mock_db = MagicMock(spec=Session)
        self.content_service = MagicMock(spec=ContentService)
        self.article = GeneratedArticle(title="Guida", slug="guida", content="<p>x</p>")
        self.service = DripFeedService(self.mock_db, content_service=self.content_service)
        self.service.queue_repo = MagicMock()
        self.service.article_repo = MagicMock()

    def test_nothing_due(self):
        self.service.queue_repo.list_due.return_value = []

        response = self.service.run(now=NOW)

        self.assertEqual(response.message, "No articles to process")
        self.assertEqual(response.count, 0)
        self.assertEqual(response.results, [])
        self.service.queue_repo.list_due.assert_called_once_with(NOW, 5)

    def test_failed_item_does_not_stop_the_batch(self):
        items = [queue_item(i, f"keyword {i}") for i in range(1, 6)]
        self.service.queue_repo.list_due.return_value = items
        self.content_service.generate_article.side_effect = [
            self.article,
            self.article,
            CollaboratorError("Gemini", "returned error response 500: internal"),
            self.article,
            self.article,
        ]

        response = self.service.run(now=NOW)

        self.assertEqual(response.message, "Drip feed processed")
        self.assertEqual(response.count, 5)
        self.assertEqual(
            [r.status for r in response.results],
            [QueueStatusConst.COMPLETED, QueueStatusConst.COMPLETED, QueueStatusConst.FAILED,
             QueueStatusConst.COMPLETED, QueueStatusConst.COMPLETED],
        )
        self.assertEqual(response.results[2].error, "Gemini: returned error response 500: internal")
        self.assertEqual(self.service.article_repo.create.call_count, 4)

        final_status = {}
        for call in self.service.queue_repo.set_status.call_args_list:
            final_status[call.args[0].id] = call.args[1]
        self.assertEqual(final_status, {
            1: QueueStatusConst.COMPLETED,
            2: QueueStatusConst.COMPLETED,
            3: QueueStatusConst.FAILED,
            4: QueueStatusConst.COMPLETED,
            5: QueueStatusConst.COMPLETED,
        })

    def test_item_marked_processing_before_generation(self):
        item = queue_item(1, "keyword")
        self.service.queue_repo.list_due.return_value = [item]
        self.content_service.generate_article.return_value = self.article

        self.service.run(now=NOW)

        statuses = [c.args[1] for c in self.service.queue_repo.set_status.call_args_list]
        self.assertEqual(statuses, [QueueStatusConst.PROCESSING, QueueStatusConst.COMPLETED])
        self.content_service.build_article.assert_called_once_with(5, "keyword", self.article, site_domain="uno.it")

    def test_persistence_failure_marks_item_failed(self):
        item = queue_item(1, "keyword")
        self.service.queue_repo.list_due.return_value = [item]
        self.content_service.generate_article.return_value = self.article
        self.service.article_repo.create.side_effect = Exception("duplicate key")

        response = self.service.run(now=NOW)

        self.assertEqual(response.results[0].status, QueueStatusConst.FAILED)
        self.mock_db.rollback.assert_called()
        self.service.queue_repo.set_status.assert_called_with(item, QueueStatusConst.FAILED, error="duplicate key")


if __name__ == "__main__":
    unittest.main()
