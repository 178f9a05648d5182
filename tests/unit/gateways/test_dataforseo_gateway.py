import unittest
from unittest.mock import patch

import httpx

from src.config.config import DataForSeoConfig, LocaleConfig
from src.gateways.dataforseo import DataForSeoGateway, safe_get_items
from src.utils.exceptions import CollaboratorError


def dfs_response(payload, status_code=200):
    return httpx.Response(status_code, json=payload, request=httpx.Request("POST", "https://api.dataforseo.com"))


class TestDataForSeoGateway(unittest.TestCase):
    def setUp(self):
        self.gateway = DataForSeoGateway(
            DataForSeoConfig(username="login", password="secret"),
            LocaleConfig(),
        )

    def test_safe_get_items_handles_missing_levels(self):
        self.assertEqual(safe_get_items({}), [])
        self.assertEqual(safe_get_items({"tasks": [{"result": None}]}), [])
        self.assertEqual(safe_get_items({"tasks": [{"result": [None]}]}), [])
        self.assertEqual(safe_get_items({"tasks": [{"result": [{"items": None}]}]}), [])

    def test_empty_phrases_skip_the_call(self):
        with patch("src.gateways.dataforseo.httpx.post") as mock_post:
            self.assertEqual(self.gateway.fetch_keyword_metrics([]), [])
            mock_post.assert_not_called()

    @patch("src.gateways.dataforseo.httpx.post")
    def test_reads_keyword_info_with_zero_defaults(self, mock_post):
        mock_post.return_value = dfs_response({
            "status_code": 20000,
            "tasks": [{
                "status_code": 20000,
                "result": [{
                    "items": [
                        {"keyword": "idraulico roma", "keyword_info": {"search_volume": 880, "competition": 0.42, "cpc": 1.9}},
                        {"keyword": "idraulico urgente roma nord", "keyword_info": {"search_volume": None, "competition": None}},
                        {"keyword": "pronto intervento idraulico"},
                    ]
                }],
            }],
        })

        metrics = self.gateway.fetch_keyword_metrics(["idraulico roma"])

        self.assertEqual(metrics, [
            {"keyword": "idraulico roma", "search_volume": 880, "competition": 0.42, "cpc": 1.9},
            {"keyword": "idraulico urgente roma nord", "search_volume": 0, "competition": 0, "cpc": 0},
            {"keyword": "pronto intervento idraulico", "search_volume": 0, "competition": 0, "cpc": 0},
        ])
        kwargs = mock_post.call_args.kwargs
        self.assertEqual(kwargs["auth"], ("login", "secret"))
        self.assertEqual(kwargs["json"], [{"keywords": ["idraulico roma"], "location_code": 2380, "language_code": "it"}])

    @patch("src.gateways.dataforseo.httpx.post")
    def test_task_error_status(self, mock_post):
        mock_post.return_value = dfs_response({
            "status_code": 20000,
            "tasks": [{"status_code": 40501, "status_message": "Invalid Field: 'keywords'."}],
        })

        with self.assertRaises(CollaboratorError) as ctx:
            self.gateway.fetch_keyword_metrics(["a"])

        self.assertIn("Invalid Field", ctx.exception.message)

    @patch("src.gateways.dataforseo.httpx.post")
    def test_http_error(self, mock_post):
        mock_post.return_value = dfs_response({"status_message": "Internal error"}, status_code=500)

        with self.assertRaises(CollaboratorError) as ctx:
            self.gateway.fetch_keyword_metrics(["a"])

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertTrue(ctx.exception.message.startswith("DataForSEO"))


if __name__ == "__main__":
    unittest.main()
