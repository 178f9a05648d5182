from typing import Any, Dict, List, Optional

import httpx

from src.config.config import DataForSeoConfig, LocaleConfig
from src.utils.constants import DataForSeoConst
from src.utils.decorators import try_except_decorator
from src.utils.exceptions import CollaboratorError

_OK_STATUS = 20000


def safe_get_items(response: Dict) -> List[Dict]:
    """Items of the first task's first result; empty list when any level is missing."""
    tasks = response.get("tasks")
    if not tasks or not isinstance(tasks, list):
        return []
    result = (tasks[0] or {}).get("result")
    if not result or not isinstance(result, list):
        return []
    first_result = result[0]
    if not first_result or not isinstance(first_result, dict):
        return []
    return first_result.get("items") or []


class DataForSeoGateway:
    def __init__(self, config: Optional[DataForSeoConfig] = None, locale: Optional[LocaleConfig] = None) -> None:
        self.config = config or DataForSeoConfig.from_env()
        self.locale = locale or LocaleConfig.from_env()

    @try_except_decorator("DataForSEO")
    def fetch_keyword_metrics(self, phrases: List[str]) -> List[Dict[str, Any]]:
        if not phrases:
            return []

        payload = [{
            "keywords": phrases,
            "location_code": self.locale.location_code,
            "language_code": self.locale.language_code,
        }]
        response = httpx.post(
            f"{self.config.base_url}{DataForSeoConst.KEYWORD_OVERVIEW_PATH}",
            json=payload,
            auth=(self.config.username, self.config.password),
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        data = response.json()

        self._raise_for_api_status(data)

        metrics = []
        for item in safe_get_items(data):
            info = item.get("keyword_info") or {}
            metrics.append({
                "keyword": item.get("keyword"),
                "search_volume": info.get("search_volume") or 0,
                "competition": info.get("competition") or 0,
                "cpc": info.get("cpc") or 0,
            })
        return metrics

    @staticmethod
    def _raise_for_api_status(data: Dict) -> None:
        # HTTP 200 can still carry an error status at response or task level
        if data.get("status_code") not in (None, _OK_STATUS):
            raise CollaboratorError("DataForSEO", data.get("status_message") or "request rejected")
        tasks = data.get("tasks") or []
        if tasks and isinstance(tasks[0], dict) and tasks[0].get("status_code") not in (None, _OK_STATUS):
            raise CollaboratorError("DataForSEO", tasks[0].get("status_message") or "task rejected")
