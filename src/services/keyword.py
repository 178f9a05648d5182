import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from src.config.config import LocaleConfig, get_env
from src.gateways.dataforseo import DataForSeoGateway
from src.gateways.gemini import GeminiGateway
from src.repositories import CampaignRepository, KeywordRepository
from src.schemas import CampaignAnalyzeRequest, CampaignCreate, KeywordMetrics, TopicAnalysisResult
from src.utils.constants import KeywordConst, MetricsSourceConst
from src.utils.decorators import try_except_decorator_no_raise
from src.utils.exceptions import AnalysisError, CollaboratorError, MalformedGenerationOutput
from src.utils.ranking import needs_enrichment, rank_keywords, to_keywords, zero_volume_phrases


class KeywordService:
    """
    Campaign keyword analysis: long-tail generation, metrics, one optional
    enrichment round, then deterministic ranking.

    Collaborators are built lazily so request validation runs before any
    credential is required.
    """

    def __init__(
        self,
        db: Session,
        gemini: Optional[GeminiGateway] = None,
        metrics: Optional[DataForSeoGateway] = None,
        locale: Optional[LocaleConfig] = None,
        metrics_source: Optional[str] = None,
    ):
        self.campaign_repo = CampaignRepository(db)
        self.keyword_repo = KeywordRepository(db)
        self._gemini = gemini
        self._metrics = metrics
        self.locale = locale or LocaleConfig.from_env()
        self.metrics_source = (
            metrics_source
            or get_env("KEYWORD_METRICS_SOURCE", default=MetricsSourceConst.DATAFORSEO)
        ).strip().lower()

    @property
    def gemini(self) -> GeminiGateway:
        if self._gemini is None:
            self._gemini = GeminiGateway()
        return self._gemini

    @property
    def metrics(self) -> DataForSeoGateway:
        if self._metrics is None:
            self._metrics = DataForSeoGateway(locale=self.locale)
        return self._metrics

    def analyze(self, request: CampaignAnalyzeRequest) -> TopicAnalysisResult:
        topic = (request.topic or "").strip()
        description = (request.business_description or "").strip()
        if not topic or not description:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Topic and business description are required",
            )

        logging.info("Analyzing topic %r (metrics source: %s)", topic, self.metrics_source)
        keywords = rank_keywords(self.collect_keywords(topic, description))
        if not keywords:
            raise AnalysisError()

        campaign_id = self.save_analysis(topic, description, keywords)

        return TopicAnalysisResult(
            name="TOPIC 1",
            description=f'AI-driven analysis of "{topic}"',
            keywords=keywords,
            campaign_id=campaign_id,
        )

    def collect_keywords(self, topic: str, description: str) -> List[KeywordMetrics]:
        """Unranked working set: Round 1, plus Round 2 when Round 1 yields too little volume."""
        if self.metrics_source == MetricsSourceConst.GEMINI:
            return to_keywords(self.estimate_metrics(topic, description))

        phrases = self.generate_long_tail(topic, description)
        working = self.fetch_metrics(phrases)

        if needs_enrichment(working):
            seeds = zero_volume_phrases(working) or phrases[: KeywordConst.MAX_ENRICHMENT_SEEDS]
            logging.info("Round 1 yielded too few keywords with volume; enriching from %d seeds", len(seeds))
            try:
                working.extend(self.fetch_metrics(self.generate_broad_variations(seeds)))
            except CollaboratorError as e:
                logging.warning("Round 2 enrichment failed, keeping Round 1 results: %s", e.message)

        return working

    def fetch_metrics(self, phrases: List[str]) -> List[KeywordMetrics]:
        raw = list(self.metrics.fetch_keyword_metrics(phrases))
        # phrases without data still count, with zero metrics; the service lower-cases keywords
        returned = {str(item.get("keyword") or "").strip().lower() for item in raw}
        raw.extend({"keyword": p} for p in phrases if p.strip().lower() not in returned)
        return to_keywords(raw)

    def generate_long_tail(self, topic: str, description: str) -> List[str]:
        value = self.gemini.generate_json(self._long_tail_prompt(topic, description), list, key="keywords")
        return self._phrases(value)

    def generate_broad_variations(self, phrases: List[str]) -> List[str]:
        value = self.gemini.generate_json(self._broad_prompt(phrases), list, key="keywords")
        return self._phrases(value)

    def estimate_metrics(self, topic: str, description: str) -> List[Dict[str, Any]]:
        value = self.gemini.generate_json(self._estimate_prompt(topic, description), list, key="keywords")
        if not all(isinstance(item, dict) for item in value):
            raise MalformedGenerationOutput("expected a JSON array of keyword objects")
        return value

    def save_analysis(self, topic: str, description: str, keywords: List[KeywordMetrics]) -> Optional[int]:
        campaign = self._save_campaign(topic, description)
        if campaign is None:
            return None
        self._save_keywords(campaign.id, keywords)
        return campaign.id

    @try_except_decorator_no_raise(fallback_value=None)
    def _save_campaign(self, topic: str, description: str):
        return self.campaign_repo.create(CampaignCreate(topic=topic, description=description))

    @try_except_decorator_no_raise(fallback_value=0)
    def _save_keywords(self, campaign_id: int, keywords: List[KeywordMetrics]) -> int:
        return self.keyword_repo.bulk_create(campaign_id, keywords)

    @staticmethod
    def _phrases(value: List[Any]) -> List[str]:
        if not all(isinstance(item, str) for item in value):
            raise MalformedGenerationOutput("expected a JSON array of strings")
        phrases = [item.strip() for item in value if item.strip()]
        if not phrases:
            raise MalformedGenerationOutput("no keyword phrases in response")
        return phrases

    def _long_tail_prompt(self, topic: str, description: str) -> str:
        language = self.locale.language_name
        return f"""
You are an SEO keyword researcher for the {language}-speaking market.

TASK
Generate {KeywordConst.LONG_TAIL_TARGET} long-tail search phrases for the business below.
- Each phrase is 3 to 6 words long and written in {language}.
- Prefer high commercial intent: buying, pricing, hiring, comparing, booking, local service.
- No duplicates, no numbering, no brand names of competitors.

TOPIC: {topic}
BUSINESS DESCRIPTION: {description}

OUTPUT
Return exactly one JSON array of strings and nothing else:
["phrase one", "phrase two"]
"""

    def _broad_prompt(self, phrases: List[str]) -> str:
        language = self.locale.language_name
        phrase_block = "\n".join(phrases)
        return f"""
You are an SEO keyword researcher for the {language}-speaking market.

TASK
The phrases below are too specific and have no measurable search volume.
Suggest {KeywordConst.BROAD_VARIATION_TARGET} broader variations (2 to 4 words, in {language})
that real users search for, keeping the same commercial intent.

PHRASES START
{phrase_block}
PHRASES END

OUTPUT
Return exactly one JSON array of strings and nothing else:
["variation one", "variation two"]
"""

    def _estimate_prompt(self, topic: str, description: str) -> str:
        language = self.locale.language_name
        return f"""
You are an SEO analyst with access to typical search statistics for the {language}-speaking market.

TASK
1. Generate {KeywordConst.LONG_TAIL_TARGET} long-tail search phrases (3 to 6 words, in {language})
   with high commercial intent for the business below.
2. For each phrase estimate the monthly search volume (integer), the advertiser
   competition (number between 0 and 1) and the cost per click in EUR.

TOPIC: {topic}
BUSINESS DESCRIPTION: {description}

OUTPUT
Return exactly one JSON array and nothing else:
[
  {{"keyword": "phrase", "search_volume": 90, "competition": 0.35, "cpc": 1.2}}
]
"""
