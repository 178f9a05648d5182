import logging
from typing import Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from src.config.config import LocaleConfig
from src.gateways.gemini import GeminiGateway
from src.gateways.namecheap import NamecheapGateway
from src.schemas import (
    DomainCheckAllRequest,
    DomainCheckRequest,
    DomainCheckResult,
    DomainGenerateRequest,
    DomainGenerateResponse,
)
from src.utils.constants import DomainConst, NamecheapConst
from src.utils.exceptions import CollaboratorError, MalformedGenerationOutput
from src.utils.utils import get_bare_domain, split_domain


class DomainService:
    def __init__(
        self,
        db: Session,
        gemini: Optional[GeminiGateway] = None,
        registrar: Optional[NamecheapGateway] = None,
        locale: Optional[LocaleConfig] = None,
    ):
        # db not used, kept for DI compatibility
        self.db = db
        self._gemini = gemini
        self.registrar = registrar or NamecheapGateway()
        self.locale = locale or LocaleConfig.from_env()
        self._tld_prices: Dict[str, Optional[float]] = {}

    @property
    def gemini(self) -> GeminiGateway:
        if self._gemini is None:
            self._gemini = GeminiGateway()
        return self._gemini

    # Domain ideas
    def generate(self, request: DomainGenerateRequest) -> DomainGenerateResponse:
        topic = (request.topic or "").strip()
        if not topic:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic is required")
        return DomainGenerateResponse(domains=self.generate_domain_names(topic, request.keywords))

    def generate_domain_names(self, topic: str, keywords: List[str]) -> List[str]:
        top_keywords = [k.strip() for k in keywords if k and k.strip()][: DomainConst.MAX_CONTEXT_KEYWORDS]
        value = self.gemini.generate_json(self._domain_prompt(topic, top_keywords), list, key="domains")
        if not all(isinstance(item, str) for item in value):
            raise MalformedGenerationOutput("expected a JSON array of domain names")

        domains = []
        for item in value:
            domain = get_bare_domain(item).replace(" ", "")
            if "." in domain:
                domains.append(domain)
        logging.info("Generated %d domain ideas for %r", len(domains), topic)
        return domains

    # Availability
    def check(self, request: DomainCheckRequest) -> DomainCheckResult:
        domain = self._validated_domain(request.domain)
        return self.check_availability(domain)

    def check_all(self, request: DomainCheckAllRequest) -> List[DomainCheckResult]:
        domains = [self._validated_domain(d) for d in request.domains]
        # one registrar call at a time
        return [self.check_availability(d) for d in domains]

    def check_availability(self, domain: str) -> DomainCheckResult:
        if not self.registrar.is_configured:
            logging.warning("Mocking domain availability for %s (no registrar credentials)", domain)
            return DomainCheckResult(
                domain=domain,
                available=True,
                price=NamecheapConst.MOCK_PRICE,
                currency=NamecheapConst.CURRENCY,
                mock=True,
            )

        try:
            result = self.registrar.check(domain)
            price = None
            if result["premium"]:
                price = result["premium_price"]
            elif result["available"]:
                price = self._tld_price(split_domain(domain)[1])
        except CollaboratorError as e:
            logging.error("Availability check failed for %s: %s", domain, e.message)
            return DomainCheckResult(domain=domain, available=False, error=e.message)

        return DomainCheckResult(
            domain=domain,
            available=result["available"],
            price=price,
            currency=NamecheapConst.CURRENCY,
            premium=result["premium"],
        )

    def _tld_price(self, tld: str) -> Optional[float]:
        if tld not in self._tld_prices:
            self._tld_prices[tld] = self.registrar.get_tld_price(tld)
        return self._tld_prices[tld]

    @staticmethod
    def _validated_domain(raw: str) -> str:
        domain = get_bare_domain(raw or "")
        if not domain:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Domain is required")
        if "." not in domain:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid domain format")
        return domain

    def _domain_prompt(self, topic: str, keywords: List[str]) -> str:
        language = self.locale.language_name
        suffixes = ", ".join(DomainConst.TLD_MIX)
        keyword_line = ", ".join(keywords) if keywords else "(none)"
        return f"""
You are a naming expert for SEO lander networks.

TASK
Suggest {DomainConst.TARGET_COUNT} domain names for the topic "{topic}".
- Mix brandable names and exact-match names built from the keywords, in {language}.
- Spread the names across these suffixes: {suffixes}.
- Only letters, digits and hyphens before the suffix; no spaces, no "www", no scheme.

KEYWORDS: {keyword_line}

OUTPUT
Return exactly one JSON array of strings and nothing else:
["example.com", "example.it"]
"""
