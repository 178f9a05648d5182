import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote_plus

from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from src.config.config import LocaleConfig
from src.gateways.gemini import GeminiGateway
from src.schemas import ArticleCreate, GeneratedArticle, SiteContent, SiteContentRequest
from src.utils.constants import ArticleConst
from src.utils.exceptions import MalformedGenerationOutput
from src.utils.utils import slugify, utc_now


class ContentService:
    def __init__(
        self,
        db: Session,
        gemini: Optional[GeminiGateway] = None,
        locale: Optional[LocaleConfig] = None,
    ):
        # db not used, kept for DI compatibility
        self.db = db
        self._gemini = gemini
        self.locale = locale or LocaleConfig.from_env()

    @property
    def gemini(self) -> GeminiGateway:
        if self._gemini is None:
            self._gemini = GeminiGateway()
        return self._gemini

    def generate(self, request: SiteContentRequest) -> SiteContent:
        domain = (request.domain or "").strip()
        keyword = (request.keyword or "").strip()
        if not domain or not keyword:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Domain and keyword are required",
            )
        return self.generate_site_content(domain, keyword)

    def generate_site_content(self, domain: str, keyword: str) -> SiteContent:
        logging.info("[Content Generate] Starting for domain=%s, keyword=%s", domain, keyword)
        value = self.gemini.generate_json(self._site_prompt(domain, keyword), dict)
        try:
            return SiteContent.model_validate(value)
        except ValidationError as e:
            raise MalformedGenerationOutput(f"landing page content is incomplete: {e.error_count()} invalid fields") from e

    def generate_article(self, keyword: str) -> GeneratedArticle:
        """Long-form HTML article for *keyword*; the slug is always normalised."""
        value = self.gemini.generate_json(self._article_prompt(keyword), dict)
        try:
            article = GeneratedArticle.model_validate(value)
        except ValidationError as e:
            raise MalformedGenerationOutput(f"article is incomplete: {e.error_count()} invalid fields") from e

        article.slug = slugify(article.slug or article.title) or slugify(keyword)
        article.tags = [t.strip() for t in article.tags if t and t.strip()]
        return article

    @staticmethod
    def image_url(search_term: str) -> Optional[str]:
        if not search_term:
            return None
        return f"{ArticleConst.IMAGE_URL}?{quote_plus(search_term)}"

    def build_article(
        self,
        campaign_id: int,
        keyword: str,
        article: GeneratedArticle,
        site_domain: Optional[str] = None,
        published_at: Optional[datetime] = None,
    ) -> ArticleCreate:
        return ArticleCreate(
            campaign_id=campaign_id,
            site_domain=site_domain,
            keyword=keyword,
            title=article.title,
            slug=article.slug,
            excerpt=article.excerpt,
            content=article.content,
            category=article.category,
            tags=article.tags,
            image_url=self.image_url(article.image_search_term),
            published_at=published_at or utc_now(),
        )

    def _site_prompt(self, domain: str, keyword: str) -> str:
        language = self.locale.language_name
        return f"""
You are a conversion copywriter building a one-page lander.

TASK
Write the landing page copy in {language} for the website "{domain}",
targeting the search phrase "{keyword}".
- brandName: short brand derived from the domain name.
- heroTitle: headline under 70 characters containing the search phrase.
- heroSubtitle: one persuasive sentence.
- serviceDescription: two short paragraphs describing the service.
- ctaText: call-to-action button label, at most 4 words.

OUTPUT
Return exactly one valid JSON object and nothing else:

{{
  "brandName": "",
  "heroTitle": "",
  "heroSubtitle": "",
  "serviceDescription": "",
  "ctaText": ""
}}
"""

    def _article_prompt(self, keyword: str) -> str:
        language = self.locale.language_name
        return f"""
You are an expert SEO content writer.

TASK
Write a long-form, original article in {language} for the search phrase "{keyword}".
- At least 1200 words, structured with <h2> and <h3> headings.
- content is HTML (paragraphs, lists, headings); no <html>, <head> or <body> tags.
- excerpt is one or two sentences, plain text.
- category is a single short label, tags are 3 to 6 short labels.
- imageSearchTerm is 1 to 3 English words describing a fitting stock photo.

OUTPUT
Return exactly one valid JSON object and nothing else:

{{
  "title": "",
  "slug": "",
  "excerpt": "",
  "content": "",
  "category": "",
  "tags": [],
  "imageSearchTerm": ""
}}
"""
