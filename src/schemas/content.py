from pydantic import Field

from .base import CamelModel


class SiteContentRequest(CamelModel):
    domain: str
    keyword: str


class SiteContent(CamelModel):
    brand_name: str
    hero_title: str
    hero_subtitle: str
    service_description: str = ""
    cta_text: str = ""


class GeneratedArticle(CamelModel):
    title: str
    slug: str = ""
    excerpt: str = ""
    content: str
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    image_search_term: str = ""
