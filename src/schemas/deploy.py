from typing import Literal, Optional

from pydantic import Field

from src.utils.constants import DomainStatusConst, SiteStatusConst
from .base import CamelModel


class SiteIn(CamelModel):
    domain: str
    keyword: str = ""
    keywords: list[str] = Field(default_factory=list)
    brand_name: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    service_description: Optional[str] = None
    cta_text: Optional[str] = None

    def has_content(self) -> bool:
        return all((self.brand_name, self.hero_title, self.hero_subtitle))

    def branding(self) -> dict:
        """Content handed to the lander template as SITE_CONTENT."""
        return {
            "brandName": self.brand_name,
            "heroTitle": self.hero_title,
            "heroSubtitle": self.hero_subtitle,
            "serviceDescription": self.service_description or "",
            "ctaText": self.cta_text or "",
            "keyword": self.keyword,
        }


class CampaignDeployRequest(CamelModel):
    campaign_id: int
    sites: list[SiteIn]
    keywords: list[str] = Field(default_factory=list)
    publishing_interval: Literal["5m", "1d", "7d", "30d"] = "1d"
    purchase_domains: bool = False


class SiteDeployResult(CamelModel):
    domain: str
    status: SiteStatusConst
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    url: Optional[str] = None
    deployment_id: Optional[str] = None
    articles_created: int = 0
    queued: int = 0
    domain_status: DomainStatusConst = DomainStatusConst.SKIPPED
    domain_error: Optional[str] = None
    error: Optional[str] = None


class CampaignDeployResponse(CamelModel):
    results: list[SiteDeployResult]
