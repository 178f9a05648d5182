import json
import logging
import time
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from src.config.config import DeployConfig
from src.gateways.namecheap import NamecheapGateway
from src.gateways.vercel import VercelGateway
from src.repositories import ArticleQueueRepository, ArticleRepository
from src.schemas import (
    ArticleQueueCreate,
    CampaignDeployRequest,
    CampaignDeployResponse,
    SiteDeployResult,
    SiteIn,
)
from src.services.content import ContentService
from src.utils.constants import (
    DomainStatusConst,
    NamecheapConst,
    PublishingInterval,
    SiteStatusConst,
    VercelConst,
)
from src.utils.exceptions import CollaboratorError
from src.utils.utils import get_bare_domain, project_name_from_domain, utc_now


class DeployService:
    """
    Launches every site of a campaign on the hosting platform.

    Sites are processed one after another and independently: a failing site
    is reported in its own result entry and never aborts the batch. Nothing
    already created for a failed site is rolled back.
    """

    def __init__(
        self,
        db: Session,
        content_service: Optional[ContentService] = None,
        vercel: Optional[VercelGateway] = None,
        registrar: Optional[NamecheapGateway] = None,
        config: Optional[DeployConfig] = None,
    ):
        self.db = db
        self.article_repo = ArticleRepository(db)
        self.queue_repo = ArticleQueueRepository(db)
        self.content_service = content_service or ContentService(db)
        self._vercel = vercel
        self.registrar = registrar or NamecheapGateway()
        self.config = config or DeployConfig.from_env()

    @property
    def vercel(self) -> VercelGateway:
        if self._vercel is None:
            self._vercel = VercelGateway()
        return self._vercel

    def deploy_campaign(self, request: CampaignDeployRequest) -> CampaignDeployResponse:
        interval = PublishingInterval.parse(request.publishing_interval)
        # fail fast on missing credentials, before any site is touched
        self.vercel
        self.content_service.gemini

        deployed_at = utc_now()
        logging.info(
            "Deploying %d sites for campaign %s (interval %s)",
            len(request.sites), request.campaign_id, interval.value,
        )
        results = [
            self.deploy_site(request.campaign_id, site, request.keywords, interval, deployed_at, request.purchase_domains)
            for site in request.sites
        ]
        return CampaignDeployResponse(results=results)

    def deploy_site(
        self,
        campaign_id: int,
        site: SiteIn,
        campaign_keywords: List[str],
        interval: PublishingInterval,
        deployed_at: datetime,
        purchase_domain: bool = False,
    ) -> SiteDeployResult:
        domain = get_bare_domain(site.domain)
        result = SiteDeployResult(domain=domain, status=SiteStatusConst.PENDING)

        if not site.has_content():
            result.status = SiteStatusConst.ERROR
            result.error = "Site content is missing; generate content before deploying"
            logging.warning("Skipping %s: %s", domain, result.error)
            return result

        project_name = project_name_from_domain(domain)
        keywords = self.site_keywords(site, campaign_keywords)
        pillars = keywords[: self.config.pillar_article_count]
        remaining = keywords[self.config.pillar_article_count:]

        try:
            result.status = SiteStatusConst.DEPLOYING
            project = self.vercel.create_project(
                project_name, self.config.template_repo, self.site_env(campaign_id, site, domain)
            )
            result.project_id = project["id"]
            result.project_name = project.get("name") or project_name

            result.articles_created = self.create_pillar_articles(campaign_id, domain, pillars)

            deployment = self.vercel.create_deployment(
                result.project_name, result.project_id, self.config.template_repo, self.config.template_ref
            )
            result.deployment_id = deployment.get("id")

            result.queued = self.enqueue_articles(campaign_id, domain, remaining, interval, deployed_at)

            self.vercel.add_domain(result.project_id, domain)
        except Exception as e:
            self.db.rollback()
            result.status = SiteStatusConst.ERROR
            result.error = getattr(e, "message", None) or str(e)
            logging.error("Deployment of %s failed: %s", domain, result.error)
            return result

        result.status = SiteStatusConst.DEPLOYED
        result.url = f"{VercelConst.DASHBOARD_URL}/{result.project_name}"

        if purchase_domain:
            result.domain_status, result.domain_error = self.purchase_domain(domain)

        logging.info("Deployed %s as project %s", domain, result.project_id)
        return result

    def site_env(self, campaign_id: int, site: SiteIn, domain: str) -> Dict[str, str]:
        env = {
            "SITE_CONTENT": json.dumps(site.branding(), ensure_ascii=False),
            "CAMPAIGN_ID": str(campaign_id),
            "SITE_DOMAIN": domain,
        }
        if self.config.lander_database_url:
            env["NEXT_PUBLIC_SUPABASE_URL"] = self.config.lander_database_url
        if self.config.lander_database_key:
            env["NEXT_PUBLIC_SUPABASE_ANON_KEY"] = self.config.lander_database_key
        return env

    @staticmethod
    def site_keywords(site: SiteIn, campaign_keywords: List[str]) -> List[str]:
        """Site keywords (falling back to the campaign's), main keyword first, without repeats."""
        candidates = [site.keyword] + (site.keywords or campaign_keywords)
        keywords = []
        for k in candidates:
            k = (k or "").strip()
            if k and k not in keywords:
                keywords.append(k)
        return keywords

    def create_pillar_articles(self, campaign_id: int, domain: str, keywords: List[str]) -> int:
        created = 0
        for keyword in keywords:
            try:
                article = self.content_service.generate_article(keyword)
                self.article_repo.create(
                    self.content_service.build_article(campaign_id, keyword, article, site_domain=domain)
                )
                created += 1
            except Exception as e:
                self.db.rollback()
                logging.warning("Pillar article %r for %s skipped: %s", keyword, domain, getattr(e, "message", None) or e)
        return created

    def enqueue_articles(
        self,
        campaign_id: int,
        domain: str,
        keywords: List[str],
        interval: PublishingInterval,
        deployed_at: datetime,
    ) -> int:
        items = [
            ArticleQueueCreate(
                campaign_id=campaign_id,
                site_domain=domain,
                keyword=keyword,
                scheduled_at=deployed_at + n * interval.delta,
            )
            for n, keyword in enumerate(keywords, start=1)
        ]
        return self.queue_repo.bulk_create(items)

    def purchase_domain(self, domain: str) -> Tuple[DomainStatusConst, Optional[str]]:
        if not self.registrar.is_configured:
            return DomainStatusConst.REGISTRATION_FAILED, "Registrar credentials are not configured"

        try:
            self.registrar.register(domain)
        except CollaboratorError as e:
            logging.error("Registration of %s failed: %s", domain, e.message)
            return DomainStatusConst.REGISTRATION_FAILED, e.message

        # new registrations reject host updates for a few seconds
        time.sleep(NamecheapConst.DNS_PROPAGATION_DELAY_SECONDS)

        try:
            self.registrar.set_vercel_dns(domain)
        except CollaboratorError as e:
            logging.error("DNS update for %s failed: %s", domain, e.message)
            return DomainStatusConst.DNS_FAILED, e.message

        return DomainStatusConst.CONFIGURED, None
