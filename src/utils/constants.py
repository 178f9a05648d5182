from datetime import timedelta
from enum import Enum

APP_ID = "adseo-v2"

class GeminiConst:
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    RESPONSE_MIME_TYPE = "application/json"

class DataForSeoConst:
    KEYWORD_OVERVIEW_PATH = "/v3/dataforseo_labs/google/keyword_overview/live"

class NamecheapConst:
    PROD_URL = "https://api.namecheap.com/xml.response"
    SANDBOX_URL = "https://api.sandbox.namecheap.com/xml.response"
    CHECK_COMMAND = "namecheap.domains.check"
    PRICING_COMMAND = "namecheap.users.getPricing"
    CREATE_COMMAND = "namecheap.domains.create"
    SET_DNS_COMMAND = "namecheap.domains.dns.setCustom"
    VERCEL_NAMESERVERS = "ns1.vercel-dns.com,ns2.vercel-dns.com"
    CONTACT_ROLES = ("Registrant", "Tech", "Admin", "AuxBilling")
    CURRENCY = "USD"
    MOCK_PRICE = 9.98
    DNS_PROPAGATION_DELAY_SECONDS = 5

class VercelConst:
    BASE_URL = "https://api.vercel.com"
    PROJECTS_PATH = "/v10/projects"
    DEPLOYMENTS_PATH = "/v13/deployments"
    FRAMEWORK = "nextjs"
    ENV_TARGETS = ["production", "preview", "development"]
    DASHBOARD_URL = "https://vercel.com/dashboard/projects"

class KeywordConst:
    LONG_TAIL_TARGET = 40
    BROAD_VARIATION_TARGET = 20
    MIN_VALID_KEYWORDS = 15
    MAX_ENRICHMENT_SEEDS = 20
    MIN_LONG_TAIL_WORDS = 4
    MAX_RESULTS = 30
    LOW_COMPETITION_MAX = 0.3
    MEDIUM_COMPETITION_MAX = 0.7

class MetricsSourceConst:
    DATAFORSEO = "dataforseo"
    GEMINI = "gemini"

class DomainConst:
    TARGET_COUNT = 20
    MAX_CONTEXT_KEYWORDS = 5
    TLD_MIX = (".com", ".it", ".net", ".org", ".online")

class ArticleConst:
    IMAGE_URL = "https://source.unsplash.com/featured/"
    DRIP_FEED_BATCH_SIZE = 5

class CompetitionLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

class QueueStatusConst(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

class SiteStatusConst(str, Enum):
    PENDING = "pending"
    GENERATING = "generating"
    READY = "ready"
    DEPLOYING = "deploying"
    DEPLOYED = "deployed"
    ERROR = "error"

class DomainStatusConst(str, Enum):
    SKIPPED = "skipped"
    CONFIGURED = "configured"
    REGISTRATION_FAILED = "registration_failed"
    DNS_FAILED = "dns_failed"

class PublishingInterval(Enum):
    FIVE_MINUTES = ("5m", timedelta(minutes=5))
    ONE_DAY      = ("1d", timedelta(days=1))
    SEVEN_DAYS   = ("7d", timedelta(days=7))
    THIRTY_DAYS  = ("30d", timedelta(days=30))

    def __init__(self, code: str, delta: timedelta):
        self._value_ = code       # literal accepted by the API
        self.delta = delta

    @classmethod
    def _missing_(cls, value):
        for m in cls:
            if value == m._value_:
                return m
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")

    @classmethod
    def parse(cls, v) -> "PublishingInterval":
        if isinstance(v, cls):
            return v
        for m in cls:
            if v in {m.name, m.value}:
                return m
        raise ValueError(f"{v!r} is not a supported publishing interval")
