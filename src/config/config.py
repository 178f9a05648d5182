import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from src.utils.exceptions import ConfigurationError

load_dotenv()

def get_database_url():
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    POSTGRES_USER = os.getenv("POSTGRES_USER")
    POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD")
    POSTGRES_HOST = os.getenv("POSTGRES_HOST", "postgres")
    POSTGRES_PORT = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB = os.getenv("POSTGRES_DB")

    if not POSTGRES_USER or not POSTGRES_PASSWORD or not POSTGRES_HOST or not POSTGRES_DB:
        raise ConfigurationError("Missing required database environment variables")

    return f"postgresql+psycopg2://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}"

def get_env(key: str, default: str = None, required: bool = False) -> str:
    value = os.getenv(key, default)
    if required and not value:
        raise ConfigurationError(f"Server configuration error: Missing {key}.")
    return value

def get_bool_env(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class GeminiConfig:
    api_key: str
    model: str = "gemini-2.0-flash"
    timeout: float = 60.0

    @classmethod
    def from_env(cls) -> "GeminiConfig":
        return cls(
            api_key=get_env("GEMINI_API_KEY", required=True),
            model=get_env("GEMINI_MODEL", default="gemini-2.0-flash"),
        )


@dataclass
class DataForSeoConfig:
    username: str
    password: str
    base_url: str = "https://api.dataforseo.com"
    timeout: float = 60.0

    @classmethod
    def from_env(cls) -> "DataForSeoConfig":
        return cls(
            username=get_env("DATAFORSEO_USERNAME", required=True),
            password=get_env("DATAFORSEO_PASSWORD", required=True),
            base_url=get_env("DATAFORSEO_BASE_URL", default="https://api.dataforseo.com"),
        )


@dataclass
class RegistrantContact:
    first_name: str = ""
    last_name: str = ""
    address1: str = ""
    city: str = ""
    state_province: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""
    email_address: str = ""

    @classmethod
    def from_env(cls) -> "RegistrantContact":
        return cls(
            first_name=get_env("NAMECHEAP_CONTACT_FIRST_NAME", default=""),
            last_name=get_env("NAMECHEAP_CONTACT_LAST_NAME", default=""),
            address1=get_env("NAMECHEAP_CONTACT_ADDRESS", default=""),
            city=get_env("NAMECHEAP_CONTACT_CITY", default=""),
            state_province=get_env("NAMECHEAP_CONTACT_STATE", default=""),
            postal_code=get_env("NAMECHEAP_CONTACT_POSTAL_CODE", default=""),
            country=get_env("NAMECHEAP_CONTACT_COUNTRY", default=""),
            phone=get_env("NAMECHEAP_CONTACT_PHONE", default=""),
            email_address=get_env("NAMECHEAP_CONTACT_EMAIL", default=""),
        )


@dataclass
class NamecheapConfig:
    user: str = ""
    api_key: str = ""
    client_ip: str = "0.0.0.0"
    sandbox: bool = False
    contact: RegistrantContact = field(default_factory=RegistrantContact)
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        return bool(self.user and self.api_key)

    @classmethod
    def from_env(cls) -> "NamecheapConfig":
        # Credentials are optional: without them availability checks are mocked
        return cls(
            user=get_env("NAMECHEAP_USER", default=""),
            api_key=get_env("NAMECHEAP_KEY", default=""),
            client_ip=get_env("NAMECHEAP_CLIENT_IP", default="0.0.0.0"),
            sandbox=get_bool_env("NAMECHEAP_SANDBOX"),
            contact=RegistrantContact.from_env(),
        )


@dataclass
class VercelConfig:
    token: str
    team_id: Optional[str] = None
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "VercelConfig":
        return cls(
            token=get_env("VERCEL_API_TOKEN", required=True),
            team_id=get_env("VERCEL_TEAM_ID") or None,
        )


@dataclass
class LocaleConfig:
    language_name: str = "Italian"
    language_code: str = "it"
    location_code: int = 2380

    @classmethod
    def from_env(cls) -> "LocaleConfig":
        return cls(
            language_name=get_env("TARGET_LANGUAGE", default="Italian"),
            language_code=get_env("LANGUAGE_CODE", default="it"),
            location_code=int(get_env("LOCATION_CODE", default="2380")),
        )


@dataclass
class DeployConfig:
    template_repo: str = "Fabriziochiappini/lander-template"
    template_ref: str = "main"
    pillar_article_count: int = 3
    lander_database_url: str = ""
    lander_database_key: str = ""

    @classmethod
    def from_env(cls) -> "DeployConfig":
        return cls(
            template_repo=get_env("LANDER_TEMPLATE_REPO", default="Fabriziochiappini/lander-template"),
            template_ref=get_env("LANDER_TEMPLATE_REF", default="main"),
            pillar_article_count=int(get_env("PILLAR_ARTICLE_COUNT", default="3")),
            lander_database_url=get_env("NEXT_PUBLIC_SUPABASE_URL", default=""),
            lander_database_key=get_env("NEXT_PUBLIC_SUPABASE_ANON_KEY", default=""),
        )
