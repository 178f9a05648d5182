from typing import Optional

from pydantic import Field

from .base import CamelModel


class DomainGenerateRequest(CamelModel):
    topic: str = ""
    keywords: list[str] = Field(default_factory=list)


class DomainGenerateResponse(CamelModel):
    domains: list[str]


class DomainCheckRequest(CamelModel):
    domain: str = ""


class DomainCheckAllRequest(CamelModel):
    domains: list[str] = Field(default_factory=list)


class DomainCheckResult(CamelModel):
    domain: str
    available: bool
    price: Optional[float] = None
    currency: str = "USD"
    premium: bool = False
    mock: bool = False
    error: Optional[str] = None
