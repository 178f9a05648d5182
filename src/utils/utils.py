import re
import unicodedata
from datetime import datetime
from urllib.parse import urlparse

import pytz


def clamp(value: float, min_value: float = 0.0, max_value: float = 10.0) -> float:
    """
    Keep `value` within [min_value, max_value].

    Args:
        value (float): Number to limit.
        min_value (float): Lower bound.
        max_value (float): Upper bound.

    Returns:
        float: The clamped value.
    """
    return max(min_value, min(value, max_value))

def utc_now() -> datetime:
    return datetime.utcnow().replace(tzinfo=pytz.UTC)

def to_int(value, default: int = 0) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default

def to_float(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default

def word_count(phrase: str) -> int:
    return len((phrase or "").split())

def slugify(text: str, max_length: int = 80) -> str:
    """Lower-case ASCII slug: accents stripped, non-alphanumerics collapsed to '-'."""
    normalized = unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")
    return slug[:max_length].rstrip("-")

def get_bare_domain(raw: str) -> str:
    raw = (raw or "").strip()
    if not re.match(r'^https?://', raw, re.IGNORECASE):
        raw = 'https://' + raw  # ensure urlparse works

    parsed = urlparse(raw)
    domain = parsed.netloc or parsed.path

    # Strip port and path remnants
    domain = domain.split(":")[0].split("/")[0].lower()

    if domain.startswith("www."):
        domain = domain[4:]

    return domain.strip(".")

def split_domain(domain: str) -> tuple[str, str]:
    """'brand.co.uk' -> ('brand', 'co.uk')"""
    sld, _, tld = get_bare_domain(domain).partition(".")
    return sld, tld

def project_name_from_domain(domain: str) -> str:
    return re.sub(r"[^a-z0-9-]", "-", get_bare_domain(domain).replace(".", "-"))
