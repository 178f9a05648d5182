"""Deterministic keyword ranking.

Everything here is pure: the service layer decides when to run the Round 2
enrichment, these helpers only classify, deduplicate, filter, sort and
truncate what they are given.
"""

from typing import Any, Dict, Iterable, List, Optional

from src.schemas.keyword import KeywordMetrics
from src.utils.constants import CompetitionLevel, KeywordConst
from src.utils.utils import clamp, to_float, to_int, word_count


def competition_level(competition: float) -> CompetitionLevel:
    if competition < KeywordConst.LOW_COMPETITION_MAX:
        return CompetitionLevel.LOW
    if competition < KeywordConst.MEDIUM_COMPETITION_MAX:
        return CompetitionLevel.MEDIUM
    return CompetitionLevel.HIGH


def to_keyword(raw: Dict[str, Any]) -> Optional[KeywordMetrics]:
    """Map one raw metrics object to a KeywordMetrics; None when the phrase is blank."""
    phrase = str(raw.get("keyword") or "").strip()
    if not phrase:
        return None

    competition = clamp(to_float(raw.get("competition")), 0.0, 1.0)
    return KeywordMetrics(
        keyword=phrase,
        search_volume=max(0, to_int(raw.get("search_volume"))),
        competition=competition,
        cpc=max(0.0, to_float(raw.get("cpc"))),
        competition_level=competition_level(competition),
    )


def to_keywords(raw_items: Iterable[Dict[str, Any]]) -> List[KeywordMetrics]:
    keywords = []
    for raw in raw_items or []:
        if not isinstance(raw, dict):
            continue
        keyword = to_keyword(raw)
        if keyword is not None:
            keywords.append(keyword)
    return keywords


def count_with_volume(keywords: Iterable[KeywordMetrics]) -> int:
    return sum(1 for k in keywords if k.search_volume > 0)


def needs_enrichment(keywords: List[KeywordMetrics]) -> bool:
    return count_with_volume(keywords) < KeywordConst.MIN_VALID_KEYWORDS


def zero_volume_phrases(keywords: Iterable[KeywordMetrics]) -> List[str]:
    return [k.keyword for k in keywords if k.search_volume == 0][: KeywordConst.MAX_ENRICHMENT_SEEDS]


def dedupe(keywords: Iterable[KeywordMetrics]) -> List[KeywordMetrics]:
    # exact string match, first occurrence wins
    seen = set()
    unique = []
    for k in keywords:
        if k.keyword in seen:
            continue
        seen.add(k.keyword)
        unique.append(k)
    return unique


def is_acceptable(keyword: KeywordMetrics) -> bool:
    # ultra long-tail phrases are kept even without measured volume
    return keyword.search_volume > 0 or word_count(keyword.keyword) >= KeywordConst.MIN_LONG_TAIL_WORDS


def rank_keywords(keywords: Iterable[KeywordMetrics]) -> List[KeywordMetrics]:
    """Dedupe, drop unacceptable phrases, sort by volume desc then competition asc, keep the top 30."""
    kept = [k for k in dedupe(keywords) if is_acceptable(k)]
    kept.sort(key=lambda k: (-k.search_volume, k.competition))
    return kept[: KeywordConst.MAX_RESULTS]
