from typing import Any

from src.triage.catalog import GuideCatalog, default_catalog
from src.triage.intents import INTENT_RULES, IntentRule, intent_boost
from src.triage.models import Guide, GuideSummary, Platform, coerce_platform
from src.triage.normalizer import normalize, token_set

MAX_RESULTS = 20

OVERLAP_WEIGHT = 1.1
KEYWORD_BONUS = 1.5
PHRASE_BONUS = 0.8
DEVICE_BONUS = 0.5


def build_haystack(guide: Guide) -> str:
    parts = [guide.title, guide.category, guide.why, *guide.keywords]
    return " ".join(part for part in parts if part).lower()


def score_guide(
    guide: Guide,
    tokens: list[str],
    raw_query: str,
    device: Platform | None = None,
    rules: tuple[IntentRule, ...] = INTENT_RULES,
) -> float:
    haystack = build_haystack(guide)
    query_tokens = set(tokens)
    score = 0.0

    overlap = len(query_tokens & token_set(haystack))
    score += overlap * OVERLAP_WEIGHT

    if any(keyword.lower() in query_tokens for keyword in guide.keywords):
        score += KEYWORD_BONUS

    phrase = raw_query.strip().lower()
    if phrase and phrase in haystack:
        score += PHRASE_BONUS

    score += intent_boost(raw_query, haystack, rules)

    if device is not None and guide.steps.supports(device):
        score += DEVICE_BONUS

    return score


def rank_guides(
    query: str,
    device: Platform | None,
    catalog: GuideCatalog,
) -> list[tuple[float, Guide]]:
    tokens = normalize(query)
    if not tokens:
        return []

    scored = [(score_guide(guide, tokens, query, device), guide) for guide in catalog]
    positives = [item for item in scored if item[0] > 0]
    # sort() is stable, so equal scores keep catalog declaration order.
    positives.sort(key=lambda item: item[0], reverse=True)
    return positives


def triage(
    query: Any,
    device: Any = None,
    *,
    catalog: GuideCatalog | None = None,
    category: str | None = None,
    limit: int = MAX_RESULTS,
) -> list[GuideSummary]:
    """Rank catalog guides against a free-text support request.

    Unmatched, empty, or non-string queries return an empty list. A device tag
    that is not a known platform is ignored rather than rejected.
    """
    if not isinstance(query, str):
        return []
    snapshot = catalog if catalog is not None else default_catalog()
    ranked = rank_guides(query, coerce_platform(device), snapshot)
    summaries = [guide.summary() for _, guide in ranked[: max(limit, 0)]]
    if category:
        summaries = [summary for summary in summaries if summary.category == category]
    return summaries
