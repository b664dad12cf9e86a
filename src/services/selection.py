"""
Service module for selecting a bounded, type-diverse set of recommendations.

Typical usage:
    >>> content_ids = select_recommendations(candidates, ctx, max_items=6)
"""
from typing import Iterable, List, Optional, Sequence

from aws_lambda_powertools import Logger

from src.models.content import ContentItem
from src.models.profile import ProfileContext
from src.models.recommendation import ScoredCandidate
from src.services.constants import (
    DEFAULT_MAX_RECOMMENDATIONS,
    DIVERSITY_CONTENT_TYPES,
    PREGNANT_STATUS
)
from src.services.profile_context import is_actively_cycling
from src.services.scoring import is_trimester_mismatch, score_content

logger = Logger()

def filter_candidates(candidates: Iterable[ContentItem], ctx: ProfileContext) -> List[ContentItem]:
    """
    Apply the eligibility gates that run before scoring.

    Pregnancy safety is an exclusion gate: pregnant users only see content
    marked safe for pregnancy and matching their trimester. Actively cycling
    users outside the in-between phases only see content for their cycle phase.

    Args:
        candidates: Candidate content in catalog order
        ctx: Resolved profile context

    Returns:
        Eligible candidates, preserving input order
    """
    eligible = [item for item in candidates if item.is_active]

    if ctx.is_pregnant:
        return [
            item for item in eligible
            if PREGNANT_STATUS in item.pregnancy_statuses
            and not is_trimester_mismatch(item, ctx)
        ]

    if not ctx.is_in_between_phase and is_actively_cycling(ctx.life_stage) and ctx.cycle_phase:
        return [item for item in eligible if ctx.cycle_phase in item.cycle_phases]

    return eligible

def rank_candidates(candidates: Iterable[ContentItem], ctx: ProfileContext) -> List[ScoredCandidate]:
    """
    Filter and score candidates, highest score first.

    Ties keep their input order (sorted() is stable).
    """
    scored = [
        ScoredCandidate(item=item, score=score_content(item, ctx), context=ctx)
        for item in filter_candidates(candidates, ctx)
    ]
    return sorted(scored, key=lambda c: c.score, reverse=True)

def pick_diverse(
    ranked: Sequence[ScoredCandidate],
    max_items: int,
    content_types: Sequence[str] = DIVERSITY_CONTENT_TYPES
) -> List[ContentItem]:
    """
    Pick the best item of each content type, then fill remaining slots by score.

    Args:
        ranked: Scored candidates, best first
        max_items: Maximum number of items to return
        content_types: Content types to try to represent, in order

    Returns:
        Selected items without duplicate ids
    """
    selected: List[ContentItem] = []
    selected_ids = set()

    if max_items <= 0:
        return selected

    for content_type in content_types:
        if len(selected) >= max_items:
            break
        for candidate in ranked:
            item = candidate.item
            if item.content_type == content_type and item.id not in selected_ids:
                selected.append(item)
                selected_ids.add(item.id)
                break

    for candidate in ranked:
        if len(selected) >= max_items:
            break
        if candidate.item.id not in selected_ids:
            selected.append(candidate.item)
            selected_ids.add(candidate.item.id)

    return selected

def select_recommendations(
    candidates: Iterable[ContentItem],
    ctx: ProfileContext,
    max_items: Optional[int] = None
) -> List[str]:
    """
    Select the daily recommendations for a profile context.

    An empty result is valid and means no content is eligible today.

    Args:
        candidates: Candidate content in catalog order
        ctx: Resolved profile context
        max_items: Maximum number of ids, defaults to DEFAULT_MAX_RECOMMENDATIONS

    Returns:
        Ordered content ids, at most max_items long, no duplicates
    """
    if max_items is None:
        max_items = DEFAULT_MAX_RECOMMENDATIONS

    ranked = rank_candidates(candidates, ctx)
    selected = pick_diverse(ranked, max_items)

    logger.debug("Selected recommendations", extra={
        "eligible": len(ranked),
        "selected": len(selected),
        "max_items": max_items
    })
    return [item.id for item in selected]
