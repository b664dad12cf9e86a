"""
Service module for scoring content against a user's profile context.

Scores are deterministic and may be negative. Every term is additive, so the
total can be explained as a sum of dosha affinity and in-between phase terms.

Typical usage:
    >>> ctx = ProfileContext(primary_dosha=Dosha.VATA)
    >>> score_content(item, ctx)
    3
"""
from typing import Union

from src.models.content import ContentItem
from src.models.profile import ProfileContext
from src.services.constants import (
    DIFFICULTY_WEIGHTS,
    FOCUS_AREA_WEIGHT,
    GENTLE_CONTENT_KEYWORDS,
    GENTLE_KEYWORD_WEIGHT,
    INTENSITY_KEYWORDS,
    INTENSITY_KEYWORD_WEIGHT,
    NERVOUS_SYSTEM_KEYWORDS,
    NERVOUS_SYSTEM_WEIGHT,
    PRIMARY_DOSHA_WEIGHT,
    RESTORATIVE_CONTENT_TYPES,
    RESTORATIVE_TYPE_WEIGHT,
    SECONDARY_DOSHA_WEIGHT,
    UNIVERSAL_DOSHA_WEIGHT
)

Score = Union[int, float]

def score_dosha_affinity(item: ContentItem, ctx: ProfileContext) -> Score:
    """
    Score how well an item suits the user's doshas.

    Args:
        item: Content item to score
        ctx: Resolved profile context

    Returns:
        +3 for a primary dosha match, +1 for a secondary match and +0.5 for
        content listing all three doshas
    """
    score: Score = 0
    doshas = set(item.doshas)

    if ctx.primary_dosha and ctx.primary_dosha in doshas:
        score += PRIMARY_DOSHA_WEIGHT

    if (
        ctx.secondary_dosha
        and ctx.secondary_dosha != ctx.primary_dosha
        and ctx.secondary_dosha in doshas
    ):
        score += SECONDARY_DOSHA_WEIGHT

    if item.is_universal:
        score += UNIVERSAL_DOSHA_WEIGHT

    return score

def score_in_between_phase(item: ContentItem, ctx: ProfileContext) -> int:
    """
    Score an item for users in a transitional life phase.

    Gentle, stabilizing content is boosted and intense or heating content is
    pushed down hard. The nervous system bonus overlaps the gentle vocabulary
    and the two terms intentionally stack.

    Args:
        item: Content item to score
        ctx: Resolved profile context

    Returns:
        The in-between phase adjustment, 0 for other users
    """
    if not ctx.is_in_between_phase:
        return 0

    score = 0
    corpus = item.search_text

    for keyword in GENTLE_CONTENT_KEYWORDS:
        if keyword in corpus:
            score += GENTLE_KEYWORD_WEIGHT

    for keyword in INTENSITY_KEYWORDS:
        if keyword in corpus:
            score += INTENSITY_KEYWORD_WEIGHT

    if item.difficulty_level is not None:
        score += DIFFICULTY_WEIGHTS.get(item.difficulty_level, 0)

    if item.content_type in RESTORATIVE_CONTENT_TYPES or "restorative" in corpus:
        score += RESTORATIVE_TYPE_WEIGHT

    if any(keyword in corpus for keyword in NERVOUS_SYSTEM_KEYWORDS):
        score += NERVOUS_SYSTEM_WEIGHT

    tags = {tag.lower() for tag in item.tags}
    for focus in ctx.focus_areas:
        focus = focus.lower()
        if focus and (focus in corpus or focus in tags):
            score += FOCUS_AREA_WEIGHT

    return score

def score_content(item: ContentItem, ctx: ProfileContext) -> Score:
    """
    Compute the suitability score of a content item for a profile context.

    Never raises; missing optional fields contribute nothing.

    Args:
        item: Content item to score
        ctx: Resolved profile context

    Returns:
        Signed score, higher is more suitable
    """
    return score_dosha_affinity(item, ctx) + score_in_between_phase(item, ctx)

def is_trimester_mismatch(item: ContentItem, ctx: ProfileContext) -> bool:
    """
    Check if an item is restricted to trimesters other than the user's current one.

    Items without trimester restrictions, users who are not pregnant and
    pregnant users with an unknown trimester never mismatch.
    """
    if not ctx.is_pregnant or ctx.pregnancy_trimester is None or not item.trimesters:
        return False
    return ctx.pregnancy_trimester not in item.trimesters
