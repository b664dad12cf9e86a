"""
Service module for picking short, beginner-friendly starter practices.
"""
from typing import Iterable, List

from src.models.content import ContentItem
from src.services.constants import (
    CONFIDENCE_TAGS,
    STARTER_DIFFICULTY_LEVELS,
    STARTER_DIFFICULTY_WEIGHTS,
    STARTER_DURATION_BONUSES,
    STARTER_MAX_DURATION_MINUTES,
    STARTER_PRACTICE_LIMIT
)

def is_starter_candidate(item: ContentItem) -> bool:
    """Check if an item is active, gentle enough and at most 20 minutes long."""
    return (
        item.is_active
        and item.difficulty_level in STARTER_DIFFICULTY_LEVELS
        and item.duration_minutes is not None
        and item.duration_minutes <= STARTER_MAX_DURATION_MINUTES
    )

def score_starter_practice(item: ContentItem) -> int:
    """Score an item for confidence building: gentle tags, short sessions, easy levels."""
    score = 0
    item_tags = [t.lower() for t in item.tags]
    title = item.title.lower()
    description = (item.description or "").lower()

    for tag in CONFIDENCE_TAGS:
        if any(tag in item_tag for item_tag in item_tags):
            score += 2
        if tag in title:
            score += 1
        if tag in description:
            score += 1

    if item.duration_minutes:
        for max_minutes, bonus in STARTER_DURATION_BONUSES:
            if item.duration_minutes <= max_minutes:
                score += bonus
                break

    if item.difficulty_level is not None:
        score += STARTER_DIFFICULTY_WEIGHTS.get(item.difficulty_level, 0)

    return score

def select_starter_practices(
    candidates: Iterable[ContentItem],
    limit: int = STARTER_PRACTICE_LIMIT
) -> List[str]:
    """
    Pick starter practices with some variety in content type.

    The first two picks must be of different content types; after that the
    best remaining items are taken regardless of type.

    Returns:
        Ordered content ids, at most limit long
    """
    ranked = sorted(
        [item for item in candidates if is_starter_candidate(item)],
        key=score_starter_practice,
        reverse=True
    )

    selected: List[ContentItem] = []
    types_seen = set()
    for item in ranked:
        if len(selected) >= limit:
            break
        if item.content_type not in types_seen or len(selected) >= 2:
            selected.append(item)
            types_seen.add(item.content_type)

    if len(selected) < limit:
        selected_ids = {item.id for item in selected}
        for item in ranked:
            if len(selected) >= limit:
                break
            if item.id not in selected_ids:
                selected.append(item)
                selected_ids.add(item.id)

    return [item.id for item in selected]
