"""
Service module for recommendations driven by recent check-ins.

The user's most frequent feeling over the recent window picks a set of tags
and content types; matching content is ranked by simple tag overlap.
"""
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from src.models.content import ContentItem
from src.models.recommendation import PersonalizedRecommendation
from src.services.constants import (
    FEELING_CONTENT_MAP,
    FEELING_DESCRIPTION_MATCH_WEIGHT,
    FEELING_TAG_MATCH_WEIGHT,
    FEELING_TITLE_MATCH_WEIGHT,
    PERSONALIZED_LIMIT
)

def get_top_feeling(feeling_tags: List[str]) -> Optional[Tuple[str, int]]:
    """
    Find the most frequently reported feeling.

    Args:
        feeling_tags: Feeling ids, most recent first

    Returns:
        (feeling_id, count), or None when there are no check-ins. Ties go to
        the feeling reported most recently.
    """
    if not feeling_tags:
        return None
    counts = Counter(feeling_tags)
    # Counter keeps first-seen order, and the list is newest first
    feeling_id, count = max(counts.items(), key=lambda entry: entry[1])
    return feeling_id, count

def score_for_feeling(item: ContentItem, tags: List[str]) -> int:
    """Score an item by how many of the feeling's tags it mentions."""
    score = 0
    item_tags = [t.lower() for t in item.tags]
    title = item.title.lower()
    description = (item.description or "").lower()

    for tag in tags:
        tag = tag.lower()
        if any(tag in item_tag for item_tag in item_tags):
            score += FEELING_TAG_MATCH_WEIGHT
        if tag in title:
            score += FEELING_TITLE_MATCH_WEIGHT
        if tag in description:
            score += FEELING_DESCRIPTION_MATCH_WEIGHT
    return score

def recommend_for_feelings(
    feeling_tags: List[str],
    candidates: Iterable[ContentItem],
    limit: int = PERSONALIZED_LIMIT
) -> PersonalizedRecommendation:
    """
    Recommend content for the user's most frequent recent feeling.

    Args:
        feeling_tags: Feeling ids from recent check-ins, most recent first
        candidates: Candidate content in catalog order
        limit: Maximum number of content ids

    Returns:
        PersonalizedRecommendation; content_ids is empty when there are no
        check-ins or the feeling has no content mapping
    """
    top = get_top_feeling(feeling_tags)
    if top is None:
        return PersonalizedRecommendation()

    feeling_id, count = top
    mapping: Optional[Dict] = FEELING_CONTENT_MAP.get(feeling_id)
    if mapping is None:
        return PersonalizedRecommendation(feeling_id=feeling_id, feeling_count=count)

    pool = [
        item for item in candidates
        if item.is_active and item.content_type in mapping["types"]
    ]

    scored = [(item, score_for_feeling(item, mapping["tags"])) for item in pool]
    matched = sorted(
        [entry for entry in scored if entry[1] > 0],
        key=lambda entry: entry[1],
        reverse=True
    )[:limit]

    selected = [item for item, _ in matched]
    selected_ids = {item.id for item in selected}
    for item in pool:
        if len(selected) >= limit:
            break
        if item.id not in selected_ids:
            selected.append(item)
            selected_ids.add(item.id)

    return PersonalizedRecommendation(
        feeling_id=feeling_id,
        feeling_count=count,
        description=mapping["description"],
        content_ids=[item.id for item in selected]
    )
