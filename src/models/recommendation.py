"""
Recommendation models for scored content and persisted daily recommendations.
"""
from typing import Optional, List
from datetime import date
from pydantic import BaseModel, Field

from src.models.content import ContentItem
from src.models.profile import ProfileContext

class ScoredCandidate(BaseModel):
    """
    A content item paired with its score for one selection pass.
    """
    item: ContentItem
    score: float
    context: ProfileContext

class DailyRecommendation(BaseModel):
    """
    Represents the recommendation set stored for a user on a given day.
    """
    user_id: str
    content_ids: List[str]
    cycle_phase: Optional[str] = None
    pregnancy_status: str = "not_pregnant"
    generated_at: date

class PersonalizedRecommendation(BaseModel):
    """
    Content suggested from the user's most frequent recent feeling.
    """
    feeling_id: Optional[str] = None
    feeling_count: int = Field(0, ge=0)
    description: Optional[str] = None
    content_ids: List[str] = Field(default_factory=list)
