"""
Service module for generating and storing daily content recommendations.
"""
from typing import List, Optional
from datetime import date, datetime

from aws_lambda_powertools import Logger

from src.models.content import ContentItem
from src.models.profile import ProfileContext
from src.models.recommendation import DailyRecommendation, PersonalizedRecommendation
from src.services.constants import DEFAULT_MAX_RECOMMENDATIONS
from src.services.personalized import recommend_for_feelings
from src.services.profile_context import ProfileContextResolver
from src.services.selection import select_recommendations
from src.services.wellness_store import WellnessStore

logger = Logger()

class RecommendationEngine:
    """Engine for generating personalized recommendations for a user."""

    def __init__(
        self,
        user_id: str,
        store: Optional[WellnessStore] = None,
        max_items: int = DEFAULT_MAX_RECOMMENDATIONS
    ):
        self.user_id = user_id
        self.store = store or WellnessStore()
        self.resolver = ProfileContextResolver(self.store)
        self.max_items = max_items
        # Context used by the most recent generation, for response metadata
        self.last_context: Optional[ProfileContext] = None

    def generate_daily_recommendations(
        self,
        today: Optional[date] = None
    ) -> DailyRecommendation:
        """
        Generate and store today's recommendations for the user.

        The context and the catalog are read fresh on every call. A stored
        record for the same day is replaced.

        Args:
            today: Optional date to generate for, defaults to today

        Returns:
            The stored DailyRecommendation

        Raises:
            ProfileNotFound: If the user has not completed onboarding
            UpstreamFetchFailed: If records cannot be read or written
        """
        today = today or date.today()
        logger.info("Generating recommendations", extra={"user_id": self.user_id})

        ctx = self.resolver.resolve(self.user_id)
        candidates = self.store.get_active_content()
        content_ids = self.select(candidates, ctx)

        if not content_ids:
            logger.info("No eligible content for user", extra={
                "user_id": self.user_id,
                "candidates": len(candidates)
            })

        recommendation = DailyRecommendation(
            user_id=self.user_id,
            content_ids=content_ids,
            cycle_phase=ctx.cycle_phase,
            pregnancy_status=ctx.pregnancy_status,
            generated_at=today
        )
        self.store.save_daily_recommendation(recommendation)
        self.last_context = ctx
        return recommendation

    def select(self, candidates: List[ContentItem], ctx: ProfileContext) -> List[str]:
        """Select content ids for an already resolved context."""
        return select_recommendations(candidates, ctx, self.max_items)

    def generate_personalized_recommendations(
        self,
        now: Optional[datetime] = None
    ) -> PersonalizedRecommendation:
        """
        Suggest content for the feeling the user reported most often recently.

        Args:
            now: Optional reference time for the check-in window

        Returns:
            PersonalizedRecommendation, empty when there are no recent check-ins

        Raises:
            ProfileNotFound: If the user has not completed onboarding
            UpstreamFetchFailed: If records cannot be read
        """
        ctx = self.resolver.resolve(self.user_id, now=now)
        if not ctx.recent_feeling_tags:
            return PersonalizedRecommendation()

        candidates = self.store.get_active_content()
        result = recommend_for_feelings(ctx.recent_feeling_tags, candidates)
        logger.info("Generated personalized recommendations", extra={
            "user_id": self.user_id,
            "feeling_id": result.feeling_id,
            "count": len(result.content_ids)
        })
        return result
