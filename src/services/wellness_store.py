"""
Data access service for wellness profiles, activity records and content.

All reads and writes of the recommendation services go through this module so
that storage failures surface as UpstreamFetchFailed with consistent logging.

Typical usage:
    store = WellnessStore()
    profile = store.get_profile(user_id)
    content = store.get_active_content()
"""
from typing import List, Optional
from datetime import datetime, timedelta, timezone

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.content import ContentItem
from src.models.event import CheckInLog, WellnessEntry
from src.models.profile import WellnessProfile
from src.models.recommendation import DailyRecommendation
from src.services.exceptions import UpstreamFetchFailed
from src.utils.dynamo import (
    get_dynamo,
    create_pk,
    create_checkin_sk,
    create_recommendation_sk,
    CHECKIN_SK_END,
    PROFILE_SK,
    CONTENT_PK,
    ENTRY_SK_PREFIX,
    CONTENT_SK_PREFIX
)

logger = Logger()

_KEY_ATTRIBUTES = ("PK", "SK")

def _strip_keys(item: dict) -> dict:
    return {k: v for k, v in item.items() if k not in _KEY_ATTRIBUTES}

def _as_utc(value: datetime) -> datetime:
    """Convert to an aware UTC datetime, treating naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

class WellnessStore:
    """Service for reading and writing wellness records."""

    def __init__(self):
        """Initialize wellness store service."""
        self.dynamo = get_dynamo()

    def get_profile(self, user_id: str) -> Optional[WellnessProfile]:
        """
        Get the wellness profile for a user.

        Args:
            user_id: User identifier

        Returns:
            WellnessProfile if one exists, None otherwise

        Raises:
            UpstreamFetchFailed: If the profile cannot be read or is malformed
        """
        try:
            item = self.dynamo.get_item({
                "PK": create_pk(user_id),
                "SK": PROFILE_SK
            })
            if not item:
                return None
            return WellnessProfile(**{"user_id": user_id, **_strip_keys(item)})

        except ValidationError as e:
            logger.error("Malformed wellness profile", extra={
                "user_id": user_id,
                "error": str(e)
            })
            raise UpstreamFetchFailed(f"Malformed wellness profile for user {user_id}")
        except Exception as e:
            logger.error("Error retrieving wellness profile", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamFetchFailed(f"Failed to retrieve wellness profile: {str(e)}")

    def get_latest_entry(self, user_id: str) -> Optional[WellnessEntry]:
        """
        Get the most recent wellness tracker entry for a user.

        Args:
            user_id: User identifier

        Returns:
            Most recent WellnessEntry, or None if the user has no entries

        Raises:
            UpstreamFetchFailed: If entries cannot be read
        """
        try:
            items = self.dynamo.query_by_sort_key_prefix(
                create_pk(user_id),
                ENTRY_SK_PREFIX,
                newest_first=True,
                limit=1
            )
            if not items:
                return None
            item = items[0]
            return WellnessEntry(**{
                "user_id": user_id,
                "entry_date": item["SK"][len(ENTRY_SK_PREFIX):],
                **_strip_keys(item)
            })

        except Exception as e:
            logger.error("Error retrieving wellness entries", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamFetchFailed(f"Failed to retrieve wellness entries: {str(e)}")

    def get_recent_checkins(
        self,
        user_id: str,
        days: int,
        now: Optional[datetime] = None
    ) -> List[CheckInLog]:
        """
        Get check-in logs from the last number of days, most recent first.

        Timestamps are compared in UTC; naive values are taken as UTC. The key
        condition starts a day before the cutoff so sort keys written with a
        local offset are still read, and the exact window is applied after.

        Args:
            user_id: User identifier
            days: Size of the look-back window in days
            now: Optional reference time, defaults to the current time

        Returns:
            List of CheckInLog objects ordered newest first

        Raises:
            UpstreamFetchFailed: If check-ins cannot be read
        """
        cutoff = _as_utc(now or datetime.now(timezone.utc)) - timedelta(days=days)

        try:
            items = self.dynamo.query_by_sort_key_range(
                create_pk(user_id),
                create_checkin_sk((cutoff - timedelta(days=1)).date().isoformat()),
                CHECKIN_SK_END,
                newest_first=True
            )
        except Exception as e:
            logger.error("Error retrieving check-in logs", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamFetchFailed(f"Failed to retrieve check-in logs: {str(e)}")

        checkins = []
        for item in items:
            try:
                checkin = CheckInLog(**{"user_id": user_id, **_strip_keys(item)})
            except ValidationError as e:
                logger.warning("Failed to parse check-in log", extra={
                    "user_id": user_id,
                    "item": item,
                    "error": str(e)
                })
                continue
            if _as_utc(checkin.created_at) >= cutoff:
                checkins.append(checkin)

        checkins.sort(key=lambda c: _as_utc(c.created_at), reverse=True)
        return checkins

    def get_active_content(self) -> List[ContentItem]:
        """
        Get all active content items from the catalog, in catalog order.

        Rows that fail validation are skipped and logged; inactive items are
        never returned.

        Raises:
            UpstreamFetchFailed: If the catalog cannot be read
        """
        try:
            items = self.dynamo.query_by_sort_key_prefix(CONTENT_PK, CONTENT_SK_PREFIX)
        except Exception as e:
            logger.error("Error retrieving content catalog", extra={
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamFetchFailed(f"Failed to retrieve content: {str(e)}")

        content = []
        for item in items:
            try:
                content_item = ContentItem(**_strip_keys(item))
            except ValidationError as e:
                logger.warning("Failed to parse content item", extra={
                    "sk": item.get("SK"),
                    "error": str(e)
                })
                continue
            if content_item.is_active:
                content.append(content_item)

        logger.info(f"Loaded {len(content)} active content items")
        return content

    def list_user_ids(self) -> List[str]:
        """
        Get the ids of all users with a wellness profile.

        Raises:
            UpstreamFetchFailed: If profiles cannot be listed
        """
        try:
            items = self.dynamo.scan_by_sort_key(PROFILE_SK)
        except Exception as e:
            logger.error("Error listing wellness profiles", extra={
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamFetchFailed(f"Failed to list profiles: {str(e)}")
        return [item["PK"].split("#", 1)[1] for item in items if item.get("PK", "").startswith("USER#")]

    def save_daily_recommendation(self, recommendation: DailyRecommendation) -> None:
        """
        Store the recommendation set for a user and day.

        Any existing record for the same user and day is replaced.

        Raises:
            UpstreamFetchFailed: If the record cannot be written
        """
        day = recommendation.generated_at.isoformat()
        try:
            self.dynamo.put_item({
                "PK": create_pk(recommendation.user_id),
                "SK": create_recommendation_sk(day),
                "content_ids": recommendation.content_ids,
                "cycle_phase": recommendation.cycle_phase,
                "pregnancy_status": recommendation.pregnancy_status,
                "generated_at": day,
                "updated_at": datetime.now().isoformat()
            })
            logger.info("Saved daily recommendations", extra={
                "user_id": recommendation.user_id,
                "date": day,
                "count": len(recommendation.content_ids)
            })
        except Exception as e:
            logger.error("Error saving daily recommendations", extra={
                "user_id": recommendation.user_id,
                "date": day,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamFetchFailed(f"Failed to save recommendations: {str(e)}")
