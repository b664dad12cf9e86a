"""
Service module for resolving the scoring context of a user.

This module turns the stored wellness profile and recent activity records into
the ProfileContext the scorer and selector work with. It only reads.

Typical usage:
    >>> resolver = ProfileContextResolver()
    >>> ctx = resolver.resolve(user_id)
    >>> ctx.is_in_between_phase
    False
"""
from typing import List, Optional
from datetime import datetime

from aws_lambda_powertools import Logger

from src.models.event import CheckInLog, WellnessEntry
from src.models.profile import LifeStage, ProfileContext, WellnessProfile
from src.services.constants import (
    CYCLING_STAGES,
    DEFAULT_CYCLE_PHASE,
    DEFAULT_PREGNANCY_STATUS,
    IN_BETWEEN_PHASES,
    PREGNANT_STATUS,
    RECENT_FEELINGS_WINDOW_DAYS
)
from src.services.exceptions import ProfileNotFound
from src.services.wellness_store import WellnessStore

logger = Logger()

def is_in_between_phase(life_stage: Optional[LifeStage]) -> bool:
    """Check if a life stage is one of the transitional in-between phases."""
    return life_stage in IN_BETWEEN_PHASES

def is_pregnant(profile: WellnessProfile) -> bool:
    return profile.life_stage == LifeStage.PREGNANCY or profile.pregnancy_status == PREGNANT_STATUS

def is_actively_cycling(life_stage: Optional[LifeStage]) -> bool:
    """
    Check if a life stage implies an active menstrual cycle.

    Users without a recorded life stage are treated as cycling.
    """
    return life_stage is None or life_stage in CYCLING_STAGES

def build_profile_context(
    profile: WellnessProfile,
    latest_entry: Optional[WellnessEntry] = None,
    recent_checkins: Optional[List[CheckInLog]] = None
) -> ProfileContext:
    """
    Build a ProfileContext from already fetched records.

    Args:
        profile: The user's wellness profile
        latest_entry: Most recent wellness entry, if any
        recent_checkins: Check-ins in the look-back window, newest first

    Returns:
        ProfileContext for a single scoring pass
    """
    pregnant = is_pregnant(profile)

    cycle_phase = None
    if not pregnant and is_actively_cycling(profile.life_stage):
        if latest_entry and latest_entry.cycle_phase:
            cycle_phase = latest_entry.cycle_phase
        else:
            cycle_phase = DEFAULT_CYCLE_PHASE

    trimester = profile.current_trimester if pregnant else None
    if trimester is not None and trimester not in (1, 2, 3):
        logger.warning("Ignoring invalid trimester", extra={
            "user_id": profile.user_id,
            "trimester": trimester
        })
        trimester = None

    secondary = profile.secondary_dosha
    if secondary is not None and secondary == profile.primary_dosha:
        logger.warning("Secondary dosha equals primary dosha, ignoring it", extra={
            "user_id": profile.user_id,
            "dosha": secondary.value
        })
        secondary = None

    if pregnant:
        pregnancy_status = PREGNANT_STATUS
    else:
        pregnancy_status = profile.pregnancy_status or DEFAULT_PREGNANCY_STATUS

    return ProfileContext(
        primary_dosha=profile.primary_dosha,
        secondary_dosha=secondary,
        life_stage=profile.life_stage,
        cycle_phase=cycle_phase,
        pregnancy_status=pregnancy_status,
        pregnancy_trimester=trimester,
        focus_areas=list(profile.focus_areas),
        is_in_between_phase=is_in_between_phase(profile.life_stage),
        recent_feeling_tags=[c.feeling_id for c in recent_checkins or []]
    )

class ProfileContextResolver:
    """Resolver that reads a user's records and builds the ProfileContext."""

    def __init__(self, store: Optional[WellnessStore] = None):
        self.store = store or WellnessStore()

    def resolve(self, user_id: str, now: Optional[datetime] = None) -> ProfileContext:
        """
        Resolve the ProfileContext for a user.

        Args:
            user_id: User identifier
            now: Optional reference time for the check-in window

        Returns:
            ProfileContext for a single scoring pass

        Raises:
            ProfileNotFound: If the user has no wellness profile
            UpstreamFetchFailed: If any record cannot be read
        """
        profile = self.store.get_profile(user_id)
        if profile is None:
            logger.info("No wellness profile found", extra={"user_id": user_id})
            raise ProfileNotFound(user_id)

        latest_entry = None
        if not is_pregnant(profile) and is_actively_cycling(profile.life_stage):
            latest_entry = self.store.get_latest_entry(user_id)

        recent_checkins = self.store.get_recent_checkins(
            user_id,
            RECENT_FEELINGS_WINDOW_DAYS,
            now=now
        )

        ctx = build_profile_context(profile, latest_entry, recent_checkins)
        logger.info("Resolved profile context", extra={
            "user_id": user_id,
            "life_stage": ctx.life_stage.value if ctx.life_stage else None,
            "cycle_phase": ctx.cycle_phase,
            "pregnancy_status": ctx.pregnancy_status,
            "in_between": ctx.is_in_between_phase
        })
        return ctx
