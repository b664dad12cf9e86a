"""
Support settings for users in an in-between life phase.

Users whose cycles are changing or who are entering the menopause transition
get gentler content and messaging without weight-loss or streak language.

Typical usage:
    >>> config = get_in_between_config(LifeStage.CYCLE_CHANGES)
    >>> sanitize_messaging("Day 5 of your streak!", config)
    'Day 5 of your journey!'
"""
import re
from typing import List, Optional
from pydantic import BaseModel, Field

from src.models.profile import LifeStage
from src.services.constants import (
    GENTLE_CONTENT_KEYWORDS,
    IN_BETWEEN_ENCOURAGEMENTS,
    IN_BETWEEN_GENTLE_REMINDERS,
    IN_BETWEEN_PHASES,
    IN_BETWEEN_SUPPORTIVE_MESSAGES,
    INTENSITY_KEYWORDS,
    NERVOUS_SYSTEM_KEYWORDS,
    STREAK_REPLACEMENTS,
    WEIGHT_LOSS_REPLACEMENTS
)

class InBetweenPhaseConfig(BaseModel):
    """
    Content and messaging preferences for an in-between phase.
    """
    is_in_between_phase: bool = False
    phase_type: Optional[LifeStage] = None
    prioritize_gentle: bool = False
    prioritize_nervous_system_support: bool = False
    avoid_intensity: bool = False
    disable_weight_loss_language: bool = False
    disable_streak_language: bool = False
    content_boosts: List[str] = Field(default_factory=list)
    content_avoid: List[str] = Field(default_factory=list)
    supportive_message: str = ""
    gentle_reminder: str = ""

def get_in_between_config(life_stage: Optional[LifeStage]) -> InBetweenPhaseConfig:
    """
    Get the in-between phase configuration for a life stage.

    Args:
        life_stage: The user's life stage, if known

    Returns:
        Configuration with every preference disabled for other life stages
    """
    if life_stage not in IN_BETWEEN_PHASES:
        return InBetweenPhaseConfig()

    return InBetweenPhaseConfig(
        is_in_between_phase=True,
        phase_type=life_stage,
        prioritize_gentle=True,
        prioritize_nervous_system_support=True,
        avoid_intensity=True,
        disable_weight_loss_language=True,
        disable_streak_language=True,
        content_boosts=list(dict.fromkeys(GENTLE_CONTENT_KEYWORDS + NERVOUS_SYSTEM_KEYWORDS)),
        content_avoid=list(INTENSITY_KEYWORDS),
        supportive_message=IN_BETWEEN_SUPPORTIVE_MESSAGES[life_stage],
        gentle_reminder=IN_BETWEEN_GENTLE_REMINDERS[life_stage]
    )

def sanitize_messaging(text: str, config: InBetweenPhaseConfig) -> str:
    """
    Replace weight-loss and streak phrasing with supportive alternatives.

    Text is returned unchanged for users outside an in-between phase.
    """
    if not config.is_in_between_phase:
        return text

    sanitized = text
    if config.disable_weight_loss_language:
        for pattern, replacement in WEIGHT_LOSS_REPLACEMENTS:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

    if config.disable_streak_language:
        for pattern, replacement in STREAK_REPLACEMENTS:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

    return sanitized

def get_encouragements(config: InBetweenPhaseConfig) -> List[str]:
    """Get encouragement messages for an in-between phase, empty otherwise."""
    if not config.is_in_between_phase:
        return []
    return list(IN_BETWEEN_ENCOURAGEMENTS)
