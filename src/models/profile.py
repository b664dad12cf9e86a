"""
Profile model definitions for wellness profiles and the derived scoring context.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from src.models.content import Dosha

class LifeStage(str, Enum):
    """
    Life stages a user can select during onboarding.
    """
    REGULAR_CYCLE = "regular_cycle"
    MENSTRUAL_CYCLE = "menstrual_cycle"
    CYCLE_CHANGES = "cycle_changes"
    TRYING_TO_CONCEIVE = "trying_to_conceive"
    NOT_SURE = "not_sure"
    PREGNANCY = "pregnancy"
    POSTPARTUM = "postpartum"
    PERIMENOPAUSE = "perimenopause"
    PERI_MENOPAUSE_TRANSITION = "peri_menopause_transition"
    MENOPAUSE = "menopause"
    POST_MENOPAUSE = "post_menopause"

class CyclePhase(str, Enum):
    """
    Menstrual cycle phases as recorded in wellness entries.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"

class WellnessProfile(BaseModel):
    """
    Upstream wellness profile record created during onboarding.
    """
    user_id: str
    primary_dosha: Optional[Dosha] = None
    secondary_dosha: Optional[Dosha] = None
    life_stage: Optional[LifeStage] = None
    pregnancy_status: Optional[str] = None
    current_trimester: Optional[int] = None
    focus_areas: List[str] = Field(default_factory=list)
    onboarding_completed: bool = False

    @field_validator("focus_areas", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

class ProfileContext(BaseModel):
    """
    Everything the scorer needs to know about a user for a single scoring pass.

    Rebuilt on every request; never cached between requests.
    """
    primary_dosha: Optional[Dosha] = None
    secondary_dosha: Optional[Dosha] = None
    life_stage: Optional[LifeStage] = None
    cycle_phase: Optional[str] = None
    pregnancy_status: str = "not_pregnant"
    pregnancy_trimester: Optional[int] = Field(None, ge=1, le=3)
    focus_areas: List[str] = Field(default_factory=list)
    is_in_between_phase: bool = False
    recent_feeling_tags: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_distinct_doshas(self) -> "ProfileContext":
        if self.primary_dosha and self.primary_dosha == self.secondary_dosha:
            raise ValueError("Secondary dosha must differ from primary dosha")
        return self

    @property
    def is_pregnant(self) -> bool:
        """Check if pregnancy safe mode applies."""
        return self.life_stage == LifeStage.PREGNANCY or self.pregnancy_status == "pregnant"
