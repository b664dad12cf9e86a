"""
Content model definitions for the wellness content catalog.
"""
from enum import Enum
from typing import List, Optional
from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field, field_validator

logger = Logger()

class Dosha(str, Enum):
    """
    Ayurvedic constitution types.
    """
    VATA = "vata"
    PITTA = "pitta"
    KAPHA = "kapha"

class ContentType(str, Enum):
    """
    Known content categories. Catalog entries may carry other values.
    """
    YOGA = "yoga"
    MEDITATION = "meditation"
    NUTRITION = "nutrition"
    ARTICLE = "article"
    BREATHWORK = "breathwork"

class DifficultyLevel(str, Enum):
    """
    Practice difficulty levels.
    """
    BEGINNER = "beginner"
    GENTLE = "gentle"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

class ContentItem(BaseModel):
    """
    Represents a catalog entry that can be recommended to a user.
    """
    id: str
    title: str
    description: Optional[str] = None
    content_type: str
    difficulty_level: Optional[DifficultyLevel] = None
    duration_minutes: Optional[int] = Field(None, ge=0)
    tags: List[str] = Field(default_factory=list)
    doshas: List[Dosha] = Field(default_factory=list)
    cycle_phases: List[str] = Field(default_factory=list)
    pregnancy_statuses: List[str] = Field(default_factory=list)
    trimesters: List[int] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("tags", "cycle_phases", "pregnancy_statuses", "trimesters", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        """Stored rows may carry null for list attributes."""
        return [] if value is None else value

    @field_validator("difficulty_level", mode="before")
    @classmethod
    def unknown_difficulty_as_none(cls, value):
        """Unrecognized levels, e.g. "all_levels", contribute nothing to scoring."""
        if value is None or isinstance(value, DifficultyLevel):
            return value
        normalized = str(value).strip().lower()
        if normalized in {level.value for level in DifficultyLevel}:
            return normalized
        logger.warning("Ignoring unknown difficulty level", extra={"difficulty_level": value})
        return None

    @field_validator("doshas", mode="before")
    @classmethod
    def drop_unknown_doshas(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple, set)):
            return value
        known = {dosha.value for dosha in Dosha}
        doshas = []
        for dosha in value:
            if isinstance(dosha, Dosha):
                doshas.append(dosha)
            elif str(dosha).strip().lower() in known:
                doshas.append(str(dosha).strip().lower())
            else:
                logger.warning("Ignoring unknown dosha", extra={"dosha": dosha})
        return doshas

    @field_validator("trimesters")
    @classmethod
    def validate_trimesters(cls, value: List[int]) -> List[int]:
        for trimester in value:
            if trimester not in (1, 2, 3):
                raise ValueError(f"Invalid trimester: {trimester}")
        return value

    @property
    def search_text(self) -> str:
        """Lowercase corpus of title, description and tags used for keyword matching."""
        return f"{self.title} {self.description or ''} {' '.join(self.tags)}".lower()

    @property
    def is_universal(self) -> bool:
        """Content suitable for every dosha."""
        return len(set(self.doshas)) == len(Dosha)
