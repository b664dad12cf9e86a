"""
Constants and shared data for content scoring and recommendation services.
"""
from typing import Dict, FrozenSet, List, Tuple

from src.models.content import ContentType, DifficultyLevel
from src.models.profile import CyclePhase, LifeStage

# Used when an actively cycling user has no recent wellness entry.
DEFAULT_CYCLE_PHASE = CyclePhase.FOLLICULAR.value
DEFAULT_PREGNANCY_STATUS = "not_pregnant"
PREGNANT_STATUS = "pregnant"

DEFAULT_MAX_RECOMMENDATIONS = 6
RECENT_FEELINGS_WINDOW_DAYS = 30

IN_BETWEEN_PHASES: FrozenSet[LifeStage] = frozenset({
    LifeStage.CYCLE_CHANGES,
    LifeStage.PERI_MENOPAUSE_TRANSITION
})

MENOPAUSE_STAGES: FrozenSet[LifeStage] = frozenset({
    LifeStage.PERIMENOPAUSE,
    LifeStage.PERI_MENOPAUSE_TRANSITION,
    LifeStage.MENOPAUSE,
    LifeStage.POST_MENOPAUSE
})

CYCLING_STAGES: FrozenSet[LifeStage] = frozenset({
    LifeStage.REGULAR_CYCLE,
    LifeStage.MENSTRUAL_CYCLE,
    LifeStage.CYCLE_CHANGES,
    LifeStage.TRYING_TO_CONCEIVE,
    LifeStage.NOT_SURE
})

# Order of the diversity pass
DIVERSITY_CONTENT_TYPES: Tuple[str, ...] = (
    ContentType.YOGA.value,
    ContentType.MEDITATION.value,
    ContentType.NUTRITION.value,
    ContentType.ARTICLE.value
)

# Dosha affinity weights
PRIMARY_DOSHA_WEIGHT = 3
SECONDARY_DOSHA_WEIGHT = 1
UNIVERSAL_DOSHA_WEIGHT = 0.5

# In-between phase weights
GENTLE_KEYWORD_WEIGHT = 2
INTENSITY_KEYWORD_WEIGHT = -8
RESTORATIVE_TYPE_WEIGHT = 3
NERVOUS_SYSTEM_WEIGHT = 4
FOCUS_AREA_WEIGHT = 3

DIFFICULTY_WEIGHTS: Dict[DifficultyLevel, int] = {
    DifficultyLevel.BEGINNER: 4,
    DifficultyLevel.GENTLE: 4,
    DifficultyLevel.INTERMEDIATE: -2,
    DifficultyLevel.ADVANCED: -5
}

RESTORATIVE_CONTENT_TYPES: FrozenSet[str] = frozenset({
    ContentType.MEDITATION.value,
    ContentType.BREATHWORK.value
})

GENTLE_CONTENT_KEYWORDS: Tuple[str, ...] = (
    "gentle", "restorative", "calming", "grounding", "stabilizing",
    "soothing", "nurturing", "supportive", "relaxing", "balancing",
    "nervous system", "rest", "restore", "ease", "soft",
    "slow", "mindful", "breathwork", "meditation", "yin",
    "chair", "supported", "accessible", "beginner"
)

INTENSITY_KEYWORDS: Tuple[str, ...] = (
    "intense", "advanced", "power", "hot", "heating",
    "vigorous", "dynamic", "challenging", "weight loss", "burn",
    "sculpt", "tone", "strength training", "high intensity", "hiit",
    "cardio", "fat burning", "detox", "cleanse"
)

NERVOUS_SYSTEM_KEYWORDS: Tuple[str, ...] = (
    "nervous system", "calming", "grounding"
)

# Personalized recommendations from recent check-ins
PERSONALIZED_LIMIT = 3
FEELING_TAG_MATCH_WEIGHT = 2
FEELING_TITLE_MATCH_WEIGHT = 1
FEELING_DESCRIPTION_MATCH_WEIGHT = 1

FEELING_CONTENT_MAP: Dict[str, Dict[str, object]] = {
    "tired": {
        "tags": ["restorative", "gentle", "relaxation", "vata-balance"],
        "types": ["yoga", "meditation"],
        "description": "Restorative practices to restore your energy"
    },
    "pain": {
        "tags": ["pain-relief", "gentle", "therapeutic", "chronic-pain"],
        "types": ["yoga", "article"],
        "description": "Gentle practices for pain relief"
    },
    "exhausted": {
        "tags": ["restorative", "vata-balance", "self-care", "relaxation"],
        "types": ["yoga", "meditation", "article"],
        "description": "Deeply restoring practices for exhaustion"
    },
    "hormonal": {
        "tags": ["hormone-balance", "cycle", "menstrual", "moon"],
        "types": ["yoga", "article", "nutrition"],
        "description": "Hormone-balancing support"
    },
    "emotional": {
        "tags": ["emotional", "heart-opening", "meditation", "breathwork"],
        "types": ["meditation", "breathwork"],
        "description": "Emotional release and heart-opening practices"
    },
    "restless": {
        "tags": ["grounding", "vata-balance", "calm", "evening"],
        "types": ["yoga", "meditation"],
        "description": "Grounding practices for restlessness"
    },
    "bloated": {
        "tags": ["digestion", "twist", "digestive", "nutrition"],
        "types": ["yoga", "nutrition", "article"],
        "description": "Digestive support and gentle movements"
    },
    "cant-sleep": {
        "tags": ["sleep", "evening", "relaxation", "wind-down"],
        "types": ["yoga", "meditation"],
        "description": "Evening routines for better sleep"
    },
    "hot-flushes": {
        "tags": ["menopause", "cooling", "pitta-balance", "perimenopause"],
        "types": ["yoga", "article", "breathwork"],
        "description": "Cooling practices for hot flushes"
    },
    "digestive": {
        "tags": ["digestion", "nutrition", "ayurveda", "twist"],
        "types": ["nutrition", "article", "yoga"],
        "description": "Ayurvedic digestive support"
    },
    "back-ache": {
        "tags": ["back", "spine", "mobility", "joint-care", "gentle"],
        "types": ["yoga", "article"],
        "description": "Spine care and back relief"
    },
    "neck-shoulder": {
        "tags": ["neck", "shoulder", "chair-yoga", "gentle", "tension"],
        "types": ["yoga"],
        "description": "Neck and shoulder release"
    },
    "period-pain": {
        "tags": ["menstrual", "cramp", "cycle", "womb"],
        "types": ["yoga", "article"],
        "description": "Menstrual comfort practices"
    },
    "joint-stiffness": {
        "tags": ["joint-care", "mobility", "arthritis", "gentle", "chair-yoga"],
        "types": ["yoga", "article"],
        "description": "Joint mobility and care"
    },
    "post-surgery": {
        "tags": ["rehabilitation", "gentle", "recovery", "cancer_support"],
        "types": ["yoga", "article"],
        "description": "Gentle recovery practices"
    },
    "low-mood": {
        "tags": ["uplifting", "heart-opening", "morning", "energy"],
        "types": ["yoga", "meditation"],
        "description": "Mood-lifting practices"
    },
    "overwhelmed": {
        "tags": ["grounding", "calm", "meditation", "breathwork", "stress"],
        "types": ["meditation", "breathwork"],
        "description": "Calming practices for overwhelm"
    },
    "stressed": {
        "tags": ["stress", "relaxation", "breathwork", "calm"],
        "types": ["breathwork", "meditation", "yoga"],
        "description": "Stress relief and relaxation"
    },
    # Underscore ids come from the first-time check-in flow
    "in_pain": {
        "tags": ["pain-relief", "gentle", "therapeutic"],
        "types": ["yoga", "article"],
        "description": "Gentle practices for pain relief"
    },
    "hot_flushes": {
        "tags": ["menopause", "cooling", "pitta-balance"],
        "types": ["yoga", "article", "breathwork"],
        "description": "Cooling practices for hot flushes"
    },
    "cant_sleep": {
        "tags": ["sleep", "evening", "relaxation"],
        "types": ["yoga", "meditation"],
        "description": "Evening routines for better sleep"
    },
    "back_ache": {
        "tags": ["back", "spine", "mobility", "joint-care"],
        "types": ["yoga", "article"],
        "description": "Spine care and back relief"
    },
    "neck_shoulder": {
        "tags": ["neck", "shoulder", "chair-yoga"],
        "types": ["yoga"],
        "description": "Neck and shoulder release"
    },
    "period_pain": {
        "tags": ["menstrual", "cramp", "cycle"],
        "types": ["yoga", "article"],
        "description": "Menstrual comfort practices"
    },
    "joint_stiffness": {
        "tags": ["joint-care", "mobility", "arthritis"],
        "types": ["yoga", "article"],
        "description": "Joint mobility and care"
    },
    "post_surgery": {
        "tags": ["rehabilitation", "gentle", "recovery"],
        "types": ["yoga", "article"],
        "description": "Gentle recovery practices"
    },
    "low_mood": {
        "tags": ["uplifting", "heart-opening", "morning"],
        "types": ["yoga", "meditation"],
        "description": "Mood-lifting practices"
    }
}

# Starter practices for building confidence
STARTER_PRACTICE_LIMIT = 4
STARTER_MAX_DURATION_MINUTES = 20
STARTER_DIFFICULTY_LEVELS: FrozenSet[DifficultyLevel] = frozenset({
    DifficultyLevel.BEGINNER,
    DifficultyLevel.GENTLE
})

CONFIDENCE_TAGS: Tuple[str, ...] = (
    "beginner", "gentle", "grounding", "calming", "chair-yoga",
    "accessible", "restorative", "confidence", "rehabilitation", "recovery", "slow"
)

STARTER_DIFFICULTY_WEIGHTS: Dict[DifficultyLevel, int] = {
    DifficultyLevel.BEGINNER: 3,
    DifficultyLevel.GENTLE: 2
}

# (max duration in minutes, bonus); first matching bound wins
STARTER_DURATION_BONUSES: List[Tuple[int, int]] = [
    (10, 3),
    (15, 2)
]

# In-between phase messaging
IN_BETWEEN_SUPPORTIVE_MESSAGES: Dict[LifeStage, str] = {
    LifeStage.CYCLE_CHANGES: (
        "Your body is in a natural transition. Gentle, stabilizing practices "
        "support you as patterns shift."
    ),
    LifeStage.PERI_MENOPAUSE_TRANSITION: (
        "You're moving through a threshold time. Nurturing practices help your "
        "nervous system find its new rhythm."
    )
}

IN_BETWEEN_GENTLE_REMINDERS: Dict[LifeStage, str] = {
    LifeStage.CYCLE_CHANGES: "Focus on what feels supportive today. There's no need to push.",
    LifeStage.PERI_MENOPAUSE_TRANSITION: "Honor your body's wisdom. Rest is productive during this transition."
}

IN_BETWEEN_ENCOURAGEMENTS: List[str] = [
    "Your body knows what it needs. Trust its wisdom.",
    "Gentle practices can be profoundly healing.",
    "There's no pressure to perform. Rest is productive.",
    "Every small act of self-care matters.",
    "Your nervous system thrives with consistency, not intensity.",
    "This transition is temporary. You are supported.",
    "Honor whatever pace feels right today.",
    "Stability comes from within, not from pushing harder."
]

# (regex pattern, replacement), applied case-insensitively in order
WEIGHT_LOSS_REPLACEMENTS: List[Tuple[str, str]] = [
    (r"weight loss", "wellbeing"),
    (r"burn (fat|calories)", "support your body"),
    (r"lose weight", "feel balanced"),
    (r"slim(ming)?", "supportive"),
    (r"tone your", "nurture your"),
    (r"sculpt", "strengthen gently")
]

STREAK_REPLACEMENTS: List[Tuple[str, str]] = [
    (r"(\d+)[- ]day streak", "your ongoing practice"),
    (r"keep your streak", "honor your practice"),
    (r"streak", "journey"),
    (r"don't break your", "continue"),
    (r"consecutive days", "regular practice")
]
