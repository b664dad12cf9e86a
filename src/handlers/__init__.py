"""
Lambda handlers package for the recommendation functions.
"""
from .daily_recommendations import handler as daily_recommendations_handler
from .daily_recommendations import scheduled_handler as scheduled_recommendations_handler
from .personalized_recommendations import handler as personalized_recommendations_handler
from .personalized_recommendations import starter_practices_handler

__all__ = [
    "daily_recommendations_handler",
    "scheduled_recommendations_handler",
    "personalized_recommendations_handler",
    "starter_practices_handler"
]
