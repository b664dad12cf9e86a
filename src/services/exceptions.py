"""
Service-level exceptions.

This module contains exceptions that can be raised by the recommendation
services. An empty candidate set is not an error and has no exception.
"""

class RecommendationError(Exception):
    """Base exception for recommendation generation errors."""
    pass

class ProfileNotFound(RecommendationError):
    """Raised when a user has no wellness profile and must complete onboarding."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No wellness profile found for user {user_id}")

class UpstreamFetchFailed(RecommendationError):
    """Raised when profile, content or activity records cannot be read or written."""
    pass
