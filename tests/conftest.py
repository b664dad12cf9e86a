"""
Pytest configuration and shared fixtures.
"""
import pytest
from dataclasses import dataclass
from typing import List

from src.models.content import ContentItem, Dosha
from src.models.profile import LifeStage, ProfileContext, WellnessProfile

def make_item(item_id: str, content_type: str = "yoga", title: str = None, **kwargs) -> ContentItem:
    """Build a content item with neutral defaults."""
    return ContentItem(
        id=item_id,
        title=title if title is not None else f"Item {item_id}",
        content_type=content_type,
        **kwargs
    )

@pytest.fixture
def vata_context() -> ProfileContext:
    """Regularly cycling vata user in the follicular phase."""
    return ProfileContext(
        primary_dosha=Dosha.VATA,
        life_stage=LifeStage.REGULAR_CYCLE,
        cycle_phase="follicular"
    )

@pytest.fixture
def in_between_context() -> ProfileContext:
    """Vata user whose cycles are changing."""
    return ProfileContext(
        primary_dosha=Dosha.VATA,
        life_stage=LifeStage.CYCLE_CHANGES,
        cycle_phase="follicular",
        is_in_between_phase=True
    )

@pytest.fixture
def menopause_context() -> ProfileContext:
    """Vata user in menopause, no cycle phase."""
    return ProfileContext(
        primary_dosha=Dosha.VATA,
        life_stage=LifeStage.MENOPAUSE
    )

@pytest.fixture
def pregnancy_context() -> ProfileContext:
    """Pregnant user in the second trimester."""
    return ProfileContext(
        primary_dosha=Dosha.KAPHA,
        life_stage=LifeStage.PREGNANCY,
        pregnancy_status="pregnant",
        pregnancy_trimester=2
    )

@pytest.fixture
def sample_profile() -> WellnessProfile:
    """Create a sample wellness profile for testing."""
    return WellnessProfile(
        user_id="123",
        primary_dosha=Dosha.VATA,
        secondary_dosha=Dosha.PITTA,
        life_stage=LifeStage.REGULAR_CYCLE,
        focus_areas=["sleep"],
        onboarding_completed=True
    )

@pytest.fixture
def diverse_catalog() -> List[ContentItem]:
    """One or more active items of each core content type."""
    return [
        make_item("y1", "yoga", doshas=["vata"], cycle_phases=["follicular"]),
        make_item("y2", "yoga", doshas=["vata"], cycle_phases=["follicular"]),
        make_item("m1", "meditation", cycle_phases=["follicular"]),
        make_item("n1", "nutrition", cycle_phases=["follicular"]),
        make_item("a1", "article", cycle_phases=["follicular"]),
        make_item("b1", "breathwork", doshas=["vata", "pitta", "kapha"], cycle_phases=["follicular"])
    ]

@dataclass
class FakeLambdaContext:
    function_name: str = "wellness-recommendations"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:wellness-recommendations"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Minimal Lambda context for handler tests."""
    return FakeLambdaContext()

@pytest.fixture
def api_event() -> dict:
    """API Gateway event for an authenticated user."""
    return {
        "httpMethod": "POST",
        "path": "/recommendations/daily",
        "requestContext": {
            "authorizer": {
                "claims": {"sub": "user-1"}
            }
        },
        "body": None
    }
