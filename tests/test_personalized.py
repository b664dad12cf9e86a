"""Tests for check-in based recommendations."""
import pytest

from src.services.personalized import get_top_feeling, recommend_for_feelings, score_for_feeling
from tests.conftest import make_item

@pytest.fixture
def feelings_catalog():
    return [
        make_item("y2", "yoga", title="Power Flow", tags=["power"]),
        make_item("n1", "nutrition", title="Restorative Broth", tags=["restorative"]),
        make_item("y1", "yoga", title="Restorative Evening", tags=["restorative", "gentle"]),
        make_item("m1", "meditation", title="Relaxation Body Scan", tags=["relaxation"]),
        make_item("y3", "yoga", title="Morning Flow")
    ]

class TestGetTopFeeling:
    """Test suite for picking the dominant feeling."""

    def test_most_frequent(self):
        assert get_top_feeling(["tired", "stressed", "tired"]) == ("tired", 2)

    def test_tie_goes_to_most_recent(self):
        assert get_top_feeling(["stressed", "tired"]) == ("stressed", 1)

    def test_no_checkins(self):
        assert get_top_feeling([]) is None

class TestScoreForFeeling:
    """Test suite for feeling tag overlap."""

    def test_tag_title_and_description(self):
        item = make_item(
            "y1",
            title="Gentle Hips",
            description="A gentle sequence",
            tags=["gentle-yoga"]
        )

        assert score_for_feeling(item, ["gentle"]) == 4

    def test_no_overlap(self):
        assert score_for_feeling(make_item("y1", title="Power Flow"), ["gentle"]) == 0

class TestRecommendForFeelings:
    """Test suite for personalized recommendations."""

    def test_matches_first_then_padding(self, feelings_catalog):
        result = recommend_for_feelings(["tired", "stressed", "tired"], feelings_catalog)

        assert result.feeling_id == "tired"
        assert result.feeling_count == 2
        assert result.description == "Restorative practices to restore your energy"
        assert result.content_ids == ["y1", "m1", "y2"]

    def test_only_mapped_content_types(self, feelings_catalog):
        result = recommend_for_feelings(["tired"], feelings_catalog, limit=10)

        assert "n1" not in result.content_ids
        assert len(result.content_ids) == 4

    def test_inactive_items_excluded(self, feelings_catalog):
        feelings_catalog[2] = feelings_catalog[2].model_copy(update={"is_active": False})

        result = recommend_for_feelings(["tired"], feelings_catalog)

        assert "y1" not in result.content_ids

    def test_underscore_feeling_ids(self, feelings_catalog):
        result = recommend_for_feelings(["cant_sleep"], [make_item("m1", "meditation", tags=["sleep"])])

        assert result.feeling_id == "cant_sleep"
        assert result.content_ids == ["m1"]

    def test_unknown_feeling(self, feelings_catalog):
        result = recommend_for_feelings(["mystery"], feelings_catalog)

        assert result.feeling_id == "mystery"
        assert result.feeling_count == 1
        assert result.content_ids == []

    def test_no_checkins(self, feelings_catalog):
        result = recommend_for_feelings([], feelings_catalog)

        assert result.feeling_id is None
        assert result.content_ids == []
