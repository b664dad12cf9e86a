"""Tests for profile context resolution."""
import pytest
from datetime import date, datetime
from unittest.mock import MagicMock

from src.models.content import Dosha
from src.models.event import CheckInLog, WellnessEntry
from src.models.profile import LifeStage, WellnessProfile
from src.services.exceptions import ProfileNotFound, UpstreamFetchFailed
from src.services.profile_context import (
    ProfileContextResolver,
    build_profile_context,
    is_actively_cycling,
    is_in_between_phase
)

def _checkin(feeling_id: str, day: int) -> CheckInLog:
    return CheckInLog(
        user_id="123",
        feeling_id=feeling_id,
        created_at=datetime(2024, 3, day, 9, 0)
    )

@pytest.fixture
def store():
    """Mocked wellness store."""
    mock_store = MagicMock()
    mock_store.get_latest_entry.return_value = None
    mock_store.get_recent_checkins.return_value = []
    return mock_store

class TestLifeStageHelpers:
    """Test suite for life stage classification."""

    @pytest.mark.parametrize("stage", [LifeStage.CYCLE_CHANGES, LifeStage.PERI_MENOPAUSE_TRANSITION])
    def test_in_between_phases(self, stage):
        assert is_in_between_phase(stage)

    @pytest.mark.parametrize("stage", [LifeStage.REGULAR_CYCLE, LifeStage.MENOPAUSE, LifeStage.PREGNANCY, None])
    def test_not_in_between_phases(self, stage):
        assert not is_in_between_phase(stage)

    @pytest.mark.parametrize("stage", [
        LifeStage.REGULAR_CYCLE,
        LifeStage.MENSTRUAL_CYCLE,
        LifeStage.CYCLE_CHANGES,
        LifeStage.TRYING_TO_CONCEIVE,
        LifeStage.NOT_SURE,
        None
    ])
    def test_actively_cycling(self, stage):
        assert is_actively_cycling(stage)

    @pytest.mark.parametrize("stage", [
        LifeStage.PREGNANCY,
        LifeStage.POSTPARTUM,
        LifeStage.PERIMENOPAUSE,
        LifeStage.PERI_MENOPAUSE_TRANSITION,
        LifeStage.MENOPAUSE,
        LifeStage.POST_MENOPAUSE
    ])
    def test_not_actively_cycling(self, stage):
        assert not is_actively_cycling(stage)

class TestBuildProfileContext:
    """Test suite for building a context from fetched records."""

    def test_cycle_phase_from_latest_entry(self, sample_profile):
        entry = WellnessEntry(user_id="123", entry_date=date(2024, 3, 1), cycle_phase="luteal")

        ctx = build_profile_context(sample_profile, entry)

        assert ctx.cycle_phase == "luteal"
        assert ctx.primary_dosha == Dosha.VATA
        assert ctx.secondary_dosha == Dosha.PITTA
        assert ctx.focus_areas == ["sleep"]
        assert ctx.pregnancy_status == "not_pregnant"
        assert not ctx.is_in_between_phase

    def test_default_cycle_phase_without_entry(self, sample_profile):
        assert build_profile_context(sample_profile).cycle_phase == "follicular"

    def test_default_cycle_phase_when_entry_has_none(self, sample_profile):
        entry = WellnessEntry(user_id="123", entry_date=date(2024, 3, 1))

        assert build_profile_context(sample_profile, entry).cycle_phase == "follicular"

    def test_no_cycle_phase_for_menopause(self, sample_profile):
        profile = sample_profile.model_copy(update={"life_stage": LifeStage.MENOPAUSE})
        entry = WellnessEntry(user_id="123", entry_date=date(2024, 3, 1), cycle_phase="luteal")

        assert build_profile_context(profile, entry).cycle_phase is None

    def test_pregnancy_context(self, sample_profile):
        profile = sample_profile.model_copy(update={
            "life_stage": LifeStage.PREGNANCY,
            "current_trimester": 3
        })

        ctx = build_profile_context(profile)

        assert ctx.is_pregnant
        assert ctx.pregnancy_status == "pregnant"
        assert ctx.pregnancy_trimester == 3
        assert ctx.cycle_phase is None

    def test_pregnancy_status_without_life_stage(self, sample_profile):
        profile = sample_profile.model_copy(update={"pregnancy_status": "pregnant"})

        ctx = build_profile_context(profile)

        assert ctx.is_pregnant
        assert ctx.cycle_phase is None

    def test_invalid_trimester_dropped(self, sample_profile):
        profile = sample_profile.model_copy(update={
            "life_stage": LifeStage.PREGNANCY,
            "current_trimester": 5
        })

        assert build_profile_context(profile).pregnancy_trimester is None

    def test_trimester_ignored_when_not_pregnant(self, sample_profile):
        profile = sample_profile.model_copy(update={"current_trimester": 2})

        assert build_profile_context(profile).pregnancy_trimester is None

    def test_secondary_equal_to_primary_dropped(self, sample_profile):
        profile = sample_profile.model_copy(update={"secondary_dosha": Dosha.VATA})

        ctx = build_profile_context(profile)

        assert ctx.primary_dosha == Dosha.VATA
        assert ctx.secondary_dosha is None

    def test_in_between_phase_flag(self, sample_profile):
        profile = sample_profile.model_copy(update={"life_stage": LifeStage.CYCLE_CHANGES})

        ctx = build_profile_context(profile)

        assert ctx.is_in_between_phase
        assert ctx.cycle_phase == "follicular"

    def test_feeling_tags_keep_order(self, sample_profile):
        checkins = [_checkin("tired", 3), _checkin("stressed", 2), _checkin("tired", 1)]

        ctx = build_profile_context(sample_profile, recent_checkins=checkins)

        assert ctx.recent_feeling_tags == ["tired", "stressed", "tired"]

    def test_minimal_profile(self):
        ctx = build_profile_context(WellnessProfile(user_id="123"))

        assert ctx.primary_dosha is None
        assert ctx.cycle_phase == "follicular"
        assert ctx.focus_areas == []
        assert ctx.recent_feeling_tags == []

class TestProfileContextResolver:
    """Test suite for ProfileContextResolver."""

    def test_resolve_reads_profile_entry_and_checkins(self, store, sample_profile):
        store.get_profile.return_value = sample_profile
        store.get_latest_entry.return_value = WellnessEntry(
            user_id="123", entry_date=date(2024, 3, 1), cycle_phase="ovulation"
        )
        store.get_recent_checkins.return_value = [_checkin("tired", 1)]
        now = datetime(2024, 3, 10)

        ctx = ProfileContextResolver(store).resolve("123", now=now)

        assert ctx.cycle_phase == "ovulation"
        assert ctx.recent_feeling_tags == ["tired"]
        store.get_profile.assert_called_once_with("123")
        store.get_latest_entry.assert_called_once_with("123")
        store.get_recent_checkins.assert_called_once_with("123", 30, now=now)

    def test_resolve_skips_entry_lookup_when_pregnant(self, store, sample_profile):
        store.get_profile.return_value = sample_profile.model_copy(update={
            "life_stage": LifeStage.PREGNANCY
        })

        ctx = ProfileContextResolver(store).resolve("123")

        assert ctx.is_pregnant
        store.get_latest_entry.assert_not_called()

    def test_resolve_skips_entry_lookup_when_not_cycling(self, store, sample_profile):
        store.get_profile.return_value = sample_profile.model_copy(update={
            "life_stage": LifeStage.POST_MENOPAUSE
        })

        ProfileContextResolver(store).resolve("123")

        store.get_latest_entry.assert_not_called()

    def test_resolve_missing_profile(self, store):
        store.get_profile.return_value = None

        with pytest.raises(ProfileNotFound) as exc_info:
            ProfileContextResolver(store).resolve("missing")

        assert exc_info.value.user_id == "missing"
        store.get_recent_checkins.assert_not_called()

    def test_resolve_propagates_upstream_failure(self, store):
        store.get_profile.side_effect = UpstreamFetchFailed("boom")

        with pytest.raises(UpstreamFetchFailed):
            ProfileContextResolver(store).resolve("123")
