"""
Unit tests for CandidateSelector.

Tests the slot-filling rules:
- Hard filters (muscle group, movement type, exclusions, equipment)
- Priority slots returning canonical barbell lifts
- Level-matched candidates ranking first
- Short results when the catalog runs out
"""

import random

import pytest

from models.exercise import Equipment, ExperienceLevel, MovementType, MuscleGroup
from services.candidate_selector import CandidateSelector
from services.session_templates import SelectionRequest, req
from tests.fakes import FakeExerciseCatalog


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def selector(fake_catalog, rng):
    """Selector over the default fake catalog."""
    return CandidateSelector(fake_catalog, rng)


@pytest.fixture
def level_catalog():
    """Chest compounds: two intermediate, three beginner."""
    catalog = FakeExerciseCatalog()
    catalog.seed(
        [
            {"id": "beginner_press_1", "muscle_group": "chest"},
            {"id": "intermediate_press_1", "muscle_group": "chest", "level": "intermediate"},
            {"id": "beginner_press_2", "muscle_group": "chest"},
            {"id": "intermediate_press_2", "muscle_group": "chest", "level": "intermediate"},
            {"id": "beginner_press_3", "muscle_group": "chest"},
        ]
    )
    return catalog


# ---------------------------------------------------------------------------
# Filtering Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFiltering:
    """Tests for the hard constraints."""

    def test_returns_requested_muscle_group_and_type(self, selector):
        """Every result matches the requested group and movement type."""
        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 2),
            ExperienceLevel.BEGINNER,
        )

        assert len(chosen) == 2
        for exercise in chosen:
            assert exercise.muscle_group == MuscleGroup.CHEST
            assert exercise.movement_type == MovementType.COMPOUND

    def test_any_of_several_muscle_groups(self, selector):
        """A multi-group request draws from the union of groups."""
        chosen = selector.select(
            req((MuscleGroup.BICEPS, MuscleGroup.TRICEPS), MovementType.ISOLATION, 5),
            ExperienceLevel.BEGINNER,
        )

        assert {ex.id for ex in chosen} == {"barbell_curl", "cable_triceps_pushdown"}

    def test_excluded_ids_never_returned(self, selector):
        """Exercises already used this week are skipped."""
        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 5),
            ExperienceLevel.BEGINNER,
            exclude_ids={"barbell_bench_press", "push_up"},
        )

        assert [ex.id for ex in chosen] == ["dumbbell_bench_press"]

    def test_equipment_restriction(self, selector):
        """Only allowed equipment is returned."""
        chosen = selector.select(
            req(MuscleGroup.BACK, MovementType.COMPOUND, 4),
            ExperienceLevel.BEGINNER,
            allowed_equipment={Equipment.BODYWEIGHT},
        )

        assert [ex.id for ex in chosen] == ["pull_up"]

    def test_zero_count_returns_empty(self, selector):
        """A zero-count request selects nothing."""
        chosen = selector.select(
            SelectionRequest((MuscleGroup.CHEST,), MovementType.COMPOUND, 0),
            ExperienceLevel.BEGINNER,
        )

        assert chosen == []

    def test_short_result_when_catalog_runs_out(self, selector):
        """Fewer candidates than requested is not an error."""
        chosen = selector.select(
            req(MuscleGroup.BICEPS, MovementType.ISOLATION, 3),
            ExperienceLevel.BEGINNER,
        )

        assert [ex.id for ex in chosen] == ["barbell_curl"]

    def test_no_candidates_returns_empty(self):
        """An empty catalog yields an empty selection."""
        selector = CandidateSelector(FakeExerciseCatalog(), random.Random(1))

        chosen = selector.select(
            req(MuscleGroup.LEGS, MovementType.COMPOUND, 2),
            ExperienceLevel.ADVANCED,
        )

        assert chosen == []

    def test_result_has_no_duplicates(self, selector):
        """One selection never returns the same exercise twice."""
        chosen = selector.select(
            req(MuscleGroup.LEGS, MovementType.COMPOUND, 10),
            ExperienceLevel.BEGINNER,
        )

        ids = [ex.id for ex in chosen]
        assert len(ids) == len(set(ids)) == 3


# ---------------------------------------------------------------------------
# Priority Lift Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestPriorityLifts:
    """Tests for priority slots."""

    def test_priority_slot_returns_canonical_lift(self, selector):
        """The bench press wins a priority chest slot."""
        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 1, priority=True),
            ExperienceLevel.BEGINNER,
        )

        assert [ex.id for ex in chosen] == ["barbell_bench_press"]

    def test_priority_slot_does_not_pad_with_other_exercises(self, selector):
        """Only canonical lifts are returned while any survive the filters."""
        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 2, priority=True),
            ExperienceLevel.BEGINNER,
        )

        assert [ex.id for ex in chosen] == ["barbell_bench_press"]

    def test_priority_ignores_level_preference(self, selector):
        """An advanced canonical lift is still chosen for a beginner."""
        chosen = selector.select(
            req(MuscleGroup.BACK, MovementType.COMPOUND, 1, priority=True),
            ExperienceLevel.BEGINNER,
        )

        assert [ex.id for ex in chosen] == ["conventional_deadlift"]

    def test_priority_falls_back_when_lift_excluded(self, selector):
        """With the canonical lift used up, the slot is filled normally."""
        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 1, priority=True),
            ExperienceLevel.BEGINNER,
            exclude_ids={"barbell_bench_press"},
        )

        assert len(chosen) == 1
        assert chosen[0].id in {"dumbbell_bench_press", "push_up"}

    def test_priority_falls_back_under_equipment_restriction(self, selector):
        """Bodyweight-only athletes get a bodyweight exercise instead."""
        chosen = selector.select(
            req(MuscleGroup.LEGS, MovementType.COMPOUND, 1, priority=True),
            ExperienceLevel.BEGINNER,
            allowed_equipment={Equipment.BODYWEIGHT},
        )

        assert [ex.id for ex in chosen] == ["bodyweight_squat"]

    def test_priority_returns_catalog_order_without_shuffling(self):
        """Several canonical lifts in one group come back in catalog order."""
        catalog = FakeExerciseCatalog()
        catalog.seed(
            [
                {"id": "barbell_back_squat", "muscle_group": "legs"},
                {"id": "leg_press", "muscle_group": "legs", "equipment": "machine"},
                {"id": "conventional_deadlift", "muscle_group": "legs"},
            ]
        )

        for seed in range(5):
            selector = CandidateSelector(catalog, random.Random(seed))
            chosen = selector.select(
                req(MuscleGroup.LEGS, MovementType.COMPOUND, 2, priority=True),
                ExperienceLevel.BEGINNER,
            )
            assert [ex.id for ex in chosen] == ["barbell_back_squat", "conventional_deadlift"]


# ---------------------------------------------------------------------------
# Level Preference Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestLevelPreference:
    """Tests for the level-matched partition."""

    @pytest.mark.parametrize("seed", range(10))
    def test_matching_level_fills_first(self, level_catalog, seed):
        """When enough level matches exist, only they are chosen."""
        selector = CandidateSelector(level_catalog, random.Random(seed))

        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 2),
            ExperienceLevel.INTERMEDIATE,
        )

        assert {ex.id for ex in chosen} == {"intermediate_press_1", "intermediate_press_2"}

    @pytest.mark.parametrize("seed", range(10))
    def test_other_levels_follow_matches(self, level_catalog, seed):
        """Non-matching exercises only fill what the matches cannot."""
        selector = CandidateSelector(level_catalog, random.Random(seed))

        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 4),
            ExperienceLevel.INTERMEDIATE,
        )

        assert len(chosen) == 4
        assert all(ex.level == ExperienceLevel.INTERMEDIATE for ex in chosen[:2])
        assert all(ex.level == ExperienceLevel.BEGINNER for ex in chosen[2:])

    def test_no_level_match_still_selects(self, level_catalog, rng):
        """An advanced athlete still gets exercises when none match exactly."""
        selector = CandidateSelector(level_catalog, rng)

        chosen = selector.select(
            req(MuscleGroup.CHEST, MovementType.COMPOUND, 3),
            ExperienceLevel.ADVANCED,
        )

        assert len(chosen) == 3


# ---------------------------------------------------------------------------
# Randomness Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestRandomness:
    """Tests for the injected randomness source."""

    def test_same_seed_same_selection(self, level_catalog):
        """Two selectors with equal seeds choose identically."""
        request = req(MuscleGroup.CHEST, MovementType.COMPOUND, 3)

        first = CandidateSelector(level_catalog, random.Random(99)).select(
            request, ExperienceLevel.BEGINNER
        )
        second = CandidateSelector(level_catalog, random.Random(99)).select(
            request, ExperienceLevel.BEGINNER
        )

        assert [ex.id for ex in first] == [ex.id for ex in second]

    def test_selection_varies_across_seeds(self, level_catalog):
        """Different seeds eventually pick different subsets."""
        request = req(MuscleGroup.CHEST, MovementType.COMPOUND, 1)

        picks = {
            CandidateSelector(level_catalog, random.Random(seed))
            .select(request, ExperienceLevel.BEGINNER)[0]
            .id
            for seed in range(50)
        }

        assert len(picks) > 1
        assert picks <= {"beginner_press_1", "beginner_press_2", "beginner_press_3"}
