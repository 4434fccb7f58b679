"""Tests for the exercise filter."""
from __future__ import annotations

from workout_engine.generation.filter import (
    conflicts_with_injury,
    difficulty_allowed,
    filter_exercises,
    has_equipment,
)
from workout_engine.models import Injury


def _ids(exercises):
    return [ex.id for ex in exercises]


# =============================================================================
# MUSCLES
# =============================================================================

class TestMuscleMatching:

    def test_primary_or_secondary_match(self, catalog):
        result = filter_exercises(catalog, ["chest"], "gym", "intermediate")
        assert _ids(result) == ["bench", "pushup", "fly", "dips"]

    def test_secondary_muscle_counts(self, catalog):
        result = filter_exercises(catalog, ["hamstrings"], "gym", "intermediate")
        assert _ids(result) == ["squat", "legcurl"]

    def test_no_match_returns_empty(self, catalog):
        assert filter_exercises(catalog, ["neck"], "gym", "advanced") == []

    def test_preserves_catalog_order(self, catalog):
        result = filter_exercises(list(reversed(catalog)), ["chest"], "gym", "intermediate")
        assert _ids(result) == ["dips", "fly", "pushup", "bench"]


# =============================================================================
# EQUIPMENT
# =============================================================================

class TestEquipment:

    def test_gym_ignores_equipment(self, by_id):
        assert has_equipment(by_id["bench"], "gym", [])

    def test_home_requires_every_tag(self, by_id):
        assert not has_equipment(by_id["bench"], "home", ["barbell"])
        assert has_equipment(by_id["bench"], "home", ["barbell", "bench"])

    def test_bodyweight_always_available(self, by_id):
        assert has_equipment(by_id["pushup"], "outdoor", None)
        assert has_equipment(by_id["plank"], "home", [])

    def test_home_filter_with_dumbbells(self, catalog):
        result = filter_exercises(catalog, ["chest"], "home", "intermediate", ["dumbbell"])
        assert _ids(result) == ["pushup"]


# =============================================================================
# DIFFICULTY
# =============================================================================

class TestDifficulty:

    def test_beginner_excludes_advanced(self, catalog):
        result = filter_exercises(catalog, ["chest"], "gym", "beginner")
        assert "dips" not in _ids(result)

    def test_intermediate_allows_advanced(self, by_id):
        assert difficulty_allowed(by_id["dips"], "intermediate")

    def test_beginner_allows_intermediate(self, by_id):
        assert difficulty_allowed(by_id["bench"], "beginner")


# =============================================================================
# INJURIES
# =============================================================================

class TestInjuries:

    def test_overhead_injury_excludes_overhead_names(self, catalog):
        injuries = [Injury("shoulder", ["overhead"])]
        result = filter_exercises(catalog, ["shoulders", "triceps"], "gym", "advanced", injuries=injuries)
        assert result
        assert all("overhead" not in ex.name.lower() for ex in result)

    def test_match_is_case_insensitive(self, by_id):
        assert conflicts_with_injury(by_id["ohp"], [Injury("shoulder", ["OVERHEAD"])])

    def test_movement_pattern_matches(self, by_id):
        assert conflicts_with_injury(by_id["legcurl"], [Injury("knee", ["knee_flexion"])])

    def test_empty_movement_ignored(self, by_id):
        assert not conflicts_with_injury(by_id["bench"], [Injury("knee", [""])])

    def test_injury_without_movements(self, by_id):
        assert not conflicts_with_injury(by_id["squat"], [Injury("knee")])
