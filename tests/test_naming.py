"""Tests for workout classification, naming and muscle helpers."""
from __future__ import annotations

import pytest

from workout_engine.generation.muscles import (
    build_target_muscles,
    classification_muscles,
    expand_muscle_groups,
    infer_muscles_from_name,
)
from workout_engine.generation.naming import classify_workout, describe_workout, name_workout


# =============================================================================
# CLASSIFICATION
# =============================================================================

class TestClassifyWorkout:

    @pytest.mark.parametrize("muscles,expected", [
        (["chest", "shoulders", "triceps"], "push"),
        (["back", "biceps"], "pull"),
        (["quads", "glutes"], "legs"),
        (["chest", "back"], "upper"),
        (["quads", "chest"], "lower"),
        (["quads", "back"], "lower"),
        (["chest", "back", "quads"], "fullbody"),
        (["abs"], "fullbody"),
        ([], "fullbody"),
    ])
    def test_classification(self, muscles, expected):
        assert classify_workout(muscles) == expected

    def test_broad_leg_group_classifies_as_legs(self):
        assert classify_workout(classification_muscles(["legs"])) == "legs"

    def test_chosen_push_tags_stay_push(self):
        # "shoulders" expands to rear_delts for filtering, not for classification
        assert classify_workout(classification_muscles(["chest", "shoulders", "triceps"])) == "push"

    def test_arms_classify_as_upper(self):
        assert classify_workout(classification_muscles(["arms"])) == "upper"


# =============================================================================
# NAMING
# =============================================================================

class TestNameWorkout:

    def test_level_prefix(self):
        assert name_workout("push", "intermediate") == "Progressive Push Power"
        assert name_workout("legs", "beginner") == "Foundation Leg Day"
        assert name_workout("fullbody", "advanced") == "Intense Full Body Blast"

    def test_style_replaces_level(self):
        assert name_workout("pull", "advanced", "hiit") == "HIIT Pull Strength"
        assert name_workout("upper", "beginner", "strength") == "5x5 Upper Body"

    def test_unknown_parts(self):
        assert name_workout("stretch", "intermediate") == "Progressive Workout"
        assert name_workout("push", "elite") == "Push Power"

    def test_description(self):
        assert describe_workout(5, ["chest", "triceps"]) == (
            "5 hypertrophy-focused exercises targeting chest, triceps"
        )


# =============================================================================
# MUSCLE HELPERS
# =============================================================================

class TestMuscleHelpers:

    def test_expand_keeps_order_and_dedupes(self):
        assert expand_muscle_groups(["chest", "chest", "quads"]) == [
            "chest", "upper_chest", "lower_chest", "quads",
        ]

    def test_expand_overlapping_groups(self):
        expanded = expand_muscle_groups(["back", "core"])
        assert expanded.count("lower_back") == 1

    def test_infer_from_name(self):
        assert infer_muscles_from_name("Incline Bench Press") == ["chest", "triceps", "shoulders"]
        assert infer_muscles_from_name("Hammer Curl") == ["biceps"]
        assert infer_muscles_from_name("Farmer Carry") == ["chest", "back", "shoulders"]

    def test_build_target_prefers_primary(self):
        assert build_target_muscles("Row", {"lats", "back"}, {"biceps"}) == ["back", "lats"]

    def test_build_target_falls_back_in_order(self):
        assert build_target_muscles("Row", [], ["biceps"]) == ["biceps"]
        assert build_target_muscles("Row", [], [], ["back"]) == ["back"]
        assert build_target_muscles("Goblet Squat") == ["quads", "glutes", "hamstrings"]
