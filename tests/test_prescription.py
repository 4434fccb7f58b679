"""Tests for sets/reps/rest assignment."""
from __future__ import annotations

import pytest

from workout_engine.generation.prescription import Prescription, assign_prescription
from workout_engine.models import ExperienceLevel, WorkoutStyle


class TestTraditional:

    @pytest.mark.parametrize("level,compound,expected", [
        ("beginner", True, Prescription(3, "10-12", 90)),
        ("beginner", False, Prescription(2, "10-12", 60)),
        ("intermediate", True, Prescription(4, "8-10", 90)),
        ("intermediate", False, Prescription(3, "8-10", 75)),
        ("advanced", True, Prescription(4, "6-10", 120)),
        ("advanced", False, Prescription(4, "6-10", 90)),
    ])
    def test_table(self, level, compound, expected):
        assert assign_prescription(compound, level) == expected

    def test_unknown_level_uses_default_row(self):
        assert assign_prescription(True, "elite") == Prescription(3, "10-12", 75)

    def test_accepts_enum_members(self):
        rx = assign_prescription(True, ExperienceLevel.INTERMEDIATE, WorkoutStyle.TRADITIONAL)
        assert rx == Prescription(4, "8-10", 90)

    def test_unknown_style_is_traditional(self):
        assert assign_prescription(False, "beginner", "yoga") == Prescription(2, "10-12", 60)


class TestStyles:

    def test_strength_is_5x5(self):
        assert assign_prescription(True, "beginner", "strength") == Prescription(5, "5", 180)
        assert assign_prescription(False, "beginner", "strength") == Prescription(5, "5", 120)

    def test_hiit_short_rest(self):
        assert assign_prescription(True, "advanced", "hiit").rest_seconds == 30

    def test_cardio_pattern_uses_minutes(self):
        assert assign_prescription(False, "beginner", "cardio", "cardio").reps == "5-10 min"
        assert assign_prescription(False, "beginner", "cardio", "squat").reps == "30-60s"

    def test_mobility_holds(self):
        rx = assign_prescription(False, "beginner", "mobility")
        assert rx.reps == "30-60s hold"
        assert rx.sets == 2
