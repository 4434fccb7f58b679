"""Shared fixtures: a small exercise catalog and request builder."""

from __future__ import annotations

import pytest

from workout_engine.models import Exercise, GenerationRequest


def _ex(id, name, primary, secondary=(), equipment=(), difficulty="beginner",
        compound=False, pattern=None):
    return Exercise(
        id=id,
        name=name,
        slug=id.replace("_", "-"),
        primary_muscles=primary,
        secondary_muscles=secondary,
        equipment_required=equipment,
        difficulty=difficulty,
        is_compound=compound,
        movement_pattern=pattern,
    )


CATALOG = [
    _ex("bench", "Barbell Bench Press", ["chest"], ["triceps", "shoulders"],
        ["barbell", "bench"], "intermediate", True, "horizontal_push"),
    _ex("ohp", "Overhead Press", ["shoulders"], ["triceps"],
        ["barbell"], "intermediate", True, "vertical_push"),
    _ex("pushup", "Push-up", ["chest"], ["triceps"],
        [], "beginner", True, "horizontal_push"),
    _ex("fly", "Cable Fly", ["chest"], [], ["cable"], "beginner", False),
    _ex("pushdown", "Tricep Pushdown", ["triceps"], [], ["cable"], "beginner", False),
    _ex("lateral", "Lateral Raise", ["shoulders"], [], ["dumbbell"], "beginner", False),
    _ex("dips", "Weighted Dips", ["chest", "triceps"], ["shoulders"],
        ["dip_station"], "advanced", True),
    _ex("row", "Barbell Row", ["back"], ["biceps"], ["barbell"], "intermediate", True),
    _ex("curl", "Dumbbell Curl", ["biceps"], [], ["dumbbell"], "beginner", False),
    _ex("squat", "Barbell Back Squat", ["quads", "glutes"], ["hamstrings"],
        ["barbell", "squat_rack"], "intermediate", True, "squat"),
    _ex("lunge", "Bodyweight Lunge", ["quads", "glutes"], [], [], "beginner", True, "lunge"),
    _ex("legcurl", "Leg Curl", ["hamstrings"], [], ["machine"], "beginner", False, "knee_flexion"),
    _ex("plank", "Plank", ["core", "abs"], [], ["none"], "beginner", False),
]


@pytest.fixture
def catalog():
    return list(CATALOG)


@pytest.fixture
def by_id():
    return {ex.id: ex for ex in CATALOG}


@pytest.fixture
def make_request():
    def _make(**overrides):
        fields = {
            "location": "gym",
            "target_muscles": ["chest"],
            "duration_minutes": 45,
            "experience_level": "intermediate",
        }
        fields.update(overrides)
        return GenerationRequest(**fields)
    return _make
