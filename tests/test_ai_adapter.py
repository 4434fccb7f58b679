"""Tests for AI prompt construction and response validation."""
from __future__ import annotations

import json

import pytest

from workout_engine.generation.ai_adapter import (
    AIResponseError,
    build_prompt,
    extract_json_object,
    format_injuries,
    parse_ai_workout,
)
from workout_engine.generation.filter import filter_exercises
from workout_engine.models import ExperienceLevel, Injury, Location


def _response(exercises, workout_type="push", **extra):
    payload = {
        "name": "Chest Builder",
        "description": "Pressing focus",
        "workoutType": workout_type,
        "exercises": exercises,
    }
    payload.update(extra)
    return json.dumps(payload)


def _item(exercise_id, name="whatever", sets=3, reps="8-10", rest=90, notes=None):
    item = {"exerciseId": exercise_id, "name": name, "sets": sets, "reps": reps, "restSeconds": rest}
    if notes is not None:
        item["notes"] = notes
    return item


@pytest.fixture
def candidates(catalog):
    return filter_exercises(catalog, ["chest"], "gym", "intermediate")


# =============================================================================
# PROMPT
# =============================================================================

class TestBuildPrompt:

    def test_contains_candidates_and_limit(self, candidates):
        prompt = build_prompt(candidates, ["chest"], 45, "intermediate", "gym")
        for ex in candidates:
            assert f'"id": "{ex.id}"' in prompt
        assert "HARD LIMIT: at most 5 exercises" in prompt
        assert "ONLY select exercises from the candidate list" in prompt

    def test_includes_injuries_and_equipment(self, candidates):
        prompt = build_prompt(
            candidates, ["chest"], 30, "beginner", "home",
            injuries=[Injury("shoulder", ["overhead"])],
            equipment=["dumbbell"],
        )
        assert "shoulder (avoid: overhead)" in prompt
        assert "Available Equipment: dumbbell" in prompt

    def test_enum_members_render_as_values(self, candidates):
        prompt = build_prompt(candidates[:1], ["chest"], 45, ExperienceLevel.INTERMEDIATE, Location.GYM)
        assert "45-minute intermediate-level workout" in prompt
        assert "- Experience Level: intermediate" in prompt
        assert "- Location: gym" in prompt
        assert "ExperienceLevel." not in prompt
        assert "Location." not in prompt

    def test_format_injuries(self):
        injuries = [Injury("knee", ["squat", "lunge"]), Injury("shoulder")]
        assert format_injuries(injuries) == "knee (avoid: squat, lunge); shoulder"
        assert format_injuries([]) == ""


# =============================================================================
# PARSING
# =============================================================================

class TestParseAIWorkout:

    def test_valid_response_in_prose(self, candidates, make_request):
        text = "Here is your workout:\n" + _response([
            _item("bench", name="Bench", notes="Retract shoulder blades"),
            _item("fly", sets=3, reps="12-15", rest=60),
        ]) + "\nEnjoy!"
        workout = parse_ai_workout(text, candidates, make_request())

        assert workout.source == "ai"
        assert workout.name == "Chest Builder"
        assert workout.workout_type == "push"
        assert [ex.exercise_id for ex in workout.exercises] == ["bench", "fly"]
        # Names and compound flags come from the catalog
        assert workout.exercises[0].name == "Barbell Bench Press"
        assert workout.exercises[0].is_compound is True
        assert workout.exercises[0].notes == "Retract shoulder blades"
        assert workout.exercises[1].rest_seconds == 60

    def test_unknown_id_rejects_response(self, candidates, make_request):
        text = _response([_item("bench"), _item("made_up_exercise")])
        with pytest.raises(AIResponseError, match="unknown exercise ids"):
            parse_ai_workout(text, candidates, make_request())

    def test_catalog_id_outside_candidates_rejected(self, candidates, make_request):
        text = _response([_item("squat")])
        with pytest.raises(AIResponseError):
            parse_ai_workout(text, candidates, make_request())

    def test_truncates_to_duration_bound(self, candidates, make_request):
        text = _response([_item(ex.id) for ex in candidates])
        workout = parse_ai_workout(text, candidates, make_request(duration_minutes=16))
        assert len(workout.exercises) == 2

    def test_numeric_reps_become_text(self, candidates, make_request):
        text = _response([_item("bench", reps=10)])
        workout = parse_ai_workout(text, candidates, make_request())
        assert workout.exercises[0].reps == "10"

    def test_unknown_workout_type_reclassified(self, candidates, make_request):
        text = _response([_item("bench")], workout_type="chest_day")
        workout = parse_ai_workout(text, candidates, make_request())
        assert workout.workout_type == "push"

    def test_schema_errors_collected(self, candidates, make_request):
        text = json.dumps({"name": "X", "description": "Y", "workoutType": "push", "exercises": []})
        with pytest.raises(AIResponseError) as exc_info:
            parse_ai_workout(text, candidates, make_request())
        assert exc_info.value.errors
        assert exc_info.value.errors[0]["loc"] == "exercises"

    def test_non_positive_sets_rejected(self, candidates, make_request):
        text = _response([_item("bench", sets=0)])
        with pytest.raises(AIResponseError):
            parse_ai_workout(text, candidates, make_request())


class TestExtractJson:

    def test_no_json(self):
        with pytest.raises(AIResponseError, match="No JSON object"):
            extract_json_object("I cannot help with that.")

    def test_invalid_json(self):
        with pytest.raises(AIResponseError, match="Invalid JSON"):
            extract_json_object("{not: valid}")

    def test_empty_text(self):
        with pytest.raises(AIResponseError):
            extract_json_object(None)
