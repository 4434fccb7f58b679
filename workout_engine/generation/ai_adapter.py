"""
AI Generation Adapter - prompt construction and response validation.

The model only picks from the candidate list it is given: the prompt
carries every admissible exercise as JSON data, and a response that names
an id outside that list is rejected as a whole.

Response schema:
    {
      "name": str, "description": str, "workoutType": str,
      "exercises": [
        {"exerciseId": str, "name": str, "sets": int, "reps": str,
         "restSeconds": int, "notes": str?}
      ]
    }
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from workout_engine.generation.muscles import classification_muscles
from workout_engine.generation.naming import classify_workout
from workout_engine.generation.selector import exercise_count_for_duration
from workout_engine.models import (
    Exercise,
    GeneratedExercise,
    GeneratedWorkout,
    GenerationRequest,
    Injury,
    WorkoutType,
    enum_value,
)

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class AIResponseError(ValueError):
    """Raised when generated text does not hold a usable workout."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


# =============================================================================
# RESPONSE SCHEMA
# =============================================================================

class AIExercise(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_id: str = Field(alias="exerciseId", min_length=1)
    name: str
    sets: int = Field(gt=0)
    reps: str
    rest_seconds: int = Field(alias="restSeconds", ge=0)
    notes: Optional[str] = None

    @field_validator("reps", mode="before")
    @classmethod
    def reps_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v))
        return v


class AIWorkoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    workout_type: str = Field(alias="workoutType")
    exercises: List[AIExercise] = Field(min_length=1)


# =============================================================================
# PROMPT
# =============================================================================

def _candidate_payload(exercise: Exercise) -> Dict[str, Any]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "primary_muscles": sorted(exercise.primary_muscles),
        "secondary_muscles": sorted(exercise.secondary_muscles),
        "is_compound": exercise.is_compound,
        "difficulty": exercise.difficulty,
    }


def format_injuries(injuries: Optional[List[Injury]]) -> str:
    """Render injuries as 'knee (avoid: squat, lunge); shoulder'."""
    parts = []
    for injury in injuries or []:
        if injury.movements_to_avoid:
            parts.append(f"{injury.body_part} (avoid: {', '.join(injury.movements_to_avoid)})")
        else:
            parts.append(injury.body_part)
    return "; ".join(parts)


def build_prompt(
    candidates: List[Exercise],
    target_muscles: List[str],
    duration_minutes: int,
    experience_level: str,
    location: str,
    injuries: Optional[List[Injury]] = None,
    equipment: Optional[List[str]] = None,
) -> str:
    """Build the selection prompt for the text-generation service."""
    experience_level = enum_value(experience_level)
    location = enum_value(location)
    max_exercises = exercise_count_for_duration(duration_minutes)
    injury_text = format_injuries(injuries) or "none"
    equipment_text = ", ".join(equipment) if equipment else "none specified"
    candidate_json = json.dumps([_candidate_payload(ex) for ex in candidates], indent=2)

    return f"""You are a certified personal trainer. Create a {duration_minutes}-minute {experience_level}-level workout.

USER CONTEXT:
- Duration: {duration_minutes} minutes
- Experience Level: {experience_level}
- Location: {location}
- Target Muscles: {', '.join(target_muscles)}
- Injuries/Limitations: {injury_text}
- Available Equipment: {equipment_text}

CANDIDATE EXERCISES (JSON):
{candidate_json}

RULES:
1. ONLY select exercises from the candidate list above, referenced by their "id". Never invent exercises.
2. HARD LIMIT: at most {max_exercises} exercises.
3. Order compound exercises before isolation exercises.
4. Respect the injuries and equipment above.

Return ONLY valid JSON:
{{
  "name": "Workout name",
  "description": "Brief description of the workout",
  "workoutType": "push|pull|legs|upper|lower|fullbody",
  "exercises": [
    {{
      "exerciseId": "id from the candidate list",
      "name": "Exercise name",
      "sets": 3,
      "reps": "8-10",
      "restSeconds": 90,
      "notes": "form tip"
    }}
  ]
}}"""


# =============================================================================
# RESPONSE PARSING
# =============================================================================

def extract_json_object(text: str) -> Dict[str, Any]:
    """Decode the first {...} block in generated text."""
    match = _JSON_OBJECT_RE.search(text or "")
    if not match:
        raise AIResponseError("No JSON object found in response")
    try:
        data = json.loads(match.group())
    except json.JSONDecodeError as e:
        raise AIResponseError(f"Invalid JSON in response: {e}") from e
    if not isinstance(data, dict):
        raise AIResponseError("Response JSON is not an object")
    return data


def validate_ai_payload(payload: Dict[str, Any]) -> AIWorkoutResponse:
    try:
        return AIWorkoutResponse.model_validate(payload)
    except ValidationError as err:
        errors = [
            {
                "loc": ".".join(str(part) for part in e.get("loc", [])),
                "message": e.get("msg"),
                "error_type": e.get("type"),
            }
            for e in err.errors()
        ]
        raise AIResponseError("Response does not match workout schema", errors) from err


def parse_ai_workout(
    text: str,
    candidates: List[Exercise],
    request: GenerationRequest,
) -> GeneratedWorkout:
    """
    Turn generated text into a GeneratedWorkout.

    Raises:
        AIResponseError: No JSON, schema mismatch, or ids outside the candidates
    """
    parsed = validate_ai_payload(extract_json_object(text))
    by_id = {ex.id: ex for ex in candidates}

    unknown = [item.exercise_id for item in parsed.exercises if item.exercise_id not in by_id]
    if unknown:
        raise AIResponseError(f"Response references unknown exercise ids: {unknown}")

    limit = exercise_count_for_duration(request.duration_minutes)
    items = parsed.exercises
    if len(items) > limit:
        logger.warning("AI returned %d exercises, truncating to %d", len(items), limit)
        items = items[:limit]

    exercises = []
    for item in items:
        catalog = by_id[item.exercise_id]
        exercises.append(GeneratedExercise(
            exercise_id=catalog.id,
            name=catalog.name,
            sets=item.sets,
            reps=item.reps,
            rest_seconds=item.rest_seconds,
            notes=item.notes or None,
            is_compound=catalog.is_compound,
        ))

    workout_type = parsed.workout_type.lower()
    if workout_type not in {t.value for t in WorkoutType}:
        workout_type = classify_workout(classification_muscles(request.target_muscles))

    return GeneratedWorkout(
        name=parsed.name,
        description=parsed.description,
        duration_minutes=request.duration_minutes,
        exercises=exercises,
        workout_type=workout_type,
        target_muscles=list(request.target_muscles),
        workout_style=request.workout_style,
        source="ai",
    )
