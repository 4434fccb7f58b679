"""Workout Namer/Classifier - workout type, display name and description."""

from __future__ import annotations

from typing import Iterable

from workout_engine.generation.muscles import LEG_MUSCLES, PULL_MUSCLES, PUSH_MUSCLES
from workout_engine.models import WorkoutStyle, WorkoutType, enum_value

LEVEL_PREFIXES = {
    "beginner": "Foundation",
    "intermediate": "Progressive",
    "advanced": "Intense",
}

TYPE_NAMES = {
    WorkoutType.PUSH.value: "Push Power",
    WorkoutType.PULL.value: "Pull Strength",
    WorkoutType.LEGS.value: "Leg Day",
    WorkoutType.UPPER.value: "Upper Body",
    WorkoutType.LOWER.value: "Lower Body",
    WorkoutType.FULLBODY.value: "Full Body Blast",
}

# Non-traditional styles replace the level prefix
STYLE_PREFIXES = {
    WorkoutStyle.STRENGTH.value: "5x5",
    WorkoutStyle.HIIT.value: "HIIT",
    WorkoutStyle.CIRCUIT.value: "Circuit",
    WorkoutStyle.WOD.value: "WOD",
    WorkoutStyle.CARDIO.value: "Cardio",
    WorkoutStyle.MOBILITY.value: "Mobility",
}

STYLE_DESCRIPTIONS = {
    WorkoutStyle.TRADITIONAL.value: "hypertrophy-focused",
    WorkoutStyle.STRENGTH.value: "5x5 strength-focused",
    WorkoutStyle.HIIT.value: "high-intensity interval",
    WorkoutStyle.CIRCUIT.value: "circuit training",
    WorkoutStyle.WOD.value: "CrossFit-style WOD",
    WorkoutStyle.CARDIO.value: "cardiovascular conditioning",
    WorkoutStyle.MOBILITY.value: "mobility and recovery",
}


def classify_workout(target_muscles: Iterable[str]) -> str:
    """Classify target muscles as push, pull, legs, upper, lower or fullbody."""
    muscles = set(target_muscles)
    is_push = bool(muscles & PUSH_MUSCLES)
    is_pull = bool(muscles & PULL_MUSCLES)
    is_legs = bool(muscles & LEG_MUSCLES)

    if is_push and not is_pull and not is_legs:
        return WorkoutType.PUSH.value
    if is_pull and not is_push and not is_legs:
        return WorkoutType.PULL.value
    if is_legs and not is_push and not is_pull:
        return WorkoutType.LEGS.value
    if (is_push or is_pull) and not is_legs:
        return WorkoutType.UPPER.value
    if is_legs and not (is_push and is_pull):
        return WorkoutType.LOWER.value
    return WorkoutType.FULLBODY.value


def name_workout(
    workout_type: str,
    experience_level: str,
    workout_style: str = WorkoutStyle.TRADITIONAL.value,
) -> str:
    """E.g. ("push", "intermediate") -> "Progressive Push Power"."""
    style = enum_value(workout_style) or WorkoutStyle.TRADITIONAL.value
    if style in STYLE_PREFIXES:
        prefix = STYLE_PREFIXES[style]
    else:
        prefix = LEVEL_PREFIXES.get(enum_value(experience_level), "")
    type_name = TYPE_NAMES.get(enum_value(workout_type), "Workout")
    return " ".join(part for part in (prefix, type_name) if part).strip()


def describe_workout(
    exercise_count: int,
    target_muscles: Iterable[str],
    workout_style: str = WorkoutStyle.TRADITIONAL.value,
) -> str:
    style_desc = STYLE_DESCRIPTIONS.get(enum_value(workout_style), "hypertrophy-focused")
    return f"{exercise_count} {style_desc} exercises targeting {', '.join(target_muscles)}"
