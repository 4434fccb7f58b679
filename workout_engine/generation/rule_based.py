"""Rule-based workout assembly: Selector + Prescription + Namer, and exemplars."""

from __future__ import annotations

import logging
from typing import List, Optional

from workout_engine.generation.exemplars import EXEMPLARS
from workout_engine.generation.filter import mentions_avoided_movement
from workout_engine.generation.muscles import classification_muscles, expand_muscle_groups
from workout_engine.generation.naming import classify_workout, describe_workout, name_workout
from workout_engine.generation.prescription import assign_prescription
from workout_engine.generation.selector import exercise_count_for_duration, select_exercises
from workout_engine.models import (
    Exercise,
    GeneratedExercise,
    GeneratedWorkout,
    GenerationRequest,
    WorkoutType,
)

logger = logging.getLogger(__name__)


def generate_rule_based(
    request: GenerationRequest,
    candidates: List[Exercise],
) -> Optional[GeneratedWorkout]:
    """
    Build a workout from admissible candidates.

    Returns None when nothing could be selected, so the caller can move on
    to the exemplar workout.
    """
    targets = expand_muscle_groups(request.target_muscles)
    count = exercise_count_for_duration(request.duration_minutes)
    selected = select_exercises(candidates, targets, count)
    if not selected:
        logger.info(
            "Rule-based selection empty (candidates=%d, count=%d)",
            len(candidates), count,
        )
        return None

    exercises = []
    for ex in selected:
        rx = assign_prescription(
            ex.is_compound,
            request.experience_level,
            request.workout_style,
            ex.movement_pattern,
        )
        exercises.append(GeneratedExercise(
            exercise_id=ex.id,
            name=ex.name,
            sets=rx.sets,
            reps=rx.reps,
            rest_seconds=rx.rest_seconds,
            is_compound=ex.is_compound,
        ))

    workout_type = classify_workout(classification_muscles(request.target_muscles))
    return GeneratedWorkout(
        name=name_workout(workout_type, request.experience_level, request.workout_style),
        description=describe_workout(len(exercises), request.target_muscles, request.workout_style),
        duration_minutes=request.duration_minutes,
        exercises=exercises,
        workout_type=workout_type,
        target_muscles=list(request.target_muscles),
        workout_style=request.workout_style,
        source="rule_based",
    )


def generate_from_exemplars(request: GenerationRequest) -> GeneratedWorkout:
    """
    Static per-type workout truncated to the duration budget. Never fails.

    Entries naming a movement an injury says to avoid are dropped before
    truncating, so the result may be empty.
    """
    workout_type = classify_workout(classification_muscles(request.target_muscles))
    template = EXEMPLARS.get(workout_type) or EXEMPLARS[WorkoutType.FULLBODY.value]
    template = [entry for entry in template if not mentions_avoided_movement(entry[0], request.injuries)]
    limit = exercise_count_for_duration(request.duration_minutes)

    exercises = [
        GeneratedExercise(
            exercise_id="",
            name=name,
            sets=sets,
            reps=reps,
            rest_seconds=rest,
            is_compound=is_compound,
        )
        for name, sets, reps, rest, is_compound in template[:limit]
    ]
    return GeneratedWorkout(
        name=name_workout(workout_type, request.experience_level, request.workout_style),
        description=f"{len(exercises)} exercises targeting {', '.join(request.target_muscles)}",
        duration_minutes=request.duration_minutes,
        exercises=exercises,
        workout_type=workout_type,
        target_muscles=list(request.target_muscles),
        workout_style=request.workout_style,
        source="exemplar",
    )
