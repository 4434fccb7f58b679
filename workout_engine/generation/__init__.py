"""Workout generation: filter, selector, prescription, naming, AI adapter, strategies."""

from workout_engine.generation.filter import filter_exercises
from workout_engine.generation.naming import classify_workout, name_workout
from workout_engine.generation.prescription import assign_prescription
from workout_engine.generation.selector import exercise_count_for_duration, select_exercises
from workout_engine.generation.strategy import WorkoutGenerator
from workout_engine.generation.swap import find_swap_alternatives

__all__ = [
    "filter_exercises",
    "select_exercises",
    "exercise_count_for_duration",
    "assign_prescription",
    "classify_workout",
    "name_workout",
    "find_swap_alternatives",
    "WorkoutGenerator",
]
