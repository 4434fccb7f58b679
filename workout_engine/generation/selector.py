"""Exercise Selector - bounded, compound-first selection from admissible exercises."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from workout_engine.config import COMPOUND_SHARE, MAX_EXERCISES, MINUTES_PER_EXERCISE
from workout_engine.models import Exercise


def exercise_count_for_duration(duration_minutes: int) -> int:
    """One exercise per 8 minutes, capped at 8."""
    return max(0, min(duration_minutes // MINUTES_PER_EXERCISE, MAX_EXERCISES))


def compound_quota(exercise_count: int) -> Tuple[int, int]:
    """Split a count 60/40 with compounds taking the ceiling share."""
    compounds = math.ceil(exercise_count * COMPOUND_SHARE)
    return compounds, exercise_count - compounds


def relevance_score(exercise: Exercise, target_muscles: Iterable[str]) -> int:
    """Number of target muscles among the exercise's primary muscles."""
    return sum(1 for m in target_muscles if m in exercise.primary_muscles)


def select_exercises(
    admissible: List[Exercise],
    target_muscles: Iterable[str],
    exercise_count: int,
) -> List[Exercise]:
    """
    Choose and order exercises for a session.

    Compounds and isolations are ranked separately by relevance (stable, so
    catalog order breaks ties). The compound quota is filled first, then the
    isolation quota. A short pool is not backfilled from the other one, so
    fewer than exercise_count exercises may come back.
    """
    if exercise_count <= 0:
        return []

    targets = list(target_muscles)
    compounds = [ex for ex in admissible if ex.is_compound]
    isolations = [ex for ex in admissible if not ex.is_compound]

    compounds.sort(key=lambda ex: relevance_score(ex, targets), reverse=True)
    isolations.sort(key=lambda ex: relevance_score(ex, targets), reverse=True)

    compound_count, isolation_count = compound_quota(exercise_count)
    return compounds[:compound_count] + isolations[:isolation_count]
