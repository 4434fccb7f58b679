"""Swap alternatives - replacement candidates for one exercise in a workout."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from workout_engine.config import SWAP_ALTERNATIVES_LIMIT
from workout_engine.generation.filter import (
    conflicts_with_injury,
    difficulty_allowed,
    has_equipment,
    targets_muscles,
)
from workout_engine.generation.muscles import build_target_muscles
from workout_engine.models import Exercise, Injury

logger = logging.getLogger(__name__)


def find_swap_alternatives(
    exercises: List[Exercise],
    swap_exercise_id: str,
    location: str,
    experience_level: str,
    target_muscles: Optional[Iterable[str]] = None,
    equipment: Optional[Iterable[str]] = None,
    injuries: Optional[Iterable[Injury]] = None,
    limit: int = SWAP_ALTERNATIVES_LIMIT,
) -> List[Exercise]:
    """
    Rank admissible replacements for an exercise.

    With no target muscles, the swapped exercise's own muscles are used.
    Exercises hitting a target as a primary muscle come first; otherwise
    catalog order is kept.
    """
    targets = list(target_muscles or [])
    if not targets:
        original = next((ex for ex in exercises if ex.id == swap_exercise_id), None)
        if original is not None:
            targets = build_target_muscles(original.name, original.all_muscles)
            logger.info("Swap: no targets given, using %s", ", ".join(targets))

    injury_list = list(injuries or [])
    equipment_list = list(equipment) if equipment is not None else None

    def acceptable(ex: Exercise) -> bool:
        if ex.id == swap_exercise_id:
            return False
        if targets and not targets_muscles(ex, targets):
            return False
        return (
            has_equipment(ex, location, equipment_list)
            and difficulty_allowed(ex, experience_level)
            and not conflicts_with_injury(ex, injury_list)
        )

    alternatives = [ex for ex in exercises if acceptable(ex)]
    alternatives.sort(
        key=lambda ex: any(m in ex.primary_muscles for m in targets),
        reverse=True,
    )
    logger.info("Swap: %d alternatives for %s", len(alternatives), swap_exercise_id)
    return alternatives[:limit]
