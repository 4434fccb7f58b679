"""
Exercise Filter - admissible candidates for a generation request.

An exercise is admissible when it targets a requested muscle, its equipment
is available, its difficulty suits the user, and it does not involve a
movement any active injury says to avoid. Pure functions, no side effects.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from workout_engine.models import Exercise, ExperienceLevel, Injury, Location, enum_value

# Equipment tags that never need to be supplied
BODYWEIGHT_TAGS = frozenset({"none", "bodyweight"})


def targets_muscles(exercise: Exercise, target_muscles: Iterable[str]) -> bool:
    """True if the exercise works at least one target (primary or secondary)."""
    muscles = exercise.all_muscles
    return any(m in muscles for m in target_muscles)


def has_equipment(
    exercise: Exercise,
    location: str,
    equipment: Optional[Iterable[str]] = None,
) -> bool:
    """Gyms have everything; elsewhere every required tag must be available."""
    if enum_value(location) == Location.GYM.value:
        return True
    available = set(equipment or [])
    return all(
        tag in available or tag in BODYWEIGHT_TAGS
        for tag in exercise.equipment_required
    )


def difficulty_allowed(exercise: Exercise, experience_level: str) -> bool:
    """Only beginners are restricted: advanced exercises are excluded for them."""
    if not exercise.difficulty:
        return True
    if enum_value(experience_level) == ExperienceLevel.BEGINNER.value:
        return exercise.difficulty != ExperienceLevel.ADVANCED.value
    return True


def mentions_avoided_movement(
    name: str,
    injuries: Optional[Iterable[Injury]] = None,
    movement_pattern: Optional[str] = None,
) -> bool:
    """True if any avoid-movement is a case-insensitive substring of name or pattern."""
    name = (name or "").lower()
    pattern = (movement_pattern or "").lower()
    for injury in injuries or []:
        for movement in injury.movements_to_avoid or []:
            needle = movement.lower()
            if not needle:
                continue
            if needle in name or (pattern and needle in pattern):
                return True
    return False


def conflicts_with_injury(exercise: Exercise, injuries: Optional[Iterable[Injury]] = None) -> bool:
    return mentions_avoided_movement(exercise.name, injuries, exercise.movement_pattern)


def is_admissible(
    exercise: Exercise,
    target_muscles: Iterable[str],
    location: str,
    experience_level: str,
    equipment: Optional[Iterable[str]] = None,
    injuries: Optional[Iterable[Injury]] = None,
) -> bool:
    return (
        targets_muscles(exercise, target_muscles)
        and has_equipment(exercise, location, equipment)
        and difficulty_allowed(exercise, experience_level)
        and not conflicts_with_injury(exercise, injuries)
    )


def filter_exercises(
    exercises: Iterable[Exercise],
    target_muscles: Iterable[str],
    location: str,
    experience_level: str,
    equipment: Optional[Iterable[str]] = None,
    injuries: Optional[Iterable[Injury]] = None,
) -> List[Exercise]:
    """
    Return the admissible subset of the catalog, preserving catalog order.

    Args:
        exercises: Exercise catalog
        target_muscles: Requested muscle tags
        location: gym | home | outdoor
        experience_level: beginner | intermediate | advanced
        equipment: Available equipment tags (ignored at the gym)
        injuries: Active injuries

    Returns:
        Admissible exercises; empty when none qualify
    """
    targets = list(target_muscles)
    equipment_list = list(equipment) if equipment is not None else None
    injury_list = list(injuries or [])
    return [
        ex for ex in exercises
        if is_admissible(ex, targets, location, experience_level, equipment_list, injury_list)
    ]
