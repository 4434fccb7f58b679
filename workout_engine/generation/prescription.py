"""Prescription Assigner - sets, reps and rest per exercise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from workout_engine.models import WorkoutStyle, enum_value


@dataclass(frozen=True)
class Prescription:
    sets: int
    reps: str
    rest_seconds: int


# Traditional (hypertrophy) table: level -> (compound, isolation)
_TRADITIONAL: Dict[str, Tuple[Prescription, Prescription]] = {
    "beginner": (Prescription(3, "10-12", 90), Prescription(2, "10-12", 60)),
    "intermediate": (Prescription(4, "8-10", 90), Prescription(3, "8-10", 75)),
    "advanced": (Prescription(4, "6-10", 120), Prescription(4, "6-10", 90)),
}
_TRADITIONAL_DEFAULT = Prescription(3, "10-12", 75)


def _traditional(is_compound: bool, experience_level: str) -> Prescription:
    row = _TRADITIONAL.get(enum_value(experience_level))
    if row is None:
        return _TRADITIONAL_DEFAULT
    return row[0] if is_compound else row[1]


def assign_prescription(
    is_compound: bool,
    experience_level: str,
    workout_style: str = WorkoutStyle.TRADITIONAL.value,
    movement_pattern: Optional[str] = None,
) -> Prescription:
    """
    Look up sets/reps/rest for an exercise.

    Traditional style depends on experience level and compound/isolation;
    the other styles use a fixed scheme. Unknown styles are traditional.
    """
    style = enum_value(workout_style)

    if style == WorkoutStyle.STRENGTH.value:
        return Prescription(5, "5", 180 if is_compound else 120)
    if style == WorkoutStyle.HIIT.value:
        return Prescription(3, "12-15", 30)
    if style == WorkoutStyle.CIRCUIT.value:
        return Prescription(3, "10-12", 15)
    if style == WorkoutStyle.WOD.value:
        return Prescription(3, "10-15" if is_compound else "15-20", 60)
    if style == WorkoutStyle.CARDIO.value:
        return Prescription(1, "5-10 min" if movement_pattern == "cardio" else "30-60s", 60)
    if style == WorkoutStyle.MOBILITY.value:
        return Prescription(2, "30-60s hold", 15)

    return _traditional(is_compound, experience_level)
