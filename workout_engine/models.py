"""
Domain Models - Data models for workout generation and analytics.

Reference data (Exercise) and history (SessionRecord, PersonalRecord,
MuscleVolume) are read from the record repository. GenerationRequest,
GeneratedExercise and GeneratedWorkout are transient and never persisted
by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class Location(str, Enum):
    """Where the workout takes place."""
    GYM = "gym"
    HOME = "home"
    OUTDOOR = "outdoor"


class ExperienceLevel(str, Enum):
    """Training-age classification."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutType(str, Enum):
    """Workout classification derived from target muscles."""
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"
    FULLBODY = "fullbody"


class WorkoutStyle(str, Enum):
    """Programming approach (sets/reps/rest structure)."""
    TRADITIONAL = "traditional"  # Hypertrophy, 3-4 x 8-12
    STRENGTH = "strength"        # 5x5, long rest
    HIIT = "hiit"                # Short rest, higher reps
    CIRCUIT = "circuit"          # Rotate with minimal rest
    WOD = "wod"                  # CrossFit-style
    CARDIO = "cardio"            # Intervals, conditioning
    MOBILITY = "mobility"        # Holds, recovery


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


def enum_value(value: Union[Enum, str, None]) -> Optional[str]:
    """Return the plain string for an enum member or string."""
    if isinstance(value, Enum):
        return value.value
    return value


class InputError(ValueError):
    """Raised when a generation request is malformed."""

    def __init__(self, field_name: str, reason: str):
        super().__init__(f"Invalid '{field_name}': {reason}")
        self.field_name = field_name
        self.reason = reason


# =============================================================================
# REFERENCE DATA
# =============================================================================

@dataclass(frozen=True)
class Exercise:
    """Catalog exercise. Immutable reference data."""
    id: str
    name: str
    slug: str = ""
    primary_muscles: frozenset = frozenset()
    secondary_muscles: frozenset = frozenset()
    equipment_required: frozenset = frozenset()  # empty = bodyweight
    difficulty: Optional[str] = None
    is_compound: bool = False
    movement_pattern: Optional[str] = None

    def __post_init__(self):
        # Accept any iterable of tags
        for name in ("primary_muscles", "secondary_muscles", "equipment_required"):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value or ()))

    @property
    def all_muscles(self) -> frozenset:
        return self.primary_muscles | self.secondary_muscles

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "primary_muscles": sorted(self.primary_muscles),
            "secondary_muscles": sorted(self.secondary_muscles),
            "equipment_required": sorted(self.equipment_required),
            "difficulty": self.difficulty,
            "is_compound": self.is_compound,
            "movement_pattern": self.movement_pattern,
        }


# =============================================================================
# GENERATION REQUEST / OUTPUT
# =============================================================================

@dataclass
class Injury:
    """Active injury with the movements to avoid."""
    body_part: str
    movements_to_avoid: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Injury":
        return cls(
            body_part=data.get("body_part") or data.get("bodyPart", ""),
            movements_to_avoid=list(
                data.get("movements_to_avoid") or data.get("movementsToAvoid") or []
            ),
        )


@dataclass
class GenerationRequest:
    """Per-call generation input."""
    location: str
    target_muscles: List[str]
    duration_minutes: int
    experience_level: str
    injuries: List[Injury] = field(default_factory=list)
    equipment: Optional[List[str]] = None
    workout_style: str = WorkoutStyle.TRADITIONAL.value
    exclude_exercise_ids: List[str] = field(default_factory=list)
    user_id: Optional[str] = None

    def validate(self) -> None:
        """Reject malformed requests before any filtering happens."""
        if not isinstance(self.duration_minutes, int) or isinstance(self.duration_minutes, bool):
            raise InputError("duration_minutes", "must be an integer")
        if self.duration_minutes <= 0:
            raise InputError("duration_minutes", "must be positive")
        if not self.target_muscles:
            raise InputError("target_muscles", "at least one muscle is required")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationRequest":
        return cls(
            location=data.get("location", Location.GYM.value),
            target_muscles=list(data.get("target_muscles") or []),
            duration_minutes=data.get("duration_minutes", 0),
            experience_level=data.get("experience_level", ExperienceLevel.BEGINNER.value),
            injuries=[Injury.from_dict(i) for i in data.get("injuries") or []],
            equipment=data.get("equipment"),
            workout_style=data.get("workout_style", WorkoutStyle.TRADITIONAL.value),
            exclude_exercise_ids=list(data.get("exclude_exercise_ids") or []),
            user_id=data.get("user_id"),
        )


@dataclass
class GeneratedExercise:
    """One prescribed exercise. Order within a workout is significant."""
    exercise_id: str
    name: str
    sets: int
    reps: str  # "8-10", "AMRAP", "30-60s hold"
    rest_seconds: int
    weight: Optional[str] = None
    notes: Optional[str] = None
    is_compound: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "exercise_id": self.exercise_id,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "rest_seconds": self.rest_seconds,
        }
        if self.weight is not None:
            result["weight"] = self.weight
        if self.notes is not None:
            result["notes"] = self.notes
        return result


@dataclass
class GeneratedWorkout:
    """Output of the generation pipeline."""
    name: str
    description: str
    duration_minutes: int
    exercises: List[GeneratedExercise]
    workout_type: str
    target_muscles: List[str]
    workout_style: str = WorkoutStyle.TRADITIONAL.value
    source: str = "rule_based"  # ai | rule_based | exemplar

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "duration_minutes": self.duration_minutes,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "workout_type": self.workout_type,
            "workout_style": self.workout_style,
            "target_muscles": list(self.target_muscles),
            "source": self.source,
        }


# =============================================================================
# HISTORY
# =============================================================================

@dataclass
class SessionRecord:
    """Historical workout session. Only completed sessions count."""
    session_id: str
    completed_at: Optional[datetime] = None
    total_volume: float = 0.0
    exercise_count: int = 0
    started_at: Optional[datetime] = None
    name: Optional[str] = None


@dataclass
class PersonalRecord:
    """Best performance for an exercise."""
    exercise_name: str
    estimated_1rm: float
    exercise_id: Optional[str] = None
    achieved_at: Optional[datetime] = None
    pr_weight: Optional[float] = None
    pr_reps: Optional[int] = None


@dataclass
class MuscleVolume:
    """Rolling per-muscle training volume."""
    muscle: str
    total_volume: float
    last_trained: datetime
    training_days: int
