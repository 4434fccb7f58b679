"""Static exemplar workouts, used when no catalog exercise survives filtering."""

from typing import Dict, List, Tuple

from workout_engine.models import WorkoutType

# (name, sets, reps, rest_seconds, is_compound)
EXEMPLARS: Dict[str, List[Tuple[str, int, str, int, bool]]] = {
    WorkoutType.PUSH.value: [
        ("Bench Press", 4, "8-10", 90, True),
        ("Overhead Press", 3, "8-10", 90, True),
        ("Incline Dumbbell Press", 3, "10-12", 75, True),
        ("Lateral Raises", 3, "12-15", 60, False),
        ("Tricep Pushdowns", 3, "12-15", 60, False),
    ],
    WorkoutType.PULL.value: [
        ("Pull-ups", 4, "6-10", 90, True),
        ("Barbell Rows", 4, "8-10", 90, True),
        ("Lat Pulldowns", 3, "10-12", 75, True),
        ("Face Pulls", 3, "12-15", 60, False),
        ("Bicep Curls", 3, "10-12", 60, False),
    ],
    WorkoutType.LEGS.value: [
        ("Squats", 4, "8-10", 120, True),
        ("Romanian Deadlifts", 3, "10-12", 90, True),
        ("Leg Press", 3, "10-12", 90, True),
        ("Leg Curls", 3, "12-15", 60, False),
        ("Calf Raises", 4, "15-20", 60, False),
    ],
    WorkoutType.UPPER.value: [
        ("Bench Press", 4, "8-10", 90, True),
        ("Pull-ups", 3, "6-10", 90, True),
        ("Overhead Press", 3, "8-10", 90, True),
        ("Barbell Rows", 3, "8-10", 90, True),
        ("Dips", 3, "AMRAP", 75, True),
    ],
    WorkoutType.LOWER.value: [
        ("Squats", 4, "8-10", 120, True),
        ("Deadlifts", 3, "6-8", 120, True),
        ("Walking Lunges", 3, "12 each", 90, True),
        ("Leg Press", 3, "10-12", 90, True),
        ("Calf Raises", 4, "15-20", 60, False),
    ],
    WorkoutType.FULLBODY.value: [
        ("Squats", 3, "8-10", 120, True),
        ("Bench Press", 3, "8-10", 90, True),
        ("Barbell Rows", 3, "8-10", 90, True),
        ("Overhead Press", 3, "8-10", 90, True),
        ("Romanian Deadlifts", 3, "10-12", 90, True),
        ("Pull-ups", 3, "AMRAP", 90, True),
    ],
}
