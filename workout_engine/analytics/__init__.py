"""Training analytics: strength standards, streaks, calendar, muscle scores."""

from workout_engine.analytics.calendar import CalendarDay, build_calendar
from workout_engine.analytics.muscle_scores import muscle_score, muscle_trend, summarize_muscles
from workout_engine.analytics.strength_standards import (
    MAJOR_LIFTS,
    STRENGTH_STANDARDS,
    expected_1rm,
    find_standard_for_exercise,
    overall_strength_level,
    strength_label,
    strength_score,
)
from workout_engine.analytics.streaks import StreakSummary, compute_streaks, streak_message

__all__ = [
    "CalendarDay",
    "build_calendar",
    "muscle_score",
    "muscle_trend",
    "summarize_muscles",
    "MAJOR_LIFTS",
    "STRENGTH_STANDARDS",
    "expected_1rm",
    "find_standard_for_exercise",
    "overall_strength_level",
    "strength_label",
    "strength_score",
    "StreakSummary",
    "compute_streaks",
    "streak_message",
]
