"""
Workout streaks - consecutive training days from completed sessions.

Dates are local calendar dates: timezone-aware timestamps are converted to
the system timezone, then truncated. Weeks start on Monday.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Set

from workout_engine.models import SessionRecord

logger = logging.getLogger(__name__)


@dataclass
class StreakSummary:
    current_streak: int = 0
    longest_streak: int = 0
    last_workout_date: Optional[date] = None
    days_since_last_workout: int = -1  # -1 = never trained
    this_week_workouts: int = 0
    this_month_workouts: int = 0

    def to_dict(self):
        result = asdict(self)
        if self.last_workout_date is not None:
            result["last_workout_date"] = self.last_workout_date.isoformat()
        return result


def local_date(timestamp: datetime) -> date:
    """Truncate a timestamp to its local calendar date."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.date()


def workout_dates(sessions: Iterable[SessionRecord]) -> Set[date]:
    """Unique local dates of completed sessions."""
    return {local_date(s.completed_at) for s in sessions if s.completed_at is not None}


def _current_streak(dates: Set[date], today: date) -> int:
    # A streak stays alive until the end of the day after the last workout
    day = today if today in dates else today - timedelta(days=1)
    streak = 0
    while day in dates:
        streak += 1
        day -= timedelta(days=1)
    return streak


def _longest_streak(sorted_dates: List[date]) -> int:
    longest = 0
    running = 0
    previous = None
    for day in sorted_dates:
        if previous is not None and (day - previous).days == 1:
            running += 1
        else:
            running = 1
        longest = max(longest, running)
        previous = day
    return longest


def compute_streaks(
    sessions: Iterable[SessionRecord],
    today: Optional[date] = None,
) -> StreakSummary:
    """
    Summarize training consistency.

    Args:
        sessions: Session history in any order; sessions without a
            completion timestamp are ignored
        today: Reference date, defaults to the local date

    Returns:
        StreakSummary (all zeros and -1 days-since for no history)
    """
    today = today or date.today()
    dates = workout_dates(sessions)
    if not dates:
        return StreakSummary()

    sorted_dates = sorted(dates)
    last = sorted_dates[-1]
    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)

    summary = StreakSummary(
        current_streak=_current_streak(dates, today),
        longest_streak=_longest_streak(sorted_dates),
        last_workout_date=last,
        days_since_last_workout=(today - last).days,
        this_week_workouts=sum(1 for d in dates if week_start <= d <= today),
        this_month_workouts=sum(1 for d in dates if month_start <= d <= today),
    )
    logger.debug(
        "Streaks: current=%d longest=%d over %d dates",
        summary.current_streak, summary.longest_streak, len(dates),
    )
    return summary


def streak_message(summary: StreakSummary) -> str:
    """Short status line for a streak summary."""
    if summary.current_streak == 0 and summary.days_since_last_workout > 0:
        if summary.days_since_last_workout == 1:
            return "Get back on track today!"
        if summary.days_since_last_workout <= 3:
            return "Time to get moving!"
        return "Start a new streak today!"
    if summary.current_streak >= 7:
        return "Incredible consistency!"
    if summary.current_streak >= 3:
        return "Great momentum!"
    if summary.current_streak >= 1:
        return "Keep it going!"
    return "Start your streak!"
