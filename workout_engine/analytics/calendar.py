"""Workout calendar - per-day session aggregates with PR markers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List

from workout_engine.analytics.streaks import local_date
from workout_engine.models import PersonalRecord, SessionRecord


@dataclass
class CalendarDay:
    workout_count: int = 0
    total_volume: float = 0.0
    exercise_count: int = 0
    has_pr: bool = False
    session_ids: List[str] = field(default_factory=list)

    def to_dict(self):
        return {
            "workout_count": self.workout_count,
            "total_volume": self.total_volume,
            "exercise_count": self.exercise_count,
            "has_pr": self.has_pr,
            "session_ids": list(self.session_ids),
        }


def pr_dates(prs: Iterable[PersonalRecord]) -> set:
    return {local_date(pr.achieved_at) for pr in prs if pr.achieved_at is not None}


def build_calendar(
    sessions: Iterable[SessionRecord],
    prs: Iterable[PersonalRecord] = (),
) -> Dict[date, CalendarDay]:
    """
    Bucket completed sessions by local date.

    Sparse: dates without a completed session are absent, even when a PR
    was set on them.
    """
    marked = pr_dates(prs)
    calendar: Dict[date, CalendarDay] = {}

    for session in sessions:
        if session.completed_at is None:
            continue
        day = local_date(session.completed_at)
        bucket = calendar.get(day)
        if bucket is None:
            bucket = calendar[day] = CalendarDay(has_pr=day in marked)
        bucket.workout_count += 1
        bucket.total_volume += session.total_volume or 0
        bucket.exercise_count += session.exercise_count or 0
        bucket.session_ids.append(session.session_id)

    return calendar
