"""
Muscle development scores from rolling per-muscle volume.

Score (0-100) = frequency points + recency points:
- Frequency: 5 points per training day in the window, capped at 50
  (10+ days per month earns the full amount)
- Recency: 50 points scaled by days since last trained
  (<=3: 1.0, <=7: 0.8, <=14: 0.5, older: 0.3)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from workout_engine.analytics.streaks import local_date
from workout_engine.models import MuscleVolume

FREQUENCY_POINTS = 50
FULL_FREQUENCY_DAYS = 10
RECENCY_POINTS = 50


def days_since_trained(volume: MuscleVolume, today: Optional[date] = None) -> int:
    today = today or date.today()
    return (today - local_date(volume.last_trained)).days


def recency_multiplier(days: int) -> float:
    if days <= 3:
        return 1.0
    if days <= 7:
        return 0.8
    if days <= 14:
        return 0.5
    return 0.3


def muscle_score(volume: MuscleVolume, today: Optional[date] = None) -> int:
    frequency = min(FREQUENCY_POINTS, volume.training_days / FULL_FREQUENCY_DAYS * FREQUENCY_POINTS)
    recency = RECENCY_POINTS * recency_multiplier(days_since_trained(volume, today))
    return int(math.floor(frequency + recency + 0.5))


def muscle_trend(volume: MuscleVolume, today: Optional[date] = None) -> str:
    """'down' after a week off, 'up' when recent and frequent, else 'stable'."""
    days = days_since_trained(volume, today)
    if days > 7:
        return "down"
    if days <= 3 and volume.training_days >= 3:
        return "up"
    return "stable"


def format_muscle_name(muscle: str) -> str:
    return muscle.replace("_", " ").replace("-", " ").title()


@dataclass
class MuscleSummary:
    muscle: str
    name: str
    score: int
    trend: str
    total_volume: float
    days_since_trained: int

    def to_dict(self):
        return {
            "muscle": self.muscle,
            "name": self.name,
            "score": self.score,
            "trend": self.trend,
            "total_volume": self.total_volume,
            "days_since_trained": self.days_since_trained,
        }


def summarize_muscles(
    volumes: Iterable[MuscleVolume],
    today: Optional[date] = None,
) -> List[MuscleSummary]:
    """One summary per muscle, in input order."""
    today = today or date.today()
    return [
        MuscleSummary(
            muscle=v.muscle,
            name=format_muscle_name(v.muscle),
            score=muscle_score(v, today),
            trend=muscle_trend(v, today),
            total_volume=v.total_volume,
            days_since_trained=days_since_trained(v, today),
        )
        for v in volumes
    ]
