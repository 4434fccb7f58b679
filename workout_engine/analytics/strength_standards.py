"""
Strength Standards by Experience Level

Standards are bodyweight multipliers for an estimated 1RM, by training age:
- Beginner: <1 year of consistent training
- Intermediate: 1-3 years
- Advanced: 3+ years

Score interpretation (0-100):
- 0-40: Developing
- 40-60: Beginner
- 60-80: Intermediate (60 = exactly the expected 1RM for your level)
- 80-100: Advanced, 100 capped at 1.2x the advanced standard
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from workout_engine.models import ExperienceLevel, Gender, PersonalRecord, enum_value


@dataclass(frozen=True)
class StrengthStandard:
    lift: str
    slug: str
    aliases: Tuple[str, ...]
    male: Dict[str, float]
    female: Dict[str, float]

    def multipliers(self, gender: str) -> Optional[Dict[str, float]]:
        return {"male": self.male, "female": self.female}.get(enum_value(gender))


def _standard(lift, slug, aliases, male, female) -> StrengthStandard:
    levels = ("beginner", "intermediate", "advanced")
    return StrengthStandard(
        lift=lift,
        slug=slug,
        aliases=tuple(aliases),
        male=dict(zip(levels, male)),
        female=dict(zip(levels, female)),
    )


# Declaration order matters: first match wins in find_standard_for_exercise
STRENGTH_STANDARDS: Dict[str, StrengthStandard] = {
    s.lift: s for s in (
        # Big 4 compound lifts
        _standard("Squat", "barbell-back-squat",
                  ["squat", "back squat", "barbell squat"],
                  (0.75, 1.25, 1.75), (0.5, 0.85, 1.25)),
        _standard("Bench Press", "barbell-bench-press",
                  ["bench", "bench press", "barbell bench"],
                  (0.5, 1.0, 1.5), (0.25, 0.6, 1.0)),
        _standard("Deadlift", "barbell-deadlift",
                  ["deadlift", "conventional deadlift"],
                  (1.0, 1.5, 2.0), (0.75, 1.15, 1.6)),
        _standard("Overhead Press", "barbell-overhead-press",
                  ["ohp", "overhead press", "military press", "shoulder press"],
                  (0.35, 0.65, 1.0), (0.2, 0.45, 0.7)),
        # Secondary compounds
        _standard("Barbell Row", "barbell-row",
                  ["bent over row", "pendlay row"],
                  (0.5, 0.85, 1.25), (0.35, 0.6, 0.9)),
        _standard("Front Squat", "barbell-front-squat",
                  ["front squat"],
                  (0.6, 1.0, 1.4), (0.4, 0.7, 1.0)),
        _standard("Romanian Deadlift", "romanian-deadlift",
                  ["rdl", "romanian deadlift", "stiff leg deadlift"],
                  (0.6, 1.0, 1.4), (0.5, 0.85, 1.2)),
        _standard("Hip Thrust", "barbell-hip-thrust",
                  ["hip thrust", "glute bridge"],
                  (0.75, 1.25, 1.75), (0.75, 1.5, 2.0)),
    )
}

# Major lifts featured in the overall level, in display order
MAJOR_LIFTS = ("Squat", "Bench Press", "Deadlift", "Overhead Press")

ELITE_FACTOR = 1.2


def _round(value: float) -> int:
    """Round half up."""
    return int(math.floor(value + 0.5))


def expected_1rm(
    lift: str,
    bodyweight: float,
    experience_level: str,
    gender: str = Gender.MALE.value,
) -> Optional[int]:
    """Expected 1RM for a lift, or None if the lift or level/gender cell is unknown."""
    standard = STRENGTH_STANDARDS.get(lift)
    if standard is None:
        return None
    multipliers = standard.multipliers(gender)
    if multipliers is None:
        return None
    multiplier = multipliers.get(enum_value(experience_level))
    if multiplier is None:
        return None
    return _round(bodyweight * multiplier)


def strength_score(
    actual_1rm: float,
    lift: str,
    bodyweight: float,
    experience_level: str,
    gender: str = Gender.MALE.value,
) -> int:
    """
    Score an actual 1RM against the expected 1RM for the user's level.

    Centered on the expectation: 50% of expected -> 30, 100% -> 60,
    150% -> 90. Clamped to [0, 100]; 1.2x the advanced standard is 100.
    """
    standard = STRENGTH_STANDARDS.get(lift)
    if standard is None or not bodyweight or bodyweight <= 0:
        return 0
    multipliers = standard.multipliers(gender)
    if multipliers is None:
        return 0

    if actual_1rm <= 0:
        return 0
    advanced_threshold = bodyweight * multipliers[ExperienceLevel.ADVANCED.value]
    if actual_1rm >= advanced_threshold * ELITE_FACTOR:
        return 100

    expected = expected_1rm(lift, bodyweight, experience_level, gender)
    if not expected:
        expected = bodyweight * multipliers[ExperienceLevel.INTERMEDIATE.value]

    percent_of_expected = actual_1rm / expected * 100
    # No "30 +" offset: the expected 1RM itself lands on 60
    score = percent_of_expected * 0.6
    return min(100, max(0, _round(score)))


def strength_label(score: int) -> str:
    if score >= 80:
        return "Advanced"
    if score >= 60:
        return "Intermediate"
    if score >= 40:
        return "Beginner"
    return "Developing"


def find_standard_for_exercise(exercise_name: str) -> Optional[str]:
    """
    Match an exercise name to a standard lift.

    Per lift, in declaration order: exact name, then any alias contained in
    the name, then the slug (hyphens as spaces) contained in the name.
    "Barbell Bench Press" -> "Bench Press".
    """
    normalized = (exercise_name or "").lower().strip()
    if not normalized:
        return None
    for lift, standard in STRENGTH_STANDARDS.items():
        if lift.lower() == normalized:
            return lift
        if any(alias in normalized for alias in standard.aliases):
            return lift
        if standard.slug and standard.slug.replace("-", " ") in normalized:
            return lift
    return None


@dataclass
class LiftScore:
    lift: str
    score: int
    expected: int
    actual: float


@dataclass
class OverallStrength:
    overall_score: int
    level: str
    lift_scores: List[LiftScore] = field(default_factory=list)

    def to_dict(self):
        return {
            "overall_score": self.overall_score,
            "level": self.level,
            "lift_scores": [vars(ls) for ls in self.lift_scores],
        }


def overall_strength_level(
    prs: Iterable[PersonalRecord],
    bodyweight: float,
    experience_level: str,
    gender: str = Gender.MALE.value,
) -> OverallStrength:
    """Average score across the major lifts that have PR data."""
    records = list(prs)
    lift_scores = []

    for lift in MAJOR_LIFTS:
        pr = next(
            (p for p in records if find_standard_for_exercise(p.exercise_name) == lift),
            None,
        )
        expected = expected_1rm(lift, bodyweight, experience_level, gender) or 0
        actual = pr.estimated_1rm if pr and pr.estimated_1rm else 0
        score = (
            strength_score(pr.estimated_1rm, lift, bodyweight, experience_level, gender)
            if pr else 0
        )
        lift_scores.append(LiftScore(lift=lift, score=score, expected=expected, actual=actual))

    scored = [ls for ls in lift_scores if ls.actual > 0]
    overall = _round(sum(ls.score for ls in scored) / len(scored)) if scored else 0

    return OverallStrength(
        overall_score=overall,
        level=strength_label(overall),
        lift_scores=lift_scores,
    )
