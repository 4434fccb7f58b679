"""Muscle taxonomy: classification sets, group expansion and name inference."""

from typing import Dict, Iterable, List, Optional

PUSH_MUSCLES = frozenset({"chest", "shoulders", "triceps"})
PULL_MUSCLES = frozenset({"back", "biceps", "rear_delts"})
LEG_MUSCLES = frozenset({"quads", "hamstrings", "glutes", "calves"})

CLASSIFIED_MUSCLES = PUSH_MUSCLES | PULL_MUSCLES | LEG_MUSCLES

# Broad groups chosen in the muscle picker -> catalog muscle tags
MUSCLE_GROUPS: Dict[str, tuple] = {
    "chest": ("chest", "upper_chest", "lower_chest"),
    "back": ("back", "lats", "upper_back", "lower_back", "rhomboids", "traps"),
    "shoulders": ("shoulders", "front_delts", "lateral_delts", "rear_delts", "delts"),
    "arms": ("biceps", "triceps", "forearms", "brachialis"),
    "legs": ("quads", "hamstrings", "glutes", "calves", "hip_flexors", "adductors"),
    "core": ("core", "abs", "obliques", "lower_back", "transverse_abdominis"),
}

# Keyword -> muscles, checked in order; first hit wins
_NAME_KEYWORDS: List[tuple] = [
    (("bench", "chest", "push"), ["chest", "triceps", "shoulders"]),
    (("row", "pull", "lat"), ["back", "biceps"]),
    (("squat", "leg", "lunge"), ["quads", "glutes", "hamstrings"]),
    (("deadlift", "hip"), ["hamstrings", "glutes", "back"]),
    (("shoulder", "press", "delt"), ["shoulders", "triceps"]),
    (("curl", "bicep"), ["biceps"]),
    (("tricep", "extension"), ["triceps"]),
    (("core", "ab", "plank"), ["abs", "core"]),
    (("calf", "calves"), ["calves"]),
    (("glute", "hip thrust"), ["glutes"]),
]
_DEFAULT_INFERRED = ["chest", "back", "shoulders"]


def expand_muscle_groups(muscles: Iterable[str]) -> List[str]:
    """Expand broad groups to catalog tags, keeping order and dropping duplicates."""
    expanded: List[str] = []
    seen = set()
    for muscle in muscles:
        for tag in MUSCLE_GROUPS.get(muscle, (muscle,)):
            if tag not in seen:
                seen.add(tag)
                expanded.append(tag)
    return expanded


def classification_muscles(muscles: Iterable[str]) -> List[str]:
    """
    Muscles to classify a request by.

    Tags already in a classification set are kept as chosen; broad groups
    outside the sets ("legs", "arms", "core") are expanded so they still
    classify.
    """
    result: List[str] = []
    for muscle in muscles:
        if muscle in CLASSIFIED_MUSCLES or muscle not in MUSCLE_GROUPS:
            result.append(muscle)
        else:
            result.extend(MUSCLE_GROUPS[muscle])
    return result


def infer_muscles_from_name(name: str) -> List[str]:
    """Guess target muscles from an exercise name when no metadata exists."""
    lower_name = name.lower()
    for keywords, muscles in _NAME_KEYWORDS:
        if any(k in lower_name for k in keywords):
            return list(muscles)
    return list(_DEFAULT_INFERRED)


def build_target_muscles(
    name: str,
    primary_muscles: Optional[Iterable[str]] = None,
    secondary_muscles: Optional[Iterable[str]] = None,
    workout_target_muscles: Optional[Iterable[str]] = None,
) -> List[str]:
    """
    Target muscles for swapping an exercise.

    Primary muscles if known, else secondary, else the workout's targets,
    else inferred from the exercise name.
    """
    for candidate in (primary_muscles, secondary_muscles, workout_target_muscles):
        muscles = sorted(candidate) if isinstance(candidate, (set, frozenset)) else list(candidate or [])
        if muscles:
            return muscles
    return infer_muscles_from_name(name)
