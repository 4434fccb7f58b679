"""Tests for exercise selection."""
from __future__ import annotations

import pytest

from workout_engine.generation.filter import filter_exercises
from workout_engine.generation.selector import (
    compound_quota,
    exercise_count_for_duration,
    relevance_score,
    select_exercises,
)
from workout_engine.models import Exercise


class TestExerciseCount:

    @pytest.mark.parametrize("duration,expected", [
        (45, 5),
        (60, 7),
        (64, 8),
        (90, 8),
        (240, 8),
        (8, 1),
        (7, 0),
        (0, 0),
    ])
    def test_count_for_duration(self, duration, expected):
        assert exercise_count_for_duration(duration) == expected

    def test_compound_quota_takes_ceiling(self):
        assert compound_quota(5) == (3, 2)
        assert compound_quota(4) == (3, 1)
        assert compound_quota(1) == (1, 0)
        assert compound_quota(0) == (0, 0)


class TestSelectExercises:

    def test_compounds_before_isolations(self, catalog):
        admissible = filter_exercises(catalog, ["chest", "triceps", "shoulders"], "gym", "advanced")
        selected = select_exercises(admissible, ["chest", "triceps", "shoulders"], 5)
        flags = [ex.is_compound for ex in selected]
        assert flags == sorted(flags, reverse=True)
        assert len(selected) == 5

    def test_relevance_orders_within_pool(self, catalog):
        admissible = filter_exercises(catalog, ["chest", "triceps"], "gym", "advanced")
        selected = select_exercises(admissible, ["chest", "triceps"], 5)
        # dips hits both targets as primary muscles
        assert selected[0].id == "dips"

    def test_ties_keep_catalog_order(self, catalog):
        admissible = filter_exercises(catalog, ["chest"], "gym", "intermediate")
        selected = select_exercises(admissible, ["chest"], 8)
        assert [ex.id for ex in selected] == ["bench", "pushup", "dips", "fly"]

    def test_no_backfill_from_isolations(self):
        isolations = [
            Exercise(id=f"iso{i}", name=f"Isolation {i}", primary_muscles=["chest"])
            for i in range(6)
        ]
        selected = select_exercises(isolations, ["chest"], 5)
        assert [ex.id for ex in selected] == ["iso0", "iso1"]

    def test_zero_count(self, catalog):
        assert select_exercises(catalog, ["chest"], 0) == []

    @pytest.mark.parametrize("duration", [8, 15, 30, 45, 60, 75, 120])
    def test_selection_bound(self, catalog, duration):
        targets = ["chest", "back", "quads", "triceps"]
        admissible = filter_exercises(catalog, targets, "gym", "advanced")
        count = exercise_count_for_duration(duration)
        selected = select_exercises(admissible, targets, count)
        assert len(selected) <= min(duration // 8, 8)

    def test_relevance_score_counts_primary_only(self, by_id):
        assert relevance_score(by_id["bench"], ["chest", "triceps"]) == 1
        assert relevance_score(by_id["dips"], ["chest", "triceps"]) == 2
