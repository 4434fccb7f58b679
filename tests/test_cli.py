"""Tests for the operator CLI."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from workout_engine.cli import cli


@pytest.fixture
def fixture_file(tmp_path, catalog):
    data = {
        "exercises": [ex.to_dict() for ex in catalog],
        "workout_sessions": [
            {"id": "s1", "user_id": "u1", "completed_at": "2024-03-14T18:00:00"},
            {"id": "s2", "user_id": "u1", "completed_at": "2024-03-15T07:30:00"},
            {"id": "s3", "user_id": "u2", "completed_at": "2024-03-15T07:30:00"},
        ],
        "personal_records": [
            {"user_id": "u1", "exercise_name": "Barbell Back Squat", "estimated_1rm": 100},
        ],
    }
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestCli:

    def test_streaks(self, fixture_file):
        result = CliRunner().invoke(
            cli, ["streaks", "--data", fixture_file, "--user-id", "u1", "--today", "2024-03-15"],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["current_streak"] == 2
        assert payload["last_workout_date"] == "2024-03-15"
        assert payload["message"] == "Keep it going!"

    def test_streaks_bad_date(self, fixture_file):
        result = CliRunner().invoke(
            cli, ["streaks", "--data", fixture_file, "--user-id", "u1", "--today", "15/03/2024"],
        )
        assert result.exit_code == 2

    def test_strength(self, fixture_file):
        result = CliRunner().invoke(
            cli, ["strength", "--data", fixture_file, "--user-id", "u1", "--bodyweight", "80"],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        # expected intermediate squat is 100 at 80 bodyweight
        assert payload["overall_score"] == 60
        assert payload["level"] == "Intermediate"

    def test_generate(self, fixture_file):
        result = CliRunner().invoke(
            cli, ["generate", "--data", fixture_file, "-m", "chest", "--duration", "45"],
        )
        assert result.exit_code == 0, result.output
        assert '"source": "rule_based"' in result.output

    def test_generate_invalid_duration(self, fixture_file):
        result = CliRunner().invoke(
            cli, ["generate", "--data", fixture_file, "-m", "chest", "--duration", "0"],
        )
        assert result.exit_code == 1
