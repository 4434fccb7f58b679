"""
Workout Engine CLI.

Operator commands over a JSON fixture file shaped like the record store:

    {"exercises": [...], "workout_sessions": [...],
     "personal_records": [...], "muscle_volume": [...]}

Commands:
- generate: Generate a workout from the fixture's exercise catalog
- streaks: Streak summary for a user's sessions
- strength: Strength level from a user's personal records

Usage:
    workout-engine generate --data fixture.json -m chest -m triceps --duration 45
    workout-engine streaks --data fixture.json --user-id u1 --today 2024-03-15
    workout-engine strength --data fixture.json --user-id u1 --bodyweight 80
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import date
from typing import Optional

import click

from workout_engine.analytics.strength_standards import overall_strength_level
from workout_engine.analytics.streaks import compute_streaks, streak_message
from workout_engine.generation.strategy import WorkoutGenerator
from workout_engine.generation.text_service import get_text_service
from workout_engine.models import (
    ExperienceLevel,
    Gender,
    GenerationRequest,
    Injury,
    InputError,
    Location,
    WorkoutStyle,
)
from workout_engine.repository import InMemoryRecordRepository

LEVELS = [level.value for level in ExperienceLevel]


def _load_repository(path: str) -> InMemoryRecordRepository:
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise click.BadParameter("fixture must be a JSON object of collections", param_hint="--data")
    return InMemoryRecordRepository(data)


def _parse_injury(value: str) -> Injury:
    """'knee:squat,lunge' -> Injury('knee', ['squat', 'lunge'])."""
    body_part, _, movements = value.partition(":")
    return Injury(
        body_part=body_part.strip(),
        movements_to_avoid=[m.strip() for m in movements.split(",") if m.strip()],
    )


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def cli(verbose: bool):
    """Workout Engine CLI - generation and training analytics."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# GENERATE
# =============================================================================

@cli.command("generate")
@click.option("--data", "data_path", required=True, type=click.Path(exists=True, dir_okay=False),
              help="Fixture JSON file")
@click.option("--muscle", "-m", "muscles", multiple=True, required=True,
              help="Target muscle or group (repeatable)")
@click.option("--duration", default=45, type=int, help="Duration in minutes (default: 45)")
@click.option("--location", default=Location.GYM.value,
              type=click.Choice([loc.value for loc in Location]))
@click.option("--level", default=ExperienceLevel.INTERMEDIATE.value, type=click.Choice(LEVELS))
@click.option("--style", default=WorkoutStyle.TRADITIONAL.value,
              type=click.Choice([style.value for style in WorkoutStyle]))
@click.option("--equipment", "-e", multiple=True, help="Available equipment (repeatable)")
@click.option("--injury", "-i", "injuries", multiple=True,
              help="Injury as body_part:movement,movement (repeatable)")
@click.option("--ai/--no-ai", default=False, help="Try the configured text service first")
def generate(
    data_path: str,
    muscles: tuple,
    duration: int,
    location: str,
    level: str,
    style: str,
    equipment: tuple,
    injuries: tuple,
    ai: bool,
):
    """
    Generate a workout and print it as JSON.

    Examples:
        workout-engine generate --data fixture.json -m chest -m triceps
        workout-engine generate --data fixture.json -m legs --location home -i knee:squat
    """
    request = GenerationRequest(
        location=location,
        target_muscles=list(muscles),
        duration_minutes=duration,
        experience_level=level,
        injuries=[_parse_injury(i) for i in injuries],
        equipment=list(equipment) if equipment else None,
        workout_style=style,
    )
    generator = WorkoutGenerator(
        repository=_load_repository(data_path),
        text_service=get_text_service() if ai else None,
    )

    try:
        workout = generator.generate(request)
    except InputError as e:
        click.echo(click.style(f"✗ {e}", fg="red"), err=True)
        sys.exit(1)

    _echo_json(workout.to_dict())


# =============================================================================
# STREAKS
# =============================================================================

@cli.command("streaks")
@click.option("--data", "data_path", required=True, type=click.Path(exists=True, dir_okay=False),
              help="Fixture JSON file")
@click.option("--user-id", required=True, help="User whose sessions are summarized")
@click.option("--today", "today_str", help="Reference date (YYYY-MM-DD), defaults to today")
def streaks(data_path: str, user_id: str, today_str: Optional[str]):
    """Print the streak summary for a user."""
    try:
        today = date.fromisoformat(today_str) if today_str else None
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--today") from e

    sessions = _load_repository(data_path).load_sessions(user_id)
    summary = compute_streaks(sessions, today=today)

    payload = summary.to_dict()
    payload["message"] = streak_message(summary)
    _echo_json(payload)


# =============================================================================
# STRENGTH
# =============================================================================

@cli.command("strength")
@click.option("--data", "data_path", required=True, type=click.Path(exists=True, dir_okay=False),
              help="Fixture JSON file")
@click.option("--user-id", required=True, help="User whose personal records are scored")
@click.option("--bodyweight", required=True, type=float, help="Bodyweight in the PRs' unit")
@click.option("--level", default=ExperienceLevel.INTERMEDIATE.value, type=click.Choice(LEVELS))
@click.option("--gender", default=Gender.MALE.value, type=click.Choice([g.value for g in Gender]))
def strength(data_path: str, user_id: str, bodyweight: float, level: str, gender: str):
    """Print the overall strength level over the major lifts."""
    prs = _load_repository(data_path).load_personal_records(user_id)
    result = overall_strength_level(prs, bodyweight, level, gender)
    _echo_json(result.to_dict())


if __name__ == "__main__":
    cli()
