"""
Generation Strategies - ordered fallback chain for workout generation.

Tiers (first success wins):
1. AIGenerationStrategy: external text service picks from the candidates
2. RuleBasedStrategy: deterministic Selector + Prescription + Namer
3. ExemplarStrategy: static per-type workout, always succeeds

Each tier reports a GenerationResult instead of raising, so the fallback
order and its triggers can be exercised one tier at a time. Every failed
tier is logged as a degraded-mode event.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from workout_engine.events import log_event
from workout_engine.generation.ai_adapter import AIResponseError, build_prompt, parse_ai_workout
from workout_engine.generation.filter import filter_exercises
from workout_engine.generation.muscles import expand_muscle_groups
from workout_engine.generation.rule_based import generate_from_exemplars, generate_rule_based
from workout_engine.generation.text_service import TextGenerationService, TextServiceError
from workout_engine.models import Exercise, GeneratedWorkout, GenerationRequest
from workout_engine.repository import RecordRepository

logger = logging.getLogger(__name__)


@dataclass
class GenerationContext:
    """Inputs shared by every tier for one generation call."""
    request: GenerationRequest
    candidates: List[Exercise] = field(default_factory=list)
    target_muscles: List[str] = field(default_factory=list)  # expanded


@dataclass
class GenerationResult:
    strategy: str
    workout: Optional[GeneratedWorkout] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.workout is not None

    @classmethod
    def failed(cls, strategy: str, reason: str) -> "GenerationResult":
        return cls(strategy=strategy, reason=reason)


class GenerationStrategy(ABC):
    name = "abstract"

    @abstractmethod
    def generate(self, context: GenerationContext) -> GenerationResult:
        pass


class AIGenerationStrategy(GenerationStrategy):
    """Single attempt against the text service; any failure falls through."""

    name = "ai"

    def __init__(self, service: Optional[TextGenerationService]):
        self.service = service

    def generate(self, context: GenerationContext) -> GenerationResult:
        if self.service is None:
            return GenerationResult.failed(self.name, "service_unavailable")
        if not context.candidates:
            return GenerationResult.failed(self.name, "no_candidates")

        request = context.request
        prompt = build_prompt(
            context.candidates,
            context.target_muscles,
            request.duration_minutes,
            request.experience_level,
            request.location,
            request.injuries,
            request.equipment,
        )
        logger.debug("AI prompt length: %d", len(prompt))

        try:
            text = self.service.complete(prompt)
        except TextServiceError as e:
            return GenerationResult.failed(self.name, f"service_error: {e}")

        try:
            workout = parse_ai_workout(text, context.candidates, request)
        except AIResponseError as e:
            return GenerationResult.failed(self.name, f"invalid_response: {e}")
        return GenerationResult(strategy=self.name, workout=workout)


class RuleBasedStrategy(GenerationStrategy):
    name = "rule_based"

    def generate(self, context: GenerationContext) -> GenerationResult:
        if not context.candidates:
            return GenerationResult.failed(self.name, "no_candidates")
        workout = generate_rule_based(context.request, context.candidates)
        if workout is None:
            return GenerationResult.failed(self.name, "empty_selection")
        return GenerationResult(strategy=self.name, workout=workout)


class ExemplarStrategy(GenerationStrategy):
    name = "exemplar"

    def generate(self, context: GenerationContext) -> GenerationResult:
        return GenerationResult(strategy=self.name, workout=generate_from_exemplars(context.request))


def default_strategies(text_service: Optional[TextGenerationService] = None) -> List[GenerationStrategy]:
    return [AIGenerationStrategy(text_service), RuleBasedStrategy(), ExemplarStrategy()]


class WorkoutGenerator:
    """
    Entry point for workout generation.

    Collaborators are passed in; nothing is held in module state.
    """

    def __init__(
        self,
        repository: Optional[RecordRepository] = None,
        text_service: Optional[TextGenerationService] = None,
        strategies: Optional[List[GenerationStrategy]] = None,
    ):
        self.repository = repository
        self.strategies = strategies if strategies is not None else default_strategies(text_service)
        self._catalog: Optional[List[Exercise]] = None

    def load_catalog(self, refresh: bool = False) -> List[Exercise]:
        """Exercise catalog from the repository, cached on this generator."""
        if self._catalog is None or refresh:
            if self.repository is None:
                raise ValueError("No repository configured and no exercises supplied")
            self._catalog = self.repository.load_exercises()
            logger.info("Loaded %d exercises", len(self._catalog))
        return self._catalog

    def build_context(
        self,
        request: GenerationRequest,
        exercises: Optional[List[Exercise]] = None,
    ) -> GenerationContext:
        catalog = exercises if exercises is not None else self.load_catalog()
        excluded = set(request.exclude_exercise_ids)
        if excluded:
            catalog = [ex for ex in catalog if ex.id not in excluded]

        targets = expand_muscle_groups(request.target_muscles)
        candidates = filter_exercises(
            catalog,
            targets,
            request.location,
            request.experience_level,
            request.equipment,
            request.injuries,
        )
        return GenerationContext(request=request, candidates=candidates, target_muscles=targets)

    def generate(
        self,
        request: GenerationRequest,
        exercises: Optional[List[Exercise]] = None,
    ) -> GeneratedWorkout:
        """
        Generate a workout.

        Args:
            request: Generation request
            exercises: Catalog to use instead of the repository's

        Returns:
            The first workout produced by the strategy chain

        Raises:
            InputError: Malformed request
        """
        request.validate()
        context = self.build_context(request, exercises)

        log_event(
            "generation_started",
            user_id=request.user_id,
            location=request.location,
            duration=request.duration_minutes,
            candidates=len(context.candidates),
        )

        for strategy in self.strategies:
            result = strategy.generate(context)
            if result.ok:
                log_event(
                    "workout_generated",
                    user_id=request.user_id,
                    strategy=result.strategy,
                    exercises=len(result.workout.exercises),
                    workout_type=result.workout.workout_type,
                )
                return result.workout
            log_event(
                "generation_strategy_failed",
                level=logging.WARNING,
                user_id=request.user_id,
                strategy=result.strategy,
                reason=result.reason,
            )

        # Only reachable with a custom chain lacking the exemplar tier
        return generate_from_exemplars(request)
