"""
Text Generation Service - Abstraction over the external LLM used for
AI-assisted workout generation.

Every implementation makes exactly one attempt with a bounded timeout.
Failures surface as TextServiceError; the generation strategy chain turns
that into a fallback, never into a caller-visible error.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import requests

from workout_engine import config
from workout_engine.generation.http import HttpClient

logger = logging.getLogger(__name__)


class TextServiceError(Exception):
    """Raised when the text-generation service fails or times out."""

    def __init__(self, message: str, service: str = "unknown", status_code: Optional[int] = None):
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class TextGenerationService(ABC):
    """
    Abstract text-generation interface.

    Implementations:
    - GenAITextService: Vertex AI via google-genai
    - HttpTextService: Generic {prompt} -> {content} HTTP endpoint
    - MockTextService: Tests
    """

    name = "abstract"

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Returns:
            Generated text

        Raises:
            TextServiceError: On any failure, including timeouts
        """
        pass


class GenAITextService(TextGenerationService):
    """Production service using the google-genai SDK in Vertex mode."""

    name = "genai"

    def __init__(
        self,
        model_name: str = config.GENAI_MODEL,
        project_id: Optional[str] = None,
        location: Optional[str] = None,
        timeout_seconds: int = config.AI_TIMEOUT_SECS,
        temperature: float = config.AI_TEMPERATURE,
        client=None,
    ):
        self.model_name = model_name
        self.project_id = project_id or config.PROJECT_ID
        self.location = location or config.REGION
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self._client = client

    def _get_client(self):
        """Lazy client construction, owned by this instance."""
        if self._client is None:
            from google import genai
            from google.genai.types import HttpOptions

            self._client = genai.Client(
                vertexai=True,
                project=self.project_id,
                location=self.location,
                http_options=HttpOptions(timeout=self.timeout_seconds * 1000),
            )
            logger.info(
                "GenAI client initialized: project=%s, location=%s",
                self.project_id, self.location,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        from google.genai.types import GenerateContentConfig

        try:
            response = self._get_client().models.generate_content(
                model=self.model_name,
                contents=[prompt.strip()],
                config=GenerateContentConfig(
                    temperature=self.temperature,
                    response_mime_type="application/json",
                ),
            )
        except Exception as e:
            logger.error("GenAI call failed (model=%s): %s", self.model_name, e)
            raise TextServiceError(str(e), service=self.name) from e

        text = (response.text or "").strip()
        if not text:
            raise TextServiceError("LLM response contained no text", service=self.name)
        logger.debug("GenAI response length: %d chars", len(text))
        return text


class HttpTextService(TextGenerationService):
    """Service behind an HTTP endpoint: POST {"prompt"} -> {"content"}."""

    name = "http"

    def __init__(self, http: HttpClient):
        self.http = http

    def complete(self, prompt: str) -> str:
        try:
            data = self.http.post("", {"prompt": prompt})
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("Text service returned HTTP %s: %s", status, e)
            raise TextServiceError(str(e), service=self.name, status_code=status) from e
        except requests.RequestException as e:
            # Includes requests.Timeout
            logger.error("Text service request failed: %s", e)
            raise TextServiceError(str(e), service=self.name) from e

        content = data.get("content")
        if not isinstance(content, str) or not content.strip():
            raise TextServiceError("Response has no content", service=self.name)
        return content


class MockTextService(TextGenerationService):
    """
    Mock service for tests.

    Returns queued responses in order (the last one repeats), or raises
    `error` when set.
    """

    name = "mock"

    def __init__(self, responses: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.responses = list(responses or [])
        self.error = error
        self.call_count = 0
        self.last_prompt: Optional[str] = None

    def complete(self, prompt: str) -> str:
        self.call_count += 1
        self.last_prompt = prompt
        if self.error is not None:
            raise self.error
        if not self.responses:
            raise TextServiceError("No mock response configured", service=self.name)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


def get_text_service(use_mock: bool = False) -> Optional[TextGenerationService]:
    """
    Factory for the configured text-generation service.

    Returns None when AI generation is disabled, in which case generation
    runs rule-based only.
    """
    if not config.AI_GENERATION_ENABLED:
        logger.info("AI generation disabled")
        return None

    if use_mock or config.USE_MOCK_LLM:
        logger.info("Using MockTextService")
        return MockTextService()

    if config.TEXT_SERVICE_URL:
        logger.info("Using HttpTextService: %s", config.TEXT_SERVICE_URL)
        return HttpTextService(HttpClient(
            base_url=config.TEXT_SERVICE_URL,
            api_key=config.TEXT_SERVICE_API_KEY,
            timeout_seconds=config.AI_TIMEOUT_SECS,
        ))

    logger.info("Using GenAITextService")
    return GenAITextService()
