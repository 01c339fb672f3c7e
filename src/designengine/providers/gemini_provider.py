"""Gemini generateContent provider (Google AI Studio API)."""

import logging
import os
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from designengine.models.errors import ErrorCode, RequestError, UpstreamError
from designengine.models.requests import ContentTurn, GenerationConfig, GenerationRequest
from designengine.models.responses import ResponseEnvelope
from designengine.services.retry_service import RetryableError, retry_with_backoff
from designengine.utils.timing import BACKOFF_SCHEDULE_MS, MAX_ATTEMPTS, Sleeper, sleep

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"

# Statuses the upstream uses for transient overload
RETRYABLE_STATUS_CODES = {500, 503}


class GeminiProvider:
    """Sends generateContent requests with bounded retry and fixed backoff."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleeper = sleep,
        max_attempts: int = MAX_ATTEMPTS,
        backoff_schedule_ms: Sequence[float] = BACKOFF_SCHEDULE_MS,
        timeout_seconds: float | None = None,
    ):
        """
        Initialize Gemini provider.

        Args:
            api_key: Gemini API key (defaults to GEMINI_API_KEY environment variable)
            base_url: API base URL (defaults to GEMINI_API_BASE, then the public v1beta endpoint)
            http_client: Optional shared httpx client; one is created (and owned) if omitted
            sleep: Millisecond sleeper used for backoff
            max_attempts: Total attempts per call, including the first
            backoff_schedule_ms: Delay after each failed attempt
            timeout_seconds: Optional per-attempt timeout
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY environment variable or api_key parameter is required")

        self.base_url = (base_url or os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE).rstrip("/")
        self.max_attempts = max_attempts
        self.backoff_schedule_ms = tuple(backoff_schedule_ms)
        self.timeout_seconds = timeout_seconds
        self._sleep = sleep

        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(120.0, connect=10.0))

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this provider created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "GeminiProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def call_model(
        self,
        model: str,
        contents: Sequence[ContentTurn],
        config: Optional[GenerationConfig] = None,
    ) -> ResponseEnvelope:
        """
        Send one generation request, retrying transient failures.

        Args:
            model: Upstream model identifier
            contents: Ordered content turns
            config: Generation settings (defaults: temperature 0.7, 8192 output tokens)

        Returns:
            Parsed response envelope (which may itself carry an upstream error object)

        Raises:
            RequestError: For non-retryable HTTP statuses (including 429)
            RetriesExhausted: If every attempt failed with a transient error
            UpstreamError: If a success response could not be parsed
        """
        request = GenerationRequest(
            model=model,
            contents=list(contents),
            generation_config=config or GenerationConfig(),
        )
        return await retry_with_backoff(
            self._post,
            request,
            sleep=self._sleep,
            max_attempts=self.max_attempts,
            backoff_schedule_ms=self.backoff_schedule_ms,
            timeout_seconds=self.timeout_seconds,
        )

    async def _post(self, request: GenerationRequest) -> ResponseEnvelope:
        """
        Internal single-attempt call that raises RetryableError on transient failures.

        Raises:
            RetryableError: For HTTP 500/503 and network-level failures
            RequestError: For every other non-success status
            UpstreamError: If the success body is not a valid envelope
        """
        try:
            response = await self.client.post(
                self.endpoint(request.model),
                headers={"Content-Type": "application/json", "x-goog-api-key": self.api_key},
                json=request.to_payload(),
            )
        except httpx.TimeoutException as e:
            raise RetryableError(
                ErrorCode.PROVIDER_TIMEOUT,
                f"Gemini request timed out: {str(e)}",
                original_exception=e,
            )
        except httpx.TransportError as e:
            raise RetryableError(
                ErrorCode.NETWORK_ERROR,
                f"Network error calling Gemini: {str(e)}",
                original_exception=e,
            )

        if response.is_success:
            try:
                return ResponseEnvelope.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                raise UpstreamError(f"Unparseable response body: {str(e)}") from e

        error_text = response.text
        if response.status_code in RETRYABLE_STATUS_CODES:
            raise RetryableError(
                ErrorCode.PROVIDER_OVERLOADED,
                f"Gemini API error: {response.status_code} - {error_text}",
                status_code=response.status_code,
                body=error_text,
            )

        logger.error(f"❌ [GeminiProvider] {request.model} returned {response.status_code}: {error_text[:500]}")
        raise RequestError(response.status_code, error_text)
