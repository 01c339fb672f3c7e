"""Image generation service: paced design batches, edits and derived views."""

import json
import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from designengine.interfaces import ModelClient
from designengine.models.errors import ErrorCode, GenerationEngineError, is_rate_limit_error
from designengine.models.image_responses import BatchReport
from designengine.models.metrics import GenerationMetrics
from designengine.models.requests import (
    IMAGE_AND_TEXT,
    ContentPart,
    ContentTurn,
    DesignOptions,
    GeminiModel,
    GenerationConfig,
    ReferenceImage,
    TextileOptions,
)
from designengine.models.responses import GenerationResult
from designengine.prompts.design_prompts import build_design_prompt, build_edit_prompt, build_single_design_prompt
from designengine.prompts.textile_prompts import build_textile_design_prompt
from designengine.utils.response_utils import extract_image
from designengine.utils.timing import Sleeper, sleep

logger = logging.getLogger(__name__)

# The image model allows roughly 10 requests per minute
REQUEST_INTERVAL_MS = 7000
RATE_LIMIT_COOLDOWN_MS = 60000

# Ceiling a caller's request handler is expected to allow for one batch
MAX_BATCH_DURATION_SECONDS = 300

BASE_DESIGN_TEMPERATURE = 0.8
TEMPERATURE_STEP = 0.05
MAX_TEMPERATURE = 2.0


def design_temperature(index: int) -> float:
    """Temperature for the index-th item of a batch, rising slightly to encourage variation."""
    return min(round(BASE_DESIGN_TEMPERATURE + index * TEMPERATURE_STEP, 4), MAX_TEMPERATURE)


def minimum_batch_duration_ms(count: int, request_interval_ms: float = REQUEST_INTERVAL_MS) -> float:
    """Pacing floor for a batch of ``count`` calls, before any network time or retries."""
    return max(count - 1, 0) * request_interval_ms


def _error_code(error: Exception) -> ErrorCode:
    if isinstance(error, GenerationEngineError):
        return error.error_code
    return ErrorCode.INTERNAL_ERROR


class ImageService:
    """Image-capable model tasks. Every call is sequential; nothing runs in parallel."""

    def __init__(
        self,
        provider: ModelClient,
        model: str | None = None,
        sleep: Sleeper = sleep,
        metrics_service: Any | None = None,  # Type is 'Any' to avoid circular import
        request_interval_ms: float = REQUEST_INTERVAL_MS,
        rate_limit_cooldown_ms: float = RATE_LIMIT_COOLDOWN_MS,
    ):
        """
        Initialize image service.

        Args:
            provider: Model client used for every upstream call
            model: Image model id (defaults to GEMINI_IMAGE_MODEL env var, then GeminiModel.IMAGE)
            sleep: Millisecond sleeper used for pacing and cooldowns
            metrics_service: Optional MetricsService for recording batch metrics
            request_interval_ms: Delay before every batch item after the first
            rate_limit_cooldown_ms: Extra delay after a rate-limited item
        """
        self.provider = provider
        self.model = model or os.getenv("GEMINI_IMAGE_MODEL") or GeminiModel.IMAGE.value
        self.request_interval_ms = request_interval_ms
        self.rate_limit_cooldown_ms = rate_limit_cooldown_ms
        self._sleep = sleep
        self._metrics_service = metrics_service

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    async def generate_designs(
        self,
        reference_images: Sequence[ReferenceImage],
        prompt: str,
        count: int = 1,
        options: DesignOptions | None = None,
    ) -> list[GenerationResult]:
        """
        Generate ``count`` design variations from reference images.

        Partial results are normal: the returned list holds 0..count images.
        """
        report = await self.generate_designs_report(reference_images, prompt, count, options)
        return report.images

    async def generate_designs_report(
        self,
        reference_images: Sequence[ReferenceImage],
        prompt: str,
        count: int = 1,
        options: DesignOptions | None = None,
    ) -> BatchReport:
        """Same batch as generate_designs, returning every per-index outcome."""
        options = options or DesignOptions()
        instruction = build_design_prompt(prompt, options.category, options.category_description)
        return await self._run_batch(
            self._reference_parts(instruction, reference_images),
            count,
            label="design",
            input_summary={
                "prompt_length": len(prompt),
                "reference_count": len(reference_images),
                "category": options.category,
            },
        )

    async def generate_textile_designs(
        self,
        reference_images: Sequence[ReferenceImage],
        prompt: str,
        count: int,
        options: TextileOptions,
    ) -> list[GenerationResult]:
        """
        Apply the primary reference (an artist's textile) to garments of a category.

        Same pacing and partial-success contract as generate_designs.
        """
        report = await self.generate_textile_designs_report(reference_images, prompt, count, options)
        return report.images

    async def generate_textile_designs_report(
        self,
        reference_images: Sequence[ReferenceImage],
        prompt: str,
        count: int,
        options: TextileOptions,
    ) -> BatchReport:
        """Same batch as generate_textile_designs, returning every per-index outcome."""
        instruction = build_textile_design_prompt(options, prompt)
        return await self._run_batch(
            self._reference_parts(instruction, reference_images),
            count,
            label="textile design",
            input_summary={
                "prompt_length": len(prompt),
                "reference_count": len(reference_images),
                "artist_name": options.artist_name,
                "textile_title": options.textile_title,
                "category": options.category,
            },
        )

    async def _run_batch(
        self,
        parts: list[ContentPart],
        count: int,
        label: str,
        input_summary: dict[str, Any],
    ) -> BatchReport:
        """
        Issue ``count`` sequential calls with fixed pacing.

        One item's failure never aborts the batch. Failures are logged and recorded
        as error results, and rate-limited items add a cooldown before the next one.
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        floor_ms = minimum_batch_duration_ms(count, self.request_interval_ms)
        if floor_ms > MAX_BATCH_DURATION_SECONDS * 1000:
            logger.warning(
                f"⏱️ [ImageService] {label} batch of {count} needs at least {floor_ms / 1000:.0f}s of pacing, "
                f"above the {MAX_BATCH_DURATION_SECONDS}s batch ceiling"
            )

        start_time = time.time()
        contents = [ContentTurn.user(parts)]
        results: list[GenerationResult] = []
        failed = 0
        rate_limited = 0
        tokens_used = 0

        for index in range(count):
            if index > 0:
                await self._sleep(self.request_interval_ms)

            try:
                envelope = await self.provider.call_model(
                    self.model,
                    contents,
                    GenerationConfig(
                        temperature=design_temperature(index),
                        response_modalities=IMAGE_AND_TEXT,
                    ),
                )
                if envelope.usage_metadata and envelope.usage_metadata.total_token_count:
                    tokens_used += envelope.usage_metadata.total_token_count

                image = extract_image(envelope)
                if image is None:
                    logger.warning(f"🚫 [ImageService] {label} {index + 1}/{count}: model returned no image")
                    results.append(GenerationResult.none())
                else:
                    results.append(image)
            except Exception as e:
                failed += 1
                logger.error(
                    f"❌ [ImageService] Error generating {label} {index + 1}/{count}: {str(e)}",
                    exc_info=True,
                )
                results.append(GenerationResult.failure(_error_code(e), str(e)))

                if is_rate_limit_error(e):
                    rate_limited += 1
                    if index < count - 1:
                        logger.warning(
                            f"⏳ [ImageService] Rate limited, cooling down {self.rate_limit_cooldown_ms:.0f}ms"
                        )
                        await self._sleep(self.rate_limit_cooldown_ms)

        duration_ms = int((time.time() - start_time) * 1000)
        generated = sum(1 for result in results if result.is_image)
        metrics = GenerationMetrics(
            duration_ms=duration_ms,
            model_used=self.model,
            requested=count,
            generated=generated,
            failed=failed,
            rate_limited=rate_limited,
            tokens_used=tokens_used or None,
            timestamp=datetime.now(timezone.utc),
            input=json.dumps(input_summary),
            output=json.dumps({"image_count": generated, "failed_count": failed}),
        )

        # Record metrics if service available
        if self._metrics_service and hasattr(self._metrics_service, "record"):
            self._metrics_service.record(metrics, service_name="image")

        report = BatchReport(requested=count, results=results, metrics=metrics)
        logger.info(f"✅ [ImageService] {label} batch finished: {report.summary()} in {duration_ms}ms")
        return report

    # ------------------------------------------------------------------
    # Single calls (failures propagate to the caller)
    # ------------------------------------------------------------------

    async def generate_single_design(
        self,
        reference_images: Sequence[ReferenceImage],
        prompt: str,
        index: int = 0,
    ) -> Optional[GenerationResult]:
        """One paced item of a design batch, for callers that stream items individually."""
        if index > 0:
            await self._sleep(self.request_interval_ms)

        parts = self._reference_parts(build_single_design_prompt(prompt), reference_images)
        envelope = await self.provider.call_model(
            self.model,
            [ContentTurn.user(parts)],
            GenerationConfig(temperature=design_temperature(index), response_modalities=IMAGE_AND_TEXT),
        )
        return extract_image(envelope)

    async def edit_image(self, base64_image: str, mime_type: str, instruction: str) -> Optional[GenerationResult]:
        """Apply only the described change to the image, preserving background and composition."""
        parts = [
            ContentPart.from_text(build_edit_prompt(instruction)),
            ContentPart.from_image(base64_image, mime_type),
        ]
        envelope = await self.provider.call_model(
            self.model,
            [ContentTurn.user(parts)],
            GenerationConfig(temperature=0.7, response_modalities=IMAGE_AND_TEXT),
        )
        return extract_image(envelope)

    async def generate_with_reference(
        self,
        prompt: str,
        reference_base64: str,
        mime_type: str = "image/jpeg",
        aspect_ratio: str | None = None,
    ) -> Optional[GenerationResult]:
        """
        Derived view (hero shot, alternate angle) of a reference image.

        The reference supplies the design DNA and the prompt supplies the composition.
        """
        parts = [ContentPart.from_text(prompt), ContentPart.from_image(reference_base64, mime_type)]
        envelope = await self.provider.call_model(
            self.model,
            [ContentTurn.user(parts)],
            GenerationConfig(temperature=0.8, response_modalities=IMAGE_AND_TEXT, aspect_ratio=aspect_ratio),
        )
        return extract_image(envelope)

    async def generate_image_from_prompt(
        self,
        prompt: str,
        aspect_ratio: str | None = None,
    ) -> Optional[GenerationResult]:
        """Image from a text prompt alone, with no reference image."""
        envelope = await self.provider.call_model(
            self.model,
            [ContentTurn.user([ContentPart.from_text(prompt)])],
            GenerationConfig(temperature=0.8, response_modalities=IMAGE_AND_TEXT, aspect_ratio=aspect_ratio),
        )
        return extract_image(envelope)

    @staticmethod
    def _reference_parts(instruction: str, reference_images: Sequence[ReferenceImage]) -> list[ContentPart]:
        return [ContentPart.from_text(instruction), *(image.to_part() for image in reference_images)]
