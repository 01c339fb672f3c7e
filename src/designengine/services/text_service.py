"""Text/vision model tasks: image annotation and creative briefs."""

import logging
import os
from typing import Sequence

from pydantic import ValidationError

from designengine.interfaces import ModelClient
from designengine.models.errors import AnnotationParseError, MalformedJSONError
from designengine.models.requests import ContentPart, ContentTurn, GeminiModel, GenerationConfig, ReferenceImage
from designengine.models.text_responses import AnnotationResult
from designengine.prompts.design_prompts import ANNOTATION_PROMPT, INSPIRATION_PROMPT
from designengine.prompts.textile_prompts import build_textile_inspiration_prompt
from designengine.utils.json_repair import parse_with_repair
from designengine.utils.response_utils import extract_text

logger = logging.getLogger(__name__)

ANNOTATION_TEMPERATURE = 0.3
ANNOTATION_MAX_TOKENS = 2048
INSPIRATION_TEMPERATURE = 0.8
INSPIRATION_MAX_TOKENS = 1024


class TextService:
    """Text-capable model tasks. Failures propagate to the caller unchanged."""

    def __init__(self, provider: ModelClient, model: str | None = None):
        """
        Initialize text service.

        Args:
            provider: Model client used for every upstream call
            model: Text model id (defaults to GEMINI_TEXT_MODEL env var, then GeminiModel.TEXT)
        """
        self.provider = provider
        self.model = model or os.getenv("GEMINI_TEXT_MODEL") or GeminiModel.TEXT.value

    async def annotate_image(self, base64_image: str, mime_type: str = "image/jpeg") -> AnnotationResult:
        """
        Describe a reference image as structured JSON (caption, tags, silhouette, ...).

        Raises:
            AnnotationParseError: If the reply cannot be repaired into a valid annotation
        """
        envelope = await self.provider.call_model(
            self.model,
            [ContentTurn.user([ContentPart.from_text(ANNOTATION_PROMPT), ContentPart.from_image(base64_image, mime_type)])],
            GenerationConfig(temperature=ANNOTATION_TEMPERATURE, max_output_tokens=ANNOTATION_MAX_TOKENS),
        )
        text = extract_text(envelope)

        try:
            annotation = parse_with_repair(text, AnnotationResult)
        except MalformedJSONError as e:
            logger.error(f"❌ [TextService] Annotation output is not JSON: {e.message}")
            raise AnnotationParseError(f"Failed to parse annotation: {e.message}", text=text) from e
        except ValidationError as e:
            logger.error(f"❌ [TextService] Annotation output has the wrong shape: {e.error_count()} errors")
            raise AnnotationParseError(f"Invalid annotation: {str(e)}", text=text) from e

        logger.info(f"✅ [TextService] Annotated image with {len(annotation.tags)} tags")
        return annotation

    async def generate_inspiration(self, reference_images: Sequence[ReferenceImage]) -> str:
        """Free-text creative brief (concept, keywords, directions) from reference images."""
        return await self._brief(INSPIRATION_PROMPT, reference_images)

    async def generate_textile_inspiration(
        self,
        reference_images: Sequence[ReferenceImage],
        artist_name: str,
        textile_title: str,
    ) -> str:
        """Creative brief that keeps an artist's textile at the centre of the design."""
        return await self._brief(build_textile_inspiration_prompt(artist_name, textile_title), reference_images)

    async def _brief(self, instruction: str, reference_images: Sequence[ReferenceImage]) -> str:
        parts = [ContentPart.from_text(instruction), *(image.to_part() for image in reference_images)]
        envelope = await self.provider.call_model(
            self.model,
            [ContentTurn.user(parts)],
            GenerationConfig(temperature=INSPIRATION_TEMPERATURE, max_output_tokens=INSPIRATION_MAX_TOKENS),
        )
        return extract_text(envelope)
