"""DesignEngine - Gemini orchestration for moodboard-driven fashion design generation."""

from designengine.interfaces import ModelClient, ObjectStore
from designengine.models.errors import (
    AnnotationParseError,
    ErrorCode,
    GenerationEngineError,
    MalformedJSONError,
    NoContentError,
    RequestError,
    RetriesExhausted,
    UpstreamError,
    is_rate_limit_error,
    is_retryable,
)
from designengine.models.image_responses import BatchReport
from designengine.models.metrics import GenerationMetrics
from designengine.models.requests import (
    ContentPart,
    ContentTurn,
    DesignOptions,
    GeminiModel,
    GenerationConfig,
    GenerationRequest,
    Modality,
    ReferenceImage,
    TextileOptions,
)
from designengine.models.responses import GenerationResult, ResponseEnvelope, ResultKind
from designengine.models.text_responses import AnnotationResult
from designengine.providers.gemini_provider import GeminiProvider
from designengine.services.asset_service import load_reference_images, upload_generated_images
from designengine.services.image_service import ImageService
from designengine.services.metrics_service import MetricsService
from designengine.services.retry_service import RetryableError, retry_with_backoff
from designengine.services.text_service import TextService
from designengine.utils.json_repair import parse_with_repair, repair
from designengine.utils.response_utils import extract_image, extract_text
from designengine.utils.timing import sleep

__version__ = "0.1.0"

__all__ = [
    # Interfaces
    "ModelClient",
    "ObjectStore",
    # Errors
    "AnnotationParseError",
    "ErrorCode",
    "GenerationEngineError",
    "MalformedJSONError",
    "NoContentError",
    "RequestError",
    "RetriesExhausted",
    "RetryableError",
    "UpstreamError",
    "is_rate_limit_error",
    "is_retryable",
    # Request types
    "ContentPart",
    "ContentTurn",
    "DesignOptions",
    "GeminiModel",
    "GenerationConfig",
    "GenerationRequest",
    "Modality",
    "ReferenceImage",
    "TextileOptions",
    # Response types
    "AnnotationResult",
    "BatchReport",
    "GenerationMetrics",
    "GenerationResult",
    "ResponseEnvelope",
    "ResultKind",
    # Providers
    "GeminiProvider",
    # Services
    "ImageService",
    "MetricsService",
    "TextService",
    "load_reference_images",
    "upload_generated_images",
    "retry_with_backoff",
    # Utilities
    "extract_image",
    "extract_text",
    "parse_with_repair",
    "repair",
    "sleep",
]
