"""Models package for DesignEngine."""

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
    InlineData,
    Modality,
    ReferenceImage,
    TextileOptions,
)
from designengine.models.responses import GenerationResult, ResponseEnvelope, ResultKind
from designengine.models.text_responses import AnnotationResult

__all__ = [
    "AnnotationParseError",
    "ErrorCode",
    "GenerationEngineError",
    "MalformedJSONError",
    "NoContentError",
    "RequestError",
    "RetriesExhausted",
    "UpstreamError",
    "is_rate_limit_error",
    "is_retryable",
    "BatchReport",
    "GenerationMetrics",
    "ContentPart",
    "ContentTurn",
    "DesignOptions",
    "GeminiModel",
    "GenerationConfig",
    "GenerationRequest",
    "InlineData",
    "Modality",
    "ReferenceImage",
    "TextileOptions",
    "GenerationResult",
    "ResponseEnvelope",
    "ResultKind",
    "AnnotationResult",
]
