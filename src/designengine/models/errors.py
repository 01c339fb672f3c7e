"""Error codes and exception types for DesignEngine."""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Error category codes for generation operations."""

    # Retryable errors (handled by the automatic backoff ladder)
    PROVIDER_TIMEOUT = "PROVIDER_TIMEOUT"
    PROVIDER_OVERLOADED = "PROVIDER_OVERLOADED"
    NETWORK_ERROR = "NETWORK_ERROR"

    # Not retryable errors
    RATE_LIMITED = "RATE_LIMITED"
    INVALID_INPUT = "INVALID_INPUT"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    NOT_FOUND = "NOT_FOUND"
    PROVIDER_REJECTED = "PROVIDER_REJECTED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    NO_CONTENT = "NO_CONTENT"
    MALFORMED_JSON = "MALFORMED_JSON"
    RETRIES_EXHAUSTED = "RETRIES_EXHAUSTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Rate limits are deliberately absent: batches handle them with a cooldown instead.
RETRYABLE_ERRORS = {
    ErrorCode.PROVIDER_TIMEOUT,
    ErrorCode.PROVIDER_OVERLOADED,
    ErrorCode.NETWORK_ERROR,
}

STATUS_CODE_MAP: dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_INPUT,
    401: ErrorCode.AUTHENTICATION_REQUIRED,
    403: ErrorCode.AUTHENTICATION_REQUIRED,
    404: ErrorCode.NOT_FOUND,
    429: ErrorCode.RATE_LIMITED,
}


def is_retryable(code: ErrorCode) -> bool:
    """Check if an error code indicates a retryable error."""
    return code in RETRYABLE_ERRORS


class GenerationEngineError(Exception):
    """Base exception for all generation failures."""

    def __init__(self, error_code: ErrorCode, message: str):
        super().__init__(message)
        self.error_code = error_code
        self.message = message


class RequestError(GenerationEngineError):
    """Upstream answered with a non-success HTTP status that will not be retried."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            STATUS_CODE_MAP.get(status_code, ErrorCode.PROVIDER_REJECTED),
            f"Gemini API error: {status_code} - {body}",
        )
        self.status_code = status_code
        self.body = body


class RetriesExhausted(GenerationEngineError):
    """All attempts of the backoff ladder failed with transient errors."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        detail = f": {last_error}" if last_error else ""
        super().__init__(ErrorCode.RETRIES_EXHAUSTED, f"Max retries exceeded after {attempts} attempts{detail}")
        self.attempts = attempts
        self.last_error = last_error

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.last_error, "status_code", None)


class UpstreamError(GenerationEngineError):
    """The API responded successfully but embedded an error object."""

    def __init__(self, message: str, upstream_code: Optional[Any] = None):
        super().__init__(ErrorCode.UPSTREAM_ERROR, f"Gemini error: {message}")
        self.upstream_code = upstream_code
        self.upstream_message = message

    @property
    def status_code(self) -> Optional[int]:
        return self.upstream_code if isinstance(self.upstream_code, int) else None


class NoContentError(GenerationEngineError):
    """The response envelope carried no content parts."""

    def __init__(self, message: str = "No content in response"):
        super().__init__(ErrorCode.NO_CONTENT, message)


class MalformedJSONError(GenerationEngineError):
    """Model output could not be parsed as JSON even after repair."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(ErrorCode.MALFORMED_JSON, message)
        self.text = text


class AnnotationParseError(MalformedJSONError):
    """Image annotation output was not a usable annotation object."""


def is_rate_limit_error(error: BaseException) -> bool:
    """
    Check whether an error signals an upstream rate limit.

    A structured status code wins when present. Otherwise the message is searched
    for "429", since the upstream sometimes only reports it in free text.
    """
    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        return status_code == 429
    return "429" in str(error)
