"""Helpers for pulling text and images out of response envelopes."""

from typing import Optional

from designengine.models.errors import NoContentError, UpstreamError
from designengine.models.responses import GenerationResult, ResponseEnvelope


def _raise_for_upstream_error(envelope: ResponseEnvelope) -> None:
    if envelope.error is not None:
        raise UpstreamError(envelope.error.message, upstream_code=envelope.error.code)


def extract_text(envelope: ResponseEnvelope) -> str:
    """
    Concatenate the text parts of the first candidate.

    Raises:
        UpstreamError: If the envelope reports an error object
        NoContentError: If there are no content parts, or none of them carry text
    """
    _raise_for_upstream_error(envelope)

    parts = envelope.first_parts()
    if parts is None:
        raise NoContentError()

    texts = [part.text for part in parts if part.text]
    if not texts:
        raise NoContentError("No text content in response")
    return "".join(texts)


def extract_image(envelope: ResponseEnvelope) -> Optional[GenerationResult]:
    """
    Return the first inline image of the first candidate, or None if there is none.

    None is the expected outcome when the model declines to draw, so it is not an error.

    Raises:
        UpstreamError: If the envelope reports an error object
    """
    _raise_for_upstream_error(envelope)

    parts = envelope.first_parts()
    if parts is None:
        return None

    image_parts = [part for part in parts if part.inline_data is not None and part.inline_data.data]
    if not image_parts:
        return None

    # Prefer the final image over thought-process drafts
    final_parts = [part for part in image_parts if not part.thought]
    inline_data = (final_parts or image_parts)[0].inline_data
    return GenerationResult.image(inline_data.data, inline_data.mime_type)
