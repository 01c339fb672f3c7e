"""Tests for response envelope extractors."""

import pytest

from conftest import PNG_B64, image_envelope, text_envelope
from designengine.models.errors import ErrorCode, NoContentError, UpstreamError
from designengine.models.responses import ResponseEnvelope, ResultKind
from designengine.utils.response_utils import extract_image, extract_text


def test_extract_text_concatenates_parts_in_order():
    envelope = ResponseEnvelope.model_validate(text_envelope("Concept: ", "quiet luxury"))

    assert extract_text(envelope) == "Concept: quiet luxury"


def test_extract_text_skips_image_parts():
    envelope = ResponseEnvelope.model_validate(image_envelope(text="Here is your design."))

    assert extract_text(envelope) == "Here is your design."


def test_extract_text_raises_without_candidates():
    with pytest.raises(NoContentError) as exc_info:
        extract_text(ResponseEnvelope.model_validate({}))

    assert exc_info.value.error_code == ErrorCode.NO_CONTENT


def test_extract_text_raises_on_image_only_response():
    envelope = ResponseEnvelope.model_validate(image_envelope())

    with pytest.raises(NoContentError):
        extract_text(envelope)


def test_extract_text_raises_upstream_error():
    envelope = ResponseEnvelope.model_validate({"error": {"code": 400, "message": "API key not valid"}})

    with pytest.raises(UpstreamError) as exc_info:
        extract_text(envelope)

    assert exc_info.value.upstream_code == 400
    assert "API key not valid" in exc_info.value.message
    assert exc_info.value.error_code == ErrorCode.UPSTREAM_ERROR


def test_extract_image_returns_first_inline_image():
    envelope = ResponseEnvelope.model_validate(image_envelope(text="Done."))

    result = extract_image(envelope)

    assert result is not None
    assert result.kind == ResultKind.IMAGE
    assert result.base64 == PNG_B64
    assert result.mime_type == "image/png"


def test_extract_image_returns_none_for_text_only():
    """A model declining to draw is not an error."""
    envelope = ResponseEnvelope.model_validate(text_envelope("I can't help with that request."))

    assert extract_image(envelope) is None


def test_extract_image_returns_none_without_candidates():
    envelope = ResponseEnvelope.model_validate({"candidates": [{"finishReason": "SAFETY"}]})

    assert extract_image(envelope) is None


def test_extract_image_prefers_final_image_over_thought_image():
    envelope = ResponseEnvelope.model_validate(
        {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"thought": True, "inlineData": {"mimeType": "image/png", "data": "ZHJhZnQ="}},
                            {"inlineData": {"mimeType": "image/jpeg", "data": PNG_B64}},
                        ]
                    }
                }
            ]
        }
    )

    result = extract_image(envelope)

    assert result.base64 == PNG_B64
    assert result.mime_type == "image/jpeg"


def test_extract_image_raises_upstream_error():
    envelope = ResponseEnvelope.model_validate({"error": {"code": 500, "message": "Internal"}})

    with pytest.raises(UpstreamError):
        extract_image(envelope)
