"""Contract tests for request/response models."""

import pytest
from pydantic import ValidationError

from conftest import PNG_B64
from designengine.models.errors import ErrorCode, RequestError, RetriesExhausted, UpstreamError, is_rate_limit_error
from designengine.models.image_responses import BatchReport
from designengine.models.requests import (
    ContentPart,
    ContentTurn,
    GenerationConfig,
    GenerationRequest,
    ReferenceImage,
    TextileOptions,
)
from designengine.models.responses import GenerationResult, ResponseEnvelope, ResultKind


def test_generation_result_image_shape():
    result = GenerationResult.image(PNG_B64, "image/png")

    assert result.kind == ResultKind.IMAGE
    assert result.is_image
    assert result.value is None
    assert result.code is None


def test_generation_result_failure_shape():
    result = GenerationResult.failure(ErrorCode.RATE_LIMITED, "Rate limit exceeded")

    assert result.kind == ResultKind.ERROR
    assert result.code == ErrorCode.RATE_LIMITED
    assert result.message == "Rate limit exceeded"
    assert not result.is_image


def test_generation_result_text_and_none_shapes():
    assert GenerationResult.text("brief").value == "brief"
    assert GenerationResult.none().kind == ResultKind.NONE


def test_generation_result_rejects_mixed_fields():
    with pytest.raises(ValueError, match="image results must carry base64 and mime_type only"):
        GenerationResult(kind=ResultKind.IMAGE, base64=PNG_B64, mime_type="image/png", value="extra")

    with pytest.raises(ValueError, match="none results must not carry any payload"):
        GenerationResult(kind=ResultKind.NONE, message="oops")

    with pytest.raises(ValueError, match="error results must carry code and message only"):
        GenerationResult(kind=ResultKind.ERROR, message="no code")


def test_content_part_requires_exactly_one_kind():
    with pytest.raises(ValidationError):
        ContentPart()

    with pytest.raises(ValidationError):
        ContentPart(text="hi", inline_data={"mime_type": "image/png", "data": PNG_B64})


def test_content_part_rejects_empty_image_payload():
    with pytest.raises(ValidationError):
        ContentPart.from_image("data:image/png;base64,", "image/png")

    with pytest.raises(ValidationError):
        ContentPart.from_image(PNG_B64, "")


@pytest.mark.parametrize("prefix", ["", "data:image/png;base64,", "data:image/svg+xml;base64,"])
def test_content_part_strips_data_url_prefix(prefix):
    part = ContentPart.from_image(prefix + PNG_B64, "image/png")

    assert part.inline_data.data == PNG_B64


def test_reference_image_to_part():
    part = ReferenceImage(base64=f"data:image/jpeg;base64,{PNG_B64}").to_part()

    assert part.to_payload() == {"inlineData": {"mimeType": "image/jpeg", "data": PNG_B64}}


def test_generation_request_is_frozen():
    request = GenerationRequest(model="m", contents=[ContentTurn.user([ContentPart.from_text("hi")])])

    with pytest.raises(ValidationError):
        request.model = "other"


def test_generation_request_requires_contents():
    with pytest.raises(ValidationError):
        GenerationRequest(model="m", contents=[])


def test_generation_config_validation():
    GenerationConfig(temperature=0.0)
    GenerationConfig(temperature=2.0)

    with pytest.raises(ValidationError):
        GenerationConfig(temperature=2.1)

    with pytest.raises(ValidationError):
        GenerationConfig(aspect_ratio="portrait")


def test_textile_options_require_attribution():
    with pytest.raises(ValidationError):
        TextileOptions(artist_name="   ", textile_title="Morning Forest", category="Dress")


def test_response_envelope_tolerates_unknown_fields():
    envelope = ResponseEnvelope.model_validate(
        {
            "candidates": [{"content": {"parts": [{"text": "hi"}]}, "safetyRatings": []}],
            "promptFeedback": {},
            "modelVersion": "gemini-2.0-flash",
        }
    )

    assert envelope.first_parts()[0].text == "hi"
    assert envelope.model_version == "gemini-2.0-flash"


def test_batch_report_summary():
    report = BatchReport(
        requested=3,
        results=[
            GenerationResult.image(PNG_B64, "image/png"),
            GenerationResult.none(),
            GenerationResult.failure(ErrorCode.RATE_LIMITED, "429"),
        ],
    )

    assert report.generated_count == 1
    assert len(report.errors) == 1
    assert report.summary() == "1 of 3 generated"


def test_batch_report_requires_one_result_per_index():
    with pytest.raises(ValueError, match="one entry per requested index"):
        BatchReport(requested=2, results=[GenerationResult.none()])


def test_request_error_maps_status_codes():
    assert RequestError(429, "quota").error_code == ErrorCode.RATE_LIMITED
    assert RequestError(401, "key").error_code == ErrorCode.AUTHENTICATION_REQUIRED
    assert RequestError(404, "model").error_code == ErrorCode.NOT_FOUND
    assert RequestError(418, "teapot").error_code == ErrorCode.PROVIDER_REJECTED


def test_is_rate_limit_error_prefers_status_code():
    assert is_rate_limit_error(RequestError(429, "quota")) is True
    # Structured status wins over a stray "429" in the body
    assert is_rate_limit_error(RequestError(400, "request id 4291")) is False
    assert is_rate_limit_error(UpstreamError("Resource exhausted", upstream_code=429)) is True
    assert is_rate_limit_error(RetriesExhausted(3, RequestError(503, "x"))) is False
    assert is_rate_limit_error(RuntimeError("HTTP 429 Too Many Requests")) is True
    assert is_rate_limit_error(RuntimeError("connection reset")) is False
