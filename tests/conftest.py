"""Shared pytest fixtures for DesignEngine tests."""

from typing import Any, Optional, Sequence

import httpx
import pytest

from designengine.models.requests import ContentTurn, GenerationConfig, ReferenceImage
from designengine.models.responses import ResponseEnvelope

PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


class RecordingSleep:
    """Sleeper that records requested delays instead of waiting."""

    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, ms: float) -> None:
        self.calls.append(ms)


def image_envelope(data: str = PNG_B64, mime_type: str = "image/png", text: str | None = None) -> dict[str, Any]:
    """Raw upstream body with one image part (and an optional text part)."""
    parts: list[dict[str, Any]] = []
    if text is not None:
        parts.append({"text": text})
    parts.append({"inlineData": {"mimeType": mime_type, "data": data}})
    return {
        "candidates": [{"content": {"role": "model", "parts": parts}, "finishReason": "STOP"}],
        "usageMetadata": {"promptTokenCount": 100, "candidatesTokenCount": 20, "totalTokenCount": 120},
    }


def text_envelope(*texts: str) -> dict[str, Any]:
    """Raw upstream body with one text part per argument."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": t} for t in texts]}}]}


class FakeModelClient:
    """
    Scripted ModelClient for service tests.

    Each entry in ``script`` is consumed by one call: an Exception is raised,
    a dict is parsed as an envelope, and None yields an envelope with no image.
    """

    def __init__(self, script: Sequence[Any]):
        self.script = list(script)
        self.calls: list[tuple[str, list[ContentTurn], Optional[GenerationConfig]]] = []

    async def call_model(
        self,
        model: str,
        contents: Sequence[ContentTurn],
        config: Optional[GenerationConfig] = None,
    ) -> ResponseEnvelope:
        self.calls.append((model, list(contents), config))
        entry = self.script.pop(0) if self.script else image_envelope()
        if isinstance(entry, Exception):
            raise entry
        if entry is None:
            entry = text_envelope("I cannot draw that.")
        return ResponseEnvelope.model_validate(entry)


@pytest.fixture
def recording_sleep():
    """Fixture for a sleeper that never actually waits."""
    return RecordingSleep()


@pytest.fixture
def reference_images():
    """Two reference images, one raw and one with a data-URL prefix."""
    return [
        ReferenceImage(base64=PNG_B64, mime_type="image/png"),
        ReferenceImage(base64=f"data:image/jpeg;base64,{PNG_B64}", mime_type="image/jpeg"),
    ]


@pytest.fixture
def mock_transport_factory():
    """Build an httpx client whose responses come from a list of (status, body) or exceptions."""

    def _factory(responses: Sequence[Any]):
        requests: list[httpx.Request] = []
        queue = list(responses)

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            entry = queue.pop(0)
            if isinstance(entry, Exception):
                raise entry
            status, body = entry
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client, requests

    return _factory
