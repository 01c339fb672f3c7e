"""Protocol interfaces for DesignEngine collaborators."""

from typing import Literal, Optional, Protocol, Sequence

from typing_extensions import runtime_checkable

from designengine.models.requests import ContentTurn, GenerationConfig
from designengine.models.responses import ResponseEnvelope


@runtime_checkable
class ModelClient(Protocol):
    """Anything that can send one generation request and return the parsed envelope."""

    async def call_model(
        self,
        model: str,
        contents: Sequence[ContentTurn],
        config: Optional[GenerationConfig] = None,
    ) -> ResponseEnvelope:
        """Send a request, retrying transient failures. Raises on terminal failure."""
        ...


@runtime_checkable
class ObjectStore(Protocol):
    """Object storage holding reference and generated images."""

    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        """Store bytes under key and return the public URL."""
        ...

    async def get(self, key: str) -> bytes:
        """Fetch the bytes stored under key."""
        ...

    async def delete(self, key: str) -> None:
        """Remove the object stored under key."""
        ...

    async def presign(self, key: str, op: Literal["get", "put"], ttl: int) -> str:
        """Return a time-limited URL for reading or writing key."""
        ...
