"""Response models for DesignEngine."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from designengine.models.errors import ErrorCode


class _UpstreamModel(BaseModel):
    """Base for models parsed from upstream camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ResponseInlineData(_UpstreamModel):
    mime_type: str = "image/png"
    data: str = ""


class ResponsePart(_UpstreamModel):
    text: Optional[str] = None
    inline_data: Optional[ResponseInlineData] = None
    thought: Optional[bool] = None


class CandidateContent(_UpstreamModel):
    role: Optional[str] = None
    parts: Optional[list[ResponsePart]] = None


class Candidate(_UpstreamModel):
    content: Optional[CandidateContent] = None
    finish_reason: Optional[str] = None


class UpstreamErrorBody(_UpstreamModel):
    code: Optional[Any] = None
    message: str = "Unknown upstream error"
    status: Optional[str] = None


class UsageMetadata(_UpstreamModel):
    prompt_token_count: Optional[int] = None
    candidates_token_count: Optional[int] = None
    total_token_count: Optional[int] = None


class ResponseEnvelope(_UpstreamModel):
    """Parsed body of a generateContent response."""

    candidates: Optional[list[Candidate]] = None
    error: Optional[UpstreamErrorBody] = None
    usage_metadata: Optional[UsageMetadata] = None
    model_version: Optional[str] = None

    def first_parts(self) -> Optional[list[ResponsePart]]:
        """Return the parts of the first candidate, or None when there are none."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts


class ResultKind(str, Enum):
    """Kinds of generation outcome."""

    TEXT = "text"
    IMAGE = "image"
    NONE = "none"
    ERROR = "error"


class GenerationResult(BaseModel):
    """Outcome of a single generation call."""

    kind: ResultKind = Field(..., description="Which kind of outcome this is")
    value: Optional[str] = Field(None, description="Text output (kind=text)")
    base64: Optional[str] = Field(None, description="Base64 image payload (kind=image)")
    mime_type: Optional[str] = Field(None, description="Image MIME type (kind=image)")
    code: Optional[ErrorCode] = Field(None, description="Error code (kind=error)")
    message: Optional[str] = Field(None, description="Error message (kind=error)")

    @model_validator(mode="after")
    def validate_kind_fields(self):
        """Ensure each kind carries exactly its own fields."""
        has_text = self.value is not None
        has_image = self.base64 is not None or self.mime_type is not None
        has_error = self.code is not None or self.message is not None

        if self.kind == ResultKind.TEXT:
            if not has_text or has_image or has_error:
                raise ValueError("text results must carry only value")
        elif self.kind == ResultKind.IMAGE:
            if not self.base64 or not self.mime_type or has_text or has_error:
                raise ValueError("image results must carry base64 and mime_type only")
        elif self.kind == ResultKind.ERROR:
            if self.code is None or self.message is None or has_text or has_image:
                raise ValueError("error results must carry code and message only")
        elif has_text or has_image or has_error:
            raise ValueError("none results must not carry any payload")
        return self

    @classmethod
    def text(cls, value: str) -> "GenerationResult":
        return cls(kind=ResultKind.TEXT, value=value)

    @classmethod
    def image(cls, base64: str, mime_type: str) -> "GenerationResult":
        return cls(kind=ResultKind.IMAGE, base64=base64, mime_type=mime_type)

    @classmethod
    def none(cls) -> "GenerationResult":
        return cls(kind=ResultKind.NONE)

    @classmethod
    def failure(cls, code: ErrorCode, message: str) -> "GenerationResult":
        return cls(kind=ResultKind.ERROR, code=code, message=message)

    @property
    def is_image(self) -> bool:
        return self.kind == ResultKind.IMAGE
