"""Request models for DesignEngine."""

import re
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DATA_URL_PREFIX = re.compile(r"^data:[\w.+-]+/[\w.+-]+;base64,")


def strip_data_url(data: str) -> str:
    """Remove a ``data:<mime>;base64,`` prefix if present."""
    return DATA_URL_PREFIX.sub("", data.strip(), count=1)


class GeminiModel(str, Enum):
    """Upstream model identifiers."""

    TEXT = "gemini-2.0-flash"
    IMAGE = "gemini-3-pro-image-preview"


class Modality(str, Enum):
    """Output modalities that can be requested back from the model."""

    IMAGE = "IMAGE"
    TEXT = "TEXT"


IMAGE_AND_TEXT = [Modality.IMAGE, Modality.TEXT]


class InlineData(BaseModel):
    """Base64-encoded binary payload plus its MIME type."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(..., min_length=1, description="MIME type, e.g. image/png")
    data: str = Field(..., min_length=1, description="Raw base64 payload without data-URL prefix")

    def to_payload(self) -> dict[str, str]:
        return {"mimeType": self.mime_type, "data": self.data}


class ContentPart(BaseModel):
    """One fragment of a content turn: either text or inline data."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    inline_data: Optional[InlineData] = None

    @model_validator(mode="after")
    def validate_single_kind(self):
        """Exactly one of text/inline_data must be set."""
        if (self.text is None) == (self.inline_data is None):
            raise ValueError("ContentPart must carry exactly one of text or inline_data")
        return self

    @classmethod
    def from_text(cls, text: str) -> "ContentPart":
        return cls(text=text)

    @classmethod
    def from_image(cls, data: str, mime_type: str) -> "ContentPart":
        """Build an inline image part, stripping any data-URL prefix first."""
        return cls(inline_data=InlineData(mime_type=mime_type, data=strip_data_url(data)))

    def to_payload(self) -> dict[str, Any]:
        if self.inline_data is not None:
            return {"inlineData": self.inline_data.to_payload()}
        return {"text": self.text}


class ContentTurn(BaseModel):
    """A role-tagged message composed of one or more parts."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = "user"
    parts: list[ContentPart] = Field(..., min_length=1)

    @classmethod
    def user(cls, parts: list[ContentPart]) -> "ContentTurn":
        return cls(role="user", parts=parts)

    def to_payload(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [part.to_payload() for part in self.parts]}


class GenerationConfig(BaseModel):
    """Sampling and output settings for one model call."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature (0.0-2.0)")
    max_output_tokens: int = Field(8192, ge=1, description="Maximum output tokens")
    response_modalities: Optional[list[Modality]] = Field(
        None, description="Requested output modalities, e.g. [IMAGE, TEXT]"
    )
    aspect_ratio: Optional[str] = Field(
        None, pattern=r"^\d+:\d+$", description="Aspect ratio hint for image output, e.g. 4:5"
    )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
        }
        if self.response_modalities:
            payload["responseModalities"] = [m.value for m in self.response_modalities]
        if self.aspect_ratio:
            payload["imageConfig"] = {"aspectRatio": self.aspect_ratio}
        return payload


class GenerationRequest(BaseModel):
    """A complete, immutable request to the generateContent endpoint."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1, description="Upstream model identifier")
    contents: list[ContentTurn] = Field(..., min_length=1)
    generation_config: GenerationConfig = Field(default_factory=GenerationConfig)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent upstream."""
        return {
            "contents": [turn.to_payload() for turn in self.contents],
            "generationConfig": self.generation_config.to_payload(),
        }


class ReferenceImage(BaseModel):
    """Caller-supplied image used as visual context for a generation."""

    base64: str = Field(..., min_length=1, description="Base64 payload, with or without data-URL prefix")
    mime_type: str = Field("image/jpeg", min_length=1)

    def to_part(self) -> ContentPart:
        return ContentPart.from_image(self.base64, self.mime_type)


class DesignOptions(BaseModel):
    """Optional garment category for design generation."""

    category: Optional[str] = None
    category_description: Optional[str] = None


class TextileOptions(BaseModel):
    """Attribution and category details for textile-to-garment generation."""

    artist_name: str = Field(..., min_length=1)
    textile_title: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    category_description: str = ""

    @field_validator("artist_name", "textile_title", "category", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value
