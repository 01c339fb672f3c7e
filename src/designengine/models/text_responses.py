"""Text task response models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

MIN_TAGS = 3
MAX_TAGS = 12


class AnnotationResult(BaseModel):
    """Structured description of a reference image."""

    caption: str = Field(..., description="Short description of the image (1-2 sentences)")
    tags: list[str] = Field(..., min_length=MIN_TAGS, max_length=MAX_TAGS, description="3-12 English tags")
    silhouette: str = Field("", description="e.g. oversized / boxy / fitted / A-line")
    material: str = Field("", description="Main material, e.g. nylon / wool blend / cotton")
    pattern: str = Field("", description="e.g. solid / stripe / check / floral")
    details: str = Field("", description="Salient details, e.g. zip, drawstring, utility pockets")
    mood: str = Field("", description="e.g. urban / high-fashion street / casual")
    color_palette: list[str] = Field(default_factory=list, description="Dominant colors")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        """Drop blanks and duplicates, keeping at most MAX_TAGS."""
        if not isinstance(value, list):
            return value
        seen: list[str] = []
        for tag in value:
            if not isinstance(tag, str):
                continue
            cleaned = tag.strip()
            if cleaned and cleaned.lower() not in (s.lower() for s in seen):
                seen.append(cleaned)
        return seen[:MAX_TAGS]

    @field_validator("details", "silhouette", "material", "pattern", "mood", mode="before")
    @classmethod
    def join_lists(cls, value: Any) -> Any:
        """Models occasionally answer list-valued fields; flatten them to text."""
        if isinstance(value, list):
            return ", ".join(str(item) for item in value)
        return value
