"""Batch image generation response models."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from designengine.models.metrics import GenerationMetrics
from designengine.models.responses import GenerationResult, ResultKind


class BatchReport(BaseModel):
    """Per-index outcomes of a paced generation batch."""

    requested: int = Field(..., ge=0, description="Number of upstream calls requested")
    results: list[GenerationResult] = Field(default_factory=list, description="One outcome per index, in order")
    metrics: Optional[GenerationMetrics] = Field(None, description="Performance tracking for the batch")

    @model_validator(mode="after")
    def validate_result_count(self):
        """Every requested index must have exactly one recorded outcome."""
        if len(self.results) != self.requested:
            raise ValueError("results must hold one entry per requested index")
        return self

    @property
    def images(self) -> list[GenerationResult]:
        return [result for result in self.results if result.kind == ResultKind.IMAGE]

    @property
    def errors(self) -> list[GenerationResult]:
        return [result for result in self.results if result.kind == ResultKind.ERROR]

    @property
    def generated_count(self) -> int:
        return len(self.images)

    def summary(self) -> str:
        """Human-readable partial-success line, e.g. "3 of 4 generated"."""
        return f"{self.generated_count} of {self.requested} generated"
