"""Metrics models for DesignEngine."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


class GenerationMetrics(BaseModel):
    """Tracking data for one generation batch or call."""

    duration_ms: int = Field(..., ge=0, description="Total wall-clock time in milliseconds")
    model_used: Optional[str] = Field(None, description="Upstream model identifier")
    requested: int = Field(1, ge=0, description="Number of items requested")
    generated: int = Field(0, ge=0, description="Number of items that produced a result")
    failed: int = Field(0, ge=0, description="Number of items that raised")
    rate_limited: int = Field(0, ge=0, description="Number of items that hit the upstream rate limit")
    tokens_used: Optional[int] = Field(None, ge=0, description="Total tokens reported by the upstream")
    timestamp: Optional[datetime] = Field(None, description="When the operation completed (UTC)")
    input: Optional[str] = Field(None, description="Input parameters as JSON string (for observability)")
    output: Optional[str] = Field(None, description="Output summary as JSON string")

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None
