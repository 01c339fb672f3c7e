"""Metrics service for tracking generation batches across calls.

Keeps metrics in memory only; export is left to the host application.
"""

import logging
from typing import Any

from designengine.models.metrics import GenerationMetrics

logger = logging.getLogger(__name__)


class MetricsService:
    """Service for aggregating generation metrics."""

    def __init__(self):
        self._metrics: list[GenerationMetrics] = []

    def record(self, metrics: GenerationMetrics, service_name: str | None = None) -> None:
        """
        Record a generation metrics object.

        Args:
            metrics: The metrics to record
            service_name: Optional service name for categorization
        """
        self._metrics.append(metrics)
        logger.debug(
            f"📊 [MetricsService] Recorded metrics for {service_name or 'unknown'}: "
            f"{metrics.generated}/{metrics.requested} generated, duration={metrics.duration_ms}ms"
        )

    def get_all(self) -> list[GenerationMetrics]:
        """Get all recorded metrics."""
        return self._metrics.copy()

    def clear(self) -> None:
        """Clear all recorded metrics."""
        self._metrics.clear()

    def summary(self) -> dict[str, Any]:
        """Get a summary of recorded metrics."""
        if not self._metrics:
            return {
                "count": 0,
                "requested": 0,
                "generated": 0,
                "rate_limited": 0,
                "success_rate": 0.0,
                "avg_duration_ms": 0,
            }

        requested = sum(m.requested for m in self._metrics)
        generated = sum(m.generated for m in self._metrics)
        total_duration = sum(m.duration_ms for m in self._metrics)

        return {
            "count": len(self._metrics),
            "requested": requested,
            "generated": generated,
            "rate_limited": sum(m.rate_limited for m in self._metrics),
            "success_rate": generated / requested if requested else 0.0,
            "avg_duration_ms": total_duration / len(self._metrics),
        }
