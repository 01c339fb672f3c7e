"""Tests for the metrics service."""

from datetime import datetime, timezone

from designengine.models.metrics import GenerationMetrics
from designengine.services.metrics_service import MetricsService


def test_summary_empty():
    assert MetricsService().summary()["count"] == 0


def test_record_and_summary():
    service = MetricsService()
    service.record(GenerationMetrics(duration_ms=21000, requested=4, generated=3, failed=1), "image")
    service.record(GenerationMetrics(duration_ms=7000, requested=2, generated=2, rate_limited=0), "image")

    summary = service.summary()

    assert summary["count"] == 2
    assert summary["requested"] == 6
    assert summary["generated"] == 5
    assert summary["success_rate"] == 5 / 6
    assert summary["avg_duration_ms"] == 14000


def test_clear():
    service = MetricsService()
    service.record(GenerationMetrics(duration_ms=1))
    service.clear()

    assert service.get_all() == []


def test_metrics_timestamp_serializes_iso():
    timestamp = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    dumped = GenerationMetrics(duration_ms=5, timestamp=timestamp).model_dump(mode="json")

    assert dumped["timestamp"] == "2025-01-02T03:04:05+00:00"
