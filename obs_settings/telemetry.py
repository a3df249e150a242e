"""Telemetry helpers for settings serialization."""

from __future__ import annotations

import os
from typing import Any, Mapping

from prometheus_client import CollectorRegistry, Counter, Histogram

from obs_settings.config import get_settings

REGISTRY = CollectorRegistry()

_serialization_counter = Counter(
    "obs_settings_serializations_total",
    "Total source settings serializations",
    labelnames=("source_kind", "status"),
    registry=REGISTRY,
)

_latency_histogram = Histogram(
    "obs_settings_serialize_latency_ms",
    "Latency of source settings serialization in milliseconds",
    labelnames=("source_kind",),
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 25),
    registry=REGISTRY,
)


def record_serialization(
    *,
    source_kind: str,
    status: str,
    duration_ms: float,
) -> None:
    """Publish Prometheus metrics for one serialization attempt."""
    if not get_settings().metrics_enabled:
        return
    _serialization_counter.labels(source_kind=source_kind, status=status).inc()
    _latency_histogram.labels(source_kind=source_kind).observe(duration_ms)


def build_structured_log_payload(
    *,
    source_kind: str,
    settings: Mapping[str, Any],
    duration_ms: float | None = None,
) -> dict:
    """Build a structured log record for downstream sinks."""
    payload = {
        "source_kind": source_kind,
        "keys": sorted(settings),
        "build_version": os.getenv("BUILD_VERSION", "unknown"),
        "git_sha": os.getenv("GIT_SHA", "unknown"),
    }
    if duration_ms is not None:
        payload["duration_ms"] = duration_ms
    return payload


__all__ = ["REGISTRY", "build_structured_log_payload", "record_serialization"]
