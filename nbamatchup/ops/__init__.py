"""Operational helpers."""

from nbamatchup.ops.logging import configure_logging
from nbamatchup.ops.metrics import MetricsRecorder, get_metrics_recorder

__all__ = ["configure_logging", "MetricsRecorder", "get_metrics_recorder"]
