"""Metric declaration, registry and execution.

This module contains the machinery shared by every analyzer:
- Metric definitions and key specs
- The per-question-type registry (declaration and inheritance)
- The orchestrator that builds context and runs the calculators
"""

from .context_store import ContextStore
from .errors import (
    DuplicateMetricError,
    InvalidKeySpecError,
    MissingContextError,
    QuizStatisticsError,
)
from .metric import MetricDefinition, Simple, WithDeps, parse_key_spec
from .metric_orchestrator import MetricOrchestrator, compute_metrics
from .registry import MetricRegistry

__all__ = [
    "ContextStore",
    "DuplicateMetricError",
    "InvalidKeySpecError",
    "MetricDefinition",
    "MetricOrchestrator",
    "MetricRegistry",
    "MissingContextError",
    "QuizStatisticsError",
    "Simple",
    "WithDeps",
    "compute_metrics",
    "parse_key_spec",
]
