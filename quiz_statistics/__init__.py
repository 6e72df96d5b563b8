"""Quiz statistics: metric calculators for batches of quiz responses.

This package contains:
- The metric registry, declaration API and orchestrator
  (`quiz_statistics.analyzers.metrics`)
- Built-in analyzers for common question types
- Settings and logging helpers
"""

from . import analyzers, constants, helpers, settings
from .analyzers.metrics import (
    MetricDefinition,
    MetricOrchestrator,
    MetricRegistry,
    MissingContextError,
    Simple,
    WithDeps,
    compute_metrics,
)

__version__ = "0.1.0"
__all__ = [
    "MetricDefinition",
    "MetricOrchestrator",
    "MetricRegistry",
    "MissingContextError",
    "Simple",
    "WithDeps",
    "analyzers",
    "compute_metrics",
    "constants",
    "helpers",
    "settings",
]
