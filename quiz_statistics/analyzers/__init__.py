"""Question-type analyzers.

Each analyzer module exposes an `Analyzer` subclass and a
``register(registry)`` function declaring its metrics. `build_default_registry`
calls them in dependency order, since inheriting metrics copies whatever the
source type has at that moment.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

from . import essay, metrics, multiple_choice, true_false
from .base import Analyzer
from .essay import Essay
from .metrics.registry import MetricRegistry
from .multiple_choice import MultipleChoice
from .true_false import TrueFalse
from ..constants import LOGGER_NAME
from ..settings import Settings, load_settings

# Registration order matters: true_false inherits from multiple_choice
_BUILTIN_MODULES = [multiple_choice, true_false, essay]
_BUILTIN_ANALYZERS: List[Type[Analyzer]] = [MultipleChoice, TrueFalse, Essay]

_DEFAULT_REGISTRY: Optional[MetricRegistry] = None


def build_default_registry(settings: Optional[Settings] = None) -> MetricRegistry:
    """Create a registry holding the metrics of every built-in analyzer.

    Also applies the configured log level to the package logger; handlers
    are left to `quiz_statistics.log_setup.setup_logging`.
    """
    settings = settings if settings is not None else load_settings()
    logging.getLogger(LOGGER_NAME).setLevel(settings.log_level)
    registry = MetricRegistry(strict_keys=settings.strict_keys)
    for module in _BUILTIN_MODULES:
        module.register(registry)
    return registry


def default_registry() -> MetricRegistry:
    """Return the process-wide built-in registry, building it on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = build_default_registry()
    return _DEFAULT_REGISTRY


def available_analyzers() -> Dict[str, Type[Analyzer]]:
    """Map question type -> built-in analyzer class."""
    return {cls.question_type: cls for cls in _BUILTIN_ANALYZERS}


def get_analyzer_class(question_type: str) -> Type[Analyzer]:
    try:
        return available_analyzers()[question_type]
    except KeyError as e:
        raise KeyError(f"No analyzer for question type: {question_type}") from e


__all__ = [
    "Analyzer",
    "Essay",
    "MultipleChoice",
    "TrueFalse",
    "available_analyzers",
    "build_default_registry",
    "default_registry",
    "get_analyzer_class",
    "metrics",
]
