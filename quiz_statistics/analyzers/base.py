"""Base class for question-type analyzers."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence

from quiz_statistics.analyzers.metrics.metric_orchestrator import MetricOrchestrator
from quiz_statistics.analyzers.metrics.registry import MetricRegistry


class Analyzer:
    """Computes the statistics of one question type.

    Metric calculators are not attached to the class; they are declared in a
    MetricRegistry under the analyzer's `question_type`, so subclassing an
    analyzer does not inherit its metrics. Use
    `MetricRegistry.inherit_metrics` for that.

    Subclasses set `question_type` and may override `build_context` to
    prepare variables shared by several metrics.

    Example:
        class ShortAnswer(Analyzer):
            question_type = "short_answer_question"

            def build_context(self, responses):
                return {"texts": [r.get("text") for r in responses]}

        registry.declare_metric("short_answer_question", {"answered": "texts"},
                                lambda responses, texts: sum(1 for t in texts if t))
    """

    question_type: ClassVar[Optional[str]] = None

    def __init__(self, registry: Optional[MetricRegistry] = None) -> None:
        if not self.question_type:
            raise ValueError(f"{type(self).__name__} must define question_type")
        if registry is None:
            from quiz_statistics.analyzers import default_registry

            registry = default_registry()
        self.registry = registry
        self._orchestrator = MetricOrchestrator(registry)

    def build_context(self, responses: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
        """Prepare context variables for the metrics. No context by default."""
        return {}

    def run(self, responses: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
        """Compute every metric declared for this analyzer's question type."""
        return self._orchestrator.compute_metrics(self.question_type, responses, self.build_context)

    def metric_keys(self) -> List[str]:
        return self.registry.keys_for(self.question_type)
