from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Mapping, Optional, Sequence

from quiz_statistics.analyzers.metrics.context_store import ContextStore
from quiz_statistics.analyzers.metrics.errors import MissingContextError
from quiz_statistics.analyzers.metrics.registry import MetricRegistry

ContextBuilder = Callable[[Sequence[Any]], Optional[Mapping[str, Any]]]
Report = Dict[str, Any]

logger = logging.getLogger(__name__)


class MetricOrchestrator:
    """
    Runs the metrics registered for a question type over a set of responses.

    Core behavior
    -------------
    - **Context**: the optional context builder is called exactly once per
      run; its mapping is shared by every metric of that run.
    - **Dependencies**: each metric receives the context values it declared,
      in declaration order, after the responses. A name missing from the
      context raises `MissingContextError` and aborts the run.
    - **Failures**: exceptions raised by a calculator or the context builder
      propagate unchanged. No partial report is returned.
    - **Duplicate keys**: a later metric with the same key overwrites the
      earlier value; the key keeps its first position in the report.

    The registry is only read, so independent runs may share one orchestrator.

    Parameters
    ----------
    registry : MetricRegistry
        Registry to read metric definitions from.
    """

    def __init__(self, registry: MetricRegistry) -> None:
        self.registry = registry

    def build_context(
        self,
        responses: Sequence[Any],
        build_context: Optional[ContextBuilder] = None,
    ) -> ContextStore:
        """Run the context builder (if any) and wrap its result."""
        if build_context is None:
            return ContextStore()
        return ContextStore.from_builder_result(build_context(responses))

    def compute_metrics(
        self,
        question_type: Hashable,
        responses: Sequence[Any],
        build_context: Optional[ContextBuilder] = None,
    ) -> Report:
        """
        Compute every metric registered for *question_type*.

        Parameters
        ----------
        question_type : Hashable
            Question type whose metrics to run.
        responses : Sequence
            The response set, passed as first argument to every calculator.
        build_context : Callable, optional
            ``build_context(responses) -> mapping`` of shared context values.

        Returns
        -------
        Dict[str, Any]
            Metric key -> value, in declaration order.

        Raises
        ------
        MissingContextError
            If a metric depends on a context variable that was not built.
        """
        definitions = self.registry.metrics_for(question_type)
        context = self.build_context(responses, build_context)

        report: Report = {}
        for definition in definitions:
            try:
                deps = context.resolve(definition.key, definition.context_deps, question_type)
            except MissingContextError as e:
                logger.error("%s; available: %s", e, sorted(context.keys()))
                raise
            report[definition.key] = definition.calculator(responses, *deps)

        logger.debug(
            "Computed %d metric(s) for %r with %d context variable(s)",
            len(definitions),
            question_type,
            len(context),
        )
        return report


def compute_metrics(
    registry: MetricRegistry,
    question_type: Hashable,
    responses: Sequence[Any],
    build_context: Optional[ContextBuilder] = None,
) -> Report:
    """Shortcut for ``MetricOrchestrator(registry).compute_metrics(...)``."""
    return MetricOrchestrator(registry).compute_metrics(question_type, responses, build_context)
