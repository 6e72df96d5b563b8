from __future__ import annotations

import logging
from typing import Callable, Dict, Hashable, List, Tuple

from quiz_statistics.analyzers.metrics.errors import DuplicateMetricError
from quiz_statistics.analyzers.metrics.metric import (
    Calculator,
    KeySpec,
    MetricDefinition,
    make_definition,
)

logger = logging.getLogger(__name__)


class MetricRegistry:
    """
    Registry of metric calculators, partitioned by question type.

    Each question type maps to the list of MetricDefinitions declared (or
    inherited) for it, in declaration order. Entries are only ever appended.
    Declaring a key twice for the same question type is allowed; at execution
    the later definition overwrites the earlier one's report slot.

    Parameters
    ----------
    strict_keys : bool, optional
        If True, declaring or inheriting a key that already exists for the
        target question type raises DuplicateMetricError. Default is False.
    """

    def __init__(self, *, strict_keys: bool = False) -> None:
        self.strict_keys = strict_keys
        self._metrics: Dict[Hashable, List[MetricDefinition]] = {}

    def _bucket(self, question_type: Hashable) -> List[MetricDefinition]:
        return self._metrics.setdefault(question_type, [])

    def _check_unique(self, question_type: Hashable, bucket: List[MetricDefinition], key: str) -> None:
        if self.strict_keys and any(d.key == key for d in bucket):
            raise DuplicateMetricError(question_type, key)

    def declare_metric(
        self,
        question_type: Hashable,
        key_spec: KeySpec,
        calculator: Calculator,
    ) -> MetricDefinition:
        """
        Register a metric calculator under *question_type*.

        Parameters
        ----------
        question_type : Hashable
            Identifier of the question type the metric applies to.
        key_spec : KeySpec
            Either a bare key (``"missing_answers"`` or ``Simple(...)``), or a
            key with its context dependencies (``{"graded": ["grades"]}`` or
            ``WithDeps(...)``).
        calculator : Callable
            Called as ``calculator(responses, *deps)`` with the dependency
            values in declaration order.

        Returns
        -------
        MetricDefinition
            The definition that was appended.

        Raises
        ------
        InvalidKeySpecError
            If the key spec cannot be parsed.
        DuplicateMetricError
            In strict-keys mode, if the key already exists for the type.
        """
        definition = make_definition(key_spec, calculator)
        bucket = self._bucket(question_type)
        self._check_unique(question_type, bucket, definition.key)
        bucket.append(definition)
        logger.debug(
            "Declared metric %r for %r (context: %s)",
            definition.key,
            question_type,
            ", ".join(definition.context_deps) or "none",
        )
        return definition

    def metric(self, question_type: Hashable, key_spec: KeySpec) -> Callable[[Calculator], Calculator]:
        """
        Decorator form of `declare_metric`.

        Example
        -------
        >>> registry = MetricRegistry()
        >>> @registry.metric("essay_question", {"graded": "scores"})
        ... def graded(responses, scores):
        ...     return len(scores)
        """
        def _wrap(calculator: Calculator) -> Calculator:
            self.declare_metric(question_type, key_spec, calculator)
            return calculator
        return _wrap

    def inherit_metrics(self, target_type: Hashable, source_type: Hashable) -> int:
        """
        Copy every metric registered for *source_type* to *target_type*.

        The copies are appended after the target's own metrics, in source
        order. This is a snapshot: metrics declared for *source_type* later
        are not picked up by *target_type*.

        Returns
        -------
        int
            Number of definitions copied.
        """
        # snapshot before appending, in case target and source are the same type
        inherited = [d.copy() for d in self._bucket(source_type)]
        bucket = self._bucket(target_type)
        # all keys are checked before anything is appended
        seen: List[MetricDefinition] = list(bucket)
        for definition in inherited:
            self._check_unique(target_type, seen, definition.key)
            seen.append(definition)
        bucket.extend(inherited)
        logger.debug(
            "Question type %r inherited %d metric(s) from %r",
            target_type,
            len(inherited),
            source_type,
        )
        return len(inherited)

    def metrics_for(self, question_type: Hashable) -> Tuple[MetricDefinition, ...]:
        """Return the definitions for *question_type*, in declaration order.

        Unknown question types yield an empty tuple; the registry is not
        modified.
        """
        return tuple(self._metrics.get(question_type, ()))

    def keys_for(self, question_type: Hashable) -> List[str]:
        """Distinct report keys for *question_type*, in first-declared order."""
        return list(dict.fromkeys(d.key for d in self.metrics_for(question_type)))

    def question_types(self) -> Tuple[Hashable, ...]:
        return tuple(self._metrics.keys())

    def __contains__(self, question_type: Hashable) -> bool:
        return question_type in self._metrics

    def __len__(self) -> int:
        """Return the total number of registered definitions."""
        return sum(len(bucket) for bucket in self._metrics.values())

    def __repr__(self) -> str:
        return f"MetricRegistry(question_types={len(self._metrics)}, metrics={len(self)}, strict_keys={self.strict_keys})"
