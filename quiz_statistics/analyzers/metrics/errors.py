"""Exceptions raised while declaring or computing metrics."""

from __future__ import annotations

from typing import Any, Hashable, Optional


class QuizStatisticsError(Exception):
    """Base class for all errors raised by quiz_statistics."""


class InvalidKeySpecError(QuizStatisticsError, ValueError):
    """A metric key spec could not be parsed."""

    def __init__(self, spec: Any, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid metric key spec {spec!r}: {reason}")


class DuplicateMetricError(QuizStatisticsError, ValueError):
    """A key was declared twice for one question type in strict-keys mode."""

    def __init__(self, question_type: Hashable, key: str) -> None:
        self.question_type = question_type
        self.key = key
        super().__init__(
            f"Metric '{key}' is already registered for question type "
            f"{question_type!r}."
        )


class MissingContextError(QuizStatisticsError, KeyError):
    """A metric requires a context variable the context builder did not provide."""

    def __init__(
        self,
        metric_key: str,
        dependency: str,
        question_type: Optional[Hashable] = None,
    ) -> None:
        self.metric_key = metric_key
        self.dependency = dependency
        self.question_type = question_type
        super().__init__(metric_key, dependency)

    def __str__(self) -> str:
        where = f" (question type {self.question_type!r})" if self.question_type is not None else ""
        return (
            f"Metric '{self.metric_key}' requires context variable "
            f"'{self.dependency}', which was not built{where}"
        )
