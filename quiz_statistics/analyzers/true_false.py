"""True/false question statistics.

A true/false question is a multiple-choice question with two answers, so it
reuses every multiple-choice metric.
"""

from __future__ import annotations

from quiz_statistics.analyzers.metrics.registry import MetricRegistry
from quiz_statistics.analyzers.multiple_choice import MultipleChoice
from quiz_statistics.constants import TRUE_FALSE_QUESTION


class TrueFalse(MultipleChoice):
    question_type = TRUE_FALSE_QUESTION


def register(registry: MetricRegistry) -> None:
    # multiple_choice must be registered first; inheritance is a snapshot
    registry.inherit_metrics(TrueFalse.question_type, MultipleChoice.question_type)
