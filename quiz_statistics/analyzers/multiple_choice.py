"""Multiple-choice question statistics."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from quiz_statistics.analyzers.base import Analyzer
from quiz_statistics.analyzers.metrics.registry import MetricRegistry
from quiz_statistics.constants import (
    ANSWER_ID_FIELD,
    CORRECT_FIELD,
    MULTIPLE_CHOICE_QUESTION,
)
from quiz_statistics.helpers import response_field

Responses = Sequence[Mapping[str, Any]]


class MultipleChoice(Analyzer):
    """Statistics for questions with a single selectable answer."""

    question_type = MULTIPLE_CHOICE_QUESTION

    def build_context(self, responses: Responses) -> Dict[str, Any]:
        return {"answer_ids": answer_ids(responses)}


def answer_ids(responses: Responses) -> List[Optional[Any]]:
    """Chosen answer id of every response, None where nothing was chosen."""
    return [response_field(r, ANSWER_ID_FIELD) for r in responses]


def count_responses(responses: Responses) -> int:
    return sum(1 for r in responses if response_field(r, ANSWER_ID_FIELD) is not None)


def count_missing_answers(responses: Responses) -> int:
    return sum(1 for r in responses if response_field(r, ANSWER_ID_FIELD) is None)


def answer_frequencies(responses: Responses, ids: List[Optional[Any]]) -> Dict[Any, int]:
    """Answer id -> number of responses choosing it, in first-seen order."""
    counts: Dict[Any, int] = {}
    for answer_id in ids:
        if answer_id is None:
            continue
        counts[answer_id] = counts.get(answer_id, 0) + 1
    return counts


def count_correct(responses: Responses) -> int:
    return sum(1 for r in responses if r.get(CORRECT_FIELD) is True)


def register(registry: MetricRegistry) -> None:
    qt = MultipleChoice.question_type
    registry.declare_metric(qt, "responses", count_responses)
    registry.declare_metric(qt, "missing_answers", count_missing_answers)
    registry.declare_metric(qt, {"answers": "answer_ids"}, answer_frequencies)
    registry.declare_metric(qt, "correct", count_correct)
