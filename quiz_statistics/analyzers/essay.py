"""Essay question statistics.

Essays are graded manually, so most metrics work on the points of graded
responses, collected once into the ``scores`` context variable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np

from quiz_statistics.analyzers.base import Analyzer
from quiz_statistics.analyzers.metrics.metric import WithDeps
from quiz_statistics.analyzers.metrics.registry import MetricRegistry
from quiz_statistics.constants import ESSAY_QUESTION, POINTS_FIELD, TEXT_FIELD
from quiz_statistics.helpers import as_points, response_field

Responses = Sequence[Mapping[str, Any]]


class Essay(Analyzer):
    """Statistics for free-text questions graded by points.

    Args:
        points_possible: Score awarded for full credit; `full_credit` is
            None when it is not known.
    """

    question_type = ESSAY_QUESTION

    def __init__(self, registry: Optional[MetricRegistry] = None, points_possible: Optional[float] = None) -> None:
        super().__init__(registry)
        self.points_possible = points_possible

    def build_context(self, responses: Responses) -> Dict[str, Any]:
        return {
            "scores": scores(responses),
            "points_possible": self.points_possible,
        }


def scores(responses: Responses) -> np.ndarray:
    """Points of every graded response (ungraded ones are skipped)."""
    points = [as_points(r.get(POINTS_FIELD)) for r in responses]
    return np.asarray([p for p in points if p is not None], dtype=float)


def count_responses(responses: Responses) -> int:
    return sum(1 for r in responses if response_field(r, TEXT_FIELD) is not None)


def count_graded(responses: Responses, scores: np.ndarray) -> int:
    return int(scores.size)


def _stat(scores: np.ndarray, fn) -> Optional[float]:
    if scores.size == 0:
        return None
    return float(fn(scores))


def score_average(responses: Responses, scores: np.ndarray) -> Optional[float]:
    return _stat(scores, np.mean)


def score_median(responses: Responses, scores: np.ndarray) -> Optional[float]:
    return _stat(scores, np.median)


def score_stdev(responses: Responses, scores: np.ndarray) -> Optional[float]:
    """Population standard deviation of the scores."""
    return _stat(scores, np.std)


def point_distribution(responses: Responses, scores: np.ndarray) -> List[Dict[str, Any]]:
    values, counts = np.unique(scores, return_counts=True)
    return [{"score": float(v), "count": int(c)} for v, c in zip(values, counts)]


def count_full_credit(responses: Responses, scores: np.ndarray, points_possible: Optional[float]) -> Optional[int]:
    if points_possible is None:
        return None
    return int(np.count_nonzero(scores >= points_possible))


def register(registry: MetricRegistry) -> None:
    qt = Essay.question_type
    registry.declare_metric(qt, "responses", count_responses)
    registry.declare_metric(qt, WithDeps("graded", ["scores"]), count_graded)
    registry.declare_metric(qt, WithDeps("score_average", ["scores"]), score_average)
    registry.declare_metric(qt, WithDeps("score_median", ["scores"]), score_median)
    registry.declare_metric(qt, WithDeps("score_stdev", ["scores"]), score_stdev)
    registry.declare_metric(qt, WithDeps("point_distribution", ["scores"]), point_distribution)
    registry.declare_metric(qt, WithDeps("full_credit", ["scores", "points_possible"]), count_full_credit)
