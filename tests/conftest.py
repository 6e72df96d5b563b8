"""Pytest configuration and shared fixtures for the test suite."""

import logging
from typing import Any, Dict, List

import numpy as np
import pytest

from quiz_statistics.analyzers.metrics.metric_orchestrator import MetricOrchestrator
from quiz_statistics.analyzers.metrics.registry import MetricRegistry
from quiz_statistics.settings import Settings

# Central tolerance map for numeric comparisons
TOLERANCE_MAP = {
    "default": 1e-10,
    "statistics": 1e-10,
}


@pytest.fixture
def registry() -> MetricRegistry:
    """Provide a fresh, non-strict MetricRegistry for each test."""
    return MetricRegistry()


@pytest.fixture
def strict_registry() -> MetricRegistry:
    """Provide a fresh MetricRegistry that rejects duplicate keys."""
    return MetricRegistry(strict_keys=True)


@pytest.fixture
def orchestrator(registry: MetricRegistry) -> MetricOrchestrator:
    return MetricOrchestrator(registry)


@pytest.fixture
def default_settings() -> Settings:
    """Settings independent of the shipped quiz_statistics.yml."""
    return Settings()


@pytest.fixture
def package_logger():
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger("quiz_statistics")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


# Test data fixtures
@pytest.fixture
def empty_responses() -> List[Dict[str, Any]]:
    """Empty response set for edge case testing."""
    return []


@pytest.fixture
def graded_responses() -> List[Dict[str, Any]]:
    """The two-response example: one blank answer, one wrong answer."""
    return [
        {"text": "", "grade": "correct"},
        {"text": "42", "grade": "incorrect"},
    ]


@pytest.fixture
def multiple_choice_responses() -> List[Dict[str, Any]]:
    """
    Six multiple-choice responses:
    - answer 1: 3 times (2 correct flags)
    - answer 2: once
    - no answer: twice (one None, one empty string)
    """
    return [
        {"answer_id": 1, "correct": True},
        {"answer_id": 2, "correct": False},
        {"answer_id": 1, "correct": True},
        {"answer_id": None},
        {"answer_id": 1, "correct": False},
        {"answer_id": ""},
    ]


@pytest.fixture
def essay_responses() -> List[Dict[str, Any]]:
    """
    Five essay responses, four graded (points 0, 2, 2, 5) and one ungraded.
    One graded response has blank text.
    """
    return [
        {"text": "An essay", "points": 5},
        {"text": "Short", "points": 2},
        {"text": "Another", "points": 2.0},
        {"text": "   ", "points": 0},
        {"text": "Not graded yet", "points": None},
    ]


# Utility functions for tests
def assert_close(
    a: float,
    b: float,
    tolerance_type: str = "default",
    rtol: float = None,
    atol: float = None,
) -> None:
    """Assert that two values are close within tolerance."""
    if rtol is None and atol is None:
        atol = TOLERANCE_MAP.get(tolerance_type, TOLERANCE_MAP["default"])
        rtol = 0

    np.testing.assert_allclose(a, b, rtol=rtol, atol=atol)
