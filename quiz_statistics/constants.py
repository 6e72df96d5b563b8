"""Constants and configuration paths for the quiz-statistics package."""

from __future__ import annotations

from pathlib import Path

### DIRECTORIES

PACKAGE_DIR = Path(__file__).resolve().parent

# configs, shipped as package data
DEFAULT_SETTINGS_PATH = PACKAGE_DIR / "configs" / "quiz_statistics.yml"

### LOGGING
LOGGER_NAME = "quiz_statistics"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

### QUESTION TYPES
MULTIPLE_CHOICE_QUESTION = "multiple_choice_question"
TRUE_FALSE_QUESTION = "true_false_question"
ESSAY_QUESTION = "essay_question"

# Built-in question types, in the order their metrics are declared
BUILTIN_QUESTION_TYPES = [
    MULTIPLE_CHOICE_QUESTION,
    TRUE_FALSE_QUESTION,
    ESSAY_QUESTION,
]

### RESPONSE FIELDS
ANSWER_ID_FIELD = "answer_id"
CORRECT_FIELD = "correct"
POINTS_FIELD = "points"
TEXT_FIELD = "text"
