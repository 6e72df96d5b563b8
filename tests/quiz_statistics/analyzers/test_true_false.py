"""Tests for the true/false analyzer."""

from quiz_statistics.analyzers import multiple_choice, true_false
from quiz_statistics.analyzers.multiple_choice import MultipleChoice
from quiz_statistics.analyzers.true_false import TrueFalse
from quiz_statistics.constants import MULTIPLE_CHOICE_QUESTION, TRUE_FALSE_QUESTION


class TestTrueFalse:
    """Test that true/false reuses the multiple-choice metrics."""

    def test_inherits_multiple_choice_metrics(self, registry):
        multiple_choice.register(registry)
        true_false.register(registry)

        assert TrueFalse(registry).metric_keys() == MultipleChoice(registry).metric_keys()

    def test_inherited_definitions_are_copies(self, registry):
        multiple_choice.register(registry)
        true_false.register(registry)

        mc = registry.metrics_for(MULTIPLE_CHOICE_QUESTION)
        tf = registry.metrics_for(TRUE_FALSE_QUESTION)
        assert all(a == b and a is not b for a, b in zip(mc, tf))

    def test_report(self, registry):
        multiple_choice.register(registry)
        true_false.register(registry)
        responses = [
            {"answer_id": "true", "correct": True},
            {"answer_id": "false", "correct": False},
            {"answer_id": "true", "correct": True},
            {},
        ]

        report = TrueFalse(registry).run(responses)

        assert report == {
            "responses": 3,
            "missing_answers": 1,
            "answers": {"true": 2, "false": 1},
            "correct": 2,
        }

    def test_registration_order_matters(self, registry):
        """Inheriting before the source declares anything copies nothing."""
        true_false.register(registry)
        multiple_choice.register(registry)

        assert TrueFalse(registry).run([{"answer_id": 1}]) == {}

    def test_later_multiple_choice_metrics_are_not_inherited(self, registry):
        multiple_choice.register(registry)
        true_false.register(registry)
        registry.declare_metric(MULTIPLE_CHOICE_QUESTION, "extra", len)

        assert "extra" in MultipleChoice(registry).run([])
        assert "extra" not in TrueFalse(registry).run([])
