"""
Tests for evaluation reports.
"""

from __future__ import annotations

import json
import threading

from conftest import (
    AGE_IS_NEGATIVE,
    NAME_IS_MALFORMED,
    SEX_IS_UNKNOWN,
    AgeIsNotNegative,
    ParityReport,
    Person,
)

from explainrules import Rule
from explainrules.explain import (
    Evaluation,
    evaluate,
    explain,
    explain_evaluation,
    format_explanation,
)


class TestEvaluate:
    """Tests for evaluate()."""

    def test_failed_evaluation(self, person_rule, invalid_person):
        evaluation = evaluate(person_rule, invalid_person)

        assert evaluation.satisfied is False
        assert evaluation.details == (NAME_IS_MALFORMED, AGE_IS_NEGATIVE, SEX_IS_UNKNOWN)
        assert evaluation.rule == "((NameIsCapitalized AND AgeIsNotNegative) AND SexIsKnown)"

    def test_satisfied_evaluation(self, person_rule, valid_person):
        evaluation = evaluate(person_rule, valid_person)

        assert evaluation.satisfied is True
        assert evaluation.details == ()

    def test_snapshot_untouched(self, person_rule, invalid_person):
        """evaluate() never replaces the rule's own details."""
        evaluate(person_rule, invalid_person)

        assert person_rule.get_details() == ()

    def test_bare_specification(self):
        evaluation = evaluate(AgeIsNotNegative(), Person("Ana", -5, "F"))

        assert evaluation.satisfied is False
        assert evaluation.rule == "AgeIsNotNegative"
        assert evaluation.details == (AGE_IS_NEGATIVE,)

    def test_shared_rule_across_threads(self):
        """Concurrent evaluate() calls on one rule do not mix details."""
        rule = Rule.from_spec(ParityReport()).or_(ParityReport())
        results: dict[int, Evaluation] = {}

        def worker(n: int) -> None:
            results[n] = evaluate(rule, n)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for n, evaluation in results.items():
            expected = "even" if n % 2 == 0 else "odd"
            assert evaluation.details == (expected,)
            assert evaluation.satisfied is (n % 2 == 0)


class TestExplainEvaluation:
    """Tests for the text report."""

    def test_not_satisfied_lists_details(self):
        evaluation = Evaluation(rule="(a AND b)", satisfied=False, details=("a failed", "b failed"))

        text = explain_evaluation(evaluation)

        assert text.splitlines() == [
            "Result: NOT SATISFIED",
            "Details (2):",
            "  1. a failed",
            "  2. b failed",
        ]

    def test_satisfied_without_details(self):
        text = explain_evaluation(Evaluation(rule="a", satisfied=True))

        assert text.splitlines() == ["Result: SATISFIED", "No details reported."]

    def test_verbose_includes_rule(self):
        text = explain_evaluation(Evaluation(rule="NOT a", satisfied=True), verbose=True)

        assert "Rule: NOT a" in text

    def test_explain_shortcut(self, person_rule, invalid_person):
        text = explain(person_rule, invalid_person, verbose=True)

        assert "Result: NOT SATISFIED" in text
        assert f"  3. {SEX_IS_UNKNOWN}" in text


class TestFormatExplanation:
    """Tests for the structured report."""

    def test_json_serializable(self, person_rule, invalid_person):
        data = format_explanation(evaluate(person_rule, invalid_person))

        assert json.loads(json.dumps(data)) == data
        assert data["satisfied"] is False
        assert data["detail_count"] == 3
        assert data["details"][0] == NAME_IS_MALFORMED

    def test_non_primitive_details_stringified(self):
        evaluation = Evaluation(rule="r", satisfied=False, details=(("field", "age"), 3))

        data = format_explanation(evaluation)

        assert data["details"] == ["('field', 'age')", 3]

    def test_to_dict(self):
        evaluation = Evaluation(rule="r", satisfied=True, details=("x",))

        assert evaluation.to_dict() == {"rule": "r", "satisfied": True, "details": ["x"]}
