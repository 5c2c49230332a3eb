"""
Explain evaluations.

Evaluates a rule without touching its details snapshot and renders the
outcome with every reported detail, either as human-readable text or as
structured data for JSON output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .details import Details
from .rule import Rule
from .specification import Specification

O = TypeVar("O")
D = TypeVar("D")


@dataclass(frozen=True)
class Evaluation(Generic[D]):
    """Outcome of one evaluation of a rule against a subject."""

    rule: str  # Rendered composition tree
    satisfied: bool
    details: tuple[D, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "rule": self.rule,
            "satisfied": self.satisfied,
            "details": list(self.details),
        }


def evaluate(rule: Rule[O, D] | Specification[O, D], subject: O) -> Evaluation[D]:
    """
    Evaluate a rule or bare specification into its own details sink.

    Unlike Rule.is_satisfied_by(subject), no snapshot is replaced, so this is
    safe to call concurrently on a shared rule.

    Args:
        rule: Rule or specification to evaluate
        subject: Object being evaluated

    Returns:
        Evaluation with the result and collected details
    """
    if not isinstance(rule, Rule):
        rule = Rule.from_spec(rule)

    details: Details[D] = Details()
    satisfied = rule.is_satisfied_by(subject, details)
    return Evaluation(rule=rule.describe(), satisfied=satisfied, details=details.as_tuple())


def explain_evaluation(evaluation: Evaluation[Any], verbose: bool = False) -> str:
    """
    Generate human-readable explanation of an evaluation.

    Args:
        evaluation: Evaluation from evaluate()
        verbose: Include the rule expression

    Returns:
        Formatted multi-line explanation
    """
    lines = []

    _add_header(lines, evaluation, verbose)
    _add_details_section(lines, evaluation)

    return "\n".join(lines)


def explain(rule: Rule[O, D] | Specification[O, D], subject: O, verbose: bool = False) -> str:
    """Evaluate and explain in one call."""
    return explain_evaluation(evaluate(rule, subject), verbose=verbose)


def format_explanation(evaluation: Evaluation[Any]) -> dict[str, Any]:
    """
    Format explanation as structured data for JSON output.

    Details that are not JSON primitives are rendered with str().
    """
    explanation = evaluation.to_dict()
    explanation["details"] = [
        d if isinstance(d, (str, int, float, bool)) or d is None else str(d)
        for d in evaluation.details
    ]
    explanation["detail_count"] = len(evaluation.details)
    return explanation


# =============================================================================
# Section Builders
# =============================================================================


def _add_header(lines: list[str], evaluation: Evaluation[Any], verbose: bool) -> None:
    outcome = "SATISFIED" if evaluation.satisfied else "NOT SATISFIED"
    lines.append(f"Result: {outcome}")
    if verbose:
        lines.append(f"Rule: {evaluation.rule}")


def _add_details_section(lines: list[str], evaluation: Evaluation[Any]) -> None:
    if not evaluation.details:
        lines.append("No details reported.")
        return

    lines.append(f"Details ({len(evaluation.details)}):")
    for i, detail in enumerate(evaluation.details, start=1):
        lines.append(f"  {i}. {detail}")


__all__ = [
    "Evaluation",
    "evaluate",
    "explain",
    "explain_evaluation",
    "format_explanation",
]
