"""
explainrules - Composable predicates that explain themselves

Builds boolean rules over typed subjects from small specifications and
combines them with AND / OR / NOT / AND NOT / OR NOT. Every specification
may report details explaining why a subject was accepted or rejected; a
composite rule collects the details of all of its parts, without
duplicates.

Usage:
    from explainrules import Rule, specification

    adult = Rule.from_spec(specification(lambda p: p.age >= 18, "Must be an adult"))
    named = Rule.from_spec(specification(lambda p: bool(p.name), "Name is required"))

    rule = adult & named
    if not rule.is_satisfied_by(person):
        print(rule.get_details())

Package structure:
    explainrules/
    ├── core/            # Configuration and logging
    ├── specification.py # Specification protocol and leaf helpers
    ├── details.py       # Deduplicating details container
    ├── strategies.py    # Identity / Conjunction / Disjunction / Negation
    ├── rule.py          # Rule and its combinators
    ├── explain.py       # Evaluation reports
    └── errors.py        # Exceptions
"""

__version__ = "1.0.0"

from .details import Details
from .errors import InvalidSpecificationError, RuleError
from .explain import Evaluation, evaluate, explain, explain_evaluation, format_explanation
from .rule import Rule
from .specification import (
    BaseSpecification,
    DetailSink,
    FunctionSpecification,
    Specification,
    is_specification,
    specification,
)

__all__ = [
    "__version__",
    "BaseSpecification",
    "DetailSink",
    "Details",
    "Evaluation",
    "FunctionSpecification",
    "InvalidSpecificationError",
    "Rule",
    "RuleError",
    "Specification",
    "evaluate",
    "explain",
    "explain_evaluation",
    "format_explanation",
    "is_specification",
    "specification",
]
