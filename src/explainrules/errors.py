"""
Rule Errors.

Evaluation itself has no failure mode: a rule answers True or False and
explains itself through details. The only errors are programming-contract
violations caught when a rule is built.
"""

from __future__ import annotations

from typing import Any


class RuleError(Exception):
    """Base exception for rule construction."""

    pass


class InvalidSpecificationError(RuleError, TypeError):
    """Raised when a rule is built from something that is not a specification."""

    def __init__(self, spec: Any, operation: str | None = None):
        self.spec = spec
        self.operation = operation
        if spec is None:
            msg = "Specification must not be None"
        else:
            msg = f"{type(spec).__name__!s} does not implement is_satisfied_by(subject, details)"
        if operation:
            msg = f"{operation}: {msg}"
        super().__init__(msg)
