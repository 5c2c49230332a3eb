"""
Combination strategies.

Each strategy is a small specification built from one or two others. They
are siblings: none of them derives from another, and each implements
is_satisfied_by() directly. ``Rule`` wraps exactly one of them.

Conjunction and Disjunction always evaluate both operands so that both get
to write their details, even when the first operand already decides the
result.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from .core.config import is_trace_enabled
from .core.logging import get_logger
from .specification import DetailSink, Specification, describe

O = TypeVar("O")
D = TypeVar("D")

logger = get_logger(__name__)


def _trace(strategy: object, result: bool) -> bool:
    if is_trace_enabled():
        logger.debug("%s -> %s", describe(strategy), result)
    return result


class Identity(Generic[O, D]):
    """Delegates verbatim to a single specification."""

    __slots__ = ("spec",)

    def __init__(self, spec: Specification[O, D]) -> None:
        self.spec = spec

    def is_satisfied_by(self, subject: O, details: DetailSink[D]) -> bool:
        return self.spec.is_satisfied_by(subject, details)

    def describe(self) -> str:
        return describe(self.spec)


class Conjunction(Generic[O, D]):
    """True iff both specifications are satisfied."""

    __slots__ = ("spec1", "spec2")

    def __init__(self, spec1: Specification[O, D], spec2: Specification[O, D]) -> None:
        self.spec1 = spec1
        self.spec2 = spec2

    def is_satisfied_by(self, subject: O, details: DetailSink[D]) -> bool:
        # '&' not 'and': spec2 must write its details even when spec1 fails
        result = bool(self.spec1.is_satisfied_by(subject, details)) & bool(
            self.spec2.is_satisfied_by(subject, details)
        )
        return _trace(self, result)

    def describe(self) -> str:
        return f"({describe(self.spec1)} AND {describe(self.spec2)})"


class Disjunction(Generic[O, D]):
    """True iff at least one specification is satisfied."""

    __slots__ = ("spec1", "spec2")

    def __init__(self, spec1: Specification[O, D], spec2: Specification[O, D]) -> None:
        self.spec1 = spec1
        self.spec2 = spec2

    def is_satisfied_by(self, subject: O, details: DetailSink[D]) -> bool:
        # '|' not 'or': spec2 must write its details even when spec1 succeeds
        result = bool(self.spec1.is_satisfied_by(subject, details)) | bool(
            self.spec2.is_satisfied_by(subject, details)
        )
        return _trace(self, result)

    def describe(self) -> str:
        return f"({describe(self.spec1)} OR {describe(self.spec2)})"


class Negation(Generic[O, D]):
    """True iff the wrapped specification is not satisfied. Details pass through untouched."""

    __slots__ = ("spec",)

    def __init__(self, spec: Specification[O, D]) -> None:
        self.spec = spec

    def is_satisfied_by(self, subject: O, details: DetailSink[D]) -> bool:
        return _trace(self, not self.spec.is_satisfied_by(subject, details))

    def describe(self) -> str:
        return f"NOT {describe(self.spec)}"
