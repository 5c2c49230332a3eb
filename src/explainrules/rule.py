"""
Rule: composable, self-explaining predicates.

A ``Rule`` turns a specification into something that can be combined with
others and asked why it accepted or rejected a subject.

Usage:
    from explainrules import Rule

    name = Rule.from_spec(NameIsCapitalized())
    age = Rule.from_spec(AgeIsNotNegative())
    sex = Rule.from_spec(SexIsKnown())

    person_is_valid = name.and_(age).and_(sex)
    if not person_is_valid.is_satisfied_by(person):
        for detail in person_is_valid.get_details():
            print(detail)

Thread safety:
    A rule tree is immutable once built. ``is_satisfied_by(subject, details)``
    touches only the caller's sink and may be called concurrently on a shared
    rule. ``is_satisfied_by(subject)`` replaces the rule's own details
    snapshot, so concurrent calls on the same instance race on it. Use the
    two-argument form (or ``explain.evaluate``) when sharing a rule across
    threads.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .core.logging import get_logger
from .details import Details
from .errors import InvalidSpecificationError
from .specification import DetailSink, Specification, describe, is_specification
from .strategies import Conjunction, Disjunction, Identity, Negation

O = TypeVar("O")
D = TypeVar("D")

logger = get_logger(__name__)


def _require_spec(spec: object, operation: str) -> None:
    if not is_specification(spec):
        raise InvalidSpecificationError(spec, operation)


class Rule(Generic[O, D]):
    """
    A specification wrapped with combinators and a details snapshot.

    Obtain instances with from_spec() or from the combinators of another
    rule. Combinators never modify the rule they are called on.
    """

    __slots__ = ("_strategy", "_details", "__weakref__")

    def __init__(self, strategy: Specification[O, D]) -> None:
        _require_spec(strategy, "Rule")
        self._strategy = strategy
        self._details: Details[D] = Details()

    @classmethod
    def from_spec(cls, spec: Specification[O, D]) -> Rule[O, D]:
        """
        Create a rule from any specification.

        Args:
            spec: Leaf specification, strategy or rule

        Returns:
            Rule wrapping the specification

        Raises:
            InvalidSpecificationError: If spec is None or has no is_satisfied_by()
        """
        _require_spec(spec, "from_spec")
        return cls(Identity(spec))

    # =========================================================================
    # Evaluation
    # =========================================================================

    def is_satisfied_by(self, subject: O, details: DetailSink[D] | None = None) -> bool:
        """
        Check whether the subject satisfies this rule.

        With ``details`` the rule only appends to the caller's sink and its
        own snapshot is left alone. Without it, a fresh ``Details`` replaces
        the snapshot returned by get_details().

        Args:
            subject: Object being evaluated
            details: Optional caller-owned sink

        Returns:
            True if the subject satisfies the rule
        """
        if details is not None:
            return bool(self._strategy.is_satisfied_by(subject, details))

        snapshot: Details[D] = Details()
        self._details = snapshot
        result = bool(self._strategy.is_satisfied_by(subject, snapshot))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s -> %s (%d details)", self.describe(), result, len(snapshot))
        return result

    def get_details(self) -> tuple[D, ...]:
        """
        Details captured by the most recent is_satisfied_by(subject) call.

        Empty if no such call was made or nothing was reported. Calls that
        passed their own sink leave this unchanged.
        """
        return self._details.as_tuple()

    @property
    def details(self) -> tuple[D, ...]:
        """Read-only view of get_details()."""
        return self.get_details()

    # =========================================================================
    # Combinators
    # =========================================================================

    def and_(self, spec: Specification[O, D]) -> Rule[O, D]:
        """
        Rule satisfied when this rule AND spec are satisfied.

        Both sides are always evaluated so both report their details.
        """
        _require_spec(spec, "and_")
        return Rule(Conjunction(self, spec))

    def or_(self, spec: Specification[O, D]) -> Rule[O, D]:
        """
        Rule satisfied when this rule OR spec is satisfied.

        Both sides are always evaluated so both report their details.
        """
        _require_spec(spec, "or_")
        return Rule(Disjunction(self, spec))

    def not_(self) -> Rule[O, D]:
        """Rule satisfied when this rule is NOT satisfied."""
        return Rule(Negation(self))

    def and_not(self, spec: Specification[O, D]) -> Rule[O, D]:
        """Rule satisfied when this rule is satisfied AND spec is NOT."""
        _require_spec(spec, "and_not")
        return Rule(Conjunction(self, Negation(Identity(spec))))

    def or_not(self, spec: Specification[O, D]) -> Rule[O, D]:
        """Rule satisfied when this rule is satisfied OR spec is NOT."""
        _require_spec(spec, "or_not")
        return Rule(Disjunction(self, Negation(Identity(spec))))

    def __and__(self, spec: Specification[O, D]) -> Rule[O, D]:
        if not is_specification(spec):
            return NotImplemented
        return self.and_(spec)

    def __or__(self, spec: Specification[O, D]) -> Rule[O, D]:
        if not is_specification(spec):
            return NotImplemented
        return self.or_(spec)

    def __rand__(self, spec: Specification[O, D]) -> Rule[O, D]:
        if not is_specification(spec):
            return NotImplemented
        return Rule.from_spec(spec).and_(self)

    def __ror__(self, spec: Specification[O, D]) -> Rule[O, D]:
        if not is_specification(spec):
            return NotImplemented
        return Rule.from_spec(spec).or_(self)

    def __invert__(self) -> Rule[O, D]:
        return self.not_()

    # =========================================================================
    # Introspection
    # =========================================================================

    def describe(self) -> str:
        """Render the composition tree, e.g. ``(Name AND NOT Minor)``."""
        return describe(self._strategy)

    def __repr__(self) -> str:
        return f"Rule({self.describe()})"
