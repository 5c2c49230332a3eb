"""
Specification Protocols for explainrules.

A specification is the leaf of a rule tree: it checks one condition on a
subject and may append explanations to a details sink. Domain code plugs its
conditions in by implementing ``Specification`` (structurally), by
subclassing ``BaseSpecification``, or by wrapping a plain callable with
``specification()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

O = TypeVar("O")
D = TypeVar("D")

O_contra = TypeVar("O_contra", contravariant=True)
D_contra = TypeVar("D_contra", contravariant=True)


@runtime_checkable
class DetailSink(Protocol[D_contra]):
    """Anything details can be appended to (``Details``, ``list``, ...)."""

    def append(self, value: D_contra, /) -> Any: ...


@runtime_checkable
class Specification(Protocol[O_contra, D]):
    """
    Protocol for leaf and composite predicates.

    Contract:
    - may be called any number of times;
    - only appends to ``details``, never clears or replaces it, since the
      sink is shared with sibling evaluations;
    - rejects an invalid subject by returning False and appending a detail,
      not by raising.
    """

    def is_satisfied_by(self, subject: O_contra, details: DetailSink[D]) -> bool:
        """
        Check whether the subject satisfies this specification.

        Args:
            subject: Object being evaluated
            details: Sink to append explanations to

        Returns:
            True if the subject satisfies the specification
        """
        ...


class BaseSpecification(ABC, Generic[O, D]):
    """
    Base implementation for leaf specifications.

    Subclasses implement is_satisfied_by() and may set ``_name`` to control
    how the leaf is shown in rule descriptions.

    Example::

        class AgeIsNotNegative(BaseSpecification[Person, str]):
            def is_satisfied_by(self, person, details):
                if person.age < 0:
                    details.append("Age cannot be negative")
                    return False
                return True
    """

    _name: str | None = None

    @property
    def name(self) -> str:
        """Name used when describing rules built from this specification."""
        return self._name or type(self).__name__

    @abstractmethod
    def is_satisfied_by(self, subject: O, details: DetailSink[D]) -> bool:
        """Check the subject. Must be implemented by subclass."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class FunctionSpecification(BaseSpecification[O, D]):
    """
    Wraps a plain ``subject -> bool`` callable as a specification.

    When the callable returns False the configured detail is appended. The
    detail may be a fixed value or a callable building it from the subject.
    """

    def __init__(
        self,
        predicate: Callable[[O], bool],
        detail: D | Callable[[O], D] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        self._predicate = predicate
        self._detail = detail
        self._name = name or getattr(predicate, "__name__", None) or "<predicate>"

    def is_satisfied_by(self, subject: O, details: DetailSink[D]) -> bool:
        if self._predicate(subject):
            return True
        if self._detail is not None:
            detail = self._detail(subject) if callable(self._detail) else self._detail
            details.append(detail)
        return False


def specification(
    predicate: Callable[[O], bool],
    detail: D | Callable[[O], D] | None = None,
    *,
    name: str | None = None,
) -> FunctionSpecification[O, D]:
    """
    Build a leaf specification from a plain predicate.

    Args:
        predicate: Callable returning True when the subject is acceptable
        detail: Detail appended on rejection, or a callable producing it
        name: Display name (defaults to the predicate's __name__)

    Returns:
        FunctionSpecification wrapping the predicate
    """
    return FunctionSpecification(predicate, detail, name=name)


def is_specification(obj: object) -> bool:
    """Check whether obj implements is_satisfied_by()."""
    return obj is not None and callable(getattr(obj, "is_satisfied_by", None))


def describe(spec: object) -> str:
    """
    Render a specification for logs and explanations.

    Composite rules and strategies describe themselves; leaves are shown by
    their ``name`` attribute or class name.
    """
    describer = getattr(spec, "describe", None)
    if callable(describer):
        return describer()
    name = getattr(spec, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(spec).__name__
