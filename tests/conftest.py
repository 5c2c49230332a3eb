"""
explainrules Test Suite - Shared Fixtures

Provides a small Person domain with leaf specifications, recording
specifications for checking evaluation order, and cache resets so tests
never see each other's settings or logging state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import pytest

from explainrules import BaseSpecification, Rule
from explainrules.core.config import reset_settings
from explainrules.core.logging import reset_logging

# =============================================================================
# Person Domain
# =============================================================================

NAME_IS_NONE = "Name cannot be None"
NAME_IS_MALFORMED = "Name must start with a capital letter followed by lowercase letters"
AGE_IS_NEGATIVE = "Age cannot be negative"
SEX_IS_UNKNOWN = "Sex must be 'M' or 'F'"


@dataclass
class Person:
    name: str | None
    age: int
    sex: str


class NameIsCapitalized(BaseSpecification[Person, str]):
    def is_satisfied_by(self, person, details):
        if person.name is None:
            details.append(NAME_IS_NONE)
            return False
        if not re.fullmatch(r"[A-Z][a-z]+", person.name):
            details.append(NAME_IS_MALFORMED)
            return False
        return True


class AgeIsNotNegative(BaseSpecification[Person, str]):
    def is_satisfied_by(self, person, details):
        if person.age < 0:
            details.append(AGE_IS_NEGATIVE)
            return False
        return True


class SexIsKnown(BaseSpecification[Person, str]):
    def is_satisfied_by(self, person, details):
        if person.sex in ("M", "F"):
            return True
        details.append(SEX_IS_UNKNOWN)
        return False


# =============================================================================
# Recording Specifications
# =============================================================================


class Recording(BaseSpecification[object, str]):
    """
    Returns a fixed result, optionally reports a detail, and counts calls.

    Every call is appended to the shared ``log`` so tests can assert
    evaluation order across several specifications.
    """

    def __init__(self, name: str, result: bool, detail: str | None = None, log: list | None = None):
        self._name = name
        self.result = result
        self.detail = detail
        self.calls = 0
        self.log = log if log is not None else []

    def is_satisfied_by(self, subject, details):
        self.calls += 1
        self.log.append(self._name)
        if self.detail is not None:
            details.append(self.detail)
        return self.result


class ParityReport(BaseSpecification[int, str]):
    """True for even numbers; reports the parity of every subject."""

    def is_satisfied_by(self, subject, details):
        details.append("even" if subject % 2 == 0 else "odd")
        return subject % 2 == 0


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_all_singletons():
    """Reset settings and logging caches before and after each test."""
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def valid_person() -> Person:
    return Person("Ricardo", 29, "M")


@pytest.fixture
def invalid_person() -> Person:
    """Fails every Person specification."""
    return Person("ricArdo", -1, "X")


@pytest.fixture
def person_rule() -> Rule[Person, str]:
    """name AND age AND sex"""
    name = Rule.from_spec(NameIsCapitalized())
    age = Rule.from_spec(AgeIsNotNegative())
    sex = Rule.from_spec(SexIsKnown())
    return name.and_(age).and_(sex)


@pytest.fixture
def call_log() -> list[str]:
    return []
