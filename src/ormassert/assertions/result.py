"""Outcome of a single assertion macro."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ModelAssertionError


class FailureKind(str, Enum):
    """Why an assertion failed.

    Attributes:
        EXPECTATION: The checked condition did not hold.
        PRECONDITION: The assertion was applied to a subject in the wrong state
            (e.g. a uniqueness check on an unsaved record).
    """

    EXPECTATION = "expectation"
    PRECONDITION = "precondition"


@dataclass(frozen=True)
class AssertionResult:
    """Pass/fail outcome of one assertion, carrying a human-readable message.

    Truthy when the assertion passed, so results can be used directly in
    ``assert`` statements and conditionals.
    """

    assertion: str
    attribute: str
    passed: bool
    message: str | None = None
    failure: FailureKind | None = None

    @classmethod
    def ok(cls, assertion: str, attribute: str) -> AssertionResult:
        """Build a passing result."""
        return cls(assertion=assertion, attribute=attribute, passed=True)

    @classmethod
    def fail(
        cls,
        assertion: str,
        attribute: str,
        message: str,
        failure: FailureKind = FailureKind.EXPECTATION,
    ) -> AssertionResult:
        """Build a failing result."""
        return cls(
            assertion=assertion,
            attribute=attribute,
            passed=False,
            message=message,
            failure=failure,
        )

    def __bool__(self) -> bool:
        return self.passed

    def raise_for_failure(self) -> AssertionResult:
        """Raise `ModelAssertionError` if this result failed.

        Returns:
            AssertionResult: ``self`` when the assertion passed.

        Raises:
            ModelAssertionError: If the assertion failed.
        """
        if not self.passed:
            raise ModelAssertionError(self)
        return self
