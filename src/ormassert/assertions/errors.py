"""Exceptions used to surface failed assertions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import AssertionResult


class ModelAssertionError(AssertionError):
    """Raised when a failed assertion result is surfaced as an exception.

    Subclasses `AssertionError` so pytest reports it as a test failure rather
    than an error.

    Attributes:
        result (AssertionResult): The failed result.
    """

    def __init__(self, result: AssertionResult):
        super().__init__(result.message)
        self.result = result
