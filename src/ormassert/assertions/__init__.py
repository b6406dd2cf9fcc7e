"""Assertion macros and their result type."""

from .errors import ModelAssertionError
from .macros import (
    MACROS,
    allows_values_for,
    belongs_to,
    does_not_allow_values_for,
    error_from_writing_value,
    has_association,
    has_many,
    has_one,
    validates_presence_of,
    validates_uniqueness_of,
)
from .result import AssertionResult, FailureKind

__all__ = [
    "MACROS",
    "AssertionResult",
    "FailureKind",
    "ModelAssertionError",
    "allows_values_for",
    "belongs_to",
    "does_not_allow_values_for",
    "error_from_writing_value",
    "has_association",
    "has_many",
    "has_one",
    "validates_presence_of",
    "validates_uniqueness_of",
]
