"""A subject bound to its adapter, exposing every macro as a method."""

from __future__ import annotations

from typing import Any

from ormassert.adapters import adapt
from ormassert.assertions import AssertionResult, macros
from ormassert.interfaces import AssociationKind, ModelAdapter


class Topic:
    """The object under test, with the assertion macros as methods.

    By default every method returns an `AssertionResult` and leaves it to the
    caller to surface. With ``strict=True`` a failed result is raised as
    `ModelAssertionError`, which pytest reports as an ordinary test failure.

    Example:
        ```py
        topic = Topic(Room(), strict=True)
        topic.validates_presence_of("location")
        topic.has_many("doors")
        ```
    """

    def __init__(self, subject: Any, *, strict: bool = False):
        self.subject = subject
        self.model: ModelAdapter = adapt(subject)
        self.strict = strict

    def _surface(self, result: AssertionResult) -> AssertionResult:
        if self.strict:
            result.raise_for_failure()
        return result

    def validates_presence_of(self, attribute: str) -> AssertionResult:
        return self._surface(macros.validates_presence_of(self.model, attribute))

    def allows_values_for(self, attribute: str, *values: Any) -> AssertionResult:
        return self._surface(macros.allows_values_for(self.model, attribute, *values))

    def does_not_allow_values_for(
        self, attribute: str, *values: Any
    ) -> AssertionResult:
        return self._surface(
            macros.does_not_allow_values_for(self.model, attribute, *values)
        )

    def validates_uniqueness_of(self, attribute: str) -> AssertionResult:
        return self._surface(macros.validates_uniqueness_of(self.model, attribute))

    def has_association(
        self, attribute: str, kind: AssociationKind | str
    ) -> AssertionResult:
        return self._surface(macros.has_association(self.model, attribute, kind))

    def has_many(self, attribute: str) -> AssertionResult:
        return self._surface(macros.has_many(self.model, attribute))

    def has_one(self, attribute: str) -> AssertionResult:
        return self._surface(macros.has_one(self.model, attribute))

    def belongs_to(self, attribute: str) -> AssertionResult:
        return self._surface(macros.belongs_to(self.model, attribute))
