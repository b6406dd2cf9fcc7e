"""Assertion macros over a `ModelAdapter`.

Each macro writes candidate values through the adapter, asks the host ORM to
validate, and turns the per-attribute errors into an `AssertionResult`. No
validation logic lives here.

Example:
    ```py
    model = adapt(User(email="a@b.cd"))
    assert validates_presence_of(model, "email")
    assert allows_values_for(model, "email", "a@b.cd", "e@f.gh")
    assert does_not_allow_values_for(model, "email", "a", "e f@g.h")
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ormassert.interfaces import AssociationKind, ModelAdapter

from .result import AssertionResult, FailureKind

logger = logging.getLogger(__name__)


def error_from_writing_value(
    model: ModelAdapter, attribute: str, value: Any
) -> list[str]:
    """Write a value, validate, and return the errors left on the attribute.

    The attribute's previous value is restored before returning, so probing
    never leaves the subject changed.

    Args:
        model: Adapter over the instance to probe.
        attribute: The attribute to write.
        value: The candidate value.

    Returns:
        list[str]: Validation messages for ``attribute`` (empty if accepted).
    """
    original = model.read_field(attribute)
    try:
        model.write_field(attribute, value)
        model.is_valid()
        errors = model.errors_for(attribute)
    finally:
        model.write_field(attribute, original)
    logger.debug(
        "%s.%s = %r -> %s", model.model_name, attribute, value, errors or "no errors"
    )
    return errors


def validates_presence_of(model: ModelAdapter, attribute: str) -> AssertionResult:
    """Expect validation to fail when ``None`` is written to the attribute."""
    name = "validates_presence_of"
    if error_from_writing_value(model, attribute, None):
        return AssertionResult.ok(name, attribute)
    return AssertionResult.fail(
        name, attribute, f"expected to validate presence of {attribute!r}"
    )


def allows_values_for(
    model: ModelAdapter, attribute: str, *values: Any
) -> AssertionResult:
    """Expect every given value to pass validation for the attribute.

    Fails listing the values that were rejected.
    """
    name = "allows_values_for"
    bad_values = [v for v in values if error_from_writing_value(model, attribute, v)]
    if bad_values:
        return AssertionResult.fail(
            name, attribute, f"expected {attribute!r} to allow value(s) {bad_values!r}"
        )
    return AssertionResult.ok(name, attribute)


def does_not_allow_values_for(
    model: ModelAdapter, attribute: str, *values: Any
) -> AssertionResult:
    """Expect every given value to fail validation for the attribute.

    Fails listing the values that were accepted.
    """
    name = "does_not_allow_values_for"
    good_values = [
        v for v in values if not error_from_writing_value(model, attribute, v)
    ]
    if good_values:
        return AssertionResult.fail(
            name,
            attribute,
            f"expected {attribute!r} not to allow value(s) {good_values!r}",
        )
    return AssertionResult.ok(name, attribute)


def validates_uniqueness_of(model: ModelAdapter, attribute: str) -> AssertionResult:
    """Expect a copy of a saved record to be rejected as a duplicate.

    The subject must already be persisted. A blank instance of the same type
    receives every attribute of the subject, then the target attribute's value
    is written again and the copy is validated. The subject is never written.
    """
    name = "validates_uniqueness_of"
    if not model.is_persisted():
        return AssertionResult.fail(
            name,
            attribute,
            f"topic is a new record when testing uniqueness of {attribute!r}; "
            "persist it first",
            failure=FailureKind.PRECONDITION,
        )

    copied_model = model.shallow_copy()
    copied_value = model.read_field(attribute)
    if error_from_writing_value(copied_model, attribute, copied_value):
        return AssertionResult.ok(name, attribute)
    return AssertionResult.fail(
        name, attribute, f"expected to fail because {attribute!r} is not unique"
    )


def has_association(
    model: ModelAdapter, attribute: str, kind: AssociationKind | str
) -> AssertionResult:
    """Expect the attribute to be declared as an association of the given kind.

    Only the kind is checked; cardinality and inverse configuration are not.
    """
    kind = AssociationKind(kind)
    name = str(kind)
    reflection = model.reflect_association(attribute)
    static_msg = f"expected {attribute!r} to be a {kind} association, but was "
    if reflection is None:
        return AssertionResult.fail(name, attribute, static_msg + "not")
    if reflection.kind is not kind:
        return AssertionResult.fail(
            name, attribute, static_msg + f"a {reflection.kind} instead"
        )
    return AssertionResult.ok(name, attribute)


def has_many(model: ModelAdapter, attribute: str) -> AssertionResult:
    """Expect the attribute to be a one-to-many association."""
    return has_association(model, attribute, AssociationKind.HAS_MANY)


def has_one(model: ModelAdapter, attribute: str) -> AssertionResult:
    """Expect the attribute to be a one-to-one association."""
    return has_association(model, attribute, AssociationKind.HAS_ONE)


def belongs_to(model: ModelAdapter, attribute: str) -> AssertionResult:
    """Expect the attribute to be a many-to-one association."""
    return has_association(model, attribute, AssociationKind.BELONGS_TO)


#: Name -> macro, used by the deferred topic of `ormassert.harness.Context`.
MACROS: dict[str, Callable[..., AssertionResult]] = {
    "validates_presence_of": validates_presence_of,
    "allows_values_for": allows_values_for,
    "does_not_allow_values_for": does_not_allow_values_for,
    "validates_uniqueness_of": validates_uniqueness_of,
    "has_association": has_association,
    "has_many": has_many,
    "has_one": has_one,
    "belongs_to": belongs_to,
}
