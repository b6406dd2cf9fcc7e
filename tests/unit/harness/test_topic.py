"""Unit tests for Topic."""

import pytest

from ormassert import ModelAssertionError, Topic
from ormassert.interfaces import AssociationKind, AssociationReflection
from tests.helpers.fakes import FakeModelAdapter, required

# pylint: disable=redefined-outer-name


@pytest.fixture
def room() -> FakeModelAdapter:
    """A fake room subject."""
    return FakeModelAdapter(
        {"location": "north", "contents": None},
        name="Room",
        rules={"location": required},
        associations={
            "doors": AssociationReflection("doors", AssociationKind.HAS_MANY, "Door")
        },
    )


def test_methods_return_results(room):
    """By default results are returned, pass or fail."""
    topic = Topic(room)
    assert topic.validates_presence_of("location")
    assert not topic.validates_presence_of("contents")
    assert topic.allows_values_for("location", "south", "east")
    assert not topic.does_not_allow_values_for("location", "south")
    assert topic.has_many("doors")
    assert not topic.has_one("doors")
    assert not topic.belongs_to("doors")
    assert topic.has_association("doors", AssociationKind.HAS_MANY)


def test_uniqueness_precondition_is_returned(room):
    """A precondition failure is an ordinary failed result."""
    assert not Topic(room).validates_uniqueness_of("location")


def test_strict_topic_raises_on_failure(room):
    """Strict topics surface failures as ModelAssertionError."""
    topic = Topic(room, strict=True)
    with pytest.raises(ModelAssertionError, match="presence of 'contents'"):
        topic.validates_presence_of("contents")


def test_strict_topic_returns_passing_results(room):
    """Strict topics still return passing results."""
    assert Topic(room, strict=True).has_many("doors").passed


def test_topic_keeps_subject_and_adapter(room):
    """The subject and its adapter are exposed."""
    topic = Topic(room)
    assert topic.subject is room
    assert topic.model is room
