"""pytest integration for ORMASSERT.

Needs pytest, which the ``ormassert[pytest]`` extra installs. Enable it from a
``conftest.py``:

    ```py
    pytest_plugins = ["ormassert.pytest_plugin"]
    ```

Fixtures:

- ``ormassert_engine``: engine for ``ORMASSERT_DB_URL`` (in-memory SQLite by
  default), disposed at the end of the session.
- ``ormassert_session``: a session bound to that engine, rolled back and
  closed after each test.
- ``model_topic``: factory turning a subject into a strict `Topic`, so a
  failed assertion fails the test.

Example:
    ```py
    def test_room(ormassert_session, model_topic):
        Base.metadata.create_all(ormassert_session.get_bind())
        topic = model_topic(Room())
        topic.validates_presence_of("location")
        topic.has_many("doors")
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import pytest
from sqlalchemy.orm import Session

from ormassert import config
from ormassert.adapters.db.engine import make_engine
from ormassert.harness import Topic

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=redefined-outer-name


@pytest.fixture(scope="session")
def ormassert_engine() -> Iterator[Engine]:
    """Engine for the database named by ``ORMASSERT_DB_URL``."""
    engine = make_engine(config.get_db_url())
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def ormassert_session(ormassert_engine: Engine) -> Iterator[Session]:
    """Session whose work is rolled back after the test."""
    session = Session(ormassert_engine)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def model_topic() -> Callable[[Any], Topic]:
    """Factory returning strict topics (failures raise `ModelAssertionError`)."""

    def make(subject: Any) -> Topic:
        return Topic(subject, strict=True)

    return make
