"""Resolve a test subject to the `ModelAdapter` that wraps it.

SQLAlchemy-mapped instances are recognised out of the box. Other ORMs plug in
through `register_adapter`:

    ```py
    register_adapter(PeeweeModel, PeeweeModelAdapter)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import InstanceState

from ormassert.interfaces import ModelAdapter, NoAdapterError

from .sqlalchemy_adapter import SqlAlchemyModelAdapter

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[Any], ModelAdapter]

_FACTORIES: dict[type, AdapterFactory] = {}


def register_adapter(cls: type, factory: AdapterFactory) -> None:
    """Use ``factory`` to wrap instances of ``cls`` and its subclasses.

    Registering the same class again replaces the previous factory.
    """
    _FACTORIES[cls] = factory
    logger.debug("Registered adapter factory %r for %s", factory, cls.__name__)


def unregister_adapter(cls: type) -> None:
    """Remove the factory registered for ``cls``, if any."""
    _FACTORIES.pop(cls, None)


def _is_sqlalchemy_mapped(subject: Any) -> bool:
    return isinstance(inspect(subject, raiseerr=False), InstanceState)


def adapt(subject: Any) -> ModelAdapter:
    """Return a `ModelAdapter` for the subject.

    Resolution order: the subject itself if it already is an adapter, then a
    registered factory for the closest class in its MRO, then the SQLAlchemy
    adapter for mapped instances.

    Raises:
        NoAdapterError: If nothing can wrap the subject.
    """
    if isinstance(subject, ModelAdapter):
        return subject
    for cls in type(subject).__mro__:
        if (factory := _FACTORIES.get(cls)) is not None:
            return factory(subject)
    if _is_sqlalchemy_mapped(subject):
        return SqlAlchemyModelAdapter(subject)
    raise NoAdapterError(type(subject).__name__)
