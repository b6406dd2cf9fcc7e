"""Interface between the assertion macros and a host ORM.

Defines the `ModelAdapter` abstraction that wraps a single model instance and
exposes the handful of capabilities the assertions need: writing and reading
fields, running validation, reading per-attribute errors, checking whether the
record is persisted, reflecting associations and copying attributes into a
fresh instance.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any


class AssociationKind(str, Enum):
    """Enumeration of association kinds an adapter can report.

    Attributes:
        HAS_MANY: One-to-many collection (``"has_many"``).
        HAS_ONE: One-to-one owned by the other side (``"has_one"``).
        BELONGS_TO: Many-to-one reference held locally (``"belongs_to"``).
        HAS_AND_BELONGS_TO_MANY: Many-to-many through an association table
            (``"has_and_belongs_to_many"``).
    """

    HAS_MANY = "has_many"
    HAS_ONE = "has_one"
    BELONGS_TO = "belongs_to"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AssociationReflection:
    """Association metadata declared on a model class."""

    name: str
    kind: AssociationKind
    target: str  # related class name, e.g. "Door"


class ModelAdapter(abc.ABC):
    """Narrow capability set over one model instance."""

    @property
    @abc.abstractmethod
    def model_name(self) -> str:
        """Name of the wrapped instance's type, used in messages."""

    @abc.abstractmethod
    def write_field(self, name: str, value: Any) -> None:
        """Assign a value to a named field or association.

        Args:
            name: The attribute to write.
            value: The value to assign (may be ``None``).

        Raises:
            UnknownAttributeError: If ``name`` is not a field or association of
                the model.
        """

    @abc.abstractmethod
    def read_field(self, name: str) -> Any:
        """Return the current value of a named field or association.

        Raises:
            UnknownAttributeError: If ``name`` is not a field or association of
                the model.
        """

    @abc.abstractmethod
    def is_valid(self) -> bool:
        """Run validation and record per-attribute errors.

        Errors from any previous call are discarded. After this returns,
        `errors_for` reflects the outcome of this run.

        Returns:
            bool: ``True`` if no attribute has an error.
        """

    @abc.abstractmethod
    def errors_for(self, name: str) -> list[str]:
        """Return the validation messages recorded for one attribute.

        Returns an empty list when the attribute has no errors or when
        `is_valid` has not been called yet.
        """

    @abc.abstractmethod
    def is_persisted(self) -> bool:
        """Return ``True`` if the instance represents a saved record."""

    @abc.abstractmethod
    def reflect_association(self, name: str) -> AssociationReflection | None:
        """Look up association metadata on the instance's type.

        Args:
            name: The attribute to reflect.

        Returns:
            AssociationReflection | None: The declared association, or ``None``
            if ``name`` is not declared as an association.
        """

    @abc.abstractmethod
    def shallow_copy(self) -> ModelAdapter:
        """Copy every field value into a new, blank instance of the same type.

        The copy is never persisted and the original instance is not touched.
        Associations are not copied.

        Returns:
            ModelAdapter: An adapter wrapping the new instance.
        """
