"""Implementation of ModelAdapter for SQLAlchemy declarative models.

SQLAlchemy has no validation layer of its own, so validity is read off the
mapping itself:

- ``@validates`` hooks that raise ``ValueError`` reject the assignment and
  leave their message as an error on the attribute.
- Non-nullable columns (outside the primary key, without a default) and
  many-to-one relationships over non-nullable foreign keys are reported as
  blank when ``None``.
- Columns covered by ``unique=True``, a ``UniqueConstraint`` or a unique
  ``Index`` are reported as taken when another row holds the same values.

Relationship writes are staged on the adapter instead of assigned, so probing
a many-to-one never fires backrefs into the related object's collections.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Column,
    Index,
    UniqueConstraint,
    and_,
    exists,
    inspect,
    not_,
    select,
)
from sqlalchemy.orm import RelationshipDirection, object_session
from sqlalchemy.orm.exc import UnmappedColumnError

from ormassert.interfaces import (
    AssociationKind,
    AssociationReflection,
    ModelAdapter,
    UnknownAttributeError,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Mapper, RelationshipProperty, Session

logger = logging.getLogger(__name__)

BLANK_MESSAGE = "can't be blank"
TAKEN_MESSAGE = "has already been taken"


# --- class-level reflection helpers ---


def association_kind(relationship: RelationshipProperty[Any]) -> AssociationKind:
    """Map a relationship's direction and ``uselist`` to an `AssociationKind`."""
    if relationship.direction is RelationshipDirection.MANYTOMANY:
        return AssociationKind.HAS_AND_BELONGS_TO_MANY
    if relationship.direction is RelationshipDirection.MANYTOONE:
        return AssociationKind.BELONGS_TO
    if relationship.uselist:
        return AssociationKind.HAS_MANY
    return AssociationKind.HAS_ONE


def required_columns(mapper: Mapper[Any]) -> list[str]:
    """Return attribute keys of columns that must not be ``None``.

    A column is required when it is non-nullable, not part of the primary key,
    and has neither a Python-side nor a server-side default.
    """
    keys = []
    for prop in mapper.column_attrs:
        column = prop.columns[0]
        if not isinstance(column, Column):
            continue  # column_property() over an expression
        if (
            column.nullable
            or column.primary_key
            or column.default is not None
            or column.server_default is not None
        ):
            continue
        keys.append(prop.key)
    return keys


def required_relationships(mapper: Mapper[Any]) -> list[str]:
    """Return keys of many-to-one relationships whose foreign keys are all required."""
    return [
        rel.key
        for rel in mapper.relationships
        if rel.direction is RelationshipDirection.MANYTOONE
        and rel.local_columns
        and all(not col.nullable for col in rel.local_columns)
    ]


def unique_attribute_groups(mapper: Mapper[Any]) -> list[tuple[str, ...]]:
    """Return the attribute keys covered by each unique constraint or index.

    Single-column ``unique=True`` shows up as a one-element group. Groups
    containing a column that is not mapped on this class are skipped.
    """
    groups: dict[tuple[str, ...], None] = {}
    for table in mapper.tables:
        candidates = [c for c in table.constraints if isinstance(c, UniqueConstraint)]
        candidates += [i for i in table.indexes if isinstance(i, Index) and i.unique]
        for constraint in candidates:
            try:
                keys = tuple(
                    mapper.get_property_by_column(column).key
                    for column in constraint.columns
                )
            except UnmappedColumnError:
                continue
            if keys:
                groups[keys] = None
    return list(groups)


# --- adapter ---


class SqlAlchemyModelAdapter(ModelAdapter):
    """ModelAdapter over one SQLAlchemy-mapped instance.

    Args:
        instance: The mapped instance under test.
        session: Session used for uniqueness queries. Defaults to whichever
            session the instance belongs to at the time of the query.
    """

    def __init__(self, instance: Any, session: Session | None = None):
        self.instance = instance
        self._session = session
        self._mapper: Mapper[Any] = inspect(type(instance))
        self._assignment_errors: dict[str, str] = {}
        self._staged: dict[str, Any] = {}
        self._errors: dict[str, list[str]] = {}

    @property
    def session(self) -> Session | None:
        if self._session is not None:
            return self._session
        return object_session(self.instance)

    @property
    def model_name(self) -> str:
        return type(self.instance).__name__

    # --- fields ---

    def _check_attribute(self, name: str) -> None:
        if name not in self._mapper.attrs:
            raise UnknownAttributeError(self.model_name, name)

    def write_field(self, name: str, value: Any) -> None:
        self._check_attribute(name)
        if name in self._mapper.relationships:
            self._stage_relationship(name, value)
            return
        try:
            setattr(self.instance, name, value)
        except ValueError as exc:
            # raised by a @validates hook; the value was not assigned
            self._assignment_errors[name] = str(exc)
            logger.debug("%s.%s rejected %r: %s", self.model_name, name, value, exc)
        else:
            self._assignment_errors.pop(name, None)

    def _stage_relationship(self, name: str, value: Any) -> None:
        self._assignment_errors.pop(name, None)
        with self._no_autoflush():
            current = getattr(self.instance, name)
        if value is current:
            self._staged.pop(name, None)
            return
        self._staged[name] = value
        rel = self._mapper.relationships[name]
        if rel.uselist or name not in self._mapper.validators:
            return
        validator, _ = self._mapper.validators[name]
        try:
            validator(self.instance, name, value)
        except ValueError as exc:
            self._assignment_errors[name] = str(exc)
            logger.debug("%s.%s rejected %r: %s", self.model_name, name, value, exc)

    def read_field(self, name: str) -> Any:
        self._check_attribute(name)
        if name in self._staged:
            return self._staged[name]
        return getattr(self.instance, name)

    # --- validation ---

    def is_valid(self) -> bool:
        errors: dict[str, list[str]] = defaultdict(list)
        for name, message in self._assignment_errors.items():
            errors[name].append(message)
        # lazy loads and queries must not flush the values being probed
        with self._no_autoflush():
            for name in self._blank_attributes():
                errors[name].append(BLANK_MESSAGE)
            for group in self._taken_unique_groups():
                for name in group:
                    errors[name].append(TAKEN_MESSAGE)
        self._errors = dict(errors)
        return not self._errors

    def _no_autoflush(self) -> AbstractContextManager[Any]:
        session = self.session
        return nullcontext() if session is None else session.no_autoflush

    def errors_for(self, name: str) -> list[str]:
        return list(self._errors.get(name, ()))

    def _blank_attributes(self) -> list[str]:
        blank = [
            key
            for key in required_columns(self._mapper)
            if getattr(self.instance, key) is None
        ]
        state = inspect(self.instance)
        for key in required_relationships(self._mapper):
            if key in self._staged:
                if self._staged[key] is None:
                    blank.append(key)
                continue
            if getattr(self.instance, key) is not None:
                continue
            # an unset relationship is fine while its foreign key is populated
            rel = self._mapper.relationships[key]
            fk_values = [
                getattr(self.instance, self._mapper.get_property_by_column(col).key)
                for col in rel.local_columns
            ]
            if state.attrs[key].history.has_changes() or all(
                v is None for v in fk_values
            ):
                blank.append(key)
        return blank

    def _taken_unique_groups(self) -> list[tuple[str, ...]]:
        session = self.session
        if session is None:
            logger.debug(
                "%s is not bound to a session; uniqueness not checked", self.model_name
            )
            return []
        taken = []
        for group in unique_attribute_groups(self._mapper):
            values = {key: getattr(self.instance, key) for key in group}
            if any(v is None for v in values.values()):
                continue  # NULLs never collide
            if self._duplicate_exists(session, values):
                taken.append(group)
        return taken

    def _duplicate_exists(self, session: Session, values: dict[str, Any]) -> bool:
        cls = self._mapper.class_
        criteria = [getattr(cls, key) == value for key, value in values.items()]
        state = inspect(self.instance)
        if state.has_identity:
            criteria.append(
                not_(
                    and_(
                        *(
                            column == value
                            for column, value in zip(
                                self._mapper.primary_key, state.identity
                            )
                        )
                    )
                )
            )
        return bool(session.scalar(select(exists().where(*criteria))))

    # --- persistence & reflection ---

    def is_persisted(self) -> bool:
        return inspect(self.instance).has_identity

    def reflect_association(self, name: str) -> AssociationReflection | None:
        if (rel := self._mapper.relationships.get(name)) is None:
            return None
        return AssociationReflection(
            name=name, kind=association_kind(rel), target=rel.mapper.class_.__name__
        )

    def shallow_copy(self) -> SqlAlchemyModelAdapter:
        blank = self._mapper.class_manager.new_instance()
        copied = SqlAlchemyModelAdapter(blank, session=self.session)
        for prop in self._mapper.column_attrs:
            if all(isinstance(column, Column) for column in prop.columns):
                copied.write_field(prop.key, getattr(self.instance, prop.key))
        return copied
