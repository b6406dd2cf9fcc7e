"""Fake implementations for testing the assertion macros without an ORM."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ormassert.interfaces import (
    AssociationReflection,
    ModelAdapter,
    UnknownAttributeError,
)

Rule = Callable[[Any], str | None]


def required(value: Any) -> str | None:
    """Rule: reject ``None``."""
    return "can't be blank" if value is None else None


class FakeModelAdapter(ModelAdapter):
    """A dict-backed model adapter with per-field rules.

    ``rules`` maps a field to a callable returning an error message (or None).
    ``unique`` fields are checked against ``table``, the list of saved rows
    shared by every copy of the record.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        fields: dict[str, Any] | None = None,
        *,
        name: str = "Fake",
        rules: dict[str, Rule] | None = None,
        unique: tuple[str, ...] = (),
        associations: dict[str, AssociationReflection] | None = None,
        table: list[dict[str, Any]] | None = None,
    ):
        self.fields = dict(fields or {})
        self.name = name
        self.rules = rules or {}
        self.unique = unique
        self.associations = associations or {}
        self.table = table if table is not None else []
        self.persisted = False
        self.errors: dict[str, list[str]] = {}
        self.writes: list[tuple[str, Any]] = []
        self.validations = 0

    @property
    def model_name(self) -> str:
        return self.name

    def save(self) -> FakeModelAdapter:
        """Store the current fields as a row and mark the record persisted."""
        self.table.append(self.fields)
        self.persisted = True
        return self

    def _check(self, name: str) -> None:
        if name not in self.fields:
            raise UnknownAttributeError(self.name, name)

    def write_field(self, name: str, value: Any) -> None:
        self._check(name)
        self.fields[name] = value
        self.writes.append((name, value))

    def read_field(self, name: str) -> Any:
        self._check(name)
        return self.fields[name]

    def is_valid(self) -> bool:
        self.validations += 1
        errors: dict[str, list[str]] = {}
        for name, rule in self.rules.items():
            if message := rule(self.fields.get(name)):
                errors.setdefault(name, []).append(message)
        for name in self.unique:
            value = self.fields.get(name)
            if value is not None and any(
                row[name] == value for row in self.table if row is not self.fields
            ):
                errors.setdefault(name, []).append("has already been taken")
        self.errors = errors
        return not errors

    def errors_for(self, name: str) -> list[str]:
        return list(self.errors.get(name, ()))

    def is_persisted(self) -> bool:
        return self.persisted

    def reflect_association(self, name: str) -> AssociationReflection | None:
        return self.associations.get(name)

    def shallow_copy(self) -> FakeModelAdapter:
        return FakeModelAdapter(
            dict(self.fields),
            name=self.name,
            rules=self.rules,
            unique=self.unique,
            associations=self.associations,
            table=self.table,
        )
