"""Interfaces (adapter boundary) for ORMASSERT.

Defines the framework-free contract every model adapter implements, plus the
small DTOs and errors shared by the assertions and the adapters.

Dependency rule: this package is independent; do not import from any other
`ormassert.*` modules. It may be imported by `ormassert.assertions`,
`ormassert.adapters` and `ormassert.harness`.
"""

from .errors import ModelAdapterError, NoAdapterError, UnknownAttributeError
from .model_adapter import AssociationKind, AssociationReflection, ModelAdapter

__all__ = [
    "AssociationKind",
    "AssociationReflection",
    "ModelAdapter",
    "ModelAdapterError",
    "NoAdapterError",
    "UnknownAttributeError",
]
