"""Model adapters for host ORMs."""

from .registry import adapt, register_adapter, unregister_adapter
from .sqlalchemy_adapter import SqlAlchemyModelAdapter

__all__ = [
    "SqlAlchemyModelAdapter",
    "adapt",
    "register_adapter",
    "unregister_adapter",
]
