"""ORMASSERT

Assertion helpers for checking ORM model behaviour from tests: presence,
value acceptance, uniqueness and association kinds. Validation itself is
always delegated to the host ORM through a model adapter.
"""

from ormassert.assertions import AssertionResult, FailureKind, ModelAssertionError
from ormassert.harness import Context, ContextReport, Topic

__all__ = [
    "AssertionResult",
    "Context",
    "ContextReport",
    "FailureKind",
    "ModelAssertionError",
    "Topic",
    "__version__",
]
__version__ = "0.1.0"
