"""Ways to surface assertion results: a bound topic and a collecting context."""

from .context import Context, ContextReport, Outcome, OutcomeStatus
from .topic import Topic

__all__ = ["Context", "ContextReport", "Outcome", "OutcomeStatus", "Topic"]
