"""Collect assertion outcomes for one subject, Riot style.

A `Context` pairs a setup step that builds the subject with a list of deferred
assertions. Running it builds the subject once, runs every assertion against
that shared topic and returns a `ContextReport` counting passes, failures and
errors:

- **pass**: the macro returned a passing result.
- **failure**: the macro returned a failing result (expectation or
  precondition).
- **error**: setup or the host ORM raised; the exception is kept on the
  outcome and logged with its traceback.

Example:
    ```py
    ctx = Context("a Room", setup=Room)
    ctx.topic.validates_presence_of("location")
    ctx.topic.has_many("doors")
    ctx.should_validate_presence_of("foo", "bar")
    report = ctx.run()
    assert (report.passes, report.failures, report.errors) == (4, 0, 0)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ormassert.adapters import adapt
from ormassert.assertions import MACROS, AssertionResult

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class ContextError(Exception):
    """Raised when a context is misconfigured (not when an assertion fails)."""


class OutcomeStatus(str, Enum):
    """Status of one assertion run inside a context."""

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class Outcome:
    """What happened to one deferred assertion."""

    description: str  # e.g. "validates_presence_of('location')"
    status: OutcomeStatus
    message: str | None = None
    result: AssertionResult | None = None
    exception: Exception | None = None

    @classmethod
    def from_result(cls, description: str, result: AssertionResult) -> Outcome:
        return cls(
            description=description,
            status=OutcomeStatus.PASS if result.passed else OutcomeStatus.FAIL,
            message=result.message,
            result=result,
        )

    @classmethod
    def from_exception(cls, description: str, exc: Exception) -> Outcome:
        return cls(
            description=description,
            status=OutcomeStatus.ERROR,
            message=f"{type(exc).__name__}: {exc}",
            exception=exc,
        )


@dataclass(frozen=True)
class ContextReport:
    """Outcomes of running one context."""

    description: str
    outcomes: tuple[Outcome, ...] = field(default_factory=tuple)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def passes(self) -> int:
        return self._count(OutcomeStatus.PASS)

    @property
    def failures(self) -> int:
        return self._count(OutcomeStatus.FAIL)

    @property
    def errors(self) -> int:
        return self._count(OutcomeStatus.ERROR)

    @property
    def ok(self) -> bool:
        """True when nothing failed or errored."""
        return self.failures == 0 and self.errors == 0


@dataclass(frozen=True)
class _PendingAssertion:
    macro: str
    args: tuple[Any, ...]

    @property
    def description(self) -> str:
        return f"{self.macro}({', '.join(repr(arg) for arg in self.args)})"


class _DeferredTopic:
    """Records ``topic.<macro>(...)`` calls on a context instead of running them."""

    def __init__(self, context: Context):
        self._context = context

    def __getattr__(self, name: str) -> Callable[..., Context]:
        if name not in MACROS:
            raise AttributeError(f"Unknown assertion macro: {name!r}")

        def record(*args: Any) -> Context:
            return self._context.add(name, *args)

        return record


class Context:
    """A described subject plus the assertions to run against it.

    Args:
        description: Human-readable name, e.g. ``"a Room"``.
        setup: Zero-argument callable returning the subject. Can also be
            supplied later through `setup`, which works as a decorator.
    """

    def __init__(self, description: str, setup: Callable[[], Any] | None = None):
        self.description = description
        self._setup = setup
        self._pending: list[_PendingAssertion] = []
        self.topic = _DeferredTopic(self)

    def setup(self, factory: Callable[[], Any]) -> Callable[[], Any]:
        """Register the callable that builds the subject."""
        self._setup = factory
        return factory

    def add(self, macro: str, *args: Any) -> Context:
        """Record a macro call to run later.

        Raises:
            ContextError: If ``macro`` is not a known assertion macro.
        """
        if macro not in MACROS:
            raise ContextError(f"Unknown assertion macro: {macro!r}")
        self._pending.append(_PendingAssertion(macro, args))
        return self

    def should_validate_presence_of(self, *attributes: str) -> Context:
        """Record one presence assertion per attribute."""
        for attribute in attributes:
            self.add("validates_presence_of", attribute)
        return self

    def __len__(self) -> int:
        return len(self._pending)

    def run(self) -> ContextReport:
        """Build the subject once and run every recorded assertion against it.

        Raises:
            ContextError: If no setup was registered.
        """
        if self._setup is None:
            raise ContextError(f"Context {self.description!r} has no setup")

        logger.debug(
            "Running context %r (%d assertions)", self.description, len(self._pending)
        )
        try:
            model = adapt(self._setup())
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.exception("Setup failed for context %r", self.description)
            return ContextReport(
                self.description,
                tuple(
                    Outcome.from_exception(pending.description, exc)
                    for pending in self._pending
                ),
            )

        outcomes = []
        for pending in self._pending:
            try:
                result = MACROS[pending.macro](model, *pending.args)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.exception(
                    "%s raised in context %r", pending.description, self.description
                )
                outcomes.append(Outcome.from_exception(pending.description, exc))
                continue
            logger.debug(
                "%s %s: %s",
                self.description,
                pending.description,
                "pass" if result else result.message,
            )
            outcomes.append(Outcome.from_result(pending.description, result))

        report = ContextReport(self.description, tuple(outcomes))
        logger.info(
            "%s: %d passes, %d failures, %d errors",
            self.description,
            report.passes,
            report.failures,
            report.errors,
        )
        return report
