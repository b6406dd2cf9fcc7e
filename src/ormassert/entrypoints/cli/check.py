"""``ormassert check``: run every `Context` defined in a module.

Each module-level `Context` is run and reported one line per assertion,
followed by a summary. The exit status is 1 if anything failed or errored.

Example:
    $ ormassert check myapp.model_contexts
"""

from __future__ import annotations

import logging

import click

from ormassert.harness import Context, ContextReport, OutcomeStatus

from .helpers import load_module

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    OutcomeStatus.PASS: ("PASS", "green"),
    OutcomeStatus.FAIL: ("FAIL", "red"),
    OutcomeStatus.ERROR: ("ERROR", "yellow"),
}


def _echo_report(report: ContextReport) -> None:
    click.echo(click.style(report.description, bold=True))
    for outcome in report.outcomes:
        label, color = STATUS_STYLES[outcome.status]
        line = f"  {click.style(f'{label:<5}', fg=color)} {outcome.description}"
        if outcome.message and outcome.status is not OutcomeStatus.PASS:
            line += f": {outcome.message}"
        click.echo(line)


@click.command()
@click.argument("module_name", metavar="MODULE")
@click.pass_context
def check(ctx: click.Context, module_name: str) -> None:
    """Run every Context defined at the top level of MODULE."""
    module = load_module(module_name)
    contexts = [obj for obj in vars(module).values() if isinstance(obj, Context)]
    if not contexts:
        raise click.ClickException(f"No Context objects found in {module_name!r}")

    logger.info("Running %d contexts from %s", len(contexts), module_name)
    passes = failures = errors = 0
    for context in contexts:
        report = context.run()
        _echo_report(report)
        passes += report.passes
        failures += report.failures
        errors += report.errors

    click.echo(f"\n{passes} passes, {failures} failures, {errors} errors")
    if failures or errors:
        ctx.exit(1)
