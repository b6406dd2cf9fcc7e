"""ORMASSERT CLI entry point.

Defines the top-level ``ormassert`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``ormassert describe MODULE:MODEL``: what the SQLAlchemy adapter sees on a model.
- ``ormassert check MODULE``: run the module's contexts and report outcomes.

Notes
- The CLI version is sourced from `ormassert.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ ormassert --version
    $ ormassert -v check myapp.model_contexts
"""

import logging

import click
import click_extra as clickx

from ormassert import __version__
from ormassert.logging import config_console_handler, log_startup

from .check import check
from .describe import describe
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """ORMASSERT command-line interface.

    Inspect mapped models the way the assertion macros see them, and run
    assertion contexts outside of a test runner.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO) or via ORMASSERT_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("sqlalchemy=WARNING",),
    envvar="ORMASSERT_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def ormassert(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """ORMASSERT command-line interface."""
    steps = quiet_count - verbose_count
    level = min(max(logging.WARNING + 10 * steps, logging.DEBUG), logging.CRITICAL)

    handler = config_console_handler(
        level=level, debug_mode=debug, color=ctx.color is not False
    )
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger, app_version=__version__, level=level, logger_levels=logger_levels
    )
    ctx.call_on_close(logging.shutdown)


ormassert.add_command(describe)
ormassert.add_command(check)
