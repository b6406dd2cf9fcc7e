"""Console logging for the ``ormassert`` command.

Records go to stderr through Rich. Outside debug mode, records from
dependencies are tagged with their top-level package (``[sqlalchemy]``) so
they stand apart from the assertion output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

from ormassert.config import DB_URL_ENVVAR

if TYPE_CHECKING:
    from logging import Logger

PROJECT_PREFIX = "ormassert"


class LibraryTagFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set ``record.tag`` to ``[package]`` for records logged by dependencies."""

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.tag = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler the CLI installs on the root logger.

    In debug mode the level is forced to DEBUG and each record shows its
    logger name and source location. Otherwise records from dependencies
    carry a `LibraryTagFilter` tag.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(tag)s %(message)s"))
        handler.addFilter(LibraryTagFilter())
    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    logger_levels: dict[str, int],
) -> None:
    """Log the version and console level, then the environment at DEBUG."""
    logger.info("ormassert %s (console %s)", app_version, logging.getLevelName(level))
    logger.debug(
        "Python %s, SQLAlchemy %s", sys.version.split()[0], sqlalchemy.__version__
    )
    db_url_state = "set" if os.getenv(DB_URL_ENVVAR) else "unset"
    logger.debug("%s is %s", DB_URL_ENVVAR, db_url_state)
    for name, lvl in sorted(logger_levels.items()):
        logger.debug("Logger %s at %s", name, logging.getLevelName(lvl))
