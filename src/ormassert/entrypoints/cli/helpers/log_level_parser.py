"""Parse ``-L NAME=LEVEL`` options into logger levels.

Items may be repeated on the command line or packed into one string
(``ORMASSERT_LOGGER_LEVELS="sqlalchemy=INFO, ormassert=DEBUG"``).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING}


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = (value,) if isinstance(value, str) else value
    return [item for chunk in chunks for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    _ctx: click.Context,
    _param: click.Parameter | None,
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback: merge NAME=LEVEL items over `DEFAULT_LIB_LEVELS`.

    Later items win. Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or names no level.
    """
    known = logging.getLevelNamesMapping()
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        if (level := known.get(level_name.strip().upper())) is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
