"""``ormassert describe``: show what the SQLAlchemy adapter sees on a model.

Prints one row per mapped attribute with the facts the assertions rely on:
whether ``None`` is rejected, which unique constraints cover it, and for
relationships the association kind reported to ``has_many`` and friends.

Example:
    $ ormassert describe myapp.models:Room
"""

from __future__ import annotations

import logging
from typing import Any

import click
from rich.console import Console
from rich.table import Table
from sqlalchemy import inspect
from sqlalchemy.orm import Mapper

from ormassert.adapters.sqlalchemy_adapter import (
    association_kind,
    required_columns,
    required_relationships,
    unique_attribute_groups,
)

from .helpers import load_object

logger = logging.getLogger(__name__)


def _mapper_for(target: Any, dotted: str) -> Mapper[Any]:
    mapper = inspect(target, raiseerr=False)
    if not isinstance(mapper, Mapper):
        raise click.BadParameter(f"{dotted!r} is not a SQLAlchemy-mapped class")
    return mapper


def build_table(mapper: Mapper[Any]) -> Table:
    """Build the Rich table describing one mapped class."""
    required = set(required_columns(mapper)) | set(required_relationships(mapper))
    unique_by_key: dict[str, list[str]] = {}
    for group in unique_attribute_groups(mapper):
        for key in group:
            unique_by_key.setdefault(key, []).append("+".join(group))

    table = Table(title=mapper.class_.__name__)
    table.add_column("attribute")
    table.add_column("kind")
    table.add_column("required")
    table.add_column("unique")
    for prop in mapper.column_attrs:
        table.add_row(
            prop.key,
            "column",
            "yes" if prop.key in required else "",
            ", ".join(unique_by_key.get(prop.key, ())),
        )
    for rel in mapper.relationships:
        table.add_row(
            rel.key,
            f"{association_kind(rel)} -> {rel.mapper.class_.__name__}",
            "yes" if rel.key in required else "",
            "",
        )
    return table


@click.command()
@click.argument("model_path", metavar="MODULE:MODEL")
def describe(model_path: str) -> None:
    """Describe a mapped MODEL as the assertion macros see it."""
    mapper = _mapper_for(load_object(model_path), model_path)
    logger.debug("Describing %s", mapper.class_.__name__)
    Console(width=120).print(build_table(mapper))
